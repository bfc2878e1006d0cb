"""String encoding used between the drawing front end and the solver.

Edges are ``from,to`` pairs joined by ``/``; results are trails joined by
``/`` with node indices joined by ``,``. An empty string means no trails.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence, Tuple

from ..core.errors import MalformedInput
from ..core.graph import build_graph
from ..core.search import search

EDGE_SEP = "/"
NODE_SEP = ","

_INDEX = re.compile(r"^\s*(\d+)\s*$")


def _parse_index(token: str, where: str) -> int:
    m = _INDEX.match(token)
    if not m:
        raise MalformedInput(f"{where}: {token!r} is not a non-negative integer")
    return int(m.group(1))


def decode_edges(text: str) -> List[Tuple[int, int]]:
    if not text.strip():
        return []
    edges = []
    for i, chunk in enumerate(text.split(EDGE_SEP)):
        parts = chunk.split(NODE_SEP)
        if len(parts) != 2:
            raise MalformedInput(f"edge {i}: expected 'from,to', got {chunk!r}")
        edges.append((_parse_index(parts[0], f"edge {i}"), _parse_index(parts[1], f"edge {i}")))
    return edges


def encode_edges(edges: Iterable[Tuple[int, int]]) -> str:
    return EDGE_SEP.join(f"{a}{NODE_SEP}{b}" for a, b in edges)


def encode_trails(trails: Iterable[Sequence[int]]) -> str:
    return EDGE_SEP.join(NODE_SEP.join(str(n) for n in trail) for trail in trails)


def decode_trails(text: str) -> List[List[int]]:
    trails = []
    for i, chunk in enumerate(text.split(EDGE_SEP)):
        # the front end drops blank entries rather than failing on them
        if not chunk.strip():
            continue
        trails.append([_parse_index(t, f"trail {i}") for t in chunk.split(NODE_SEP)])
    return trails


def one_line_solver(graph_point: str, start_point: int, max_solutions: int) -> str:
    """Solve one starting edge of a wire-encoded graph and encode the trails."""
    graph = build_graph(decode_edges(graph_point))
    trails = search(graph, start_point, max_solutions)
    return encode_trails(t.nodes for t in trails)
