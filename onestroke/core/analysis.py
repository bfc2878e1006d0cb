"""Degree and connectivity helpers.

A graph admits a trail covering every edge exactly once iff all nodes that
carry edges lie in one connected component and either zero or two of them
have odd degree.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .graph import Graph
from .model import Node


@dataclass(frozen=True)
class GraphReport:
    degrees: Tuple[int, ...]
    odd_nodes: Tuple[int, ...]
    components: int

    @property
    def admits_trail(self) -> bool:
        return self.components == 1 and len(self.odd_nodes) in (0, 2)

    @property
    def closed(self) -> bool:
        """Every trail, if any, returns to where it started."""
        return self.admits_trail and not self.odd_nodes


def degrees(graph: Graph) -> List[int]:
    deg = [0] * graph.node_count
    for e in graph.edges:
        deg[e.a] += 1
        deg[e.b] += 1
    return deg


def count_components(graph: Graph) -> int:
    """Connected components among nodes that have at least one edge."""
    parent = list(range(graph.node_count))

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for e in graph.edges:
        ra, rb = find(e.a), find(e.b)
        if ra != rb:
            parent[ra] = rb
    return len({find(n) for n in range(graph.node_count) if graph.incident[n]})


def analyze(graph: Graph) -> GraphReport:
    deg = degrees(graph)
    return GraphReport(
        degrees=tuple(deg),
        odd_nodes=tuple(n for n, d in enumerate(deg) if d % 2),
        components=count_components(graph),
    )


def covers_all_edges(graph: Graph, nodes: Sequence[Node]) -> bool:
    """True if walking ``nodes`` uses every edge of ``graph`` exactly once."""
    if len(nodes) != graph.edge_count + 1:
        return False

    expected = Counter(frozenset((u, v)) for u, v in graph.endpoints())
    walked = Counter(frozenset((u, v)) for u, v in zip(nodes, nodes[1:]))
    return walked == expected
