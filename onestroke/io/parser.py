from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from ..core.errors import DrawingError
from ..core.graph import Graph, build_graph
from ..core.model import Node
from .wire import encode_edges


@dataclass
class Drawing:
    nodes: Dict[Node, Dict[str, Any]] = field(default_factory=dict)
    edges: List[Tuple[Node, Node]] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)

    def dense_mapping(self) -> Tuple[Dict[Node, int], Dict[int, Node]]:
        """Number nodes 0..N-1 in declaration order, then any undeclared ones."""
        id_to_num: Dict[Node, int] = {}
        for node in self.nodes:
            id_to_num.setdefault(node, len(id_to_num))
        for a, b in self.edges:
            id_to_num.setdefault(a, len(id_to_num))
            id_to_num.setdefault(b, len(id_to_num))
        return id_to_num, {n: i for i, n in id_to_num.items()}

    def edge_string(self) -> str:
        id_to_num, _ = self.dense_mapping()
        return encode_edges((id_to_num[a], id_to_num[b]) for a, b in self.edges)

    def graph(self) -> Graph:
        return build_graph(self.edges)


def _check_id(node: Any, where: str) -> Node:
    try:
        hash(node)
    except TypeError:
        raise DrawingError(f"{where}: node id {node!r} must be a scalar value") from None
    return node


def _parse_payload(node: Node, raw: Any) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise DrawingError(f"node {node!r} must map to a mapping such as {{x: 0, y: 0}}, got {raw!r}")
    return dict(raw)


def _parse_edge(i: int, raw: Any) -> Tuple[Node, Node]:
    if isinstance(raw, dict):
        if "from" not in raw or "to" not in raw:
            raise DrawingError(f"edge {i} needs 'from' and 'to': {raw!r}")
        return _check_id(raw["from"], f"edge {i}"), _check_id(raw["to"], f"edge {i}")
    if isinstance(raw, (list, tuple)) and len(raw) == 2:
        return _check_id(raw[0], f"edge {i}"), _check_id(raw[1], f"edge {i}")
    raise DrawingError(f"edge {i} must be a [from, to] pair: {raw!r}")


def parse_drawing(data: Dict[str, Any]) -> Drawing:
    """Build a Drawing from an already-loaded mapping."""
    if not isinstance(data, dict):
        raise DrawingError("drawing must be a mapping with an 'edges' list")

    raw_nodes = data.get("nodes") or {}
    if isinstance(raw_nodes, list):
        nodes = {_check_id(n, "nodes"): {} for n in raw_nodes}
    elif isinstance(raw_nodes, dict):
        nodes = {k: _parse_payload(k, v) for k, v in raw_nodes.items()}
    else:
        raise DrawingError("'nodes' must be a list of ids or a mapping")

    edges = [_parse_edge(i, e) for i, e in enumerate(data.get("edges") or [])]
    if not edges:
        raise DrawingError("no detected shape: add at least one line")
    if nodes:
        for i, (a, b) in enumerate(edges):
            for end in (a, b):
                if end not in nodes:
                    raise DrawingError(f"edge {i} references unknown node {end!r}")

    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise DrawingError("'options' must be a mapping")

    return Drawing(nodes=nodes, edges=edges, options=dict(options))


def load_drawing(path: str | Path) -> Drawing:
    """Load a YAML drawing description into a Drawing object."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return parse_drawing(data)
