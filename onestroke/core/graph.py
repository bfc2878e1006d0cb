"""Adjacency model built from a caller-supplied edge list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from .errors import InvalidGraph
from .model import Edge, Node


@dataclass(frozen=True)
class Graph:
    """Immutable multigraph over dense node indices.

    ``labels[i]`` is the caller's identifier for dense node ``i``;
    ``incident[i]`` lists the indices of the edges touching node ``i`` in the
    order they were supplied.
    """
    labels: Tuple[Node, ...]
    edges: Tuple[Edge, ...]
    incident: Tuple[Tuple[int, ...], ...]

    @property
    def node_count(self) -> int:
        return len(self.labels)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def label(self, node: int) -> Node:
        return self.labels[node]

    def relabel(self, nodes: Iterable[int]) -> Tuple[Node, ...]:
        return tuple(self.labels[n] for n in nodes)

    def endpoints(self) -> List[Tuple[Node, Node]]:
        """The edge list in the caller's identifiers."""
        return [(self.labels[e.a], self.labels[e.b]) for e in self.edges]


def build_graph(edges: Sequence[Tuple[Node, Node]]) -> Graph:
    """Remap node identifiers to dense indices and index edges by node."""
    if not edges:
        raise InvalidGraph("no edges supplied, nothing to traverse")

    dense: Dict[Node, int] = {}
    labels: List[Node] = []

    def index_of(node: Node) -> int:
        try:
            return dense[node]
        except KeyError:
            dense[node] = len(labels)
            labels.append(node)
            return dense[node]
        except TypeError as exc:
            raise InvalidGraph(f"node identifier {node!r} is not hashable") from exc

    built: List[Edge] = []
    for i, pair in enumerate(edges):
        try:
            a, b = pair
        except (TypeError, ValueError) as exc:
            raise InvalidGraph(f"edge {i} is not a pair: {pair!r}") from exc
        built.append(Edge(i, index_of(a), index_of(b)))

    incident: List[List[int]] = [[] for _ in labels]
    for e in built:
        incident[e.a].append(e.index)
        if not e.is_loop:
            incident[e.b].append(e.index)

    return Graph(
        labels=tuple(labels),
        edges=tuple(built),
        incident=tuple(tuple(ids) for ids in incident),
    )
