from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Tuple


Node = Hashable
EdgeIndex = int


@dataclass(frozen=True)
class Edge:
    """An undirected edge between two dense node indices."""
    index: EdgeIndex
    a: int
    b: int

    def other(self, node: int) -> int:
        return self.b if node == self.a else self.a

    @property
    def is_loop(self) -> bool:
        return self.a == self.b


@dataclass(frozen=True)
class Trail:
    """One continuous stroke: the nodes visited and the edges taken."""
    nodes: Tuple[Node, ...]
    edges: Tuple[EdgeIndex, ...]

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def steps(self) -> int:
        return len(self.edges)
