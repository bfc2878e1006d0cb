"""Backtracking enumeration of one-stroke trails.

The search is rooted at a single starting edge. From the frontier it tries
every unused incident edge in a fixed order, records the path once all edges
are used, and undoes each step before trying the next sibling. State lives in
one used-marker list and one path buffer owned by the call, and the depth-first
walk is driven by an explicit frame stack rather than recursion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Set, Tuple

from ..orderings import get_ordering
from .errors import InvalidStart
from .graph import Graph
from .model import Trail

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters for one search call."""
    steps: int = 0
    dead_ends: int = 0
    duplicates: int = 0


class TrailSearch:
    """One search invocation over ``graph`` from ``start_edge``."""

    def __init__(self, graph: Graph, start_edge: int, max_solutions: int,
                 ordering: str = "insertion", reverse: bool = False) -> None:
        if isinstance(start_edge, bool) or not isinstance(start_edge, int):
            raise InvalidStart(f"start edge index must be an integer, got {start_edge!r}")
        self.graph = graph
        self.start_edge = start_edge
        self.max_solutions = max_solutions
        self.reverse = reverse
        self.order = get_ordering(ordering).arrange(graph)
        self.stats = SearchStats()

    def run(self) -> List[Trail]:
        if self.max_solutions <= 0:
            return []
        graph = self.graph
        if not 0 <= self.start_edge < graph.edge_count:
            raise InvalidStart(
                f"start edge {self.start_edge} out of range [0, {graph.edge_count})"
            )

        found: List[Trail] = []
        seen: Set[Tuple[int, ...]] = set()

        start = graph.edges[self.start_edge]
        origin, frontier = (start.b, start.a) if self.reverse else (start.a, start.b)
        used = [False] * graph.edge_count
        used[start.index] = True
        path = [origin, frontier]
        taken = [start.index]
        remaining = graph.edge_count - 1

        if remaining == 0:
            self._record(path, taken, found, seen)
            return found

        # each frame is [node, next position in that node's incident list]
        stack = [[frontier, 0]]
        while stack and len(found) < self.max_solutions:
            frame = stack[-1]
            node, pos = frame
            incident = self.order[node]
            while pos < len(incident) and used[incident[pos]]:
                pos += 1

            if pos == len(incident):
                if frame[1] == 0:
                    self.stats.dead_ends += 1
                stack.pop()
                if stack:
                    used[taken.pop()] = False
                    path.pop()
                    remaining += 1
                continue

            frame[1] = pos + 1
            edge_index = incident[pos]
            nxt = graph.edges[edge_index].other(node)
            used[edge_index] = True
            taken.append(edge_index)
            path.append(nxt)
            remaining -= 1
            self.stats.steps += 1

            if remaining == 0:
                self._record(path, taken, found, seen)
                used[taken.pop()] = False
                path.pop()
                remaining += 1
                continue

            stack.append([nxt, 0])

        logger.debug(
            "start edge %d%s: %d trail(s), %d steps, %d dead ends",
            self.start_edge, " (reversed)" if self.reverse else "",
            len(found), self.stats.steps, self.stats.dead_ends,
        )
        return found

    def _record(self, path, taken, found, seen) -> None:
        key = tuple(path)
        if key in seen:
            self.stats.duplicates += 1
            return
        seen.add(key)
        found.append(Trail(self.graph.relabel(path), tuple(taken)))


def search(graph: Graph, start_edge_index: int, max_solutions: int, *,
           ordering: str = "insertion", reverse: bool = False) -> List[Trail]:
    """Enumerate up to ``max_solutions`` trails that begin with the given edge."""
    return TrailSearch(graph, start_edge_index, max_solutions,
                       ordering=ordering, reverse=reverse).run()
