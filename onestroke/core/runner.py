"""Run the trail search once per starting edge and aggregate the results."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, fields
from typing import Any, List, Mapping, Optional, Set, Tuple

from ..orderings import ORDERING_REGISTRY
from .analysis import GraphReport, analyze
from .graph import Graph
from .model import Node, Trail
from .search import search

logger = logging.getLogger(__name__)

LARGE_REQUEST = 100


@dataclass
class SolverOptions:
    max_solutions: int = 10
    ordering: str = "insertion"
    both_directions: bool = False
    precheck: bool = True
    time_budget: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "SolverOptions":
        """Build options from a config mapping such as a drawing's ``options``."""
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown option(s): {', '.join(unknown)}")
        opts = cls(**data)
        opts.validate()
        return opts

    def validate(self) -> None:
        n = self.max_solutions
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValueError(f"max_solutions must be a non-negative integer, got {n!r}")
        if not isinstance(self.ordering, str) or self.ordering not in ORDERING_REGISTRY:
            raise ValueError(f"unknown ordering {self.ordering!r}")
        for name in ("both_directions", "precheck"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false, got {getattr(self, name)!r}")
        budget = self.time_budget
        if budget is not None and (
            isinstance(budget, bool) or not isinstance(budget, (int, float)) or not budget > 0
        ):
            raise ValueError(f"time_budget must be a positive number, got {budget!r}")
        if n > LARGE_REQUEST:
            logger.warning(
                "requested up to %d solutions; large requests can take a long time", n
            )


@dataclass
class SolveResult:
    trails: List[Trail] = field(default_factory=list)
    invocations: int = 0
    timed_out: bool = False
    report: Optional[GraphReport] = None

    def paths(self) -> List[Tuple[Node, ...]]:
        return [t.nodes for t in self.trails]


def _starts(graph: Graph, both_directions: bool):
    for i in range(graph.edge_count):
        yield i, False
        if both_directions and not graph.edges[i].is_loop:
            yield i, True


def solve(graph: Graph, options: SolverOptions | None = None) -> SolveResult:
    """Try every starting edge in order until enough distinct trails are found."""
    opts = options or SolverOptions()
    result = SolveResult()
    wanted = opts.max_solutions
    if wanted <= 0:
        return result

    if opts.precheck:
        result.report = analyze(graph)
        if not result.report.admits_trail:
            logger.info(
                "no trail possible: %d component(s), %d odd node(s)",
                result.report.components, len(result.report.odd_nodes),
            )
            return result

    deadline = None
    if opts.time_budget is not None:
        deadline = time.monotonic() + opts.time_budget

    seen: Set[Tuple[Node, ...]] = set()
    for start, reverse in _starts(graph, opts.both_directions):
        if len(result.trails) >= wanted:
            break
        if deadline is not None and time.monotonic() >= deadline:
            logger.warning(
                "time budget of %.3fs exhausted after %d invocation(s)",
                opts.time_budget, result.invocations,
            )
            result.timed_out = True
            break

        found = search(graph, start, wanted, ordering=opts.ordering, reverse=reverse)
        result.invocations += 1

        for trail in found:
            if trail.nodes in seen:
                continue
            seen.add(trail.nodes)
            result.trails.append(trail)
            if len(result.trails) >= wanted:
                break

    logger.info(
        "found %d trail(s) over %d edge(s) in %d invocation(s)",
        len(result.trails), graph.edge_count, result.invocations,
    )
    return result
