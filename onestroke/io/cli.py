"""Command-line front end for the one-stroke solver."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from ..core.errors import OneStrokeError
from ..core.graph import build_graph
from ..core.runner import SolverOptions, solve
from ..orderings import ORDERING_REGISTRY
from . import parser, wire


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="onestroke",
        description="Find ways to draw a shape in one stroke without lifting the pen",
    )
    ap.add_argument("drawing", nargs="?", help="Path to a drawing YAML file")
    ap.add_argument("--edges", help="Wire-encoded edges, e.g. '0,1/1,2/2,0'")
    ap.add_argument("-n", "--max-solutions", type=int, help="Maximum number of solutions")
    ap.add_argument("--ordering", choices=sorted(ORDERING_REGISTRY), help="Tie-break order for incident edges")
    ap.add_argument("--both-directions", action="store_true", default=None,
                    help="Also start each edge from its second endpoint")
    ap.add_argument("--no-precheck", dest="precheck", action="store_false", default=None,
                    help="Search even when the degree check rules out a trail")
    ap.add_argument("--time-budget", type=float, help="Stop trying new start edges after this many seconds")
    ap.add_argument("--start", type=int, help="Run a single start edge and print the raw result string")
    ap.add_argument("--json", action="store_true", help="Print solutions as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def _overrides(args: argparse.Namespace) -> dict:
    names = ("max_solutions", "ordering", "both_directions", "precheck", "time_budget")
    return {k: getattr(args, k) for k in names if getattr(args, k) is not None}


def _print_solutions(result, as_json: bool) -> None:
    paths = result.paths()
    if as_json:
        print(json.dumps({"solutions": [list(p) for p in paths], "timed_out": result.timed_out}, indent=2, default=str))
        return
    if not paths:
        print("No one-stroke drawing found for this shape.")
        return
    for k, path in enumerate(paths, 1):
        print(f"Solution #{k}")
        print(f"  Steps required: {len(path)}")
        print("  Path: " + " -> ".join(str(n) for n in path))
    print(f"{len(paths)} solutions!")


def main(argv: list[str] | None = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if (args.drawing is None) == (args.edges is None):
        ap.error("give either a drawing file or --edges")

    try:
        if args.edges is not None:
            edges, config = wire.decode_edges(args.edges), {}
            edge_string = args.edges
        else:
            drawing = parser.load_drawing(Path(args.drawing))
            edges, config = drawing.edges, drawing.options
            edge_string = drawing.edge_string()

        options = SolverOptions.from_mapping({**config, **_overrides(args)})
        if args.start is not None:
            print(wire.one_line_solver(edge_string, args.start, options.max_solutions))
            return 0

        result = solve(build_graph(edges), options)
    except (OneStrokeError, ValueError, OSError, yaml.YAMLError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    _print_solutions(result, args.json)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
