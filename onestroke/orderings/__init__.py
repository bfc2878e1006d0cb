"""Tie-break policies for choosing among a frontier's unused edges."""

from __future__ import annotations

from typing import Dict, Tuple, Type


class Ordering:
    """Base ordering: fixes the order incident edges are tried in."""
    name: str = "ordering"

    def arrange(self, graph) -> Tuple[Tuple[int, ...], ...]:
        return graph.incident


ORDERING_REGISTRY: Dict[str, Type[Ordering]] = {}


def register_ordering(cls: Type[Ordering]) -> Type[Ordering]:
    ORDERING_REGISTRY[cls.name] = cls
    return cls


def get_ordering(name: str) -> Ordering:
    try:
        return ORDERING_REGISTRY[name]()
    except KeyError:
        known = ", ".join(sorted(ORDERING_REGISTRY))
        raise KeyError(f"unknown ordering {name!r} (known: {known})") from None


from . import insertion, label  # noqa: E402,F401
