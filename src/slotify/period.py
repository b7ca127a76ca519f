"""Period capability and the interval predicates the sweep relies on.

All comparisons are half-open: a period covers ``[start, end)``. Periods
that only share an endpoint never overlap.
"""

from __future__ import annotations

from typing import Any, Protocol


class Period(Protocol):
    """Anything with ordered ``start`` and ``end`` time points."""

    @property
    def start(self) -> Any:
        ...

    @property
    def end(self) -> Any:
        ...


def contains(outer: Period, p: Period) -> bool:
    """True when ``outer`` fully covers ``p``."""
    return p.start >= outer.start and p.end <= outer.end


def is_contained_in(inner: Period, p: Period) -> bool:
    """True when ``inner`` lies fully inside ``p``."""
    return p.start <= inner.start and inner.end <= p.end


def overlap_at_start(a: Period, p: Period) -> bool:
    """``a`` eats the front of ``p`` and ``p`` continues past it."""
    return a.start <= p.start and p.start < a.end and a.end <= p.end


def overlap_at_end(a: Period, p: Period) -> bool:
    """``a`` eats the tail of ``p`` and ``p`` starts before it."""
    return p.start <= a.start and a.start < p.end and p.end <= a.end


def format_period(p: Period) -> str:
    return f"{p.start}, {p.end}"
