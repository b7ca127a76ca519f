from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from slotify.period import Period, format_period
from slotify.slot import Slot


@dataclass
class Span:
    """The search window.

    A span with ``start >= end`` is legal and simply has no room left.
    The finder works on a :meth:`clone` and advances it while scanning,
    so the caller's span is never modified.
    """

    start: Any
    end: Any

    @property
    def duration(self) -> Any:
        return self.end - self.start

    def clone(self) -> "Span":
        return Span(self.start, self.end)

    def remain(self) -> bool:
        """True while there is still room between start and end."""
        return self.start < self.end

    def is_empty(self) -> bool:
        return not self.remain()

    def shorten(self, block: Period) -> None:
        # The block consumed the front of the window.
        self.start = block.end

    def drop(self) -> None:
        self.start = self.end

    def to_slot(self) -> Slot:
        return Slot(self.start, self.end)

    def slot_until(self, block: Period) -> Slot:
        """The free gap between the current start and ``block``."""
        return Slot(self.start, block.start)

    def __str__(self) -> str:
        return format_period(self)


def new_span(start: Any, end: Any) -> Span:
    return Span(start, end)
