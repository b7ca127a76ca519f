from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from slotify.period import format_period


@dataclass(frozen=True)
class Slot:
    """A free interval ``[start, end)`` returned by the finder."""

    start: Any
    end: Any

    @property
    def duration(self) -> Any:
        return self.end - self.start

    def __str__(self) -> str:
        return format_period(self)


def format_slots(slots: Iterable[Any]) -> str:
    """Render a result list for log lines and assertion messages."""
    return "[" + "; ".join(str(s) for s in slots) + "]"
