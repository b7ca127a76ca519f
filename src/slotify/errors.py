"""Typed exceptions for slotify.

Exception hierarchy::

    SlotifyError
    ├── InvalidRangeError   : block start is not before its end
    └── MapperError         : a caller mapper failed inside new_blocks

Usage::

    from slotify.errors import InvalidRangeError

    try:
        block = new_block(start, end)
    except InvalidRangeError as e:
        e.log()
        raise
"""

from __future__ import annotations

import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)

__all__ = [
    "SlotifyError",
    "InvalidRangeError",
    "MapperError",
]


# ── Base exception ────────────────────────────────────────────

class SlotifyError(Exception):
    """Base exception for all slotify errors.

    Keyword arguments become the structured ``context`` of the error.
    """

    def __init__(self, message: str = "", **context: Any) -> None:
        self.slotify_message = message
        self.context: Dict[str, Any] = dict(context)
        super().__init__(message)

    def to_log_dict(self) -> Dict[str, Any]:
        """Flatten to dict for structured logging."""
        return {k: str(v) for k, v in self.context.items()}

    def log(self, level: int = logging.WARNING) -> None:
        """Emit a structured log line for this error."""
        logger.log(
            level,
            "%s: %s | context=%s",
            type(self).__name__,
            self.slotify_message,
            self.to_log_dict(),
        )


# ── Typed exceptions ─────────────────────────────────────────

class InvalidRangeError(SlotifyError, ValueError):
    """A block was requested with ``start >= end``.

    Attributes
    ----------
    start, end:
        The rejected time points.
    """

    def __init__(self, start: Any, end: Any) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"start must be before end: {start}, {end}",
            start=start,
            end=end,
        )


class MapperError(SlotifyError):
    """A caller-supplied mapper failed while building a batch of blocks.

    The original exception is chained as ``__cause__``.

    Attributes
    ----------
    index:
        Position of the input that failed.
    """

    def __init__(self, message: str, *, index: int, **context: Any) -> None:
        self.index = index
        super().__init__(message, index=index, **context)
