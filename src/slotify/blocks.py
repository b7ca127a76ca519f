from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, TypeVar

from slotify import period
from slotify.errors import InvalidRangeError, MapperError
from slotify.period import Period

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Block:
    """A busy interval ``[start, end)`` that is subtracted from a span."""

    start: Any
    end: Any

    @property
    def duration(self) -> Any:
        return self.end - self.start

    def contains(self, p: Period) -> bool:
        return period.contains(self, p)

    def is_contained_in(self, p: Period) -> bool:
        return period.is_contained_in(self, p)

    def overlap_at_start(self, p: Period) -> bool:
        return period.overlap_at_start(self, p)

    def overlap_at_end(self, p: Period) -> bool:
        return period.overlap_at_end(self, p)

    def __str__(self) -> str:
        return period.format_period(self)


def new_block(start: Any, end: Any) -> Block:
    """Create a block, rejecting zero-length and inverted ranges."""
    if start >= end:
        raise InvalidRangeError(start, end)
    return Block(start, end)


def new_block_without_validating(start: Any, end: Any) -> Block:
    """Create a block without checking ``start < end``.

    Only for input that is already known to be well formed.
    """
    return Block(start, end)


def new_blocks(inputs: Iterable[T], mapper: Callable[[T], Block]) -> list[Block]:
    """Map every input to a block.

    Fails fast: the first mapper error aborts the batch with
    :class:`MapperError` and no partial list is returned.
    """

    blocks: list[Block] = []
    for index, item in enumerate(inputs):
        try:
            block = mapper(item)
        except Exception as e:
            err = MapperError(f"mapper failed at index {index}: {e}", index=index, item=item)
            err.log(logging.DEBUG)
            raise err from e
        if not isinstance(block, Block):
            err = MapperError(
                f"mapper returned {type(block).__name__}, expected Block",
                index=index,
                item=item,
            )
            err.log(logging.DEBUG)
            raise err
        blocks.append(block)

    logger.debug("new_blocks: built %d blocks", len(blocks))
    return blocks
