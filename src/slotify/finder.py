"""Free-slot finder.

Subtracts busy blocks from a search span in a single sweep over the
blocks ordered by start time.

The blocks are never merged up front. Overlapping blocks are absorbed
as the working window advances past them.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, TypeVar

from slotify.blocks import Block
from slotify.options import Option, build_options
from slotify.slot import Slot, format_slots
from slotify.span import Span

logger = logging.getLogger(__name__)

In = TypeVar("In")
Out = TypeVar("Out")


def _start_of(item: Any) -> Any:
    return item.start


def _identity(x: Any) -> Any:
    return x


def find_with_adapter(
    items: Iterable[In],
    span: Optional[Span],
    sort_key: Optional[Callable[[In], Any]],
    map_in: Callable[[In], Block],
    map_out: Callable[[Slot], Out],
    *opts: Option,
) -> list[Out]:
    """Find free slots for caller-defined busy and result types.

    Args:
        items: Busy intervals in the caller's own type. Not reordered.
        span: Search window. ``None`` or an empty span yields ``[]``.
        sort_key: Ordering key for ``items``; ``None`` orders by ``item.start``.
        map_in: Converts one item to a :class:`Block`. Called lazily, once
            per item reached by the scan.
        map_out: Converts each candidate :class:`Slot` before filtering.
        *opts: Finder options, e.g. :func:`slotify.with_filter`. The filter
            receives the mapped result.

    Returns:
        Mapped free slots in ascending time order.
    """

    options = build_options(opts)

    if span is None or not span.remain():
        logger.debug("find: nothing to search (span=%s)", span)
        return []

    ordered = sorted(items, key=sort_key or _start_of)
    target = span.clone()
    out: list[Out] = []

    for item in ordered:
        block = map_in(item)

        if block.contains(target):
            target.drop()
            break

        if block.overlap_at_start(target):
            target.shorten(block)
            continue

        if block.is_contained_in(target):
            slot = map_out(target.slot_until(block))
            target.shorten(block)
            if not options.excludes(slot):
                out.append(slot)
            continue

        if block.overlap_at_end(target):
            slot = map_out(target.slot_until(block))
            target.drop()
            if not options.excludes(slot):
                out.append(slot)
            break

    if target.remain():
        slot = map_out(target.to_slot())
        if not options.excludes(slot):
            out.append(slot)

    logger.debug("find: %d blocks -> %d slots in %s", len(ordered), len(out), span)
    return out


def find(blocks: Iterable[Block], span: Optional[Span], *opts: Option) -> list[Slot]:
    """Return the free slots of ``span`` not covered by any of ``blocks``.

    Slots are non-empty, disjoint and in ascending order. With
    :func:`slotify.with_filter`, every slot the predicate returns True for
    is left out.
    """

    slots = find_with_adapter(blocks, span, _start_of, _identity, _identity, *opts)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("find: slots=%s", format_slots(slots))
    return slots
