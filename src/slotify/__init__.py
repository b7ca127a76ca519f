"""slotify: find free time slots inside a search window.

Usage::

    from slotify import find, new_block, new_span, with_filter

    blocks = [new_block(nine, ten), new_block(noon, one_pm)]
    free = find(blocks, new_span(eight, five_pm))
"""

from slotify.blocks import Block, new_block, new_block_without_validating, new_blocks
from slotify.errors import InvalidRangeError, MapperError, SlotifyError
from slotify.finder import find, find_with_adapter
from slotify.options import FilterFunc, Option, Options, build_options, with_filter
from slotify.period import Period
from slotify.slot import Slot, format_slots
from slotify.span import Span, new_span

__all__ = [
    "Block",
    "FilterFunc",
    "InvalidRangeError",
    "MapperError",
    "Option",
    "Options",
    "Period",
    "Slot",
    "SlotifyError",
    "Span",
    "build_options",
    "find",
    "find_with_adapter",
    "format_slots",
    "new_block",
    "new_block_without_validating",
    "new_blocks",
    "new_span",
    "with_filter",
]
