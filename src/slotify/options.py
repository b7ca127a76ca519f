"""Per-call finder configuration.

Options are assembled from small callables so new settings can be added
without changing the finder signatures::

    find(blocks, span, with_filter(lambda s: s.duration < timedelta(hours=1)))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

Out = TypeVar("Out")

# Returning True drops the slot from the result.
FilterFunc = Callable[[Any], bool]


@dataclass
class Options(Generic[Out]):
    filter_func: Optional[Callable[[Out], bool]] = None

    def is_set_filter(self) -> bool:
        return self.filter_func is not None

    def excludes(self, slot: Out) -> bool:
        """True when the configured filter drops ``slot``."""
        return self.filter_func is not None and bool(self.filter_func(slot))


Option = Callable[[Options], None]


def with_filter(predicate: Optional[FilterFunc]) -> Option:
    """Exclude every slot for which ``predicate(slot)`` is true."""

    def _apply(opts: Options) -> None:
        opts.filter_func = predicate

    return _apply


def build_options(opts: Iterable[Option]) -> Options:
    options: Options = Options()
    for opt in opts:
        opt(options)
    return options
