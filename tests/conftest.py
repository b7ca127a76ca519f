from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

import pytest

from slotify import Block, Slot, Span, new_block_without_validating

NOW = datetime(2026, 1, 28, 0, 0, tzinfo=timezone.utc)


class HourHelper:
    """Builds periods from hour offsets relative to a fixed origin."""

    def __init__(self, origin: datetime) -> None:
        self.origin = origin

    def at(self, hours: int) -> datetime:
        return self.origin + timedelta(hours=hours)

    def block(self, start: int, end: int) -> Block:
        return new_block_without_validating(self.at(start), self.at(end))

    def span(self, start: int, end: int) -> Span:
        return Span(self.at(start), self.at(end))

    def slot(self, start: int, end: int) -> Slot:
        return Slot(self.at(start), self.at(end))

    def huge_blocks(self, first: int, last: int, *, seed: int = 7) -> list[Block]:
        """Pairs of overlapping blocks every four hours, shuffled.

        Each pair ``[h, h+2)`` + ``[h+1, h+3)`` is busy over ``[h, h+3)``.
        """
        blocks: list[Block] = []
        for h in range(first, last, 4):
            blocks.append(self.block(h, h + 2))
            blocks.append(self.block(h + 1, h + 3))
        random.Random(seed).shuffle(blocks)
        return blocks

    def huge_slots(self, first: int, last: int) -> list[Slot]:
        """Free slots left by ``huge_blocks(first + 1, last)`` inside ``[first, last)``."""
        return [self.slot(h - 1, h) for h in range(first + 1, last, 4)]


@pytest.fixture
def h() -> HourHelper:
    return HourHelper(NOW)


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-benchmark",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.benchmark.",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    run_benchmark = bool(config.getoption("--run-benchmark"))

    deselected: list[pytest.Item] = []
    selected: list[pytest.Item] = []

    for item in items:
        if not run_benchmark and item.get_closest_marker("benchmark"):
            deselected.append(item)
            continue
        selected.append(item)

    if deselected:
        config.hook.pytest_deselected(items=deselected)
        items[:] = selected
