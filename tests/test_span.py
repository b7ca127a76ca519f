from __future__ import annotations

from datetime import timedelta

from slotify import Slot, Span, new_span


def test_clone_is_independent(h):
    span = h.span(0, 8)
    work = span.clone()
    work.shorten(h.block(1, 3))
    assert work.start == h.at(3)
    assert span == h.span(0, 8)


def test_remain_and_is_empty(h):
    assert h.span(0, 1).remain()
    assert not h.span(0, 0).remain()
    assert not h.span(2, 1).remain()
    assert h.span(0, 0).is_empty()


def test_drop_consumes_window(h):
    work = h.span(0, 8).clone()
    work.drop()
    assert not work.remain()


def test_to_slot_and_slot_until(h):
    work = h.span(0, 8).clone()
    assert work.slot_until(h.block(3, 5)) == h.slot(0, 3)
    work.shorten(h.block(3, 5))
    assert work.to_slot() == h.slot(5, 8)


def test_new_span_allows_degenerate_window():
    span = new_span(5, 5)
    assert isinstance(span, Span)
    assert span.is_empty()


def test_string_forms(h):
    assert str(h.span(0, 8)) == f"{h.at(0)}, {h.at(8)}"
    assert str(h.slot(0, 8)) == f"{h.at(0)}, {h.at(8)}"


def test_durations(h):
    assert h.span(0, 8).duration == timedelta(hours=8)
    assert Slot(2, 5).duration == 3
