from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime

import pytest
from pytz import utc

from conftest import StubOracle, UnavailableOracle
from zodiacwheel.bodies import FIXED_STARS, UnknownBodyIdentifier
from zodiacwheel.chart import ChartContext, compute_chart, midnight, parse_instant
from zodiacwheel.oracle import FallbackOracle, KeplerOracle
from zodiacwheel.zodiac import TRADITIONAL_ZODIAC, TRUE_ZODIAC


def _signs(frame):
    return {p.body.key: p.sign.name for p in frame.placements}


def test_chart_places_all_seven_bodies(instant, stub_oracle):
    frame = compute_chart(instant, TRUE_ZODIAC, stub_oracle)
    assert len(frame.placements) == 7
    assert frame.table is TRUE_ZODIAC
    assert frame.fixed_stars == FIXED_STARS
    assert all(p.precise for p in frame.placements)


def test_same_longitudes_classify_per_table(instant, stub_oracle):
    true_signs = _signs(compute_chart(instant, TRUE_ZODIAC, stub_oracle))
    traditional_signs = _signs(compute_chart(instant, TRADITIONAL_ZODIAC, stub_oracle))

    assert true_signs["sun"] == traditional_signs["sun"] == "Pisces"
    assert true_signs["moon"] == "Pisces"
    assert traditional_signs["moon"] == "Aries"
    assert true_signs["mercury"] == "Aquarius"
    assert traditional_signs["mercury"] == "Pisces"
    assert true_signs["venus"] == "Aries"
    assert traditional_signs["venus"] == "Taurus"


def test_chart_respects_body_selection(instant, stub_oracle):
    frame = compute_chart(instant, TRUE_ZODIAC, stub_oracle, bodies=["Sun", "mars"])
    assert [p.body.key for p in frame.placements] == ["sun", "mars"]


def test_unknown_body_in_selection_raises(instant, stub_oracle):
    with pytest.raises(UnknownBodyIdentifier):
        compute_chart(instant, TRUE_ZODIAC, stub_oracle, bodies=["sun", "nibiru"])


def test_unplaceable_body_is_dropped(instant, caplog):
    oracle = FallbackOracle(UnavailableOracle(), StubOracle({"sun": 355.0}))
    with caplog.at_level(logging.ERROR, logger="zodiacwheel.chart"):
        frame = compute_chart(instant, TRUE_ZODIAC, oracle)
    assert [p.body.key for p in frame.placements] == ["sun"]
    assert not frame.placements[0].precise
    dropped = [r for r in caplog.records if getattr(r, "err_code", None) == "BODY_DROPPED"]
    assert len(dropped) == 6


def test_approximate_positions_are_flagged(instant, kepler_only_oracle):
    frame = compute_chart(instant, TRUE_ZODIAC, kepler_only_oracle)
    assert len(frame.placements) == 7
    assert not any(p.precise for p in frame.placements)


def test_naive_instant_taken_as_utc(stub_oracle):
    frame = compute_chart(datetime(2024, 3, 20, 0, 0), TRUE_ZODIAC, stub_oracle)
    assert frame.instant == datetime(2024, 3, 20, 0, 0, tzinfo=utc)
    assert frame.instant.tzinfo is not None


def test_midnight_is_local_midnight_in_utc():
    assert midnight(date(1995, 1, 15), "Asia/Seoul") == datetime(
        1995, 1, 14, 15, 0, tzinfo=utc
    )
    assert midnight(date(1995, 1, 15)) == datetime(1995, 1, 15, 0, 0, tzinfo=utc)


def test_parse_instant_formats():
    assert parse_instant("1995-01-15 06:00", "Asia/Seoul") == datetime(
        1995, 1, 14, 21, 0, tzinfo=utc
    )
    assert parse_instant(" 1995-01-15 ") == datetime(1995, 1, 15, 0, 0, tzinfo=utc)


@pytest.mark.parametrize("bad", ["15/01/1995", "1995-13-01", "tomorrow", ""])
def test_parse_instant_rejects_garbage(bad):
    with pytest.raises(ValueError):
        parse_instant(bad)


# --- ChartContext ---


def test_context_starts_on_selected_convention():
    assert ChartContext().active_table is TRUE_ZODIAC
    assert ChartContext(use_true=False).active_table is TRADITIONAL_ZODIAC


def test_toggle_publishes_each_frame_and_lands_on_target():
    published = []
    ctx = ChartContext(transition_ms=1000)
    ctx.toggle(False, published.append, now_ms=0)
    assert ctx.is_animating

    ctx.advance(500)
    assert ctx.active_table[0].start == pytest.approx(14.5)
    assert ctx.active_table is published[-1]

    frame = ctx.advance(1000)
    assert frame.done
    assert ctx.active_table is TRADITIONAL_ZODIAC
    assert not ctx.is_animating
    assert ctx.advance(1200) is None
    assert ctx.active_table is TRADITIONAL_ZODIAC


def test_toggle_mid_flight_restarts_from_current_table():
    ctx = ChartContext(transition_ms=1000)
    ctx.toggle(False, now_ms=0)
    ctx.advance(300)
    mid = ctx.active_table

    ctx.toggle(True, now_ms=300)
    first = ctx.advance(300)
    assert [s.start for s in first.table] == [s.start for s in mid]

    ctx.advance(1300)
    assert ctx.active_table is TRUE_ZODIAC
    assert ctx.use_true


def test_set_convention_cancels_animation():
    ctx = ChartContext()
    ctx.toggle(False, now_ms=0)
    ctx.advance(200)
    ctx.set_convention(True)
    assert not ctx.is_animating
    assert ctx.active_table is TRUE_ZODIAC
    assert ctx.advance(400) is None


def test_cancel_freezes_active_table():
    ctx = ChartContext()
    ctx.toggle(False, now_ms=0)
    ctx.advance(400)
    frozen = ctx.active_table
    ctx.cancel()
    assert ctx.advance(900) is None
    assert ctx.active_table is frozen


def test_context_compute_counts_degraded_classifications(instant):
    # Aries pulled back to 30° leaves [29, 30) unclaimed
    gapped = (replace(TRUE_ZODIAC[0], start=30.0),) + TRUE_ZODIAC[1:]
    oracle = FallbackOracle(StubOracle({"sun": 29.5, "mars": 100.0}), KeplerOracle())
    ctx = ChartContext()
    ctx.active_table = gapped

    frame = ctx.compute(instant, oracle, bodies=["sun", "mars"])
    assert frame.table is gapped
    assert ctx.degraded_count == 1
    sun = frame.placements[0]
    assert sun.classification.degraded
    assert sun.sign.name == "Pisces"

    ctx.compute(instant, oracle, bodies=["sun"])
    assert ctx.degraded_count == 2
