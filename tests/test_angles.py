from __future__ import annotations

import pytest

from zodiacwheel.angles import circular_distance, normalize, shortest_delta


@pytest.mark.parametrize(
    ("angle", "expected"),
    [(0.0, 0.0), (360.0, 0.0), (370.0, 10.0), (-10.0, 350.0), (-720.5, 359.5)],
)
def test_normalize_wraps_into_range(angle, expected):
    assert normalize(angle) == pytest.approx(expected)


def test_normalize_never_returns_360():
    assert normalize(-1e-17) == 0.0
    assert 0.0 <= normalize(-1e-300) < 360.0


def test_normalize_keeps_in_range_values_exact():
    assert normalize(351.5) == 351.5
    assert normalize(29.000000000001) == 29.000000000001


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (10.0, 20.0, 10.0),
        (20.0, 10.0, -10.0),
        (350.0, 10.0, 20.0),
        (10.0, 350.0, -20.0),
        (330.0, 351.5, 21.5),
        (360.0, 29.0, 29.0),
        (29.0, 360.0, -29.0),
    ],
)
def test_shortest_delta_takes_short_arc(start, end, expected):
    assert shortest_delta(start, end) == pytest.approx(expected)


def test_shortest_delta_magnitude_bounded():
    for a in range(0, 361, 7):
        for b in range(0, 361, 11):
            assert abs(shortest_delta(float(a), float(b))) <= 180.0


def test_circular_distance_is_symmetric():
    assert circular_distance(359.0, 1.0) == pytest.approx(2.0)
    assert circular_distance(1.0, 359.0) == pytest.approx(2.0)
    assert circular_distance(0.0, 180.0) == pytest.approx(180.0)
