from __future__ import annotations

import os
from datetime import datetime

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from pytz import utc  # noqa: E402

from zodiacwheel.oracle import FallbackOracle, KeplerOracle, PositionUnavailable  # noqa: E402

# Deterministic longitudes; Sun sits in Pisces in both tables
FIXED_LONGITUDES = {
    "moon": 12.0,
    "sun": 355.0,
    "mercury": 340.0,
    "venus": 30.0,
    "mars": 100.0,
    "jupiter": 200.0,
    "saturn": 300.0,
}


class StubOracle:
    """Precise oracle serving a fixed table; bodies missing from it are unavailable."""

    def __init__(self, longitudes: dict[str, float]) -> None:
        self.longitudes = dict(longitudes)
        self.calls: list[str] = []

    def longitude(self, body: str, instant: datetime) -> float | PositionUnavailable:
        self.calls.append(body)
        if body not in self.longitudes:
            return PositionUnavailable(body, "not in stub")
        return self.longitudes[body]


class UnavailableOracle:
    def longitude(self, body: str, instant: datetime) -> PositionUnavailable:
        return PositionUnavailable(body, "offline")


@pytest.fixture
def instant() -> datetime:
    return datetime(2024, 3, 20, 0, 0, tzinfo=utc)


@pytest.fixture
def stub_oracle() -> FallbackOracle:
    return FallbackOracle(StubOracle(FIXED_LONGITUDES), KeplerOracle())


@pytest.fixture
def kepler_only_oracle() -> FallbackOracle:
    return FallbackOracle(UnavailableOracle(), KeplerOracle())
