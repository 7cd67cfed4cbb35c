"""Position oracles backed by skyfield or by orbital elements, plus their fallback."""

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Protocol

from pytz import utc
from skyfield.api import Loader

from zodiacwheel.angles import normalize
from zodiacwheel.bodies import get_body
from zodiacwheel.models import BodyLongitude

LOG = logging.getLogger(__name__)

J2000 = datetime(2000, 1, 1, 12, 0, tzinfo=utc)

_KERNEL_KEYS = {
    "sun": "sun",
    "moon": "moon",
    "mercury": "mercury",
    "venus": "venus",
    "mars": "mars",
    "jupiter": "jupiter barycenter",
    "saturn": "saturn barycenter",
}


@dataclass(frozen=True)
class PositionUnavailable:
    """The precise oracle could not place a body. Returned, never raised."""

    body: str
    reason: str


class PositionOracle(Protocol):
    def longitude(
        self, body: str, instant: datetime
    ) -> float | PositionUnavailable: ...


def _as_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return utc.localize(instant)
    return instant.astimezone(utc)


class SkyfieldOracle:
    """Geocentric ecliptic longitude (J2000 ecliptic) from a JPL kernel.

    The kernel is opened on first use. A missing or unreadable kernel makes
    every lookup return PositionUnavailable instead of raising.
    """

    def __init__(
        self,
        ephemeris_dir: Path | str = "resources",
        kernel: str = "de421.bsp",
        ephemeris=None,
    ) -> None:
        self._loader = Loader(str(ephemeris_dir))
        self._kernel = kernel
        self._eph = ephemeris
        self._ts = None
        self._load_error: str | None = None

    def _ephemeris(self):
        if self._eph is None and self._load_error is None:
            try:
                self._eph = self._loader(self._kernel)
            except (OSError, ValueError, RuntimeError) as exc:
                self._load_error = f"{self._kernel}: {exc}"
                LOG.warning(
                    "skyfield kernel unavailable",
                    extra={"err_code": "KERNEL_UNAVAILABLE", "kernel": self._kernel},
                    exc_info=True,
                )
        return self._eph

    def _timescale(self):
        if self._ts is None:
            self._ts = self._loader.timescale()
        return self._ts

    def longitude(self, body: str, instant: datetime) -> float | PositionUnavailable:
        """Ecliptic longitude of body at instant, or PositionUnavailable.

        Raises:
            UnknownBodyIdentifier: If body is not a supported body.
        """
        key = get_body(body).key
        eph = self._ephemeris()
        if eph is None:
            return PositionUnavailable(key, self._load_error or "kernel not loaded")
        try:
            earth = eph["earth"]
            target = eph[_KERNEL_KEYS[key]]
            t = self._timescale().from_datetime(_as_utc(instant))
            _, lon, _ = earth.at(t).observe(target).apparent().ecliptic_latlon()
        except (KeyError, ValueError, OSError, RuntimeError) as exc:
            return PositionUnavailable(key, str(exc))
        return normalize(float(lon.degrees))


class KeplerOracle:
    """Mean anomaly plus a first-order equation of centre. Never unavailable."""

    def longitude(self, body: str, instant: datetime) -> float:
        """Approximate ecliptic longitude of body at instant.

        Raises:
            UnknownBodyIdentifier: If body is not a supported body.
        """
        config = get_body(body)
        days = (_as_utc(instant) - J2000).total_seconds() / 86400.0
        mean_motion = 360.0 / config.period  # degrees per day
        mean_anomaly = (mean_motion * days + config.phase_offset) % 360.0
        equation_of_center = (
            2 * config.eccentricity * math.sin(math.radians(mean_anomaly))
        )
        return normalize(mean_anomaly + equation_of_center)


class FallbackOracle:
    """Ask primary first; substitute secondary when primary reports PositionUnavailable."""

    def __init__(self, primary: PositionOracle, secondary: PositionOracle) -> None:
        self.primary = primary
        self.secondary = secondary

    def position(self, body: str, instant: datetime) -> BodyLongitude:
        """Resolve body's longitude, degrading to the secondary oracle when needed.

        Raises:
            UnknownBodyIdentifier: If body is not a supported body.
        """
        key = get_body(body).key
        result = self.primary.longitude(key, instant)
        if not isinstance(result, PositionUnavailable):
            return BodyLongitude(body=key, longitude=normalize(result), precise=True)

        LOG.warning(
            "precise position unavailable for %s, using approximation: %s",
            key,
            result.reason,
            extra={"err_code": "POSITION_UNAVAILABLE", "body": key},
        )
        fallback = self.secondary.longitude(key, instant)
        if isinstance(fallback, PositionUnavailable):
            raise RuntimeError(
                f"no oracle could place {key}: {result.reason}; {fallback.reason}"
            )
        return BodyLongitude(body=key, longitude=normalize(fallback), precise=False)


def default_oracle(ephemeris_dir: Path | str, kernel: str) -> FallbackOracle:
    """Skyfield first, orbital elements second."""
    return FallbackOracle(SkyfieldOracle(ephemeris_dir, kernel), KeplerOracle())
