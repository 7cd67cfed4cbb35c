"""Frozen data models passed between the oracle, core and render layers."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ZodiacSign:
    """A single sign's arc along the ecliptic.

    The arc is half-open, [start, end). When start > end the arc crosses
    the 0°/360° seam.
    """

    glyph: str  # Unicode glyph ("♈")
    name: str  # Constellation name ("Aries", "Scorpius", ...)
    start: float  # Arc start (ecliptic longitude, degrees)
    end: float  # Arc end (ecliptic longitude, degrees)

    @property
    def wraps(self) -> bool:
        return self.start > self.end


# Twelve signs in Aries…Pisces order.
ZodiacTable = tuple[ZodiacSign, ...]


@dataclass(frozen=True)
class Classification:
    """Classifier output. degraded=True means no arc matched and a fallback was used."""

    sign: ZodiacSign
    degraded: bool = False


@dataclass(frozen=True)
class CelestialBody:
    """Display and orbital configuration for one body on the wheel."""

    key: str  # Lower-case identifier ("moon", "mars")
    name: str  # Display name ("Moon")
    glyph: str  # Unicode glyph ("☽")
    period: float  # Orbital period (days)
    phase_offset: float  # Mean longitude at J2000.0 (degrees)
    eccentricity: float
    inclination: float  # Degrees
    color: str  # Hex colour ("#d1d1d1")
    radius: int  # Orbit radius on the wheel (px)


@dataclass(frozen=True)
class FixedStar:
    """A reference star drawn on the outer ring."""

    name: str
    longitude: float  # Degrees
    declination: float  # Degrees


@dataclass(frozen=True)
class BodyLongitude:
    """Oracle output for one body at one instant."""

    body: str
    longitude: float  # Ecliptic longitude in [0, 360)
    precise: bool  # False when the approximate oracle supplied the value


@dataclass(frozen=True)
class BodyPlacement:
    """A body, where it is, and which sign claims it."""

    body: CelestialBody
    longitude: float
    classification: Classification
    precise: bool

    @property
    def sign(self) -> ZodiacSign:
        return self.classification.sign


@dataclass(frozen=True)
class ChartFrame:
    """The sole input to renderers. Fully computed state for one tick."""

    instant: datetime  # UTC datetime (with tzinfo=utc)
    table: ZodiacTable  # Active table (canonical or mid-transition)
    placements: tuple[BodyPlacement, ...]
    fixed_stars: tuple[FixedStar, ...]


@dataclass
class TransitionState:
    """One in-flight animation between two tables."""

    from_table: ZodiacTable
    to_table: ZodiacTable
    start_ms: float
    duration_ms: float
    on_update: Callable[[ZodiacTable], None] | None = None
    is_active: bool = True


@dataclass(frozen=True)
class TransitionFrame:
    """Result of one transition tick."""

    table: ZodiacTable
    done: bool
