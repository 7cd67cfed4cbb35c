"""Celestial body catalogue: the seven classical bodies and three reference stars."""

from zodiacwheel.models import CelestialBody, FixedStar


class UnknownBodyIdentifier(KeyError):
    """A body outside the supported set was requested."""


# Orbit radii grow outward from the Earth medallion, Moon innermost
CELESTIAL_BODIES: dict[str, CelestialBody] = {
    "moon": CelestialBody(
        key="moon",
        name="Moon",
        glyph="☽",
        period=27.321582,
        phase_offset=134.9,
        eccentricity=0.0549,
        inclination=5.145,
        color="#d1d1d1",
        radius=60,
    ),
    "sun": CelestialBody(
        key="sun",
        name="Sun",
        glyph="☉",
        period=365.256363,
        phase_offset=280.46,
        eccentricity=0.01671022,
        inclination=0.0,
        color="#ffdd44",
        radius=90,
    ),
    "mercury": CelestialBody(
        key="mercury",
        name="Mercury",
        glyph="☿",
        period=87.9691,
        phase_offset=174.796,
        eccentricity=0.20563069,
        inclination=7.00487,
        color="#8c8c8c",
        radius=120,
    ),
    "venus": CelestialBody(
        key="venus",
        name="Venus",
        glyph="♀",
        period=224.7008,
        phase_offset=50.115,
        eccentricity=0.00677323,
        inclination=3.39471,
        color="#e39e54",
        radius=150,
    ),
    "mars": CelestialBody(
        key="mars",
        name="Mars",
        glyph="♂",
        period=686.9796,
        phase_offset=19.3730,
        eccentricity=0.09341233,
        inclination=1.85061,
        color="#c1440e",
        radius=180,
    ),
    "jupiter": CelestialBody(
        key="jupiter",
        name="Jupiter",
        glyph="♃",
        period=4332.59,
        phase_offset=18.818,
        eccentricity=0.04839266,
        inclination=1.30530,
        color="#d8ca9d",
        radius=210,
    ),
    "saturn": CelestialBody(
        key="saturn",
        name="Saturn",
        glyph="♄",
        period=10759.22,
        phase_offset=320.346,
        eccentricity=0.05415060,
        inclination=2.48446,
        color="#e0bb95",
        radius=240,
    ),
}

# Positions are right ascension in degrees, drawn as-is on the ecliptic ring
FIXED_STARS: tuple[FixedStar, ...] = (
    FixedStar(name="Antares", longitude=247.35, declination=-26.43),
    FixedStar(name="Regulus", longitude=152.09, declination=11.97),
    FixedStar(name="Spica", longitude=201.29, declination=-11.16),
)


def get_body(name: str) -> CelestialBody:
    """Look up a body by case-insensitive name.

    Raises:
        UnknownBodyIdentifier: If name is not one of the seven supported bodies.
    """
    body = CELESTIAL_BODIES.get(name.strip().lower())
    if body is None:
        raise UnknownBodyIdentifier(f"Unknown celestial object: {name}")
    return body
