"""Zodiac tables and longitude → sign classification."""

import logging

from zodiacwheel.angles import circular_distance, normalize
from zodiacwheel.models import Classification, ZodiacSign, ZodiacTable

LOG = logging.getLogger(__name__)

# Name of the sign whose arc may straddle 0°. Pisces in every supported table.
WRAPAROUND_SIGN = "Pisces"

DEFAULT_BOUNDARY_EPSILON = 1.0

# IAU constellation boundary crossings along the ecliptic
TRUE_ZODIAC: ZodiacTable = (
    ZodiacSign("♈", "Aries", 29.0, 53.4),
    ZodiacSign("♉", "Taurus", 53.4, 90.4),
    ZodiacSign("♊", "Gemini", 90.4, 118.2),
    ZodiacSign("♋", "Cancer", 118.2, 138.1),
    ZodiacSign("♌", "Leo", 138.1, 174.1),
    ZodiacSign("♍", "Virgo", 174.1, 217.8),
    ZodiacSign("♎", "Libra", 217.8, 241.1),
    ZodiacSign("♏", "Scorpius", 241.1, 266.5),
    ZodiacSign("♐", "Sagittarius", 266.5, 299.7),
    ZodiacSign("♑", "Capricornus", 299.7, 327.8),
    ZodiacSign("♒", "Aquarius", 327.8, 351.5),
    ZodiacSign("♓", "Pisces", 351.5, 29.0),
)

# Equal 30° divisions
TRADITIONAL_ZODIAC: ZodiacTable = tuple(
    ZodiacSign(sign.glyph, sign.name, i * 30.0, (i + 1) * 30.0)
    for i, sign in enumerate(TRUE_ZODIAC)
)


def table_for(use_true: bool) -> ZodiacTable:
    """Canonical table for a convention toggle."""
    return TRUE_ZODIAC if use_true else TRADITIONAL_ZODIAC


def wraparound_sign(table: ZodiacTable) -> ZodiacSign | None:
    """The sign whose arc crosses the seam, or None when the table has none."""
    return next((sign for sign in table if sign.wraps), None)


def is_wraparound_designated(sign: ZodiacSign) -> bool:
    return sign.name == WRAPAROUND_SIGN or sign.wraps


def classify_detailed(
    longitude: float,
    table: ZodiacTable,
    boundary_epsilon: float = DEFAULT_BOUNDARY_EPSILON,
) -> Classification:
    """Return the sign whose half-open arc [start, end) holds longitude.

    The wrapping sign, if any, is tested first. A longitude on a sign's
    end boundary belongs to the next sign.

    When no arc matches (a gap left by floating-point drift in an
    interpolated table) the result is degraded: the wraparound-designated
    sign if longitude lies within boundary_epsilon degrees of one of its
    boundaries, otherwise the first sign of the table.

    Args:
        longitude: Ecliptic longitude in degrees. Normalized before lookup.
        table: Twelve signs, canonical or interpolated.
        boundary_epsilon: Proximity window for the degraded fallback.

    Returns:
        Classification with the chosen sign and the degraded flag.

    Raises:
        ValueError: If table is empty.
    """
    if not table:
        raise ValueError("zodiac table is empty")
    lon = normalize(longitude)

    wrapping = wraparound_sign(table)
    if wrapping is not None and (lon >= wrapping.start or lon < wrapping.end):
        return Classification(wrapping)

    for sign in table:
        if sign.start <= lon < sign.end:
            return Classification(sign)

    fallback = table[0]
    designated = wrapping or next(
        (sign for sign in table if sign.name == WRAPAROUND_SIGN), None
    )
    if designated is not None and (
        circular_distance(lon, designated.start) <= boundary_epsilon
        or circular_distance(lon, designated.end) <= boundary_epsilon
    ):
        fallback = designated
    LOG.warning(
        "no zodiac arc claims longitude %.6f; using %s",
        lon,
        fallback.name,
        extra={"err_code": "CLASSIFICATION_AMBIGUOUS", "longitude": lon},
    )
    return Classification(fallback, degraded=True)


def classify(
    longitude: float,
    table: ZodiacTable,
    boundary_epsilon: float = DEFAULT_BOUNDARY_EPSILON,
) -> ZodiacSign:
    """Sign for longitude in table. See classify_detailed for the fallback policy."""
    return classify_detailed(longitude, table, boundary_epsilon).sign
