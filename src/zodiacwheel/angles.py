"""Circle arithmetic for ecliptic longitudes."""


def normalize(angle: float) -> float:
    """Wrap an angle into [0, 360)."""
    # -1e-17 % 360.0 rounds to 360.0
    wrapped = angle % 360.0
    return 0.0 if wrapped == 360.0 else wrapped


def shortest_delta(from_deg: float, to_deg: float) -> float:
    """Signed difference to_deg - from_deg along the shorter arc.

    Inputs are expected in [0, 360]; the result's magnitude never exceeds 180.
    """
    delta = to_deg - from_deg
    if abs(delta) > 180.0:
        delta = delta - 360.0 if delta > 0 else delta + 360.0
    return delta


def circular_distance(a: float, b: float) -> float:
    """Unsigned separation between two angles, in [0, 180]."""
    return abs(shortest_delta(normalize(a), normalize(b)))
