"""Renderer contract and wheel geometry shared by every renderer.

Angle convention: longitude 0° points straight up and longitudes increase
clockwise on screen.
"""

import math
from typing import Protocol

from zodiacwheel.angles import normalize
from zodiacwheel.models import BodyPlacement, ChartFrame, ZodiacSign


class ChartRenderer(Protocol):
    def render(self, frame: ChartFrame) -> object: ...


def polar_point(longitude: float, radius: float) -> tuple[float, float]:
    """Screen offset from the wheel centre (y grows downward)."""
    theta = math.radians(90.0 - longitude)
    return radius * math.cos(theta), -radius * math.sin(theta)


def sign_midpoint(sign: ZodiacSign) -> float:
    """Mid-arc longitude, measured across the seam for a wrapping sign."""
    end = sign.end + 360.0 if sign.start > sign.end else sign.end
    return normalize((sign.start + end) / 2.0)


def draw_order(placements: tuple[BodyPlacement, ...]) -> list[BodyPlacement]:
    """Outermost first, so inner medallions land on top."""
    return sorted(placements, key=lambda p: p.body.radius, reverse=True)
