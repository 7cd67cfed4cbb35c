"""Runtime configuration read from the environment (``.env`` is loaded by entry points)."""

import os
from dataclasses import dataclass
from pathlib import Path

_ROOT = Path(__file__).parent.parent.parent


@dataclass(frozen=True)
class Settings:
    ephemeris_dir: Path  # Directory holding JPL kernels
    kernel: str  # Kernel filename ("de421.bsp")
    transition_ms: float  # Zodiac transition duration
    boundary_epsilon: float  # Degrees; fallback proximity to the wraparound sign
    timezone: str  # IANA zone for date-picker midnights


def _float_env(name: str, default: float, positive: bool = False) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if positive and value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {raw!r}")
    return value


def load_settings() -> Settings:
    """Build Settings from ZODIACWHEEL_* environment variables.

    Raises:
        ValueError: When a numeric variable does not parse or is out of range.
    """
    ephemeris_dir = os.environ.get("ZODIACWHEEL_EPHEMERIS_DIR")
    return Settings(
        ephemeris_dir=Path(ephemeris_dir) if ephemeris_dir else _ROOT / "resources",
        kernel=os.environ.get("ZODIACWHEEL_KERNEL") or "de421.bsp",
        transition_ms=_float_env("ZODIACWHEEL_TRANSITION_MS", 1000.0, positive=True),
        boundary_epsilon=_float_env("ZODIACWHEEL_BOUNDARY_EPSILON", 1.0),
        timezone=os.environ.get("ZODIACWHEEL_TZ") or "UTC",
    )
