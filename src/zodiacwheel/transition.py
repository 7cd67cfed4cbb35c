"""Animated transition between zodiac conventions.

The transition is a two-state machine (idle, animating) advanced by a pure
step function. The host owns the clock: a Streamlit loop, a test, or
anything else that calls ``tick`` once per frame.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import replace

from zodiacwheel.angles import normalize, shortest_delta
from zodiacwheel.models import (
    TransitionFrame,
    TransitionState,
    ZodiacSign,
    ZodiacTable,
)
from zodiacwheel.zodiac import is_wraparound_designated, table_for

LOG = logging.getLogger(__name__)

DEFAULT_DURATION_MS = 1000.0


def ease_in_out(progress: float) -> float:
    """Quadratic ease-in-out over [0, 1]."""
    if progress < 0.5:
        return 2 * progress * progress
    return 1 - ((-2 * progress + 2) ** 2) / 2


def _interpolate_wrapping(
    from_sign: ZodiacSign, to_sign: ZodiacSign, eased: float
) -> tuple[float, float]:
    start = normalize(
        from_sign.start + shortest_delta(from_sign.start, to_sign.start) * eased
    )
    end = normalize(from_sign.end + shortest_delta(from_sign.end, to_sign.end) * eased)

    # Keep the arc straddling 0° while either endpoint says it should
    if to_sign.wraps:
        if start < end:
            start += 360.0
    elif from_sign.wraps and eased < 0.5 and start < end:
        start += 360.0
    return start, end


def interpolate(
    from_table: ZodiacTable, to_table: ZodiacTable, eased: float
) -> ZodiacTable:
    """Blend two position-aligned tables at eased progress.

    Names and glyphs come from to_table from the first frame; only the
    boundaries move. The wraparound sign travels along the shorter arc so
    it never sweeps the long way round the circle.

    Args:
        from_table: Table at progress 0.
        to_table: Table at progress 1.
        eased: Eased progress in [0, 1].

    Returns:
        A new table. At eased <= 0 it carries from_table's boundaries
        verbatim, at eased >= 1 to_table's.

    Raises:
        ValueError: If the tables differ in length.
    """
    if len(from_table) != len(to_table):
        raise ValueError(
            f"cannot interpolate tables of {len(from_table)} and {len(to_table)} signs"
        )
    if eased >= 1.0:
        return tuple(replace(sign) for sign in to_table)

    signs: list[ZodiacSign] = []
    for from_sign, to_sign in zip(from_table, to_table):
        if eased <= 0.0:
            start, end = from_sign.start, from_sign.end
        elif is_wraparound_designated(from_sign) or is_wraparound_designated(to_sign):
            start, end = _interpolate_wrapping(from_sign, to_sign, eased)
        else:
            start = from_sign.start + (to_sign.start - from_sign.start) * eased
            end = from_sign.end + (to_sign.end - from_sign.end) * eased
        signs.append(ZodiacSign(to_sign.glyph, to_sign.name, start, end))
    return tuple(signs)


def _now_ms() -> float:
    return time.monotonic() * 1000.0


class ZodiacTransition:
    """Idle → Animating → Idle. A new start() discards any run in flight."""

    def __init__(self, duration_ms: float = DEFAULT_DURATION_MS) -> None:
        if duration_ms <= 0:
            raise ValueError(f"duration_ms must be positive, got {duration_ms}")
        self.duration_ms = duration_ms
        self.state: TransitionState | None = None

    @property
    def is_active(self) -> bool:
        return self.state is not None and self.state.is_active

    def start(
        self,
        use_true: bool,
        current_table: ZodiacTable,
        on_update: Callable[[ZodiacTable], None] | None = None,
        now_ms: float | None = None,
    ) -> TransitionState:
        """Begin animating from current_table towards the selected canonical table."""
        if self.is_active:
            LOG.debug("discarding in-flight zodiac transition")
            self.cancel()
        self.state = TransitionState(
            from_table=tuple(replace(sign) for sign in current_table),
            to_table=table_for(use_true),
            start_ms=_now_ms() if now_ms is None else now_ms,
            duration_ms=self.duration_ms,
            on_update=on_update,
        )
        return self.state

    def tick(self, now_ms: float | None = None) -> TransitionFrame | None:
        """Advance one frame. Returns None when idle."""
        state = self.state
        if state is None or not state.is_active:
            return None
        now = _now_ms() if now_ms is None else now_ms
        elapsed = max(now - state.start_ms, 0.0)
        progress = min(elapsed / state.duration_ms, 1.0)

        if progress >= 1.0:
            # Exact destination, no residual interpolation error
            state.is_active = False
            self.state = None
            if state.on_update is not None:
                state.on_update(state.to_table)
            return TransitionFrame(table=state.to_table, done=True)

        table = interpolate(state.from_table, state.to_table, ease_in_out(progress))
        if state.on_update is not None:
            state.on_update(table)
        return TransitionFrame(table=table, done=False)

    def cancel(self) -> None:
        """Stop the current run; its callback never fires again."""
        if self.state is not None:
            self.state.is_active = False
        self.state = None
