"""Chart computation: per-body placement and the active-table context."""

import logging
from collections.abc import Callable, Iterable
from datetime import date, datetime

from pytz import timezone, utc

from zodiacwheel.bodies import CELESTIAL_BODIES, FIXED_STARS, get_body
from zodiacwheel.models import (
    BodyPlacement,
    ChartFrame,
    TransitionFrame,
    ZodiacTable,
)
from zodiacwheel.oracle import FallbackOracle
from zodiacwheel.transition import DEFAULT_DURATION_MS, ZodiacTransition
from zodiacwheel.zodiac import DEFAULT_BOUNDARY_EPSILON, classify_detailed, table_for

LOG = logging.getLogger(__name__)


def midnight(day: date, tz_name: str = "UTC") -> datetime:
    """Local midnight of day in tz_name, as a UTC datetime."""
    local_tz = timezone(tz_name)
    local = local_tz.localize(datetime(day.year, day.month, day.day), is_dst=None)
    return local.astimezone(utc)


def parse_instant(when: str, tz_name: str = "UTC") -> datetime:
    """Parse "YYYY-MM-DD" (local midnight) or "YYYY-MM-DD HH:MM" into a UTC datetime.

    Raises:
        ValueError: If when matches neither format.
    """
    text = when.strip()
    try:
        dt = datetime.strptime(text, "%Y-%m-%d %H:%M")
    except ValueError:
        dt = datetime.strptime(text, "%Y-%m-%d")
    local_tz = timezone(tz_name)
    return local_tz.localize(dt, is_dst=None).astimezone(utc)


class ChartContext:
    """Owner of the active zodiac table.

    Only this object replaces the active table, either instantly through
    set_convention or frame by frame while a transition runs.
    """

    def __init__(
        self,
        use_true: bool = True,
        transition_ms: float = DEFAULT_DURATION_MS,
        boundary_epsilon: float = DEFAULT_BOUNDARY_EPSILON,
    ) -> None:
        self.use_true = use_true
        self.active_table: ZodiacTable = table_for(use_true)
        self.transition = ZodiacTransition(transition_ms)
        self.boundary_epsilon = boundary_epsilon
        self.degraded_count = 0

    @property
    def is_animating(self) -> bool:
        return self.transition.is_active

    def set_convention(self, use_true: bool) -> None:
        """Switch tables immediately, cancelling any animation."""
        self.transition.cancel()
        self.use_true = use_true
        self.active_table = table_for(use_true)

    def toggle(
        self,
        use_true: bool,
        on_update: Callable[[ZodiacTable], None] | None = None,
        now_ms: float | None = None,
    ) -> None:
        """Animate from the active table to the convention selected by use_true."""
        self.use_true = use_true
        self.transition.start(use_true, self.active_table, on_update, now_ms)

    def advance(self, now_ms: float | None = None) -> TransitionFrame | None:
        """Tick the transition and publish its table. None when idle."""
        frame = self.transition.tick(now_ms)
        if frame is not None:
            self.active_table = frame.table
        return frame

    def cancel(self) -> None:
        self.transition.cancel()

    def compute(
        self,
        instant: datetime,
        oracle: FallbackOracle,
        bodies: Iterable[str] | None = None,
    ) -> ChartFrame:
        """compute_chart against the active table, counting degraded classifications."""
        frame = compute_chart(
            instant, self.active_table, oracle, bodies, self.boundary_epsilon
        )
        self.degraded_count += sum(
            1 for p in frame.placements if p.classification.degraded
        )
        return frame


def compute_chart(
    instant: datetime,
    table: ZodiacTable,
    oracle: FallbackOracle,
    bodies: Iterable[str] | None = None,
    boundary_epsilon: float = DEFAULT_BOUNDARY_EPSILON,
) -> ChartFrame:
    """Place every body on the wheel and classify it against table.

    A body that no oracle can place is dropped from the frame; the rest of
    the chart is still returned.

    Args:
        instant: Moment to chart. Naive datetimes are taken as UTC.
        table: Active zodiac table.
        oracle: Precise-with-fallback position source.
        bodies: Body identifiers to include. All seven when None.
        boundary_epsilon: Passed through to the classifier fallback.

    Returns:
        ChartFrame ready for any ChartRenderer.

    Raises:
        UnknownBodyIdentifier: If bodies names an unsupported body.
    """
    if instant.tzinfo is None:
        instant = utc.localize(instant)
    else:
        instant = instant.astimezone(utc)

    configs = (
        list(CELESTIAL_BODIES.values())
        if bodies is None
        else [get_body(name) for name in bodies]
    )
    placements: list[BodyPlacement] = []
    for config in configs:
        try:
            position = oracle.position(config.key, instant)
        except RuntimeError:
            LOG.error(
                "dropping %s from chart",
                config.key,
                extra={"err_code": "BODY_DROPPED", "body": config.key},
                exc_info=True,
            )
            continue
        placements.append(
            BodyPlacement(
                body=config,
                longitude=position.longitude,
                classification=classify_detailed(
                    position.longitude, table, boundary_epsilon
                ),
                precise=position.precise,
            )
        )

    return ChartFrame(
        instant=instant,
        table=table,
        placements=tuple(placements),
        fixed_stars=FIXED_STARS,
    )
