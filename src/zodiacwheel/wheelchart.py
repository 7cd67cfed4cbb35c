"""CLI entry point for wheel chart generation.

    uv run zodiacwheel --date 1995-01-15 --time 06:00 --tz Asia/Seoul
"""

import argparse
import logging
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv
from pytz.exceptions import UnknownTimeZoneError

from zodiacwheel.chart import compute_chart, parse_instant
from zodiacwheel.oracle import default_oracle
from zodiacwheel.renderers.static import save_static_chart
from zodiacwheel.renderers.svg_wheel import render_wheel_html
from zodiacwheel.settings import load_settings
from zodiacwheel.zodiac import table_for

LOG = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zodiacwheel", description="Render a zodiac wheel chart for an instant."
    )
    parser.add_argument("--date", help="YYYY-MM-DD (default: now)")
    parser.add_argument("--time", help="HH:MM local time (default: midnight)")
    parser.add_argument("--tz", help="IANA timezone (default: ZODIACWHEEL_TZ or UTC)")
    parser.add_argument(
        "--traditional", action="store_true", help="equal 30° signs instead of IAU"
    )
    parser.add_argument("--format", choices=("png", "html"), default="png")
    parser.add_argument("--output", type=Path, help="destination file")
    parser.add_argument("--lang", choices=("en", "ko"), default="en")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = _parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()
    tz_name = args.tz or settings.timezone

    if args.date:
        when = f"{args.date} {args.time}" if args.time else args.date
        try:
            instant = parse_instant(when, tz_name)
        except (ValueError, UnknownTimeZoneError) as exc:
            parser.error(f"invalid --date/--time: {exc}")
    else:
        instant = datetime.now(timezone.utc)

    oracle = default_oracle(settings.ephemeris_dir, settings.kernel)
    frame = compute_chart(
        instant,
        table_for(not args.traditional),
        oracle,
        boundary_epsilon=settings.boundary_epsilon,
    )
    for placement in frame.placements:
        LOG.info(
            "%-8s %7.2f° %s%s",
            placement.body.name,
            placement.longitude,
            placement.sign.name,
            "" if placement.precise else " (approximate)",
        )

    if args.format == "html":
        path = args.output or Path("results") / (
            f"wheel__{frame.instant.strftime('%Y_%m_%d_%H_%M')}.html"
        )
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_wheel_html(frame, lang=args.lang), encoding="utf-8")
    else:
        path = save_static_chart(frame, args.output)
    print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
