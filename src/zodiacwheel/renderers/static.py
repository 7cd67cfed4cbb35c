"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Wedge

from zodiacwheel.models import ChartFrame
from zodiacwheel.renderers.base import draw_order, polar_point, sign_midpoint

_ROOT = Path(__file__).parent.parent.parent.parent
_MAX_RADIUS = 270
_SECTOR_COLORS = ("#063a4d", "#042a38")


def _xy(longitude: float, radius: float) -> tuple[float, float]:
    # matplotlib's y axis points up
    x, y = polar_point(longitude, radius)
    return x, -y


def render_static_chart(frame: ChartFrame, chart_size: int = 8) -> Figure:
    """Render a ChartFrame as a static matplotlib wheel.

    Args:
        frame: Fully computed chart state.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor("black")
    ax.set_facecolor("black")

    ax.add_patch(Circle((0, 0), _MAX_RADIUS + 45, color="#021019", fill=True))

    # Wedge angles are counter-clockwise from +x; longitudes run clockwise from top
    for i, sign in enumerate(frame.table):
        span = (sign.end - sign.start) % 360.0 or 360.0
        theta2 = 90.0 - sign.start
        ax.add_patch(
            Wedge(
                (0, 0),
                _MAX_RADIUS + 45,
                theta2 - span,
                theta2,
                width=45,
                facecolor=_SECTOR_COLORS[i % 2],
                edgecolor="#0596be",
                linewidth=0.6,
            )
        )
        gx, gy = _xy(sign_midpoint(sign), _MAX_RADIUS + 22)
        ax.text(gx, gy, sign.glyph, color="white", ha="center", va="center", fontsize=16)
        sx, sy = _xy(sign.start, _MAX_RADIUS)
        ax.plot([0, sx], [0, sy], color="#0596be", linewidth=0.5, alpha=0.3, zorder=1)

    for radius in sorted({p.body.radius for p in frame.placements}):
        ax.add_patch(
            Circle((0, 0), radius, fill=False, edgecolor="#646464", alpha=0.3, linewidth=0.6)
        )

    star_xy = np.array([_xy(s.longitude, _MAX_RADIUS - 30) for s in frame.fixed_stars])
    if len(star_xy):
        ax.scatter(star_xy[:, 0], star_xy[:, 1], s=40, color="#d1d1d1", marker="*", zorder=3)

    ax.add_patch(Circle((0, 0), 25, color="#44aadd", zorder=4))
    ax.text(0, 0, "⊕", color="white", ha="center", va="center", fontsize=16, zorder=5)

    for placement in draw_order(frame.placements):
        x, y = _xy(placement.longitude, placement.body.radius)
        ax.plot([0, x], [0, y], color="#969696", linewidth=1.5, alpha=0.7, zorder=2)
        ax.add_patch(
            Circle(
                (x, y),
                18,
                facecolor="#0a6b89",
                edgecolor=placement.body.color,
                linewidth=2,
                alpha=1.0 if placement.precise else 0.7,
                zorder=6,
            )
        )
        ax.text(
            x, y, placement.body.glyph, color="white", ha="center", va="center",
            fontsize=12, zorder=7,
        )

    limit = _MAX_RADIUS + 50
    ax.set_xlim(-limit, limit)
    ax.set_ylim(-limit, limit)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def save_static_chart(frame: ChartFrame, output_path: Path | None = None) -> Path:
    """Save a ChartFrame as a PNG file.

    Args:
        frame: Fully computed chart state.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        when_str = frame.instant.strftime("%Y_%m_%d_%H_%M")
        output_path = _ROOT / "results" / f"wheel__{when_str}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(frame)
    fig.savefig(output_path, facecolor="black")
    plt.close(fig)
    return output_path


class StaticRenderer:
    """ChartRenderer producing a matplotlib Figure."""

    def render(self, frame: ChartFrame) -> Figure:
        return render_static_chart(frame)
