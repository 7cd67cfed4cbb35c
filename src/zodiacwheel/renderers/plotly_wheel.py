"""Plotly polar wheel renderer for the Streamlit app.

Polar axis is rotated so 0° sits at the top and runs clockwise, matching
the SVG and static renderers.
"""

import plotly.graph_objects as go

from zodiacwheel.models import ChartFrame
from zodiacwheel.renderers.base import draw_order, sign_midpoint

_BG = "#000d14"
_RING_COLOR = "#0596be"
_SPOKE_COLOR = "rgba(5, 150, 190, 0.3)"
_SECTOR_COLORS = ("rgba(5, 150, 190, 0.22)", "rgba(5, 150, 190, 0.10)")
_RING_INNER = 270
_RING_WIDTH = 30


def render_plotly_wheel(frame: ChartFrame) -> go.Figure:
    """Render a ChartFrame as a Plotly polar wheel.

    Each sign is a Barpolar sector on the outer ring, sized by its arc and
    labelled by its glyph. Bodies are markers on their own orbit radius.

    Args:
        frame: Fully computed chart state.

    Returns:
        Plotly Figure object.
    """
    spans = [(sign.end - sign.start) % 360.0 or 360.0 for sign in frame.table]
    mids = [sign_midpoint(sign) for sign in frame.table]

    sector_trace = go.Barpolar(
        r=[_RING_WIDTH] * len(frame.table),
        base=[_RING_INNER] * len(frame.table),
        theta=mids,
        width=spans,
        marker=dict(
            color=[_SECTOR_COLORS[i % 2] for i in range(len(frame.table))],
            line=dict(color=_RING_COLOR, width=1),
        ),
        text=[sign.name for sign in frame.table],
        hovertemplate="%{text}<extra></extra>",
        name="signs",
    )

    glyph_trace = go.Scatterpolar(
        r=[_RING_INNER + _RING_WIDTH / 2] * len(frame.table),
        theta=mids,
        mode="text",
        text=[sign.glyph for sign in frame.table],
        textfont=dict(size=20, color="rgba(255, 255, 255, 0.8)"),
        hoverinfo="skip",
        name="glyphs",
    )

    # Spokes: single trace using None separators
    spoke_r: list[float | None] = []
    spoke_theta: list[float | None] = []
    for sign in frame.table:
        spoke_r += [0, _RING_INNER, None]
        spoke_theta += [sign.start, sign.start, None]
    spoke_trace = go.Scatterpolar(
        r=spoke_r,
        theta=spoke_theta,
        mode="lines",
        line=dict(color=_SPOKE_COLOR, width=1),
        hoverinfo="skip",
        name="spokes",
    )

    ordered = draw_order(frame.placements)
    body_trace = go.Scatterpolar(
        r=[p.body.radius for p in ordered],
        theta=[p.longitude for p in ordered],
        mode="markers+text",
        marker=dict(
            size=26,
            color=[p.body.color for p in ordered],
            opacity=[1.0 if p.precise else 0.6 for p in ordered],
            line=dict(color="#043b4e", width=2),
        ),
        text=[p.body.glyph for p in ordered],
        textfont=dict(size=14, color="#000000"),
        customdata=[
            [p.body.name, p.sign.name, p.longitude] for p in ordered
        ],
        hovertemplate="%{customdata[0]} · %{customdata[1]} %{customdata[2]:.2f}°<extra></extra>",
        name="bodies",
    )

    star_trace = go.Scatterpolar(
        r=[_RING_INNER - 30] * len(frame.fixed_stars),
        theta=[s.longitude for s in frame.fixed_stars],
        mode="markers",
        marker=dict(size=8, color="#d1d1d1", symbol="star"),
        text=[s.name for s in frame.fixed_stars],
        hovertemplate="%{text}<extra></extra>",
        name="stars",
    )

    fig = go.Figure(data=[sector_trace, spoke_trace, glyph_trace, star_trace, body_trace])
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=20, r=20, t=20, b=20),
        width=640,
        height=640,
        polar=dict(
            bgcolor=_BG,
            radialaxis=dict(visible=False, range=[0, _RING_INNER + _RING_WIDTH]),
            angularaxis=dict(
                visible=False,
                rotation=90,
                direction="clockwise",
            ),
            barmode="overlay",
        ),
    )
    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]

    return fig
