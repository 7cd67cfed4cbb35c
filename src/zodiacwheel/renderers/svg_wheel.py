"""SVG wheel chart renderer.

Produces a standalone SVG string, or a self-contained HTML page (SVG plus
planet info cards) for embedding via st.components.v1.html() or saving to
disk.

Coordinate system:
  viewBox="0 0 size size", wheel centred at (size/2, size/2)
  longitude 0° at top, increasing clockwise
"""

from __future__ import annotations

import html

from zodiacwheel.colors import adjust_color, color_to_rgb
from zodiacwheel.i18n import t
from zodiacwheel.models import BodyPlacement, ChartFrame
from zodiacwheel.renderers.base import draw_order, polar_point, sign_midpoint

_BG = "#021019"
_RING_COLOR = "#0596be"
_SPOKE_COLOR = "rgba(5, 150, 190, 0.3)"
_ORBIT_COLOR = "rgba(100, 100, 100, 0.15)"
_STALK_COLOR = "rgba(150, 150, 150, 0.7)"
_GLYPH_COLOR = "rgba(255, 255, 255, 0.8)"
_EARTH_GLYPH = "⊕"
_MEDALLION_R = 25
_EVENING_ARC_DEG = 45.0


def _arc_path(cx: float, cy: float, radius: float, start: float, end: float) -> str:
    """Clockwise arc from longitude start to end."""
    span = (end - start) % 360.0
    x1, y1 = polar_point(start, radius)
    x2, y2 = polar_point(start + span, radius)
    large_arc = 1 if span > 180.0 else 0
    return (
        f"M{cx + x1:.2f},{cy + y1:.2f} "
        f"A{radius:.2f},{radius:.2f} 0 {large_arc},1 {cx + x2:.2f},{cy + y2:.2f}"
    )


def _medallion_fill(placement: BodyPlacement) -> tuple[str, str, str]:
    """(inner, middle, rim) gradient stops for a body's medallion."""
    key = placement.body.key
    if key == "sun":
        return "#fff7d0", "#ffd700", "#d4af37"
    if key == "moon":
        return "#ffffff", "#d1d1d1", "#a0a0a0"
    return "#0a6b89", "#086080", "#043b4e"


def render_wheel_svg(frame: ChartFrame, size: int = 640) -> str:
    """Return the wheel chart for frame as an SVG document string.

    Draw order: outer ring, zodiac glyphs and spokes, orbit circles,
    stalks, fixed stars, evening-sky arc, Earth, then body medallions
    from the outermost orbit inward.

    Args:
        frame: Fully computed chart state.
        size: Width and height in px.

    Returns:
        SVG markup.
    """
    cx = cy = size / 2
    max_radius = size / 2 - 50
    zodiac_radius = max_radius + 30
    star_radius = max_radius - 30

    defs: list[str] = []
    parts: list[str] = [
        f'<circle cx="{cx}" cy="{cy}" r="{max_radius + 15:.2f}" fill="{_BG}"/>',
        f'<circle cx="{cx}" cy="{cy}" r="{max_radius:.2f}" fill="none"'
        f' stroke="{_RING_COLOR}" stroke-width="4"/>',
    ]

    # --- Zodiac ring ---
    for sign in frame.table:
        gx, gy = polar_point(sign_midpoint(sign), zodiac_radius)
        sx, sy = polar_point(sign.start, max_radius)
        parts.append(
            f'<text x="{cx + gx:.2f}" y="{cy + gy:.2f}" font-size="24"'
            f' text-anchor="middle" dominant-baseline="middle" fill="{_GLYPH_COLOR}">'
            f"<title>{html.escape(sign.name)}</title>{sign.glyph}</text>"
        )
        parts.append(
            f'<line x1="{cx}" y1="{cy}" x2="{cx + sx:.2f}" y2="{cy + sy:.2f}"'
            f' stroke="{_SPOKE_COLOR}" stroke-width="1"/>'
        )

    # --- Orbits and stalks ---
    for radius in sorted({p.body.radius for p in frame.placements}):
        parts.append(
            f'<circle cx="{cx}" cy="{cy}" r="{radius}" fill="none"'
            f' stroke="{_ORBIT_COLOR}" stroke-width="1"/>'
        )
    for placement in frame.placements:
        px, py = polar_point(placement.longitude, placement.body.radius)
        parts.append(
            f'<line x1="{cx}" y1="{cy}" x2="{cx + px:.2f}" y2="{cy + py:.2f}"'
            f' stroke="{_STALK_COLOR}" stroke-width="4"/>'
        )

    # --- Fixed stars (Moon colour, outer track) ---
    moon_color = next(
        (p.body.color for p in frame.placements if p.body.key == "moon"), "#d1d1d1"
    )
    for star in frame.fixed_stars:
        fx, fy = polar_point(star.longitude, star_radius)
        parts.append(
            f'<circle cx="{cx + fx:.2f}" cy="{cy + fy:.2f}" r="6" fill="{moon_color}">'
            f"<title>{html.escape(star.name)}</title></circle>"
        )

    # --- Evening sky: the stretch of ecliptic east of the Sun ---
    sun = next((p for p in frame.placements if p.body.key == "sun"), None)
    if sun is not None:
        arc = _arc_path(
            cx, cy, star_radius, sun.longitude, sun.longitude + _EVENING_ARC_DEG
        )
        parts.append(
            f'<path d="{arc}" fill="none" stroke="#ffdd44" stroke-width="3"'
            f' stroke-opacity="0.45" class="evening-sky"/>'
        )

    # --- Earth ---
    defs.append(
        '<radialGradient id="earth">'
        '<stop offset="0%" stop-color="#88ccff"/>'
        '<stop offset="50%" stop-color="#44aadd"/>'
        '<stop offset="100%" stop-color="#0066aa"/>'
        "</radialGradient>"
    )
    parts.append(f'<circle cx="{cx}" cy="{cy}" r="25" fill="url(#earth)"/>')
    parts.append(
        f'<text x="{cx}" y="{cy}" font-size="24" text-anchor="middle"'
        f' dominant-baseline="middle" fill="#ffffff">{_EARTH_GLYPH}</text>'
    )

    # --- Medallions ---
    for placement in draw_order(frame.placements):
        body = placement.body
        px, py = polar_point(placement.longitude, body.radius)
        mx, my = cx + px, cy + py
        inner, middle, rim = _medallion_fill(placement)
        defs.append(
            f'<radialGradient id="glow-{body.key}">'
            f'<stop offset="0%" stop-color="rgba({color_to_rgb(body.color)}, 0.8)"/>'
            f'<stop offset="100%" stop-color="rgba(0, 50, 70, 0)"/>'
            f"</radialGradient>"
            f'<radialGradient id="medal-{body.key}">'
            f'<stop offset="0%" stop-color="{inner}"/>'
            f'<stop offset="70%" stop-color="{middle}"/>'
            f'<stop offset="100%" stop-color="{rim}"/>'
            f"</radialGradient>"
        )
        glyph_fill = "#000000" if body.key in ("sun", "moon") else "#ffffff"
        opacity = "1" if placement.precise else "0.75"
        parts.append(
            f'<g class="medallion" id="body-{body.key}" opacity="{opacity}">'
            f"<title>{html.escape(body.name)} · {html.escape(placement.sign.name)}"
            f" {placement.longitude:.2f}°</title>"
            f'<circle cx="{mx:.2f}" cy="{my:.2f}" r="{_MEDALLION_R * 1.5}"'
            f' fill="url(#glow-{body.key})"/>'
            f'<circle cx="{mx:.2f}" cy="{my:.2f}" r="{_MEDALLION_R}"'
            f' fill="url(#medal-{body.key})" stroke="{body.color}" stroke-width="4"/>'
            f'<text x="{mx:.2f}" y="{my:.2f}" font-size="24" text-anchor="middle"'
            f' dominant-baseline="middle" fill="{glyph_fill}">{body.glyph}</text>'
            f"</g>"
        )

    defs_svg = "\n    ".join(defs)
    body_svg = "\n  ".join(parts)
    return f"""<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {size} {size}" width="{size}" height="{size}">
  <defs>
    {defs_svg}
  </defs>
  {body_svg}
</svg>"""


def render_info_card(placement: BodyPlacement, lang: str = "en") -> str:
    """One body's info card: glyph, name, sign glyph and sign name."""
    body = placement.body
    sign = placement.sign
    note = "" if placement.precise else f"<small>{t('approximate', lang)}</small>"
    return (
        f'<div class="planet-info" style="background-color: {adjust_color(body.color, -40)};'
        f' border: 1px solid {adjust_color(body.color, 20)}">'
        f'<span class="planet-symbol" style="color: {body.color}">{body.glyph}</span>'
        f" <strong>{html.escape(body.name)}</strong>"
        f' <span style="font-size: 18px;">{sign.glyph}</span> {html.escape(sign.name)}'
        f"{note}</div>"
    )


def render_wheel_html(frame: ChartFrame, lang: str = "en", size: int = 640) -> str:
    """Return a self-contained HTML page with the wheel and one info card per body.

    Args:
        frame: Fully computed chart state.
        lang: Language code ('ko' or 'en') for labels.
        size: Wheel width and height in px.

    Returns:
        HTML string suitable for st.components.v1.html() or a .html file.
    """
    cards = "\n".join(render_info_card(p, lang) for p in frame.placements)
    when = frame.instant.strftime("%Y-%m-%d %H:%M UTC")
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{t("page_title", lang)} · {when}</title>
<style>
body {{ margin: 0; background: #000d14; color: #e8e8e8; font-family: Arial, sans-serif; }}
.wheel {{ display: flex; justify-content: center; padding: 1rem 0; }}
.cards {{ display: flex; flex-wrap: wrap; gap: 0.5rem; justify-content: center; padding: 0 1rem 1rem; }}
.planet-info {{ padding: 8px; border-radius: 8px; min-width: 120px; }}
.planet-info small {{ display: block; opacity: 0.7; }}
.planet-symbol {{ font-size: 20px; }}
</style>
</head>
<body>
<div class="wheel">
{render_wheel_svg(frame, size)}
</div>
<div class="cards">
{cards}
</div>
</body>
</html>"""


class SvgWheelRenderer:
    """ChartRenderer producing an HTML page."""

    def __init__(self, lang: str = "en", size: int = 640) -> None:
        self.lang = lang
        self.size = size

    def render(self, frame: ChartFrame) -> str:
        return render_wheel_html(frame, self.lang, self.size)
