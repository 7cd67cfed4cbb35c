"""Hex colour helpers for medallions and info cards."""


def _components(hex_color: str) -> tuple[int, int, int]:
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"expected a #rrggbb colour, got {hex_color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def color_to_rgb(hex_color: str) -> str:
    """"#ffdd44" → "255, 221, 68" (for rgba() strings)."""
    r, g, b = _components(hex_color)
    return f"{r}, {g}, {b}"


def adjust_color(hex_color: str, amount: int) -> str:
    """Lighten (amount > 0) or darken (amount < 0) every channel, clamped to 0–255."""
    r, g, b = (max(0, min(255, c + amount)) for c in _components(hex_color))
    return f"#{r:02x}{g:02x}{b:02x}"
