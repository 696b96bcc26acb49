"""ANSI color table lookups for configured color codes."""

from rich.color import Color

ANSI_COLOR_COUNT = 256


def resolve_color(code: int) -> Color:
    """Map a 0-255 ANSI table index to a terminal color."""
    if not 0 <= code < ANSI_COLOR_COUNT:
        raise ValueError(f"Color code must be between 0 and 255, got {code}")
    return Color.from_ansi(code)
