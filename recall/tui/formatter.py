"""Entry formatting: shortcut keys joined with ``+`` followed by the description."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.color import Color
from rich.style import Style
from rich.text import Text

from ..domain import DEFAULT_HIGHLIGHT_COLOR, DEFAULT_PRIMARY_COLOR, Entry
from .colors import resolve_color

KEY_SEPARATOR = "+"
DESCRIPTION_GAP = 2


def format_keys(
    keys: Sequence[str],
    primary: Optional[Color] = None,
    highlight: Optional[Color] = None,
) -> Text:
    """Build the shortcut part of a line: keys in press order, ``+`` between them."""
    primary = primary or resolve_color(DEFAULT_PRIMARY_COLOR)
    highlight = highlight or resolve_color(DEFAULT_HIGHLIGHT_COLOR)
    key_style = Style(color=highlight, bold=True)
    separator_style = Style(color=primary)

    shortcut = Text(no_wrap=True, end="")
    for position, key in enumerate(keys):
        # no separator before the first key
        if position:
            shortcut.append(KEY_SEPARATOR, style=separator_style)
        shortcut.append(key, style=key_style)
    return shortcut


def format_entry(
    entry: Entry,
    primary: Optional[Color] = None,
    highlight: Optional[Color] = None,
    *,
    key_width: int = 0,
    selected: bool = False,
) -> Text:
    """Render one entry as a single display line.

    ``key_width`` pads the shortcut so descriptions on a page line up in a
    column; it never shortens the shortcut.
    """
    primary = primary or resolve_color(DEFAULT_PRIMARY_COLOR)
    highlight = highlight or resolve_color(DEFAULT_HIGHLIGHT_COLOR)

    line = format_keys(entry.keys, primary, highlight)
    padding = max(key_width - line.cell_len, 0) + DESCRIPTION_GAP
    line.append(" " * padding)

    description_style = Style(color=primary)
    if selected:
        description_style = Style(color=highlight, reverse=True)
    line.append(entry.description, style=description_style)
    return line
