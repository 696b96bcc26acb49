"""Page layout: places formatted entry lines inside the viewport.

Entries flow top to bottom in one column. When the page is taller than the
viewport, entries continue in further columns side by side as long as each
column keeps at least ``MIN_COLUMN_WIDTH`` cells. Lines wider than their
column are cut with an ellipsis. If entries still do not fit, the last
visible slot shows ``… N more`` instead of an entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from rich.color import Color
from rich.style import Style
from rich.text import Text

from ..domain import Page
from .formatter import format_entry, format_keys
from .types import Viewport

MIN_COLUMN_WIDTH = 24
COLUMN_GAP = 3
ELLIPSIS = "…"


@dataclass(frozen=True)
class PositionedLine:
    """A display line anchored at ``(row, column)`` inside the viewport."""

    entry_index: Optional[int]
    row: int
    column: int
    width: int
    line: Text


@dataclass(frozen=True)
class PageLayout:
    lines: Tuple[PositionedLine, ...] = ()
    hidden_count: int = 0
    indicator: Optional[PositionedLine] = None

    @property
    def entry_indices(self) -> Tuple[int, ...]:
        return tuple(
            placed.entry_index for placed in self.lines if placed.entry_index is not None
        )


def _column_count(total: int, viewport: Viewport) -> int:
    needed = -(-total // viewport.height)
    fitting = max(1, (viewport.width + COLUMN_GAP) // (MIN_COLUMN_WIDTH + COLUMN_GAP))
    return max(1, min(needed, fitting))


def _column_width(columns: int, viewport: Viewport) -> int:
    if columns == 1:
        return viewport.width
    return (viewport.width - COLUMN_GAP * (columns - 1)) // columns


def _fit(line: Text, width: int) -> Text:
    fitted = line.copy()
    if fitted.cell_len > width:
        fitted.truncate(width, overflow="ellipsis")
    return fitted


def layout_page(
    page: Page,
    viewport: Viewport,
    primary: Color,
    highlight: Color,
    *,
    selected_entry_index: Optional[int] = None,
) -> PageLayout:
    """Compute where every entry of ``page`` goes for the given viewport."""
    total = len(page.entries)
    if total == 0:
        return PageLayout()
    if viewport.width < 1 or viewport.height < 1:
        return PageLayout(hidden_count=total)

    key_width = max(
        format_keys(entry.keys, primary, highlight).cell_len for entry in page.entries
    )
    columns = _column_count(total, viewport)
    width = _column_width(columns, viewport)
    capacity = columns * viewport.height

    visible = total if total <= capacity else capacity - 1
    hidden = total - visible

    def slot(index: int) -> Tuple[int, int]:
        column, row = divmod(index, viewport.height)
        return row, column * (width + COLUMN_GAP)

    placed: List[PositionedLine] = []
    for index in range(visible):
        line = format_entry(
            page.entries[index],
            primary,
            highlight,
            key_width=key_width,
            selected=index == selected_entry_index,
        )
        row, column = slot(index)
        placed.append(PositionedLine(index, row, column, width, _fit(line, width)))

    indicator = None
    if hidden:
        row, column = slot(visible)
        more = Text(f"{ELLIPSIS} {hidden} more", style=Style(color=highlight, italic=True))
        indicator = PositionedLine(None, row, column, width, _fit(more, width))

    return PageLayout(lines=tuple(placed), hidden_count=hidden, indicator=indicator)


def render_layout(page_layout: PageLayout, viewport: Viewport) -> Text:
    """Paint a layout into ``viewport.height`` lines of text."""
    rows: List[List[PositionedLine]] = [[] for _ in range(max(viewport.height, 0))]
    placed_lines = list(page_layout.lines)
    if page_layout.indicator is not None:
        placed_lines.append(page_layout.indicator)
    for placed in placed_lines:
        rows[placed.row].append(placed)

    painted = []
    for row in rows:
        line = Text(no_wrap=True, end="")
        cursor = 0
        for placed in sorted(row, key=lambda item: item.column):
            line.append(" " * (placed.column - cursor))
            line.append_text(placed.line)
            cursor = placed.column + placed.line.cell_len
        painted.append(line)
    return Text("\n", no_wrap=True, end="").join(painted)
