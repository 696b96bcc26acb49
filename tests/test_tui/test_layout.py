"""Page layout engine tests."""

import pytest

from recall.domain import Entry, Page
from recall.tui.colors import resolve_color
from recall.tui.layout import (
    COLUMN_GAP,
    ELLIPSIS,
    MIN_COLUMN_WIDTH,
    layout_page,
    render_layout,
)
from recall.tui.types import Viewport

PRIMARY = resolve_color(15)
HIGHLIGHT = resolve_color(14)


def _page(count, description="Does something"):
    return Page(
        name="many",
        entries=tuple(
            Entry(id=f"e{index}", keys=("Ctrl", str(index)), description=description)
            for index in range(count)
        ),
    )


def _cells(page_layout):
    placed = list(page_layout.lines)
    if page_layout.indicator is not None:
        placed.append(page_layout.indicator)
    return placed


def test_empty_page_yields_empty_layout():
    page_layout = layout_page(Page(name="empty"), Viewport(80, 24), PRIMARY, HIGHLIGHT)

    assert page_layout.lines == ()
    assert page_layout.hidden_count == 0
    assert page_layout.indicator is None


def test_every_entry_appears_once_when_viewport_is_large():
    page = _page(10)

    page_layout = layout_page(page, Viewport(80, 24), PRIMARY, HIGHLIGHT)

    assert page_layout.entry_indices == tuple(range(10))
    assert page_layout.hidden_count == 0
    assert [placed.row for placed in page_layout.lines] == list(range(10))
    assert {placed.column for placed in page_layout.lines} == {0}


def test_descriptions_line_up_after_widest_shortcut():
    page = Page(
        name="mixed",
        entries=(
            Entry(id="a", keys=("q",), description="Quit"),
            Entry(id="b", keys=("Ctrl", "Alt", "F2"), description="TTY 2"),
        ),
    )

    page_layout = layout_page(page, Viewport(80, 10), PRIMARY, HIGHLIGHT)
    first, second = (placed.line.plain for placed in page_layout.lines)

    assert first.index("Quit") == second.index("TTY 2")


def test_overflow_flows_into_additional_columns():
    page = _page(10)
    viewport = Viewport(MIN_COLUMN_WIDTH * 2 + COLUMN_GAP, 5)

    page_layout = layout_page(page, viewport, PRIMARY, HIGHLIGHT)

    assert page_layout.entry_indices == tuple(range(10))
    assert {placed.column for placed in page_layout.lines} == {0, MIN_COLUMN_WIDTH + COLUMN_GAP}


def test_placed_lines_never_overlap_or_exceed_viewport():
    viewport = Viewport(60, 4)
    page_layout = layout_page(_page(30, description="x" * 50), viewport, PRIMARY, HIGHLIGHT)

    occupied = set()
    for placed in _cells(page_layout):
        assert placed.line.cell_len <= placed.width
        assert placed.column + placed.line.cell_len <= viewport.width
        assert 0 <= placed.row < viewport.height
        cells = {(placed.row, x) for x in range(placed.column, placed.column + placed.line.cell_len)}
        assert not occupied & cells
        occupied |= cells


def test_too_many_entries_show_more_indicator():
    page_layout = layout_page(_page(10), Viewport(30, 4), PRIMARY, HIGHLIGHT)

    assert page_layout.entry_indices == (0, 1, 2)
    assert page_layout.hidden_count == 7
    assert page_layout.indicator.line.plain == f"{ELLIPSIS} 7 more"
    assert page_layout.indicator.row == 3


def test_long_lines_are_truncated_with_ellipsis():
    page_layout = layout_page(_page(1, description="y" * 200), Viewport(40, 3), PRIMARY, HIGHLIGHT)

    line = page_layout.lines[0].line.plain
    assert len(line) == 40
    assert line.endswith(ELLIPSIS)


@pytest.mark.parametrize("width,height", [(1, 1), (1, 5), (5, 1), (2, 2), (0, 0), (3, 0)])
def test_tiny_viewports_produce_a_defined_layout(width, height):
    page = _page(4)

    page_layout = layout_page(page, Viewport(width, height), PRIMARY, HIGHLIGHT)

    shown = len(page_layout.lines)
    assert shown + page_layout.hidden_count == 4
    assert shown <= max(width, 0) * max(height, 0)


def test_single_cell_viewport_shows_only_the_indicator():
    page_layout = layout_page(_page(3), Viewport(1, 1), PRIMARY, HIGHLIGHT)

    assert page_layout.lines == ()
    assert page_layout.hidden_count == 3
    assert page_layout.indicator.line.plain == ELLIPSIS


def test_selected_entry_is_highlighted():
    page_layout = layout_page(
        _page(2), Viewport(80, 5), PRIMARY, HIGHLIGHT, selected_entry_index=1
    )

    selected_styles = [span.style for span in page_layout.lines[1].line.spans]
    plain_styles = [span.style for span in page_layout.lines[0].line.spans]
    assert any(getattr(style, "reverse", False) for style in selected_styles)
    assert not any(getattr(style, "reverse", False) for style in plain_styles)


def test_render_layout_paints_rows_at_their_columns():
    viewport = Viewport(MIN_COLUMN_WIDTH * 2 + COLUMN_GAP, 2)
    page_layout = layout_page(_page(4, description="d"), viewport, PRIMARY, HIGHLIGHT)

    painted = render_layout(page_layout, viewport).plain.split("\n")

    assert len(painted) == 2
    assert painted[0].startswith("Ctrl+0")
    assert painted[0][MIN_COLUMN_WIDTH + COLUMN_GAP:].startswith("Ctrl+2")
    assert painted[1][MIN_COLUMN_WIDTH + COLUMN_GAP:].startswith("Ctrl+3")
