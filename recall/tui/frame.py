"""Full-screen frame composition for the current navigation state."""

from __future__ import annotations

from rich.color import Color
from rich.console import RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from ..domain import Config
from .colors import resolve_color
from .constants import LEGEND
from .layout import layout_page, render_layout
from .navigation import NavigationState
from .types import Viewport

# border plus one cell of horizontal padding on each side
HORIZONTAL_CHROME = 4
VERTICAL_CHROME = 2


def page_title(name: str, highlight: Color) -> Text:
    return Text.assemble((f"[ {name} ]", Style(color=highlight, bold=True)), end="")


def build_legend(page_number: int, page_count: int, primary: Color, highlight: Color) -> Text:
    key_style = Style(color=highlight)
    label_style = Style(color=primary)
    legend = Text(no_wrap=True, end="")
    for key_hint, label in LEGEND:
        legend.append(f" {key_hint} ", style=key_style)
        legend.append(label, style=label_style)
    legend.append(f" [Page {page_number} of {page_count}] ", style=key_style)
    return legend


def inner_viewport(viewport: Viewport) -> Viewport:
    """Area left for entries once the border and padding are drawn."""
    return Viewport(
        max(viewport.width - HORIZONTAL_CHROME, 0),
        max(viewport.height - VERTICAL_CHROME, 0),
    )


def compose_frame(config: Config, state: NavigationState, viewport: Viewport) -> RenderableType:
    """Build the whole screen for ``state``; regenerated on every draw."""
    page = config.pages[state.current_page_index]
    primary = resolve_color(config.primary_color)
    highlight = resolve_color(config.highlight_color)
    title = page_title(page.name, highlight)

    if viewport.width <= HORIZONTAL_CHROME or viewport.height <= VERTICAL_CHROME:
        # too small for a border; show just the page name
        title.truncate(max(viewport.width, 0), overflow="ellipsis")
        return title

    body_viewport = inner_viewport(viewport)
    page_layout = layout_page(
        page,
        body_viewport,
        primary,
        highlight,
        selected_entry_index=state.selected_entry_index,
    )
    return Panel(
        render_layout(page_layout, body_viewport),
        title=title,
        subtitle=build_legend(
            state.current_page_index + 1, config.page_count, primary, highlight
        ),
        border_style=Style(color=primary),
        padding=(0, 1),
        width=viewport.width,
        height=viewport.height,
    )
