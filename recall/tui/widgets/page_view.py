"""Page view widget for the Textual runtime."""

from __future__ import annotations

from rich.console import RenderableType
from textual.reactive import reactive
from textual.widget import Widget

from ...domain import Config
from ..frame import compose_frame
from ..navigation import NavigationState
from ..types import Viewport


class PageView(Widget):
    """Draws the current page; repaints when the state or its size changes."""

    DEFAULT_CSS = """
    PageView {
        width: 1fr;
        height: 1fr;
    }
    """

    state = reactive(NavigationState())

    def __init__(self, config: Config, **kwargs) -> None:
        super().__init__(**kwargs)
        self._config = config

    def render(self) -> RenderableType:
        viewport = Viewport(self.size.width, self.size.height)
        return compose_frame(self._config, self.state, viewport)
