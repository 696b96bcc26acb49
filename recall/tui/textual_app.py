"""Textual-based TUI runtime for Recall."""

from __future__ import annotations

from typing import List

from textual.app import App, ComposeResult
from textual.binding import Binding

from ..domain import Config
from .logging import log_tui_event
from .navigation import (
    Action,
    NavigationState,
    QuitReason,
    initial_state,
    keys_for_action,
    transition,
)
from .widgets import PageView

_BINDING_LABELS = (
    (Action.NEXT, "Next Page", True),
    (Action.PREVIOUS, "Previous Page", True),
    (Action.QUIT, "Close", True),
    (Action.INTERRUPT, "Interrupt", False),
)


def navigation_bindings() -> List[Binding]:
    """One priority binding per action, built from the shared key map."""
    return [
        Binding(
            ",".join(keys_for_action(action)),
            f"navigate('{action.value}')",
            label,
            show=show,
            priority=True,
        )
        for action, label, show in _BINDING_LABELS
    ]


class RecallTextualApp(App[QuitReason]):
    """Pages of shortcuts in a Textual app, driven by the same navigation rules."""

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = navigation_bindings()

    def __init__(self, config: Config) -> None:
        super().__init__()
        self._config = config
        self.navigation: NavigationState = initial_state()

    def compose(self) -> ComposeResult:
        yield PageView(self._config, id="page-view")

    def on_mount(self) -> None:
        log_tui_event("session_started", pages=list(self._config.page_names()), ui="textual")

    def on_resize(self) -> None:
        log_tui_event("terminal_resized", width=self.size.width, height=self.size.height)

    def action_navigate(self, action_name: str) -> None:
        action = Action(action_name)
        next_state = transition(self.navigation, action, self._config.page_count)
        if next_state == self.navigation:
            return
        log_tui_event("navigation", action=action.value, page=next_state.current_page_index)
        self.navigation = next_state
        self.query_one("#page-view", PageView).state = next_state
        if next_state.exited:
            self.exit(next_state.quit_reason)
