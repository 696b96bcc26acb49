"""Page navigation state and the key bindings that drive it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Tuple


class Action(str, Enum):
    """Logical inputs understood by the navigation state machine."""

    NEXT = "next"
    PREVIOUS = "previous"
    QUIT = "quit"
    INTERRUPT = "interrupt"
    UNBOUND = "unbound"


class QuitReason(Enum):
    CLOSE_KEY_PRESSED = "pressed the close key"
    INTERRUPT = "received an interrupt"

    @property
    def text(self) -> str:
        return self.value


@dataclass(frozen=True)
class NavigationState:
    """Current page, optional selected entry, and whether the session ended."""

    current_page_index: int = 0
    selected_entry_index: Optional[int] = None
    quit_reason: Optional[QuitReason] = None

    @property
    def exited(self) -> bool:
        return self.quit_reason is not None


KEY_ACTIONS: Dict[str, Action] = {
    "right": Action.NEXT,
    "l": Action.NEXT,
    "tab": Action.NEXT,
    "pagedown": Action.NEXT,
    "left": Action.PREVIOUS,
    "h": Action.PREVIOUS,
    "shift+tab": Action.PREVIOUS,
    "pageup": Action.PREVIOUS,
    "q": Action.QUIT,
    "escape": Action.QUIT,
    "ctrl+c": Action.INTERRUPT,
}

_QUIT_REASONS = {
    Action.QUIT: QuitReason.CLOSE_KEY_PRESSED,
    Action.INTERRUPT: QuitReason.INTERRUPT,
}


def initial_state() -> NavigationState:
    return NavigationState()


def action_for_key(key: str) -> Action:
    """Map a key name to its action; unknown keys are ``UNBOUND``."""
    return KEY_ACTIONS.get(key, Action.UNBOUND)


def keys_for_action(action: Action) -> Tuple[str, ...]:
    return tuple(key for key, bound in KEY_ACTIONS.items() if bound is action)


def transition(state: NavigationState, action: Action, page_count: int) -> NavigationState:
    """Apply ``action`` and return the next state. Pages wrap around at both ends."""
    if state.exited:
        return state
    if action is Action.NEXT:
        return replace(
            state,
            current_page_index=(state.current_page_index + 1) % page_count,
            selected_entry_index=None,
        )
    if action is Action.PREVIOUS:
        return replace(
            state,
            current_page_index=(state.current_page_index - 1 + page_count) % page_count,
            selected_entry_index=None,
        )
    if action in _QUIT_REASONS:
        return replace(state, quit_reason=_QUIT_REASONS[action])
    return state
