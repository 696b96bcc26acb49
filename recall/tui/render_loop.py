"""Interactive session driver: read events, update navigation, redraw."""

from __future__ import annotations

from ..domain import Config
from .contracts import Terminal
from .frame import compose_frame
from .logging import log_tui_event
from .navigation import Action, QuitReason, action_for_key, initial_state, transition
from .types import ResizeEvent


def run_session(config: Config, terminal: Terminal) -> QuitReason:
    """Run one interactive session and return why it ended.

    The terminal is entered once and restored exactly once, whichever way the
    loop ends. Errors raised while drawing or reading propagate after the
    terminal has been restored.
    """
    page_count = config.page_count
    terminal.enter()
    log_tui_event("session_started", pages=list(config.page_names()))

    state = initial_state()
    try:
        viewport = terminal.size()
        while not state.exited:
            terminal.write_frame(compose_frame(config, state, viewport))
            event = terminal.read_event()

            if isinstance(event, ResizeEvent):
                viewport = event.viewport
                log_tui_event("terminal_resized", width=event.width, height=event.height)
                continue

            action = action_for_key(event.key)
            next_state = transition(state, action, page_count)
            if next_state != state:
                log_tui_event(
                    "navigation",
                    key=event.key,
                    action=action.value,
                    page=next_state.current_page_index,
                )
            state = next_state
    except KeyboardInterrupt:
        # SIGINT/SIGTERM delivered outside raw mode key handling
        state = transition(state, Action.INTERRUPT, page_count)
    finally:
        terminal.restore()
        log_tui_event("terminal_restored")

    log_tui_event("session_ended", reason=state.quit_reason.name)
    return state.quit_reason
