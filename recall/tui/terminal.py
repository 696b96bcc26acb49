"""POSIX terminal backend: raw-mode keyboard input, rich output on the alternate screen."""

from __future__ import annotations

import codecs
import os
import selectors
import signal
import sys
import termios
import tty
from collections import deque
from contextlib import ExitStack
from typing import Deque, List, Optional, TextIO, Tuple

from rich.console import Console, RenderableType

from .types import KeyEvent, ResizeEvent, TerminalError, TerminalEvent, Viewport

_ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1bOP": "f1",
    "\x1bOQ": "f2",
    "\x1bOR": "f3",
    "\x1bOS": "f4",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageup",
    "\x1b[6~": "pagedown",
    "\x1b[Z": "shift+tab",
}

# seconds to wait for the rest of a sequence after a bare ESC
ESCAPE_TIMEOUT = 0.05

_CONTROL_KEYS = {
    "\t": "tab",
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
}


def _control_key_name(char: str) -> str:
    if char in _CONTROL_KEYS:
        return _CONTROL_KEYS[char]
    if ord(char) < 32:
        return f"ctrl+{chr(ord(char) + 96)}"
    return char


def _match_escape(data: str, start: int) -> Optional[Tuple[str, int]]:
    """Name the ESC-prefixed key at ``start``, or None when it is still incomplete."""
    if start + 1 >= len(data):
        return None
    follower = data[start + 1]

    if follower == "[":
        # CSI: parameters then one final byte in @..~
        end = start + 2
        while end < len(data) and not "@" <= data[end] <= "~":
            end += 1
        if end >= len(data):
            return None
        sequence = data[start : end + 1]
        return _ESCAPE_SEQUENCES.get(sequence, "unknown"), len(sequence)

    if follower == "O":
        if start + 2 >= len(data):
            return None
        sequence = data[start : start + 3]
        return _ESCAPE_SEQUENCES.get(sequence, "unknown"), 3

    if follower == "\x1b":
        return "escape", 1

    return f"alt+{_control_key_name(follower)}", 2


def _flush_incomplete(rest: str) -> List[str]:
    """Name a trailing fragment once no more bytes are coming."""
    if not rest:
        return []
    if rest == "\x1b":
        return ["escape"]
    if len(rest) == 2:
        return [f"alt+{rest[1]}"]
    return ["unknown"]


def split_keys(data: str) -> Tuple[List[str], str]:
    """Split raw input into complete key names and an unfinished escape sequence."""
    keys: List[str] = []
    index = 0
    while index < len(data):
        if data[index] == "\x1b":
            match = _match_escape(data, index)
            if match is None:
                return keys, data[index:]
            name, length = match
        else:
            name, length = _control_key_name(data[index]), 1
        keys.append(name)
        index += length
    return keys, ""


def decode_keys(data: str) -> List[str]:
    """Split raw terminal input into key names (``q``, ``left``, ``ctrl+c`` ...)."""
    keys, rest = split_keys(data)
    return keys + _flush_incomplete(rest)


def _raise_interrupt(signum, frame):
    raise KeyboardInterrupt


class PosixTerminal:
    """The controlling terminal, owned exclusively for one session."""

    def __init__(self, console: Optional[Console] = None, stdin: Optional[TextIO] = None) -> None:
        self.console = console or Console(highlight=False)
        self._stdin = stdin or sys.stdin
        self._fd: Optional[int] = None
        self._stack: Optional[ExitStack] = None
        self._selector: Optional[selectors.BaseSelector] = None
        self._wake_fds: Optional[Tuple[int, int]] = None
        self._pending: Deque[str] = deque()
        self._incomplete = ""
        self.escape_timeout = ESCAPE_TIMEOUT
        self._decoder = codecs.getincrementaldecoder("utf-8")("replace")

    def enter(self) -> None:
        if not self._stdin.isatty():
            raise TerminalError("Recall needs an interactive terminal; stdin is not a TTY.")
        if not self.console.is_terminal:
            raise TerminalError("Recall needs an interactive terminal; stdout is not a TTY.")

        fd = self._stdin.fileno()
        stack = ExitStack()
        try:
            saved_attrs = termios.tcgetattr(fd)
            tty.setraw(fd, termios.TCSAFLUSH)
            stack.callback(termios.tcsetattr, fd, termios.TCSAFLUSH, saved_attrs)

            stack.enter_context(self._signal_handlers())

            selector = selectors.DefaultSelector()
            stack.callback(selector.close)
            selector.register(fd, selectors.EVENT_READ)
            selector.register(self._wake_fds[0], selectors.EVENT_READ)

            self.console.set_alt_screen(True)
            stack.callback(self.console.set_alt_screen, False)
            self.console.show_cursor(False)
            stack.callback(self.console.show_cursor, True)
        except (termios.error, OSError, ValueError) as exc:
            stack.close()
            raise TerminalError(f"Could not enter interactive terminal mode: {exc}") from exc

        self._fd = fd
        self._selector = selector
        self._stack = stack

    def _signal_handlers(self) -> ExitStack:
        stack = ExitStack()
        read_fd, write_fd = os.pipe()
        os.set_blocking(write_fd, False)
        stack.callback(os.close, read_fd)
        stack.callback(os.close, write_fd)
        self._wake_fds = (read_fd, write_fd)

        def on_resize(signum, frame):
            try:
                os.write(write_fd, b"\0")
            except BlockingIOError:
                pass

        for signum, handler in ((signal.SIGWINCH, on_resize), (signal.SIGTERM, _raise_interrupt)):
            previous = signal.signal(signum, handler)
            stack.callback(signal.signal, signum, previous)
        return stack

    def restore(self) -> None:
        if self._stack is None:
            return
        stack, self._stack = self._stack, None
        self._selector = None
        self._fd = None
        self._wake_fds = None
        self._pending.clear()
        self._incomplete = ""
        stack.close()

    def size(self) -> Viewport:
        width, height = self.console.size
        return Viewport(width, height)

    def read_event(self) -> TerminalEvent:
        if self._selector is None or self._fd is None:
            raise TerminalError("Terminal is not in interactive mode.")
        while not self._pending:
            ready = self._selector.select(self.escape_timeout if self._incomplete else None)
            if not ready:
                # nothing followed within the timeout: the fragment was typed as-is
                self._pending.extend(_flush_incomplete(self._incomplete))
                self._incomplete = ""
                continue
            for key, _ in ready:
                if key.fd == self._wake_fds[0]:
                    os.read(self._wake_fds[0], 1024)
                    viewport = self.size()
                    return ResizeEvent(viewport.width, viewport.height)
                data = os.read(self._fd, 1024)
                if not data:
                    raise TerminalError("Terminal input stream closed.")
                keys, self._incomplete = split_keys(self._incomplete + self._decoder.decode(data))
                self._pending.extend(keys)
        return KeyEvent(self._pending.popleft())

    def write_frame(self, frame: RenderableType) -> None:
        self.console.update_screen(frame)
