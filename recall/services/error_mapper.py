"""Centralized exception mapping for consistent user-facing errors."""

from dataclasses import dataclass
from typing import Any

from ..tui.types import TerminalError
from .config_loader import ConfigError


@dataclass(frozen=True)
class ErrorMapping:
    """Normalized user-facing error payload used by the CLI."""

    code: str
    message: str
    exit_code: int
    hint: str = ""


def _extract_message(error: Any) -> str:
    if error is None:
        return ""
    return str(error)


def map_exception(error: Any) -> ErrorMapping:
    """Map raw exceptions into stable user-facing error semantics."""
    raw_message = _extract_message(error).strip()
    lowered = raw_message.lower()

    if isinstance(error, KeyboardInterrupt):
        return ErrorMapping(
            code="interrupted",
            message="Interrupted.",
            exit_code=130,
        )

    if isinstance(error, ConfigError):
        hint = ""
        if "missing" in lowered:
            hint = "Run `recall init` or pass --config FILE."
        elif "already exists" in lowered:
            hint = "Remove the file first or pass --config with another path."
        elif "not valid toml" in lowered:
            hint = "Check the file for unbalanced quotes or brackets."
        return ErrorMapping(
            code="config_error",
            message=raw_message or "Invalid config",
            exit_code=2,
            hint=hint,
        )

    if isinstance(error, TerminalError):
        return ErrorMapping(
            code="terminal_error",
            message=raw_message or "Terminal setup failed",
            exit_code=3,
            hint="Run recall from an interactive terminal.",
        )

    if isinstance(error, OSError) or any(
        token in lowered for token in ("broken pipe", "input/output error")
    ):
        return ErrorMapping(
            code="terminal_io_error",
            message=f"Terminal I/O failed: {raw_message}" if raw_message else "Terminal I/O failed",
            exit_code=1,
        )

    return ErrorMapping(
        code="internal_error",
        message=raw_message or "Internal error",
        exit_code=1,
    )
