"""CLI entry point for Recall."""

import argparse
import sys
from pathlib import Path

from rich.text import Text

from ..config.settings import VALID_UIS, settings
from ..services.config_loader import default_config_path, read_config
from ..services.error_mapper import map_exception
from ..services.example_config import init_config
from . import app_runner
from .console import console, err_console
from .constants import TITLE, VERSION
from .logging import configure_logging, log_tui_event


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recall",
        description=f"{TITLE} - Recall keybinds, shortcuts, commands and more",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        help="Path to a different configuration file",
    )
    parser.add_argument(
        "--ui",
        choices=VALID_UIS,
        default=settings.ui,
        help="Select TUI runtime",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    subcommands = parser.add_subparsers(dest="command")
    subcommands.add_parser("init", help="Initialize example config")
    return parser


def _report_error(exc: BaseException) -> int:
    mapped = map_exception(exc)
    log_tui_event("command_failed", code=mapped.code, error=str(exc))
    err_console.print(Text.assemble(("Error: ", "bold red"), mapped.message), soft_wrap=True)
    if mapped.hint:
        err_console.print(Text(mapped.hint, style="dim"), soft_wrap=True)
    return mapped.exit_code


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        configure_logging()
    except OSError as exc:
        err_console.print(Text(f"Event log disabled: {exc}", style="dim"), soft_wrap=True)

    config_path = Path(args.config).expanduser() if args.config else default_config_path()
    log_tui_event("config_path_resolved", path=str(config_path), custom=bool(args.config))

    try:
        if args.command == "init":
            console.print(Text(init_config(config_path)), soft_wrap=True)
            log_tui_event("quitting", reason="init subcommand completed")
            return 0

        config = read_config(config_path)
        reason = app_runner.run_tui(config, ui=args.ui)
        log_tui_event("quitting", reason=reason.text)
        return 0
    except (Exception, KeyboardInterrupt) as exc:
        return _report_error(exc)


if __name__ == "__main__":
    sys.exit(main())
