"""mspdbg CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from .commands import CommandRegistry, build_registry
from .commands.read import run_script
from .context import ShellContext
from .dispatcher import dispatch
from .history import HistoryStore
from .output import emit_error
from .repl import ShellREPL
from .symbols import SymbolFileError

LOG = logging.getLogger("mspdbg.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mspdbg", description="MSP430 debugger shell")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("MSPDBG_LOG", "WARNING"),
        help="Logging level (default WARNING, or $MSPDBG_LOG)",
    )
    parser.add_argument("--symbols", help="JSON symbol file to load at start-up")
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        help="Execute a command non-interactively (repeatable; quote the command string)",
    )
    parser.add_argument("--script", help="Execute commands from a file non-interactively")
    parser.add_argument(
        "--history",
        type=Path,
        default=Path.home() / ".mspdbg-history",
        help="Path to command history file",
    )
    parser.add_argument("--history-limit", type=int, default=1000, help="Maximum history entries kept")
    parser.add_argument("--no-history", action="store_true", help="Do not read or write a history file")
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    ctx = ShellContext.create()
    registry = build_registry()
    if args.symbols:
        try:
            ctx.load_symbols(args.symbols)
        except SymbolFileError as exc:
            emit_error(ctx, message=f"mspdbg: {exc}")
            return 1
    if args.command or args.script:
        return _run_batch(ctx, registry, args.command, args.script)
    history = None if args.no_history else HistoryStore(str(args.history), limit=args.history_limit)
    repl = ShellREPL(ctx, registry, history_store=history)
    try:
        return repl.run()
    except SystemExit as exc:
        return int(exc.code or 0)


def _run_batch(ctx: ShellContext, registry: CommandRegistry, commands: List[str], script: str | None) -> int:
    rc = 0
    try:
        for command_line in commands:
            LOG.debug("running command: %s", command_line)
            if dispatch(ctx, registry, command_line, interactive=False):
                rc = 1
        if script and run_script(ctx, registry, script):
            rc = 1
    except SystemExit as exc:
        return int(exc.code or 0)
    return rc


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
