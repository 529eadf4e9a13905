"""Exit command."""

from __future__ import annotations

from .base import Command
from ..context import ShellContext
from ..parser import Cursor


class ExitCommand(Command):
    def __init__(self) -> None:
        super().__init__("exit", "Exit the debugger", aliases=("quit",))

    def run(self, ctx: ShellContext, cursor: Cursor) -> int:
        raise SystemExit(0)
