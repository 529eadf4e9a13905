"""Command registry for mspdbg."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .base import Command
from .expression import EvalCommand
from .exit import ExitCommand
from .help import HelpCommand
from .opt import OptCommand
from .read import ReadCommand
from .sym import SymCommand


class CommandRegistry:
    """Ordered command table; lookups are case-insensitive and first match wins."""

    def __init__(self, commands: Optional[Iterable[Command]] = None) -> None:
        self._ordered: List[Command] = []
        for command in commands or ():
            self.register(command)

    def register(self, command: Command) -> None:
        self._ordered.append(command)

    def find(self, name: str) -> Optional[Command]:
        for command in self._ordered:
            if command.matches(name):
                return command
        return None

    def list_commands(self) -> Iterable[Command]:
        return tuple(self._ordered)

    def names(self) -> List[str]:
        return [command.name for command in self._ordered]


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()
    commands = [
        EvalCommand(),
        ExitCommand(),
        HelpCommand(),
        OptCommand(),
        ReadCommand(),
        SymCommand(),
    ]
    for command in commands:
        registry.register(command)
        bind = getattr(command, "bind", None)
        if callable(bind):
            bind(registry)
    return registry


__all__ = ["Command", "CommandRegistry", "build_registry"]
