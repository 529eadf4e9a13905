"""Help command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import Command
from ..context import ShellContext
from ..options import type_label
from ..output import emit_error, emit_result, emit_text, render_columns
from ..parser import Cursor, extract_token

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry


class HelpCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "help",
            "Show available commands",
            usage=(
                "help [command]\n"
                "    Without arguments, displays a list of commands. With a command\n"
                "    or option name as an argument, displays help for that topic.\n"
            ),
        )
        self._registry: CommandRegistry | None = None

    def bind(self, registry: "CommandRegistry") -> None:
        self._registry = registry

    def run(self, ctx: ShellContext, cursor: Cursor) -> int:
        registry = self._registry
        if not registry:
            return 1
        topic, _ = extract_token(cursor)
        if topic:
            return self._show_topic(ctx, registry, topic)
        self.show_listing(ctx, registry)
        return 0

    def show_listing(self, ctx: ShellContext, registry: "CommandRegistry") -> None:
        emit_result(ctx, message="Available commands:")
        for line in render_columns(registry.names()):
            emit_result(ctx, message=line)
        emit_result(ctx, message='Type "help <command>" for more information.')
        if ctx.is_interactive():
            emit_result(ctx, message="Press Ctrl+D to quit.")

    def _show_topic(self, ctx: ShellContext, registry: "CommandRegistry", topic: str) -> int:
        command = registry.find(topic)
        option = ctx.options.find(topic)
        if command is None and option is None:
            emit_error(ctx, message=f"help: unknown command: {topic}")
            return 1
        if command is not None:
            emit_result(ctx, message=f"COMMAND: {command.name}")
            emit_text(ctx, command.help_text)
            if option is not None:
                emit_result(ctx)
        if option is not None:
            emit_result(ctx, message=f"OPTION: {option.name} ({type_label(option.kind)})")
            emit_text(ctx, option.help if option.help.endswith("\n") else option.help + "\n")
        return 0
