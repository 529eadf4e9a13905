"""Option inspection and assignment command."""

from __future__ import annotations

from .base import Command
from ..context import ShellContext
from ..options import OptionParseError, display_option, parse_option
from ..output import emit_error, emit_result
from ..parser import Cursor, extract_token


class OptCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "opt",
            "Query or set option variables",
            usage=(
                "opt [name] [value]\n"
                "    Query or set option variables. With no arguments, displays all\n"
                "    available options. With one argument, displays that option. With\n"
                "    a name and a value, parses the value and stores it.\n"
                "\n"
                "    Boolean values: anything starting with a non-zero digit, 't', 'y'\n"
                "    or 'on' is true. Numeric values are address expressions.\n"
            ),
        )

    def run(self, ctx: ShellContext, cursor: Cursor) -> int:
        name, cursor = extract_token(cursor)
        option = None
        if name:
            option = ctx.options.find(name)
            if option is None:
                emit_error(ctx, message=f"opt: no such option: {name}")
                return 1
        if option is not None and cursor:
            # The value is the remainder of the line, so text options may contain spaces.
            word = cursor.rest
            try:
                parse_option(option, word, ctx.resolve_symbol)
            except OptionParseError as exc:
                emit_error(ctx, message=exc.reason)
                emit_error(ctx, message=f"opt: {exc}")
                return 1
            return 0
        if option is not None:
            emit_result(ctx, message=display_option(option))
            return 0
        for entry in ctx.options:
            emit_result(ctx, message=display_option(entry))
        return 0
