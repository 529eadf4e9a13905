"""Symbol table command."""

from __future__ import annotations

from .base import Command
from ..context import ShellContext
from ..expr import ExpressionError
from ..output import emit_error, emit_result
from ..parser import Cursor, extract_token
from ..symbols import SymbolFileError


class SymCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "sym",
            "Show, define or load symbols",
            usage=(
                "sym\n"
                "    List all symbols.\n"
                "sym <name>\n"
                "    Show the value of a symbol.\n"
                "sym <name> <expression>\n"
                "    Define or redefine a symbol.\n"
                "sym load <filename>\n"
                "    Merge symbols from a JSON symbol file.\n"
            ),
        )

    def run(self, ctx: ShellContext, cursor: Cursor) -> int:
        name, cursor = extract_token(cursor)
        if name is None:
            for sym_name, value in ctx.symbols.items():
                emit_result(ctx, message=f"0x{value:04x}: {sym_name}")
            return 0
        if name.lower() == "load":
            return self._load(ctx, cursor)
        if not cursor:
            value = ctx.symbols.resolve(name)
            if value is None:
                emit_error(ctx, message=f"sym: no such symbol: {name}")
                return 1
            emit_result(ctx, message=f"0x{value:04x}: {name}")
            return 0
        try:
            value = ctx.evaluate(cursor.rest)
        except ExpressionError as exc:
            emit_error(ctx, message=f"sym: {exc}")
            return 1
        ctx.symbols.define(name, value)
        return 0

    def _load(self, ctx: ShellContext, cursor: Cursor) -> int:
        path, _ = extract_token(cursor)
        if not path:
            emit_error(ctx, message="sym: filename must be specified")
            return 1
        try:
            count = ctx.load_symbols(path)
        except SymbolFileError as exc:
            emit_error(ctx, message=f"sym: {exc}")
            return 1
        emit_result(ctx, message=f"{count} symbols loaded")
        return 0
