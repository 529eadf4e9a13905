"""Address expression evaluation command."""

from __future__ import annotations

from .base import Command
from ..context import ShellContext
from ..expr import ExpressionError
from ..output import emit_error, emit_result
from ..parser import Cursor


class EvalCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "=",
            "Evaluate an address expression",
            usage=(
                "= <expression>\n"
                "    Evaluate an address expression and show both its hexadecimal and\n"
                "    decimal value. Terms may be decimal numbers, 0x-prefixed hex\n"
                "    numbers or symbol names, joined by + and -.\n"
            ),
            aliases=("eval",),
        )

    def run(self, ctx: ShellContext, cursor: Cursor) -> int:
        text = cursor.rest
        if not text:
            emit_error(ctx, message="=: an expression is required")
            return 1
        try:
            value = ctx.evaluate(text)
        except ExpressionError as exc:
            emit_error(ctx, message=str(exc))
            return 1
        emit_result(ctx, message=f"0x{value:04x} ({value})")
        return 0
