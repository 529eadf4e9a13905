"""Output helpers for mspdbg."""

from __future__ import annotations

from typing import Iterable, Sequence

from .context import ShellContext


def emit_result(ctx: ShellContext, message: str = "") -> None:
    """Write a line to the normal output sink."""
    print(message, file=ctx.out)


def emit_text(ctx: ShellContext, text: str) -> None:
    """Write pre-formatted text without adding a newline."""
    ctx.out.write(text)


def emit_error(ctx: ShellContext, message: str) -> None:
    """Write a single diagnostic line to the error sink."""
    print(message, file=ctx.err)


def render_columns(names: Sequence[str], *, width: int = 72, indent: str = "    ") -> Iterable[str]:
    """Lay *names* out column-major in rows that fit within *width*."""
    if not names:
        return []
    cell = max(len(name) for name in names) + 2
    cols = max(1, width // cell)
    rows = (len(names) + cols - 1) // cols
    lines = []
    for row in range(rows):
        cells = []
        for col in range(cols):
            index = col * rows + row
            if index >= len(names):
                break
            cells.append(f"{names[index]:<{cell}}")
        lines.append(indent + "".join(cells))
    return lines


__all__ = ["emit_error", "emit_result", "emit_text", "render_columns"]
