"""Script execution command."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .base import Command
from ..context import ShellContext
from ..dispatcher import dispatch
from ..output import emit_error
from ..parser import Cursor, extract_token

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry

LOGGER = logging.getLogger("mspdbg.commands.read")


def run_script(ctx: ShellContext, registry: "CommandRegistry", path: str) -> int:
    """Dispatch every line of *path* non-interactively.

    Returns 1 if the file cannot be read or any line names an unknown
    command, 0 otherwise.
    """
    try:
        text = Path(path).expanduser().read_text(encoding="utf-8")
    except OSError as exc:
        emit_error(ctx, message=f"read: {path}: {exc.strerror or exc}")
        return 1
    rc = 0
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        LOGGER.debug("%s:%d: %s", path, lineno, stripped)
        if dispatch(ctx, registry, line, interactive=False):
            rc = 1
    return rc


class ReadCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "read",
            "Read commands from a file and evaluate them",
            usage=(
                "read <filename>\n"
                "    Read commands from a file and evaluate them, one per line.\n"
                "    Blank lines and lines starting with # are ignored.\n"
            ),
        )
        self._registry: CommandRegistry | None = None

    def bind(self, registry: "CommandRegistry") -> None:
        self._registry = registry

    def run(self, ctx: ShellContext, cursor: Cursor) -> int:
        if not self._registry:
            return 1
        path, _ = extract_token(cursor)
        if not path:
            emit_error(ctx, message="read: filename must be specified")
            return 1
        return run_script(ctx, self._registry, path)
