"""Turn a line of input into a command invocation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .context import ShellContext
from .output import emit_error
from .parser import Cursor, extract_token

if TYPE_CHECKING:  # pragma: no cover
    from .commands import CommandRegistry

LOGGER = logging.getLogger("mspdbg.dispatcher")


def dispatch(ctx: ShellContext, registry: "CommandRegistry", line: str, interactive: bool = False) -> int:
    """Run the command named by the first word of *line*.

    Returns 1 only when the command name is unknown.  Once a command has
    been found the result is 0 whatever the handler returns; handlers report
    their own failures on the error sink.
    """
    name, cursor = extract_token(Cursor(line.rstrip()))
    if name is None:
        return 0
    command = registry.find(name)
    if command is None:
        emit_error(ctx, message=f'unknown command: {name} (try "help")')
        return 1
    with ctx.interactive_call(interactive):
        try:
            status = command.run(ctx, cursor)
        except SystemExit:
            raise
        except Exception as exc:
            LOGGER.exception("command %s failed", command.name)
            emit_error(ctx, message=f"{command.name}: {exc}")
        else:
            if status:
                LOGGER.debug("command %s returned %s", command.name, status)
    return 0


__all__ = ["dispatch"]
