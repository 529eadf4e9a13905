"""Interactive REPL for mspdbg."""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .commands import CommandRegistry
from .completion import ShellCompleter
from .context import ShellContext
from .dispatcher import dispatch
from .history import HistoryStore

LOGGER = logging.getLogger("mspdbg.repl")

PROMPT = "(mspdbg) "

LineSource = Callable[[str], str]


class ShellREPL:
    """Reads lines and dispatches them with the interactive flag set.

    A prompt_toolkit session is used when stdin is a terminal; otherwise
    lines are read with ``input()`` so piped input works.
    """

    def __init__(
        self,
        ctx: ShellContext,
        registry: CommandRegistry,
        *,
        history_store: Optional[HistoryStore] = None,
        read_line: Optional[LineSource] = None,
    ) -> None:
        self.ctx = ctx
        self.registry = registry
        self.history_store = history_store
        self._read_line = read_line

    def run(self) -> int:
        print(file=self.ctx.out)
        dispatch(self.ctx, self.registry, "help", interactive=True)
        read_line = self._read_line or self._default_reader()
        while True:
            try:
                line = read_line(PROMPT)
            except (EOFError, KeyboardInterrupt):
                print(file=self.ctx.out)
                return 0
            self._record_history(line)
            dispatch(self.ctx, self.registry, line, interactive=True)

    def _default_reader(self) -> LineSource:
        if not sys.stdin.isatty():
            return input
        history = InMemoryHistory()
        if self.history_store:
            for entry in self.history_store.snapshot():
                history.append_string(entry)
        session = PromptSession(
            history=history,
            completer=ShellCompleter(self.ctx, self.registry),
            complete_while_typing=False,
        )
        return session.prompt

    def _record_history(self, line: str) -> None:
        if self.history_store:
            self.history_store.append(line)
