"""prompt_toolkit completer for mspdbg."""

from __future__ import annotations

from typing import Iterable, List

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from .commands import CommandRegistry
from .context import ShellContext
from .expr import is_term_char
from .parser import split_words

OPTION_COMMANDS = {"opt", "help"}
MAX_CANDIDATES = 64


class ShellCompleter(Completer):
    """Completes command names, option names and symbols."""

    def __init__(self, ctx: ShellContext, registry: CommandRegistry) -> None:
        self.ctx = ctx
        self.registry = registry

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text = document.text_before_cursor
        words = split_words(text)
        if not text or text[-1].isspace():
            words.append("")
        if len(words) <= 1:
            prefix = words[0] if words else ""
            yield from self._emit(self._command_names(), prefix)
            return
        command = self.registry.find(words[0])
        if command is None:
            return
        if command.name in OPTION_COMMANDS and len(words) == 2:
            candidates = [option.name for option in self.ctx.options]
            if command.name == "help":
                candidates.extend(self._command_names())
            yield from self._emit(candidates, words[-1])
            return
        term = self._current_term(text)
        yield from self._emit(self.ctx.symbols.complete(term)[:MAX_CANDIDATES], term)

    def _command_names(self) -> List[str]:
        names: List[str] = []
        for command in self.registry.list_commands():
            names.append(command.name)
            names.extend(command.aliases)
        return names

    @staticmethod
    def _current_term(text: str) -> str:
        start = len(text)
        while start > 0 and is_term_char(text[start - 1]):
            start -= 1
        return text[start:]

    @staticmethod
    def _emit(candidates: Iterable[str], prefix: str) -> Iterable[Completion]:
        needle = prefix.lower()
        for entry in sorted(dict.fromkeys(candidates)):
            if entry.lower().startswith(needle):
                yield Completion(entry, start_position=-len(prefix))
