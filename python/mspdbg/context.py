"""Shell context shared by the dispatcher and command handlers."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, TextIO

from .expr import evaluate
from .options import OptionRegistry, builtin_options
from .symbols import SymbolTable


@dataclass
class ShellContext:
    """Holds the option registry, symbol table and output sinks of one shell."""

    options: OptionRegistry = field(default_factory=OptionRegistry)
    symbols: SymbolTable = field(default_factory=SymbolTable)
    stdout: Optional[TextIO] = None
    stderr: Optional[TextIO] = None
    _interactive: bool = field(default=False, init=False, repr=False)

    @classmethod
    def create(cls, **kwargs) -> "ShellContext":
        """Build a context with the built-in options registered."""
        ctx = cls(**kwargs)
        for option in builtin_options():
            ctx.options.register(option)
        return ctx

    @property
    def out(self) -> TextIO:
        return self.stdout or sys.stdout

    @property
    def err(self) -> TextIO:
        return self.stderr or sys.stderr

    def is_interactive(self) -> bool:
        return self._interactive

    @contextmanager
    def interactive_call(self, interactive: bool) -> Iterator[None]:
        """Set the interactive flag for the duration of a handler call."""
        previous = self._interactive
        self._interactive = bool(interactive)
        try:
            yield
        finally:
            self._interactive = previous

    def resolve_symbol(self, name: str) -> Optional[int]:
        return self.symbols.resolve(name)

    def evaluate(self, text: str) -> int:
        return evaluate(text, self.resolve_symbol)

    def load_symbols(self, path: str) -> int:
        candidate = Path(path).expanduser()
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return self.symbols.load(candidate)
