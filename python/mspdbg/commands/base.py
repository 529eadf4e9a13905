"""Command base classes for mspdbg."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..context import ShellContext
from ..parser import Cursor


@dataclass
class Command:
    """Abstract command description.

    ``run`` receives the text that followed the command name as a
    :class:`Cursor` and pulls positional arguments off it with
    :func:`mspdbg.parser.extract_token`.
    """

    name: str
    description: str
    usage: str = ""
    aliases: Sequence[str] = field(default_factory=tuple)

    def run(self, ctx: ShellContext, cursor: Cursor) -> int:
        raise NotImplementedError("Command must implement run()")

    def matches(self, name: str) -> bool:
        needle = name.lower()
        return self.name.lower() == needle or any(alias.lower() == needle for alias in self.aliases)

    @property
    def help_text(self) -> str:
        text = self.usage or f"{self.name}\n    {self.description}\n"
        return text if text.endswith("\n") else text + "\n"
