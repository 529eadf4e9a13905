"""Address expression evaluation.

An address expression is a run of terms joined by ``+`` and ``-``, evaluated
strictly left to right::

    main+0x10
    buf_end-buf_start
    0x200 - 4

Terms are decimal literals, ``0x`` hex literals or symbol names.  The result
is always reduced to a 16-bit address.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass, field
from typing import Callable, List, Optional

LOGGER = logging.getLogger("mspdbg.expr")

ADDRESS_MASK = 0xFFFF
TERM_CAPACITY = 63
TERM_PUNCTUATION = frozenset("_$.:")

Resolver = Callable[[str], Optional[int]]


class ExpressionError(ValueError):
    """Raised when a term of an address expression cannot be resolved."""

    def __init__(self, token: str) -> None:
        super().__init__(f"unknown token: {token}")
        self.token = token


def is_term_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch in TERM_PUNCTUATION)


def _parse_hex_prefix(digits: str) -> int:
    # strtol semantics: stop at the first non-hex character.
    run = 0
    while run < len(digits) and digits[run] in string.hexdigits:
        run += 1
    return int(digits[:run], 16) if run else 0


def term_value(term: str, resolve: Resolver) -> int:
    """Resolve a single term to an integer."""
    if term.isascii() and term.isdigit():
        return int(term)
    if term[:1] == "0" and term[1:2].lower() == "x":
        return _parse_hex_prefix(term[2:])
    value = resolve(term)
    if value is None:
        raise ExpressionError(term)
    return int(value)


@dataclass
class _TermState:
    resolve: Resolver
    buffer: List[str] = field(default_factory=list)
    total: int = 0
    sign: int = 1
    dropped: int = 0

    def push(self, ch: str) -> None:
        if len(self.buffer) < TERM_CAPACITY:
            self.buffer.append(ch)
        else:
            self.dropped += 1

    def flush(self) -> None:
        if not self.buffer:
            return
        term = "".join(self.buffer)
        self.buffer.clear()
        if self.dropped:
            LOGGER.debug("term truncated to %d chars (%d dropped): %s", TERM_CAPACITY, self.dropped, term)
            self.dropped = 0
        self.total += self.sign * term_value(term, self.resolve)


def evaluate(text: str, resolve: Resolver) -> int:
    """Evaluate *text* and return a 16-bit address.

    ``resolve`` maps a symbol name to its value, returning ``None`` when the
    name is unknown.  An unknown symbol raises :class:`ExpressionError` and no
    partial result is produced.
    """
    state = _TermState(resolve)
    for ch in text:
        if is_term_char(ch):
            state.push(ch)
            continue
        state.flush()
        if ch == "+":
            state.sign = 1
        elif ch == "-":
            state.sign = -1
    state.flush()
    return state.total & ADDRESS_MASK


def no_symbols(name: str) -> Optional[int]:
    return None


__all__ = [
    "ADDRESS_MASK",
    "ExpressionError",
    "Resolver",
    "TERM_CAPACITY",
    "evaluate",
    "is_term_char",
    "no_symbols",
    "term_value",
]
