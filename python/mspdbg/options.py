"""Typed runtime options for mspdbg."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Union

from .expr import ADDRESS_MASK, ExpressionError, Resolver, evaluate, no_symbols

LOGGER = logging.getLogger("mspdbg.options")

# Text values are stored in a fixed buffer that keeps one slot for the terminator.
TEXT_CAPACITY = 128


class OptionKind(Enum):
    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    TEXT = "text"


@dataclass(frozen=True)
class BooleanValue:
    value: bool = False


@dataclass(frozen=True)
class NumericValue:
    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= ADDRESS_MASK:
            raise ValueError(f"numeric option value out of range: {self.value}")


@dataclass(frozen=True)
class TextValue:
    value: str = ""

    def __post_init__(self) -> None:
        if len(self.value) >= TEXT_CAPACITY:
            raise ValueError(f"text option value exceeds {TEXT_CAPACITY - 1} characters")


OptionValue = Union[BooleanValue, NumericValue, TextValue]

_VALUE_TYPES = {
    OptionKind.BOOLEAN: BooleanValue,
    OptionKind.NUMERIC: NumericValue,
    OptionKind.TEXT: TextValue,
}


class OptionError(Exception):
    """Base class for option failures."""


class UnknownOptionError(OptionError):
    def __init__(self, name: str) -> None:
        super().__init__(f"no such option: {name}")
        self.name = name


class OptionParseError(OptionError):
    def __init__(self, option: "Option", word: str, reason: str) -> None:
        super().__init__(f"can't parse option: {word}")
        self.option = option
        self.word = word
        self.reason = reason


@dataclass
class Option:
    """A named, typed, mutable setting."""

    name: str
    kind: OptionKind
    help: str = ""
    value: Optional[OptionValue] = None

    def __post_init__(self) -> None:
        expected = _VALUE_TYPES[self.kind]
        if self.value is None:
            self.value = expected()
        elif not isinstance(self.value, expected):
            raise ValueError(f"option {self.name}: {self.kind.value} option cannot hold {type(self.value).__name__}")

    @property
    def data(self):
        """Plain Python value (bool, int or str)."""
        return self.value.value


def type_label(kind: object) -> str:
    if isinstance(kind, OptionKind):
        return kind.value
    return "unknown"


def parse_boolean(word: str) -> bool:
    """Loose single-pass truth test.

    Anything starting with a non-zero digit, ``t``, ``y`` or ``on`` is true;
    everything else, including the empty string, is false.
    """
    if not word:
        return False
    first = word[0]
    return (first.isdigit() and first > "0") or first in ("t", "y") or word.startswith("on")


def parse_text(word: str) -> str:
    limit = TEXT_CAPACITY - 1
    if len(word) > limit:
        LOGGER.debug("text value truncated from %d to %d chars", len(word), limit)
        return word[:limit]
    return word


def parse_option(option: Option, word: str, resolve: Resolver = no_symbols) -> None:
    """Parse *word* according to the option's kind and store the result.

    Raises :class:`OptionParseError` if a numeric value does not evaluate;
    the stored value is unchanged in that case.
    """
    if option.kind is OptionKind.BOOLEAN:
        option.value = BooleanValue(parse_boolean(word))
    elif option.kind is OptionKind.NUMERIC:
        try:
            option.value = NumericValue(evaluate(word, resolve))
        except ExpressionError as exc:
            raise OptionParseError(option, word, str(exc)) from exc
    elif option.kind is OptionKind.TEXT:
        option.value = TextValue(parse_text(word))
    LOGGER.debug("option %s set to %r", option.name, option.data)


def format_option(option: Option) -> str:
    value = option.value
    if isinstance(value, BooleanValue):
        return "true" if value.value else "false"
    if isinstance(value, NumericValue):
        return f"0x{value.value:x} ({value.value})"
    return value.value


def display_option(option: Option) -> str:
    return f"{option.name:>32} = {format_option(option)}"


class OptionRegistry:
    """Holds registered options; the most recently registered comes first."""

    def __init__(self) -> None:
        self._options: List[Option] = []

    def register(self, option: Option) -> Option:
        self._options.insert(0, option)
        return option

    def find(self, name: str) -> Optional[Option]:
        needle = name.lower()
        for option in self._options:
            if option.name.lower() == needle:
                return option
        return None

    def require(self, name: str) -> Option:
        option = self.find(name)
        if option is None:
            raise UnknownOptionError(name)
        return option

    def set(self, name: str, word: str, resolve: Resolver = no_symbols) -> Option:
        option = self.require(name)
        parse_option(option, word, resolve)
        return option

    def get(self, name: str):
        return self.require(name).data

    def __iter__(self) -> Iterator[Option]:
        return iter(list(self._options))

    def __len__(self) -> int:
        return len(self._options)


def builtin_options() -> List[Option]:
    return [
        Option("color", OptionKind.BOOLEAN, help="Colorize disassembly output.\n"),
    ]


__all__ = [
    "BooleanValue",
    "NumericValue",
    "Option",
    "OptionError",
    "OptionKind",
    "OptionParseError",
    "OptionRegistry",
    "OptionValue",
    "TEXT_CAPACITY",
    "TextValue",
    "UnknownOptionError",
    "builtin_options",
    "display_option",
    "format_option",
    "parse_boolean",
    "parse_option",
    "type_label",
]
