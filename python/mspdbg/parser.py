"""Lightweight argument parsing helpers for mspdbg."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Cursor:
    """Read position into a command line.

    The underlying text is never modified; consuming a token yields a new
    cursor further along the same string.
    """

    text: str
    pos: int = 0

    @property
    def rest(self) -> str:
        return self.text[self.pos :]

    @property
    def exhausted(self) -> bool:
        return not self.rest.strip()

    def __bool__(self) -> bool:
        return not self.exhausted


def extract_token(cursor: Cursor) -> Tuple[Optional[str], Cursor]:
    """Pull the next whitespace-delimited word off *cursor*.

    Returns the token and a cursor positioned at the start of the following
    word (trailing whitespace is skipped).  When nothing but whitespace is
    left the token is ``None`` and the cursor is moved to the end.
    """
    text = cursor.text
    end = len(text)
    start = cursor.pos
    while start < end and text[start].isspace():
        start += 1
    if start >= end:
        return None, Cursor(text, end)
    stop = start
    while stop < end and not text[stop].isspace():
        stop += 1
    token = text[start:stop]
    while stop < end and text[stop].isspace():
        stop += 1
    return token, Cursor(text, stop)


def split_words(line: str) -> list[str]:
    """Split *line* into every word ``extract_token`` would return."""
    words: list[str] = []
    cursor = Cursor(line)
    while True:
        token, cursor = extract_token(cursor)
        if token is None:
            return words
        words.append(token)
