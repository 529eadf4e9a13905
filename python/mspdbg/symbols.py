"""Symbol table helpers for mspdbg."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

LOGGER = logging.getLogger("mspdbg.symbols")


class SymbolFileError(Exception):
    """Raised when a symbol file cannot be read or decoded."""


def _coerce_address(value) -> Optional[int]:
    try:
        number = int(value, 0) if isinstance(value, str) else int(value)
    except (TypeError, ValueError):
        return None
    return number & 0xFFFF


class SymbolTable:
    """Maps symbol names to 16-bit addresses."""

    def __init__(self, symbols: Optional[Mapping[str, int]] = None) -> None:
        self._symbols: Dict[str, int] = {}
        if symbols:
            for name, value in symbols.items():
                self.define(name, value)

    def define(self, name: str, value: int) -> None:
        self._symbols[name] = int(value) & 0xFFFF

    def resolve(self, name: str) -> Optional[int]:
        return self._symbols.get(name)

    def items(self) -> List[Tuple[str, int]]:
        return sorted(self._symbols.items(), key=lambda item: (item[1], item[0]))

    def complete(self, prefix: str = "") -> List[str]:
        if not prefix:
            return sorted(self._symbols)
        needle = prefix.lower()
        return sorted(name for name in self._symbols if name.lower().startswith(needle))

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def load(self, path: Path) -> int:
        """Merge symbols from a JSON symbol file; returns the count of new names.

        Accepted layouts are a flat ``{"name": address}`` object, or a
        ``symbols`` block holding ``functions`` / ``variables`` lists and a
        ``labels`` object keyed by address.
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SymbolFileError(f"{path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SymbolFileError(f"{path}: expected a JSON object")
        before = len(self._symbols)
        block = data.get("symbols")
        if isinstance(block, dict):
            self._load_entries(block.get("functions") or [])
            self._load_entries(block.get("variables") or [])
            self._load_labels(block.get("labels") or {})
        elif isinstance(block, list):
            self._load_entries(block)
        else:
            for name, value in data.items():
                addr = _coerce_address(value)
                if addr is not None:
                    self._symbols[name] = addr
        loaded = len(self._symbols) - before
        LOGGER.info("loaded %d symbols from %s", loaded, path)
        return loaded

    def _load_entries(self, entries: Sequence[dict]) -> None:
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            name = entry.get("name")
            addr = _coerce_address(entry.get("address", entry.get("value")))
            if not isinstance(name, str) or addr is None:
                continue
            self._symbols[name] = addr

    def _load_labels(self, labels: Mapping[str, Iterable[str]]) -> None:
        if not isinstance(labels, dict):
            return
        for key, names in labels.items():
            addr = _coerce_address(key)
            if addr is None or not isinstance(names, list):
                continue
            for name in names:
                if isinstance(name, str):
                    self._symbols[name] = addr
