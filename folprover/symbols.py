"""Symbol identifiers and name tables for predicates, variables and constants."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SymbolType(enum.Enum):
    """Kind of a term symbol."""

    CONSTANT = 0
    VARIABLE = 1


@dataclass(frozen=True)
class SymbolId:
    """A term symbol: its kind and its index in the matching table."""

    type: SymbolType
    id: int


class SymbolTable:
    """Interns names, handing out consecutive integer ids from zero."""

    def __init__(self) -> None:
        self._names: list[str] = []
        self._ids: dict[str, int] = {}

    def insert(self, name: str) -> int:
        """Return the id of ``name``, adding it if it is new."""
        existing = self._ids.get(name)
        if existing is not None:
            return existing
        new_id = len(self._names)
        self._names.append(name)
        self._ids[name] = new_id
        return new_id

    def get(self, symbol_id: int) -> str:
        """Return the name for ``symbol_id``, or an empty string if unknown."""
        if 0 <= symbol_id < len(self._names):
            return self._names[symbol_id]
        return ""

    def get_id(self, name: str) -> int | None:
        """Return the id of ``name``, or None if it was never inserted."""
        return self._ids.get(name)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __iter__(self):
        return iter(self._names)