"""Literals and ground facts over interned predicates and symbols."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from .symbols import SymbolId

if TYPE_CHECKING:
    from .knowledge_base import KnowledgeBase

EMPTY_PREDICATE_ID = -1


def _render_atom(kb: "KnowledgeBase", predicate_id: int, args: Iterable[SymbolId]) -> str:
    names = ", ".join(kb.symbol_name(arg) for arg in args)
    return f"{kb.predicate_name(predicate_id)}({names})"


@dataclass(frozen=True)
class Literal:
    """A possibly negated predicate applied to a tuple of symbols."""

    predicate_id: int
    argument_ids: tuple[SymbolId, ...] = ()
    negated: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "argument_ids", tuple(self.argument_ids))

    def is_empty(self) -> bool:
        """True for the special literal that stands for no predicate."""
        return self.predicate_id == EMPTY_PREDICATE_ID

    def to_string(self, kb: "KnowledgeBase") -> str:
        prefix = "¬" if self.negated else ""
        return prefix + _render_atom(kb, self.predicate_id, self.argument_ids)


def empty_literal() -> Literal:
    """Return the special empty literal."""
    return Literal(EMPTY_PREDICATE_ID, (), False)


@dataclass(frozen=True)
class Fact:
    """A positive atom asserted as true."""

    predicate_id: int
    argument_ids: tuple[SymbolId, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "argument_ids", tuple(self.argument_ids))

    def to_string(self, kb: "KnowledgeBase") -> str:
        return _render_atom(kb, self.predicate_id, self.argument_ids)