"""Clauses: disjunctions of literals."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Iterable, Iterator

from .literal import Literal

if TYPE_CHECKING:
    from .knowledge_base import KnowledgeBase

SELF_LOOP_PREDICATE = "E"


class Clause:
    """A disjunction of literals, tracking whether it became a tautology."""

    def __init__(self, literals: Iterable[Literal] = ()) -> None:
        self._literals: list[Literal] = []
        self._by_predicate: dict[int, int] = {}
        self._tautology = False
        for literal in literals:
            self.add_literal(literal)

    @property
    def literals(self) -> tuple[Literal, ...]:
        return tuple(self._literals)

    def _has_opposite(self, literal: Literal) -> bool:
        index = self._by_predicate.get(literal.predicate_id)
        return index is not None and self._literals[index].negated != literal.negated

    def add_literal(self, literal: Literal) -> None:
        """Add ``literal``; a complement marks a tautology, a repeat is dropped."""
        predicate_id = literal.predicate_id
        if self._has_opposite(literal):
            self._tautology = True
            self._literals.append(literal)
            return
        index = self._by_predicate.get(predicate_id)
        if index is not None and self._literals[index] == literal:
            return
        self._literals.append(literal)
        self._by_predicate[predicate_id] = len(self._literals) - 1

    def is_empty(self) -> bool:
        return not self._literals

    def is_tautology(self) -> bool:
        return self._tautology

    def to_string(self, kb: "KnowledgeBase") -> str:
        body = " ∨ ".join(literal.to_string(kb) for literal in self._literals)
        return ("T (Tautology): " + body) if self._tautology else body

    def contains_self_loop(self, kb: "KnowledgeBase") -> bool:
        """True if some literal is an edge predicate with both arguments equal."""
        for literal in self._literals:
            if kb.predicate_name(literal.predicate_id) == SELF_LOOP_PREDICATE:
                args = literal.argument_ids
                if len(args) == 2 and args[0] == args[1]:
                    return True
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clause):
            return NotImplemented
        if len(self._literals) != len(other._literals):
            return False
        return Counter(self._literals) == Counter(other._literals)

    def __hash__(self) -> int:
        return hash(frozenset(Counter(self._literals).items()))

    def __len__(self) -> int:
        return len(self._literals)

    def __iter__(self) -> Iterator[Literal]:
        return iter(self._literals)

    def __repr__(self) -> str:
        return f"Clause({self._literals!r})"