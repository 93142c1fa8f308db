"""The knowledge base: symbol tables plus clauses and facts."""

from __future__ import annotations

from .clause import Clause
from .literal import Fact
from .symbols import SymbolId, SymbolTable, SymbolType


class KnowledgeBase:
    """Holds interned predicates, variables and constants, clauses and facts."""

    def __init__(self) -> None:
        self._predicates = SymbolTable()
        self._variables = SymbolTable()
        self._constants = SymbolTable()
        self._clauses: list[Clause] = []
        self._facts: list[Fact] = []

    @property
    def clauses(self) -> tuple[Clause, ...]:
        return tuple(self._clauses)

    @property
    def facts(self) -> tuple[Fact, ...]:
        return tuple(self._facts)

    def add_predicate(self, name: str) -> int:
        return self._predicates.insert(name)

    def add_variable(self, name: str) -> SymbolId:
        return SymbolId(SymbolType.VARIABLE, self._variables.insert(name))

    def add_constant(self, name: str) -> SymbolId:
        return SymbolId(SymbolType.CONSTANT, self._constants.insert(name))

    def add_clause(self, clause: Clause) -> None:
        self._clauses.append(clause)

    def add_fact(self, fact: Fact) -> None:
        """Add ``fact`` unless an equal one is already present."""
        if not self.has_fact(fact):
            self._facts.append(fact)

    def predicate_name(self, predicate_id: int) -> str:
        return self._predicates.get(predicate_id)

    def symbol_name(self, symbol: SymbolId) -> str:
        table = self._variables if symbol.type is SymbolType.VARIABLE else self._constants
        return table.get(symbol.id)

    def is_variable(self, symbol: SymbolId) -> bool:
        return symbol.type is SymbolType.VARIABLE

    def has_fact(self, fact: Fact) -> bool:
        return fact in self._facts

    def predicate_id(self, name: str) -> int | None:
        return self._predicates.get_id(name)

    def symbol_id(self, name: str) -> SymbolId | None:
        """Look ``name`` up among variables first, then constants."""
        var_id = self._variables.get_id(name)
        if var_id is not None:
            return SymbolId(SymbolType.VARIABLE, var_id)
        const_id = self._constants.get_id(name)
        if const_id is not None:
            return SymbolId(SymbolType.CONSTANT, const_id)
        return None

    def variable_id(self, name: str) -> int | None:
        return self._variables.get_id(name)

    def insert_variable(self, name: str) -> int:
        return self._variables.insert(name)

    def to_string(self) -> str:
        lines = ["Knowledge Base:", "Clauses:"]
        lines.extend("  " + clause.to_string(self) for clause in self._clauses)
        lines.append("Facts:")
        lines.extend("  " + fact.to_string(self) for fact in self._facts)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_string()