"""Breadth-first propositional resolution over integer literals."""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
import time
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, TextIO

START_LITERALS: tuple[int, ...] = (1, 2, 3)
ROUND_CAPACITY = 10
INITIAL_MAX_LENGTH = 3
DEFAULT_MAX_STEPS = 1_000_000

# Four groups of three choices, with pairwise exclusions: an unsatisfiable set.
EXAMPLE_CLAUSES: tuple[tuple[int, ...], ...] = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    (10, 11, 12),
    (-1, -4),
    (-1, -7),
    (-1, -10),
    (-2, -5),
    (-2, -8),
    (-2, -11),
    (-3, -6),
    (-3, -9),
    (-3, -12),
    (-7, -10),
    (-4, -7),
    (-4, -10),
    (-8, -11),
    (-5, -8),
    (-5, -11),
    (-9, -12),
    (-6, -9),
    (-6, -12),
)


@dataclass(eq=False)
class PropClause:
    """A sorted disjunction of integer literals with its derivation parents."""

    literals: tuple[int, ...]
    id: int = -1
    father: Optional["PropClause"] = None
    mother: Optional["PropClause"] = None

    def __post_init__(self) -> None:
        self.literals = tuple(sorted(self.literals))

    @property
    def is_root(self) -> bool:
        """True if the clause was given rather than derived."""
        return self.father is None and self.mother is None

    def resolve(self, other: "PropClause", literal: int) -> "PropClause":
        """Resolve on ``literal`` of this clause against ``-literal`` of ``other``."""
        merged = [lit for lit in self.literals if lit != literal]
        for lit in other.literals:
            if lit != -literal and lit not in merged:
                merged.append(lit)
        return PropClause(tuple(merged))

    def is_empty(self) -> bool:
        return not self.literals

    def is_tautology(self) -> bool:
        """True if the clause holds some literal together with its negation."""
        return any(a == -b for a, b in itertools.combinations(self.literals, 2))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropClause):
            return NotImplemented
        return self.literals == other.literals

    def __hash__(self) -> int:
        return hash(self.literals)

    def __len__(self) -> int:
        return len(self.literals)

    def __str__(self) -> str:
        return "{" + ", ".join(str(lit) for lit in self.literals) + "}"


@dataclass
class PropKnowledgeBase:
    """An ordered list of clauses and the next id to hand out."""

    clauses: list[PropClause] = field(default_factory=list)
    next_id: int = 0

    def allocate_id(self) -> int:
        """Return a fresh clause id."""
        new_id = self.next_id
        self.next_id += 1
        return new_id

    def add_clause(self, clause: PropClause | Iterable[int]) -> None:
        """Add a root copy of ``clause`` with a fresh id unless already present."""
        literals = clause.literals if isinstance(clause, PropClause) else tuple(clause)
        candidate = PropClause(literals)
        if candidate not in self:
            candidate.id = self.allocate_id()
            self.clauses.append(candidate)

    def __contains__(self, clause: object) -> bool:
        return any(existing == clause for existing in self.clauses)

    def __len__(self) -> int:
        return len(self.clauses)

    def to_string(self) -> str:
        lines = "".join(f"  {clause} (ID: {clause.id})\n" for clause in self.clauses)
        return "Knowledge Base:\n" + lines

    def __str__(self) -> str:
        return self.to_string()


def resolvable_clauses(clause: PropClause, kb: PropKnowledgeBase) -> list[tuple[int, int]]:
    """Return (index, literal) for each KB clause holding the negation of a literal of ``clause``.

    Only the first such literal of ``clause`` is reported for each KB clause.
    """
    pairs: list[tuple[int, int]] = []
    for index, candidate in enumerate(kb.clauses):
        for lit in clause.literals:
            if -lit in candidate.literals:
                pairs.append((index, lit))
                break
    return pairs


def ancestry_lines(clause: PropClause, depth: int = 0) -> Iterator[str]:
    """Yield the derivation tree of ``clause`` as indented lines."""
    indent = "  " * depth
    yield f"{indent}Clause: {clause} (ID: {clause.id})"
    if clause.is_root:
        yield f"{indent}  This is a root clause"
        return
    if clause.father is not None:
        yield f"{indent}  Father:"
        yield from ancestry_lines(clause.father, depth + 1)
    if clause.mother is not None:
        yield f"{indent}  Mother:"
        yield from ancestry_lines(clause.mother, depth + 1)


@dataclass(frozen=True)
class ResolutionOutcome:
    """Result of a resolution run."""

    unsat: bool
    steps: int
    step_limit_reached: bool = False

    @property
    def verdict(self) -> str:
        return "UNSAT" if self.unsat else "SAT"


class _PendingQueue:
    """Clauses waiting to be processed, shortest first."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, PropClause]] = []
        self._counter = itertools.count()

    def push(self, clause: PropClause) -> None:
        heapq.heappush(self._heap, (len(clause), next(self._counter), clause))

    def pop(self) -> PropClause:
        return heapq.heappop(self._heap)[2]

    def __bool__(self) -> bool:
        return bool(self._heap)


def resolution(kb: PropKnowledgeBase, max_steps: int, out: TextIO) -> ResolutionOutcome:
    """Run length-bounded breadth-first resolution from the start clause.

    Progress goes to standard output and to ``out``; the ancestry of an empty
    clause goes to ``out`` only. ``kb`` grows with every processed clause.
    """

    def emit(message: str) -> None:
        sys.stdout.write(message)
        out.write(message)

    emit("Initial " + kb.to_string() + "\n")

    pending = _PendingQueue()
    pending.push(PropClause(START_LITERALS, kb.allocate_id()))
    seen: set[tuple[int, ...]] = {clause.literals for clause in kb.clauses}

    steps = 0
    round_number = 0
    max_length = INITIAL_MAX_LENGTH

    while steps < max_steps and pending:
        round_number += 1
        emit(f"\n--- Round {round_number} ---\n")
        emit(f"Current maxLength: {max_length}\n")
        emit("Clauses for this round:\n")

        current_round: list[PropClause] = []
        postponed: list[PropClause] = []
        while pending:
            clause = pending.pop()
            if len(clause) <= max_length:
                current_round.append(clause)
            else:
                postponed.append(clause)
            if len(current_round) >= ROUND_CAPACITY:
                break

        for clause in current_round:
            emit(f"  {clause}\n")

        new_clauses: list[PropClause] = []
        for current in current_round:
            emit(f"\nCurrent clause: {current}\n")
            kb.clauses.append(current)
            emit(f"Adding current clause to KB: {current}\n")

            for index, literal in resolvable_clauses(current, kb):
                partner = kb.clauses[index]
                resolved = current.resolve(partner, literal)
                resolved.id = kb.allocate_id()
                resolved.father = current
                resolved.mother = partner
                steps += 1

                emit(f"Resolution step {steps}:\n")
                emit(f"Resolving {current} and {partner}\n")
                emit(f"Resolved clause: {resolved}\n")

                if resolved.is_empty():
                    emit("\nEmpty clause derived. UNSAT.\n")
                    emit("\nAncestry of the empty clause:\n")
                    for line in ancestry_lines(resolved):
                        out.write(line + "\n")
                    return ResolutionOutcome(True, steps)

                if resolved.is_tautology():
                    emit("Resolved clause is a tautology, skipping\n")
                    continue

                if resolved.literals not in seen:
                    seen.add(resolved.literals)
                    new_clauses.append(resolved)
                    emit(f"New clause added to pending queue: {resolved}\n")
                else:
                    emit(f"Clause already seen, skipping: {resolved}\n")

        for clause in new_clauses:
            pending.push(clause)
        for clause in postponed:
            pending.push(clause)

        if not new_clauses and not current_round:
            emit("No new clauses generated in this round.\n")
            max_length += 1
            emit(f"Increasing maxLength to: {max_length}\n")

    limit_reached = steps >= max_steps
    if limit_reached:
        emit("\nMax steps reached. Inconclusive.\n")
    else:
        emit("\nNo more clauses to resolve. SAT.\n")
    return ResolutionOutcome(False, steps, limit_reached)


def main(argv: list[str] | None = None) -> int:
    """Run resolution on the built-in example, logging to a file."""
    parser = argparse.ArgumentParser(description="Propositional resolution on a built-in example.")
    parser.add_argument("-o", "--output", default="resolution.txt", help="log file to write")
    parser.add_argument("--max-steps", type=int, default=DEFAULT_MAX_STEPS)
    args = parser.parse_args(argv)

    start = time.process_time()
    try:
        out = open(args.output, "w", encoding="utf-8")
    except OSError:
        print(f"Error opening file {args.output}", file=sys.stderr)
        return 1

    with out:
        kb = PropKnowledgeBase()
        for literals in EXAMPLE_CLAUSES:
            kb.add_clause(literals)

        outcome = resolution(kb, args.max_steps, out)

        final = (
            f"Resolution result: {outcome.verdict}\n"
            f"Total resolution steps: {outcome.steps}\n"
            f"Final Knowledge Base:\n{kb.to_string()}\n"
        )
        sys.stdout.write(final)
        out.write(final)

    elapsed = time.process_time() - start
    print(f"Runtime: {elapsed:g} s")
    return 0