# folprover

Data structures for resolution-based reasoning in first-order logic, and a
small propositional resolution solver that runs from the command line.

## What is inside

- `folprover.symbols`: `SymbolType`, `SymbolId` and `SymbolTable`. A
  `SymbolTable` interns names as consecutive integer ids from zero;
  `get` returns `""` for an unknown id and `get_id` returns `None` for an
  unknown name.
- `folprover.literal`: `Literal` (a possibly negated predicate id applied to a
  tuple of `SymbolId`s), `empty_literal()` (the literal with predicate id -1)
  and `Fact`.
- `folprover.clause`: `Clause`, a disjunction of literals.
- `folprover.knowledge_base`: `KnowledgeBase`, which holds the predicate,
  variable and constant tables, the clauses and the facts, and renders them as
  text.
- `folprover.syntax`: formula syntax nodes (`PredicateNode`, `UnaryOpNode`,
  `TermListNode`, `VariableNode`, `ConstantNode`, `FunctionNode`, `ForallNode`)
  with `clone`, `insert` and `describe`; the `CNF` wrapper for a predicate or
  negated predicate; and `build_literal()`, which turns such a node into a
  `Literal`, interning its names in a `KnowledgeBase` and adding it to a
  `Clause`.
- `folprover.sli_node`: `SLINode`, a tree node for SLI resolution, with
  `next_node_id()` and the undoable `TruncateOperation`, `FactoringOperation`
  and `AncestryOperation`.
- `folprover.strategies`: `ResolutionPair`, `SLIResolutionPair` and the search
  strategies, together with `is_complementary()` and `calculate_heuristic()`.
- `folprover.propositional`: integer-literal clauses (`PropClause`), a
  propositional knowledge base (`PropKnowledgeBase`), `resolvable_clauses()`,
  `ancestry_lines()` and a round-based `resolution()` search that returns a
  `ResolutionOutcome`.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Working with a knowledge base

```python
from folprover.knowledge_base import KnowledgeBase

kb = KnowledgeBase()
edge = kb.add_predicate("E")      # the same name always gives the same id
x = kb.add_variable("x")
a = kb.add_constant("a")

kb.predicate_name(edge)           # "E"
kb.symbol_name(x)                 # "x"
kb.is_variable(x)                 # True
kb.is_variable(a)                 # False
kb.symbol_id("a") == a            # True (variables are looked up first)
print(kb.to_string())
```

`add_fact` ignores a fact equal to one already present; `add_clause` always
appends.

## Clauses

Clauses are built from `Literal` values with `Clause.add_literal`:

- A literal whose predicate already appears in the clause with the opposite
  sign marks the clause as a tautology; it is still appended, and
  `Clause.to_string` then starts with `T (Tautology): `.
- A literal equal to the most recently added literal with the same predicate
  is dropped.
- Otherwise the literal is appended.

Two clauses compare equal, and hash alike, when they hold the same literals in
any order. `contains_self_loop(kb)` reports whether some literal uses the
predicate named `E` with two equal arguments.

## Search strategies

All strategies take optional `max_depth`, `time_limit` (seconds) and
`memory_limit` (bytes); `None` means no limit.

- `BFSStrategy` queues `SLIResolutionPair`s first in, first out, refusing pairs
  deeper than `max_depth` or added after the time limit or over the memory
  limit. `status()` returns a short text report.
- `BestFirstStrategy` takes the SLI pair with the lowest score first and only
  tries resolutions scoring above 0.5.
- `DFSStrategy` takes the most recently added `ResolutionPair` first.
- `HeuristicStrategy` takes the `ResolutionPair` with the lowest
  `heuristic_score` first.

The SLI strategies count plain pairs offered to them and set them aside; the
plain strategies raise `TypeError` when given SLI pairs. Taking from an empty
strategy raises `IndexError`.

`is_complementary(lit1, lit2)` is true when two literals share predicate and
arity but differ in sign. `calculate_heuristic(c1, c2, i, j)` returns the
combined length of the two clauses minus one.

## Propositional resolution from the command line

```
folprover-sat
```

This runs resolution on a built-in, unsatisfiable set of twenty-two
propositional clauses, starting from the clause `{1, 2, 3}`. Each round takes
up to ten pending clauses, shortest first, whose length is within the current
bound (3 at the start, raised by one after a round with nothing to process).
It prints each round and each resolution step and writes the same transcript
to a log file. When it derives the empty clause, it also writes that clause's
ancestry to the log file. It ends with the verdict (UNSAT or SAT), the number
of resolution steps, the final knowledge base and the CPU time used.

Options:

- `-o`, `--output`: log file to write (default `resolution.txt`).
- `--max-steps`: stop after this many resolution steps (default 1000000);
  the run is then reported as inconclusive.

The command exits with status 1 if the log file cannot be opened.

## What the package does not do

The first-order side of the package provides the pieces a prover is built
from, not a prover. There is no unification or substitution of terms, no SLI
resolution tree and no proof search over `KnowledgeBase` clauses, and no
reader for formula text: syntax nodes must be built in code before
`build_literal()` can turn them into literals. The only runnable search is the
propositional one in `folprover.propositional`, and the command works only on
its built-in clause set.