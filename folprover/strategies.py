"""Resolution pairs, the strategies that order them, and pair-selection helpers."""

from __future__ import annotations

import abc
import heapq
import itertools
import sys
import time
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterable, Optional

from .clause import Clause
from .literal import Literal

if TYPE_CHECKING:
    from .sli_node import SLINode


@dataclass(frozen=True)
class ResolutionPair:
    """Two clauses and the indices of the literals to resolve on."""

    clause1: Optional[Clause]
    clause2: Optional[Clause]
    literal1_index: int
    literal2_index: int
    heuristic_score: float


@dataclass(frozen=True)
class SLIResolutionPair:
    """A tree node, a knowledge-base clause and the literal to resolve with."""

    node_id: int
    depth: int
    kb_clause: Clause
    resolving_literal: Literal
    score: float

    @classmethod
    def from_node(
        cls, node: "SLINode", clause: Clause, literal: Literal, score: float
    ) -> "SLIResolutionPair":
        """Build a pair recording the id and depth of ``node``."""
        return cls(node.node_id, node.depth, clause, literal, score)


class SearchStrategy(abc.ABC):
    """Decides the order in which resolution pairs are tried.

    ``max_depth``, ``time_limit`` (seconds) and ``memory_limit`` (bytes) are
    None when unlimited.
    """

    # Scores must exceed this to be worth resolving; None accepts every score.
    resolution_threshold: ClassVar[Optional[float]] = None

    def __init__(
        self,
        max_depth: int | None = None,
        time_limit: float | None = None,
        memory_limit: int | None = None,
    ) -> None:
        self.max_depth = max_depth
        self.time_limit = time_limit
        self.memory_limit = memory_limit
        self._searched_states = 0
        self._reported_nodes = 0

    @property
    def searched_states(self) -> int:
        """How many SLI pairs have been taken from the strategy."""
        return self._searched_states

    @property
    def reported_nodes(self) -> int:
        """How many new tree nodes have been passed to ``update_heuristic``."""
        return self._reported_nodes

    def _depth_allowed(self, depth: int) -> bool:
        return self.max_depth is None or depth <= self.max_depth

    @abc.abstractmethod
    def add_pair(self, pair: ResolutionPair) -> None:
        """Offer a plain resolution pair."""

    @abc.abstractmethod
    def add_sli_pair(self, pair: SLIResolutionPair) -> None:
        """Offer an SLI resolution pair."""

    @abc.abstractmethod
    def is_empty(self) -> bool:
        """True when no pairs are waiting."""

    @abc.abstractmethod
    def next_pair(self) -> ResolutionPair:
        """Remove and return the next plain pair."""

    @abc.abstractmethod
    def next_sli_pair(self) -> SLIResolutionPair:
        """Remove and return the next SLI pair."""

    def should_try_resolution(self, score: float) -> bool:
        """Whether a resolution with this score is worth attempting."""
        threshold = self.resolution_threshold
        return threshold is None or score > threshold

    def should_backtrack(self) -> bool:
        """Whether the search should backtrack now."""
        return False

    def update_heuristic(self, new_nodes: Iterable["SLINode"]) -> None:
        """Take note of freshly added tree nodes."""
        self._reported_nodes += sum(1 for _ in new_nodes)

    @abc.abstractmethod
    def best_score(self) -> float:
        """Score of the pair that would be taken next, or 0.0 if none."""

    def __len__(self) -> int:
        return 0 if self.is_empty() else 1

    def __bool__(self) -> bool:
        return True


class _SLIOnlyStrategy(SearchStrategy):
    """Strategy that works on SLI pairs and ignores plain pairs."""

    def __init__(
        self,
        max_depth: int | None = None,
        time_limit: float | None = None,
        memory_limit: int | None = None,
    ) -> None:
        super().__init__(max_depth, time_limit, memory_limit)
        self._ignored_pairs = 0

    @property
    def ignored_pairs(self) -> int:
        """How many plain pairs were offered and set aside."""
        return self._ignored_pairs

    def add_pair(self, pair: ResolutionPair) -> None:
        # Plain resolution pairs play no part in SLI search; only count them.
        self._ignored_pairs += 1

    def next_pair(self) -> ResolutionPair:
        raise LookupError(f"{type(self).__name__} holds no plain resolution pairs")


class BFSStrategy(_SLIOnlyStrategy):
    """Breadth-first: SLI pairs are taken in the order they were added."""

    def __init__(
        self,
        max_depth: int | None = None,
        time_limit: float | None = None,
        memory_limit: int | None = None,
    ) -> None:
        super().__init__(max_depth, time_limit, memory_limit)
        self._queue: deque[SLIResolutionPair] = deque()
        self._start_time = time.monotonic()

    def add_sli_pair(self, pair: SLIResolutionPair) -> None:
        """Queue ``pair`` unless it breaks the depth, time or memory limit."""
        if not self._depth_allowed(pair.depth):
            return
        if self.time_limit is not None and self.time_limit > 0:
            if time.monotonic() - self._start_time > self.time_limit:
                return
        if self.memory_limit is not None and self.memory_limit > 0:
            if len(self._queue) * sys.getsizeof(pair) > self.memory_limit:
                return
        self._queue.append(pair)

    def is_empty(self) -> bool:
        return not self._queue

    def next_sli_pair(self) -> SLIResolutionPair:
        if not self._queue:
            raise IndexError("No more pairs available")
        self._searched_states += 1
        return self._queue.popleft()

    def best_score(self) -> float:
        return self._queue[0].score if self._queue else 0.0

    def status(self) -> str:
        """Return a short report on the queue for debugging."""
        lines = [
            "BFS Strategy Status:",
            f"Queue size: {len(self._queue)}",
            f"Searched states: {self._searched_states}",
        ]
        if self._queue:
            front = self._queue[0]
            lines.append(
                f"Next pair - Node ID: {front.node_id}, Depth: {front.depth}, "
                f"Score: {front.score:g}"
            )
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return len(self._queue)


class BestFirstStrategy(_SLIOnlyStrategy):
    """Best-first: the SLI pair with the lowest score is taken first."""

    resolution_threshold: ClassVar[Optional[float]] = 0.5

    def __init__(
        self,
        max_depth: int | None = None,
        time_limit: float | None = None,
        memory_limit: int | None = None,
    ) -> None:
        super().__init__(max_depth, time_limit, memory_limit)
        self._heap: list[tuple[float, int, SLIResolutionPair]] = []
        self._counter = itertools.count()

    def add_sli_pair(self, pair: SLIResolutionPair) -> None:
        if not self._depth_allowed(pair.depth):
            return
        heapq.heappush(self._heap, (pair.score, next(self._counter), pair))

    def is_empty(self) -> bool:
        return not self._heap

    def next_sli_pair(self) -> SLIResolutionPair:
        if not self._heap:
            raise IndexError("No more pairs available")
        self._searched_states += 1
        return heapq.heappop(self._heap)[2]

    def should_backtrack(self) -> bool:
        return self._searched_states % 1000 == 0

    def best_score(self) -> float:
        return self._heap[0][0] if self._heap else 0.0

    def __len__(self) -> int:
        return len(self._heap)


class _PlainOnlyStrategy(SearchStrategy):
    """Strategy that works on plain resolution pairs only."""

    def add_sli_pair(self, pair: SLIResolutionPair) -> None:
        raise TypeError(f"{type(self).__name__} does not accept SLI resolution pairs")

    def next_sli_pair(self) -> SLIResolutionPair:
        raise TypeError(f"{type(self).__name__} does not hold SLI resolution pairs")


class DFSStrategy(_PlainOnlyStrategy):
    """Depth-first: the most recently added pair is taken first."""

    def __init__(self) -> None:
        super().__init__()
        self._stack: list[ResolutionPair] = []

    def add_pair(self, pair: ResolutionPair) -> None:
        self._stack.append(pair)

    def is_empty(self) -> bool:
        return not self._stack

    def next_pair(self) -> ResolutionPair:
        if not self._stack:
            raise IndexError("No more pairs available")
        return self._stack.pop()

    def best_score(self) -> float:
        return self._stack[-1].heuristic_score if self._stack else 0.0

    def __len__(self) -> int:
        return len(self._stack)


class HeuristicStrategy(_PlainOnlyStrategy):
    """Takes the plain pair with the lowest heuristic score first."""

    def __init__(self) -> None:
        super().__init__()
        self._heap: list[tuple[float, int, ResolutionPair]] = []
        self._counter = itertools.count()

    def add_pair(self, pair: ResolutionPair) -> None:
        heapq.heappush(self._heap, (pair.heuristic_score, next(self._counter), pair))

    def is_empty(self) -> bool:
        return not self._heap

    def next_pair(self) -> ResolutionPair:
        if not self._heap:
            raise IndexError("No more pairs available")
        return heapq.heappop(self._heap)[2]

    def best_score(self) -> float:
        return self._heap[0][0] if self._heap else 0.0

    def __len__(self) -> int:
        return len(self._heap)


def is_complementary(lit1: Literal, lit2: Literal) -> bool:
    """True if the literals share predicate and arity but differ in sign."""
    return (
        lit1.predicate_id == lit2.predicate_id
        and len(lit1.argument_ids) == len(lit2.argument_ids)
        and lit1.negated != lit2.negated
    )


def calculate_heuristic(
    clause1: Clause, clause2: Clause, index1: int, index2: int
) -> float:
    """Score a resolution by the size of the two clauses, less one."""
    return float(len(clause1) + len(clause2) - 1)