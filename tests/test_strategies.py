import time

import pytest

from folprover.clause import Clause
from folprover.literal import Literal
from folprover.sli_node import SLINode
from folprover.strategies import (
    BestFirstStrategy,
    BFSStrategy,
    DFSStrategy,
    HeuristicStrategy,
    ResolutionPair,
    SLIResolutionPair,
    calculate_heuristic,
    is_complementary,
)
from folprover.symbols import SymbolId, SymbolType


def _const(i):
    return SymbolId(SymbolType.CONSTANT, i)


def _var(i):
    return SymbolId(SymbolType.VARIABLE, i)


def _clause(*literals):
    return Clause(literals)


def _sli(node_id, depth, score):
    lit = Literal(0, (_const(0),), False)
    return SLIResolutionPair(node_id, depth, _clause(lit), lit, score)


def _plain(score):
    return ResolutionPair(None, None, 0, 0, score)


def test_sli_pair_from_node_copies_id_and_depth():
    lit = Literal(1, (_var(0),), True)
    node = SLINode(lit, False, 42, depth=3)
    clause = _clause(Literal(1, (_const(0),), False))
    pair = SLIResolutionPair.from_node(node, clause, lit, 0.25)
    assert (pair.node_id, pair.depth) == (42, 3)
    assert pair.kb_clause == clause
    assert pair.resolving_literal == lit
    assert pair.score == 0.25


def test_bfs_is_fifo_and_counts_states():
    strategy = BFSStrategy()
    for node_id in (5, 6, 7):
        strategy.add_sli_pair(_sli(node_id, 1, float(node_id)))
    assert len(strategy) == 3
    taken = [strategy.next_sli_pair().node_id for _ in range(3)]
    assert taken == [5, 6, 7]
    assert strategy.searched_states == 3
    assert strategy.is_empty()


def test_bfs_empty_raises():
    with pytest.raises(IndexError, match="No more pairs available"):
        BFSStrategy().next_sli_pair()


def test_bfs_depth_limit_drops_deep_pairs():
    strategy = BFSStrategy(max_depth=2)
    strategy.add_sli_pair(_sli(1, 2, 0.0))
    strategy.add_sli_pair(_sli(2, 3, 0.0))
    assert len(strategy) == 1
    assert strategy.next_sli_pair().node_id == 1


def test_bfs_max_depth_can_be_changed():
    strategy = BFSStrategy()
    strategy.max_depth = 0
    strategy.add_sli_pair(_sli(1, 1, 0.0))
    assert strategy.is_empty()


def test_bfs_time_limit_drops_late_pairs():
    strategy = BFSStrategy(time_limit=1e-9)
    time.sleep(0.01)
    strategy.add_sli_pair(_sli(1, 0, 0.0))
    assert strategy.is_empty()


def test_bfs_memory_limit_caps_queue():
    strategy = BFSStrategy(memory_limit=1)
    for node_id in range(4):
        strategy.add_sli_pair(_sli(node_id, 0, 0.0))
    assert len(strategy) == 1


def test_bfs_best_score_is_front_score():
    strategy = BFSStrategy()
    assert strategy.best_score() == 0.0
    strategy.add_sli_pair(_sli(1, 0, 3.5))
    strategy.add_sli_pair(_sli(2, 0, 1.5))
    assert strategy.best_score() == 3.5


def test_bfs_tries_everything_and_never_backtracks():
    strategy = BFSStrategy()
    assert strategy.should_try_resolution(-100.0) is True
    assert strategy.should_backtrack() is False


def test_bfs_ignores_plain_pairs():
    strategy = BFSStrategy()
    strategy.add_pair(_plain(1.0))
    assert strategy.is_empty()
    with pytest.raises(LookupError):
        strategy.next_pair()


def test_bfs_status_report():
    strategy = BFSStrategy()
    empty_report = strategy.status()
    assert empty_report.startswith("BFS Strategy Status:\n")
    assert "Queue size: 0" in empty_report
    assert "Next pair" not in empty_report
    strategy.add_sli_pair(_sli(9, 2, 0.5))
    report = strategy.status()
    assert "Queue size: 1" in report
    assert "Next pair - Node ID: 9, Depth: 2, Score: 0.5" in report


def test_best_first_takes_lowest_score_first():
    strategy = BestFirstStrategy()
    for node_id, score in ((1, 3.0), (2, 1.0), (3, 2.0)):
        strategy.add_sli_pair(_sli(node_id, 0, score))
    assert strategy.best_score() == 1.0
    taken = [strategy.next_sli_pair() for _ in range(3)]
    scores = [pair.score for pair in taken]
    assert scores == sorted(scores)
    assert strategy.searched_states == 3


def test_best_first_depth_limit_and_empty():
    strategy = BestFirstStrategy(max_depth=1)
    strategy.add_sli_pair(_sli(1, 2, 0.0))
    assert strategy.is_empty()
    assert strategy.best_score() == 0.0
    with pytest.raises(IndexError):
        strategy.next_sli_pair()


def test_best_first_threshold_and_backtracking():
    strategy = BestFirstStrategy()
    assert strategy.should_try_resolution(0.5) is False
    assert strategy.should_try_resolution(0.6) is True
    assert strategy.should_backtrack() is True
    strategy.add_sli_pair(_sli(1, 0, 1.0))
    strategy.next_sli_pair()
    assert strategy.should_backtrack() is False


def test_dfs_is_lifo():
    strategy = DFSStrategy()
    pairs = [_plain(float(i)) for i in range(3)]
    for pair in pairs:
        strategy.add_pair(pair)
    assert strategy.best_score() == pairs[-1].heuristic_score
    assert [strategy.next_pair() for _ in range(3)] == list(reversed(pairs))
    assert strategy.is_empty()
    with pytest.raises(IndexError):
        strategy.next_pair()


def test_dfs_rejects_sli_pairs():
    strategy = DFSStrategy()
    with pytest.raises(TypeError):
        strategy.add_sli_pair(_sli(1, 0, 0.0))
    with pytest.raises(TypeError):
        strategy.next_sli_pair()


def test_heuristic_takes_lowest_score_first():
    strategy = HeuristicStrategy()
    for score in (4.0, 2.0, 3.0, 2.0):
        strategy.add_pair(_plain(score))
    assert len(strategy) == 4
    scores = [strategy.next_pair().heuristic_score for _ in range(4)]
    assert scores == sorted(scores)
    with pytest.raises(IndexError):
        strategy.next_pair()


def test_heuristic_rejects_sli_pairs():
    with pytest.raises(TypeError):
        HeuristicStrategy().add_sli_pair(_sli(1, 0, 0.0))


def test_is_complementary():
    positive = Literal(0, (_var(0), _const(1)), False)
    negative = Literal(0, (_const(2), _const(3)), True)
    assert is_complementary(positive, negative) is True
    assert is_complementary(negative, positive) is True
    assert is_complementary(positive, positive) is False
    assert is_complementary(positive, Literal(1, (_var(0), _const(1)), True)) is False
    assert is_complementary(positive, Literal(0, (_var(0),), True)) is False


def test_calculate_heuristic_counts_literals():
    c1 = _clause(Literal(0, (_const(0),), False), Literal(1, (_const(0),), False))
    c2 = _clause(
        Literal(0, (_const(0),), True),
        Literal(2, (_const(1),), False),
        Literal(3, (_const(2),), False),
    )
    assert calculate_heuristic(c1, c2, 0, 0) == 4.0
    assert calculate_heuristic(c1, c2, 0, 0) == calculate_heuristic(c2, c1, 0, 0)