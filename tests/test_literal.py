from folprover.knowledge_base import KnowledgeBase
from folprover.literal import Fact, Literal, empty_literal


def _kb():
    kb = KnowledgeBase()
    p = kb.add_predicate("P")
    x = kb.add_variable("x")
    a = kb.add_constant("a")
    return kb, p, x, a


def test_negated_literal_to_string():
    kb, p, x, a = _kb()
    lit = Literal(p, [x, a], True)
    assert lit.to_string(kb) == "¬P(x, a)"


def test_positive_literal_to_string():
    kb, p, x, a = _kb()
    assert Literal(p, [a], False).to_string(kb) == "P(a)"


def test_empty_literal():
    lit = empty_literal()
    assert lit.is_empty() is True
    assert lit.argument_ids == ()
    assert lit.negated is False


def test_regular_literal_not_empty():
    kb, p, x, a = _kb()
    assert Literal(p, [x], False).is_empty() is False


def test_literal_equality_and_hash():
    kb, p, x, a = _kb()
    one = Literal(p, [x, a], False)
    two = Literal(p, (x, a), False)
    assert one == two
    assert hash(one) == hash(two)
    assert (one == Literal(p, [x, a], True)) is False
    assert (one == Literal(p, [a, x], False)) is False


def test_fact_to_string_and_equality():
    kb, p, x, a = _kb()
    b = kb.add_constant("b")
    fact = Fact(p, [a, b])
    assert fact.to_string(kb) == "P(a, b)"
    assert fact == Fact(p, (a, b))
    assert (fact == Fact(p, [b, a])) is False