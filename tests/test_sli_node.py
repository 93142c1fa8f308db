import pytest

from folprover.knowledge_base import KnowledgeBase
from folprover.literal import Literal, empty_literal
from folprover.sli_node import (
    AncestryOperation,
    FactoringOperation,
    Operation,
    SLINode,
    TruncateOperation,
    next_node_id,
)


@pytest.fixture
def kb():
    return KnowledgeBase()


def _literal(kb, name, *args, negated=False):
    pred = kb.add_predicate(name)
    ids = []
    for arg in args:
        if arg[0].islower():
            ids.append(kb.add_variable(arg))
        else:
            ids.append(kb.add_constant(arg))
    return Literal(pred, tuple(ids), negated)


def test_next_node_id_strictly_increases():
    ids = [next_node_id() for _ in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 5
    assert all(b == a + 1 for a, b in zip(ids, ids[1:]))


def test_new_node_defaults(kb):
    node = SLINode(_literal(kb, "P", "x"), False, 7)
    assert node.is_active is True
    assert node.depth == 0
    assert node.rule_applied == ""
    assert node.children == []
    assert node.substitution == {}
    assert node.parent is None


def test_root_describes_as_root(kb):
    root = SLINode(empty_literal(), False, 0)
    assert root.describe(kb) == "ROOT"


def test_describe_plain_node(kb):
    lit = _literal(kb, "P", "x")
    node = SLINode(lit, False, 5)
    assert node.describe(kb) == f"{lit.to_string(kb)} [5|d:0] (active) children:0"


def test_describe_full_node(kb):
    lit = _literal(kb, "Q", "x", "A", negated=True)
    x = kb.add_variable("x")
    a = kb.add_constant("A")
    parent = SLINode(_literal(kb, "R", "B"), False, 3)
    node = SLINode(lit, True, 9, is_active=False, depth=2, rule_applied="t-factoring")
    node.parent = parent
    node.substitution = {x: a}
    node.children.append(SLINode(lit, False, 10))
    assert node.describe(kb) == (
        f"{lit.to_string(kb)}* [9|d:2] subst:{{x/A}} (inactive,A-lit)"
        " parent:3 children:1 rule:t-factoring"
    )


def test_parent_link_is_weak(kb):
    child = SLINode(_literal(kb, "P", "x"), False, 2)
    parent = SLINode(_literal(kb, "P", "A"), False, 1)
    child.parent = parent
    assert child.parent is parent
    del parent
    assert child.parent is None


def test_operation_is_abstract():
    with pytest.raises(TypeError):
        Operation()


def test_truncate_undo_restores_states(kb):
    lit = _literal(kb, "P", "x")
    first = SLINode(lit, False, 1)
    second = SLINode(lit, False, 2, is_active=False, rule_applied="ancestry")
    op = TruncateOperation()
    op.save_state(first)
    op.save_state(second)
    first.is_active = False
    first.rule_applied = "truncate"
    second.is_active = False
    second.rule_applied = "truncate"
    op.undo()
    assert (first.is_active, first.rule_applied) == (True, "")
    assert (second.is_active, second.rule_applied) == (False, "ancestry")


def test_truncate_undo_without_saved_nodes_changes_nothing(kb):
    node = SLINode(_literal(kb, "P", "x"), False, 1, is_active=False)
    TruncateOperation().undo()
    assert node.is_active is False


@pytest.mark.parametrize("operation_cls", [FactoringOperation, AncestryOperation])
def test_merge_undo_restores_both_nodes(kb, operation_cls):
    old_lit = _literal(kb, "P", "x")
    new_lit = _literal(kb, "P", "A")
    x = kb.add_variable("x")
    a = kb.add_constant("A")
    upper = SLINode(old_lit, False, 1)
    lower = SLINode(new_lit, False, 2)
    op = operation_cls(upper, lower, old_lit, {}, {x: a})

    upper.literal = new_lit
    upper.substitution = {x: a}
    lower.is_active = False
    lower.rule_applied = "merged"

    op.undo()
    assert upper.literal == old_lit
    assert upper.substitution == {}
    assert lower.is_active is True
    assert lower.rule_applied == ""
    assert op.applied_mgu == {x: a}


def test_merge_operation_keeps_its_own_copy_of_substitution(kb):
    lit = _literal(kb, "P", "x")
    x = kb.add_variable("x")
    a = kb.add_constant("A")
    previous = {x: a}
    upper = SLINode(lit, False, 1)
    lower = SLINode(lit, False, 2)
    op = FactoringOperation(upper, lower, lit, previous, {})
    previous.clear()
    op.undo()
    assert upper.substitution == {x: a}