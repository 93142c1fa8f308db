"""Nodes of an SLI resolution tree and the undoable operations applied to them."""

from __future__ import annotations

import abc
import itertools
import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .literal import Literal
from .symbols import SymbolId

if TYPE_CHECKING:
    from .knowledge_base import KnowledgeBase

Substitution = dict[SymbolId, SymbolId]

_node_ids = itertools.count()


def next_node_id() -> int:
    """Return a fresh node id; ids are unique and increase from zero."""
    return next(_node_ids)


@dataclass(eq=False)
class SLINode:
    """A literal placed in an SLI tree, with its links and bookkeeping."""

    literal: Literal
    is_a_literal: bool
    node_id: int
    is_active: bool = True
    depth: int = 0
    rule_applied: str = ""
    children: list["SLINode"] = field(default_factory=list)
    substitution: Substitution = field(default_factory=dict)
    _parent_ref: Optional["weakref.ReferenceType[SLINode]"] = field(
        default=None, init=False, repr=False
    )

    @property
    def parent(self) -> Optional["SLINode"]:
        """The parent node, or None if there is none or it no longer exists."""
        return self._parent_ref() if self._parent_ref is not None else None

    @parent.setter
    def parent(self, node: Optional["SLINode"]) -> None:
        self._parent_ref = weakref.ref(node) if node is not None else None

    def describe(self, kb: "KnowledgeBase") -> str:
        """Return a one-line summary of the node for debugging."""
        if self.literal.is_empty():
            return "ROOT"

        parts = [self.literal.to_string(kb) + ("*" if self.is_a_literal else "")]
        parts.append(f" [{self.node_id}|d:{self.depth}]")

        if self.substitution:
            pairs = ",".join(
                f"{kb.symbol_name(var)}/{kb.symbol_name(term)}"
                for var, term in self.substitution.items()
            )
            parts.append(f" subst:{{{pairs}}}")

        status = []
        if not self.is_active:
            status.append("inactive")
        if self.is_a_literal:
            status.append("A-lit")
        if not status:
            status.append("active")
        parts.append(f" ({','.join(status)})")

        parent = self.parent
        if parent is not None:
            parts.append(f" parent:{parent.node_id}")
        parts.append(f" children:{len(self.children)}")

        if self.rule_applied:
            parts.append(f" rule:{self.rule_applied}")

        return "".join(parts)


class Operation(abc.ABC):
    """A change to an SLI tree that can be reverted."""

    @abc.abstractmethod
    def undo(self) -> None:
        """Revert the change."""


class TruncateOperation(Operation):
    """Records node states before a truncation so they can be restored."""

    def __init__(self) -> None:
        self._saved: list[tuple[SLINode, bool, str]] = []

    def save_state(self, node: SLINode) -> None:
        """Remember the activity and rule of ``node`` as they are now."""
        self._saved.append((node, node.is_active, node.rule_applied))

    def undo(self) -> None:
        for node, was_active, rule in self._saved:
            node.is_active = was_active
            node.rule_applied = rule


class _MergeOperation(Operation):
    """Base for operations that rewrite an upper node and retire a lower one."""

    def __init__(
        self,
        upper_node: SLINode,
        lower_node: SLINode,
        previous_literal: Literal,
        previous_substitution: Substitution,
        applied_mgu: Substitution,
    ) -> None:
        self.upper_node = upper_node
        self.lower_node = lower_node
        self.previous_literal = previous_literal
        self.previous_substitution = dict(previous_substitution)
        self.applied_mgu = dict(applied_mgu)

    def undo(self) -> None:
        self.upper_node.literal = self.previous_literal
        self.upper_node.substitution = dict(self.previous_substitution)
        self.lower_node.is_active = True
        self.lower_node.rule_applied = ""


class FactoringOperation(_MergeOperation):
    """A t-factoring step, undone by restoring both nodes."""

    def undo(self) -> None:
        super().undo()


class AncestryOperation(_MergeOperation):
    """A t-ancestry step, undone by restoring both nodes."""

    def undo(self) -> None:
        super().undo()