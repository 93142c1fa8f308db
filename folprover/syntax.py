"""Syntax tree nodes for first-order formulas and their conversion to literals."""

from __future__ import annotations

import abc
import enum
from typing import TYPE_CHECKING

from .literal import Literal
from .symbols import SymbolId

if TYPE_CHECKING:
    from .clause import Clause
    from .knowledge_base import KnowledgeBase


class NodeType(enum.Enum):
    """Kind of a syntax tree node."""

    PREDICATE = enum.auto()
    FUNCTION = enum.auto()
    VARIABLE = enum.auto()
    CONSTANT = enum.auto()
    TERMLIST = enum.auto()
    TERM = enum.auto()
    AND = enum.auto()
    OR = enum.auto()
    IMPLY = enum.auto()
    NOT = enum.auto()
    FORALL = enum.auto()
    EXISTS = enum.auto()
    EQ = enum.auto()


class Node(abc.ABC):
    """Base class of all syntax tree nodes."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    @property
    @abc.abstractmethod
    def node_type(self) -> NodeType:
        """The kind of this node."""

    @abc.abstractmethod
    def clone(self) -> "Node":
        """Return a deep copy of this node."""

    def insert(self, term: "Node") -> bool:
        """Add an argument term; nodes without arguments refuse it."""
        return False

    def describe(self) -> str:
        """Return a human-readable description of the node."""
        return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ConstantNode(Node):
    """A constant term."""

    @property
    def node_type(self) -> NodeType:
        return NodeType.CONSTANT

    def clone(self) -> "ConstantNode":
        return ConstantNode(self.name)

    def describe(self) -> str:
        return f"Constant Node {self.name}"


class VariableNode(Node):
    """A variable term."""

    @property
    def node_type(self) -> NodeType:
        return NodeType.VARIABLE

    def clone(self) -> "VariableNode":
        return VariableNode(self.name)

    def describe(self) -> str:
        return f"Variable Node {self.name}"


class TermListNode(Node):
    """An ordered list of argument terms."""

    def __init__(self, arguments: list[Node] | None = None) -> None:
        super().__init__("")
        self.arguments: list[Node] = []
        for argument in arguments or ():
            self.insert(argument)

    @property
    def node_type(self) -> NodeType:
        return NodeType.TERMLIST

    def insert(self, term: Node) -> bool:
        """Append ``term`` unless this very node object is already present."""
        if any(existing is term for existing in self.arguments):
            return False
        self.arguments.append(term)
        return True

    def clone(self) -> "TermListNode":
        copy = TermListNode()
        for argument in self.arguments:
            copy.insert(argument.clone())
        return copy

    def describe(self) -> str:
        lines = ["Term List Node print"]
        lines.extend(argument.describe() for argument in self.arguments)
        return "\n".join(lines)


def _delegate_insert(target: Node | None, term: Node, owner: str) -> bool:
    if target is None:
        raise ValueError(f"{owner} has no term list to insert into")
    return target.insert(term)


class FunctionNode(Node):
    """A function symbol applied to a term list."""

    def __init__(self, name: str = "", termlists: Node | None = None) -> None:
        super().__init__(name)
        self.termlists = termlists

    @property
    def node_type(self) -> NodeType:
        return NodeType.FUNCTION

    def insert(self, term: Node) -> bool:
        return _delegate_insert(self.termlists, term, "function")

    def clone(self) -> "FunctionNode":
        return FunctionNode(
            self.name, self.termlists.clone() if self.termlists is not None else None
        )

    def describe(self) -> str:
        header = f"Function Node print, Function Name: {self.name}"
        if self.termlists is None:
            return header + "\nNo function term lists"
        return header + "\n" + self.termlists.describe()


class PredicateNode(Node):
    """A predicate symbol applied to a term list."""

    def __init__(self, name: str = "", termlists: Node | None = None) -> None:
        super().__init__(name)
        self.termlists = termlists

    @property
    def node_type(self) -> NodeType:
        return NodeType.PREDICATE

    def insert(self, term: Node) -> bool:
        return _delegate_insert(self.termlists, term, "predicate")

    def clone(self) -> "PredicateNode":
        return PredicateNode(
            self.name, self.termlists.clone() if self.termlists is not None else None
        )

    def describe(self) -> str:
        header = f"PredicateNode name {self.name} arguments: "
        if self.termlists is None:
            return header + "No Predicate term lists"
        return header + self.termlists.describe()


class UnaryOpNode(Node):
    """A unary connective, such as negation, over a child node."""

    def __init__(self, op: NodeType = NodeType.NOT, child: Node | None = None) -> None:
        super().__init__(child.name if child is not None else "")
        self.op = op
        self.child = child

    @property
    def node_type(self) -> NodeType:
        return self.op

    def insert(self, term: Node) -> bool:
        if self.child is None:
            raise ValueError("unary operator has no child to insert into")
        return self.child.insert(term)

    def clone(self) -> "UnaryOpNode":
        copy = UnaryOpNode(self.op, self.child.clone() if self.child is not None else None)
        copy.name = self.name
        return copy

    def describe(self) -> str:
        body = self.child.describe() if self.child is not None else ""
        return "Unary Node Print\n" + body


class ForallNode(Node):
    """Universal quantification of a variable over a formula."""

    def __init__(self, variable: Node | None, formula: Node | None) -> None:
        super().__init__("")
        self.variable = variable
        self.formula = formula

    @property
    def node_type(self) -> NodeType:
        return NodeType.FORALL

    def clone(self) -> "ForallNode":
        copy = ForallNode(
            self.variable.clone() if self.variable is not None else None,
            self.formula.clone() if self.formula is not None else None,
        )
        copy.name = self.name
        return copy

    def describe(self) -> str:
        return f"Forall Node {self.name}"


class CNF:
    """A single, possibly negated, predicate taken from a syntax tree."""

    def __init__(self, node: Node | None) -> None:
        if node is None:
            raise ValueError("construct cnf with nullptr node")
        if node.node_type not in (NodeType.NOT, NodeType.PREDICATE):
            raise ValueError(f"construct cnf with wrong node, node : {node.describe()}")
        self.negated = node.node_type is NodeType.NOT
        self.predicate = node.clone()

    @property
    def predicate_name(self) -> str:
        return self.predicate.name

    def describe(self) -> str:
        prefix = "Not node " if self.negated else ""
        return prefix + self.predicate.describe()

    def __copy__(self) -> "CNF":
        return CNF(self.predicate)


def _predicate_literal(node: PredicateNode, kb: "KnowledgeBase", negated: bool) -> Literal:
    predicate_id = kb.add_predicate(node.name)
    arguments: list[SymbolId] = []
    termlists = node.termlists
    for argument in getattr(termlists, "arguments", ()):
        if argument.node_type is NodeType.VARIABLE:
            arguments.append(kb.add_variable(argument.name))
        elif argument.node_type is NodeType.CONSTANT:
            arguments.append(kb.add_constant(argument.name))
    return Literal(predicate_id, tuple(arguments), negated)


def build_literal(node: Node, kb: "KnowledgeBase", clause: "Clause") -> Literal | None:
    """Turn a predicate or negated predicate into a literal and add it to ``clause``.

    Symbols are interned in ``kb``. Returns the literal, or None when the node
    is of a kind that yields no literal.
    """
    if node.node_type is NodeType.PREDICATE:
        literal = _predicate_literal(node, kb, False)  # type: ignore[arg-type]
    elif (
        node.node_type is NodeType.NOT
        and isinstance(node, UnaryOpNode)
        and node.child is not None
        and node.child.node_type is NodeType.PREDICATE
    ):
        literal = _predicate_literal(node.child, kb, True)  # type: ignore[arg-type]
    else:
        return None
    clause.add_literal(literal)
    return literal