"""Clauses, knowledge bases and search strategies for resolution, with a propositional solver."""

__version__ = "0.1.0"

__all__ = [
    "symbols",
    "literal",
    "clause",
    "knowledge_base",
    "syntax",
    "sli_node",
    "strategies",
    "propositional",
]