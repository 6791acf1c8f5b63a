"""Plural rule language: condition tree, compiler and serializer.

Exports:
    compile_rule: Rule text -> Condition tree
    compile_empty: Condition of a category without rule text
    serialize: Condition tree -> rule text
    Condition and its node types

Python 3.13+. Zero external dependencies.
"""

from .ast import FALSE, TRUE, And, Condition, Literal, Or, Range, Relation
from .parser import RuleParser, compile_empty, compile_rule
from .serializer import serialize

__all__ = [
    "FALSE",
    "TRUE",
    "And",
    "Condition",
    "Literal",
    "Or",
    "Range",
    "Relation",
    "RuleParser",
    "compile_empty",
    "compile_rule",
    "serialize",
]
