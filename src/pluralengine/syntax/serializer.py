"""Condition tree to rule text.

Renders compiled conditions in current TR35 syntax, whatever syntax the
source used: ``n mod 10 not in 2..4`` becomes ``n % 10 != 2..4``. The
output compiles back to an equal tree.

Python 3.13+. Zero external dependencies.
"""

from typing import assert_never

from .ast import And, Condition, Literal, Or, Range, Relation

__all__ = ["serialize"]


def serialize(condition: Condition) -> str:
    """Render a Condition tree as rule text.

    Args:
        condition: Compiled condition

    Returns:
        Rule text; the unconditional condition renders as an empty string

    Raises:
        ValueError: For Literal(False), which has no rule text

    Example:
        >>> serialize(compile_rule("n mod 10 is 1 and n mod 100 is not 11"))
        'n % 10 = 1 and n % 100 != 11'
    """
    match condition:
        case Literal(value=True):
            return ""
        case Literal():
            msg = "Literal(False) has no rule text representation"
            raise ValueError(msg)
        case Or(left=left, right=right):
            return f"{serialize(left)} or {serialize(right)}"
        case And(left=left, right=right):
            return f"{_serialize_conjunct(left)} and {_serialize_conjunct(right)}"
        case Relation():
            return _serialize_relation(condition)
        case _ as unreachable:
            assert_never(unreachable)


def _serialize_conjunct(condition: Condition) -> str:
    # The grammar has no grouping, so a disjunction cannot sit under a conjunction.
    if isinstance(condition, Or):
        msg = "Or nested inside And cannot be written without parentheses"
        raise ValueError(msg)
    return serialize(condition)


def _serialize_relation(relation: Relation) -> str:
    expr = relation.operand
    if relation.modulus is not None:
        expr = f"{expr} % {relation.modulus}"
    ranges = ",".join(_serialize_range(item) for item in relation.ranges)
    if relation.within:
        keyword = "not within" if relation.negated else "within"
        return f"{expr} {keyword} {ranges}"
    operator = "!=" if relation.negated else "="
    return f"{expr} {operator} {ranges}"


def _serialize_range(item: Range) -> str:
    if item.is_single:
        return str(item.low)
    return f"{item.low}..{item.high}"
