"""Condition evaluation against plural operands.

A single generic evaluator interprets every compiled rule. Conjunctions and
disjunctions evaluate left to right and short-circuit.

Membership semantics:
    - "=", "in", "is": the value must be integral and inside a range.
      n = 1.5 is not a member of 1..2; n = 1.0 is a member of 1.
    - "within": any value between the bounds is a member (n within 1..2
      holds for 1.5).
    - "% m": the operand is reduced modulo m first. For n this keeps the
      fraction: 11.5 % 10 is 1.5.

Only n can be fractional. It is handled as its integer part i plus a flag
for a non-zero fraction, which keeps evaluation in exact integer arithmetic
for numbers of any size.

Python 3.13+. Zero external dependencies.
"""

from typing import assert_never

from pluralengine.operands import PluralOperands
from pluralengine.syntax.ast import And, Condition, Literal, Or, Relation

__all__ = ["evaluate"]


def evaluate(condition: Condition, operands: PluralOperands) -> bool:
    """Evaluate a condition tree.

    Total over well-formed operands: never raises for a compiled tree.

    Args:
        condition: Compiled condition
        operands: Operand tuple of the number being pluralized

    Returns:
        True if the number satisfies the condition
    """
    match condition:
        case Relation():
            return _evaluate_relation(condition, operands)
        case And(left=left, right=right):
            return evaluate(left, operands) and evaluate(right, operands)
        case Or(left=left, right=right):
            return evaluate(left, operands) or evaluate(right, operands)
        case Literal(value=value):
            return value
        case _ as unreachable:
            assert_never(unreachable)


def _evaluate_relation(relation: Relation, operands: PluralOperands) -> bool:
    if relation.operand == "n":
        integral, fractional = operands.i, operands.f != 0
    else:
        integral, fractional = int(operands.value(relation.operand)), False
    if relation.modulus is not None:
        integral %= relation.modulus
    return _is_member(integral, fractional, relation) != relation.negated


def _is_member(integral: int, fractional: bool, relation: Relation) -> bool:
    if not fractional:
        return any(item.low <= integral <= item.high for item in relation.ranges)
    if not relation.within:
        return False
    # integral + fraction, with 0 < fraction < 1, lies in [low, high]
    return any(item.low <= integral < item.high for item in relation.ranges)
