"""Condition tree for compiled plural rules.

A compiled rule is a boolean expression over plural operands. The node
types form a closed union; every node is an immutable, hashable value, so
equal rule texts compile to equal trees and trees can be shared freely
between threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from pluralengine.constants import OPERAND_SYMBOLS

__all__ = [
    "FALSE",
    "TRUE",
    "And",
    "Condition",
    "Literal",
    "Or",
    "Range",
    "Relation",
]


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive integer range; a single value is Range(x, x).

    Attributes:
        low: Lower bound (inclusive)
        high: Upper bound (inclusive)
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        """Validate Range invariants.

        Raises:
            ValueError: If a bound is negative or high precedes low.
        """
        if self.low < 0:
            msg = f"Range.low must be >= 0, got {self.low}"
            raise ValueError(msg)
        if self.high < self.low:
            msg = f"Range.high ({self.high}) must be >= low ({self.low})"
            raise ValueError(msg)

    @property
    def is_single(self) -> bool:
        """True if the range holds exactly one value."""
        return self.low == self.high


@dataclass(frozen=True, slots=True)
class Relation:
    """Test of one operand against a set of values.

    ``n % 10 = 3..4,9`` is Relation("n", 10, False, (Range(3, 4), Range(9, 9))).

    Attributes:
        operand: Operand symbol (n, i, v, w, f, t, c, e)
        modulus: Reduce the operand modulo this value first (None: no reduction)
        negated: True for != / "is not" / "not in" / "not within"
        ranges: Value set as a tuple of ranges
        within: True for the legacy "within" relation, which accepts
            fractional values between the bounds. Otherwise only integral
            values can be members.
    """

    operand: str
    modulus: int | None
    negated: bool
    ranges: tuple[Range, ...]
    within: bool = False

    def __post_init__(self) -> None:
        """Validate Relation invariants.

        Raises:
            ValueError: If the operand is unknown, the modulus is not
                positive, or the value set is empty.
        """
        if self.operand not in OPERAND_SYMBOLS:
            msg = f"Relation.operand must be one of {sorted(OPERAND_SYMBOLS)}, got {self.operand!r}"
            raise ValueError(msg)
        if self.modulus is not None and self.modulus <= 0:
            msg = f"Relation.modulus must be > 0, got {self.modulus}"
            raise ValueError(msg)
        if not self.ranges:
            msg = "Relation.ranges must not be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class And:
    """Conjunction. Binds tighter than Or."""

    left: Condition
    right: Condition


@dataclass(frozen=True, slots=True)
class Or:
    """Disjunction."""

    left: Condition
    right: Condition


@dataclass(frozen=True, slots=True)
class Literal:
    """Constant condition. TRUE is the condition of the default category."""

    value: bool


type Condition = Relation | And | Or | Literal

TRUE = Literal(True)
FALSE = Literal(False)
