"""Hypothesis strategies for pluralengine property-based testing.

Strategies are organized by domain:

- plural: numbers, operands, rule texts and condition trees

Usage:
    from tests.strategies import plural_numbers, relations
    from tests.strategies.plural import left_associative_conditions

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - plural_numbers, relations
"""

from .plural import (
    LOCALE_CODES,
    OPERAND_NAMES,
    exact_decimals,
    left_associative_conditions,
    plural_numbers,
    relations,
)

__all__ = [
    "LOCALE_CODES",
    "OPERAND_NAMES",
    "exact_decimals",
    "left_associative_conditions",
    "plural_numbers",
    "relations",
]
