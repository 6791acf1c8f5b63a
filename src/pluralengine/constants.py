"""Shared constants for pluralengine.

This module provides centralized configuration constants used across
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Operand limits: Fractional precision for binary floats
- Grammar: Category order and operand symbols of the CLDR rule language
- Input limits: Size constraints on rule text
- Reference URLs: CLDR documentation used in diagnostics

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Operand limits
    "DEFAULT_PRECISION",
    # Grammar
    "CATEGORY_ORDER",
    "OPERAND_SYMBOLS",
    "SAMPLE_MARKER",
    # Input limits
    "MAX_RULE_LENGTH",
    # Reference URLs
    "CLDR_PLURALS_URL",
    "CLDR_SYNTAX_URL",
]

# ============================================================================
# OPERAND LIMITS
# ============================================================================

# Fraction digits kept when a binary float is converted to plural operands.
# Integers and Decimals carry their own exact scale and ignore this value.
# A float therefore always has v == DEFAULT_PRECISION: 1.0 is "1.000" and
# selects the same category as Decimal("1.000"), not the integer 1.
DEFAULT_PRECISION: int = 3

# ============================================================================
# GRAMMAR
# ============================================================================

# CLDR declaration order of plural categories. Rule sets are evaluated in
# this order and "other" is always the terminal entry.
CATEGORY_ORDER: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Operand symbols accepted in rule text.
#   n  absolute value of the source number
#   i  integer digits of n
#   v  number of visible fraction digits, with trailing zeros
#   w  number of visible fraction digits, without trailing zeros
#   f  visible fraction digits as integer, with trailing zeros
#   t  visible fraction digits as integer, without trailing zeros
#   c  compact decimal exponent (e is the older spelling)
OPERAND_SYMBOLS: frozenset[str] = frozenset({"n", "i", "v", "w", "f", "t", "c", "e"})

# Start of the sample list appended to CLDR rule text (@integer / @decimal).
SAMPLE_MARKER: str = "@"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Longest rule text accepted by the compiler. The longest CLDR rule is a few
# hundred characters; anything far beyond that is malformed data.
MAX_RULE_LENGTH: int = 4096

# ============================================================================
# REFERENCE URLS
# ============================================================================

CLDR_PLURALS_URL: str = (
    "https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html"
)
CLDR_SYNTAX_URL: str = "https://unicode.org/reports/tr35/tr35-numbers.html#Plural_rules_syntax"
