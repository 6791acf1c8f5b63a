"""Enumerations for pluralengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so substitution maps keyed by
plain strings ("one", "other") and by enum members are interchangeable.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category.

    Category names are grammatical classes, not literal counts: English
    ordinal rules return ONE for 21 ("21st") and OTHER for 0.
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class RuleFamily(StrEnum):
    """Independent families of CLDR plural rules.

    StrEnum provides automatic string conversion: str(RuleFamily.CARDINAL) == "cardinal"
    """

    CARDINAL = "cardinal"
    """Counting rules: 1 file, 2 files"""

    ORDINAL = "ordinal"
    """Ranking rules: 1st, 2nd, 3rd, 4th"""


__all__ = [
    "PluralCategory",
    "RuleFamily",
]
