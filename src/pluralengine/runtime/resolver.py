"""Plural category resolution and substitution lookup.

Combines the operand calculator and a rule registry:

    number -> operands -> rule set (locale, then language) -> first match

PluralRules is the per-family facade; the module-level functions use the
default registries compiled from Babel's CLDR data on first use.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from typing import TypeVar

from pluralengine.constants import DEFAULT_PRECISION
from pluralengine.diagnostics import ErrorTemplate, UnknownPluralRulesError
from pluralengine.enums import PluralCategory, RuleFamily
from pluralengine.locale_utils import LocaleLike, coerce_locale
from pluralengine.operands import PluralNumber, compute_operands

from .loading import load_babel_rules
from .registry import PluralRuleRegistry, RuleSet

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "PluralRules",
    "get_plural_rules",
    # Module-level API over the default registries
    "resolve",
    "pluralize",
    "known_locale_names",
]

logger = logging.getLogger(__name__)

V = TypeVar("V")


class PluralRules:
    """Category resolver for one rule family.

    Stateless apart from the immutable registry it wraps; safe to share
    between threads.

    Example:
        >>> cardinal = PluralRules(PluralRuleRegistry.build(load_babel_rules()))
        >>> cardinal.select(0, "fr")
        <PluralCategory.ONE: 'one'>
        >>> cardinal.pluralize(2, "en", {"one": "file", "other": "files"})
        'files'
    """

    __slots__ = ("_precision", "_registry")

    def __init__(self, registry: PluralRuleRegistry, *, precision: int = DEFAULT_PRECISION) -> None:
        """Initialize PluralRules.

        Args:
            registry: Compiled rule sets of one family
            precision: Default fraction digits kept for float inputs
        """
        self._registry = registry
        self._precision = precision

    @property
    def registry(self) -> PluralRuleRegistry:
        """Underlying rule registry."""
        return self._registry

    @property
    def family(self) -> RuleFamily:
        """Rule family resolved by this instance."""
        return self._registry.family

    @property
    def precision(self) -> int:
        """Default float precision."""
        return self._precision

    def rules_for(self, locale: LocaleLike) -> RuleSet:
        """Find the rule set of a locale, falling back once to its language.

        Args:
            locale: Locale code, LocaleId, or Babel Locale

        Returns:
            RuleSet of the locale or of its language

        Raises:
            UnknownPluralRulesError: If neither has rules
            InvalidArgumentError: If the locale code is malformed
        """
        locale_id = coerce_locale(locale)
        rule_set = self._registry.lookup(locale_id.canonical_name)
        if rule_set is not None:
            return rule_set

        if locale_id.language and locale_id.language != locale_id.canonical_name:
            rule_set = self._registry.lookup(locale_id.language)
            if rule_set is not None:
                logger.debug(
                    "No %s plural rules for '%s', using '%s'",
                    self.family,
                    locale_id.canonical_name,
                    locale_id.language,
                )
                return rule_set

        raise UnknownPluralRulesError(
            ErrorTemplate.unknown_plural_rules(
                locale_id.canonical_name, locale_id.language, self.family
            ),
            locale_code=locale_id.canonical_name,
            family=self.family,
        )

    def select(
        self, number: PluralNumber, locale: LocaleLike, precision: int | None = None
    ) -> PluralCategory:
        """Return the plural category of a number in a locale.

        Args:
            number: int, float, Decimal or numeric string
            locale: Locale code, LocaleId, or Babel Locale
            precision: Fraction digits for floats (default: instance precision)

        Returns:
            First category whose condition holds; always one of the
            categories declared for the locale

        Raises:
            UnknownPluralRulesError: No rules for the locale or its language
            InvalidArgumentError: Invalid number, precision, or locale code
        """
        operands = compute_operands(number, self._precision if precision is None else precision)
        return self.rules_for(locale).select(operands)

    def pluralize(
        self,
        number: PluralNumber,
        locale: LocaleLike,
        substitutions: Mapping[str, V],
        precision: int | None = None,
    ) -> V | None:
        """Pick the substitution for the plural category of a number.

        Falls back to the "other" entry; returns None if that is missing too.
        A missing "other" entry is the caller's contract, not an error.

        Args:
            number: int, float, Decimal or numeric string
            locale: Locale code, LocaleId, or Babel Locale
            substitutions: Category -> value. Keys may be PluralCategory
                members or plain strings.
            precision: Fraction digits for floats (default: instance precision)

        Returns:
            Substitution value or None
        """
        category = self.select(number, locale, precision)
        if category in substitutions:
            return substitutions[category]
        return substitutions.get(PluralCategory.OTHER)

    def known_locale_names(self) -> frozenset[str]:
        """Locale names with a compiled rule set, in POSIX form ("pt_PT")."""
        return self._registry.locale_names()

    def gettext_nplurals(self, locale: LocaleLike) -> dict[PluralCategory, int]:
        """Category -> gettext plural index for a locale (with language fallback)."""
        return {category: index for index, category in enumerate(self.rules_for(locale).categories)}


@functools.cache
def get_plural_rules(family: RuleFamily = RuleFamily.CARDINAL) -> PluralRules:
    """Return the default resolver of a family, built from Babel's CLDR data.

    Built once per process on first use and shared afterwards. A concurrent
    first call may build twice; both results are equal and one is kept.

    Raises:
        PluralGrammarError: If the bundled data does not compile
    """
    family = RuleFamily(family)
    return PluralRules(PluralRuleRegistry.build(load_babel_rules(family), family))


def resolve(
    number: PluralNumber,
    locale: LocaleLike,
    precision: int = DEFAULT_PRECISION,
    *,
    family: RuleFamily = RuleFamily.CARDINAL,
) -> PluralCategory:
    """Return the CLDR plural category of a number.

    Args:
        number: int, float, Decimal or numeric string
        locale: Locale code (e.g., "en", "pt-PT", "lv_LV"), LocaleId, or Babel Locale
        precision: Fraction digits kept for floats
        family: CARDINAL (1 file, 2 files) or ORDINAL (1st, 2nd)

    Returns:
        Plural category

    Raises:
        UnknownPluralRulesError: No rules for the locale or its language
        InvalidArgumentError: Invalid number, precision, or locale code

    Examples:
        >>> resolve(1, "en")
        <PluralCategory.ONE: 'one'>
        >>> resolve(0, "fr")
        <PluralCategory.ONE: 'one'>
        >>> resolve(11, "en", family=RuleFamily.ORDINAL)
        <PluralCategory.OTHER: 'other'>
    """
    return get_plural_rules(family).select(number, locale, precision)


def pluralize(
    number: PluralNumber,
    locale: LocaleLike,
    substitutions: Mapping[str, V],
    *,
    precision: int = DEFAULT_PRECISION,
    family: RuleFamily = RuleFamily.CARDINAL,
) -> V | None:
    """Pick a substitution by plural category, falling back to "other".

    Examples:
        >>> pluralize(2, "en", {"one": "one item"}) is None
        True
        >>> pluralize(2, "en", {"one": "one item", "other": "other"})
        'other'
        >>> pluralize(22, "en", {"two": "nd", "other": "th"}, family=RuleFamily.ORDINAL)
        'nd'
    """
    return get_plural_rules(family).pluralize(number, locale, substitutions, precision)


def known_locale_names(family: RuleFamily = RuleFamily.CARDINAL) -> frozenset[str]:
    """Locale names with compiled rules in the default registry of a family.

    Names use POSIX separators ("pt_PT", not "pt-PT"), the form lookups
    normalize to. Informational only: resolve() and pluralize() accept either
    spelling.

    Examples:
        >>> "pt_PT" in known_locale_names()
        True
        >>> from pluralengine.locale_utils import normalize_locale
        >>> normalize_locale("pt-PT") in known_locale_names()
        True
    """
    return get_plural_rules(family).known_locale_names()
