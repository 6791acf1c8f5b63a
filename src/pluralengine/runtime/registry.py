"""Compiled plural rule sets per locale.

A PluralRuleRegistry is built once from decoded CLDR data (locale name ->
ordered category/rule-text pairs) and never mutated afterwards, so it can
be shared by any number of threads without locking.

Cardinal and ordinal rules are independent families with independent
registries.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pluralengine.constants import CATEGORY_ORDER
from pluralengine.diagnostics import ErrorTemplate, PluralDataError, PluralGrammarError
from pluralengine.enums import PluralCategory, RuleFamily
from pluralengine.locale_utils import normalize_locale
from pluralengine.operands import PluralOperands
from pluralengine.syntax import TRUE, Condition, compile_empty, compile_rule

from .evaluator import evaluate

__all__ = ["DecodedRules", "PluralRuleRegistry", "RuleSet"]

logger = logging.getLogger(__name__)

type DecodedRules = Mapping[str, Iterable[tuple[str, str]] | Mapping[str, str]]
"""Decoded CLDR data: locale name -> (category, rule text) pairs."""

_CATEGORY_RANK = {category: rank for rank, category in enumerate(CATEGORY_ORDER)}


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Ordered rule set of one locale.

    Attributes:
        locale_name: POSIX locale name the rules were declared for
        rules: (category, condition) pairs in CLDR order. The last entry is
            always (OTHER, TRUE), so select() always finds a category.
    """

    locale_name: str
    rules: tuple[tuple[PluralCategory, Condition], ...]

    @property
    def categories(self) -> tuple[PluralCategory, ...]:
        """Categories declared for the locale, in evaluation order."""
        return tuple(category for category, _ in self.rules)

    def select(self, operands: PluralOperands) -> PluralCategory:
        """Return the first category whose condition holds."""
        for category, condition in self.rules:
            if evaluate(condition, operands):
                return category
        # Unreachable for registry-built rule sets: the terminal entry is TRUE.
        return PluralCategory.OTHER

    def __iter__(self) -> Iterator[tuple[PluralCategory, Condition]]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)


class PluralRuleRegistry:
    """Immutable mapping of locale name to RuleSet for one rule family.

    Thread Safety:
        Read-only after build(); the mapping is exposed through
        MappingProxyType and never modified.

    Example:
        >>> registry = PluralRuleRegistry.build({"en": [("one", "i = 1 and v = 0")]})
        >>> registry.lookup("en").categories
        (<PluralCategory.ONE: 'one'>, <PluralCategory.OTHER: 'other'>)
    """

    __slots__ = ("_family", "_rule_sets")

    def __init__(self, rule_sets: Mapping[str, RuleSet], family: RuleFamily) -> None:
        """Wrap already compiled rule sets. Use build() to compile decoded data."""
        self._rule_sets: Mapping[str, RuleSet] = MappingProxyType(dict(rule_sets))
        self._family = family

    @classmethod
    def build(
        cls, decoded: DecodedRules, family: RuleFamily = RuleFamily.CARDINAL
    ) -> PluralRuleRegistry:
        """Compile decoded CLDR data into a registry.

        Any malformed rule fails the whole build: CLDR data is machine
        generated, so a bad rule means a data/version mismatch rather than
        one bad locale.

        Args:
            decoded: locale name -> (category, rule text) pairs, or a
                category -> rule text mapping
            family: Rule family the data belongs to

        Returns:
            Registry with one RuleSet per locale

        Raises:
            PluralGrammarError: Malformed rule text, unknown or duplicate
                category, or a conditional "other"
            PluralDataError: Two keys name the same locale ("pt-PT" and
                "pt_PT")
        """
        rule_sets: dict[str, RuleSet] = {}
        keys: dict[str, str] = {}
        for locale_name, entries in decoded.items():
            name = normalize_locale(locale_name)
            if name in keys:
                raise PluralDataError(
                    ErrorTemplate.data_duplicate_locale(name, keys[name], locale_name)
                )
            keys[name] = locale_name
            pairs = entries.items() if isinstance(entries, Mapping) else entries
            rule_sets[name] = _compile_rule_set(name, pairs)

        logger.debug("Built %s plural rule registry for %d locales", family, len(rule_sets))
        return cls(rule_sets, family)

    @property
    def family(self) -> RuleFamily:
        """Rule family of every rule set in the registry."""
        return self._family

    def lookup(self, locale_name: str) -> RuleSet | None:
        """Exact lookup by locale name ("pt-PT" and "pt_PT" are the same name).

        No fallback: language fallback is the resolver's job.
        """
        return self._rule_sets.get(normalize_locale(locale_name))

    def locale_names(self) -> frozenset[str]:
        """Locale names that have a compiled rule set, in POSIX form ("pt_PT").

        The set is a plain snapshot: test membership of a BCP-47 tag with
        `normalize_locale(tag) in names`, or use `tag in registry`.
        """
        return frozenset(self._rule_sets)

    def gettext_nplurals(self, locale_name: str) -> dict[PluralCategory, int] | None:
        """Map each category of a locale to its gettext plural form index.

        Indexes follow CLDR category order, so for Polish
        {ONE: 0, FEW: 1, MANY: 2, OTHER: 3}.

        Returns:
            Category -> index mapping, or None if the locale is unknown
        """
        rule_set = self.lookup(locale_name)
        if rule_set is None:
            return None
        return {category: index for index, category in enumerate(rule_set.categories)}

    def __contains__(self, locale_name: object) -> bool:
        return isinstance(locale_name, str) and normalize_locale(locale_name) in self._rule_sets

    def __len__(self) -> int:
        return len(self._rule_sets)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rule_sets)

    def __repr__(self) -> str:
        return f"PluralRuleRegistry(family={self._family.value!r}, locales={len(self)})"


def _compile_rule_set(locale_name: str, pairs: Iterable[tuple[str, str]]) -> RuleSet:
    compiled: dict[PluralCategory, Condition] = {}
    for tag, rule_text in pairs:
        if tag not in _CATEGORY_RANK:
            raise PluralGrammarError(
                ErrorTemplate.unknown_category(locale_name, tag), fragment=tag
            )
        category = PluralCategory(tag)
        if category in compiled:
            raise PluralGrammarError(
                ErrorTemplate.duplicate_category(locale_name, tag), fragment=tag
            )
        condition = compile_rule(rule_text) if rule_text.strip() else compile_empty()
        if category is PluralCategory.OTHER and condition != TRUE:
            raise PluralGrammarError(
                ErrorTemplate.conditional_other(locale_name, rule_text),
                rule_text=rule_text,
                fragment=rule_text,
            )
        compiled[category] = condition

    compiled.setdefault(PluralCategory.OTHER, TRUE)
    ordered = sorted(compiled.items(), key=lambda item: _CATEGORY_RANK[item[0]])
    return RuleSet(locale_name=locale_name, rules=tuple(ordered))
