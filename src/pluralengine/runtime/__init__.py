"""Runtime: rule data loading, registries, evaluation and resolution.

Exports:
    PluralRules - Category resolver for one rule family
    PluralRuleRegistry - Immutable locale -> RuleSet mapping
    RuleSet - Ordered (category, condition) pairs of one locale
    evaluate - Condition evaluation against operands
    resolve, pluralize, known_locale_names - Default-registry API
    load_babel_rules, decode_cldr_plurals, load_cldr_json - Rule data sources

Python 3.13+.
"""

from .evaluator import evaluate
from .loading import decode_cldr_plurals, load_babel_rules, load_cldr_json, strip_samples
from .registry import PluralRuleRegistry, RuleSet
from .resolver import PluralRules, get_plural_rules, known_locale_names, pluralize, resolve

__all__ = [
    "PluralRuleRegistry",
    "PluralRules",
    "RuleSet",
    "decode_cldr_plurals",
    "evaluate",
    "get_plural_rules",
    "known_locale_names",
    "load_babel_rules",
    "load_cldr_json",
    "pluralize",
    "resolve",
    "strip_samples",
]
