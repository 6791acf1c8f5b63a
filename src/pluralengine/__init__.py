"""pluralengine - CLDR plural rules for Python.

Selects the CLDR plural category (zero, one, two, few, many, other) of a
number in a locale. Rules are compiled from CLDR rule text into condition
trees once and evaluated by a single interpreter; operands are computed
from exact decimal digits, so 1, 1.0 and Decimal("1.00") are distinct.

Public API:
    resolve - Plural category of a number in a locale
    pluralize - Substitution lookup by plural category
    known_locale_names - Locales with compiled rules
    compute_operands - CLDR operands (n, i, v, w, f, t) of a number
    compile_rule / compile_empty / serialize - Rule language compiler
    PluralRules - Resolver over a custom registry
    PluralRuleRegistry / RuleSet - Compiled rule data
    LocaleId - Locale name plus language subtag used for fallback
    PluralCategory / RuleFamily - Enumerations

Exceptions:
    PluralError - Base exception class
    PluralGrammarError - Malformed rule text or rule data
    UnknownPluralRulesError - No rules for a locale or its language
    InvalidArgumentError - Caller contract violation
    PluralDataError - Malformed CLDR document

Submodules:
    pluralengine.syntax - Condition tree, compiler, serializer
    pluralengine.runtime - Registries, evaluation, data loading
    pluralengine.diagnostics - Error types and diagnostic formatting
"""

from .diagnostics import (
    InvalidArgumentError,
    PluralDataError,
    PluralError,
    PluralGrammarError,
    UnknownPluralRulesError,
)
from .enums import PluralCategory, RuleFamily
from .locale_utils import LocaleId
from .operands import PluralOperands, compute_operands
from .runtime import (
    PluralRuleRegistry,
    PluralRules,
    RuleSet,
    known_locale_names,
    pluralize,
    resolve,
)
from .syntax import compile_empty, compile_rule, serialize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("pluralengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# CLDR release the rule grammar follows
__cldr_version__ = "47"

__all__ = [
    "InvalidArgumentError",
    "LocaleId",
    "PluralCategory",
    "PluralDataError",
    "PluralError",
    "PluralGrammarError",
    "PluralOperands",
    "PluralRuleRegistry",
    "PluralRules",
    "RuleFamily",
    "RuleSet",
    "UnknownPluralRulesError",
    "__cldr_version__",
    "__version__",
    "compile_empty",
    "compile_rule",
    "compute_operands",
    "known_locale_names",
    "pluralize",
    "resolve",
    "serialize",
]
