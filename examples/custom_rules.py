"""Custom Rule Data Example - Registries From cldr-json.

Demonstrates building rule registries from data other than Babel's bundled
CLDR release: an inline cldr-json document, a file on disk, and rule text
written by hand.

Scenarios covered:
1. Decoding a cldr-json plurals.json document
2. Reading the same document from a file
3. Inspecting compiled rules and gettext plural indexes
4. Reporting malformed rule data

Python 3.13+.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from pluralengine import (
    PluralGrammarError,
    PluralRuleRegistry,
    PluralRules,
    RuleFamily,
    serialize,
)
from pluralengine.runtime import decode_cldr_plurals, load_cldr_json

PLURALS_JSON = {
    "supplemental": {
        "plurals-type-cardinal": {
            "lt": {
                "pluralRule-count-one": "n % 10 = 1 and n % 100 != 11..19 @integer 1, 21, 31",
                "pluralRule-count-few": "n % 10 = 2..9 and n % 100 != 11..19 @integer 2~9, 22~29",
                "pluralRule-count-many": "f != 0 @decimal 0.1~0.9, 1.1~1.7",
                "pluralRule-count-other": " @integer 0, 10~20, 30, 40, 50, 60",
            },
        },
    }
}


def example_1_decode_document() -> None:
    """Decode an in-memory cldr-json document."""
    decoded = decode_cldr_plurals(PLURALS_JSON)
    rules = PluralRules(PluralRuleRegistry.build(decoded[RuleFamily.CARDINAL]))

    for number in (1, 2, 10, "0.5", 21):
        print(f"lt {number}: {rules.select(number, 'lt')}")
    # Output: one, few, other, many, one


def example_2_load_file() -> None:
    """Read the same document from disk."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "plurals.json"
        path.write_text(json.dumps(PLURALS_JSON), encoding="utf-8")
        decoded = load_cldr_json(path)

    registry = PluralRuleRegistry.build(decoded[RuleFamily.CARDINAL])
    print(registry)
    # Output: PluralRuleRegistry(family='cardinal', locales=1)


def example_3_inspect_rules() -> None:
    """Print compiled rules in canonical syntax and gettext indexes."""
    registry = PluralRuleRegistry.build(decode_cldr_plurals(PLURALS_JSON)[RuleFamily.CARDINAL])
    rule_set = registry.lookup("lt")
    if rule_set is None:
        return
    for category, condition in rule_set:
        print(f"{category:>6}: {serialize(condition) or '(default)'}")
    print(registry.gettext_nplurals("lt"))


def example_4_malformed_data() -> None:
    """A malformed rule fails the whole build with a located diagnostic."""
    try:
        PluralRuleRegistry.build({"xx": [("one", "n == 1")]})
    except PluralGrammarError as e:
        print(e)
        # error[GRAMMAR_UNKNOWN_OPERATOR]: Unknown operator '=='
        #   --> column 3


if __name__ == "__main__":
    example_1_decode_document()
    example_2_load_file()
    example_3_inspect_rules()
    example_4_malformed_data()
