"""Plural rule data sources.

Produces the decoded structure a PluralRuleRegistry is built from:
locale name -> ordered (category, rule text) pairs, per rule family.

Sources:
    load_babel_rules - CLDR data bundled with Babel (default)
    decode_cldr_plurals - cldr-json supplemental plurals/ordinals documents
    load_cldr_json - the same, read from a file

Fetching CLDR releases is left to the caller; this module only decodes.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from pluralengine.constants import CATEGORY_ORDER, SAMPLE_MARKER
from pluralengine.diagnostics import ErrorTemplate, PluralDataError
from pluralengine.enums import RuleFamily

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Decoded structure
    "DecodedFamily",
    # Helpers
    "strip_samples",
    # Sources
    "decode_cldr_plurals",
    "load_babel_rules",
    "load_cldr_json",
]

logger = logging.getLogger(__name__)

type DecodedFamily = dict[str, list[tuple[str, str]]]
"""locale name -> [(category, rule text), ...] in CLDR category order."""

# cldr-json section per family: supplemental["plurals-type-cardinal"] etc.
_CLDR_JSON_SECTIONS: dict[RuleFamily, str] = {
    RuleFamily.CARDINAL: "plurals-type-cardinal",
    RuleFamily.ORDINAL: "plurals-type-ordinal",
}

_CLDR_JSON_RULE_PREFIX = "pluralRule-count-"

# Babel Locale attribute per family
_BABEL_ATTRIBUTES: dict[RuleFamily, str] = {
    RuleFamily.CARDINAL: "plural_form",
    RuleFamily.ORDINAL: "ordinal_form",
}


def strip_samples(rule_text: str) -> str:
    """Remove the @integer/@decimal sample lists from CLDR rule text.

    Example:
        >>> strip_samples("i = 1 and v = 0 @integer 1")
        'i = 1 and v = 0'
        >>> strip_samples(" @integer 0, 2~16, 100, 1000")
        ''
    """
    marker = rule_text.find(SAMPLE_MARKER)
    if marker >= 0:
        rule_text = rule_text[:marker]
    return rule_text.strip()


def _ordered(rules: Mapping[str, str]) -> list[tuple[str, str]]:
    """Order category -> text pairs by CLDR category order.

    Unknown category tags are kept (after the known ones) so that the
    registry build reports them.
    """
    known = [(tag, rules[tag]) for tag in CATEGORY_ORDER if tag in rules]
    unknown = [(tag, text) for tag, text in rules.items() if tag not in CATEGORY_ORDER]
    return known + unknown


def decode_cldr_plurals(document: Mapping[str, object]) -> dict[RuleFamily, DecodedFamily]:
    """Decode a cldr-json plurals.json and/or ordinals.json document.

    Expected shape::

        {"supplemental": {
            "plurals-type-cardinal": {
                "en": {"pluralRule-count-one": "i = 1 and v = 0 @integer 1",
                       "pluralRule-count-other": " @integer 0, 2~16, ..."}}}}

    Args:
        document: Parsed JSON document

    Returns:
        Decoded rules for each family present in the document

    Raises:
        PluralDataError: If the document has neither section, or an entry
            has the wrong shape
    """
    supplemental = document.get("supplemental")
    if not isinstance(supplemental, Mapping):
        raise PluralDataError(ErrorTemplate.data_missing_section("supplemental"))

    decoded: dict[RuleFamily, DecodedFamily] = {}
    for family, section in _CLDR_JSON_SECTIONS.items():
        locales = supplemental.get(section)
        if locales is None:
            continue
        if not isinstance(locales, Mapping):
            raise PluralDataError(ErrorTemplate.data_missing_section(f"supplemental.{section}"))
        decoded[family] = {
            str(locale_name): _decode_locale_entry(str(locale_name), entry)
            for locale_name, entry in locales.items()
        }

    if not decoded:
        sections = " or ".join(f"supplemental.{s}" for s in _CLDR_JSON_SECTIONS.values())
        raise PluralDataError(ErrorTemplate.data_missing_section(sections))
    return decoded


def _decode_locale_entry(locale_name: str, entry: object) -> list[tuple[str, str]]:
    if not isinstance(entry, Mapping):
        raise PluralDataError(ErrorTemplate.data_invalid_entry(locale_name, repr(entry)))
    rules: dict[str, str] = {}
    for key, text in entry.items():
        if not (isinstance(key, str) and key.startswith(_CLDR_JSON_RULE_PREFIX)):
            raise PluralDataError(ErrorTemplate.data_invalid_entry(locale_name, str(key)))
        if not isinstance(text, str):
            raise PluralDataError(ErrorTemplate.data_invalid_entry(locale_name, key))
        rules[key.removeprefix(_CLDR_JSON_RULE_PREFIX)] = strip_samples(text)
    return _ordered(rules)


def load_cldr_json(path: str | Path) -> dict[RuleFamily, DecodedFamily]:
    """Read and decode a cldr-json plurals/ordinals file.

    Args:
        path: Path to supplemental/plurals.json or supplemental/ordinals.json

    Returns:
        Decoded rules for each family present in the file

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not JSON
        PluralDataError: If the JSON does not have the cldr-json shape
    """
    document = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(document, Mapping):
        raise PluralDataError(ErrorTemplate.data_missing_section("supplemental"))
    return decode_cldr_plurals(document)


def load_babel_rules(family: RuleFamily = RuleFamily.CARDINAL) -> DecodedFamily:
    """Decode the plural rules bundled with Babel's CLDR data.

    Babel resolves inheritance, so every regional locale carries a full copy
    of its language's rules. Only languages and the regional locales whose
    rules differ from their language (pt_PT) are kept, which reproduces the
    sparse shape of CLDR's own plural data and leaves the rest to language
    fallback.

    Args:
        family: Rule family to decode

    Returns:
        locale name -> ordered (category, rule text) pairs
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import localedata  # noqa: PLC0415

    attribute = _BABEL_ATTRIBUTES[family]
    decoded: DecodedFamily = {}

    # Sorted so that every language precedes its regional locales
    for identifier in sorted(localedata.locale_identifiers()):
        if identifier == "root":
            continue
        rule = localedata.load(identifier).get(attribute)
        pairs = _ordered(rule.rules) if rule is not None else []
        language = identifier.partition("_")[0]
        if identifier != language and decoded.get(language) == pairs:
            continue
        decoded[identifier] = pairs

    logger.debug("Decoded %s plural rules for %d Babel locales", family, len(decoded))
    return decoded
