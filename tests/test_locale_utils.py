"""Tests for locale_utils.py: locale normalization and parsing.

Covers:
- BCP-47 to POSIX normalization
- LocaleId parsing with canonical casing
- Conversion of every accepted locale argument type

Python 3.13+.
"""

from __future__ import annotations

import pytest
from babel import Locale
from hypothesis import given
from hypothesis import strategies as st

from pluralengine import InvalidArgumentError, LocaleId
from pluralengine.diagnostics import DiagnosticCode
from pluralengine.locale_utils import coerce_locale, normalize_locale


class TestNormalizeLocale:
    """normalize_locale() replaces hyphens with underscores."""

    @pytest.mark.parametrize(
        ("locale_code", "expected"),
        [
            ("pt-PT", "pt_PT"),
            ("en", "en"),
            ("sr-Latn-BA", "sr_Latn_BA"),
            ("en_US", "en_US"),
        ],
    )
    def test_normalize(self, locale_code: str, expected: str) -> None:
        """Separators are unified; casing is untouched."""
        assert normalize_locale(locale_code) == expected

    @given(st.text(alphabet="abcXYZ-_", max_size=20))
    def test_idempotent(self, locale_code: str) -> None:
        """Property: normalizing twice equals normalizing once."""
        once = normalize_locale(locale_code)
        assert normalize_locale(once) == once
        assert "-" not in once


class TestLocaleIdParse:
    """LocaleId.parse() canonicalizes without checking CLDR coverage."""

    @pytest.mark.parametrize(
        ("locale_code", "canonical_name", "language"),
        [
            ("en", "en", "en"),
            ("en-us", "en_US", "en"),
            ("EN_us", "en_US", "en"),
            ("pt-PT", "pt_PT", "pt"),
            ("sr-latn-ba", "sr_Latn_BA", "sr"),
            ("en-XX", "en_XX", "en"),
            ("es-419", "es_419", "es"),
            (" fr ", "fr", "fr"),
        ],
    )
    def test_parse(self, locale_code: str, canonical_name: str, language: str) -> None:
        """Tags parse to canonical name and language."""
        locale_id = LocaleId.parse(locale_code)
        assert locale_id == LocaleId(canonical_name=canonical_name, language=language)
        assert str(locale_id) == canonical_name

    @pytest.mark.parametrize("locale_code", ["", "123", "en-", "e n"])
    def test_malformed(self, locale_code: str) -> None:
        """Malformed tags raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            LocaleId.parse(locale_code)
        assert exc_info.value.argument == "locale"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_LOCALE

    def test_from_babel(self) -> None:
        """Babel locales convert with their own identifier."""
        assert LocaleId.from_babel(Locale.parse("pt_PT")) == LocaleId("pt_PT", "pt")


class TestCoerceLocale:
    """coerce_locale() accepts str, LocaleId and babel.Locale."""

    def test_locale_id_passthrough(self) -> None:
        """LocaleId values are returned as is."""
        locale_id = LocaleId("en_US", "en")
        assert coerce_locale(locale_id) is locale_id

    def test_string(self) -> None:
        """Strings are parsed."""
        assert coerce_locale("lv-LV") == LocaleId("lv_LV", "lv")

    def test_babel_locale(self) -> None:
        """Babel locales are converted."""
        assert coerce_locale(Locale("de", "AT")) == LocaleId("de_AT", "de")

    @pytest.mark.parametrize("value", [42, None, b"en"])
    def test_unsupported_type(self, value: object) -> None:
        """Other types are rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            coerce_locale(value)  # type: ignore[arg-type]
        assert exc_info.value.argument == "locale"
