"""Locale utilities for plural rule lookup.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent registry keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING

from babel.core import get_locale_identifier, parse_locale

from pluralengine.diagnostics import ErrorTemplate, InvalidArgumentError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleId",
    "LocaleLike",
    "coerce_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    BCP-47 uses hyphens (pt-PT), while Babel/POSIX uses underscores (pt_PT).
    Registries store locale names in POSIX form, so every locale name is
    normalized at the system boundary with this function.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-PT")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_PT")

    Example:
        >>> normalize_locale("pt-PT")
        'pt_PT'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@dataclass(frozen=True, slots=True)
class LocaleId:
    """Locale identifier used for rule set lookup.

    Carries the canonical locale name tried first and the language subtag
    tried as the one-step fallback.

    Attributes:
        canonical_name: POSIX locale name (e.g., "pt_PT", "sr_Latn_BA")
        language: Language subtag (e.g., "pt", "sr")

    Example:
        >>> LocaleId.parse("en-us")
        LocaleId(canonical_name='en_US', language='en')
    """

    canonical_name: str
    language: str

    @classmethod
    def parse(cls, locale_code: str) -> LocaleId:
        """Parse a locale code without checking that CLDR knows it.

        Only the syntax of the tag is validated, so region locales without
        data of their own ("en-XX") still parse and can fall back to their
        language.

        Args:
            locale_code: BCP-47 or POSIX locale code

        Returns:
            LocaleId with canonical casing (language lower, script title,
            territory upper)

        Raises:
            InvalidArgumentError: If the code is not a well-formed locale tag
        """
        return _parse_locale_id(locale_code)

    @classmethod
    def from_babel(cls, locale: Locale) -> LocaleId:
        """Build a LocaleId from a Babel Locale."""
        return cls(canonical_name=str(locale), language=locale.language)

    def __str__(self) -> str:
        return self.canonical_name


type LocaleLike = str | LocaleId | Locale
"""Locale argument accepted by the public API."""


@functools.lru_cache(maxsize=128)
def _parse_locale_id(locale_code: str) -> LocaleId:
    """Parse and cache locale codes.

    Thread-safe via lru_cache internal locking.
    """
    try:
        parts = parse_locale(normalize_locale(locale_code.strip()))
    except ValueError as e:
        raise InvalidArgumentError(
            ErrorTemplate.invalid_locale(locale_code, str(e)), argument="locale"
        ) from e
    return LocaleId(canonical_name=get_locale_identifier(parts), language=parts[0])


def coerce_locale(locale: LocaleLike) -> LocaleId:
    """Convert any accepted locale argument to a LocaleId.

    Args:
        locale: Locale code string, LocaleId, or Babel Locale

    Returns:
        LocaleId for lookup

    Raises:
        InvalidArgumentError: If a string locale code is malformed
    """
    if isinstance(locale, LocaleId):
        return locale
    if isinstance(locale, str):
        return LocaleId.parse(locale)
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    if isinstance(locale, Locale):
        return LocaleId.from_babel(locale)
    raise InvalidArgumentError(
        ErrorTemplate.invalid_locale(repr(locale), "expected str, LocaleId or babel.Locale"),
        argument="locale",
    )
