"""Plural rule exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class PluralError(Exception):
    """Base exception for all plural rule errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PluralError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PluralGrammarError(PluralError):
    """Malformed plural rule text or rule data.

    Raised at compile time, which is registry build time. A registry is never
    built from partially valid data.

    Attributes:
        rule_text: The rule text being compiled (empty for data-level errors)
        fragment: The offending fragment of the rule text or the bad category tag
        position: Character offset of the fragment (-1 if not applicable)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        rule_text: str = "",
        fragment: str = "",
        position: int = -1,
    ) -> None:
        """Initialize PluralGrammarError.

        Args:
            message: Error message string OR Diagnostic object
            rule_text: The rule text being compiled
            fragment: The offending fragment
            position: Character offset of the fragment
        """
        super().__init__(message)
        self.rule_text = rule_text
        self.fragment = fragment
        self.position = position


class UnknownPluralRulesError(PluralError):
    """No rule set for a locale or its language.

    A configuration error, not a transient one. Callers decide whether to
    fall back to a default locale.

    Attributes:
        locale_code: Canonical name of the requested locale
        family: Rule family that was searched ("cardinal" or "ordinal")
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str, family: str) -> None:
        """Initialize UnknownPluralRulesError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: Canonical name of the requested locale
            family: Rule family that was searched
        """
        super().__init__(message)
        self.locale_code = locale_code
        self.family = family


class InvalidArgumentError(PluralError):
    """Caller contract violation.

    Examples:
    - Negative precision
    - NaN or infinite numbers
    - Strings that are not numbers
    - Malformed locale identifiers

    Attributes:
        argument: Name of the offending argument
    """

    def __init__(self, message: str | Diagnostic, *, argument: str) -> None:
        """Initialize InvalidArgumentError.

        Args:
            message: Error message string OR Diagnostic object
            argument: Name of the offending argument
        """
        super().__init__(message)
        self.argument = argument


class PluralDataError(PluralError):
    """Decoded CLDR document does not have the expected structure."""
