"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from pluralengine.constants import CLDR_PLURALS_URL, CLDR_SYNTAX_URL

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    _OPERANDS_HINT = "Operands are n, i, v, w, f, t, c and e"

    # ------------------------------------------------------------------
    # Grammar errors
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_token(
        rule_text: str, fragment: str, position: int, expected: str
    ) -> Diagnostic:
        """Token that cannot appear at this point of a rule.

        Args:
            rule_text: Rule being compiled
            fragment: The unexpected token text
            position: Offset of the token
            expected: Description of what the grammar expected

        Returns:
            Diagnostic for GRAMMAR_UNEXPECTED_TOKEN
        """
        msg = f"Unexpected '{fragment}', expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_UNEXPECTED_TOKEN,
            message=msg,
            span=SourceSpan(position, position + len(fragment)),
            source=rule_text,
            help_url=CLDR_SYNTAX_URL,
        )

    @staticmethod
    def unexpected_end(rule_text: str, position: int, expected: str) -> Diagnostic:
        """Rule text ended in the middle of a relation.

        Args:
            rule_text: Rule being compiled
            position: Offset where the condition ends (before any samples)
            expected: Description of what the grammar expected

        Returns:
            Diagnostic for GRAMMAR_UNEXPECTED_END
        """
        msg = f"Unexpected end of rule, expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_UNEXPECTED_END,
            message=msg,
            span=SourceSpan(position, position),
            source=rule_text,
            help_url=CLDR_SYNTAX_URL,
        )

    @staticmethod
    def unknown_operand(rule_text: str, fragment: str, position: int) -> Diagnostic:
        """Operand symbol outside the CLDR operand set.

        Args:
            rule_text: Rule being compiled
            fragment: The unknown symbol
            position: Offset of the symbol

        Returns:
            Diagnostic for GRAMMAR_UNKNOWN_OPERAND
        """
        msg = f"Unknown operand '{fragment}'"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_UNKNOWN_OPERAND,
            message=msg,
            span=SourceSpan(position, position + len(fragment)),
            source=rule_text,
            hint=ErrorTemplate._OPERANDS_HINT,
            help_url=CLDR_SYNTAX_URL,
        )

    @staticmethod
    def unknown_operator(rule_text: str, fragment: str, position: int) -> Diagnostic:
        """Relational operator outside the CLDR grammar.

        Args:
            rule_text: Rule being compiled
            fragment: The unknown operator
            position: Offset of the operator

        Returns:
            Diagnostic for GRAMMAR_UNKNOWN_OPERATOR
        """
        msg = f"Unknown operator '{fragment}'"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_UNKNOWN_OPERATOR,
            message=msg,
            span=SourceSpan(position, position + len(fragment)),
            source=rule_text,
            hint="Relations use '=', '!=', 'is', 'is not', 'in', 'not in' or 'within'",
            help_url=CLDR_SYNTAX_URL,
        )

    @staticmethod
    def invalid_range(rule_text: str, fragment: str, position: int) -> Diagnostic:
        """Range with a missing or inverted bound.

        Args:
            rule_text: Rule being compiled
            fragment: The malformed range text
            position: Offset of the range

        Returns:
            Diagnostic for GRAMMAR_INVALID_RANGE
        """
        msg = f"Invalid range '{fragment}'"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_INVALID_RANGE,
            message=msg,
            span=SourceSpan(position, position + len(fragment)),
            source=rule_text,
            hint="Ranges are written low..high with low <= high",
            help_url=CLDR_SYNTAX_URL,
        )

    @staticmethod
    def invalid_modulus(rule_text: str, fragment: str, position: int) -> Diagnostic:
        """Modulus of zero.

        Args:
            rule_text: Rule being compiled
            fragment: The modulus text
            position: Offset of the modulus

        Returns:
            Diagnostic for GRAMMAR_INVALID_MODULUS
        """
        msg = f"Invalid modulus '{fragment}'"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_INVALID_MODULUS,
            message=msg,
            span=SourceSpan(position, position + len(fragment)),
            source=rule_text,
            hint="The modulus must be a positive integer",
            help_url=CLDR_SYNTAX_URL,
        )

    @staticmethod
    def parentheses_unsupported(rule_text: str, position: int) -> Diagnostic:
        """Parenthesized rule text.

        Args:
            rule_text: Rule being compiled
            position: Offset of the parenthesis

        Returns:
            Diagnostic for GRAMMAR_PARENTHESES_UNSUPPORTED
        """
        fragment = rule_text[position]
        msg = f"Parentheses are not part of the plural rule grammar: '{fragment}'"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_PARENTHESES_UNSUPPORTED,
            message=msg,
            span=SourceSpan(position, position + 1),
            source=rule_text,
            hint="'and' binds tighter than 'or'; rewrite the rule without grouping",
            help_url=CLDR_SYNTAX_URL,
        )

    @staticmethod
    def rule_too_long(length: int, limit: int) -> Diagnostic:
        """Rule text over the input size limit.

        Args:
            length: Length of the rejected text
            limit: Maximum accepted length

        Returns:
            Diagnostic for GRAMMAR_RULE_TOO_LONG
        """
        msg = f"Rule text is {length} characters long (limit: {limit})"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_RULE_TOO_LONG,
            message=msg,
            hint="Check that the rule data is CLDR plural rule data",
        )

    @staticmethod
    def unknown_category(locale_code: str, category: str) -> Diagnostic:
        """Rule declared for a category outside zero/one/two/few/many/other.

        Args:
            locale_code: Locale whose rules are being built
            category: The unknown category tag

        Returns:
            Diagnostic for GRAMMAR_UNKNOWN_CATEGORY
        """
        msg = f"Unknown plural category '{category}' for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_UNKNOWN_CATEGORY,
            message=msg,
            hint="Categories are zero, one, two, few, many and other",
            locale_code=locale_code,
            help_url=CLDR_PLURALS_URL,
        )

    @staticmethod
    def duplicate_category(locale_code: str, category: str) -> Diagnostic:
        """Category declared twice for one locale.

        Args:
            locale_code: Locale whose rules are being built
            category: The repeated category tag

        Returns:
            Diagnostic for GRAMMAR_DUPLICATE_CATEGORY
        """
        msg = f"Plural category '{category}' declared twice for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_DUPLICATE_CATEGORY,
            message=msg,
            locale_code=locale_code,
            help_url=CLDR_PLURALS_URL,
        )

    @staticmethod
    def conditional_other(locale_code: str, rule_text: str) -> Diagnostic:
        """Category 'other' declared with a condition.

        Args:
            locale_code: Locale whose rules are being built
            rule_text: The condition attached to 'other'

        Returns:
            Diagnostic for GRAMMAR_CONDITIONAL_OTHER
        """
        msg = f"Plural category 'other' for locale '{locale_code}' has a condition: '{rule_text}'"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_CONDITIONAL_OTHER,
            message=msg,
            source=rule_text,
            hint="'other' is the unconditional default and must have empty rule text",
            locale_code=locale_code,
            help_url=CLDR_PLURALS_URL,
        )

    # ------------------------------------------------------------------
    # Resolution errors
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_plural_rules(locale_code: str, language: str, family: str) -> Diagnostic:
        """No rule set for a locale or its language.

        Args:
            locale_code: Canonical locale name
            language: Language subtag tried as fallback
            family: Rule family searched

        Returns:
            Diagnostic for UNKNOWN_PLURAL_RULES
        """
        if language and language != locale_code:
            msg = f"No {family} plural rules available for '{locale_code}' or '{language}'"
        else:
            msg = f"No {family} plural rules available for '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_PLURAL_RULES,
            message=msg,
            hint="Use a locale listed by known_locale_names() or fall back to a default locale",
            locale_code=locale_code,
            help_url=CLDR_PLURALS_URL,
        )

    # ------------------------------------------------------------------
    # Argument errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_number(value: object, reason: str) -> Diagnostic:
        """Number that has no plural operands.

        Args:
            value: The rejected value
            reason: Why it was rejected

        Returns:
            Diagnostic for INVALID_NUMBER
        """
        msg = f"Cannot compute plural operands for {value!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER,
            message=msg,
            hint="Pass an int, a finite float, a finite Decimal or a numeric string",
        )

    @staticmethod
    def invalid_precision(precision: object) -> Diagnostic:
        """Precision that is not a non-negative integer.

        Args:
            precision: The rejected precision

        Returns:
            Diagnostic for INVALID_PRECISION
        """
        msg = f"Precision must be a non-negative integer, got {precision!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PRECISION,
            message=msg,
        )

    @staticmethod
    def invalid_locale(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier that cannot be parsed.

        Args:
            locale_code: The rejected identifier
            reason: Parser message

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        msg = f"Invalid locale identifier '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Use a BCP-47 or POSIX locale code such as 'en', 'pt-PT' or 'sr_Latn_BA'",
            locale_code=locale_code,
        )

    # ------------------------------------------------------------------
    # Data errors
    # ------------------------------------------------------------------

    @staticmethod
    def data_missing_section(section: str) -> Diagnostic:
        """Decoded CLDR document without an expected section.

        Args:
            section: Dotted path of the missing section

        Returns:
            Diagnostic for DATA_MISSING_SECTION
        """
        msg = f"CLDR plural document has no '{section}' section"
        return Diagnostic(
            code=DiagnosticCode.DATA_MISSING_SECTION,
            message=msg,
            hint="Expected cldr-json supplemental/plurals.json or supplemental/ordinals.json",
        )

    @staticmethod
    def data_invalid_entry(locale_code: str, key: str) -> Diagnostic:
        """Rule entry whose key or value has the wrong shape.

        Args:
            locale_code: Locale of the entry
            key: The offending key

        Returns:
            Diagnostic for DATA_INVALID_ENTRY
        """
        msg = f"Invalid plural rule entry '{key}' for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.DATA_INVALID_ENTRY,
            message=msg,
            hint="Entries are 'pluralRule-count-<category>': '<rule text>'",
            locale_code=locale_code,
        )

    @staticmethod
    def data_duplicate_locale(locale_code: str, first_key: str, second_key: str) -> Diagnostic:
        """Two data keys name the same locale after normalization.

        Args:
            locale_code: Normalized locale name
            first_key: Key seen first
            second_key: Key that collides with it

        Returns:
            Diagnostic for DATA_DUPLICATE_LOCALE
        """
        msg = (
            f"Locale keys '{first_key}' and '{second_key}' "
            f"both name locale '{locale_code}'"
        )
        return Diagnostic(
            code=DiagnosticCode.DATA_DUPLICATE_LOCALE,
            message=msg,
            hint="Keep one entry per locale; '-' and '_' are the same separator",
            locale_code=locale_code,
        )
