"""Compiler for the CLDR plural rule language.

Turns rule text such as ``v = 0 and i % 10 = 1 and i % 100 != 11`` into a
Condition tree. Accepts the current TR35 syntax and the legacy keyword
syntax that Babel emits (``n mod 10 in 2..4``, ``n is not 1``,
``n not within 0..2``).

Grammar:
    condition     = and_condition ("or" and_condition)*
    and_condition = relation ("and" relation)*
    relation      = expr ("=" | "!=") range_list
                  | expr "is" ["not"] value
                  | expr ["not"] ("in" | "within") range_list
    expr          = operand [("%" | "mod") value]
    range_list    = (value | value ".." value) ("," (value | value ".." value))*

Sample lists (``@integer ...``, ``@decimal ...``) after the condition are
ignored. Blank text is the unconditional condition.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import StrEnum

from pluralengine.constants import MAX_RULE_LENGTH, OPERAND_SYMBOLS, SAMPLE_MARKER
from pluralengine.diagnostics import ErrorTemplate, PluralGrammarError

from .ast import TRUE, And, Condition, Or, Range, Relation
from .cursor import Cursor

__all__ = ["RuleParser", "compile_empty", "compile_rule"]


class TokenKind(StrEnum):
    """Lexical class of a rule token."""

    WORD = "word"
    NUMBER = "number"
    SYMBOL = "symbol"
    END = "end"


@dataclass(frozen=True, slots=True)
class Token:
    """Token with its offset in the rule text."""

    kind: TokenKind
    text: str
    position: int


# Operators some other rule languages have and CLDR does not
_FOREIGN_OPERATORS = frozenset({"==", "<", ">", "<=", ">=", "!", "<>"})

_PARENTHESES = frozenset("()")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _tokenize(source: str) -> list[Token]:
    """Split rule text into tokens, ending with one END token."""
    tokens: list[Token] = []
    cursor = Cursor(source, 0).skip_spaces()

    while not cursor.is_eof:
        char = cursor.current
        start = cursor.pos

        if _is_digit(char):
            end = cursor.skip_while(_is_digit)
            tokens.append(Token(TokenKind.NUMBER, cursor.slice_to(end.pos), start))
        elif _is_letter(char):
            end = cursor.skip_while(_is_letter)
            tokens.append(Token(TokenKind.WORD, cursor.slice_to(end.pos), start))
        else:
            # Two-character symbols first: .. != == <= >= <>
            pair = cursor.slice_to(cursor.pos + 2)
            width = 2 if pair in ("..", "!=", "==", "<=", ">=", "<>") else 1
            end = cursor.advance(width)
            tokens.append(Token(TokenKind.SYMBOL, cursor.slice_to(end.pos), start))

        cursor = end.skip_spaces()

    tokens.append(Token(TokenKind.END, "", len(source)))
    return tokens


def _strip_samples(rule_text: str) -> str:
    marker = rule_text.find(SAMPLE_MARKER)
    return rule_text if marker < 0 else rule_text[:marker]


class RuleParser:
    """Recursive-descent parser for a single rule text.

    One instance parses one text; use compile_rule() instead of
    instantiating this directly.

    Example:
        >>> RuleParser("i = 1 and v = 0").parse()
        And(left=Relation(operand='i', ...), right=Relation(operand='v', ...))
    """

    __slots__ = ("_index", "_source", "_tokens")

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens = _tokenize(_strip_samples(source))
        self._index = 0

    # ------------------------------------------------------------------
    # Token stream
    # ------------------------------------------------------------------

    @property
    def _current(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind is not TokenKind.END:
            self._index += 1
        return token

    def _at_word(self, word: str) -> bool:
        token = self._current
        return token.kind is TokenKind.WORD and token.text == word

    def _at_symbol(self, symbol: str) -> bool:
        token = self._current
        return token.kind is TokenKind.SYMBOL and token.text == symbol

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def _error(self, token: Token, expected: str) -> PluralGrammarError:
        """Build the most specific error for an unexpected token."""
        if token.kind is TokenKind.END:
            diagnostic = ErrorTemplate.unexpected_end(self._source, token.position, expected)
        elif token.kind is TokenKind.SYMBOL and token.text in _PARENTHESES:
            diagnostic = ErrorTemplate.parentheses_unsupported(self._source, token.position)
        else:
            diagnostic = ErrorTemplate.unexpected_token(
                self._source, token.text, token.position, expected
            )
        return PluralGrammarError(
            diagnostic, rule_text=self._source, fragment=token.text, position=token.position
        )

    def _range_error(self, start: int, end: int) -> PluralGrammarError:
        fragment = self._source[start:end]
        return PluralGrammarError(
            ErrorTemplate.invalid_range(self._source, fragment, start),
            rule_text=self._source,
            fragment=fragment,
            position=start,
        )

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def parse(self) -> Condition:
        """Parse the whole text.

        Returns:
            Condition tree (TRUE for blank text)

        Raises:
            PluralGrammarError: If the text is not a valid rule
        """
        if self._current.kind is TokenKind.END:
            return TRUE
        condition = self._parse_or()
        if self._current.kind is not TokenKind.END:
            raise self._error(self._current, "'and', 'or' or end of rule")
        return condition

    def _parse_or(self) -> Condition:
        condition = self._parse_and()
        while self._at_word("or"):
            self._advance()
            condition = Or(condition, self._parse_and())
        return condition

    def _parse_and(self) -> Condition:
        condition = self._parse_relation()
        while self._at_word("and"):
            self._advance()
            condition = And(condition, self._parse_relation())
        return condition

    def _parse_relation(self) -> Relation:
        operand = self._parse_operand()
        modulus = self._parse_modulus()
        token = self._current

        if token.kind is TokenKind.SYMBOL:
            if token.text in ("=", "!="):
                self._advance()
                return Relation(operand, modulus, token.text == "!=", self._parse_range_list())
            if token.text in _FOREIGN_OPERATORS:
                raise PluralGrammarError(
                    ErrorTemplate.unknown_operator(self._source, token.text, token.position),
                    rule_text=self._source,
                    fragment=token.text,
                    position=token.position,
                )
            raise self._error(token, "a relational operator")

        if token.kind is TokenKind.WORD:
            if token.text == "is":
                self._advance()
                negated = self._at_word("not")
                if negated:
                    self._advance()
                value = self._parse_value()
                return Relation(operand, modulus, negated, (Range(value, value),))

            negated = token.text == "not"
            if negated:
                self._advance()
            keyword = self._current
            if keyword.kind is TokenKind.WORD and keyword.text in ("in", "within"):
                self._advance()
                return Relation(
                    operand,
                    modulus,
                    negated,
                    self._parse_range_list(),
                    within=keyword.text == "within",
                )
            if negated:
                raise self._error(keyword, "'in' or 'within'")
            raise PluralGrammarError(
                ErrorTemplate.unknown_operator(self._source, token.text, token.position),
                rule_text=self._source,
                fragment=token.text,
                position=token.position,
            )

        raise self._error(token, "a relational operator")

    def _parse_operand(self) -> str:
        token = self._current
        if token.kind is not TokenKind.WORD:
            raise self._error(token, "an operand")
        if token.text not in OPERAND_SYMBOLS:
            raise PluralGrammarError(
                ErrorTemplate.unknown_operand(self._source, token.text, token.position),
                rule_text=self._source,
                fragment=token.text,
                position=token.position,
            )
        self._advance()
        return token.text

    def _parse_modulus(self) -> int | None:
        if not (self._at_symbol("%") or self._at_word("mod")):
            return None
        self._advance()
        token = self._current
        modulus = self._parse_value()
        if modulus == 0:
            raise PluralGrammarError(
                ErrorTemplate.invalid_modulus(self._source, token.text, token.position),
                rule_text=self._source,
                fragment=token.text,
                position=token.position,
            )
        return modulus

    def _parse_range_list(self) -> tuple[Range, ...]:
        ranges = [self._parse_range()]
        while self._at_symbol(","):
            self._advance()
            ranges.append(self._parse_range())
        return tuple(ranges)

    def _parse_range(self) -> Range:
        start = self._current.position
        if self._at_symbol(".."):
            # "..5": range without a lower bound
            self._advance()
            raise self._range_error(start, self._range_end())
        low = self._parse_value()
        if not self._at_symbol(".."):
            return Range(low, low)
        self._advance()
        if self._current.kind is not TokenKind.NUMBER:
            # "1..": range without an upper bound
            raise self._range_error(start, self._tokens[self._index - 1].position + 2)
        high = self._parse_value()
        if high < low:
            raise self._range_error(start, self._range_end())
        return Range(low, high)

    def _range_end(self) -> int:
        """End offset of the token just consumed, or of the next number."""
        token = self._current
        if token.kind is TokenKind.NUMBER:
            return token.position + len(token.text)
        previous = self._tokens[self._index - 1]
        return previous.position + len(previous.text)

    def _parse_value(self) -> int:
        token = self._current
        if token.kind is not TokenKind.NUMBER:
            raise self._error(token, "a number")
        self._advance()
        return int(token.text)


@functools.lru_cache(maxsize=1024)
def compile_rule(rule_text: str) -> Condition:
    """Compile CLDR plural rule text into a Condition tree.

    Many locales share identical rule texts; compiled trees are immutable,
    so results are cached and shared.

    Args:
        rule_text: Rule text, optionally followed by @integer/@decimal samples

    Returns:
        Condition tree; TRUE if the text has no condition

    Raises:
        PluralGrammarError: If the text is malformed. The error names the
            offending fragment and its offset.

    Examples:
        >>> compile_rule("n = 1 and v = 0")
        And(left=Relation(operand='n', ...), right=Relation(operand='v', ...))
        >>> compile_rule("@integer 0, 2~16")
        Literal(value=True)
    """
    if len(rule_text) > MAX_RULE_LENGTH:
        raise PluralGrammarError(
            ErrorTemplate.rule_too_long(len(rule_text), MAX_RULE_LENGTH),
            rule_text=rule_text[:MAX_RULE_LENGTH],
        )
    return RuleParser(rule_text).parse()


def compile_empty() -> Condition:
    """Condition of a category declared without rule text."""
    return TRUE
