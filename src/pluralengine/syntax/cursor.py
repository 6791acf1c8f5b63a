"""Immutable cursor over rule text.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
"""

from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["Cursor"]

# Inline whitespace between rule tokens
_SPACES = frozenset(" \t")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("n = 1", 0)
        >>> cursor.current
        'n'
        >>> cursor.advance().skip_spaces().current
        '='
        >>> cursor.current  # Original unchanged (immutability)
        'n'
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def skip_spaces(self) -> "Cursor":
        """Skip inline whitespace (space and tab)."""
        c = self
        while not c.is_eof and c.current in _SPACES:
            c = c.advance()
        return c

    def skip_while(self, predicate: Callable[[str], bool]) -> "Cursor":
        """Advance while ``predicate(current)`` holds.

        Args:
            predicate: Callable taking one character, e.g. str.isdigit

        Returns:
            New cursor at the first character failing the predicate (or EOF)
        """
        c = self
        while not c.is_eof and predicate(c.current):
            c = c.advance()
        return c
