"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern used by every wire-format grammar.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Sub-parsers return ParseResult | None; None means "no match here"

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["WHITESPACE", "Cursor", "ParseResult"]

# Characters matched by \s in the wire grammars (after RFC 5322 unfolding
# only space and tab normally remain).
WHITESPACE = frozenset(" \t\r\n\f\v")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("Sun, 06", 0)
        >>> cursor.current
        'S'
        >>> cursor.advance(3).current
        ','
        >>> cursor.current  # Original unchanged (immutability)
        'S'
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
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
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor."""
        return self.source[self.pos : self.pos + n]

    def rest(self) -> str:
        """Return everything from the current position to EOF."""
        return self.source[self.pos :]

    def skip_whitespace(self) -> "Cursor":
        """Skip any run of WHITESPACE characters (possibly empty)."""
        c = self
        while not c.is_eof and c.current in WHITESPACE:
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor(",x").expect(",").pos
            1
            >>> Cursor("x").expect(",") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def expect_any(self, chars: str) -> "Cursor | None":
        """Consume one character from chars, return None otherwise."""
        if not self.is_eof and self.current in chars:
            return self.advance()
        return None

    def take_while(self, predicate: Callable[[str], bool], limit: int | None = None) -> int:
        """Count consecutive characters satisfying predicate, up to limit.

        Args:
            predicate: Callable taking one character
            limit: Maximum count, or None for unbounded

        Returns:
            Number of matching characters starting at the current position
        """
        end = len(self.source) if limit is None else min(len(self.source), self.pos + limit)
        pos = self.pos
        while pos < end and predicate(self.source[pos]):
            pos += 1
        return pos - self.pos


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Every sub-parser has signature:
        def parse_foo(cursor: Cursor) -> ParseResult[Foo] | None

    Example:
        >>> result = ParseResult("06", Cursor("06 Nov", 2))
        >>> result.value, result.cursor.current
        ('06', ' ')
    """

    value: T
    cursor: Cursor
