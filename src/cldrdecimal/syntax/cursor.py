"""Immutable cursor infrastructure for type-safe tokenizing.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - One character of lookahead via peek()

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("#,##0", 0)
        >>> cursor.current
        '#'
        >>> cursor.advance().current
        ','
        >>> cursor.current  # Original unchanged (immutability)
        '#'
        >>> Cursor("0", 1).is_eof
        True
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

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input

        Type safety: callers check is_eof first, so current is always str.
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 1) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Example:
            >>> cursor = Cursor("0.00", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.advance(10).pos  # Clamped to source length
            4
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def run_length(self, char: str) -> int:
        """Count consecutive occurrences of char starting at the current position.

        Example:
            >>> Cursor("\\u00a4\\u00a4#", 0).run_length("\\u00a4")
            2
            >>> Cursor("#", 0).run_length("0")
            0
        """
        end = self.pos
        while end < len(self.source) and self.source[end] == char:
            end += 1
        return end - self.pos
