"""Immutable cursor infrastructure for character-level scanning.

Every scanner in the syntax package walks its input with a Cursor:
the line joiner over the whole source, the entry splitter and the
escape decoder over a single logical line.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)

Line Ending Support:
    - LF (Unix, \\n): Line terminator
    - CRLF (Windows, \\r\\n): The \\r is stripped by the line joiner
    - CR-only (Classic Mac, \\r): NOT a terminator, kept as content

Python 3.12+. Zero external dependencies.
"""

from dataclasses import dataclass

from proplexengine.constants import ESCAPE_CHAR, WHITESPACE_CHARS
from proplexengine.diagnostics import ErrorTemplate

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("key=value", 0)
        >>> cursor.current
        'k'
        >>> cursor.advance(3).current
        '='
        >>> cursor.current  # Original unchanged (immutability)
        'k'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

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
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns None ONLY when peeking beyond EOF.
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def rest(self) -> str:
        """Extract everything from the current position to EOF."""
        return self.source[self.pos :]

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise."""
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def skip_whitespace(self) -> "Cursor":
        """Skip inline whitespace (space, tab, form feed).

        Line terminators are not skipped; they never occur inside a
        logical line.

        Example:
            >>> Cursor(" \\t\\fkey", 0).skip_whitespace().pos
            3
        """
        c = self
        while not c.is_eof and c.current in WHITESPACE_CHARS:
            c = c.advance()
        return c

    def skip_to_line_end(self) -> "Cursor":
        """Advance to the next LF (does not consume it)."""
        end = self.source.find("\n", self.pos)
        if end < 0:
            end = len(self.source)
        return Cursor(self.source, end)

    def skip_line_end(self) -> "Cursor":
        """Skip an LF line terminator, or stay put if not at one."""
        return self.expect("\n") or self

    def count_trailing_escapes(self, end_pos: int) -> int:
        """Count consecutive backslashes ending just before end_pos.

        Only characters at or after the current position are counted.

        Example:
            >>> Cursor("a\\\\\\\\\\\\", 0).count_trailing_escapes(4)
            3
        """
        count = 0
        i = end_pos - 1
        while i >= self.pos and self.source[i] == ESCAPE_CHAR:
            count += 1
            i -= 1
        return count
