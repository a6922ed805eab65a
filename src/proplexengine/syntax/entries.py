"""Entry splitter: one logical line to a raw key/value pair.

The key ends at the first UNESCAPED delimiter ('=', ':', space, tab or
form feed). Escape state is tracked by backslash parity from the start of
the line, so 'a\\\\=b' splits at '=' while 'a\\=b' does not split at all.

Separator whitespace around the delimiter belongs to neither side:

    key = value     -> ("key", "value")
    key:value       -> ("key", "value")
    key   value     -> ("key", "value")
    key             -> ("key", None)
"""

from dataclasses import dataclass

from proplexengine.constants import DELIMITER_CHARS, ESCAPE_CHAR, EXPLICIT_DELIMITER_CHARS

from .cursor import Cursor

__all__ = ["RawEntry", "find_delimiter", "split_entry"]


@dataclass(frozen=True, slots=True)
class RawEntry:
    """Key and value spans of one logical line, escapes still literal.

    Attributes:
        key: Raw key text
        value: Raw value text, or None when the line had no delimiter
    """

    key: str
    value: str | None

    @property
    def has_value(self) -> bool:
        """Check if a delimiter (and therefore a value span) was present."""
        return self.value is not None


def find_delimiter(cursor: Cursor) -> Cursor:
    """Advance to the first unescaped delimiter.

    Args:
        cursor: Start of the key

    Returns:
        Cursor at the delimiter, or at EOF when the line has none
    """
    escaped = False
    while not cursor.is_eof:
        char = cursor.current
        if escaped:
            escaped = False
        elif char == ESCAPE_CHAR:
            escaped = True
        elif char in DELIMITER_CHARS:
            return cursor
        cursor = cursor.advance()
    return cursor


def _skip_separator(cursor: Cursor) -> Cursor:
    """Consume the delimiter at cursor plus its surrounding whitespace.

    A whitespace delimiter may be followed by one '=' or ':' which is then
    the real separator ("key  =  value").
    """
    if cursor.current in EXPLICIT_DELIMITER_CHARS:
        return cursor.advance().skip_whitespace()
    cursor = cursor.skip_whitespace()
    if not cursor.is_eof and cursor.current in EXPLICIT_DELIMITER_CHARS:
        cursor = cursor.advance().skip_whitespace()
    return cursor


def split_entry(line: str) -> RawEntry:
    """Split a logical line into raw key and value spans.

    Args:
        line: Joined logical line (comments already excluded)

    Returns:
        RawEntry; value is None for key-only lines

    Example:
        >>> split_entry("website = https://en.wikipedia.org/")
        RawEntry(key='website', value='https://en.wikipedia.org/')
        >>> split_entry("empty")
        RawEntry(key='empty', value=None)
    """
    start = Cursor(line, 0).skip_whitespace()
    delimiter = find_delimiter(start)
    key = start.slice_to(delimiter.pos)
    if delimiter.is_eof:
        return RawEntry(key=key, value=None)
    return RawEntry(key=key, value=_skip_separator(delimiter).rest())
