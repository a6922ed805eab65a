"""Escape decoder for value text.

Single left-to-right pass; decoded characters are never re-scanned.
Recognized escapes map through ESCAPE_SEQUENCES; any other backslash pair
is kept verbatim, and a lone trailing backslash stays a backslash.
"""

from proplexengine.constants import ESCAPE_CHAR, ESCAPE_SEQUENCES

from .cursor import Cursor

__all__ = ["unescape"]


def unescape(text: str) -> str:
    """Decode escape sequences in a raw value span.

    Args:
        text: Raw span with escapes still literal

    Returns:
        Decoded text

    Example:
        >>> unescape("c:\\\\\\\\wiki")
        'c:\\\\wiki'
        >>> unescape("tab\\\\there")
        'tab\\there'
        >>> unescape("\\\\q")
        '\\\\q'
    """
    if ESCAPE_CHAR not in text:
        return text

    out: list[str] = []
    cursor = Cursor(text, 0)
    while not cursor.is_eof:
        char = cursor.current
        nxt = cursor.peek(1)
        if char != ESCAPE_CHAR or nxt is None:
            out.append(char)
            cursor = cursor.advance()
            continue
        decoded = ESCAPE_SEQUENCES.get(nxt)
        out.append(decoded if decoded is not None else char + nxt)
        cursor = cursor.advance(2)
    return "".join(out)
