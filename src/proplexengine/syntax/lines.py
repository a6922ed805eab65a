"""Line joiner: physical lines to logical lines.

A logical line is one entry's full text after joining every physical line
continued with a trailing backslash. Comment lines and blank lines never
produce logical lines.

Continuation Parity:
    A physical line continues iff it ends with an ODD number of backslashes.
    The last backslash escapes the line terminator and is dropped; the rest
    are literal and reach the escape decoder untouched.

        evenKey = one line\\\\      -> not continued (2 backslashes)
        oddKey = line one\\\\\\     -> continued (3 backslashes)
"""

from collections.abc import Iterator
from dataclasses import dataclass

from proplexengine.constants import COMMENT_CHARS

from .cursor import Cursor

__all__ = ["LogicalLine", "is_comment_line", "iter_logical_lines"]


@dataclass(frozen=True, slots=True)
class LogicalLine:
    """Joined text of one entry.

    Attributes:
        text: Continuation-joined text, leading whitespace already stripped
        line: 1-based number of the physical line the entry started on
    """

    text: str
    line: int


def is_comment_line(cursor: Cursor) -> bool:
    """Check if the line at cursor is a comment.

    Args:
        cursor: Position at the first non-whitespace character of a line

    Returns:
        True if that character is '#' or '!'
    """
    return not cursor.is_eof and cursor.current in COMMENT_CHARS


def _read_physical_line(cursor: Cursor) -> tuple[str, Cursor]:
    """Read one physical line without its terminator.

    Returns:
        (line text without LF or CRLF, cursor after the terminator)
    """
    end = cursor.skip_to_line_end()
    text = cursor.slice_to(end.pos)
    if text.endswith("\r"):
        text = text[:-1]
    return text, end.skip_line_end()


def iter_logical_lines(source: str) -> Iterator[LogicalLine]:
    """Lazily yield logical lines of a .properties source.

    Each call returns a fresh generator over the same source.

    Args:
        source: Complete .properties text

    Yields:
        LogicalLine for every non-comment, non-blank entry

    Example:
        >>> [l.text for l in iter_logical_lines("a = b \\\\\\n    c\\n# x\\n")]
        ['a = b c']
    """
    cursor = Cursor(source, 0)
    line_number = 0
    parts: list[str] = []
    start_line = 0

    while not cursor.is_eof:
        line_number += 1
        content = cursor.skip_whitespace()
        if is_comment_line(content):
            # Comments never join; one arriving mid-continuation ends the entry
            cursor = content.skip_to_line_end().skip_line_end()
            if parts:
                yield LogicalLine("".join(parts), start_line)
                parts = []
            continue

        text, cursor = _read_physical_line(content)
        if not parts:
            if not text:
                continue
            start_line = line_number

        trailing = content.count_trailing_escapes(content.pos + len(text))
        if trailing % 2 == 1:
            parts.append(text[:-1])
            continue

        parts.append(text)
        yield LogicalLine("".join(parts), start_line)
        parts = []

    if parts:
        yield LogicalLine("".join(parts), start_line)
