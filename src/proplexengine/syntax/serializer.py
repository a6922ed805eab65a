"""Serialize key/value records back to .properties text.

Values are written VERBATIM. No escape sequences are re-inserted and
embedded delimiters are not escaped, so a round trip is lossless only for
values free of '=', ':', backslashes, surrounding whitespace and control
characters.

Python 3.12+.
"""

from collections.abc import Iterable
from typing import Protocol

__all__ = ["SupportsItems", "serialize", "to_debug_string"]


class SupportsItems(Protocol):
    """Anything exposing key/value pairs: Properties, dict, Mapping."""

    def items(self) -> Iterable[tuple[str, str | None]]:
        """Return (key, value) pairs in output order."""
        ...


def serialize(properties: SupportsItems) -> str:
    """Render entries as LF-terminated 'key=value' lines.

    A key with no value is written as 'key='.

    Args:
        properties: Store or mapping to render

    Returns:
        .properties text (empty string for an empty store)

    Example:
        >>> serialize({"k1": "v1", "k4": None})
        'k1=v1\\nk4=\\n'
    """
    output: list[str] = []
    for key, value in properties.items():
        output.append(key)
        output.append("=")
        output.append(value if value is not None else "")
        output.append("\n")
    return "".join(output)


def to_debug_string(properties: SupportsItems) -> str:
    """Render entries as '[key]=[value]' lines for diagnostics.

    A key with no value is rendered as '[key]' so it stays distinguishable
    from a key holding the empty string ('[key]=[]').

    Example:
        >>> print(to_debug_string({"k1": "v1", "k4": None}))
        [k1]=[v1]
        [k4]
    """
    lines: list[str] = []
    for key, value in properties.items():
        if value is None:
            lines.append(f"[{key}]")
        else:
            lines.append(f"[{key}]=[{value}]")
    return "\n".join(lines)
