"""Properties parser: logical lines to decoded entries.

Pipeline per logical line:
    iter_logical_lines -> split_entry -> value post-processing -> unescape

Keys are NOT unescaped. A key written as 'delimiterCharacters\\:\\=\\ ' is
stored with its backslashes, so lookups must use the same literal text.

Security:
    Includes configurable input size limit to prevent unbounded memory
    allocation from extremely large sources.
"""

import logging

from proplexengine.constants import MAX_SOURCE_SIZE, QUOTE_CHAR
from proplexengine.diagnostics import ErrorTemplate

from .ast import PropertyEntry
from .entries import RawEntry, split_entry
from .escapes import unescape
from .lines import iter_logical_lines

__all__ = ["PropertiesParser", "parse"]

logger = logging.getLogger(__name__)


class PropertiesParser:
    """Eager .properties parser.

    Parsing never fails on content: unknown escapes pass through and an
    unterminated continuation at EOF simply ends the entry. The only
    failure is an oversized source.

    Attributes:
        max_source_size: Maximum source length in characters (0 disables)
        strip_quotes: Remove one pair of double quotes wrapping a value
        empty_value_as_none: Load 'key=' as a key with no value
    """

    __slots__ = ("_empty_value_as_none", "_max_source_size", "_strip_quotes")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        strip_quotes: bool = True,
        empty_value_as_none: bool = True,
    ) -> None:
        """Initialize parser.

        Args:
            max_source_size: Maximum source size (default: 10 MB).
                            Set to 0 to disable the limit.
            strip_quotes: Strip a matching pair of double quotes around values
            empty_value_as_none: Treat an empty value span as no value
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._strip_quotes = strip_quotes
        self._empty_value_as_none = empty_value_as_none

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def strip_quotes(self) -> bool:
        """Whether wrapping double quotes are removed from values."""
        return self._strip_quotes

    @property
    def empty_value_as_none(self) -> bool:
        """Whether 'key=' loads as a key with no value."""
        return self._empty_value_as_none

    def check_size(self, source: str) -> None:
        """Reject sources above max_source_size.

        Raises:
            ValueError: If source exceeds max_source_size
        """
        if self._max_source_size and len(source) > self._max_source_size:
            raise ValueError(
                ErrorTemplate.source_too_large(len(source), self._max_source_size).message
            )

    def parse(self, source: str) -> tuple[PropertyEntry, ...]:
        """Parse .properties text into entries in source order.

        Args:
            source: Complete file content

        Returns:
            One PropertyEntry per logical line carrying a key

        Raises:
            ValueError: If source exceeds max_source_size

        Example:
            >>> PropertiesParser().parse("a = 1\\nb")
            (PropertyEntry(key='a', value='1', line=1), PropertyEntry(key='b', value=None, line=2))
        """
        self.check_size(source)

        entries: list[PropertyEntry] = []
        for logical in iter_logical_lines(source):
            raw = split_entry(logical.text)
            if not raw.key:
                continue
            entry = PropertyEntry(key=raw.key, value=self._decode_value(raw), line=logical.line)
            logger.debug("Parsed entry '%s' at line %d", entry.key, entry.line)
            entries.append(entry)
        return tuple(entries)

    def _decode_value(self, raw: RawEntry) -> str | None:
        value = raw.value
        if value is None:
            return None
        if not value and self._empty_value_as_none:
            return None
        if (
            self._strip_quotes
            and len(value) >= 2
            and value[0] == QUOTE_CHAR
            and value[-1] == QUOTE_CHAR
        ):
            value = value[1:-1]
        return unescape(value)


def parse(source: str) -> tuple[PropertyEntry, ...]:
    """Parse .properties source with default settings.

    Convenience function for PropertiesParser().parse().
    """
    return PropertiesParser().parse(source)
