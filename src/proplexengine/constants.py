"""Shared constants for proplexengine.

This module provides centralized configuration constants used across the
syntax, store and loading layers. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Character classes: Whitespace, delimiters, comment markers
- Escape table: Two-character escapes understood in values
- File limits: Extension and input size guard

Python 3.12+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Character classes
    "WHITESPACE_CHARS",
    "DELIMITER_CHARS",
    "EXPLICIT_DELIMITER_CHARS",
    "COMMENT_CHARS",
    "ESCAPE_CHAR",
    "QUOTE_CHAR",
    # Escape table
    "ESCAPE_SEQUENCES",
    # File limits
    "PROPERTIES_EXTENSION",
    "DEFAULT_ENCODING",
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# Inline whitespace: space, tab and form feed. Line terminators are handled
# by the line joiner and never reach the entry splitter.
WHITESPACE_CHARS: str = " \t\f"

# Characters that may only act as key/value separators.
EXPLICIT_DELIMITER_CHARS: str = "=:"

# Any unescaped one of these ends the key.
DELIMITER_CHARS: str = EXPLICIT_DELIMITER_CHARS + WHITESPACE_CHARS

# First non-whitespace character of a comment line.
COMMENT_CHARS: str = "#!"

ESCAPE_CHAR: str = "\\"

QUOTE_CHAR: str = '"'

# ============================================================================
# ESCAPE TABLE
# ============================================================================

# Character following a backslash -> decoded character.
# Anything not listed here is passed through as backslash + character.
ESCAPE_SEQUENCES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "=": "=",
    ":": ":",
    " ": " ",
    "\t": "\t",
    "\f": "\f",
}

# ============================================================================
# FILE LIMITS
# ============================================================================

PROPERTIES_EXTENSION: str = ".properties"

DEFAULT_ENCODING: str = "utf-8"

# Default maximum source size in characters (10 MB of ASCII text).
# Prevents unbounded memory allocation from pathological inputs.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
