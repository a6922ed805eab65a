"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.12+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Source errors (missing or mistyped input source)
        2000-2999: I/O errors (reading or writing files)
        3000-3999: Syntax errors (cursor and parser limits)
        4000-4999: Store errors (misuse of a failed or released store)
    """

    # Source errors (1000-1999)
    INVALID_FILE_TYPE = 1001
    MISSING_SOURCE = 1002

    # I/O errors (2000-2999)
    FILE_NOT_FOUND = 2001
    READ_FAILED = 2002
    WRITE_FAILED = 2003

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    SOURCE_TOO_LARGE = 3002

    # Store errors (4000-4999)
    STORE_NOT_USABLE = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        path: File path the error refers to (None for buffers)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[FILE_NOT_FOUND]: Properties file 'conf/app.properties' not found
              --> conf/app.properties
              = help: Check the path or create the file before loading it

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
