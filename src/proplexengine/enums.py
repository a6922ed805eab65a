"""Enumerations for proplexengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.12+.
"""

from enum import StrEnum

__all__ = [
    "PropertiesStatus",
    "status_to_string",
]


class PropertiesStatus(StrEnum):
    """Outcome recorded on every Properties store.

    Only a store whose status is OK carries a usable mapping. Every other
    member names the reason construction or persistence stopped.

    StrEnum provides automatic string conversion: str(PropertiesStatus.OK) == "ok"
    """

    OK = "ok"
    """Store constructed (or written) successfully."""

    ERROR_INVALID_FILE_TYPE = "invalid_file_type"
    """Source was missing or did not end in .properties."""

    ERROR_FILE_NOT_FOUND = "file_not_found"
    """Path has the right extension but does not exist."""

    ERROR_READ = "read_error"
    """File exists but could not be read or decoded."""

    ERROR_WRITE = "write_error"
    """Store could not be written to the target path."""

    ERROR_SOURCE_TOO_LARGE = "source_too_large"
    """Input exceeded the configured maximum source size."""

    @property
    def is_ok(self) -> bool:
        """Check if this status denotes success."""
        return self is PropertiesStatus.OK

    @property
    def description(self) -> str:
        """Human-readable description of this status."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[PropertiesStatus, str] = {
    PropertiesStatus.OK: "OK",
    PropertiesStatus.ERROR_INVALID_FILE_TYPE: "Invalid file type, expected a .properties file",
    PropertiesStatus.ERROR_FILE_NOT_FOUND: "Properties file not found",
    PropertiesStatus.ERROR_READ: "Failed to read properties file",
    PropertiesStatus.ERROR_WRITE: "Failed to write properties file",
    PropertiesStatus.ERROR_SOURCE_TOO_LARGE: "Properties source exceeds maximum size",
}


def status_to_string(status: PropertiesStatus) -> str:
    """Map a status to its human-readable string.

    Args:
        status: Status to describe

    Returns:
        Description suitable for logs and error messages

    Example:
        >>> status_to_string(PropertiesStatus.OK)
        'OK'
    """
    return PropertiesStatus(status).description
