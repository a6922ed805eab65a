"""Properties exception hierarchy with structured diagnostics.

Loading never raises for bad input; failures are recorded on the store's
status. These exceptions exist for callers that prefer raising
(Properties.raise_for_status) and for misuse of a store that is not usable.

Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "PropertiesError",
    "PropertiesLoadError",
    "PropertiesStateError",
]


class PropertiesError(Exception):
    """Base exception for all properties errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PropertiesError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PropertiesLoadError(PropertiesError):
    """A store was requested to be usable but its load failed.

    Raised by Properties.raise_for_status(); carries the store's status.
    """

    def __init__(self, message: str | Diagnostic, *, status: str = "") -> None:
        super().__init__(message)
        self.status = status


class PropertiesStateError(PropertiesError):
    """Mutation attempted on a failed or released store."""
