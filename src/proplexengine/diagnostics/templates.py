"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def missing_source() -> Diagnostic:
        """No source (path or buffer) was given."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_SOURCE,
            message="No properties source given",
            hint="Pass a path ending in .properties or a text buffer",
        )

    @staticmethod
    def invalid_file_type(path: str) -> Diagnostic:
        """Path does not carry the .properties extension.

        Args:
            path: The rejected path

        Returns:
            Diagnostic for INVALID_FILE_TYPE
        """
        msg = f"Invalid file type for '{path}', expected a .properties file"
        return Diagnostic(
            code=DiagnosticCode.INVALID_FILE_TYPE,
            message=msg,
            hint="Rename the file or point to a file ending in .properties",
            path=path,
        )

    @staticmethod
    def file_not_found(path: str) -> Diagnostic:
        """Properties file does not exist."""
        msg = f"Properties file '{path}' not found"
        return Diagnostic(
            code=DiagnosticCode.FILE_NOT_FOUND,
            message=msg,
            hint="Check the path or create the file before loading it",
            path=path,
        )

    @staticmethod
    def read_failed(path: str, reason: str) -> Diagnostic:
        """Properties file exists but reading or decoding it failed.

        Args:
            path: File that could not be read
            reason: Underlying error text

        Returns:
            Diagnostic for READ_FAILED
        """
        msg = f"Failed to read properties file '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.READ_FAILED,
            message=msg,
            hint="Check file permissions and encoding",
            path=path,
        )

    @staticmethod
    def write_failed(path: str, reason: str) -> Diagnostic:
        """Writing a store to disk failed."""
        msg = f"Failed to write properties file '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.WRITE_FAILED,
            message=msg,
            hint="Check that the target directory is writable",
            path=path,
        )

    @staticmethod
    def source_too_large(size: int, max_size: int, path: str | None = None) -> Diagnostic:
        """Source exceeds the configured maximum size.

        Args:
            size: Actual source length in characters
            max_size: Configured limit
            path: File path, when the source came from disk

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Properties source is {size} characters, maximum is {max_size}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Raise max_source_size on the parser if the input is trusted",
            path=path,
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check is_eof before reading the current character",
        )

    @staticmethod
    def store_not_usable(status: str, *, released: bool = False) -> Diagnostic:
        """Store accessed after its mapping was dropped.

        Args:
            status: Status recorded on the store
            released: True when release() dropped the mapping

        Returns:
            Diagnostic for STORE_NOT_USABLE
        """
        if released:
            msg = "Properties store has been released"
        else:
            msg = f"Properties store is not usable (status: {status})"
        return Diagnostic(
            code=DiagnosticCode.STORE_NOT_USABLE,
            message=msg,
            hint="Create a new store with Properties() or reload the source",
        )
