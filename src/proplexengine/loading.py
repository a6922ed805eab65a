"""Loading and storing .properties sources.

Components:
    PropertiesLoader - Configurable loader/writer (encoding, parser, directory creation)
    load_properties - Load a .properties file with the default loader
    load_properties_buffer - Load in-memory text with the default loader
    store_properties - Write a store to a .properties file with the default loader

Failures never raise. A failed load returns Properties.failed(...) whose
status names the error kind and whose mapping is None; a failed store
returns the error status. Callers must check status before trusting data.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias

from proplexengine.constants import DEFAULT_ENCODING, PROPERTIES_EXTENSION
from proplexengine.diagnostics import ErrorTemplate
from proplexengine.enums import PropertiesStatus
from proplexengine.store import Properties
from proplexengine.syntax.parser import PropertiesParser
from proplexengine.syntax.serializer import serialize

if TYPE_CHECKING:
    from proplexengine.diagnostics import Diagnostic

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "PropertiesPath",
    # Loader
    "PropertiesLoader",
    # Convenience functions
    "load_properties",
    "load_properties_buffer",
    "store_properties",
]

logger = logging.getLogger(__name__)

PropertiesPath: TypeAlias = str | os.PathLike[str]


def _as_properties_path(path: object) -> Path | None:
    """Return path as a Path if it names a .properties file, else None."""
    if not isinstance(path, (str, os.PathLike)):
        return None
    name = os.fsdecode(os.fspath(path))
    if not name.endswith(PROPERTIES_EXTENSION):
        return None
    return Path(name)


@dataclass(frozen=True, slots=True)
class PropertiesLoader:
    """Reads, parses and writes .properties files.

    Attributes:
        encoding: Text encoding for reading and writing (default: UTF-8)
        parser: Parser used for every load (default: PropertiesParser())
        create_dirs: Create missing parent directories when storing

    Example:
        >>> loader = PropertiesLoader(encoding="latin-1")
        >>> props = loader.load("conf/app.properties")
        >>> if props.status is PropertiesStatus.OK:
        ...     print(props.get("website"))
    """

    encoding: str = DEFAULT_ENCODING
    parser: PropertiesParser = field(default_factory=PropertiesParser)
    create_dirs: bool = True

    def _fail(self, status: PropertiesStatus, diagnostic: Diagnostic) -> Properties:
        logger.warning("Failed to load properties (%s): %s", status, diagnostic.message)
        return Properties.failed(status, diagnostic)

    def load_buffer(self, source: str | None, *, source_path: str | None = None) -> Properties:
        """Parse in-memory text into a new store.

        Args:
            source: .properties text; None is rejected as an invalid source
            source_path: Path used in diagnostics and logs (optional)

        Returns:
            OK store with one entry per distinct key, or a failed store
        """
        if source is None:
            return self._fail(
                PropertiesStatus.ERROR_INVALID_FILE_TYPE, ErrorTemplate.missing_source()
            )
        try:
            self.parser.check_size(source)
        except ValueError:
            return self._fail(
                PropertiesStatus.ERROR_SOURCE_TOO_LARGE,
                ErrorTemplate.source_too_large(
                    len(source), self.parser.max_source_size, source_path
                ),
            )

        entries = self.parser.parse(source)
        properties = Properties.from_entries(entries)
        logger.debug(
            "Loaded %s: %d entries, %d distinct keys",
            source_path or "<string>",
            len(entries),
            properties.size(),
        )
        return properties

    def load(self, path: PropertiesPath | None) -> Properties:
        """Read and parse a .properties file.

        Args:
            path: File path ending in .properties

        Returns:
            OK store, or a failed store with one of the statuses
            ERROR_INVALID_FILE_TYPE, ERROR_FILE_NOT_FOUND, ERROR_READ,
            ERROR_SOURCE_TOO_LARGE
        """
        file_path = _as_properties_path(path)
        if file_path is None:
            if path is None:
                return self._fail(
                    PropertiesStatus.ERROR_INVALID_FILE_TYPE, ErrorTemplate.missing_source()
                )
            return self._fail(
                PropertiesStatus.ERROR_INVALID_FILE_TYPE,
                ErrorTemplate.invalid_file_type(str(path)),
            )

        try:
            # newline="" keeps CR/CRLF as written; the line joiner handles them
            with file_path.open(encoding=self.encoding, newline="") as handle:
                source = handle.read()
        except FileNotFoundError:
            return self._fail(
                PropertiesStatus.ERROR_FILE_NOT_FOUND,
                ErrorTemplate.file_not_found(str(file_path)),
            )
        except (OSError, UnicodeDecodeError) as e:
            return self._fail(
                PropertiesStatus.ERROR_READ, ErrorTemplate.read_failed(str(file_path), str(e))
            )

        properties = self.load_buffer(source, source_path=str(file_path))
        if properties.is_ok:
            logger.info("Loaded properties %s: %d keys", file_path, properties.size())
        return properties

    def store(self, properties: Properties, path: PropertiesPath | None) -> PropertiesStatus:
        """Write a store as 'key=value' lines.

        Args:
            properties: Store to write; a failed or released store is not written
            path: Target path ending in .properties

        Returns:
            OK, the failed store's own status, ERROR_INVALID_FILE_TYPE,
            or ERROR_WRITE (also for a released store)
        """
        if properties.status is not PropertiesStatus.OK:
            logger.warning("Refusing to store properties with status %s", properties.status)
            return properties.status

        if properties.is_released:
            diagnostic = ErrorTemplate.store_not_usable(properties.status, released=True)
            logger.warning("Refusing to store properties: %s", diagnostic.message)
            return PropertiesStatus.ERROR_WRITE

        file_path = _as_properties_path(path)
        if file_path is None:
            diagnostic = ErrorTemplate.invalid_file_type(str(path))
            logger.warning("Failed to store properties: %s", diagnostic.message)
            return PropertiesStatus.ERROR_INVALID_FILE_TYPE

        text = serialize(properties)
        try:
            if self.create_dirs:
                file_path.parent.mkdir(parents=True, exist_ok=True)
            with file_path.open("w", encoding=self.encoding, newline="") as handle:
                handle.write(text)
        except (OSError, UnicodeEncodeError) as e:
            diagnostic = ErrorTemplate.write_failed(str(file_path), str(e))
            logger.warning("Failed to store properties: %s", diagnostic.message)
            return PropertiesStatus.ERROR_WRITE

        logger.info("Stored properties %s: %d keys", file_path, properties.size())
        return PropertiesStatus.OK


_DEFAULT_LOADER = PropertiesLoader()


def load_properties(path: PropertiesPath | None) -> Properties:
    """Load a .properties file with default settings.

    Example:
        >>> props = load_properties("app.log")
        >>> props.status
        <PropertiesStatus.ERROR_INVALID_FILE_TYPE: 'invalid_file_type'>
        >>> props.mapping is None
        True
    """
    return _DEFAULT_LOADER.load(path)


def load_properties_buffer(source: str | None) -> Properties:
    """Load .properties text with default settings."""
    return _DEFAULT_LOADER.load_buffer(source)


def store_properties(properties: Properties, path: PropertiesPath | None) -> PropertiesStatus:
    """Write a store to a .properties file with default settings."""
    return _DEFAULT_LOADER.store(properties, path)
