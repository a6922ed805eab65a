"""proplexengine - .properties parsing and serialization.

Parses the line-oriented .properties configuration format (comments,
'=', ':' and whitespace delimiters, backslash escapes, backslash line
continuation) into an in-memory store, and writes stores back to disk.

Public API:
    Properties - Key/value store with status (last write wins, None = no value)
    PropertiesStatus - Outcome of a load or store
    PropertiesLoader - Configurable loader/writer
    PropertiesParser - Parser producing PropertyEntry records
    load_properties - Load a .properties file
    load_properties_buffer - Load in-memory text
    store_properties - Write a store to a .properties file
    parse_properties - Parse text to entries without building a store
    serialize_properties - Render a store as 'key=value' text
    status_to_string - Human-readable status description

Exceptions:
    PropertiesError - Base exception class
    PropertiesLoadError - Raised by Properties.raise_for_status()
    PropertiesStateError - Mutation of a failed or released store

Submodules:
    proplexengine.syntax - Line joiner, entry splitter, escape decoder, serializer
    proplexengine.diagnostics - Diagnostic codes, templates and exceptions
"""

from .diagnostics import PropertiesError, PropertiesLoadError, PropertiesStateError
from .enums import PropertiesStatus, status_to_string
from .loading import (
    PropertiesLoader,
    load_properties,
    load_properties_buffer,
    store_properties,
)
from .store import Properties
from .syntax import PropertiesParser, PropertyEntry
from .syntax import parse as parse_properties
from .syntax import serialize as serialize_properties

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("proplexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__recommended_encoding__ = "UTF-8"

__all__ = [
    "Properties",
    "PropertiesError",
    "PropertiesLoadError",
    "PropertiesLoader",
    "PropertiesParser",
    "PropertiesStateError",
    "PropertiesStatus",
    "PropertyEntry",
    "__recommended_encoding__",
    "__version__",
    "load_properties",
    "load_properties_buffer",
    "parse_properties",
    "serialize_properties",
    "status_to_string",
    "store_properties",
]
