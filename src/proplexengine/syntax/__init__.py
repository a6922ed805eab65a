"""Properties syntax package.

Provides the line joiner, entry splitter, escape decoder, parser and
serializer. Separate from the store and loader so tooling can parse without
building a store.

Python 3.12+.
"""

from .ast import PropertyEntry
from .cursor import Cursor
from .entries import RawEntry, split_entry
from .escapes import unescape
from .lines import LogicalLine, iter_logical_lines
from .parser import PropertiesParser, parse
from .serializer import serialize, to_debug_string

__all__ = [
    "Cursor",
    "LogicalLine",
    "PropertiesParser",
    "PropertyEntry",
    "RawEntry",
    "iter_logical_lines",
    "parse",
    "serialize",
    "split_entry",
    "to_debug_string",
    "unescape",
]
