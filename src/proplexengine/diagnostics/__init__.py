"""Diagnostic system for properties errors.

Provides structured error diagnostics with codes, hints and file paths.

Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import PropertiesError, PropertiesLoadError, PropertiesStateError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "PropertiesError",
    "PropertiesLoadError",
    "PropertiesStateError",
]
