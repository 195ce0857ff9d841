"""Diagnostic system for resource bundle errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidFormatError,
    ResourceBundleError,
    ResourceDecodeError,
    ResourceNotFoundError,
    UnsupportedEncodingError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidFormatError",
    "OutputFormat",
    "ResourceBundleError",
    "ResourceDecodeError",
    "ResourceNotFoundError",
    "UnsupportedEncodingError",
]
