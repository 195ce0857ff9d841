"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
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
        1000-1999: Configuration errors (formats, encodings, overrides)
        2000-2999: Resolution errors (missing bundles, fallback exhaustion)
        3000-3999: Decoding errors (malformed resource content)
    """

    # Configuration errors (1000-1999)
    FORMAT_UNKNOWN = 1001
    ENCODING_UNSUPPORTED = 1002

    # Resolution errors (2000-2999)
    RESOURCE_NOT_FOUND = 2001
    FALLBACK_EXHAUSTED = 2002

    # Decoding errors (3000-3999)
    DECODE_INVALID_BYTES = 3001
    DECODE_INVALID_ESCAPE = 3002
    DECODE_MALFORMED_XML = 3003
    DECODE_SCHEMA_VIOLATION = 3004
    DECODE_TOO_LARGE = 3005
    DECODE_INVALID_COMPILED = 3006


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        resource_path: Resource the error relates to (decode errors)
        line: 1-indexed line number within the resource, if known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    resource_path: str | None = None
    line: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[RESOURCE_NOT_FOUND]: Can't find bundle for base name 'message', locale 'zh'
              = help: Check the base name and the resource file names

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
