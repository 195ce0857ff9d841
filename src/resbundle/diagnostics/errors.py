"""Resource bundle exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InvalidFormatError",
    "ResourceBundleError",
    "ResourceDecodeError",
    "ResourceNotFoundError",
    "UnsupportedEncodingError",
]


class ResourceBundleError(Exception):
    """Base exception for all resbundle errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ResourceBundleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidFormatError(ResourceBundleError, ValueError):
    """No requested resource format is recognized.

    Raised at configuration time; never retried.
    """


class UnsupportedEncodingError(ResourceBundleError, LookupError):
    """Configured character encoding is unknown.

    Attributes:
        encoding: The encoding name that failed lookup
    """

    def __init__(self, message: str | Diagnostic, *, encoding: str = "") -> None:
        super().__init__(message)
        self.encoding = encoding


class ResourceDecodeError(ResourceBundleError):
    """Resource bytes are malformed for their declared format.

    Propagates immediately: no other format or locale is tried for the
    same resolution.

    Attributes:
        resource_path: Path of the resource that failed to decode
        format: Name of the format being decoded
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        resource_path: str = "",
        format: str = "",  # noqa: A002 - mirrors ResourceFormat naming
    ) -> None:
        super().__init__(message)
        self.resource_path = resource_path
        self.format = format


class ResourceNotFoundError(ResourceBundleError, LookupError):
    """No bundle exists for a base name and locale.

    Raised once every candidate locale and format, plus the single
    fallback to the root locale, has been exhausted.

    Attributes:
        base_name: Requested base name
        locale: Originally requested locale identifier
    """

    def __init__(self, message: str | Diagnostic, *, base_name: str = "", locale: str = "") -> None:
        super().__init__(message)
        self.base_name = base_name
        self.locale = locale
