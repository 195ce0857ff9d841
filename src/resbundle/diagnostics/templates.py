"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and consistently formatted.
    """

    @staticmethod
    def format_unknown(requested: Iterable[str]) -> Diagnostic:
        """No requested format name was recognized.

        Args:
            requested: The format names supplied by the caller

        Returns:
            Diagnostic for FORMAT_UNKNOWN
        """
        msg = f"Unknown format(s): {list(requested)}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_UNKNOWN,
            message=msg,
            hint="Use 'compiled', 'text-properties' or 'xml-properties'",
        )

    @staticmethod
    def encoding_unsupported(encoding: str) -> Diagnostic:
        """Encoding name is not known to the codec registry.

        Args:
            encoding: The encoding name that failed lookup

        Returns:
            Diagnostic for ENCODING_UNSUPPORTED
        """
        msg = f"Unsupported encoding: '{encoding}'"
        return Diagnostic(
            code=DiagnosticCode.ENCODING_UNSUPPORTED,
            message=msg,
            hint="Use a codec name such as 'UTF-8', 'ISO-8859-1' or 'Shift_JIS'",
        )

    @staticmethod
    def resource_not_found(base_name: str, locale: str) -> Diagnostic:
        """No candidate locale or format produced a resource.

        Args:
            base_name: Requested base name
            locale: Originally requested locale identifier

        Returns:
            Diagnostic for RESOURCE_NOT_FOUND
        """
        msg = f"Can't find bundle for base name '{base_name}', locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_NOT_FOUND,
            message=msg,
            hint="Check the base name and that a resource file exists for a candidate locale",
        )

    @staticmethod
    def fallback_exhausted(base_name: str, locale: str) -> Diagnostic:
        """Fallback to the root locale was already attempted.

        Args:
            base_name: Requested base name
            locale: Originally requested locale identifier

        Returns:
            Diagnostic for FALLBACK_EXHAUSTED
        """
        msg = (
            f"Fallback to root locale already attempted for base name '{base_name}' "
            f"(requested locale '{locale}')"
        )
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_EXHAUSTED,
            message=msg,
            hint=(
                f"No default resource exists for '{base_name}'. "
                "Check the base name and the resource file names"
            ),
        )

    @staticmethod
    def decode_invalid_bytes(resource_path: str, encoding: str, reason: str) -> Diagnostic:
        """Resource bytes are not valid in the declared encoding."""
        msg = f"Cannot decode resource as {encoding}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DECODE_INVALID_BYTES,
            message=msg,
            hint="Configure the encoding the file was saved with",
            resource_path=resource_path,
        )

    @staticmethod
    def decode_invalid_escape(resource_path: str, line: int) -> Diagnostic:
        """Malformed \\uxxxx escape in a properties file."""
        return Diagnostic(
            code=DiagnosticCode.DECODE_INVALID_ESCAPE,
            message="Malformed \\uxxxx encoding",
            hint="Use exactly four hex digits after \\u",
            resource_path=resource_path,
            line=line,
        )

    @staticmethod
    def decode_malformed_xml(resource_path: str, reason: str) -> Diagnostic:
        """XML properties document is not well-formed."""
        msg = f"Malformed XML properties document: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DECODE_MALFORMED_XML,
            message=msg,
            resource_path=resource_path,
        )

    @staticmethod
    def decode_schema_violation(resource_path: str, reason: str) -> Diagnostic:
        """XML properties document does not follow the properties schema."""
        msg = f"Invalid XML properties document: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DECODE_SCHEMA_VIOLATION,
            message=msg,
            hint="Expected <properties> with optional <comment> and <entry key=\"...\"> children",
            resource_path=resource_path,
        )

    @staticmethod
    def decode_too_large(resource_path: str, limit: int) -> Diagnostic:
        """Resource exceeds the maximum accepted size."""
        msg = f"Resource exceeds {limit} bytes"
        return Diagnostic(
            code=DiagnosticCode.DECODE_TOO_LARGE,
            message=msg,
            resource_path=resource_path,
        )

    @staticmethod
    def decode_invalid_compiled(bundle_name: str, reason: str) -> Diagnostic:
        """Compiled bundle module does not expose a usable mapping."""
        msg = f"Compiled bundle '{bundle_name}' is invalid: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DECODE_INVALID_COMPILED,
            message=msg,
            hint="Expose a CONTENTS mapping or a get_contents() callable",
        )
