"""Resource format selection and validation.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from resbundle.diagnostics import ErrorTemplate, InvalidFormatError
from resbundle.enums import ResourceFormat

__all__ = [
    "DEFAULT_FORMATS",
    "FormatPreference",
    "FormatSet",
    "ordered_formats",
]

logger = logging.getLogger(__name__)

type FormatPreference = tuple[ResourceFormat, ...]
"""Non-empty, duplicate-free, ordered formats to probe."""

DEFAULT_FORMATS: FormatPreference = tuple(ResourceFormat)
"""compiled > text-properties > xml-properties"""


def ordered_formats(requested_formats: Iterable[str | ResourceFormat]) -> FormatPreference:
    """Validate and order the formats to attempt.

    Args:
        requested_formats: Format names in the caller's preferred order

    Returns:
        DEFAULT_FORMATS for an empty request; otherwise the recognized
        formats in the caller's order with duplicates removed

    Raises:
        InvalidFormatError: If no requested name is recognized

    Example:
        >>> ordered_formats(["xml", "text-properties"])
        (<ResourceFormat.XML_PROPERTIES: 'xml-properties'>, <ResourceFormat.TEXT_PROPERTIES: 'text-properties'>)
    """
    requested = [str(name) for name in requested_formats]
    if not requested:
        return DEFAULT_FORMATS

    recognized: list[ResourceFormat] = []
    unknown: list[str] = []
    for name in requested:
        fmt = ResourceFormat.from_name(name)
        if fmt is None:
            unknown.append(name)
        else:
            recognized.append(fmt)

    if not recognized:
        raise InvalidFormatError(ErrorTemplate.format_unknown(requested))
    if unknown:
        logger.warning("Ignoring unknown resource format(s): %s", unknown)

    # dict.fromkeys() removes duplicates while maintaining insertion order
    return tuple(dict.fromkeys(recognized))


@dataclass(frozen=True, slots=True)
class FormatSet:
    """Validated format preference built from the caller's request.

    Validation runs at construction time so that configuration mistakes
    surface before any resolution.

    Attributes:
        requested: Format names as supplied, in order
        formats: Validated preference derived from ``requested``

    Example:
        >>> fs = FormatSet(["text-properties"]).append("xml")
        >>> [str(f) for f in fs.formats]
        ['text-properties', 'xml-properties']
    """

    requested: tuple[str, ...] = ()
    formats: FormatPreference = field(init=False)

    def __post_init__(self) -> None:
        """Normalize the request and compute the preference.

        Raises:
            InvalidFormatError: If no requested name is recognized
        """
        requested = tuple(str(name) for name in self.requested)
        object.__setattr__(self, "requested", requested)
        object.__setattr__(self, "formats", ordered_formats(requested))

    def ordered_formats(self) -> FormatPreference:
        """Return the validated preference."""
        return self.formats

    def append(self, *names: str | ResourceFormat) -> FormatSet:
        """Return a new FormatSet with ``names`` added after the current request.

        An empty current request is treated as empty, not as the defaults:
        ``FormatSet().append("xml")`` probes XML only.
        """
        return FormatSet((*self.requested, *(str(n) for n in names)))

    def __contains__(self, item: object) -> bool:
        return item in self.formats
