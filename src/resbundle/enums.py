"""Enumerations for resbundle type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "LifetimeKind",
    "ResourceFormat",
]


class ResourceFormat(StrEnum):
    """Backing format of a resource bundle.

    Declaration order is the default probing priority:
    compiled > text-properties > xml-properties.
    """

    COMPILED = "compiled"
    """Importable Python module exposing a mapping of messages"""

    TEXT_PROPERTIES = "text-properties"
    """Line-oriented key=value file: message_ja.properties"""

    XML_PROPERTIES = "xml-properties"
    """XML document with <entry key="..."> elements: message_ja.xml"""

    @classmethod
    def from_name(cls, name: str) -> "ResourceFormat | None":
        """Look up a format by canonical name or legacy alias.

        Matching is case-insensitive and ignores surrounding whitespace.

        Args:
            name: Format name (e.g., "text-properties", "java.properties", "xml")

        Returns:
            Matching ResourceFormat, or None if the name is not recognized
        """
        key = name.strip().lower()
        try:
            return cls(key)
        except ValueError:
            return _FORMAT_ALIASES.get(key)


_FORMAT_ALIASES: dict[str, ResourceFormat] = {
    "class": ResourceFormat.COMPILED,
    "java.class": ResourceFormat.COMPILED,
    "properties": ResourceFormat.TEXT_PROPERTIES,
    "java.properties": ResourceFormat.TEXT_PROPERTIES,
    "xml": ResourceFormat.XML_PROPERTIES,
}


class LifetimeKind(StrEnum):
    """How long a resolved bundle may be reused from cache.

    StrEnum provides automatic string conversion: str(LifetimeKind.NEVER_CACHE) == "never-cache"
    """

    NEVER_EXPIRE = "never-expire"
    """Cached indefinitely once resolved"""

    NEVER_CACHE = "never-cache"
    """Every resolution re-reads the backing resource"""

    EXPIRE_AFTER = "expire-after"
    """Cached until a fixed duration has elapsed since loading"""
