"""Resolver configuration.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from resbundle.enums import ResourceFormat
from resbundle.locale_utils import LocaleLike
from resbundle.localization.formats import FormatPreference, FormatSet
from resbundle.localization.overrides import LocaleOverrideEntry, LocaleOverrideTable
from resbundle.runtime.lifetime import NEVER_EXPIRE, CacheLifetime

__all__ = ["ResolverConfig"]


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for a ResourceResolver.

    Fields accept convenient raw forms and are normalized at construction:
    ``formats`` may be a sequence of format names, ``locale_overrides`` a
    sequence of ``(target, candidates)`` pairs, and ``cache_lifetime`` the
    millisecond convention (``-1`` never cache, ``-2`` never expire,
    ``>= 0`` expire after that many milliseconds).

    The encoding name is not validated here. An unknown encoding surfaces
    as UnsupportedEncodingError when a text-properties resource is decoded.

    Attributes:
        encoding: Character encoding for text-properties resources; None
            means ISO-8859-1
        formats: Format preference
        locale_overrides: Candidate-locale overrides
        cache_lifetime: Lifetime of resolved bundles in the cache

    Example:
        >>> config = ResolverConfig(
        ...     encoding="utf-8",
        ...     formats=["text-properties"],
        ...     locale_overrides=[("ja", ["en_US", None, ""])],
        ...     cache_lifetime=60_000,
        ... )
    """

    encoding: str | None = None
    formats: FormatSet = field(default_factory=FormatSet)
    locale_overrides: LocaleOverrideTable = field(default_factory=LocaleOverrideTable)
    cache_lifetime: CacheLifetime = NEVER_EXPIRE

    def __post_init__(self) -> None:
        """Normalize raw field values.

        Raises:
            InvalidFormatError: If no requested format is recognized
            ValueError: If overrides repeat a target or the lifetime is invalid
            TypeError: If the lifetime is of an unsupported type
        """
        if not isinstance(self.formats, FormatSet):
            names: Iterable[str | ResourceFormat] = self.formats
            object.__setattr__(self, "formats", FormatSet(tuple(str(n) for n in names)))
        if not isinstance(self.locale_overrides, LocaleOverrideTable):
            object.__setattr__(
                self, "locale_overrides", LocaleOverrideTable.from_pairs(self.locale_overrides)
            )
        object.__setattr__(self, "cache_lifetime", CacheLifetime.coerce(self.cache_lifetime))

    @property
    def format_preference(self) -> FormatPreference:
        """Ordered formats to probe."""
        return self.formats.formats

    def with_formats(self, *names: str | ResourceFormat) -> ResolverConfig:
        """Return a copy with ``names`` appended to the format request."""
        return replace(self, formats=self.formats.append(*names))

    def with_locale_override(
        self, target: LocaleLike, candidates: Iterable[LocaleLike | None]
    ) -> ResolverConfig:
        """Return a copy with one more candidate-locale override.

        Raises:
            ValueError: If ``target`` already has an override
        """
        table = self.locale_overrides
        entry = LocaleOverrideEntry.of(target, candidates)
        return replace(
            self,
            locale_overrides=LocaleOverrideTable((*table.entries, entry), table.expansion),
        )

    def with_cache_lifetime(self, lifetime: CacheLifetime | int | str) -> ResolverConfig:
        """Return a copy with a different cache lifetime."""
        return replace(self, cache_lifetime=CacheLifetime.coerce(lifetime))
