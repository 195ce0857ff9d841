"""Cache lifetime values and the policy that applies them.

A CacheLifetime is a policy value, not a cache entry: it tells a BundleCache
whether a resolved bundle may be stored and when a stored bundle becomes
stale. CacheLifetimePolicy hands out the configured lifetime per
(base name, locale) and decides, for stale entries, whether the backing
resource actually changed.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from resbundle.constants import TTL_DONT_CACHE, TTL_NO_EXPIRATION_CONTROL
from resbundle.enums import LifetimeKind

if TYPE_CHECKING:
    from resbundle.locale_utils import LocaleTag

__all__ = [
    "NEVER_CACHE",
    "NEVER_EXPIRE",
    "CacheLifetime",
    "CacheLifetimePolicy",
    "LifetimeLike",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CacheLifetime:
    """Immutable cache lifetime.

    Attributes:
        kind: Lifetime category
        duration_ms: Expiry duration in milliseconds (EXPIRE_AFTER only)

    Example:
        >>> CacheLifetime.expire_after(1000).duration_ms
        1000
        >>> CacheLifetime.from_millis(-1) == NEVER_CACHE
        True
    """

    kind: LifetimeKind
    duration_ms: int | None = None

    def __post_init__(self) -> None:
        """Validate kind/duration consistency.

        Raises:
            ValueError: If EXPIRE_AFTER lacks a non-negative duration, or
                another kind carries one.
        """
        if self.kind is LifetimeKind.EXPIRE_AFTER:
            if self.duration_ms is None or self.duration_ms < 0:
                msg = f"duration_ms must be >= 0 for {self.kind}, got {self.duration_ms!r}"
                raise ValueError(msg)
        elif self.duration_ms is not None:
            msg = f"duration_ms is only valid for {LifetimeKind.EXPIRE_AFTER}, got {self.kind}"
            raise ValueError(msg)

    @classmethod
    def never_expire(cls) -> CacheLifetime:
        return cls(LifetimeKind.NEVER_EXPIRE)

    @classmethod
    def never_cache(cls) -> CacheLifetime:
        return cls(LifetimeKind.NEVER_CACHE)

    @classmethod
    def expire_after(cls, duration_ms: int) -> CacheLifetime:
        return cls(LifetimeKind.EXPIRE_AFTER, duration_ms)

    @classmethod
    def from_millis(cls, value: int) -> CacheLifetime:
        """Build a lifetime from a millisecond value.

        Args:
            value: TTL_DONT_CACHE (-1), TTL_NO_EXPIRATION_CONTROL (-2),
                or a duration >= 0

        Returns:
            Corresponding CacheLifetime

        Raises:
            ValueError: For any other negative value
        """
        if value == TTL_DONT_CACHE:
            return cls.never_cache()
        if value == TTL_NO_EXPIRATION_CONTROL:
            return cls.never_expire()
        if value < 0:
            msg = f"Invalid cache lifetime: {value!r} (expected -1, -2 or milliseconds >= 0)"
            raise ValueError(msg)
        return cls.expire_after(value)

    @classmethod
    def coerce(cls, value: LifetimeLike) -> CacheLifetime:
        """Normalize a lifetime given as CacheLifetime, kind name, or milliseconds.

        Raises:
            ValueError: If value is not a recognized lifetime
            TypeError: If value has an unsupported type
        """
        match value:
            case CacheLifetime():
                return value
            case bool():
                msg = "Cache lifetime must not be a bool"
                raise TypeError(msg)
            case int():
                return cls.from_millis(value)
            case LifetimeKind.NEVER_EXPIRE | "never-expire":
                return cls.never_expire()
            case LifetimeKind.NEVER_CACHE | "never-cache":
                return cls.never_cache()
            case str():
                msg = f"Invalid cache lifetime: {value!r} (expected 'never-expire' or 'never-cache')"
                raise ValueError(msg)
            case _:
                msg = f"Expected CacheLifetime, str or int, got {type(value).__name__}"
                raise TypeError(msg)

    @property
    def is_cacheable(self) -> bool:
        """Check if a bundle with this lifetime may be stored at all."""
        return self.kind is not LifetimeKind.NEVER_CACHE


NEVER_EXPIRE = CacheLifetime.never_expire()
NEVER_CACHE = CacheLifetime.never_cache()

type LifetimeLike = CacheLifetime | LifetimeKind | str | int
"""Anything accepted where a cache lifetime is expected."""


@dataclass(frozen=True, slots=True)
class CacheLifetimePolicy:
    """Lifetime decisions for resolved bundles.

    The configured lifetime is fixed for the policy instance. ``lifetime()``
    accepts the base name and locale so that a subclass can specialize per
    bundle.

    Attributes:
        configured: Lifetime returned for every bundle
    """

    configured: CacheLifetime = NEVER_EXPIRE

    _MS_PER_SECOND: ClassVar[int] = 1000

    def lifetime(self, base_name: str, locale: LocaleTag) -> CacheLifetime:  # noqa: ARG002
        """Return the lifetime for a bundle."""
        return self.configured

    def is_expired(self, lifetime: CacheLifetime, loaded_at: float, now: float) -> bool:
        """Check if an entry loaded at ``loaded_at`` is stale at ``now``.

        Args:
            lifetime: Lifetime the entry was stored under
            loaded_at: Load (or last revalidation) time in seconds
            now: Current time in seconds

        Returns:
            True if the entry must be revalidated before reuse
        """
        match lifetime.kind:
            case LifetimeKind.NEVER_EXPIRE:
                return False
            case LifetimeKind.NEVER_CACHE:
                return True
            case LifetimeKind.EXPIRE_AFTER:
                # duration_ms is validated non-None for EXPIRE_AFTER
                age_ms = (now - loaded_at) * self._MS_PER_SECOND
                return age_ms >= (lifetime.duration_ms or 0)

    def needs_reload(
        self,
        base_name: str,
        locale: LocaleTag,
        last_modified: float | None,
        loaded_at: float,
    ) -> bool:
        """Decide whether a stale entry must be reloaded.

        Called only for expired entries. The entry is kept (and its load time
        refreshed) when the backing resource has not been modified since it
        was loaded.

        Args:
            base_name: Bundle base name
            locale: Locale the bundle was requested for
            last_modified: Modification time of the backing resource in
                seconds, or None when unknown or the resource vanished
            loaded_at: Time the entry was loaded

        Returns:
            True if the bundle must be loaded again
        """
        if last_modified is None:
            logger.debug("No modification time for %s/%s; reloading", base_name, locale)
            return True
        return last_modified >= loaded_at
