"""Thread-safe LRU cache for resolved resource bundles.

Stores resolved bundles under caller-supplied keys and honors the
CacheLifetime each bundle was stored with.

Architecture:
    - Index protected by threading.RLock (reentrant lock)
    - One threading.Lock per key: at most one load or reload runs per key;
      concurrent callers for the same key wait and reuse the fresh entry.
      Per-key locks are held weakly and disappear once no caller uses them
    - LRU eviction via OrderedDict
    - NEVER_CACHE lifetimes bypass storage entirely

Cache Key Structure:
    Opaque hashable supplied by the resolver, typically
    (base_name, requested_locale, provider, compiled_provider). Resolver configuration
    (encoding, formats) is deliberately not part of the key.

Python 3.13+.
"""

import logging
import time
import weakref
from collections import OrderedDict
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from threading import Lock, RLock
from typing import cast

from resbundle.constants import DEFAULT_CACHE_SIZE
from resbundle.runtime.lifetime import CacheLifetime, CacheLifetimePolicy

__all__ = ["BundleCache", "clear_default_cache", "get_default_cache"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _CacheEntry:
    value: object
    lifetime: CacheLifetime
    loaded_at: float


class BundleCache:
    """Thread-safe LRU cache for resolved bundles.

    Transparent to the caller: ``get_or_load`` either returns a fresh cached
    bundle or invokes the loader and stores its result.

    Attributes:
        maxsize: Maximum number of cache entries
        hits: Number of cache hits (including revalidated entries)
        misses: Number of cache misses
        reloads: Number of expired entries loaded again
    """

    __slots__ = (
        "_cache",
        "_clock",
        "_hits",
        "_key_locks",
        "_lock",
        "_maxsize",
        "_misses",
        "_reloads",
        "_revalidations",
    )

    def __init__(
        self,
        maxsize: int = DEFAULT_CACHE_SIZE,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize bundle cache.

        Args:
            maxsize: Maximum number of entries (default: 1000)
            clock: Wall-clock source in seconds. Must share its epoch with
                resource modification times.
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._cache: OrderedDict[Hashable, _CacheEntry] = OrderedDict()
        self._key_locks: weakref.WeakValueDictionary[Hashable, Lock] = (
            weakref.WeakValueDictionary()
        )
        self._maxsize = maxsize
        self._clock = clock
        self._lock = RLock()
        self._hits = 0
        self._misses = 0
        self._reloads = 0
        self._revalidations = 0

    def get_or_load[V](
        self,
        key: Hashable,
        lifetime: CacheLifetime,
        load: Callable[[bool], V],
        *,
        policy: CacheLifetimePolicy,
        needs_reload: Callable[[V, float], bool] | None = None,
    ) -> V:
        """Return the cached bundle for ``key`` or load it.

        Args:
            key: Cache key
            lifetime: Lifetime to store a newly loaded bundle under
            load: Loader; receives True when replacing an expired entry so
                that transport-level caches can be bypassed
            policy: Decides whether a stored entry has expired
            needs_reload: Called for expired entries with (bundle, loaded_at);
                returning False keeps the bundle and refreshes its load time.
                None means expired entries are always reloaded.

        Returns:
            Cached or freshly loaded bundle

        Raises:
            Whatever ``load`` raises; failed loads leave any previous entry
            untouched.
        """
        if not lifetime.is_cacheable:
            self.remove(key)
            return load(False)

        # Strong reference keeps the weakly held lock alive for the whole load
        key_lock = self._key_lock(key)
        with key_lock:
            with self._lock:
                entry = self._cache.get(key)
                if entry is not None:
                    self._cache.move_to_end(key)

            now = self._clock()
            reload = False
            if entry is not None:
                if not policy.is_expired(entry.lifetime, entry.loaded_at, now):
                    with self._lock:
                        self._hits += 1
                    return cast(V, entry.value)
                if needs_reload is not None and not needs_reload(
                    cast(V, entry.value), entry.loaded_at
                ):
                    with self._lock:
                        entry.loaded_at = now
                        self._hits += 1
                        self._revalidations += 1
                    logger.debug("Revalidated unchanged cache entry: %s", key)
                    return cast(V, entry.value)
                reload = True

            value = load(reload)
            self._store(key, _CacheEntry(value, lifetime, now))

            with self._lock:
                if reload:
                    self._reloads += 1
                else:
                    self._misses += 1
            if reload:
                logger.info("Reloaded expired bundle: %s", key)
            return value

    def _key_lock(self, key: Hashable) -> Lock:
        with self._lock:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = Lock()
                self._key_locks[key] = lock
            return lock

    def _store(self, key: Hashable, entry: _CacheEntry) -> None:
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
            elif len(self._cache) >= self._maxsize:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug("Evicted least recently used bundle: %s", evicted)
            self._cache[key] = entry

    def remove(self, key: Hashable) -> bool:
        """Drop a single entry.

        Thread-safe.

        Returns:
            True if an entry was removed
        """
        with self._lock:
            return self._cache.pop(key, None) is not None

    def clear(self) -> None:
        """Clear all cached entries and reset metrics.

        Thread-safe.
        """
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
            self._reloads = 0
            self._revalidations = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Thread-safe.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - maxsize (int): Maximum cache capacity
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - reloads (int): Expired entries loaded again
            - revalidations (int): Expired entries kept because unchanged
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses + self._reloads
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._cache),
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "reloads": self._reloads,
                "revalidations": self._revalidations,
                "hit_rate": round(hit_rate, 2),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        with self._lock:
            return self._misses

    @property
    def reloads(self) -> int:
        with self._lock:
            return self._reloads


_default_cache = BundleCache()


def get_default_cache() -> BundleCache:
    """Return the process-wide bundle cache shared by resolvers by default."""
    return _default_cache


def clear_default_cache() -> None:
    """Clear the process-wide bundle cache."""
    _default_cache.clear()
