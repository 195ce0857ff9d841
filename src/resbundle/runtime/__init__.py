"""Runtime package: bundle caching and cache lifetime policy.

Python 3.13+.
"""

from .cache import BundleCache, clear_default_cache, get_default_cache
from .lifetime import (
    NEVER_CACHE,
    NEVER_EXPIRE,
    CacheLifetime,
    CacheLifetimePolicy,
    LifetimeLike,
)

__all__ = [
    "NEVER_CACHE",
    "NEVER_EXPIRE",
    "BundleCache",
    "CacheLifetime",
    "CacheLifetimePolicy",
    "LifetimeLike",
    "clear_default_cache",
    "get_default_cache",
]
