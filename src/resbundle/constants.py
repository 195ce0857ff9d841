"""Shared constants for resbundle.

This module provides centralized configuration constants used across the
localization and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Encodings: Charset used when no explicit encoding is configured
- Cache lifetime sentinels: Millisecond values accepted by CacheLifetime.from_millis
- Cache limits: Memory bounds for the bundle cache
- Input limits: Size constraints for decoded resources
- Resource naming: File suffixes per format

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Encodings
    "DEFAULT_PROPERTIES_ENCODING",
    # Cache lifetime sentinels
    "TTL_DONT_CACHE",
    "TTL_NO_EXPIRATION_CONTROL",
    # Cache limits
    "DEFAULT_CACHE_SIZE",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Resource naming
    "PROPERTIES_SUFFIX",
    "XML_SUFFIX",
    "URL_SCHEME_MARKER",
]

# ============================================================================
# ENCODINGS
# ============================================================================

# Charset used for .properties files when the resolver has no explicit
# encoding. Non-Latin text must then be written with \uXXXX escapes.
DEFAULT_PROPERTIES_ENCODING: str = "ISO-8859-1"

# ============================================================================
# CACHE LIFETIME SENTINELS
# ============================================================================

# Millisecond sentinels understood by CacheLifetime.from_millis().
# Any value >= 0 is an expiry duration.
TTL_DONT_CACHE: int = -1
TTL_NO_EXPIRATION_CONTROL: int = -2

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Default maximum number of resolved bundles kept by a BundleCache.
# Each entry is one (base name, locale, provider) combination.
DEFAULT_CACHE_SIZE: int = 1000

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum resource size in bytes read from a stream provider (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# RESOURCE NAMING
# ============================================================================

PROPERTIES_SUFFIX: str = "properties"
XML_SUFFIX: str = "xml"

# Bundle names containing this marker are never mapped to resource paths.
URL_SCHEME_MARKER: str = "://"
