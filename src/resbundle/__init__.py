"""resbundle - Pluggable resolution of localized resource bundles.

Loads key/value resources for a (base name, locale) request by probing
candidate locales in order and, for each, a configurable list of formats
(compiled Python modules, ``.properties`` text, XML properties). Supports
per-locale overrides of the candidate order, a single root-locale fallback,
configurable text encodings, and cache lifetime control.

Public API:
    ResourceResolver - Resolves and caches bundles
    ResolverConfig - Encoding, formats, locale overrides, cache lifetime
    ResolvedResource - Read-only messages of a resolved bundle
    get_bundle - One-call resolution through the process-wide cache
    PathStreamProvider / PackageStreamProvider / MemoryStreamProvider
    ModuleBundleProvider - Compiled bundle provider
    LocaleTag - Parsed locale identifier

Exceptions:
    ResourceBundleError - Base exception class
    InvalidFormatError - No requested format recognized
    UnsupportedEncodingError - Unknown encoding name
    ResourceDecodeError - Malformed resource
    ResourceNotFoundError - No resource for any candidate

Submodules:
    resbundle.localization - Resolver, providers, formats, overrides, fallback
    resbundle.parsing - Decoders for properties text, XML and compiled bundles
    resbundle.runtime - BundleCache and cache lifetime policy
    resbundle.diagnostics - Error types and structured diagnostics
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    InvalidFormatError,
    ResourceBundleError,
    ResourceDecodeError,
    ResourceNotFoundError,
    UnsupportedEncodingError,
)
from .enums import ResourceFormat
from .locale_utils import ROOT_LOCALE, LocaleTag
from .localization import (
    MemoryStreamProvider,
    ModuleBundleProvider,
    PackageStreamProvider,
    PathStreamProvider,
    ResolvedResource,
    ResolverConfig,
    ResourceResolver,
    get_bundle,
)
from .runtime import CacheLifetime

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("resbundle")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ROOT_LOCALE",
    "CacheLifetime",
    "InvalidFormatError",
    "LocaleTag",
    "MemoryStreamProvider",
    "ModuleBundleProvider",
    "PackageStreamProvider",
    "PathStreamProvider",
    "ResolvedResource",
    "ResolverConfig",
    "ResourceBundleError",
    "ResourceDecodeError",
    "ResourceFormat",
    "ResourceNotFoundError",
    "ResourceResolver",
    "UnsupportedEncodingError",
    "__version__",
    "get_bundle",
]
