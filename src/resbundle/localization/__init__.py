"""Localized resource resolution package.

Provides the resolution stack: type aliases, format selection, locale
overrides, root-locale fallback, resource providers, and the resolver.

Submodules:
    types     - PEP 695 type aliases (BaseName, BundleName, ResourcePath, Messages)
    naming    - Bundle names and resource paths
    formats   - FormatSet, ordered_formats
    overrides - LocaleOverrideTable, LocaleOverrideEntry
    fallback  - FallbackPolicy, ResolutionAttempt
    loading   - StreamProvider / CompiledProvider protocols and implementations
    config    - ResolverConfig
    resolver  - ResourceResolver, ResolvedResource, get_bundle

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from resbundle.enums import ResourceFormat
from resbundle.localization.config import ResolverConfig
from resbundle.localization.fallback import FallbackPolicy, ResolutionAttempt
from resbundle.localization.formats import (
    DEFAULT_FORMATS,
    FormatPreference,
    FormatSet,
    ordered_formats,
)
from resbundle.localization.loading import (
    CompiledProvider,
    MemoryStreamProvider,
    ModuleBundleProvider,
    PackageStreamProvider,
    PathStreamProvider,
    StreamProvider,
)
from resbundle.localization.naming import to_bundle_name, to_resource_path
from resbundle.localization.overrides import (
    LocaleExpansion,
    LocaleOverrideEntry,
    LocaleOverrideTable,
)
from resbundle.localization.resolver import ResolvedResource, ResourceResolver, get_bundle
from resbundle.localization.types import BaseName, BundleName, Messages, ResourcePath

__all__ = [
    # Main resolver
    "ResourceResolver",
    "ResolvedResource",
    "ResolverConfig",
    "get_bundle",
    # Formats
    "ResourceFormat",
    "FormatSet",
    "FormatPreference",
    "DEFAULT_FORMATS",
    "ordered_formats",
    # Candidate locales and fallback
    "LocaleOverrideTable",
    "LocaleOverrideEntry",
    "LocaleExpansion",
    "FallbackPolicy",
    "ResolutionAttempt",
    # Providers
    "StreamProvider",
    "PathStreamProvider",
    "PackageStreamProvider",
    "MemoryStreamProvider",
    "CompiledProvider",
    "ModuleBundleProvider",
    # Naming
    "to_bundle_name",
    "to_resource_path",
    # Type aliases for user code type annotations
    "BaseName",
    "BundleName",
    "Messages",
    "ResourcePath",
]
