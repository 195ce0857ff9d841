"""Resource resolution across candidate locales and formats.

ResourceResolver ties the pieces together:

- LocaleOverrideTable (via ResolverConfig) decides which locales to probe
- FormatSet decides which formats to probe for each locale
- Stream and compiled providers produce bytes or modules
- Decoders turn bytes into messages
- FallbackPolicy retries once with the root locale after exhaustion
- BundleCache and CacheLifetimePolicy govern reuse of resolved bundles

Search order is candidate locale (outer) by format (inner). The first
resource found wins. Decode failures stop the search and propagate; a
malformed higher-priority resource is never silently skipped.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from resbundle.constants import PROPERTIES_SUFFIX, XML_SUFFIX
from resbundle.diagnostics import ErrorTemplate, ResourceNotFoundError
from resbundle.enums import ResourceFormat
from resbundle.locale_utils import LocaleLike, LocaleTag, coerce_locale, get_default_locale
from resbundle.localization.config import ResolverConfig
from resbundle.localization.fallback import FallbackPolicy, ResolutionAttempt
from resbundle.localization.formats import FormatPreference
from resbundle.localization.loading import CompiledProvider, PathStreamProvider, StreamProvider
from resbundle.localization.naming import to_bundle_name, to_resource_path
from resbundle.localization.types import BaseName
from resbundle.parsing import decode_stream
from resbundle.runtime.cache import BundleCache, get_default_cache
from resbundle.runtime.lifetime import CacheLifetimePolicy

__all__ = ["ResolvedResource", "ResourceResolver", "get_bundle"]

logger = logging.getLogger(__name__)

_SUFFIXES: Mapping[ResourceFormat, str] = MappingProxyType({
    ResourceFormat.TEXT_PROPERTIES: PROPERTIES_SUFFIX,
    ResourceFormat.XML_PROPERTIES: XML_SUFFIX,
})


@dataclass(frozen=True, slots=True, eq=False)
class ResolvedResource(Mapping[str, object]):
    """A loaded bundle: read-only messages plus where they came from.

    Attributes:
        base_name: Requested base name
        locale: Candidate locale whose resource was loaded
        requested_locale: Locale the caller asked for
        format: Format of the loaded resource
        messages: Read-only key/value mapping
        source: Resource path, or bundle name for compiled bundles
    """

    base_name: BaseName
    locale: LocaleTag
    requested_locale: LocaleTag
    format: ResourceFormat
    messages: Mapping[str, object] = field(repr=False)
    source: str

    def get_string(self, key: str) -> str:
        """Return the message for ``key``.

        Raises:
            KeyError: If the bundle has no such key
            TypeError: If the value is not a string (compiled bundles only)
        """
        value = self.messages[key]
        if not isinstance(value, str):
            msg = f"Value for key '{key}' is {type(value).__name__}, not str"
            raise TypeError(msg)
        return value

    def __getitem__(self, key: str) -> object:
        return self.messages[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


class ResourceResolver:
    """Resolves localized resources for (base name, locale) requests.

    Thread-safe. Configuration is immutable; concurrent resolutions share
    only the bundle cache, which serializes loads per key.

    Args:
        config: Resolver configuration (defaults: all formats, ISO-8859-1,
            no overrides, never expire)
        provider: Stream provider for text formats (default: current directory)
        compiled_provider: Provider for compiled bundles. Without one the
            compiled format never finds a bundle.
        cache: Bundle cache (default: process-wide cache)
        fallback_policy: Root-locale fallback policy
        lifetime_policy: Cache lifetime decisions (default: built from
            ``config.cache_lifetime``)

    Example:
        >>> resolver = ResourceResolver(
        ...     ResolverConfig(encoding="utf-8", formats=["text-properties"]),
        ...     PathStreamProvider("resources"),
        ... )
        >>> bundle = resolver.resolve("message", "ja_JP")
        >>> bundle.get_string("greeting")
    """

    __slots__ = (
        "_cache",
        "_compiled_provider",
        "_config",
        "_fallback_policy",
        "_lifetime_policy",
        "_provider",
    )

    def __init__(
        self,
        config: ResolverConfig | None = None,
        provider: StreamProvider | None = None,
        *,
        compiled_provider: CompiledProvider | None = None,
        cache: BundleCache | None = None,
        fallback_policy: FallbackPolicy | None = None,
        lifetime_policy: CacheLifetimePolicy | None = None,
    ) -> None:
        self._config = config if config is not None else ResolverConfig()
        self._provider: StreamProvider = (
            provider if provider is not None else PathStreamProvider(Path.cwd())
        )
        self._compiled_provider = compiled_provider
        self._cache = cache if cache is not None else get_default_cache()
        self._fallback_policy = fallback_policy if fallback_policy is not None else FallbackPolicy()
        self._lifetime_policy = (
            lifetime_policy
            if lifetime_policy is not None
            else CacheLifetimePolicy(self._config.cache_lifetime)
        )

    @property
    def config(self) -> ResolverConfig:
        """Resolver configuration."""
        return self._config

    @property
    def formats(self) -> FormatPreference:
        """Ordered formats probed for each candidate locale."""
        return self._config.format_preference

    @property
    def cache(self) -> BundleCache:
        """Bundle cache used by resolve()."""
        return self._cache

    def candidate_locales(self, locale: LocaleLike) -> tuple[LocaleTag, ...]:
        """Candidate locales probed for ``locale``, most specific first."""
        return self._config.locale_overrides.candidates_for(coerce_locale(locale))

    def resolve(self, base_name: BaseName, locale: LocaleLike | None = None) -> ResolvedResource:
        """Resolve a bundle, reusing a cached one when its lifetime allows.

        Args:
            base_name: Dotted base name (e.g., 'app.message')
            locale: Requested locale; None uses the process default locale

        Returns:
            Resolved bundle

        Raises:
            ResourceNotFoundError: If no candidate produced a resource,
                including after the root-locale fallback
            ResourceDecodeError: If the first resource found is malformed
            UnsupportedEncodingError: If the configured encoding is unknown
        """
        requested = get_default_locale() if locale is None else coerce_locale(locale)
        lifetime = self._lifetime_policy.lifetime(base_name, requested)
        key = (base_name, requested, self._provider, self._compiled_provider)

        def needs_reload(resource: ResolvedResource, loaded_at: float) -> bool:
            return self._lifetime_policy.needs_reload(
                base_name, requested, self._last_modified(resource), loaded_at
            )

        return self._cache.get_or_load(
            key,
            lifetime,
            lambda reload: self.load(base_name, requested, force_fresh=reload),
            policy=self._lifetime_policy,
            needs_reload=needs_reload,
        )

    def load(
        self,
        base_name: BaseName,
        locale: LocaleLike | None = None,
        *,
        force_fresh: bool = False,
    ) -> ResolvedResource:
        """Resolve a bundle without consulting the cache.

        Args:
            base_name: Dotted base name
            locale: Requested locale; None uses the process default locale
            force_fresh: Ask providers to bypass transport-level caches

        Returns:
            Resolved bundle

        Raises:
            ResourceNotFoundError: If no candidate produced a resource
            ResourceDecodeError: If the first resource found is malformed
            UnsupportedEncodingError: If the configured encoding is unknown
        """
        requested = get_default_locale() if locale is None else coerce_locale(locale)
        attempt = ResolutionAttempt(base_name, requested)
        target = requested

        while True:
            resource = self._search(attempt, target, force_fresh)
            if resource is not None:
                return resource
            try:
                target = self._fallback_policy.fallback_locale(base_name, attempt)
            except ResourceNotFoundError as e:
                raise ResourceNotFoundError(
                    ErrorTemplate.resource_not_found(base_name, str(requested)),
                    base_name=base_name,
                    locale=str(requested),
                ) from e

    def _search(
        self, attempt: ResolutionAttempt, target: LocaleTag, force_fresh: bool
    ) -> ResolvedResource | None:
        for candidate in self.candidate_locales(target):
            bundle_name = to_bundle_name(attempt.base_name, candidate)
            for fmt in self.formats:
                resource = self._load_one(attempt, candidate, bundle_name, fmt, force_fresh)
                if resource is not None:
                    return resource
        return None

    def _load_one(
        self,
        attempt: ResolutionAttempt,
        candidate: LocaleTag,
        bundle_name: str,
        fmt: ResourceFormat,
        force_fresh: bool,
    ) -> ResolvedResource | None:
        """Probe one (candidate, format) pair; None means not found."""
        if fmt is ResourceFormat.COMPILED:
            if self._compiled_provider is None:
                return None
            messages = self._compiled_provider.load_compiled(bundle_name, force_fresh)
            if messages is None:
                logger.debug("No compiled bundle: %s", bundle_name)
                return None
            source = bundle_name
        else:
            resource_path = to_resource_path(bundle_name, _SUFFIXES[fmt])
            if resource_path is None:
                return None
            stream = self._provider.open(resource_path, force_fresh)
            if stream is None:
                logger.debug("No resource: %s", resource_path)
                return None
            with stream:
                messages = decode_stream(
                    fmt, stream, self._config.encoding, resource_path=resource_path
                )
            source = resource_path

        logger.info(
            "Loaded %s bundle '%s' for base name '%s', requested locale '%s'",
            fmt,
            source,
            attempt.base_name,
            attempt.requested_locale,
        )
        return ResolvedResource(
            base_name=attempt.base_name,
            locale=candidate,
            requested_locale=attempt.requested_locale,
            format=fmt,
            messages=MappingProxyType(dict(messages)),
            source=source,
        )

    def _last_modified(self, resource: ResolvedResource) -> float | None:
        provider: object = (
            self._compiled_provider
            if resource.format is ResourceFormat.COMPILED
            else self._provider
        )
        last_modified = getattr(provider, "last_modified", None)
        if last_modified is None:
            return None
        result: float | None = last_modified(resource.source)
        return result


def get_bundle(
    base_name: BaseName,
    locale: LocaleLike | None = None,
    *,
    config: ResolverConfig | None = None,
    provider: StreamProvider | None = None,
    compiled_provider: CompiledProvider | None = None,
) -> ResolvedResource:
    """Resolve a bundle through the process-wide cache.

    Equivalent to ``ResourceResolver(config, provider, ...).resolve(...)``.

    Example:
        >>> bundle = get_bundle(
        ...     "message", "ja_JP",
        ...     config=ResolverConfig(encoding="utf-8"),
        ...     provider=PathStreamProvider("resources"),
        ... )
    """
    resolver = ResourceResolver(config, provider, compiled_provider=compiled_provider)
    return resolver.resolve(base_name, locale)
