"""Candidate Locale Example - Overrides, Fallback and Cache Lifetime.

Demonstrates how ResourceResolver walks candidate locales and how to
customize that walk.

Scenarios covered:
1. Default candidate order (most specific first, root last)
2. Locale overrides (probe another locale before the root)
3. In-memory resources with a cache lifetime
4. Compiled bundles alongside text resources

Python 3.13+.
"""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path

from resbundle import (
    MemoryStreamProvider,
    ModuleBundleProvider,
    PathStreamProvider,
    ResolverConfig,
    ResourceResolver,
)
from resbundle.runtime import BundleCache


def example_1_default_candidates() -> None:
    """Example 1: Candidate locales for a request."""
    print("=" * 60)
    print("Example 1: Default Candidate Order")
    print("=" * 60)

    resolver = ResourceResolver()
    for requested in ("ja_JP", "zh_Hant_TW", "en"):
        candidates = [str(c) or "<root>" for c in resolver.candidate_locales(requested)]
        print(f"  {requested}: {candidates}")


def example_2_overrides() -> None:
    """Example 2: Probe US English before the root for Japanese."""
    print("\n" + "=" * 60)
    print("Example 2: Locale Overrides (ja -> en_US -> root)")
    print("=" * 60)

    provider = MemoryStreamProvider({
        "message.properties": "title=Default",
        "message_en_US.properties": "title=US English",
    })
    config = ResolverConfig(locale_overrides=[("ja", ["en_US", None])])
    resolver = ResourceResolver(config, provider, cache=BundleCache())

    print(f"  candidates(ja): {[str(c) or '<root>' for c in resolver.candidate_locales('ja')]}")
    bundle = resolver.resolve("message", "ja")
    print(f"  ja -> {bundle.source}: {bundle.get_string('title')}")
    bundle = resolver.resolve("message", "ko")
    print(f"  ko -> {bundle.source}: {bundle.get_string('title')}")


def example_3_cache_lifetime() -> None:
    """Example 3: Expire cached bundles after one second."""
    print("\n" + "=" * 60)
    print("Example 3: Cache Lifetime")
    print("=" * 60)

    provider = MemoryStreamProvider({"app.properties": "version=1"})
    config = ResolverConfig(formats=["text-properties"], cache_lifetime=1_000)
    resolver = ResourceResolver(config, provider, cache=BundleCache())

    first = resolver.resolve("app", "en")
    provider.put("app.properties", "version=2")
    second = resolver.resolve("app", "en")
    print(f"  within lifetime: version={second.get_string('version')} (same: {first is second})")

    never = ResourceResolver(
        config.with_cache_lifetime(-1), provider, cache=BundleCache()
    )
    print(f"  never cached: version={never.resolve('app', 'en').get_string('version')}")


def example_4_compiled_bundles(tmp_path: Path | None = None) -> None:
    """Example 4: Compiled bundles take precedence over text files."""
    print("\n" + "=" * 60)
    print("Example 4: Compiled and Text Bundles")
    print("=" * 60)

    if tmp_path is None:
        tmp_path = Path(tempfile.mkdtemp())

    package_dir = tmp_path / "demo_bundles"
    package_dir.mkdir()
    (package_dir / "__init__.py").write_text("", encoding="utf-8")
    (package_dir / "menu_de.py").write_text(
        'CONTENTS = {"open": "Öffnen", "close": "Schließen"}\n', encoding="utf-8"
    )
    (tmp_path / "menu.properties").write_text("open=Open\nclose=Close\n", encoding="utf-8")

    sys.path.insert(0, str(tmp_path))
    try:
        resolver = ResourceResolver(
            ResolverConfig(encoding="utf-8"),
            PathStreamProvider(tmp_path),
            compiled_provider=ModuleBundleProvider("demo_bundles"),
            cache=BundleCache(),
        )
        for requested in ("de_AT", "it"):
            bundle = resolver.resolve("menu", requested)
            print(f"  {requested}: [{bundle.format}] {bundle.get_string('open')}")
    finally:
        sys.path.remove(str(tmp_path))


if __name__ == "__main__":
    example_1_default_candidates()
    example_2_overrides()
    example_3_cache_lifetime()
    example_4_compiled_bundles()
