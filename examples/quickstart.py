"""Quickstart example for resbundle.

This example demonstrates basic bundle resolution from properties files.

Note: Examples create resources in a temporary directory. In a real
application, resources ship with the project or its package data.
"""

import tempfile
from pathlib import Path

from resbundle import (
    PathStreamProvider,
    ResolverConfig,
    ResourceNotFoundError,
    ResourceResolver,
)

resources_dir = Path(tempfile.mkdtemp())

(resources_dir / "message.properties").write_text(
    "greeting=Hello\nfarewell=Goodbye\n", encoding="iso-8859-1"
)
(resources_dir / "message_ja.properties").write_text(
    "greeting=\\u3053\\u3093\\u306b\\u3061\\u306f\n", encoding="iso-8859-1"
)
(resources_dir / "message_fr.properties").write_text(
    "greeting=Bonjour\n", encoding="utf-8"
)

# Example 1: Default configuration (ISO-8859-1, all formats)
print("=" * 50)
print("Example 1: Default Configuration")
print("=" * 50)

resolver = ResourceResolver(provider=PathStreamProvider(resources_dir))
bundle = resolver.resolve("message", "ja_JP")
print(f"{bundle.source}: {bundle.get_string('greeting')}")
# Output: message_ja.properties: こんにちは

# Example 2: Root locale fallback
print("\n" + "=" * 50)
print("Example 2: Root Locale Fallback")
print("=" * 50)

bundle = resolver.resolve("message", "de_DE")
print(f"root locale: {bundle.locale.is_root}, {bundle.get_string('farewell')}")
# Output: root locale: True, Goodbye

# Example 3: UTF-8 text properties only
print("\n" + "=" * 50)
print("Example 3: Encoding and Formats")
print("=" * 50)

config = ResolverConfig(encoding="utf-8", formats=["text-properties"])
resolver = ResourceResolver(config, PathStreamProvider(resources_dir))
print(resolver.resolve("message", "fr_CA").get_string("greeting"))
# Output: Bonjour

# Example 4: Missing bundle
print("\n" + "=" * 50)
print("Example 4: Missing Bundle")
print("=" * 50)

try:
    resolver.resolve("nonexistent", "fr")
except ResourceNotFoundError as e:
    print(f"{type(e).__name__}: base_name={e.base_name!r} locale={e.locale!r}")
# Output: ResourceNotFoundError: base_name='nonexistent' locale='fr'
