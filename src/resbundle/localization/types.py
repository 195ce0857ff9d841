"""Type aliases for the resource bundle domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating resolver call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "BaseName",
    "BundleName",
    "Messages",
    "ResourcePath",
]

type BaseName = str
"""Logical bundle family identifier (e.g., 'message', 'app.errors')."""

type BundleName = str
"""Base name with locale suffix (e.g., 'message_ja_JP')."""

type ResourcePath = str
"""Slash-separated resource path with suffix (e.g., 'app/errors_ja.properties')."""

type Messages = Mapping[str, object]
"""Decoded key/value content of one bundle."""
