"""Extraction of message mappings from compiled (Python module) bundles.

A compiled bundle is an importable module that exposes either a
``CONTENTS`` mapping or a zero-argument ``get_contents()`` callable
returning one. Values may be arbitrary objects; keys must be strings.

Example module ``messages/message_ja.py``::

    CONTENTS = {"greeting": "こんにちは", "max_items": 10}

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from types import MappingProxyType, ModuleType
from typing import NoReturn

from resbundle.diagnostics import ErrorTemplate, ResourceDecodeError
from resbundle.enums import ResourceFormat

__all__ = ["extract_compiled_contents"]


def extract_compiled_contents(module: ModuleType, bundle_name: str) -> Mapping[str, object]:
    """Read the message mapping from a compiled bundle module.

    Args:
        module: Imported bundle module
        bundle_name: Bundle name used in diagnostics

    Returns:
        Read-only copy of the module's messages

    Raises:
        ResourceDecodeError: If the module exposes no mapping, or the mapping
            has non-string keys
    """
    getter = getattr(module, "get_contents", None)
    if callable(getter):
        contents = getter()
    else:
        contents = getattr(module, "CONTENTS", None)

    if not isinstance(contents, Mapping):
        _invalid(bundle_name, f"expected a mapping, got {type(contents).__name__}")

    bad_keys = [k for k in contents if not isinstance(k, str)]
    if bad_keys:
        _invalid(bundle_name, f"non-string keys: {bad_keys[:5]!r}")

    return MappingProxyType(dict(contents))


def _invalid(bundle_name: str, reason: str) -> NoReturn:
    raise ResourceDecodeError(
        ErrorTemplate.decode_invalid_compiled(bundle_name, reason),
        resource_path=bundle_name,
        format=ResourceFormat.COMPILED,
    )
