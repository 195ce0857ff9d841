"""Character encoding lookup and byte decoding for text resources.

Python 3.13+. Zero external dependencies.
"""

import codecs
import functools
from typing import BinaryIO

from resbundle.constants import MAX_SOURCE_SIZE
from resbundle.diagnostics import (
    ErrorTemplate,
    ResourceDecodeError,
    UnsupportedEncodingError,
)

__all__ = ["read_limited", "resolve_encoding"]


@functools.lru_cache(maxsize=64)
def resolve_encoding(encoding: str) -> str:
    """Resolve an encoding name or alias to its canonical codec name.

    Args:
        encoding: Encoding name (e.g., 'UTF-8', 'SJIS', 'latin-1')

    Returns:
        Canonical Python codec name (e.g., 'utf-8', 'shift_jis')

    Raises:
        UnsupportedEncodingError: If the codec registry does not know the name
            or the codec is not a text encoding (e.g., 'rot13', 'base64')
    """
    try:
        name = codecs.lookup(encoding).name
        b"".decode(name)
        return name
    except LookupError as e:
        raise UnsupportedEncodingError(
            ErrorTemplate.encoding_unsupported(encoding), encoding=encoding
        ) from e


def read_limited(stream: BinaryIO, resource_path: str, format_name: str) -> bytes:
    """Read a whole resource stream, refusing oversized resources.

    Raises:
        ResourceDecodeError: If the stream holds more than MAX_SOURCE_SIZE bytes
    """
    data = stream.read(MAX_SOURCE_SIZE + 1)
    if len(data) > MAX_SOURCE_SIZE:
        raise ResourceDecodeError(
            ErrorTemplate.decode_too_large(resource_path, MAX_SOURCE_SIZE),
            resource_path=resource_path,
            format=format_name,
        )
    return data
