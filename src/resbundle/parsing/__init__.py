"""Decoders turning resource bytes into key/value mappings.

One decoder per stream-based format. Each decoder accepts a binary stream
and an optional encoding name and returns a plain dict of strings:

    decode_properties      - ``.properties`` text, honors the encoding
    decode_xml_properties  - XML properties document, ignores the encoding

Compiled bundles are modules rather than byte streams; their mapping is
read with extract_compiled_contents.

Python 3.13+.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import BinaryIO

from resbundle.enums import ResourceFormat

from .compiled import extract_compiled_contents
from .encoding import resolve_encoding
from .properties import decode_properties, parse_properties_text
from .xml_properties import decode_xml_properties

type Decoder = Callable[..., dict[str, str]]
"""decode(stream: BinaryIO, encoding: str | None, *, resource_path: str) -> dict[str, str]"""

STREAM_DECODERS: Mapping[ResourceFormat, Decoder] = MappingProxyType({
    ResourceFormat.TEXT_PROPERTIES: decode_properties,
    ResourceFormat.XML_PROPERTIES: decode_xml_properties,
})


def decode_stream(
    format: ResourceFormat,  # noqa: A002
    stream: BinaryIO,
    encoding: str | None,
    *,
    resource_path: str,
) -> dict[str, str]:
    """Decode a stream with the decoder registered for ``format``.

    Raises:
        KeyError: If ``format`` has no stream decoder (compiled)
    """
    return STREAM_DECODERS[format](stream, encoding, resource_path=resource_path)


__all__ = [
    "STREAM_DECODERS",
    "Decoder",
    "decode_properties",
    "decode_stream",
    "decode_xml_properties",
    "extract_compiled_contents",
    "parse_properties_text",
    "resolve_encoding",
]
