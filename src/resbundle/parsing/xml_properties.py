"""Decoder for XML properties resources.

Document schema (properties.dtd)::

    <!ELEMENT properties ( comment?, entry* ) >
    <!ATTLIST properties version CDATA #FIXED "1.0">
    <!ELEMENT comment (#PCDATA) >
    <!ELEMENT entry (#PCDATA) >
    <!ATTLIST entry key CDATA #REQUIRED>

The document declares its own encoding, so any configured encoding is
ignored for this format. expat only decodes UTF-8, UTF-16, ISO-8859-1 and
US-ASCII natively; documents declaring any other encoding (e.g., Shift_JIS)
are decoded with the codec registry and parsed as text.

Python 3.13+. Zero external dependencies.
"""

import codecs
import logging
import re
import xml.etree.ElementTree as ET  # noqa: N817
from typing import BinaryIO, NoReturn

from resbundle.diagnostics import ErrorTemplate, ResourceDecodeError
from resbundle.enums import ResourceFormat
from resbundle.parsing.encoding import read_limited

__all__ = ["decode_xml_properties"]

logger = logging.getLogger(__name__)

_XML_DECLARATION = re.compile(
    rb"\A(?:\xef\xbb\xbf)?<\?xml\s[^>]*?\bencoding\s*=\s*"
    rb"[\"']([A-Za-z][A-Za-z0-9._-]*)[\"'][^>]*\?>"
)
_EXPAT_ENCODINGS = frozenset({"utf-8", "utf-16", "iso8859-1", "ascii"})


def decode_xml_properties(
    stream: BinaryIO,
    encoding: str | None = None,  # noqa: ARG001 - self-describing document
    *,
    resource_path: str = "<stream>",
) -> dict[str, str]:
    """Decode an XML properties document into key/value pairs.

    Args:
        stream: Binary stream positioned at the start of the document
        encoding: Ignored; the XML declaration governs decoding
        resource_path: Resource name used in diagnostics

    Returns:
        Mapping of entry keys to entry text

    Raises:
        ResourceDecodeError: If the document is not well-formed or does not
            follow the properties schema
    """
    data = read_limited(stream, resource_path, ResourceFormat.XML_PROPERTIES)
    document = _transcode(data, resource_path)
    try:
        root = ET.fromstring(document)  # noqa: S314 - no external entity resolution
    except (ET.ParseError, ValueError) as e:
        raise ResourceDecodeError(
            ErrorTemplate.decode_malformed_xml(resource_path, str(e)),
            resource_path=resource_path,
            format=ResourceFormat.XML_PROPERTIES,
        ) from e

    if root.tag != "properties":
        _schema_error(resource_path, f"root element is <{root.tag}>, expected <properties>")

    result: dict[str, str] = {}
    for index, child in enumerate(root):
        if child.tag == "comment":
            if index != 0:
                _schema_error(resource_path, "<comment> must be the first child")
            continue
        if child.tag != "entry":
            _schema_error(resource_path, f"unexpected element <{child.tag}>")
        if len(child):
            _schema_error(resource_path, "<entry> must contain text only")
        key = child.get("key")
        if key is None:
            _schema_error(resource_path, "<entry> is missing the 'key' attribute")
        result[key] = child.text or ""

    logger.debug("Parsed %d XML properties from %s", len(result), resource_path)
    return result


def _schema_error(resource_path: str, reason: str) -> NoReturn:
    raise ResourceDecodeError(
        ErrorTemplate.decode_schema_violation(resource_path, reason),
        resource_path=resource_path,
        format=ResourceFormat.XML_PROPERTIES,
    )


def _transcode(data: bytes, resource_path: str) -> bytes | str:
    """Decode documents whose declared encoding expat cannot handle.

    Returns the bytes unchanged when expat decodes the declared encoding
    itself; otherwise the document text with its XML declaration removed.

    Raises:
        ResourceDecodeError: If the declared encoding is unknown or the bytes
            are invalid in it
    """
    match = _XML_DECLARATION.match(data)
    if match is None:
        return data

    declared = match.group(1).decode("ascii")
    try:
        codec = codecs.lookup(declared).name
    except LookupError as e:
        raise ResourceDecodeError(
            ErrorTemplate.decode_malformed_xml(
                resource_path, f"unknown encoding '{declared}' in XML declaration"
            ),
            resource_path=resource_path,
            format=ResourceFormat.XML_PROPERTIES,
        ) from e
    if codec in _EXPAT_ENCODINGS:
        return data

    try:
        return data[match.end() :].decode(codec)
    except (UnicodeDecodeError, LookupError) as e:
        raise ResourceDecodeError(
            ErrorTemplate.decode_invalid_bytes(resource_path, codec, str(e)),
            resource_path=resource_path,
            format=ResourceFormat.XML_PROPERTIES,
        ) from e
