"""Decoder for line-oriented ``.properties`` resources.

Grammar:
    - Natural lines end with \\n, \\r or \\r\\n; leading whitespace is ignored
    - Lines whose first non-blank character is '#' or '!' are comments
    - A line ending in an odd number of backslashes continues on the next line
    - The key ends at the first unescaped '=', ':' or whitespace
    - Escapes: \\t \\n \\r \\f, \\uXXXX, and \\X for any other X
    - Later duplicates of a key replace earlier ones

Without an explicit encoding the bytes are read as ISO-8859-1, so
non-Latin text must be written with \\uXXXX escapes or the resolver must be
configured with the file's encoding.

Escaped UTF-16 surrogate pairs are combined into one code point. A lone
escaped surrogate (e.g., \\uD800) is kept as that code unit, so such a
value cannot be encoded to UTF-8 without an error handler.

Python 3.13+. Zero external dependencies.
"""

import logging
import re
import string
from collections.abc import Iterator
from typing import BinaryIO

from resbundle.constants import DEFAULT_PROPERTIES_ENCODING
from resbundle.diagnostics import ErrorTemplate, ResourceDecodeError
from resbundle.enums import ResourceFormat
from resbundle.parsing.encoding import read_limited, resolve_encoding

__all__ = ["decode_properties", "parse_properties_text"]

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_NATURAL_LINE = re.compile(r"\r\n|\r|\n")
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SURROGATE_PAIR = re.compile("[\ud800-\udbff][\udc00-\udfff]")


def decode_properties(
    stream: BinaryIO,
    encoding: str | None = None,
    *,
    resource_path: str = "<stream>",
) -> dict[str, str]:
    """Decode a ``.properties`` byte stream into key/value pairs.

    Args:
        stream: Binary stream positioned at the start of the resource
        encoding: Charset name; None selects ISO-8859-1
        resource_path: Resource name used in diagnostics

    Returns:
        Mapping of keys to unescaped values

    Raises:
        UnsupportedEncodingError: If ``encoding`` is not a known codec
        ResourceDecodeError: If the bytes are invalid in the encoding or an
            escape is malformed
    """
    codec = resolve_encoding(encoding if encoding is not None else DEFAULT_PROPERTIES_ENCODING)
    data = read_limited(stream, resource_path, ResourceFormat.TEXT_PROPERTIES)
    try:
        text = data.decode(codec)
    except UnicodeDecodeError as e:
        raise ResourceDecodeError(
            ErrorTemplate.decode_invalid_bytes(resource_path, codec, str(e)),
            resource_path=resource_path,
            format=ResourceFormat.TEXT_PROPERTIES,
        ) from e
    return parse_properties_text(text, resource_path=resource_path)


def parse_properties_text(text: str, *, resource_path: str = "<string>") -> dict[str, str]:
    """Parse already-decoded ``.properties`` text.

    Raises:
        ResourceDecodeError: If a \\uXXXX escape is malformed
    """
    text = text.removeprefix("\ufeff")

    result: dict[str, str] = {}
    for line_number, logical in _logical_lines(text):
        key_raw, value_raw = _split_key_value(logical)
        key = _unescape(key_raw, resource_path, line_number)
        result[key] = _unescape(value_raw, resource_path, line_number)

    logger.debug("Parsed %d properties from %s", len(result), resource_path)
    return result


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (first natural line number, logical line) pairs."""
    pending: str | None = None
    start = 0
    for line_number, raw in enumerate(_NATURAL_LINE.split(text), start=1):
        stripped = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not stripped or stripped[0] in "#!":
                continue
            start = line_number
            buffer = stripped
        else:
            buffer = pending + stripped

        if _ends_with_continuation(buffer):
            pending = buffer[:-1]
            continue
        pending = None
        yield start, buffer

    if pending is not None:
        yield start, pending


def _split_key_value(line: str) -> tuple[str, str]:
    n = len(line)
    i = 0
    while i < n:
        c = line[i]
        if c == "\\":
            i += 2
            continue
        if c in _SEPARATORS or c in _WHITESPACE:
            break
        i += 1
    i = min(i, n)
    key = line[:i]

    j = i
    if j < n and line[j] in _WHITESPACE:
        while j < n and line[j] in _WHITESPACE:
            j += 1
        if j < n and line[j] in _SEPARATORS:
            j += 1
    elif j < n:
        j += 1  # '=' or ':'
    while j < n and line[j] in _WHITESPACE:
        j += 1
    return key, line[j:]


def _unescape(raw: str, resource_path: str, line_number: int) -> str:
    if "\\" not in raw:
        return raw

    out: list[str] = []
    i = 0
    n = len(raw)
    while i < n:
        c = raw[i]
        if c != "\\":
            out.append(c)
            i += 1
            continue
        i += 1
        if i >= n:
            # Lone trailing backslash
            break
        c = raw[i]
        if c == "u":
            digits = raw[i + 1 : i + 5]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise ResourceDecodeError(
                    ErrorTemplate.decode_invalid_escape(resource_path, line_number),
                    resource_path=resource_path,
                    format=ResourceFormat.TEXT_PROPERTIES,
                )
            out.append(chr(int(digits, 16)))
            i += 5
        else:
            out.append(_SIMPLE_ESCAPES.get(c, c))
            i += 1

    # Escaped surrogate pairs (\uD83D\uDE00) become one code point
    return _SURROGATE_PAIR.sub(_combine_surrogates, "".join(out))


def _combine_surrogates(match: re.Match[str]) -> str:
    high, low = match.group()
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))
