"""Tests for format selection: ordered_formats and FormatSet.

Python 3.13+.
"""

import logging

import pytest
from hypothesis import event, given

from resbundle.diagnostics import DiagnosticCode, InvalidFormatError
from resbundle.enums import ResourceFormat
from resbundle.localization.formats import DEFAULT_FORMATS, FormatSet, ordered_formats
from tests.strategies import format_requests


class TestResourceFormatNames:
    """ResourceFormat.from_name accepts canonical names and aliases."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("compiled", ResourceFormat.COMPILED),
            ("class", ResourceFormat.COMPILED),
            ("java.class", ResourceFormat.COMPILED),
            ("text-properties", ResourceFormat.TEXT_PROPERTIES),
            ("properties", ResourceFormat.TEXT_PROPERTIES),
            ("java.properties", ResourceFormat.TEXT_PROPERTIES),
            ("xml-properties", ResourceFormat.XML_PROPERTIES),
            ("xml", ResourceFormat.XML_PROPERTIES),
            ("XML", ResourceFormat.XML_PROPERTIES),
            ("  Properties ", ResourceFormat.TEXT_PROPERTIES),
        ],
    )
    def test_recognized(self, name: str, expected: ResourceFormat) -> None:
        assert ResourceFormat.from_name(name) is expected

    @pytest.mark.parametrize("name", ["", "yaml", "json", "xml-props"])
    def test_unknown_returns_none(self, name: str) -> None:
        assert ResourceFormat.from_name(name) is None


class TestOrderedFormats:
    """ordered_formats validates and orders the caller's request."""

    def test_empty_request_yields_defaults(self) -> None:
        """No request means compiled > text-properties > xml-properties."""
        assert ordered_formats([]) == DEFAULT_FORMATS
        assert DEFAULT_FORMATS == (
            ResourceFormat.COMPILED,
            ResourceFormat.TEXT_PROPERTIES,
            ResourceFormat.XML_PROPERTIES,
        )

    def test_caller_order_preserved(self) -> None:
        """Recognized formats keep the order the caller gave."""
        assert ordered_formats(["xml", "text-properties"]) == (
            ResourceFormat.XML_PROPERTIES,
            ResourceFormat.TEXT_PROPERTIES,
        )

    def test_duplicates_removed(self) -> None:
        """First occurrence wins, aliases count as duplicates."""
        assert ordered_formats(["properties", "xml", "text-properties", "xml"]) == (
            ResourceFormat.TEXT_PROPERTIES,
            ResourceFormat.XML_PROPERTIES,
        )

    def test_unknown_names_dropped_with_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unknown names next to recognized ones are ignored and logged."""
        with caplog.at_level(logging.WARNING, logger="resbundle.localization.formats"):
            result = ordered_formats(["yaml", "xml"])
        assert result == (ResourceFormat.XML_PROPERTIES,)
        assert "yaml" in caplog.text

    def test_only_unknown_names_fail(self) -> None:
        """A request with nothing recognized raises InvalidFormatError."""
        with pytest.raises(InvalidFormatError) as exc_info:
            ordered_formats(["yaml", "ini"])
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.FORMAT_UNKNOWN
        assert "yaml" in str(exc_info.value)

    def test_invalid_format_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown format"):
            ordered_formats(["nope"])

    @given(requested=format_requests())
    def test_result_is_nonempty_duplicate_free_subsequence(self, requested: list[str]) -> None:
        """Any successful result is non-empty, unique, and within the closed set."""
        try:
            result = ordered_formats(requested)
        except InvalidFormatError:
            event("outcome=invalid")
            assert all(ResourceFormat.from_name(n) is None for n in requested)
            assert requested
            return
        event("outcome=valid")
        assert result
        assert len(set(result)) == len(result)
        assert set(result) <= set(ResourceFormat)
        if requested:
            recognized = [
                f for f in (ResourceFormat.from_name(n) for n in requested) if f is not None
            ]
            assert result == tuple(dict.fromkeys(recognized))


class TestFormatSet:
    """FormatSet validates at construction and supports append."""

    def test_default_is_all_formats(self) -> None:
        assert FormatSet().ordered_formats() == DEFAULT_FORMATS

    def test_construction_validates(self) -> None:
        with pytest.raises(InvalidFormatError):
            FormatSet(("toml",))

    def test_append_returns_new_set(self) -> None:
        """append() is non-mutating and adds after the existing request."""
        original = FormatSet(("text-properties",))
        extended = original.append("xml")
        assert original.formats == (ResourceFormat.TEXT_PROPERTIES,)
        assert extended.formats == (
            ResourceFormat.TEXT_PROPERTIES,
            ResourceFormat.XML_PROPERTIES,
        )

    def test_append_to_empty_uses_only_appended(self) -> None:
        """Appending to an empty request does not reintroduce the defaults."""
        assert FormatSet().append("xml").formats == (ResourceFormat.XML_PROPERTIES,)

    def test_append_accepts_enum_members(self) -> None:
        fs = FormatSet().append(ResourceFormat.COMPILED)
        assert fs.formats == (ResourceFormat.COMPILED,)

    def test_contains(self) -> None:
        fs = FormatSet(("xml",))
        assert ResourceFormat.XML_PROPERTIES in fs
        assert ResourceFormat.COMPILED not in fs

    def test_requested_normalized_to_tuple(self) -> None:
        fs = FormatSet(["xml"])  # type: ignore[arg-type]
        assert fs.requested == ("xml",)
        assert hash(fs) == hash(FormatSet(("xml",)))
