"""Tests for ResolverConfig normalization and builders.

Python 3.13+.
"""

import pytest
from hypothesis import given

from resbundle.diagnostics import InvalidFormatError
from resbundle.enums import ResourceFormat
from resbundle.locale_utils import LocaleTag
from resbundle.localization import FormatSet, LocaleOverrideTable, ResolverConfig
from resbundle.runtime import NEVER_CACHE, NEVER_EXPIRE, CacheLifetime
from tests.strategies import lifetime_millis


class TestResolverConfigDefaults:
    def test_defaults(self) -> None:
        config = ResolverConfig()
        assert config.encoding is None
        assert config.format_preference == tuple(ResourceFormat)
        assert len(config.locale_overrides) == 0
        assert config.cache_lifetime == NEVER_EXPIRE


class TestResolverConfigNormalization:
    """Raw field values are normalized at construction."""

    def test_format_names(self) -> None:
        config = ResolverConfig(formats=["xml", "properties"])  # type: ignore[arg-type]
        assert isinstance(config.formats, FormatSet)
        assert config.format_preference == (
            ResourceFormat.XML_PROPERTIES,
            ResourceFormat.TEXT_PROPERTIES,
        )

    def test_invalid_formats(self) -> None:
        with pytest.raises(InvalidFormatError):
            ResolverConfig(formats=["yaml"])  # type: ignore[arg-type]

    def test_override_pairs(self) -> None:
        config = ResolverConfig(locale_overrides=[("ja", ["en_US", None])])  # type: ignore[arg-type]
        assert isinstance(config.locale_overrides, LocaleOverrideTable)
        assert LocaleTag("ja") in config.locale_overrides

    def test_duplicate_overrides(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            ResolverConfig(locale_overrides=[("ja", []), ("ja", [None])])  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("never-cache", NEVER_CACHE),
            (-2, NEVER_EXPIRE),
            (500, CacheLifetime.expire_after(500)),
        ],
    )
    def test_cache_lifetime(self, value: object, expected: CacheLifetime) -> None:
        assert ResolverConfig(cache_lifetime=value).cache_lifetime == expected  # type: ignore[arg-type]

    def test_invalid_lifetime(self) -> None:
        with pytest.raises(ValueError):
            ResolverConfig(cache_lifetime=-7)  # type: ignore[arg-type]

    def test_encoding_not_validated_eagerly(self) -> None:
        assert ResolverConfig(encoding="no-such-charset").encoding == "no-such-charset"

    @given(value=lifetime_millis())
    def test_any_valid_millis_accepted(self, value: int) -> None:
        assert ResolverConfig(cache_lifetime=value).cache_lifetime.is_cacheable == (value != -1)  # type: ignore[arg-type]


class TestResolverConfigBuilders:
    """with_* methods return modified copies."""

    def test_with_formats_appends_in_order(self) -> None:
        base = ResolverConfig(formats=["text-properties"])  # type: ignore[arg-type]
        extended = base.with_formats("xml").with_formats("compiled")
        assert extended.format_preference == (
            ResourceFormat.TEXT_PROPERTIES,
            ResourceFormat.XML_PROPERTIES,
            ResourceFormat.COMPILED,
        )
        assert base.format_preference == (ResourceFormat.TEXT_PROPERTIES,)

    def test_with_formats_from_default_request(self) -> None:
        """An empty request plus appended names probes only the appended names."""
        assert ResolverConfig().with_formats("xml").format_preference == (
            ResourceFormat.XML_PROPERTIES,
        )

    def test_with_locale_override(self) -> None:
        config = ResolverConfig().with_locale_override("ja", ["en_US", None])
        assert config.locale_overrides.candidates_for(LocaleTag("ja")) == (
            LocaleTag("en", "", "US"),
            LocaleTag("ja"),
        )
        with pytest.raises(ValueError, match="Duplicate"):
            config.with_locale_override("ja", [None])

    def test_with_cache_lifetime(self) -> None:
        assert ResolverConfig().with_cache_lifetime(-1).cache_lifetime == NEVER_CACHE

    def test_hashable_and_comparable(self) -> None:
        assert ResolverConfig(encoding="utf-8") == ResolverConfig(encoding="utf-8")
        assert hash(ResolverConfig(formats=["xml"])) == hash(ResolverConfig(formats=["xml"]))  # type: ignore[arg-type]
