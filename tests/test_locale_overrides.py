"""Tests for LocaleOverrideTable and LocaleOverrideEntry.

Python 3.13+.
"""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from resbundle.locale_utils import ROOT_LOCALE, LocaleTag, default_candidate_locales
from resbundle.localization.overrides import LocaleOverrideEntry, LocaleOverrideTable
from tests.strategies import locale_tags, override_pairs

JA = LocaleTag.parse("ja")
EN_US = LocaleTag.parse("en_US")


class TestCandidatesFor:
    """candidates_for substitutes placeholders and defers to expansion."""

    def test_placeholder_replaced_by_requested_locale(self) -> None:
        """None in the candidate list becomes the queried locale."""
        table = LocaleOverrideTable.from_pairs([("ja", ["en_US", None, ""])])
        assert table.candidates_for(JA) == (EN_US, JA, ROOT_LOCALE)

    def test_entries_emitted_verbatim(self) -> None:
        """Non-placeholder candidates are returned as registered, unexpanded."""
        table = LocaleOverrideTable.from_pairs([("ja", ["de_DE"])])
        assert table.candidates_for(JA) == (LocaleTag.parse("de_DE"),)

    def test_missing_override_uses_default_expansion(self) -> None:
        table = LocaleOverrideTable.from_pairs([("ja", ["en_US"])])
        ja_jp = LocaleTag.parse("ja_JP")
        assert table.candidates_for(ja_jp) == default_candidate_locales(ja_jp)

    def test_exact_match_only(self) -> None:
        """An override for 'ja' does not apply to 'ja_JP'."""
        table = LocaleOverrideTable.from_pairs([("ja", ["en_US"])])
        assert table.candidates_for(LocaleTag.parse("ja_JP"))[0] == LocaleTag.parse("ja_JP")

    def test_bcp47_and_posix_targets_match(self) -> None:
        """Targets are normalized, so 'ja-JP' and 'ja_JP' are the same key."""
        table = LocaleOverrideTable.from_pairs([("ja-JP", [None])])
        assert table.candidates_for(LocaleTag.parse("ja_JP")) == (LocaleTag.parse("ja_JP"),)

    def test_empty_override_falls_through_to_expansion(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A registered empty candidate list behaves like no override."""
        table = LocaleOverrideTable.from_pairs([("ja", [])])
        with caplog.at_level(logging.DEBUG, logger="resbundle.localization.overrides"):
            assert table.candidates_for(JA) == default_candidate_locales(JA)
        assert "Empty override" in caplog.text

    def test_custom_expansion(self) -> None:
        """The expansion algorithm is injectable."""
        table = LocaleOverrideTable(expansion=lambda locale: (locale,))
        assert table.candidates_for(JA) == (JA,)

    def test_root_target(self) -> None:
        table = LocaleOverrideTable.from_pairs([("", ["en", None])])
        assert table.candidates_for(ROOT_LOCALE) == (LocaleTag.parse("en"), ROOT_LOCALE)

    @given(pairs=override_pairs(min_size=1))
    def test_registered_targets_length_and_order_preserved(
        self, pairs: list[tuple[LocaleTag, list[LocaleTag | None]]]
    ) -> None:
        """Result equals the registered list with None replaced by the target."""
        table = LocaleOverrideTable.from_pairs(pairs)
        for target, candidates in pairs:
            result = table.candidates_for(target)
            assert len(result) == len(candidates)
            assert result == tuple(target if c is None else c for c in candidates)

    @given(pairs=override_pairs(), locale=locale_tags())
    def test_unregistered_targets_use_expansion(
        self,
        pairs: list[tuple[LocaleTag, list[LocaleTag | None]]],
        locale: LocaleTag,
    ) -> None:
        table = LocaleOverrideTable.from_pairs(pairs)
        if locale in table:
            return
        assert table.candidates_for(locale) == default_candidate_locales(locale)

    @given(locale=locale_tags())
    def test_repeated_queries_are_stable(self, locale: LocaleTag) -> None:
        """Placeholders are substituted per query, not stored."""
        table = LocaleOverrideTable.from_pairs([(locale, [None, None])])
        assert table.candidates_for(locale) == (locale, locale)
        assert table.candidates_for(locale) == (locale, locale)
        assert table.entries[0].candidate_locales == (None, None)


class TestTableConstruction:
    """Registration rules."""

    def test_duplicate_target_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate locale override"):
            LocaleOverrideTable.from_pairs([("ja", ["en"]), ("ja", ["de"])])

    def test_duplicate_target_in_different_spelling_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            LocaleOverrideTable.from_pairs([("ja-JP", ["en"]), ("ja_JP", ["de"])])

    def test_accepts_ready_entries(self) -> None:
        entry = LocaleOverrideEntry.of("ja", [None])
        table = LocaleOverrideTable.from_pairs([entry])
        assert len(table) == 1
        assert JA in table

    def test_empty_table(self) -> None:
        table = LocaleOverrideTable()
        assert len(table) == 0
        assert table.candidates_for(JA) == default_candidate_locales(JA)

    def test_entry_resolve(self) -> None:
        entry = LocaleOverrideEntry.of("ja", ["en_US", None])
        assert entry.resolve(LocaleTag.parse("ko")) == (EN_US, LocaleTag.parse("ko"))

    def test_unsupported_locale_type_rejected(self) -> None:
        with pytest.raises(TypeError):
            LocaleOverrideEntry.of(42, [None])  # type: ignore[arg-type]

    @given(st.lists(locale_tags(), min_size=2, max_size=2, unique=True))
    def test_distinct_targets_accepted(self, targets: list[LocaleTag]) -> None:
        table = LocaleOverrideTable.from_pairs([(t, [None]) for t in targets])
        assert len(table) == 2
