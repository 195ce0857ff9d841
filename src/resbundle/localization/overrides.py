"""Per-locale overrides of the candidate-locale search order.

An override replaces the standard expansion for one exact target locale.
A ``None`` element in the candidate list stands for "the locale that was
requested" and is substituted when the table is queried.

Example:
    >>> table = LocaleOverrideTable.from_pairs([
    ...     ("ja", ["en_US", None, ""]),
    ... ])
    >>> [str(c) for c in table.candidates_for(LocaleTag.parse("ja"))]
    ['en_US', 'ja', '']

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from resbundle.locale_utils import (
    LocaleLike,
    LocaleTag,
    coerce_locale,
    default_candidate_locales,
)

__all__ = [
    "LocaleExpansion",
    "LocaleOverrideEntry",
    "LocaleOverrideTable",
]

logger = logging.getLogger(__name__)

type LocaleExpansion = Callable[[LocaleTag], Sequence[LocaleTag]]
"""Standard candidate-locale algorithm used when no override applies."""


@dataclass(frozen=True, slots=True)
class LocaleOverrideEntry:
    """Explicit candidate order for one target locale.

    Attributes:
        target_locale: Requested locale this entry applies to
        candidate_locales: Locales to probe in order; None means the
            requested locale itself
    """

    target_locale: LocaleTag
    candidate_locales: tuple[LocaleTag | None, ...]

    @classmethod
    def of(
        cls,
        target_locale: LocaleLike,
        candidate_locales: Iterable[LocaleLike | None],
    ) -> LocaleOverrideEntry:
        """Build an entry from any supported locale representations."""
        return cls(
            coerce_locale(target_locale),
            tuple(None if c is None else coerce_locale(c) for c in candidate_locales),
        )

    def resolve(self, requested: LocaleTag) -> tuple[LocaleTag, ...]:
        """Candidate list with placeholders replaced by ``requested``."""
        return tuple(requested if c is None else c for c in self.candidate_locales)


@dataclass(frozen=True, slots=True)
class LocaleOverrideTable:
    """Immutable lookup from target locale to override entry.

    At most one entry may exist per target locale; registering a second
    entry for the same target raises ValueError.

    Attributes:
        entries: Registered overrides in registration order
        expansion: Algorithm used for targets without an override
    """

    entries: tuple[LocaleOverrideEntry, ...] = ()
    expansion: LocaleExpansion = default_candidate_locales
    _by_target: dict[LocaleTag, LocaleOverrideEntry] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Index entries by target locale.

        Raises:
            ValueError: If two entries share a target locale
        """
        entries = tuple(self.entries)
        by_target: dict[LocaleTag, LocaleOverrideEntry] = {}
        for entry in entries:
            if entry.target_locale in by_target:
                msg = f"Duplicate locale override for target locale '{entry.target_locale}'"
                raise ValueError(msg)
            by_target[entry.target_locale] = entry
        object.__setattr__(self, "entries", entries)
        object.__setattr__(self, "_by_target", by_target)

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[
            LocaleOverrideEntry | tuple[LocaleLike, Iterable[LocaleLike | None]]
        ],
        *,
        expansion: LocaleExpansion = default_candidate_locales,
    ) -> LocaleOverrideTable:
        """Build a table from (target, candidates) pairs or ready entries."""
        entries = tuple(
            pair if isinstance(pair, LocaleOverrideEntry) else LocaleOverrideEntry.of(*pair)
            for pair in pairs
        )
        return cls(entries, expansion)

    def candidates_for(self, target_locale: LocaleTag) -> tuple[LocaleTag, ...]:
        """Return the candidate locales to probe for ``target_locale``.

        Never raises for a missing override: absence means standard
        expansion. A registered but empty candidate list also falls through
        to standard expansion.
        """
        entry = self._by_target.get(target_locale)
        if entry is None:
            return tuple(self.expansion(target_locale))
        if not entry.candidate_locales:
            logger.debug(
                "Empty override for '%s'; using standard candidate expansion", target_locale
            )
            return tuple(self.expansion(target_locale))
        return entry.resolve(target_locale)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, target_locale: object) -> bool:
        return target_locale in self._by_target
