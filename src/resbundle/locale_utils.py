"""Locale identifiers, parsing and candidate-locale expansion.

Centralizes locale handling used throughout the codebase. Locales are
immutable LocaleTag values; parsing is delegated to Babel so that POSIX
(``ja_JP``), BCP-47 (``ja-JP``) and ``babel.Locale`` inputs all normalize
to the same tag and therefore to the same cache keys and override lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from babel.core import get_locale_identifier, parse_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "ROOT_LOCALE",
    "LocaleLike",
    "LocaleTag",
    "clear_locale_cache",
    "coerce_locale",
    "default_candidate_locales",
    "get_default_locale",
    "get_system_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, order=True)
class LocaleTag:
    """Immutable locale identifier.

    All components are optional. The instance with every component empty is
    the root locale: the unsuffixed default resource.

    Attributes:
        language: Lowercase ISO 639 language code (e.g., 'ja')
        script: Title-case ISO 15924 script code (e.g., 'Hans')
        territory: Uppercase ISO 3166 region code (e.g., 'JP')
        variant: Uppercase variant, possibly '_'-separated (e.g., 'POSIX')
    """

    language: str = ""
    script: str = ""
    territory: str = ""
    variant: str = ""

    def __str__(self) -> str:
        """Return the POSIX identifier (e.g., 'zh_Hans_CN'); root is ''."""
        return get_locale_identifier(
            (self.language, self.territory, self.script, self.variant)
        )

    @property
    def is_root(self) -> bool:
        """Check if this is the root locale."""
        return not (self.language or self.script or self.territory or self.variant)

    @classmethod
    def parse(cls, identifier: str) -> LocaleTag:
        """Parse a POSIX or BCP-47 locale identifier.

        Args:
            identifier: Locale identifier; '' (or 'root') yields ROOT_LOCALE

        Returns:
            Parsed LocaleTag

        Raises:
            ValueError: If Babel cannot parse the identifier

        Example:
            >>> LocaleTag.parse("ja-JP")
            LocaleTag(language='ja', script='', territory='JP', variant='')
        """
        return _parse_cached(normalize_locale(identifier.strip()))

    @classmethod
    def from_babel(cls, locale: Locale) -> LocaleTag:
        """Build a LocaleTag from a babel.Locale instance."""
        return cls(
            language=locale.language or "",
            script=locale.script or "",
            territory=locale.territory or "",
            variant=locale.variant or "",
        )


ROOT_LOCALE = LocaleTag()
"""The root locale: selects the resource without a locale suffix."""

type LocaleLike = LocaleTag | str | Locale
"""Anything accepted where a locale is expected."""


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=256)
def _parse_cached(locale_code: str) -> LocaleTag:
    if locale_code in ("", "root"):
        return ROOT_LOCALE
    parts = parse_locale(locale_code)
    language, territory, script, variant = parts[:4]
    return LocaleTag(
        language=language or "",
        script=script or "",
        territory=territory or "",
        variant=variant or "",
    )


def clear_locale_cache() -> None:
    """Clear the locale parsing cache."""
    _parse_cached.cache_clear()


def coerce_locale(value: LocaleLike) -> LocaleTag:
    """Normalize any supported locale representation to a LocaleTag.

    Args:
        value: LocaleTag, identifier string, or babel.Locale

    Returns:
        Equivalent LocaleTag

    Raises:
        ValueError: If a string identifier cannot be parsed
        TypeError: If value is of an unsupported type
    """
    match value:
        case LocaleTag():
            return value
        case str():
            return LocaleTag.parse(value)
        case _ if hasattr(value, "language") and hasattr(value, "territory"):
            return LocaleTag.from_babel(value)
        case _:
            msg = f"Expected LocaleTag, str or babel.Locale, got {type(value).__name__}"
            raise TypeError(msg)


def _variant_chain(variant: str) -> list[str]:
    """Progressively trimmed variants: 'A_B_C' -> ['A_B_C', 'A_B', 'A']."""
    if not variant:
        return []
    parts = variant.split("_")
    return ["_".join(parts[:n]) for n in range(len(parts), 0, -1)]


def default_candidate_locales(locale: LocaleTag) -> tuple[LocaleTag, ...]:
    """Expand a locale into its standard candidate list.

    Scripted forms are tried before unscripted ones, variants are trimmed
    one '_' segment at a time, and the list always ends with ROOT_LOCALE.

    Args:
        locale: Requested locale

    Returns:
        Ordered, duplicate-free candidate locales

    Example:
        >>> [str(c) for c in default_candidate_locales(LocaleTag.parse("ja_JP"))]
        ['ja_JP', 'ja', '']
    """
    language, script, territory = locale.language, locale.script, locale.territory
    variants = _variant_chain(locale.variant)

    candidates: list[LocaleTag] = [
        LocaleTag(language, script, territory, v) for v in variants
    ]
    if territory:
        candidates.append(LocaleTag(language, script, territory))
    if script:
        candidates.append(LocaleTag(language, script))
        candidates.extend(LocaleTag(language, "", territory, v) for v in variants)
        if territory:
            candidates.append(LocaleTag(language, "", territory))
    if language:
        candidates.append(LocaleTag(language))
    candidates.append(ROOT_LOCALE)

    # dict.fromkeys() removes duplicates while maintaining insertion order
    return tuple(dict.fromkeys(candidates))


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Normalizes the result to POSIX format for Babel compatibility.
    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.
        Returns "en_US" if not determinable and raise_on_failure is False.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            # Strip encoding suffix if present
            if "." in system_locale:
                system_locale = system_locale.split(".")[0]
            return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            # Strip encoding suffix (e.g., ".UTF-8")
            return normalize_locale(value.split(".")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_US"


def get_default_locale() -> LocaleTag:
    """Return the caller's ambient default locale as a LocaleTag.

    Unparseable system locale strings degrade to ROOT_LOCALE.
    """
    system_locale = get_system_locale()
    try:
        return LocaleTag.parse(system_locale)
    except ValueError as e:
        logger.warning("Unparseable system locale '%s': %s. Using root locale", system_locale, e)
        return ROOT_LOCALE
