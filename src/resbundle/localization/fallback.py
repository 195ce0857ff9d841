"""Fallback to the root locale, at most once per resolution.

When every candidate locale and format for a request is exhausted, the
resolution is retried once with the root locale so that the unsuffixed
default resource is used instead of some unrelated process-default
localization. A second fallback request within the same resolution means
the root resource is missing too and fails with ResourceNotFoundError.

The "already fell back" state lives in a ResolutionAttempt created per
top-level call, never on a long-lived object, so concurrent resolutions
cannot observe each other's state.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from resbundle.diagnostics import ErrorTemplate, ResourceNotFoundError
from resbundle.locale_utils import ROOT_LOCALE, LocaleTag
from resbundle.localization.types import BaseName

__all__ = ["FallbackPolicy", "ResolutionAttempt"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ResolutionAttempt:
    """Per-call resolution state.

    Attributes:
        base_name: Requested base name
        requested_locale: Locale the caller asked for
        fallback_attempted: Set once the root-locale retry has started
    """

    base_name: BaseName
    requested_locale: LocaleTag
    fallback_attempted: bool = False

    def mark_fallback(self) -> None:
        """Record the single allowed fallback.

        Raises:
            ResourceNotFoundError: If a fallback was already recorded
        """
        if self.fallback_attempted:
            raise ResourceNotFoundError(
                ErrorTemplate.fallback_exhausted(self.base_name, str(self.requested_locale)),
                base_name=self.base_name,
                locale=str(self.requested_locale),
            )
        self.fallback_attempted = True


@dataclass(frozen=True, slots=True)
class FallbackPolicy:
    """Chooses the locale to retry with after exhaustion.

    Stateless; all per-call state is carried by the ResolutionAttempt.

    Attributes:
        fallback_locale_value: Locale retried after exhaustion (root locale)
    """

    fallback_locale_value: LocaleTag = ROOT_LOCALE

    def fallback_locale(self, base_name: BaseName, attempt: ResolutionAttempt) -> LocaleTag:
        """Return the retry locale for an exhausted resolution.

        Args:
            base_name: Base name being resolved
            attempt: State of the current top-level resolution

        Returns:
            The root locale, on the first call for ``attempt``

        Raises:
            ResourceNotFoundError: On any later call for the same ``attempt``
        """
        attempt.mark_fallback()
        logger.debug(
            "No bundle for '%s' in candidates of '%s'; falling back to root locale",
            base_name,
            attempt.requested_locale,
        )
        return self.fallback_locale_value
