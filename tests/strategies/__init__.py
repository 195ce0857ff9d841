"""Hypothesis strategies for resbundle property-based testing.

Usage:
    from tests.strategies import locale_tags, format_requests
    from tests.strategies.localization import override_pairs, lifetime_millis
"""

from .localization import (
    KNOWN_FORMAT_NAMES,
    LOCALE_POOL,
    format_requests,
    lifetime_millis,
    locale_identifiers,
    locale_tags,
    override_pairs,
    property_keys,
    property_values,
)

__all__ = [
    "KNOWN_FORMAT_NAMES",
    "LOCALE_POOL",
    "format_requests",
    "lifetime_millis",
    "locale_identifiers",
    "locale_tags",
    "override_pairs",
    "property_keys",
    "property_values",
]
