"""Mapping from (base name, locale) to bundle names and resource paths.

Python 3.13+.
"""

from resbundle.constants import URL_SCHEME_MARKER
from resbundle.locale_utils import LocaleTag
from resbundle.localization.types import BaseName, BundleName, ResourcePath

__all__ = ["to_bundle_name", "to_resource_path"]


def to_bundle_name(base_name: BaseName, locale: LocaleTag) -> BundleName:
    """Append the locale suffix to a base name.

    The suffix joins the non-empty components in the order
    language, script, territory, variant. An empty language is kept as an
    empty segment when later components are present, so territory-only
    locales stay distinguishable from language-only ones.

    Example:
        >>> to_bundle_name("message", LocaleTag.parse("ja_JP"))
        'message_ja_JP'
        >>> to_bundle_name("message", ROOT_LOCALE)
        'message'
    """
    if locale.is_root:
        return base_name

    language, script, territory, variant = (
        locale.language,
        locale.script,
        locale.territory,
        locale.variant,
    )
    parts = [base_name, language]
    if script:
        parts.append(script)
        if territory or variant:
            parts.append(territory)
    elif territory or variant:
        parts.append(territory)
    if variant:
        parts.append(variant)
    return "_".join(parts)


def to_resource_path(bundle_name: BundleName, suffix: str) -> ResourcePath | None:
    """Turn a bundle name into a slash-separated resource path.

    Dots in the bundle name become path separators.

    Returns:
        Resource path, or None if the bundle name looks like a URL

    Example:
        >>> to_resource_path("app.errors_ja", "properties")
        'app/errors_ja.properties'
    """
    if URL_SCHEME_MARKER in bundle_name:
        return None
    return f"{bundle_name.replace('.', '/')}.{suffix}"
