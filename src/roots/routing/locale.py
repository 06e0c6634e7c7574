"""Locale extraction from hrefs.

The default locale's routes are unprefixed; every other locale's routes
start with the locale code (``/cs/o-nas``).  With
``prefix_default_locale`` the default locale carries its prefix too,
which extraction handles the same way: a known prefix wins, anything
else falls back to the default locale.
"""

from collections.abc import Iterable

from roots.config import LocaleConfig
from roots.routing.template import split_path


def extract_locale(href: str, locales: Iterable[str], default_locale: str) -> str:
    """Return the locale encoded as the first segment of *href*.

    Falls back to *default_locale* when the first segment is not one of
    *locales* (exact, case-sensitive comparison).

    Examples::

        >>> extract_locale("/cs/o-nas", ["en", "cs"], "en")
        'cs'
        >>> extract_locale("/about", ["en", "cs"], "en")
        'en'
    """
    parts = split_path(href)
    if parts and parts[0] in set(locales):
        return parts[0]
    return default_locale


def locale_from_config(href: str, config: LocaleConfig) -> str:
    """``extract_locale`` with the locales taken from *config*."""
    return extract_locale(href, config.locales, config.default_locale)


def locale_prefix(locale: str, config: LocaleConfig) -> str:
    """Return the href prefix used by *locale*: ``""`` or ``"/<locale>"``."""
    if config.is_prefixed(locale):
        return f"/{locale}"
    return ""
