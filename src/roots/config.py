"""Locale configuration.

LocaleConfig is a frozen dataclass: immutable after creation, handed to
the locale extractor instead of loose keyword arguments.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Which locales exist and how they appear in URLs.

    Override what you need::

        config = LocaleConfig(locales=("en", "cs"), default_locale="en")
    """

    locales: tuple[str, ...] = ()
    default_locale: str = ""

    # When True the default locale's routes carry a "/<locale>" prefix too
    prefix_default_locale: bool = False

    def is_prefixed(self, locale: str) -> bool:
        """Return whether hrefs of *locale* start with the locale code."""
        return self.prefix_default_locale or locale != self.default_locale
