"""Route, RouterSchema, and RouteMatch frozen dataclasses."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from roots.config import LocaleConfig

# Segment parameters: a single value, or a sequence for catch-all segments
RouteParams: TypeAlias = Mapping[str, str | Sequence[str] | None]


@dataclass(frozen=True, slots=True)
class Route:
    """A localized route definition.

    ``name`` identifies the logical page across locales (``/auth/login``);
    ``href`` is the path template used in one locale (``/prihlaseni``).
    """

    name: str
    href: str


@dataclass(frozen=True, slots=True)
class RouterSchema:
    """Per-locale route tables plus locale configuration.

    Built once (usually from a generated schema file) and never mutated
    while a router holds it.  Use ``sanitize_schema`` before matching
    against it; ``Router`` does so on construction.
    """

    routes: Mapping[str, Sequence[Route]]
    locales: tuple[str, ...]
    default_locale: str
    prefix_default_locale: bool = False

    @property
    def locale_config(self) -> LocaleConfig:
        return LocaleConfig(
            locales=self.locales,
            default_locale=self.default_locale,
            prefix_default_locale=self.prefix_default_locale,
        )

    def routes_for(self, locale: str) -> tuple[Route, ...]:
        """Return the routes of *locale*, or an empty tuple if it has none."""
        return tuple(self.routes.get(locale, ()))


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful href match."""

    route: Route
    locale: str
    params: dict[str, str | list[str]]
