"""Localized router: name to href, href to route, href to locale.

The router is a stateless façade over a sanitized ``RouterSchema``.
Lookups never raise: an unknown route name resolves to ``/``, an
unmatched href to ``None``, and a template that cannot be filled to the
raw template.  Only a broken schema raises, once, on construction.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from roots.config import LocaleConfig
from roots.context import LocaleContext, current_locale
from roots.routing.href import format_href
from roots.routing.locale import locale_from_config, locale_prefix
from roots.routing.route import Route, RouteMatch, RouterSchema
from roots.routing.schema import sanitize_schema
from roots.routing.template import compile_href, match_template

logger = logging.getLogger("roots.routing")


class Router:
    """Resolve localized routes in both directions.

    Usage::

        router = Router(schema)
        router.get_href("/about", locale="cs")      # "/cs/o-nas"
        router.get_route_from_href("/cs/o-nas")     # Route("/about", "/cs/o-nas")
        router.get_locale_from_href("/cs/o-nas")    # "cs"

    When no locale is passed, ``get_href`` uses *locale_context* (the
    task-local ``current_locale`` unless another is injected), and then
    the schema's default locale.
    """

    __slots__ = ("_config", "_locale_context", "_schema")

    def __init__(
        self,
        schema: RouterSchema,
        *,
        locale_context: LocaleContext = current_locale,
    ) -> None:
        self._schema = sanitize_schema(schema)
        self._config = self._schema.locale_config
        self._locale_context = locale_context

    @property
    def schema(self) -> RouterSchema:
        """The sanitized schema this router matches against."""
        return self._schema

    @property
    def locale_config(self) -> LocaleConfig:
        return self._config

    @property
    def locales(self) -> tuple[str, ...]:
        return self._config.locales

    @property
    def default_locale(self) -> str:
        return self._config.default_locale

    def get_locale(self) -> str:
        """Return the locale used when a caller does not pass one."""
        return self._locale_context.get() or self._config.default_locale

    def get_locale_prefix(self, locale: str | None = None) -> str:
        """Return the path prefix hrefs of *locale* carry.

        ``""`` for the default locale unless the schema prefixes it too,
        otherwise ``"/" + locale``.  Without *locale*, the current locale is
        used, which is what redirect middleware needs to send a bare ``/``
        to the right home page::

            router.get_locale_prefix("cs")   # "/cs"
            router.get_locale_prefix("en")   # ""
        """
        return locale_prefix(locale or self.get_locale(), self._config)

    def get_routes(self, locale: str) -> tuple[Route, ...]:
        """Return the routes of *locale* in matching order."""
        return self._schema.routes_for(locale)

    # -- name -> href --

    def get_href(
        self,
        name: str,
        params: Mapping[str, Any] | None = None,
        *,
        locale: str | Sequence[str] | None = None,
    ) -> str:
        """Build the href of route *name*.

        The locale is taken from *locale*, else from ``params["locale"]``,
        else from the locale context.  A sequence of locales is joined with
        ``_`` into a compound key (``["en", "us"]`` looks up ``"en_us"``).

        Parameters with ``""`` or ``None`` values are dropped first, so an
        optional trailing segment can simply be left empty.  Returns ``/``
        when the locale has no route called *name*.
        """
        href_params = dict(params or {})
        param_locale = href_params.pop("locale", None)
        key = self._locale_key(locale if locale is not None else param_locale)

        href_params = {
            param: value
            for param, value in href_params.items()
            if value is not None and value != ""
        }

        route = self._find_by_name(key, name)
        if route is None:
            logger.debug("No route named %r in locale %r", name, key)
            return format_href(compile_href("", href_params))
        return format_href(compile_href(route.href, href_params))

    def get_alternates(
        self,
        name: str,
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, str]:
        """Return the href of route *name* in every locale that defines it.

        Useful for language switchers and ``hreflang`` links::

            router.get_alternates("/about")
            # {"en": "/about", "cs": "/cs/o-nas"}
        """
        return {
            locale: self.get_href(name, params, locale=locale)
            for locale in self._config.locales
            if self._find_by_name(locale, name) is not None
        }

    # -- href -> locale / route --

    def get_locale_from_href(self, href: str) -> str:
        """Return the locale whose prefix *href* carries, else the default."""
        return locale_from_config(href, self._config)

    def get_route_from_href(self, href: str) -> Route | None:
        """Return the first route matching *href*, or ``None``."""
        result = self.match(href)
        return result.route if result is not None else None

    def match(self, href: str) -> RouteMatch | None:
        """Match *href* against the routes of the locale it carries.

        Routes are tried in sanitized order, so static templates win over
        dynamic ones and dynamic over catch-alls.

        Returns a ``RouteMatch`` with the route, its locale, and the
        captured parameters, or ``None`` if nothing matches.
        """
        locale = self.get_locale_from_href(href)
        for route in self.get_routes(locale):
            params = match_template(route.href, href)
            if params is not None:
                return RouteMatch(route=route, locale=locale, params=params)

        logger.debug("No route matches %r in locale %r", href, locale)
        return None

    # -- internals --

    def _locale_key(self, locale: str | Sequence[str] | None) -> str:
        if locale is None or locale == "":
            return self.get_locale()
        if isinstance(locale, str):
            return locale
        return "_".join(str(part) for part in locale)

    def _find_by_name(self, locale: str, name: str) -> Route | None:
        for route in self._schema.routes_for(locale):
            if route.name == name:
                return route
        return None

    def __repr__(self) -> str:
        locales = list(self._config.locales)
        return f"<Router locales={locales!r} default={self._config.default_locale!r}>"
