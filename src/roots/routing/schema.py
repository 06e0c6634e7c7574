"""Schema validation and ordering.

``sanitize_schema`` turns a raw ``RouterSchema`` into one that is safe to
match against: invariants checked, duplicates dropped, and each locale's
routes ordered so more specific templates are tried first.

Ordering by the least specific segment kind of each template::

    /users/settings      static only
    /users/:id           dynamic
    /docs/:parts+        required catch-all
    /shop/:parts*        optional catch-all

The sort is stable, so routes of equal specificity keep their order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from roots.errors import ConfigurationError, TemplateSyntaxError
from roots.routing.route import Route, RouterSchema
from roots.routing.template import template_specificity

logger = logging.getLogger("roots.schema")


def sanitize_schema(schema: RouterSchema) -> RouterSchema:
    """Validate *schema* and return a copy ordered for matching.

    Raises ``ConfigurationError`` if the default locale is not one of the
    locales, a route table belongs to an unknown locale, or a route href
    is empty, relative, or not a valid template.
    """
    locales = tuple(dict.fromkeys(schema.locales))

    if schema.default_locale not in locales:
        msg = (
            f"Invalid default locale {schema.default_locale!r}. "
            f"Must be one of {list(locales)}."
        )
        raise ConfigurationError(msg)

    routes: dict[str, tuple[Route, ...]] = {}
    for locale, locale_routes in schema.routes.items():
        if locale not in locales:
            msg = f"Routes given for unknown locale {locale!r}. Known locales: {list(locales)}."
            raise ConfigurationError(msg)
        routes[locale] = _sanitize_routes(locale, locale_routes)

    return RouterSchema(
        routes=MappingProxyType(routes),
        locales=locales,
        default_locale=schema.default_locale,
        prefix_default_locale=schema.prefix_default_locale,
    )


def _sanitize_routes(locale: str, routes: Iterable[Route]) -> tuple[Route, ...]:
    """Check, deduplicate, and order the routes of one locale."""
    unique: dict[str, Route] = {}
    for route in routes:
        _check_href(locale, route)
        if route.name in unique:
            logger.warning(
                "Dropping duplicate route %r (%s) in locale %r; keeping %s",
                route.name,
                route.href,
                locale,
                unique[route.name].href,
            )
            continue
        unique[route.name] = route

    return tuple(sorted(unique.values(), key=lambda route: template_specificity(route.href)))


def _check_href(locale: str, route: Route) -> None:
    if not isinstance(route.href, str) or not route.href.startswith("/"):
        msg = (
            f"Route {route.name!r} in locale {locale!r} has invalid href {route.href!r}. "
            "Hrefs must start with '/'."
        )
        raise ConfigurationError(msg)
    try:
        template_specificity(route.href)
    except TemplateSyntaxError as exc:
        msg = f"Route {route.name!r} in locale {locale!r}: {exc}"
        raise ConfigurationError(msg) from exc


def schema_from_dict(data: Mapping[str, Any]) -> RouterSchema:
    """Build a ``RouterSchema`` from its plain mapping form.

    Accepts the shape the schema generator writes, e.g. the result of
    ``json.loads`` on a generated schema file::

        {
            "locales": ["en", "cs"],
            "defaultLocale": "en",
            "routes": {
                "en": [{"name": "/about", "href": "/about"}],
                "cs": [{"name": "/about", "href": "/cs/o-nas"}],
            },
        }

    Snake-case keys (``default_locale``, ``prefix_default_locale``) are
    accepted too.  A missing default locale falls back to the first locale.
    The result is not sanitized yet.

    Raises ``ConfigurationError`` if the mapping has the wrong shape.
    """
    try:
        locales = tuple(str(locale) for locale in data.get("locales", ()))
        default_locale = data.get("defaultLocale", data.get("default_locale")) or (
            locales[0] if locales else ""
        )
        prefix_default_locale = bool(
            data.get("prefixDefaultLocale", data.get("prefix_default_locale", False))
        )
        routes = {
            str(locale): tuple(
                Route(name=str(item["name"]), href=str(item["href"])) for item in items
            )
            for locale, items in data.get("routes", {}).items()
        }
    except (AttributeError, KeyError, TypeError) as exc:
        msg = f"Malformed router schema: {exc!r}"
        raise ConfigurationError(msg) from exc

    return RouterSchema(
        routes=routes,
        locales=locales,
        default_locale=str(default_locale),
        prefix_default_locale=prefix_default_locale,
    )
