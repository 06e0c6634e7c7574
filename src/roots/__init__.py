"""Roots: localized routes for multi-language sites.

Resolves named routes to per-locale hrefs and matches incoming hrefs
back to a route and locale.  The same logical page can live under a
different URL in every locale::

    from roots import Router, schema_from_dict

    router = Router(schema_from_dict({
        "locales": ["en", "cs"],
        "defaultLocale": "en",
        "routes": {
            "en": [{"name": "/about", "href": "/about"}],
            "cs": [{"name": "/about", "href": "/cs/o-nas"}],
        },
    }))

    router.get_href("/about", locale="cs")        # "/cs/o-nas"
    router.get_route_from_href("/cs/o-nas").name  # "/about"
    router.get_locale_from_href("/cs/o-nas")      # "cs"

Middleware sets the current locale for a request; hrefs built without
an explicit locale use it::

    from roots import use_locale

    with use_locale("cs"):
        router.get_href("/about")  # "/cs/o-nas"
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "LocaleConfig",
    "RootsError",
    "Route",
    "RouteMatch",
    "Router",
    "RouterSchema",
    "TemplateSyntaxError",
    "compile_href",
    "current_locale",
    "extract_locale",
    "format_href",
    "get_locale",
    "match_template",
    "sanitize_schema",
    "schema_from_dict",
    "set_locale",
    "use_locale",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "roots.errors",
    "RootsError": "roots.errors",
    "TemplateSyntaxError": "roots.errors",
    "LocaleConfig": "roots.config",
    "Route": "roots.routing.route",
    "RouteMatch": "roots.routing.route",
    "RouterSchema": "roots.routing.route",
    "Router": "roots.routing.router",
    "sanitize_schema": "roots.routing.schema",
    "schema_from_dict": "roots.routing.schema",
    "compile_href": "roots.routing.template",
    "match_template": "roots.routing.template",
    "extract_locale": "roots.routing.locale",
    "format_href": "roots.routing.href",
    "current_locale": "roots.context",
    "get_locale": "roots.context",
    "set_locale": "roots.context",
    "use_locale": "roots.context",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roots`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
