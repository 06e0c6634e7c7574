"""Routing: localized route templates, matching, and the Router façade.

A ``RouterSchema`` is sanitized once into per-locale route lists ordered
by specificity, then queried by name (to build hrefs) or by href (to find
the route and locale).
"""

from roots.routing.href import format_href
from roots.routing.locale import extract_locale, locale_prefix
from roots.routing.route import Route, RouteMatch, RouteParams, RouterSchema
from roots.routing.router import Router
from roots.routing.schema import sanitize_schema, schema_from_dict
from roots.routing.template import (
    Compiled,
    CompileResult,
    FallbackRaw,
    compile_href,
    compile_template,
    match_template,
    parse_template,
)

__all__ = [
    "CompileResult",
    "Compiled",
    "FallbackRaw",
    "Route",
    "RouteMatch",
    "RouteParams",
    "Router",
    "RouterSchema",
    "compile_href",
    "compile_template",
    "extract_locale",
    "format_href",
    "locale_prefix",
    "match_template",
    "parse_template",
    "sanitize_schema",
    "schema_from_dict",
]
