"""Route templates: parsing, compilation, and matching.

Templates carry one token per ``/``-separated segment::

    /about              static
    /blog/:slug         dynamic              (bracket form: /blog/[slug])
    /docs/:parts+       required catch-all   (/docs/[...parts])
    /shop/:parts*       optional catch-all   (/shop/[[...parts]])

Compilation never raises.  A template that cannot be filled comes back as
``FallbackRaw`` carrying the raw template string, so link rendering always
gets *some* href.  Matching returns ``None`` on a miss.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache
from typing import Any, TypeAlias
from urllib.parse import quote, unquote

from roots.errors import TemplateSyntaxError

logger = logging.getLogger("roots.routing")

# Left unescaped by encodeURIComponent besides alphanumerics and "_.-~"
_SAFE_CHARS = "!*'()"

_COLON_PARAM_RE = re.compile(r"^:(\w+)([+*]?)$")

_DYNAMIC_BRACKET_RE = re.compile(r"^\[(\w+)\]$")
_CATCH_ALL_BRACKET_RE = re.compile(r"^\[\.\.\.(\w+)\]$")
_OPTIONAL_BRACKET_RE = re.compile(r"^\[\[\.\.\.(\w+)\]\]$")


class SegmentKind(IntEnum):
    """Kind of a template segment, ordered from most to least specific."""

    STATIC = 0
    DYNAMIC = 1
    CATCH_ALL = 2
    OPTIONAL_CATCH_ALL = 3


_COLON_KINDS = {
    "": SegmentKind.DYNAMIC,
    "+": SegmentKind.CATCH_ALL,
    "*": SegmentKind.OPTIONAL_CATCH_ALL,
}


@dataclass(frozen=True, slots=True)
class TemplateSegment:
    """A parsed segment of a route template.

    Static:             ``/users``      (param_name=None)
    Dynamic:            ``/:id``        (param_name="id")
    Catch-all:          ``/:parts+``    (param_name="parts")
    Optional catch-all: ``/:parts*``    (param_name="parts")
    """

    value: str
    kind: SegmentKind = SegmentKind.STATIC
    param_name: str | None = None

    @property
    def is_param(self) -> bool:
        return self.kind is not SegmentKind.STATIC


@dataclass(frozen=True, slots=True)
class Compiled:
    """A template filled in with its parameters."""

    href: str


@dataclass(frozen=True, slots=True)
class FallbackRaw:
    """A template that could not be filled; ``href`` is the raw template."""

    href: str
    reason: str


CompileResult: TypeAlias = Compiled | FallbackRaw

# Captured parameters: a string per dynamic segment, a list per catch-all
MatchParams: TypeAlias = dict[str, str | list[str]]


def split_path(path: str) -> list[str]:
    """Split an href into its raw segments.

    Drops the query string and fragment, and ignores empty segments so
    repeated and trailing slashes do not matter::

        "/a//b/?page=2" -> ["a", "b"]
    """
    path = path.split("#", 1)[0].split("?", 1)[0]
    return [part for part in path.split("/") if part]


@lru_cache(maxsize=1024)
def parse_template(template: str) -> tuple[TemplateSegment, ...]:
    """Parse a route template into segments.

    Examples::

        "/"               -> ()
        "/users"          -> (TemplateSegment("users"),)
        "/users/:id"      -> (..., TemplateSegment(":id", DYNAMIC, "id"))
        "/docs/[...path]" -> (..., TemplateSegment("[...path]", CATCH_ALL, "path"))

    Raises ``TemplateSyntaxError`` for segments with stray ``:``, ``[`` or
    ``]`` characters, for parameter names used twice, and for templates with
    more than one catch-all segment.
    """
    segments: list[TemplateSegment] = []
    seen: set[str] = set()
    catch_all: TemplateSegment | None = None
    for part in template.split("/"):
        if not part:
            continue
        segment = _parse_segment(template, part)
        if segment.param_name is not None:
            if segment.param_name in seen:
                raise TemplateSyntaxError(
                    template, f"parameter {segment.param_name!r} is used more than once"
                )
            seen.add(segment.param_name)
        if segment.kind >= SegmentKind.CATCH_ALL:
            if catch_all is not None:
                raise TemplateSyntaxError(
                    template,
                    f"catch-all {segment.value!r} follows catch-all {catch_all.value!r}; "
                    "only one is allowed",
                )
            catch_all = segment
        segments.append(segment)
    return tuple(segments)


def _parse_segment(template: str, part: str) -> TemplateSegment:
    match = _COLON_PARAM_RE.match(part)
    if match:
        kind = _COLON_KINDS[match.group(2)]
        return TemplateSegment(value=part, kind=kind, param_name=match.group(1))

    for regex, kind in (
        (_OPTIONAL_BRACKET_RE, SegmentKind.OPTIONAL_CATCH_ALL),
        (_CATCH_ALL_BRACKET_RE, SegmentKind.CATCH_ALL),
        (_DYNAMIC_BRACKET_RE, SegmentKind.DYNAMIC),
    ):
        match = regex.match(part)
        if match:
            return TemplateSegment(value=part, kind=kind, param_name=match.group(1))

    if any(char in part for char in ":[]"):
        raise TemplateSyntaxError(template, f"unrecognised parameter syntax in {part!r}")
    return TemplateSegment(value=part)


def template_specificity(template: str) -> SegmentKind:
    """Return the least specific segment kind in *template*.

    A template with only static segments is ``STATIC``; one with a dynamic
    segment and no catch-all is ``DYNAMIC``, and so on.

    Raises ``TemplateSyntaxError`` if *template* cannot be parsed.
    """
    return max(
        (segment.kind for segment in parse_template(template)),
        default=SegmentKind.STATIC,
    )


# -- Compilation --


def compile_template(template: str, params: Mapping[str, Any] | None = None) -> CompileResult:
    """Fill *template* with *params*.

    Each value is percent-encoded on its own, so a ``/`` inside a value
    becomes ``%2F``.  Catch-all values may be a sequence (one segment per
    item) or a single value.  Extra parameters are ignored.

    Returns ``Compiled`` on success, or ``FallbackRaw`` holding the
    untouched template when a required parameter is missing, has the
    wrong shape, or the template does not parse.
    """
    params = params or {}
    try:
        segments = parse_template(template)
    except TemplateSyntaxError as exc:
        return _fallback(template, exc.reason)

    parts: list[str] = []
    for segment in segments:
        if segment.kind is SegmentKind.STATIC:
            parts.append(segment.value)
            continue

        name = segment.param_name or ""
        value = params.get(name)

        if segment.kind is SegmentKind.DYNAMIC:
            if value is None:
                return _fallback(template, f"missing parameter {name!r}")
            if not _is_scalar(value):
                return _fallback(template, f"parameter {name!r} expects a single value")
            text = str(value)
            if not text:
                return _fallback(template, f"parameter {name!r} is empty")
            parts.append(_encode(text))
            continue

        values = _as_values(value)
        if values is None:
            return _fallback(template, f"parameter {name!r} expects a sequence")
        if not values and segment.kind is SegmentKind.CATCH_ALL:
            return _fallback(template, f"missing parameter {name!r}")
        if not all(values):
            return _fallback(template, f"parameter {name!r} contains an empty segment")
        parts.extend(_encode(item) for item in values)

    return Compiled("/" + "/".join(parts))


def compile_href(template: str, params: Mapping[str, Any] | None = None) -> str:
    """Fill *template* with *params*, falling back to the raw template."""
    return compile_template(template, params).href


def _fallback(template: str, reason: str) -> FallbackRaw:
    logger.debug("Cannot compile route template %r: %s", template, reason)
    return FallbackRaw(href=template, reason=reason)


def _is_scalar(value: object) -> bool:
    return isinstance(value, str | int | float) and not isinstance(value, bool)


def _as_values(value: object) -> list[str] | None:
    """Normalise a catch-all parameter to a list of strings."""
    if value is None:
        return []
    if _is_scalar(value):
        return [str(value)]
    if isinstance(value, Sequence):
        return ["" if item is None else str(item) for item in value]
    return None


def _encode(text: str) -> str:
    return quote(text, safe=_SAFE_CHARS)


# -- Matching --


def match_template(template: str, path: str) -> MatchParams | None:
    """Match *path* against *template*.

    Path segments are percent-decoded after splitting, so an encoded
    ``%2F`` stays inside its segment.  A catch-all takes whatever the
    segments after it leave over, so matching is linear in the path length.

    Returns the captured parameters, or ``None`` if *path* does not match.
    """
    try:
        segments = parse_template(template)
    except TemplateSyntaxError as exc:
        logger.debug("Skipping unparseable route template %r: %s", template, exc.reason)
        return None

    parts = [unquote(part) for part in split_path(path)]
    return _match_segments(segments, parts, 0, 0, {})


def _match_segments(
    segments: tuple[TemplateSegment, ...],
    parts: list[str],
    seg_index: int,
    part_index: int,
    params: MatchParams,
) -> MatchParams | None:
    """Recursively match path parts against template segments."""
    # All segments consumed, the path must be too
    if seg_index == len(segments):
        return params if part_index == len(parts) else None

    segment = segments[seg_index]
    has_part = part_index < len(parts)

    if segment.kind is SegmentKind.STATIC:
        if has_part and parts[part_index] == unquote(segment.value):
            return _match_segments(segments, parts, seg_index + 1, part_index + 1, params)
        return None

    name = segment.param_name or ""

    if segment.kind is SegmentKind.DYNAMIC:
        if not has_part:
            return None
        new_params = {**params, name: parts[part_index]}
        return _match_segments(segments, parts, seg_index + 1, part_index + 1, new_params)

    # Catch-all: it is the only one, so every later segment takes exactly one part
    end = len(parts) - (len(segments) - seg_index - 1)
    minimum = 1 if segment.kind is SegmentKind.CATCH_ALL else 0
    if end - part_index < minimum:
        return None
    new_params = {**params, name: parts[part_index:end]}
    return _match_segments(segments, parts, seg_index + 1, end, new_params)
