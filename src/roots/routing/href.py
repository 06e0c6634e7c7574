"""Href normalisation.

``format_href`` is the last step of every href the router hands out, and
the form both sides of a match are compared in.
"""

import re

_ENCODED_SLASH_RE = re.compile(r"%2F", re.IGNORECASE)
_SLASH_RUN_RE = re.compile(r"//+")


def format_href(*segments: object) -> str:
    """Join *segments* into a canonical absolute href.

    - segments are joined with ``/`` (``None`` segments are skipped)
    - ``%2F`` left by template compilation is restored to ``/``
    - runs of ``/`` collapse into one
    - a trailing ``/`` is stripped, except for the root ``/``
    - the result always starts with a single ``/``

    Never raises.  Applying it twice gives the same result as once::

        >>> format_href("a//b/", "")
        '/a/b'
        >>> format_href("/cs", "o-nas")
        '/cs/o-nas'
        >>> format_href("")
        '/'
    """
    href = "/".join(str(segment) for segment in segments if segment is not None)
    href = _ENCODED_SLASH_RE.sub("/", href)
    href = _SLASH_RUN_RE.sub("/", href)
    href = href.removesuffix("/")
    return href if href.startswith("/") else f"/{href}"
