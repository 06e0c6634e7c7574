"""Roots exception hierarchy.

Shared across the schema sanitizer, template parser, and Router so every
module raises and catches the same types.

Only configuration problems raise.  Lookups that miss (unknown route name,
unmatched href, missing parameter) degrade to a fallback value instead.
"""


class RootsError(Exception):
    """Base for all roots-specific errors."""


class ConfigurationError(RootsError):
    """Raised when a router schema is invalid.

    Typically raised while constructing a ``Router``, when the schema is
    sanitized.
    """


class TemplateSyntaxError(ConfigurationError):
    """Raised when a route template cannot be parsed.

    ``compile_template`` and ``match_template`` absorb this error and fall
    back; ``sanitize_schema`` lets it surface as a configuration error.
    """

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Invalid route template {template!r}: {reason}")
