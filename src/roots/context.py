"""Task-scoped current locale via ContextVar.

Provides:
- ``LocaleContext``: the protocol a ``Router`` reads its default locale from.
- ``ContextLocale``: a ContextVar-backed implementation.
- ``current_locale``: the shared ``ContextLocale`` routers use by default.
- ``StaticLocale``: a fixed locale, for passing context explicitly.

The current locale is opt-in.  If nothing sets it, ``get_locale()``
returns ``None`` and routers fall back to the schema's default locale.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local across
    threads, so one request's locale never leaks into another's hrefs.
"""

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from contextvars import ContextVar, Token
from typing import Protocol, runtime_checkable


@runtime_checkable
class LocaleContext(Protocol):
    """Anything that can report the locale of the current request."""

    def get(self) -> str | None: ...


class ContextLocale:
    """The current locale, scoped to the running task or thread.

    Usage::

        from roots.context import current_locale

        # In middleware
        with current_locale.scope("cs"):
            response = await call_next(request)

        # Anywhere below
        router.get_href("/about")  # -> "/cs/o-nas"
    """

    __slots__ = ("_var",)

    def __init__(self, name: str = "roots_locale") -> None:
        self._var: ContextVar[str | None] = ContextVar(name, default=None)

    def get(self) -> str | None:
        """Return the current locale, or ``None`` if none is set."""
        return self._var.get()

    def set(self, locale: str | None) -> Token[str | None]:
        """Set the current locale. Pass the returned token to ``reset()``."""
        return self._var.set(locale)

    def reset(self, token: Token[str | None]) -> None:
        """Restore the locale that was current before ``set()``."""
        self._var.reset(token)

    @contextmanager
    def scope(self, locale: str | None) -> Iterator[None]:
        """Make *locale* current for the duration of a ``with`` block."""
        token = self._var.set(locale)
        try:
            yield
        finally:
            self._var.reset(token)

    def __repr__(self) -> str:
        return f"<ContextLocale {self.get()!r}>"


class StaticLocale:
    """A locale context that always reports the same locale."""

    __slots__ = ("locale",)

    def __init__(self, locale: str | None) -> None:
        self.locale = locale

    def get(self) -> str | None:
        return self.locale

    def __repr__(self) -> str:
        return f"<StaticLocale {self.locale!r}>"


current_locale = ContextLocale()
"""The shared current locale. Set by middleware, read by routers."""


def get_locale() -> str | None:
    """Return the current locale, or ``None`` outside any locale scope."""
    return current_locale.get()


def set_locale(locale: str | None) -> Token[str | None]:
    """Set the current locale for this task. Reset with ``reset_locale()``."""
    return current_locale.set(locale)


def reset_locale(token: Token[str | None]) -> None:
    """Undo a ``set_locale()`` call."""
    current_locale.reset(token)


def use_locale(locale: str | None) -> AbstractContextManager[None]:
    """Shortcut for ``current_locale.scope(locale)``."""
    return current_locale.scope(locale)
