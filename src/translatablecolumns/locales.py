"""Current-locale and default-locale providers.

The resolver never owns locale state. It asks a LocaleProvider for the
current locale (request or task scoped) and the default locale (process
wide) at call time.

Architecture:
    - LocaleProvider: Protocol (structural typing) for host adapters
    - ContextLocaleProvider: ContextVar-backed current locale, so each
      thread and asyncio task sees its own value
    - StaticLocaleProvider: Immutable fixed codes, convenient for tests
      and batch jobs

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Generator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol

from translatablecolumns.constants import DEFAULT_LOCALE
from translatablecolumns.types import LocaleCode

__all__ = [
    "ContextLocaleProvider",
    "LocaleProvider",
    "StaticLocaleProvider",
    "get_locale_provider",
]


class LocaleProvider(Protocol):
    """Protocol for supplying the current and default locale.

    Example:
        >>> class RequestLocales:
        ...     def __init__(self, request):
        ...         self.request = request
        ...     def current_locale(self) -> str:
        ...         return self.request.headers.get("Accept-Language", "en")
        ...     def default_locale(self) -> str:
        ...         return "en"
    """

    def current_locale(self) -> LocaleCode:
        """Return the locale the current operation runs in."""
        ...

    def default_locale(self) -> LocaleCode:
        """Return the fallback locale."""
        ...


# Current locale of every ContextLocaleProvider in this context, keyed by
# provider. A single ContextVar regardless of how many providers exist.
_current_locales: ContextVar[Mapping[object, LocaleCode]] = ContextVar(
    "translatablecolumns_current_locales", default=MappingProxyType({})
)


class ContextLocaleProvider:
    """Locale provider with a context-scoped current locale.

    The current locale lives in a ContextVar: setting it in one thread or
    asyncio task does not leak into others. The default locale is a plain
    attribute shared by all contexts. When no current locale has been set,
    the current locale is the default locale.

    Providers are cheap: all of them share one module-level ContextVar, so
    creating providers per test or per tenant does not grow contexts.

    Example:
        >>> locales = ContextLocaleProvider(default_locale="en-US")
        >>> locales.current_locale()
        'en-US'
        >>> with locales.use_locale("nl-NL"):
        ...     locales.current_locale()
        'nl-NL'
        >>> locales.current_locale()
        'en-US'
    """

    __slots__ = ("_default", "_key")

    def __init__(self, default_locale: LocaleCode = DEFAULT_LOCALE) -> None:
        """Initialize provider.

        Args:
            default_locale: Fallback locale (default: "en")
        """
        self._default: LocaleCode = default_locale
        self._key = object()

    def _current(self) -> LocaleCode | None:
        return _current_locales.get().get(self._key)

    def _store(self, locale: LocaleCode | None) -> None:
        updated = dict(_current_locales.get())
        if locale is None:
            updated.pop(self._key, None)
        else:
            updated[self._key] = locale
        _current_locales.set(MappingProxyType(updated))

    def current_locale(self) -> LocaleCode:
        """Return the current locale, or the default locale when unset."""
        current = self._current()
        return self._default if current is None else current

    def default_locale(self) -> LocaleCode:
        """Return the default locale."""
        return self._default

    def set_locale(self, locale: LocaleCode | None) -> None:
        """Set the current locale for this context (None clears it)."""
        self._store(locale)

    def set_default_locale(self, locale: LocaleCode) -> None:
        """Set the process-wide default locale."""
        self._default = locale

    def reset(self, default_locale: LocaleCode = DEFAULT_LOCALE) -> None:
        """Clear the current locale and restore the default locale."""
        self._store(None)
        self._default = default_locale

    @contextmanager
    def use_locale(self, locale: LocaleCode) -> Generator[None]:
        """Run a block with ``locale`` as the current locale.

        The previous current locale is restored on exit, including when the
        block raises. Other providers' locales are left untouched.
        """
        previous = self._current()
        self._store(locale)
        try:
            yield
        finally:
            self._store(previous)

    @contextmanager
    def use_default_locale(self, locale: LocaleCode) -> Generator[None]:
        """Run a block with ``locale`` as the default locale."""
        previous = self._default
        self._default = locale
        try:
            yield
        finally:
            self._default = previous

    def __repr__(self) -> str:
        return (
            f"ContextLocaleProvider(current={self._current()!r}, "
            f"default={self._default!r})"
        )


@dataclass(frozen=True, slots=True)
class StaticLocaleProvider:
    """Immutable provider returning fixed locale codes.

    Attributes:
        current: Current locale code
        default: Default locale code (falls back to ``current`` when omitted)
    """

    current: LocaleCode
    default: LocaleCode | None = None

    def current_locale(self) -> LocaleCode:
        """Return the fixed current locale."""
        return self.current

    def default_locale(self) -> LocaleCode:
        """Return the fixed default locale."""
        return self.current if self.default is None else self.default


_shared_provider = ContextLocaleProvider()


def get_locale_provider() -> ContextLocaleProvider:
    """Get the shared process-wide locale provider."""
    return _shared_provider
