"""Locale utilities for column-suffix derivation.

Centralizes the mapping from a locale identifier to the suffix used in
physical column names. This naming scheme is schema-facing: existing
tables depend on it, so it must stay byte-for-byte stable.

    language-only mode:  "nl-BE" -> "nl"     -> title_nl
    full-locale mode:    "nl-BE" -> "nl_be"  -> title_nl_be

Also provides cached Babel lookups used by introspection.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from translatablecolumns.constants import (
    COLUMN_SEPARATOR,
    LANGUAGE_SEPARATOR,
    MAX_LOCALE_CACHE_SIZE,
    POSIX_SEPARATOR,
)

if TYPE_CHECKING:
    from babel import Locale

    from translatablecolumns.config import TranslatableConfig
    from translatablecolumns.types import ColumnName, FieldName, LocaleCode

__all__ = [
    "clear_locale_cache",
    "column_locale",
    "column_name_localized",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to lowercase POSIX form.

    Every hyphen becomes an underscore and the result is lowercased, which
    makes it safe to embed in column identifiers.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "zh-Hans-CN")

    Returns:
        Lowercase POSIX-formatted locale code (e.g., "en_us", "zh_hans_cn")

    Example:
        >>> normalize_locale("nl-BE")
        'nl_be'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace(LANGUAGE_SEPARATOR, POSIX_SEPARATOR).lower()


def column_locale(locale: LocaleCode | object, config: TranslatableConfig) -> str:
    """Return the column suffix for ``locale`` under ``config``.

    Full-locale mode lowercases the identifier and replaces every ``-`` with
    ``_``. Language-only mode keeps the part before the first ``-`` (the
    identifier is returned unchanged when it has none). Malformed identifiers
    pass through mechanically; there are no error cases.

    Args:
        locale: Locale identifier; non-string objects are coerced with str()
        config: Configuration read at call time

    Returns:
        Column suffix

    Example:
        >>> from translatablecolumns.config import TranslatableConfig
        >>> column_locale("nl-BE", TranslatableConfig())
        'nl'
        >>> column_locale("nl-BE", TranslatableConfig(full_locale=True))
        'nl_be'
    """
    code = str(locale)
    if config.full_locale:
        return normalize_locale(code)
    return code.split(LANGUAGE_SEPARATOR, 1)[0]


def column_name_localized(
    field: FieldName, locale: LocaleCode | object, config: TranslatableConfig
) -> ColumnName:
    """Build the physical column name for ``field`` in ``locale``.

    Example:
        >>> from translatablecolumns.config import TranslatableConfig
        >>> column_name_localized("title", "nl-NL", TranslatableConfig())
        'title_nl'
    """
    return f"{field}{COLUMN_SEPARATOR}{column_locale(locale, config)}"


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Accepts BCP-47 or POSIX codes in any case ("nl-BE", "nl_be").

    Args:
        locale_code: Locale code

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("nl_be")
        >>> locale.language, locale.territory
        ('nl', 'BE')
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code), sep=POSIX_SEPARATOR)


def clear_locale_cache() -> None:
    """Clear the Babel locale cache."""
    get_babel_locale.cache_clear()
