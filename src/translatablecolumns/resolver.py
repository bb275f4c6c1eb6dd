"""Column resolution with default-locale fallback.

ColumnResolver decides which physical column a logical field reads from
or writes to:

    1. The requested locale's column, when the catalog has it
    2. Otherwise the default locale's column, whether or not it exists

Resolution never raises. A default-locale column missing from the schema
is the host's concern when it is dereferenced (AttributeFieldAccessor
reads it as None).

The resolver holds references to its config and locale provider and reads
them on every call, so runtime changes are observed immediately.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sized
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from translatablecolumns.locale_utils import column_locale, column_name_localized

if TYPE_CHECKING:
    from translatablecolumns.catalog import ColumnCatalog
    from translatablecolumns.config import TranslatableConfig
    from translatablecolumns.locales import LocaleProvider
    from translatablecolumns.schema import FieldAccessor
    from translatablecolumns.types import ColumnName, FieldName, LocaleCode

__all__ = ["ColumnFallbackInfo", "ColumnResolver", "is_blank"]

logger = logging.getLogger(__name__)


def is_blank(value: object) -> bool:
    """Check whether ``value`` counts as "no translation".

    Blank values: None, False, strings that are empty or whitespace only,
    and empty sized collections.

    Example:
        >>> is_blank("  ")
        True
        >>> is_blank("foo")
        False
        >>> is_blank(0)
        False
    """
    match value:
        case None | False:
            return True
        case str():
            return not value.strip()
        case Sized():
            return len(value) == 0
        case _:
            return False


@dataclass(frozen=True, slots=True)
class ColumnFallbackInfo:
    """Information about a default-locale fallback during resolution.

    Provided to the ``on_fallback`` callback when the requested locale has
    no column and the default locale's column is used instead.

    Attributes:
        field: Logical field name
        requested_locale: Locale that had no column
        default_locale: Locale whose column was returned
        column: Returned column name (may not exist in the schema)
        column_exists: Whether the returned column is in the catalog
    """

    field: FieldName
    requested_locale: LocaleCode
    default_locale: LocaleCode
    column: ColumnName
    column_exists: bool


class ColumnResolver:
    """Resolves logical fields to physical columns for one record type.

    Example:
        >>> from translatablecolumns.catalog import ColumnCatalog
        >>> from translatablecolumns.config import TranslatableConfig
        >>> from translatablecolumns.locales import StaticLocaleProvider
        >>> from translatablecolumns.schema import AttributeFieldAccessor
        >>> resolver = ColumnResolver(
        ...     ColumnCatalog(["title_en", "title_nl"]),
        ...     TranslatableConfig(),
        ...     StaticLocaleProvider("nl-NL", "en-US"),
        ...     AttributeFieldAccessor(),
        ... )
        >>> resolver.column_for("title")
        'title_nl'
        >>> resolver.column_for("title", "jp-JP")
        'title_en'
    """

    __slots__ = ("_catalog", "_config", "_fields", "_locales", "_on_fallback")

    def __init__(
        self,
        catalog: ColumnCatalog,
        config: TranslatableConfig,
        locales: LocaleProvider,
        fields: FieldAccessor,
        *,
        on_fallback: Callable[[ColumnFallbackInfo], None] | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            catalog: Column catalog of the record type
            config: Configuration, read at call time
            locales: Current/default locale provider, read at call time
            fields: Record field accessor
            on_fallback: Optional callback invoked on default-locale fallback
        """
        self._catalog = catalog
        self._config = config
        self._locales = locales
        self._fields = fields
        self._on_fallback = on_fallback

    @property
    def catalog(self) -> ColumnCatalog:
        """Column catalog used for existence checks."""
        return self._catalog

    @property
    def config(self) -> TranslatableConfig:
        """Configuration consulted on each call."""
        return self._config

    @property
    def locales(self) -> LocaleProvider:
        """Locale provider consulted on each call."""
        return self._locales

    def column_locale(self, locale: LocaleCode | None = None) -> str:
        """Return the column suffix for ``locale`` (default: current locale)."""
        if locale is None:
            locale = self._locales.current_locale()
        return column_locale(locale, self._config)

    def column_name_localized(
        self, field: FieldName, locale: LocaleCode | None = None
    ) -> ColumnName:
        """Return ``<field>_<suffix>`` for ``locale`` (default: current locale)."""
        if locale is None:
            locale = self._locales.current_locale()
        return column_name_localized(field, locale, self._config)

    def column_exists(self, field: FieldName, locale: LocaleCode | None = None) -> bool:
        """Check whether ``field`` has a column for ``locale`` (default: current)."""
        if locale is None:
            locale = self._locales.current_locale()
        return self._catalog.column_exists(field, locale, self._config)

    def available_columns(self, field: FieldName) -> tuple[ColumnName, ...]:
        """Return every physical column of ``field`` in schema order."""
        return self._catalog.available_columns(field)

    def column_for(self, field: FieldName, locale: LocaleCode | None = None) -> ColumnName:
        """Resolve the column ``field`` reads from and writes to in ``locale``.

        Args:
            field: Logical field name
            locale: Requested locale (default: provider's current locale)

        Returns:
            The requested locale's column when it exists, else the default
            locale's column name (which may itself be absent from the schema)
        """
        if locale is None:
            locale = self._locales.current_locale()
        if self._catalog.column_exists(field, locale, self._config):
            return column_name_localized(field, locale, self._config)

        default_locale = self._locales.default_locale()
        column = column_name_localized(field, default_locale, self._config)
        exists = column in self._catalog.available_columns(field)
        logger.debug(
            "No column for '%s' in locale '%s', using '%s' (exists=%s)",
            field,
            locale,
            column,
            exists,
        )
        if self._on_fallback is not None:
            self._on_fallback(
                ColumnFallbackInfo(
                    field=field,
                    requested_locale=str(locale),
                    default_locale=str(default_locale),
                    column=column,
                    column_exists=exists,
                )
            )
        return column

    def read(self, record: object, column: ColumnName) -> Any:
        """Read ``column`` from ``record`` through the field accessor."""
        return self._fields.get_field(record, column)

    def write(self, record: object, column: ColumnName, value: Any) -> None:
        """Write ``value`` to ``column`` on ``record`` through the field accessor."""
        self._fields.set_field(record, column, value)

    def find_translated_value(self, record: object, field: FieldName) -> Any:
        """Return the first non-blank value among ``field``'s columns.

        Columns are tried in catalog (schema) order, regardless of locale.

        Args:
            record: Record instance
            field: Logical field name

        Returns:
            First non-blank value, or None when every column is blank
        """
        for column in self._catalog.available_columns(field):
            value = self._fields.get_field(record, column)
            if not is_blank(value):
                return value
        return None

    def __repr__(self) -> str:
        return f"ColumnResolver(catalog={self._catalog!r}, config={self._config!r})"
