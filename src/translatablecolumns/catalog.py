"""Column catalog: which physical columns implement a logical field.

A ColumnCatalog wraps an ordered snapshot of a record type's column names
and answers "which of these are translations of ``title``?". A column
belongs to field ``title`` when its full name matches::

    ^title_\\w{2,}$

Results keep schema order (not alphabetical) and are memoised per field,
since the schema is static once loaded.

Known ambiguity:
    Matching is prefix based. ``title`` also claims ``title_long_version``
    or ``title_id`` when such columns exist. Suffixes of one character
    (``title_x``) are never claimed.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from threading import RLock
from typing import TYPE_CHECKING

from translatablecolumns.constants import COLUMN_SEPARATOR, SUFFIX_PATTERN
from translatablecolumns.locale_utils import column_name_localized

if TYPE_CHECKING:
    from translatablecolumns.config import TranslatableConfig
    from translatablecolumns.schema import SchemaAccessor
    from translatablecolumns.types import ColumnName, FieldName, LocaleCode

__all__ = ["ColumnCatalog"]

logger = logging.getLogger(__name__)


class ColumnCatalog:
    """Schema-indexed lookup from logical field to its physical columns.

    Thread Safety:
        The column snapshot is immutable. The per-field memo is protected by
        an RLock; concurrent lookups of the same field compute the same
        tuple, so a lost race only costs one extra scan.

    Example:
        >>> catalog = ColumnCatalog(["title_en", "title_nl", "body_en", "author_id"])
        >>> catalog.available_columns("title")
        ('title_en', 'title_nl')
        >>> catalog.available_columns("author")
        ()
    """

    __slots__ = ("_columns", "_index", "_lock")

    def __init__(self, columns: Iterable[ColumnName]) -> None:
        """Initialize catalog.

        Args:
            columns: Every physical column name of the record type, in
                schema order
        """
        self._columns: tuple[ColumnName, ...] = tuple(columns)
        self._index: dict[FieldName, tuple[ColumnName, ...]] = {}
        self._lock = RLock()

    @classmethod
    def from_schema(cls, record_type: type, schema: SchemaAccessor) -> ColumnCatalog:
        """Build a catalog from a schema accessor's view of ``record_type``."""
        columns = schema.column_names(record_type)
        logger.debug(
            "Loaded %d columns for %s", len(columns), record_type.__qualname__
        )
        return cls(columns)

    @property
    def columns(self) -> tuple[ColumnName, ...]:
        """Full column snapshot in schema order."""
        return self._columns

    def available_columns(self, field: FieldName) -> tuple[ColumnName, ...]:
        """Return the physical columns implementing ``field``, in schema order.

        Args:
            field: Logical field name

        Returns:
            Tuple of matching column names (empty when none match)
        """
        field = str(field)
        with self._lock:
            cached = self._index.get(field)
        if cached is not None:
            return cached

        pattern = re.compile(
            rf"{re.escape(field)}{re.escape(COLUMN_SEPARATOR)}{SUFFIX_PATTERN}"
        )
        matches = tuple(column for column in self._columns if pattern.fullmatch(column))
        logger.debug("Indexed field '%s': %s", field, matches)

        with self._lock:
            self._index[field] = matches
        return matches

    def column_exists(
        self, field: FieldName, locale: LocaleCode, config: TranslatableConfig
    ) -> bool:
        """Check whether ``field`` has a column for ``locale``.

        Args:
            field: Logical field name
            locale: Locale identifier
            config: Configuration deciding the suffix form

        Returns:
            True iff the localized column name is among the field's columns
        """
        return column_name_localized(field, locale, config) in self.available_columns(field)

    def clear_cache(self) -> None:
        """Drop memoised field lookups."""
        with self._lock:
            self._index.clear()

    def __contains__(self, column: object) -> bool:
        return column in self._columns

    def __iter__(self) -> Iterator[ColumnName]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        return f"ColumnCatalog(columns={len(self._columns)}, indexed={len(self._index)})"
