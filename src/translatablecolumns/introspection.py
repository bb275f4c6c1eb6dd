"""Introspection of translated columns and their locales.

Answers questions a UI or admin tool asks about a translatable field:
which locale columns exist, what those locales are called, and which
translations a record is still missing.

Display names come from Babel's CLDR data. Suffixes Babel cannot parse
(e.g. an over-matched ``title_long_version`` column) are still reported,
with ``display_name=None``.

Python 3.13+. Uses Babel for locale display names.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from babel import UnknownLocaleError

from translatablecolumns.constants import COLUMN_SEPARATOR
from translatablecolumns.diagnostics import UnknownFieldError
from translatablecolumns.locale_utils import get_babel_locale
from translatablecolumns.registry import find_registry
from translatablecolumns.resolver import is_blank

if TYPE_CHECKING:
    from translatablecolumns.registry import TranslationRegistry
    from translatablecolumns.types import ColumnName, FieldName

__all__ = [
    "ColumnInfo",
    "missing_translations",
    "translated_locales",
    "translation_columns",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ColumnInfo:
    """Description of one physical translation column.

    Attributes:
        column: Physical column name (e.g., "title_nl_be")
        suffix: Locale suffix (e.g., "nl_be")
        display_name: Locale name in its own language (e.g., "Nederlands
            (België)"), or None when the suffix is not a known locale
    """

    column: ColumnName
    suffix: str
    display_name: str | None = None


def _registry(record_type: type, field: FieldName) -> TranslationRegistry:
    registry = find_registry(record_type)
    if registry is None:
        raise UnknownFieldError(field, record_type)
    return registry


def _suffix(field: FieldName, column: ColumnName) -> str:
    return column[len(field) + len(COLUMN_SEPARATOR) :]


def _display_name(suffix: str) -> str | None:
    try:
        return get_babel_locale(suffix).get_display_name()
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("Column suffix '%s' is not a known locale: %s", suffix, e)
        return None


def translation_columns(record_type: type, field: FieldName) -> tuple[ColumnInfo, ...]:
    """Describe every physical column of ``field`` on ``record_type``.

    Args:
        record_type: Record class with a registry
        field: Logical field name

    Returns:
        ColumnInfo per column, in schema order

    Raises:
        UnknownFieldError: If the record type has no registry

    Example:
        >>> [info.display_name for info in translation_columns(Topic, "title")]
        ['English', 'Nederlands', 'Deutsch', 'français']
    """
    catalog = _registry(record_type, field).catalog
    infos: list[ColumnInfo] = []
    for column in catalog.available_columns(field):
        suffix = _suffix(field, column)
        infos.append(ColumnInfo(column, suffix, _display_name(suffix)))
    return tuple(infos)


def translated_locales(record: object, field: FieldName) -> tuple[str, ...]:
    """Return the suffixes whose column holds a non-blank value on ``record``.

    Raises:
        UnknownFieldError: If the record's type has no registry
    """
    resolver = _registry(type(record), field).resolver
    return tuple(
        _suffix(field, column)
        for column in resolver.available_columns(field)
        if not is_blank(resolver.read(record, column))
    )


def missing_translations(record: object, field: FieldName) -> tuple[str, ...]:
    """Return the suffixes whose column is blank on ``record``.

    Raises:
        UnknownFieldError: If the record's type has no registry
    """
    resolver = _registry(type(record), field).resolver
    return tuple(
        _suffix(field, column)
        for column in resolver.available_columns(field)
        if is_blank(resolver.read(record, column))
    )
