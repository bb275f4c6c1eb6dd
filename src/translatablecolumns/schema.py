"""Schema and field access seams to the host persistence layer.

The engine never touches storage directly. It needs two things from the
host:

    SchemaAccessor - column_names(record_type): every physical column name
                     the record type knows, in schema order
    FieldAccessor  - get_field/set_field: named-slot read/write on a record

Both are Protocols (structural typing) so ORM adapters can implement them
without inheriting from this package.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from translatablecolumns.types import ColumnName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocols
    "SchemaAccessor",
    "FieldAccessor",
    # Implementations
    "AttributeSchema",
    "StaticSchema",
    "AttributeFieldAccessor",
]


class SchemaAccessor(Protocol):
    """Protocol for enumerating the physical columns of a record type."""

    def column_names(self, record_type: type) -> Sequence[ColumnName]:
        """Return every physical column name of ``record_type``, in schema order."""
        ...


class FieldAccessor(Protocol):
    """Protocol for reading and writing a named column on a record."""

    def get_field(self, record: object, column: ColumnName) -> Any:
        """Return the value stored in ``column`` on ``record``."""
        ...

    def set_field(self, record: object, column: ColumnName, value: Any) -> None:
        """Store ``value`` in ``column`` on ``record``."""
        ...


@dataclass(frozen=True, slots=True)
class AttributeSchema:
    """Schema accessor reading a class attribute.

    The attribute may hold a sequence of names or a zero-argument callable
    (e.g. a classmethod) returning one.

    Example:
        >>> class Topic:
        ...     column_names = ("title_en", "title_nl", "author_id")
        >>> AttributeSchema().column_names(Topic)
        ('title_en', 'title_nl', 'author_id')

    Attributes:
        attribute: Name of the class attribute (default: "column_names")
    """

    attribute: str = "column_names"

    def column_names(self, record_type: type) -> Sequence[ColumnName]:
        """Read the column list from ``record_type``.

        Raises:
            AttributeError: If the record type does not define the attribute
        """
        names = getattr(record_type, self.attribute)
        if callable(names):
            names = names()
        return tuple(names)


@dataclass(frozen=True, slots=True)
class StaticSchema:
    """Schema accessor backed by an explicit mapping of record types to columns.

    Lookups walk the record type's MRO, so subclasses share their parent's
    columns unless registered themselves.

    Example:
        >>> class Topic: ...
        >>> schema = StaticSchema({Topic: ["title_en", "title_nl"]})
        >>> schema.column_names(Topic)
        ('title_en', 'title_nl')
    """

    tables: Mapping[type, Iterable[ColumnName]] = field(default_factory=dict)

    def column_names(self, record_type: type) -> Sequence[ColumnName]:
        """Return the registered columns for ``record_type``.

        Raises:
            KeyError: If neither the type nor any base class is registered
        """
        for klass in record_type.__mro__:
            if klass in self.tables:
                return tuple(self.tables[klass])
        msg = f"No columns registered for {record_type.__qualname__}"
        raise KeyError(msg)


@dataclass(frozen=True, slots=True)
class AttributeFieldAccessor:
    """Field accessor using getattr/setattr.

    Reading a column that does not exist on the record returns ``missing``
    (default None) instead of raising. A default-locale column that is not
    in the schema therefore reads as "no value".

    Attributes:
        missing: Value returned for absent attributes
    """

    missing: Any = None

    def get_field(self, record: object, column: ColumnName) -> Any:
        """Return ``record.<column>`` or ``missing`` when absent."""
        return getattr(record, column, self.missing)

    def set_field(self, record: object, column: ColumnName, value: Any) -> None:
        """Assign ``record.<column> = value``."""
        setattr(record, column, value)
