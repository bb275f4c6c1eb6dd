"""Translated accessors for logical fields.

declare_translatable() records a FieldBinding per field in the record
type's registry and installs a TranslatedAttribute descriptor under the
field name. The descriptor holds no strategy of its own: on every access
it looks up the binding and dispatches on its GetterMode.

Getter strategies:
    DIRECT         value at column_for(field, current locale), as stored
    WITH_DEFAULTS  first non-blank of:
                   1. value at column_for(field, current locale)
                   2. value at the default locale's column
                   3. any non-blank value among the field's columns

Setter (both modes):
    write to column_for(field, current locale); never scans other locales.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, overload

from translatablecolumns.diagnostics import UnknownFieldError
from translatablecolumns.enums import GetterMode
from translatablecolumns.field_names import validate_field_names
from translatablecolumns.registry import (
    FieldBinding,
    configure,
    find_registry,
    get_registry,
)
from translatablecolumns.resolver import is_blank

if TYPE_CHECKING:
    from translatablecolumns.registry import TranslationRegistry
    from translatablecolumns.resolver import ColumnResolver
    from translatablecolumns.types import FieldName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Declaration
    "declare_translatable",
    "translatable",
    # Descriptor
    "TranslatedAttribute",
    # Functional access
    "read_translated",
    "write_translated",
    "find_translated_value",
]

logger = logging.getLogger(__name__)


def _get_direct(resolver: ColumnResolver, record: object, field: FieldName) -> Any:
    return resolver.read(record, resolver.column_for(field))


def _get_with_defaults(resolver: ColumnResolver, record: object, field: FieldName) -> Any:
    value = resolver.read(record, resolver.column_for(field))
    if not is_blank(value):
        return value

    default_column = resolver.column_name_localized(field, resolver.locales.default_locale())
    value = resolver.read(record, default_column)
    if not is_blank(value):
        return value

    return resolver.find_translated_value(record, field)


_GETTERS: dict[GetterMode, Callable[[ColumnResolver, object, FieldName], Any]] = {
    GetterMode.DIRECT: _get_direct,
    GetterMode.WITH_DEFAULTS: _get_with_defaults,
}


def _registry_for(record: object, field: FieldName) -> tuple[TranslationRegistry, FieldBinding]:
    record_type = type(record)
    registry = find_registry(record_type)
    if registry is not None:
        binding = registry.binding(field)
        if binding is not None:
            return registry, binding
    raise UnknownFieldError(field, record_type)


def read_translated(record: object, field: FieldName) -> Any:
    """Read logical ``field`` of ``record`` in the current locale.

    Args:
        record: Record instance whose type declared ``field``
        field: Logical field name

    Returns:
        Value according to the field's getter mode (may be None)

    Raises:
        UnknownFieldError: If ``field`` is not declared on the record's type
    """
    registry, binding = _registry_for(record, field)
    return _GETTERS[binding.mode](registry.resolver, record, field)


def write_translated(record: object, field: FieldName, value: Any) -> None:
    """Write ``value`` to logical ``field`` of ``record`` in the current locale.

    Raises:
        UnknownFieldError: If ``field`` is not declared on the record's type
    """
    registry, _ = _registry_for(record, field)
    resolver = registry.resolver
    resolver.write(record, resolver.column_for(field), value)


def find_translated_value(record: object, field: FieldName) -> Any:
    """Return the first non-blank value among ``field``'s columns on ``record``.

    Works for any field with columns in the record type's schema, declared
    or not.

    Raises:
        UnknownFieldError: If the record's type has no registry at all
    """
    registry = find_registry(type(record))
    if registry is None:
        raise UnknownFieldError(field, type(record))
    return registry.resolver.find_translated_value(record, field)


class TranslatedAttribute:
    """Descriptor exposing a logical field as a plain attribute.

    Example:
        >>> topic.title = "Hallo"        # writes title_nl in locale nl-NL
        >>> topic.title
        'Hallo'
        >>> Topic.title                  # class access returns the descriptor
        <TranslatedAttribute 'title'>
    """

    __slots__ = ("field",)

    def __init__(self, field: FieldName) -> None:
        self.field = field

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> TranslatedAttribute: ...

    @overload
    def __get__(self, instance: object, owner: type | None = None) -> Any: ...

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return read_translated(instance, self.field)

    def __set__(self, instance: object, value: Any) -> None:
        write_translated(instance, self.field, value)

    def __repr__(self) -> str:
        return f"<TranslatedAttribute {self.field!r}>"


def declare_translatable(
    record_type: type, *fields: FieldName, use_default: bool | None = None
) -> tuple[FieldBinding, ...]:
    """Declare logical translatable fields on ``record_type``.

    The getter mode is fixed here: an explicit ``use_default`` wins,
    otherwise the registry config's ``use_default`` is read now and
    captured. Later config changes do not affect declared fields;
    re-declaring a field replaces its binding.

    Args:
        record_type: Record class
        *fields: Logical field names (e.g., "title", "body")
        use_default: Per-declaration override of config.use_default

    Returns:
        The created bindings, in argument order

    Raises:
        DeclarationError: If no fields are given or a name is not a
            non-empty string

    Example:
        >>> class Topic:
        ...     column_names = ("title_en", "title_nl")
        >>> declare_translatable(Topic, "title", use_default=False)
        (FieldBinding(field='title', mode=<GetterMode.DIRECT: 'direct'>),)
    """
    names = validate_field_names(fields)
    registry = get_registry(record_type)
    if use_default is None:
        use_default = registry.config.use_default
    mode = GetterMode.from_use_default(use_default)

    bindings = tuple(FieldBinding(name, mode) for name in names)
    for binding in bindings:
        registry.bind(binding)
        setattr(record_type, binding.field, TranslatedAttribute(binding.field))

    logger.info(
        "Declared translatable fields %s on %s (mode=%s)",
        ", ".join(names),
        record_type.__qualname__,
        mode,
    )
    return bindings


def translatable(
    *fields: FieldName, use_default: bool | None = None, **collaborators: Any
) -> Callable[[type], type]:
    """Class decorator form of configure() + declare_translatable().

    Keyword arguments other than ``use_default`` are passed to configure()
    (schema, fields, config, locales, on_fallback).

    Example:
        >>> @translatable("title", "body")
        ... class Topic:
        ...     column_names = ("title_en", "title_nl", "body_en", "body_nl")
    """

    def decorator(record_type: type) -> type:
        if collaborators:
            configure(record_type, **collaborators)
        declare_translatable(record_type, *fields, use_default=use_default)
        return record_type

    return decorator
