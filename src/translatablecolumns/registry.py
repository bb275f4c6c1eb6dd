"""Per-record-type registry of translatable declarations.

A TranslationRegistry is the single place where a record type's
collaborators (schema accessor, field accessor, config, locale provider)
and its declarations (field bindings, validators) live. Accessors and
validators consult it at call time instead of capturing state in
generated code.

Lookup Semantics:
    Each registry stores only what was declared or configured on its own
    record type. Effective values are merged through the record type's MRO
    on every lookup, so a declaration or configure() on a base class is
    seen by every subclass, including subclasses whose registry already
    exists:

        bindings     base-most first, nearer classes override per field
        validators   base-most first, concatenated
        collaborators  nearest class that set one, else the shared default

    A subclass that declares nothing still gets its own registry on first
    lookup, so its catalog is read from its own schema.

Thread Safety:
    The registry table is protected by a module-level RLock and each
    registry's state by its own RLock. Declarations are expected at
    import/startup time.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, TypeAlias
from weakref import WeakKeyDictionary

from translatablecolumns.catalog import ColumnCatalog
from translatablecolumns.config import TranslatableConfig, get_config
from translatablecolumns.enums import GetterMode
from translatablecolumns.locales import LocaleProvider, get_locale_provider
from translatablecolumns.resolver import ColumnFallbackInfo, ColumnResolver
from translatablecolumns.schema import (
    AttributeFieldAccessor,
    AttributeSchema,
    FieldAccessor,
    SchemaAccessor,
)

if TYPE_CHECKING:
    from translatablecolumns.types import FieldName
    from translatablecolumns.validation import TranslationValidator

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Binding table
    "FieldBinding",
    "BindingSpec",
    # Registry
    "TranslationRegistry",
    "UNSET",
    "configure",
    "find_registry",
    "get_registry",
]

logger = logging.getLogger(__name__)

FallbackCallback: TypeAlias = Callable[[ColumnFallbackInfo], None]


class _Unset:
    """Marker for "argument not given" where None is a meaningful value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset()

_DEFAULT_SCHEMA: Final = AttributeSchema()
_DEFAULT_FIELDS: Final = AttributeFieldAccessor()


@dataclass(frozen=True, slots=True)
class FieldBinding:
    """Getter strategy declared for one logical field.

    Attributes:
        field: Logical field name
        mode: DIRECT or WITH_DEFAULTS, fixed at declaration time
    """

    field: FieldName
    mode: GetterMode

    @property
    def use_default(self) -> bool:
        """Whether the getter falls back across locales."""
        return self.mode is GetterMode.WITH_DEFAULTS


@dataclass(frozen=True, slots=True)
class BindingSpec:
    """Immutable table of field bindings for a record type.

    Re-declaring a field produces a new spec; existing specs never change.

    Example:
        >>> spec = BindingSpec().with_binding(FieldBinding("title", GetterMode.DIRECT))
        >>> "title" in spec
        True
        >>> spec["title"].mode
        <GetterMode.DIRECT: 'direct'>
    """

    bindings: Mapping[FieldName, FieldBinding] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def with_binding(self, binding: FieldBinding) -> BindingSpec:
        """Return a new spec with ``binding`` added or replaced."""
        return self.merged(BindingSpec(MappingProxyType({binding.field: binding})))

    def merged(self, other: BindingSpec) -> BindingSpec:
        """Return a new spec where ``other``'s bindings override this one's."""
        updated = dict(self.bindings)
        updated.update(other.bindings)
        return BindingSpec(MappingProxyType(updated))

    def get(self, field: FieldName) -> FieldBinding | None:
        """Return the binding for ``field`` or None."""
        return self.bindings.get(field)

    @property
    def fields(self) -> tuple[FieldName, ...]:
        """Declared field names in declaration order."""
        return tuple(self.bindings)

    def __getitem__(self, field: FieldName) -> FieldBinding:
        return self.bindings[field]

    def __contains__(self, field: object) -> bool:
        return field in self.bindings

    def __iter__(self) -> Iterator[FieldBinding]:
        return iter(self.bindings.values())

    def __len__(self) -> int:
        return len(self.bindings)


class TranslationRegistry:
    """Collaborators and declarations of one record type.

    Properties such as ``bindings``, ``validators`` and ``config`` return
    effective values merged with the registries of base classes; the
    ``declared_*`` properties return only what was set on this type.

    The column catalog and resolver are built lazily on first use, so a
    registry can be configured before the host schema is available (e.g.
    before ORM mappers are configured). They are rebuilt when this registry
    or any base-class registry is reconfigured.
    """

    __slots__ = (
        "_bindings",
        "_config",
        "_fields",
        "_generation",
        "_lock",
        "_locales",
        "_on_fallback",
        "_record_type",
        "_resolver",
        "_resolver_key",
        "_schema",
        "_validators",
    )

    def __init__(
        self,
        record_type: type,
        *,
        schema: SchemaAccessor | None = None,
        fields: FieldAccessor | None = None,
        config: TranslatableConfig | None = None,
        locales: LocaleProvider | None = None,
        on_fallback: FallbackCallback | None | _Unset = UNSET,
    ) -> None:
        """Initialize registry.

        Collaborators left as None (UNSET for ``on_fallback``) are inherited
        from base-class registries, or fall back to the defaults below.

        Args:
            record_type: Record type the declarations belong to
            schema: Column enumerator (default: AttributeSchema())
            fields: Record field accessor (default: AttributeFieldAccessor())
            config: Configuration (default: shared config from get_config())
            locales: Locale provider (default: shared provider)
            on_fallback: Default-locale fallback callback; None disables it
        """
        self._record_type = record_type
        self._schema = schema
        self._fields = fields
        self._config = config
        self._locales = locales
        self._on_fallback = on_fallback
        self._bindings = BindingSpec()
        self._validators: tuple[TranslationValidator, ...] = ()
        self._resolver: ColumnResolver | None = None
        self._resolver_key: tuple[tuple[TranslationRegistry, int], ...] = ()
        self._generation = 0
        self._lock = RLock()

    @property
    def record_type(self) -> type:
        """Record type this registry belongs to."""
        return self._record_type

    def lineage(self) -> tuple[TranslationRegistry, ...]:
        """Return this registry and those of its base classes, in MRO order."""
        with _registries_lock:
            registries = [
                _registries.get(klass) for klass in self._record_type.__mro__[1:]
            ]
        return (self, *(registry for registry in registries if registry is not None))

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    @property
    def declared_bindings(self) -> BindingSpec:
        """Bindings declared on this record type itself."""
        return self._bindings

    @property
    def declared_validators(self) -> tuple[TranslationValidator, ...]:
        """Validators declared on this record type itself."""
        return self._validators

    @property
    def bindings(self) -> BindingSpec:
        """Effective binding table, including base-class declarations."""
        spec = BindingSpec()
        for registry in reversed(self.lineage()):
            spec = spec.merged(registry.declared_bindings)
        return spec

    def binding(self, field: FieldName) -> FieldBinding | None:
        """Return the effective binding of ``field``, or None if undeclared."""
        for registry in self.lineage():
            binding = registry.declared_bindings.get(field)
            if binding is not None:
                return binding
        return None

    @property
    def validators(self) -> tuple[TranslationValidator, ...]:
        """Effective validators, base-class declarations first."""
        validators: tuple[TranslationValidator, ...] = ()
        for registry in reversed(self.lineage()):
            validators = (*validators, *registry.declared_validators)
        return validators

    def bind(self, binding: FieldBinding) -> None:
        """Add or replace the binding of ``binding.field`` on this type."""
        with self._lock:
            self._bindings = self._bindings.with_binding(binding)

    def add_validator(self, validator: TranslationValidator) -> None:
        """Append a validator on this type."""
        with self._lock:
            self._validators = (*self._validators, validator)

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    @property
    def schema(self) -> SchemaAccessor:
        """Effective schema accessor."""
        for registry in self.lineage():
            if registry._schema is not None:
                return registry._schema
        return _DEFAULT_SCHEMA

    @property
    def fields(self) -> FieldAccessor:
        """Effective field accessor."""
        for registry in self.lineage():
            if registry._fields is not None:
                return registry._fields
        return _DEFAULT_FIELDS

    @property
    def config(self) -> TranslatableConfig:
        """Effective configuration shared with the resolver."""
        for registry in self.lineage():
            if registry._config is not None:
                return registry._config
        return get_config()

    @property
    def locales(self) -> LocaleProvider:
        """Effective locale provider shared with the resolver."""
        for registry in self.lineage():
            if registry._locales is not None:
                return registry._locales
        return get_locale_provider()

    @property
    def on_fallback(self) -> FallbackCallback | None:
        """Effective fallback callback, or None."""
        for registry in self.lineage():
            if not isinstance(registry._on_fallback, _Unset):
                return registry._on_fallback
        return None

    @property
    def resolver(self) -> ColumnResolver:
        """Column resolver, built from the schema on first access.

        Rebuilt when this registry or a base-class registry was
        reconfigured since the last build.
        """
        lineage = self.lineage()
        key = tuple((registry, registry._generation) for registry in lineage)
        with self._lock:
            if self._resolver is None or key != self._resolver_key:
                catalog = ColumnCatalog.from_schema(self._record_type, self.schema)
                self._resolver = ColumnResolver(
                    catalog,
                    self.config,
                    self.locales,
                    self.fields,
                    on_fallback=self.on_fallback,
                )
                self._resolver_key = key
            return self._resolver

    @property
    def catalog(self) -> ColumnCatalog:
        """Column catalog of the record type."""
        return self.resolver.catalog

    def configure(
        self,
        *,
        schema: SchemaAccessor | None = None,
        fields: FieldAccessor | None = None,
        config: TranslatableConfig | None = None,
        locales: LocaleProvider | None = None,
        on_fallback: FallbackCallback | None | _Unset = UNSET,
    ) -> None:
        """Replace collaborators of this type.

        Arguments left as None keep their value; ``on_fallback`` keeps its
        value when UNSET and is removed when None. Resolvers of this type
        and its subclasses are rebuilt on next use.
        """
        with self._lock:
            if schema is not None:
                self._schema = schema
            if fields is not None:
                self._fields = fields
            if config is not None:
                self._config = config
            if locales is not None:
                self._locales = locales
            if not isinstance(on_fallback, _Unset):
                self._on_fallback = on_fallback
            self._generation += 1

    def reload_schema(self) -> None:
        """Discard cached catalogs of this type and its subclasses."""
        with self._lock:
            self._generation += 1

    def __repr__(self) -> str:
        return (
            f"TranslationRegistry({self._record_type.__qualname__}, "
            f"fields={self._bindings.fields!r}, validators={len(self._validators)})"
        )


_registries: WeakKeyDictionary[type, TranslationRegistry] = WeakKeyDictionary()
_registries_lock = RLock()


def find_registry(record_type: type) -> TranslationRegistry | None:
    """Find the registry governing ``record_type``.

    Returns None when neither ``record_type`` nor any base class has a
    registry. Otherwise returns the registry of ``record_type`` itself,
    creating it when only a base class had one.
    """
    with _registries_lock:
        if not any(klass in _registries for klass in record_type.__mro__):
            return None
        return get_registry(record_type)


def get_registry(record_type: type) -> TranslationRegistry:
    """Get the registry owned by ``record_type``, creating it on demand.

    A new registry declares nothing itself; it sees base-class
    declarations and collaborators through its lineage.
    """
    with _registries_lock:
        registry = _registries.get(record_type)
        if registry is None:
            registry = TranslationRegistry(record_type)
            _registries[record_type] = registry
            logger.debug(
                "Created registry for %s (inherits from %d base registries)",
                record_type.__qualname__,
                len(registry.lineage()) - 1,
            )
        return registry


def configure(
    record_type: type,
    *,
    schema: SchemaAccessor | None = None,
    fields: FieldAccessor | None = None,
    config: TranslatableConfig | None = None,
    locales: LocaleProvider | None = None,
    on_fallback: FallbackCallback | None | _Unset = UNSET,
) -> TranslationRegistry:
    """Set the collaborators used for ``record_type`` and its subclasses.

    Subclasses that configured a collaborator themselves keep their own.
    Pass ``on_fallback=None`` to remove a registered callback.

    Example:
        >>> class Topic:
        ...     column_names = ("title_en", "title_nl")
        >>> registry = configure(Topic, config=TranslatableConfig(full_locale=True))
        >>> registry.config.full_locale
        True
    """
    registry = get_registry(record_type)
    registry.configure(
        schema=schema,
        fields=fields,
        config=config,
        locales=locales,
        on_fallback=on_fallback,
    )
    return registry
