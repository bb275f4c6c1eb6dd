"""translatablecolumns - Locale-aware attributes over per-locale columns.

Resolves a logical attribute (``title``) to one of its physical per-locale
columns (``title_en``, ``title_nl``, ...) for the current locale, with a
fallback to the default locale's column and, for reads, to any available
translation.

Public API:
    declare_translatable - Bind translated getters/setters for fields
    declare_translation_required - Require at least one translation per field
    validate_translations - Run translation validators on a record
    configure - Set schema/field accessors, config and locale provider
    translatable - Class decorator form of configure + declare_translatable
    TranslatableConfig - full_locale / use_default settings
    ContextLocaleProvider - ContextVar-scoped current locale
    ColumnCatalog, ColumnResolver - Resolution engine

Exceptions:
    TranslatableColumnsError - Base exception class
    DeclarationError - Invalid declarations
    UnknownFieldError - Access to undeclared fields
    TranslationValidationError - Raised by host integrations on invalid records

Submodules:
    translatablecolumns.locale_utils - Column suffix derivation
    translatablecolumns.introspection - Column and locale introspection
    translatablecolumns.integrations.sqlalchemy - SQLAlchemy ORM adapter
"""

from .binding import (
    TranslatedAttribute,
    declare_translatable,
    find_translated_value,
    read_translated,
    translatable,
    write_translated,
)
from .catalog import ColumnCatalog
from .config import TranslatableConfig, get_config, reset_config
from .diagnostics import (
    DeclarationError,
    TranslatableColumnsError,
    TranslationFailure,
    TranslationValidationError,
    UnknownFieldError,
    ValidationResult,
)
from .enums import GetterMode, ValidationEvent
from .locales import (
    ContextLocaleProvider,
    LocaleProvider,
    StaticLocaleProvider,
    get_locale_provider,
)
from .registry import BindingSpec, FieldBinding, TranslationRegistry, configure, get_registry
from .resolver import ColumnFallbackInfo, ColumnResolver, is_blank
from .schema import AttributeFieldAccessor, AttributeSchema, StaticSchema
from .validation import (
    TranslationValidator,
    declare_translation_required,
    validate_translations,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("translatablecolumns")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AttributeFieldAccessor",
    "AttributeSchema",
    "BindingSpec",
    "ColumnCatalog",
    "ColumnFallbackInfo",
    "ColumnResolver",
    "ContextLocaleProvider",
    "DeclarationError",
    "FieldBinding",
    "GetterMode",
    "LocaleProvider",
    "StaticLocaleProvider",
    "StaticSchema",
    "TranslatableColumnsError",
    "TranslatableConfig",
    "TranslatedAttribute",
    "TranslationFailure",
    "TranslationRegistry",
    "TranslationValidationError",
    "TranslationValidator",
    "UnknownFieldError",
    "ValidationEvent",
    "ValidationResult",
    "__version__",
    "configure",
    "declare_translatable",
    "declare_translation_required",
    "find_translated_value",
    "get_config",
    "get_locale_provider",
    "get_registry",
    "is_blank",
    "read_translated",
    "reset_config",
    "translatable",
    "validate_translations",
    "write_translated",
]
