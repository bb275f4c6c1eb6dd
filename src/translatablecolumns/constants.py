"""Shared constants for translatablecolumns.

This module provides centralized configuration constants used across the
catalog, resolver and validation layers. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Column naming: Suffix pattern and separator for physical column names
- Locale defaults: Fallback locale when no provider is configured
- Cache limits: Memory bounds for caching subsystems
- Validation: Error kinds reported to validation sinks

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Column naming
    "COLUMN_SEPARATOR",
    "SUFFIX_PATTERN",
    # Locale defaults
    "DEFAULT_LOCALE",
    "LANGUAGE_SEPARATOR",
    "POSIX_SEPARATOR",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Validation
    "BLANK",
    "MUST_HAVE_TRANSLATION",
    "DEFAULT_TRANSLATION_MESSAGE",
]

# ============================================================================
# COLUMN NAMING
# ============================================================================

# Physical columns are named "<field><COLUMN_SEPARATOR><suffix>".
COLUMN_SEPARATOR: str = "_"

# A suffix must be at least two word characters. Single-letter suffixes
# (e.g. "title_x") are never treated as translations of "title".
SUFFIX_PATTERN: str = r"\w{2,}"

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Default locale used by ContextLocaleProvider when none is given.
DEFAULT_LOCALE: str = "en"

# BCP-47 subtag separator (en-US) and its POSIX/database counterpart (en_us).
LANGUAGE_SEPARATOR: str = "-"
POSIX_SEPARATOR: str = "_"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances for introspection lookups.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# VALIDATION
# ============================================================================

# Error type reported to sinks: the record is "blank" for that field.
BLANK: str = "blank"

# Default message key attached to BLANK errors for translated fields.
MUST_HAVE_TRANSLATION: str = "must_have_translation"

# Human-readable text used when a failure carries no custom message.
DEFAULT_TRANSLATION_MESSAGE: str = "must have at least one translation"
