"""Error types and validation results for translatablecolumns.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    DeclarationError,
    TranslatableColumnsError,
    TranslationValidationError,
    UnknownFieldError,
)
from .validation import TranslationFailure, ValidationResult

__all__ = [
    "DeclarationError",
    "TranslatableColumnsError",
    "TranslationFailure",
    "TranslationValidationError",
    "UnknownFieldError",
    "ValidationResult",
]
