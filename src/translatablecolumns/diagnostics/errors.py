"""Exception hierarchy for translatablecolumns.

Resolution itself never raises: missing columns degrade to the default
locale, missing values degrade to None. Exceptions are reserved for
programming errors at declaration time and for host integrations that
must abort persistence when translation validation fails.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DeclarationError",
    "TranslatableColumnsError",
    "TranslationValidationError",
    "UnknownFieldError",
]


class TranslatableColumnsError(Exception):
    """Base exception for all translatablecolumns errors."""


class DeclarationError(TranslatableColumnsError, ValueError):
    """Invalid translatable declaration or configuration.

    Examples:
    - declare_translatable() called without field names
    - Empty or non-string field name
    - Unknown validation event
    """


class UnknownFieldError(TranslatableColumnsError, KeyError):
    """Field accessed through the functional API was never declared.

    Attributes:
        field: The undeclared field name
        record_type: The record type that was searched
    """

    def __init__(self, field: str, record_type: type) -> None:
        """Initialize UnknownFieldError.

        Args:
            field: The undeclared field name
            record_type: The record type that was searched
        """
        self.field = field
        self.record_type = record_type
        super().__init__(f"'{field}' is not a translatable field of {record_type.__qualname__}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class TranslationValidationError(TranslatableColumnsError):
    """Translation validation failed where the host must abort.

    Raised by integrations (e.g. SQLAlchemy flush hooks), never by
    validate_translations() itself.

    Attributes:
        record: The record that failed validation
        result: ValidationResult holding every failure
    """

    def __init__(self, record: object, result: ValidationResult) -> None:
        """Initialize TranslationValidationError.

        Args:
            record: The record that failed validation
            result: ValidationResult holding every failure
        """
        self.record = record
        self.result = result
        fields = ", ".join(failure.field for failure in result.errors)
        super().__init__(
            f"{type(record).__qualname__} must have a translation for: {fields}"
        )
