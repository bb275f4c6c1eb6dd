"""Validation result types for translation presence checks.

A TranslationFailure records that a logical field has no non-blank value in
any of its locale columns. Failures are collected into an immutable
ValidationResult; nothing here raises.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from translatablecolumns.constants import (
    DEFAULT_TRANSLATION_MESSAGE,
    MUST_HAVE_TRANSLATION,
)

__all__ = [
    "TranslationFailure",
    "ValidationResult",
]


@dataclass(frozen=True, slots=True)
class TranslationFailure:
    """A logical field with no translation in any locale column.

    Attributes:
        field: Logical field name (e.g., "title")
        kind: Error kind, always "must_have_translation"
        message: Custom message from the declaration, or None
    """

    field: str
    kind: str = MUST_HAVE_TRANSLATION
    message: str | None = None

    @property
    def default(self) -> str:
        """Message key handed to error sinks as the ``default`` option."""
        return self.message or MUST_HAVE_TRANSLATION

    def format(self) -> str:
        """Format failure as human-readable string.

        Example:
            >>> TranslationFailure("title").format()
            '[must_have_translation] title: must have at least one translation'
        """
        return f"[{self.kind}] {self.field}: {self.message or DEFAULT_TRANSLATION_MESSAGE}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable result of running translation validators on a record.

    Attributes:
        errors: One failure per field lacking a translation, in check order

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True

        >>> result = ValidationResult.invalid((TranslationFailure("title"),))
        >>> result.error_count
        1
        >>> [f.field for f in result.errors_on("title")]
        ['title']
    """

    errors: tuple[TranslationFailure, ...]

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no failures)."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Get number of failures."""
        return len(self.errors)

    def errors_on(self, field: str) -> tuple[TranslationFailure, ...]:
        """Return the failures reported against ``field``."""
        return tuple(failure for failure in self.errors if failure.field == field)

    @staticmethod
    def valid() -> ValidationResult:
        """Create a result with no failures."""
        return ValidationResult(errors=())

    @staticmethod
    def invalid(errors: tuple[TranslationFailure, ...]) -> ValidationResult:
        """Create a result holding ``errors``."""
        return ValidationResult(errors=errors)
