"""Translation presence validation.

A translated field is valid when at least one of its locale columns holds a
non-blank value, whichever locale is current. Validators are declared per
record type and run for a lifecycle event; every failing field is
reported (no short-circuit on the first failure).

Failures are returned as a ValidationResult and, when the host supplies an
ErrorSink, reported to it in the host's error vocabulary::

    sink.add_error(record, "title", "blank", {"default": "must_have_translation"})

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from translatablecolumns.constants import BLANK
from translatablecolumns.diagnostics import (
    DeclarationError,
    TranslationFailure,
    ValidationResult,
)
from translatablecolumns.enums import ValidationEvent
from translatablecolumns.field_names import validate_field_names
from translatablecolumns.registry import find_registry, get_registry
from translatablecolumns.resolver import is_blank

if TYPE_CHECKING:
    from translatablecolumns.resolver import ColumnResolver
    from translatablecolumns.types import FieldName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Host seam
    "ErrorSink",
    # Validator
    "TranslationValidator",
    "declare_translation_required",
    "validate_translations",
]

logger = logging.getLogger(__name__)


class ErrorSink(Protocol):
    """Protocol for the host's validation-failure collector."""

    def add_error(
        self, record: object, field: FieldName, kind: str, options: Mapping[str, Any]
    ) -> None:
        """Record a failure of ``kind`` against ``field`` on ``record``."""
        ...


@dataclass(frozen=True, slots=True)
class TranslationValidator:
    """Checks that each field has at least one non-blank translation.

    Attributes:
        fields: Logical field names to check
        on: Lifecycle event the validator runs on (default: SAVE)
        message: Custom message; failures default to "must_have_translation"
    """

    fields: tuple[FieldName, ...]
    on: ValidationEvent = ValidationEvent.SAVE
    message: str | None = None

    def validate(self, record: object, resolver: ColumnResolver) -> tuple[TranslationFailure, ...]:
        """Return one failure per field of ``record`` lacking any translation.

        Args:
            record: Record instance
            resolver: Resolver of the record's type

        Returns:
            Failures in field declaration order (empty when valid)
        """
        return tuple(
            TranslationFailure(field, message=self.message)
            for field in self.fields
            if is_blank(resolver.find_translated_value(record, field))
        )


def _coerce_event(on: ValidationEvent | str) -> ValidationEvent:
    try:
        return ValidationEvent(on)
    except ValueError:
        valid = ", ".join(event.value for event in ValidationEvent)
        msg = f"Unknown validation event {on!r}; expected one of: {valid}"
        raise DeclarationError(msg) from None


def declare_translation_required(
    record_type: type,
    *fields: FieldName,
    on: ValidationEvent | str = ValidationEvent.SAVE,
    message: str | None = None,
) -> TranslationValidator:
    """Require at least one translation for each of ``fields``.

    Args:
        record_type: Record class
        *fields: Logical field names
        on: Lifecycle event ("save", "create" or "update"; default: "save")
        message: Custom failure message

    Returns:
        The registered validator

    Raises:
        DeclarationError: If no fields are given, a field name is invalid,
            or ``on`` is not a known event

    Example:
        >>> validator = declare_translation_required(Topic, "title", "body")
        >>> validator.fields, validator.on
        (('title', 'body'), <ValidationEvent.SAVE: 'save'>)
    """
    names = validate_field_names(fields)
    validator = TranslationValidator(names, _coerce_event(on), message)
    get_registry(record_type).add_validator(validator)
    logger.info(
        "Declared required translations %s on %s (on=%s)",
        ", ".join(names),
        record_type.__qualname__,
        validator.on,
    )
    return validator


def validate_translations(
    record: object,
    event: ValidationEvent | str = ValidationEvent.SAVE,
    *,
    sink: ErrorSink | None = None,
) -> ValidationResult:
    """Run the translation validators of ``record``'s type for ``event``.

    Validators declared ``on="save"`` run for every event; requesting
    ``"save"`` runs every validator. Records whose type declared nothing
    are valid.

    Args:
        record: Record instance
        event: Lifecycle event being validated (default: SAVE)
        sink: Optional host error collector; each failure is reported as
            ``add_error(record, field, "blank", {"default": <message>})``

    Returns:
        ValidationResult with every failure

    Raises:
        DeclarationError: If ``event`` is not a known event
    """
    requested = _coerce_event(event)
    registry = find_registry(type(record))
    validators = registry.validators if registry is not None else ()
    if registry is None or not validators:
        return ValidationResult.valid()

    resolver = registry.resolver
    failures: list[TranslationFailure] = []
    for validator in validators:
        if validator.on.applies_to(requested):
            failures.extend(validator.validate(record, resolver))

    if sink is not None:
        for failure in failures:
            sink.add_error(record, failure.field, BLANK, {"default": failure.default})

    logger.debug(
        "Validated translations of %s on %s: %d failure(s)",
        type(record).__qualname__,
        requested,
        len(failures),
    )
    if not failures:
        return ValidationResult.valid()
    return ValidationResult.invalid(tuple(failures))
