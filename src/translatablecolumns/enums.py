"""Enumerations for translatablecolumns type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so declarations accept either
the member or its plain string value.

Python 3.13+.
"""

from enum import StrEnum


class GetterMode(StrEnum):
    """How a translated getter reads its value.

    StrEnum provides automatic string conversion: str(GetterMode.DIRECT) == "direct"
    """

    DIRECT = "direct"
    """Read only the resolved column for the current locale."""

    WITH_DEFAULTS = "with_defaults"
    """Fall back to the default-locale column, then to any translation."""

    @classmethod
    def from_use_default(cls, use_default: bool) -> "GetterMode":
        """Map the boolean ``use_default`` option to a getter mode."""
        return cls.WITH_DEFAULTS if use_default else cls.DIRECT


class ValidationEvent(StrEnum):
    """Lifecycle event a translation validator runs on.

    StrEnum provides automatic string conversion: str(ValidationEvent.SAVE) == "save"
    """

    SAVE = "save"
    """Every persist operation (create and update)."""

    CREATE = "create"
    """First persist of a new record."""

    UPDATE = "update"
    """Persist of an existing record."""

    def applies_to(self, event: "ValidationEvent") -> bool:
        """Check whether a validator declared for this event runs on ``event``.

        A validator declared ``on=SAVE`` runs on every event, and a request
        for ``SAVE`` runs every validator.
        """
        return ValidationEvent.SAVE in (self, event) or self is event


__all__ = [
    "GetterMode",
    "ValidationEvent",
]
