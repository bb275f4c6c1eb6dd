"""Field name validation shared by every declaration entry point.

declare_translatable() and declare_translation_required() accept the same
variadic field names and reject the same inputs, so the check lives here
once.

Thread Safety:
    Pure function with no shared state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from translatablecolumns.diagnostics import DeclarationError

if TYPE_CHECKING:
    from translatablecolumns.types import FieldName

__all__ = ["validate_field_names"]


def validate_field_names(fields: tuple[object, ...]) -> tuple[FieldName, ...]:
    """Check declared field names and return them as a tuple of str.

    Args:
        fields: Positional field arguments of a declaration

    Returns:
        The field names, in argument order

    Raises:
        DeclarationError: If ``fields`` is empty or a name is not a
            non-empty string

    Example:
        >>> validate_field_names(("title", "body"))
        ('title', 'body')
    """
    if not fields:
        msg = "At least one field name is required"
        raise DeclarationError(msg)
    names: list[FieldName] = []
    for name in fields:
        if not isinstance(name, str) or not name:
            msg = f"Field names must be non-empty strings, got {name!r}"
            raise DeclarationError(msg)
        names.append(name)
    return tuple(names)
