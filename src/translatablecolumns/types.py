"""Type aliases for the translatable columns domain.

Provides semantic type aliases used throughout the package and by user
code when annotating declarations and resolver call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "ColumnName",
    "FieldName",
    "LocaleCode",
]

FieldName: TypeAlias = str
"""Logical translatable attribute name (e.g., 'title')."""

ColumnName: TypeAlias = str
"""Physical per-locale column name (e.g., 'title_nl', 'title_nl_be')."""

LocaleCode: TypeAlias = str
"""BCP-47 locale code (e.g., 'nl', 'nl-BE', 'zh-Hans-CN')."""
