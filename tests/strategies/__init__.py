"""Hypothesis strategies for translatablecolumns property-based testing.

Strategies are organized by domain:

- locales: BCP-47-shaped locale codes and language subtags
- columns: Field names and physical column schemas

Usage:
    from tests.strategies import locale_codes, field_names
    from tests.strategies.columns import column_schemas

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - locale_codes, column_schemas
"""

from .columns import column_schemas, field_names
from .locales import language_subtags, locale_codes, region_subtags

__all__ = [
    "column_schemas",
    "field_names",
    "language_subtags",
    "locale_codes",
    "region_subtags",
]
