"""SQLAlchemy ORM integration.

Provides a schema accessor over mapped column attributes and flush-time
validation hooks for declarative models::

    class Base(DeclarativeBase):
        pass

    class Topic(Base):
        __tablename__ = "topics"
        id: Mapped[int] = mapped_column(primary_key=True)
        title_en: Mapped[str | None] = mapped_column(String(255))
        title_nl: Mapped[str | None] = mapped_column(String(255))

    configure(Topic, schema=SQLAlchemySchema())
    declare_translatable(Topic, "title")
    declare_translation_required(Topic, "title")
    enable_translation_validation(Topic)

Python 3.13+. Requires SQLAlchemy 2.x.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlalchemy import event
from sqlalchemy import inspect as sa_inspect

from translatablecolumns.diagnostics import TranslationValidationError
from translatablecolumns.enums import ValidationEvent
from translatablecolumns.validation import validate_translations

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection
    from sqlalchemy.orm import Mapper

    from translatablecolumns.types import ColumnName

__all__ = ["SQLAlchemySchema", "enable_translation_validation"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SQLAlchemySchema:
    """Schema accessor listing a mapped class's column attribute keys.

    Keys are attribute names (what getattr/setattr use), in mapper order.
    """

    def column_names(self, record_type: type) -> Sequence[ColumnName]:
        """Return the column attribute keys of mapped ``record_type``.

        Raises:
            sqlalchemy.exc.NoInspectionAvailable: If the class is not mapped
        """
        mapper = sa_inspect(record_type)
        return tuple(prop.key for prop in mapper.column_attrs)


def _validate_on(requested: ValidationEvent) -> Any:
    def listener(mapper: Mapper[Any], connection: Connection, target: object) -> None:
        result = validate_translations(target, requested)
        if not result.is_valid:
            logger.debug(
                "Aborting %s of %s: %s",
                requested,
                type(target).__qualname__,
                [failure.field for failure in result.errors],
            )
            raise TranslationValidationError(target, result)

    return listener


def enable_translation_validation(record_type: type) -> None:
    """Run translation validators when ``record_type`` rows are flushed.

    ``before_insert`` validates with event CREATE and ``before_update`` with
    UPDATE; subclasses are covered (propagate=True). A failing record
    raises TranslationValidationError, aborting the flush.
    """
    event.listen(record_type, "before_insert", _validate_on(ValidationEvent.CREATE), propagate=True)
    event.listen(record_type, "before_update", _validate_on(ValidationEvent.UPDATE), propagate=True)
    logger.info("Enabled translation validation on %s", record_type.__qualname__)
