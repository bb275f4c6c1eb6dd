"""Translated columns on a SQLAlchemy model, with fallback observability.

Demonstrates a declarative model whose table stores one column per locale,
and what happens when a request arrives in a locale without its own column.

Scenarios covered:
1. Per-request locales with ContextLocaleProvider
2. Observing default-locale fallbacks with on_fallback
3. Aborting a flush when a record has no translation at all

Requires the sqlalchemy extra: pip install translatablecolumns[sqlalchemy]

Python 3.13+.
"""

from __future__ import annotations

import logging

from sqlalchemy import String, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from translatablecolumns import (
    ColumnFallbackInfo,
    ContextLocaleProvider,
    TranslationValidationError,
    configure,
    declare_translatable,
    declare_translation_required,
)
from translatablecolumns.integrations.sqlalchemy import (
    SQLAlchemySchema,
    enable_translation_validation,
)


class Base(DeclarativeBase):
    pass


class Article(Base):
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(primary_key=True)
    title_en: Mapped[str | None] = mapped_column(String(200))
    title_lv: Mapped[str | None] = mapped_column(String(200))
    title_lt: Mapped[str | None] = mapped_column(String(200))


locales = ContextLocaleProvider(default_locale="en-GB")
fallbacks: list[ColumnFallbackInfo] = []

configure(Article, schema=SQLAlchemySchema(), locales=locales, on_fallback=fallbacks.append)
declare_translatable(Article, "title")
declare_translation_required(Article, "title")
enable_translation_validation(Article)


def example_1_per_request_locale(session: Session) -> None:
    """Example 1: Writing and reading per request locale."""
    print("=" * 60)
    print("Example 1: Per-request locale (lv, lt, et)")
    print("=" * 60)

    article = Article()
    with locales.use_locale("lv-LV"):
        article.title = "Sveiki"
    with locales.use_locale("en-GB"):
        article.title = "Hello"
    session.add(article)
    session.commit()

    for code in ("lv-LV", "lt-LT", "et-EE"):
        with locales.use_locale(code):
            print(f"  {code}: {article.title}")
    # lt-LT has a column but no value: the default locale's value is shown.
    # et-EE has no column: the default locale's column is used.


def example_2_fallback_callback() -> None:
    """Example 2: Which locales had no column of their own."""
    print("\n" + "=" * 60)
    print("Example 2: Fallback callback")
    print("=" * 60)

    for info in fallbacks:
        print(
            f"  {info.field}: {info.requested_locale} -> {info.column} "
            f"(default {info.default_locale})"
        )


def example_3_validation(session: Session) -> None:
    """Example 3: Records without any translation are not flushed."""
    print("\n" + "=" * 60)
    print("Example 3: Flush-time validation")
    print("=" * 60)

    session.add(Article())
    try:
        session.commit()
    except TranslationValidationError as e:
        session.rollback()
        print(f"  rejected: {e}")

    count = len(session.scalars(select(Article)).all())
    print(f"  stored articles: {count}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        example_1_per_request_locale(session)
        example_2_fallback_callback()
        example_3_validation(session)

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples completed successfully!")
    print("=" * 60)
