"""Quickstart example for translatablecolumns.

This example demonstrates translated attributes on a plain Python record
whose storage has one column per locale (title_en, title_nl, ...).

Note: Records here are plain objects. See locale_fallback.py for a
SQLAlchemy model.
"""

from translatablecolumns import (
    ContextLocaleProvider,
    TranslatableConfig,
    configure,
    declare_translatable,
    declare_translation_required,
    validate_translations,
)
from translatablecolumns.introspection import missing_translations, translation_columns


class Topic:
    column_names = (
        "id",
        "title_en", "title_nl", "title_de", "title_fr",
        "body_en", "body_nl", "body_de", "body_fr",
    )

    def __init__(self, **values):
        for column in self.column_names:
            setattr(self, column, None)
        for name, value in values.items():
            setattr(self, name, value)


locales = ContextLocaleProvider(default_locale="en-US")
configure(Topic, locales=locales)
declare_translatable(Topic, "title", "body")
declare_translation_required(Topic, "title")

# Example 1: Writing in the current locale
print("=" * 50)
print("Example 1: Writing in the current locale")
print("=" * 50)

topic = Topic()
with locales.use_locale("nl-NL"):
    topic.title = "Hallo wereld"
print(f"title_nl = {topic.title_nl!r}")
# Output: title_nl = 'Hallo wereld'

with locales.use_locale("jp-JP"):
    topic.title = "Hello world"
print(f"title_en = {topic.title_en!r}")
# Output: title_en = 'Hello world' (no title_jp column, default locale used)

# Example 2: Reading with defaults
print("\n" + "=" * 50)
print("Example 2: Reading with defaults")
print("=" * 50)

for code in ("nl-NL", "de-DE", "fr-FR"):
    with locales.use_locale(code):
        print(f"{code}: {topic.title}")
# Output:
# nl-NL: Hallo wereld
# de-DE: Hello world
# fr-FR: Hello world

# Example 3: Reading without defaults
print("\n" + "=" * 50)
print("Example 3: Reading without defaults")
print("=" * 50)

declare_translatable(Topic, "body", use_default=False)
topic.body_en = "Some text"
with locales.use_locale("nl-NL"):
    print(f"body in nl-NL: {topic.body!r}")
# Output: body in nl-NL: None

# Example 4: Full locale columns
print("\n" + "=" * 50)
print("Example 4: Full locale columns")
print("=" * 50)


class Product:
    column_names = ("name_nl_nl", "name_nl_be", "name_en_us")


configure(Product, config=TranslatableConfig(full_locale=True), locales=locales)
declare_translatable(Product, "name")

product = Product()
with locales.use_locale("nl-BE"):
    product.name = "Fiets"
print(f"name_nl_be = {product.name_nl_be!r}")
# Output: name_nl_be = 'Fiets'

# Example 5: Validation and introspection
print("\n" + "=" * 50)
print("Example 5: Validation and introspection")
print("=" * 50)

result = validate_translations(Topic())
for failure in result.errors:
    print(failure.format())
# Output: [must_have_translation] title: must have at least one translation

for info in translation_columns(Topic, "title"):
    print(f"{info.column}: {info.display_name}")
# Output:
# title_en: English
# title_nl: Nederlands
# title_de: Deutsch
# title_fr: français

print(f"missing: {missing_translations(topic, 'title')}")
# Output: missing: ('de', 'fr')

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
