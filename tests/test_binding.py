"""Tests for translated accessors (declare_translatable and friends).

Python 3.13+.
"""

from __future__ import annotations

from unittest.mock import PropertyMock, patch

import pytest

from tests.helpers.records import Record, make_record_type
from translatablecolumns import (
    AttributeSchema,
    ContextLocaleProvider,
    configure,
    DeclarationError,
    GetterMode,
    StaticLocaleProvider,
    TranslatableConfig,
    TranslatedAttribute,
    UnknownFieldError,
    declare_translatable,
    find_translated_value,
    get_config,
    get_registry,
    read_translated,
    translatable,
    write_translated,
)


class TestDeclaration:
    """Binding table and descriptor installation."""

    def test_defines_accessors(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """Each declared field becomes a descriptor on the class."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title", "body")
        assert isinstance(topic_type.title, TranslatedAttribute)
        assert isinstance(topic_type.body, TranslatedAttribute)
        assert get_registry(topic_type).bindings.fields == ("title", "body")

    def test_with_defaults_by_default(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """config.use_default=True yields WITH_DEFAULTS getters."""
        topic_type = make_record_type(config=config, locales=locales)
        (binding,) = declare_translatable(topic_type, "title")
        assert binding.mode is GetterMode.WITH_DEFAULTS
        assert binding.use_default is True

    def test_explicit_use_default_false(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """use_default=False yields a DIRECT getter."""
        topic_type = make_record_type(config=config, locales=locales)
        (binding,) = declare_translatable(topic_type, "title", use_default=False)
        assert binding.mode is GetterMode.DIRECT

    def test_config_use_default_false(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """Without an explicit option the config decides."""
        config.use_default = False
        topic_type = make_record_type(config=config, locales=locales)
        (binding,) = declare_translatable(topic_type, "title")
        assert binding.mode is GetterMode.DIRECT

    def test_explicit_option_beats_config(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """use_default=True wins over config.use_default=False."""
        config.use_default = False
        topic_type = make_record_type(config=config, locales=locales)
        (binding,) = declare_translatable(topic_type, "title", use_default=True)
        assert binding.mode is GetterMode.WITH_DEFAULTS

    def test_mode_captured_at_declaration(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """Changing config.use_default later does not change declared fields."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        config.use_default = False
        assert get_registry(topic_type).bindings["title"].mode is GetterMode.WITH_DEFAULTS

    def test_redeclare_replaces_binding(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """Re-declaring a field switches its mode."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        declare_translatable(topic_type, "title", use_default=False)
        assert get_registry(topic_type).bindings["title"].mode is GetterMode.DIRECT
        assert len(get_registry(topic_type).bindings) == 1

    def test_shared_config_used_by_default(self) -> None:
        """Unconfigured types use the shared config at declaration time."""
        get_config().use_default = False
        topic_type = make_record_type()
        (binding,) = declare_translatable(topic_type, "title")
        assert binding.mode is GetterMode.DIRECT

    def test_no_fields_rejected(self, config: TranslatableConfig) -> None:
        """At least one field is required."""
        topic_type = make_record_type(config=config)
        with pytest.raises(DeclarationError, match="At least one field"):
            declare_translatable(topic_type)

    @pytest.mark.parametrize("name", ["", 3, None])
    def test_invalid_field_names_rejected(self, name: object) -> None:
        """Field names must be non-empty strings."""
        topic_type = make_record_type()
        with pytest.raises(DeclarationError, match="non-empty strings"):
            declare_translatable(topic_type, name)  # type: ignore[arg-type]

    def test_declaration_error_is_value_error(self) -> None:
        """DeclarationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            declare_translatable(make_record_type())

    def test_class_decorator(self, locales: ContextLocaleProvider) -> None:
        """@translatable configures and declares in one step."""

        @translatable("title", use_default=False, locales=locales)
        class Topic(Record):
            column_names = ("title_en", "title_nl")

        topic = Topic(title_nl="Hallo")
        assert topic.title == "Hallo"
        assert get_registry(Topic).bindings["title"].mode is GetterMode.DIRECT

    def test_custom_schema_attribute(self, locales: ContextLocaleProvider) -> None:
        """AttributeSchema can read a differently named class attribute."""

        @translatable("title", schema=AttributeSchema("columns"), locales=locales)
        class Topic:
            columns = ("title_en", "title_nl")

        topic = Topic()
        topic.title = "Hallo"
        assert topic.title_nl == "Hallo"  # type: ignore[attr-defined]


class TestSetter:
    """The setter targets the current locale's resolved column."""

    def test_sets_current_locale_column(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """In nl-NL, title= writes title_nl."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        topic = topic_type()
        topic.title = "foo"
        assert topic.title_nl == "foo"
        assert topic.title_en is None

    def test_sets_default_column_for_unknown_locale(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """In jp-JP, title= writes the en-US column."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        topic = topic_type()
        with locales.use_locale("jp-JP"):
            topic.title = "foo"
        assert topic.title_en == "foo"

    def test_setter_same_in_both_modes(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """DIRECT fields write the same column."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title", use_default=False)
        topic = topic_type()
        topic.title = "foo"
        assert topic.title_nl == "foo"

    def test_constructor_keyword(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """Assignment through __init__ goes through the descriptor."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        assert topic_type(title="foo").title_nl == "foo"


class TestDirectGetter:
    """DIRECT getters never look beyond the resolved column."""

    def test_reads_current_locale_column(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """In nl-NL, title reads title_nl."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title", use_default=False)
        assert topic_type(title_nl="foo").title == "foo"

    def test_does_not_scan_siblings(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """An empty current column is returned as is."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title", use_default=False)
        topic = topic_type(title_nl="", title_fr="Bonjour", title_en="Hello")
        assert topic.title == ""

    def test_unknown_locale_reads_default_column(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """In jp-JP, title reads title_en."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title", use_default=False)
        topic = topic_type(title_en="foo")
        with locales.use_locale("jp-JP"):
            assert topic.title == "foo"

    def test_reads_exactly_one_column(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """Only the resolved column attribute is touched."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title", use_default=False)
        topic = topic_type()
        with patch.object(
            topic_type, "title_fr", new_callable=PropertyMock, create=True
        ) as title_fr:
            assert topic.title is None
        title_fr.assert_not_called()


class TestWithDefaultsGetter:
    """WITH_DEFAULTS getters walk three tiers."""

    def test_tier_one_current_column(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """A value in the current column wins."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        assert topic_type(title_nl="Hallo", title_en="Hello").title == "Hallo"

    def test_tier_two_default_column(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """A blank current column falls back to the default locale's column."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        topic = topic_type(title_nl="", title_de="Hallo", title_en="Hello")
        assert topic.title == "Hello"

    def test_tier_three_any_translation(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """With current and default blank, any translation is returned."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        assert topic_type(title_fr="foo").title == "foo"

    @pytest.mark.parametrize("locale", ["nl-NL", "en-US", "de-DE", "fr-FR", "jp-JP"])
    def test_only_french_found_from_any_locale(
        self, config: TranslatableConfig, locales: ContextLocaleProvider, locale: str
    ) -> None:
        """Setting only title_fr is visible from every locale."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        topic = topic_type(title_fr="foo")
        with locales.use_locale(locale):
            assert topic.title == "foo"

    def test_unknown_locale_reads_default_column(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """In jp-JP, title reads title_en first."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        topic = topic_type(title_en="foo", title_de="bar")
        with locales.use_locale("jp-JP"):
            assert topic.title == "foo"

    def test_none_when_no_translation(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """All tiers blank yields None."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        assert topic_type().title is None

    def test_default_column_missing_from_schema(self, config: TranslatableConfig) -> None:
        """A default locale without a column reads as blank, not an error."""
        topic_type = make_record_type(
            ("title_nl", "title_fr"),
            config=config,
            locales=StaticLocaleProvider("nl-NL", "en-US"),
        )
        declare_translatable(topic_type, "title")
        assert topic_type(title_fr="Bonjour").title == "Bonjour"

    def test_full_locale_mode(self, locales: ContextLocaleProvider) -> None:
        """Full-locale columns are used when full_locale is on."""
        config = TranslatableConfig(full_locale=True)
        topic_type = make_record_type(
            ("title_nl_nl", "title_nl_be", "title_en_us"), config=config, locales=locales
        )
        declare_translatable(topic_type, "title")
        topic = topic_type(title_nl_be="Hallo België", title_en_us="Hello")
        assert topic.title == "Hello"
        with locales.use_locale("nl-BE"):
            assert topic.title == "Hallo België"


class TestFunctionalAccess:
    """read_translated / write_translated / find_translated_value."""

    def test_read_write(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """Functional access mirrors the descriptor."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        topic = topic_type()
        write_translated(topic, "title", "foo")
        assert topic.title_nl == "foo"
        assert read_translated(topic, "title") == "foo"

    def test_unknown_field(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """Undeclared fields raise UnknownFieldError."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        with pytest.raises(UnknownFieldError, match="'body' is not a translatable field"):
            read_translated(topic_type(), "body")

    def test_unknown_field_on_unregistered_type(self) -> None:
        """Types without any declaration raise UnknownFieldError."""

        class Plain:
            pass

        with pytest.raises(KeyError):
            write_translated(Plain(), "title", "foo")

    def test_find_translated_value(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """find_translated_value works for undeclared fields with columns."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        assert find_translated_value(topic_type(body_de="Text"), "body") == "Text"


class TestInheritance:
    """Registries follow the MRO."""

    def test_subclass_inherits_accessors(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """A subclass reads through its parent's declarations."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        sticky_type = type("StickyTopic", (topic_type,), {})
        sticky = sticky_type(title_nl="Hallo")
        assert sticky.title == "Hallo"

    def test_subclass_declaration_stays_on_subclass(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """Declaring on a subclass leaves the parent untouched."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        sticky_type = type("StickyTopic", (topic_type,), {})
        declare_translatable(sticky_type, "title", use_default=False)

        assert get_registry(sticky_type) is not get_registry(topic_type)
        assert get_registry(sticky_type).bindings["title"].mode is GetterMode.DIRECT
        assert get_registry(topic_type).bindings["title"].mode is GetterMode.WITH_DEFAULTS
        assert get_registry(sticky_type).config is config

    def test_parent_declaration_after_subclass_declared(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """Fields declared on the parent later are readable on the subclass."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        sticky_type = type("StickyTopic", (topic_type,), {})
        declare_translatable(sticky_type, "title", use_default=False)

        declare_translatable(topic_type, "body")

        sticky = sticky_type(body_de="Text")
        assert sticky.body == "Text"
        assert get_registry(sticky_type).bindings.fields == ("title", "body")
        assert get_registry(sticky_type).bindings["title"].mode is GetterMode.DIRECT
        assert get_registry(sticky_type).declared_bindings.fields == ("title",)

    def test_parent_configure_after_subclass_declared(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """configure() on the parent reaches subclasses with existing registries."""
        topic_type = make_record_type(config=config, locales=locales)
        declare_translatable(topic_type, "title")
        sticky_type = type("StickyTopic", (topic_type,), {})
        declare_translatable(sticky_type, "title")
        sticky = sticky_type(title_nl="Hallo", title_en="Hello")
        assert sticky.title == "Hallo"

        other_locales = StaticLocaleProvider("en-GB", "en-GB")
        configure(topic_type, locales=other_locales)

        assert get_registry(sticky_type).locales is other_locales
        assert sticky.title == "Hello"

    def test_subclass_own_configuration_wins(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """A collaborator configured on the subclass is not replaced by the parent's."""
        topic_type = make_record_type(config=config, locales=locales)
        sticky_type = type("StickyTopic", (topic_type,), {})
        sticky_config = TranslatableConfig(full_locale=True)
        configure(sticky_type, config=sticky_config)

        configure(topic_type, config=TranslatableConfig())

        assert get_registry(sticky_type).config is sticky_config

    def test_undeclared_subclass_uses_own_columns(
        self, config: TranslatableConfig, locales: ContextLocaleProvider
    ) -> None:
        """A subclass with extra columns resolves against its own schema."""
        topic_type = make_record_type(("title_en",), config=config, locales=locales)
        declare_translatable(topic_type, "title")
        dutch_type = type("DutchTopic", (topic_type,), {"column_names": ("title_en", "title_nl")})

        dutch = dutch_type()
        dutch.title = "Hallo"

        assert dutch.title_nl == "Hallo"
        assert get_registry(topic_type).catalog.columns == ("title_en",)
