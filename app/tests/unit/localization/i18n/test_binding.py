"""Tests for localization.i18n.binding module."""

import pytest

from localization.i18n import I18n
from localization.i18n.binding import (
    TranslationRegistry,
    resolve_translations,
    translatable,
    translate_target,
)
from localization.i18n.models import TranslationKeyBinding
from tests.factories.i18n import make_i18n, make_translations

pytestmark = pytest.mark.unit


class TestTranslationRegistry:
    """Tests for TranslationRegistry."""

    def test_bind_and_lookup(self, registry):
        class Labels:
            pass

        binding = registry.bind(Labels, "title", "user.name")
        assert binding == TranslationKeyBinding(owner=Labels, member="title", key="user.name")
        assert registry.lookup(Labels, "title") == "user.name"
        assert registry.lookup(Labels, "other") is None

    def test_rebind_replaces_key(self, registry):
        class Labels:
            pass

        registry.bind(Labels, "title", "user.name")
        registry.bind(Labels, "title", "user.email")
        assert registry.lookup(Labels, "title") == "user.email"

    def test_lookup_walks_base_classes(self, registry):
        """lookup() finds bindings declared on a base class."""

        class Base:
            pass

        class Child(Base):
            pass

        registry.bind(Base, "title", "user.name")
        assert registry.lookup(Child, "title") == "user.name"

    def test_bindings_for_subclass_wins(self, registry):
        """bindings_for() lets a subclass override an inherited binding."""

        class Base:
            pass

        class Child(Base):
            pass

        registry.bind(Base, "title", "user.name")
        registry.bind(Base, "email", "user.email")
        registry.bind(Child, "title", "greeting")
        assert registry.bindings_for(Child) == {"title": "greeting", "email": "user.email"}
        assert registry.bindings_for(Base) == {"title": "user.name", "email": "user.email"}

    def test_bind_rejects_instances(self, registry):
        with pytest.raises(TypeError):
            registry.bind(object(), "title", "user.name")

    @pytest.mark.parametrize("member,key", [("", "user.name"), ("title", " ")])
    def test_bind_rejects_blank_names(self, registry, member, key):
        class Labels:
            pass

        with pytest.raises(ValueError):
            registry.bind(Labels, member, key)

    def test_clear(self, registry):
        class Labels:
            pass

        registry.bind(Labels, "title", "user.name")
        registry.clear()
        assert registry.lookup(Labels, "title") is None


class TestTranslatable:
    """Tests for the translatable class decorator."""

    def test_records_bindings(self, registry):
        @translatable(registry=registry, title="user.name", email="user.email")
        class Labels:
            pass

        assert registry.bindings_for(Labels) == {"title": "user.name", "email": "user.email"}

    def test_returns_class_unchanged(self, registry):
        class Labels:
            pass

        assert translatable(registry=registry, title="user.name")(Labels) is Labels


class TestResolveTranslations:
    """Tests for resolve_translations()."""

    @pytest.fixture
    def labels_cls(self, registry):
        @translatable(registry=registry, title="user.name", nested="nested.example")
        class Labels:
            def __init__(self):
                self.title = ""
                self.nested = ""
                self.untouched = "keep"

        return Labels

    def test_overwrites_bound_members(self, i18n, registry, labels_cls):
        labels = labels_cls()
        resolved = resolve_translations(labels, i18n.translate, registry)
        assert sorted(resolved) == ["nested", "title"]
        assert labels.title == "Name"
        assert labels.nested == "Nested Example"
        assert labels.untouched == "keep"

    def test_passes_options(self, i18n, registry, labels_cls):
        labels = labels_cls()
        resolve_translations(labels, i18n.translate, registry, {"locale": "fr"})
        assert labels.title == "Nom"

    def test_ignores_members_not_on_instance(self, i18n, registry):
        """resolve_translations() only touches members the instance has."""

        @translatable(registry=registry, title="user.name", absent="user.email")
        class Labels:
            def __init__(self):
                self.title = ""

        labels = Labels()
        assert resolve_translations(labels, i18n.translate, registry) == ["title"]
        assert not hasattr(labels, "absent")

    def test_slots(self, i18n, registry):
        @translatable(registry=registry, title="user.name")
        class Labels:
            __slots__ = ("title",)

            def __init__(self):
                self.title = ""

        labels = Labels()
        assert resolve_translations(labels, i18n.translate, registry) == ["title"]
        assert labels.title == "Name"

    def test_failing_member_does_not_abort_others(self, registry, labels_cls):
        """A member that fails to resolve is skipped; the rest still resolve."""

        def translate(key, options=None):
            if key == "user.name":
                raise KeyError(key)
            return f"<{key}>"

        labels = labels_cls()
        assert resolve_translations(labels, translate, registry) == ["nested"]
        assert labels.title == ""
        assert labels.nested == "<nested.example>"

    def test_read_only_member(self, i18n, registry):
        """A member that cannot be written is skipped."""

        @translatable(registry=registry, title="user.name", label="user.email")
        class Labels:
            def __init__(self):
                self.__dict__.update(title="fixed", label="")

            def __setattr__(self, name, value):
                if name == "title":
                    raise AttributeError("title is read-only")
                super().__setattr__(name, value)

        labels = Labels()
        assert resolve_translations(labels, i18n.translate, registry) == ["label"]
        assert labels.title == "fixed"
        assert labels.label == "Email Address"

    def test_rejecting_member_does_not_abort_others(self, i18n, registry):
        """A member whose assignment raises any error is skipped."""

        @translatable(registry=registry, first="user.name", second="user.email")
        class Labels:
            def __init__(self):
                self.__dict__.update(first="", second="")

            def __setattr__(self, name, value):
                if name == "first":
                    raise ValueError("rejected")
                super().__setattr__(name, value)

        labels = Labels()
        assert resolve_translations(labels, i18n.translate, registry) == ["second"]
        assert labels.first == ""
        assert labels.second == "Email Address"

    def test_none_target(self, i18n, registry):
        assert resolve_translations(None, i18n.translate, registry) == []

    def test_engine_with_supplied_registry(self, registry, labels_cls):
        """An engine built with a registry resolves the bindings declared on it."""
        engine = make_i18n(translations=make_translations(), registry=registry)
        assert engine.registry is registry
        labels = labels_cls()
        assert sorted(engine.resolve_translations(labels)) == ["nested", "title"]
        assert labels.title == "Name"

    def test_engine_uses_its_registry(self, i18n, labels_cls):
        """I18n.resolve_translations() reads bindings from the engine's registry."""
        i18n.registry.bind(labels_cls, "title", "user.email")
        labels = labels_cls()
        assert i18n.resolve_translations(labels) == ["title"]
        assert labels.title == "Email Address"


class TestTranslateTarget:
    """Tests for translate_target()."""

    def test_returns_new_mapping(self, i18n, registry):
        @translatable(registry=registry, title="user.name", nested="nested.example")
        class Labels:
            title = "unchanged"

        result = translate_target(Labels, i18n.translate, registry)
        assert result == {"title": "Name", "nested": "Nested Example"}
        assert Labels.title == "unchanged"

    def test_not_a_class(self, i18n, registry):
        assert translate_target(object(), i18n.translate, registry) == {}

    def test_failing_member_is_left_out(self, registry):
        @translatable(registry=registry, title="user.name", nested="nested.example")
        class Labels:
            pass

        def translate(key, options=None):
            if key == "user.name":
                raise KeyError(key)
            return key

        assert translate_target(Labels, translate, registry) == {
            "nested": "nested.example"
        }

    def test_engine_static_method(self, i18n):
        class Labels:
            pass

        i18n.registry.bind(Labels, "title", "user.name")
        assert I18n.translate_target(Labels, i18n, {"locale": "fr"}) == {"title": "Nom"}
