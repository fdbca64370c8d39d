"""Tests for plugin registration, filtering and the built-in property plugins."""

import pytest

from prism.config import PrismConfig
from prism.errors import ConfigurationError, PluginDefinitionError
from prism.plugins import (
    DEFAULT_PLUGINS,
    GlobalPlugin,
    PluginRegistry,
    PropertyPlugin,
    as_fragments,
    build_plugin_registry,
    register_plugin,
    register_plugins,
)
from prism.plugins.properties import expand_spacing


def _noop(ctx):
    return None


# ---------------------------------------------------------------------------
# Definition forms
# ---------------------------------------------------------------------------


class TestRegisterPlugin:
    def test_named_pair_is_global(self):
        (plugin,) = register_plugin(("highlight", _noop))
        assert isinstance(plugin, GlobalPlugin)
        assert plugin.name == "highlight"
        assert plugin.requires == ("highlight",)
        assert plugin.constraint is None

    def test_named_triple_carries_constraint(self):
        (plugin,) = register_plugin(("highlight", _noop, bool))
        assert plugin.constraint is bool

    def test_named_quad_with_global_flag(self):
        (plugin,) = register_plugin(("map_props_to_component", _noop, {}, True))
        assert isinstance(plugin, GlobalPlugin)
        assert plugin.requires == ("map_props_to_component",)
        assert plugin.constraint == {}

    def test_named_quad_with_false_global_flag_raises(self):
        with pytest.raises(PluginDefinitionError, match="is_global flag is False"):
            register_plugin(("highlight", _noop, None, False))

    def test_property_mapping_expands_per_attribute(self):
        plugins = register_plugin((_noop, {"margin": int, "padding": int}))
        assert [p.name for p in plugins] == ["margin", "padding"]
        assert all(isinstance(p, PropertyPlugin) for p in plugins)
        assert plugins[0].constraint is int

    def test_instances_pass_through(self):
        plugin = PropertyPlugin(name="tint", fn=_noop)
        assert register_plugin(plugin) == [plugin]

    def test_non_sequence_raises(self):
        with pytest.raises(PluginDefinitionError, match="expected a sequence"):
            register_plugin(_noop)

    def test_malformed_tuple_raises(self):
        with pytest.raises(PluginDefinitionError):
            register_plugin(("only-a-name",))

    def test_empty_property_mapping_raises(self):
        with pytest.raises(PluginDefinitionError, match="no property names"):
            register_plugin((_noop, {}))

    def test_plugin_list_must_be_a_list(self):
        with pytest.raises(PluginDefinitionError, match="must be a list"):
            register_plugins("class_name")

    def test_definition_error_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            register_plugin(42)


# ---------------------------------------------------------------------------
# PluginRegistry
# ---------------------------------------------------------------------------


class TestPluginRegistry:
    def test_globals_keep_registration_order(self):
        registry = PluginRegistry([("first", _noop), ("second", _noop)])
        assert [p.name for p in registry.globals] == ["first", "second"]

    def test_duplicate_property_raises(self):
        registry = PluginRegistry([(_noop, {"margin": int})])
        with pytest.raises(PluginDefinitionError, match="duplicate property plugin 'margin'"):
            registry.register((_noop, {"margin": float}))

    def test_get_and_len(self):
        registry = PluginRegistry([("first", _noop), (_noop, {"margin": int})])
        assert registry.get("margin").name == "margin"
        assert registry.get("missing") is None
        assert len(registry) == 2
        assert [p.name for p in registry] == ["first", "margin"]

    def test_without_removes_by_name(self):
        registry = PluginRegistry([("first", _noop), (_noop, {"margin": int, "padding": int})])
        trimmed = registry.without(["first", "padding"])
        assert trimmed.globals == ()
        assert trimmed.property_names == ["margin"]
        assert len(registry) == 3

    def test_for_group_filters_to_declared_names(self):
        registry = PluginRegistry([(_noop, {"margin": int, "padding": int})])
        group = registry.for_group(["padding", "color", {"tint": "tint_color"}])
        assert [p.name for p in group.properties] == ["padding"]
        assert group.verbatim == ("color", "tint")
        assert group.renames == {"tint": "tint_color"}
        assert group.names == ("padding", "color", "tint")


# ---------------------------------------------------------------------------
# System plugins
# ---------------------------------------------------------------------------


class TestBuildPluginRegistry:
    def test_defaults(self):
        registry = build_plugin_registry(PrismConfig())
        assert [p.name for p in registry.globals] == ["map_props_to_component", "map_props_to_style"]
        assert registry.property_names == ["class_name"]

    def test_extended_and_font_properties(self):
        registry = build_plugin_registry(
            PrismConfig(extended_properties=True, font_properties=True)
        )
        for name in ("background", "margin", "padding", "radius", "flex", "size", "bold", "font"):
            assert registry.get(name) is not None

    def test_configured_plugins_replace_system(self):
        registry = build_plugin_registry(PrismConfig(plugins=[(_noop, {"tint": str})]))
        assert registry.property_names == ["tint"]
        assert registry.globals == ()

    def test_additional_and_disabled(self):
        config = PrismConfig(
            additional_plugins=[("highlight", _noop)],
            disabled_plugins=["class_name"],
        )
        registry = build_plugin_registry(config)
        assert "highlight" in [p.name for p in registry.globals]
        assert registry.get("class_name") is None

    def test_additional_duplicate_raises(self):
        with pytest.raises(PluginDefinitionError):
            build_plugin_registry(PrismConfig(additional_plugins=[(_noop, {"class_name": str})]))

    def test_default_list_is_not_mutated(self):
        before = list(DEFAULT_PLUGINS)
        build_plugin_registry(PrismConfig(extended_properties=True))
        assert DEFAULT_PLUGINS == before


# ---------------------------------------------------------------------------
# Plugin variants
# ---------------------------------------------------------------------------


class TestPluginVariants:
    def test_global_applies_to_declared(self):
        plugin = GlobalPlugin(name="router", fn=_noop, requires=("a", "b"))
        assert plugin.applies_to({"b"})
        assert not plugin.applies_to({"c"})
        assert GlobalPlugin(name="always", fn=_noop).applies_to(set())

    def test_property_accepts(self):
        plugin = PropertyPlugin(name="radius", fn=_noop, constraint=(int, float))
        assert plugin.accepts(2)
        assert plugin.accepts(None)
        assert not plugin.accepts("2")
        assert PropertyPlugin(name="any", fn=_noop).accepts(object())

    def test_as_fragments(self):
        assert as_fragments(None) == []
        assert as_fragments({}) == []
        assert as_fragments({"a": 1}) == [{"a": 1}]
        assert as_fragments([{"a": 1}, None, [{"b": 2}], "junk"]) == [{"a": 1}, {"b": 2}]


class TestExpandSpacing:
    def test_number(self):
        assert expand_spacing("margin", 4) == {"margin": 4}

    def test_single_item(self):
        assert expand_spacing("margin", [4]) == {"margin": 4}

    def test_two_items(self):
        assert expand_spacing("padding", [1, 2]) == {
            "padding_vertical": 1,
            "padding_horizontal": 2,
        }

    def test_three_items(self):
        assert expand_spacing("margin", (1, 2, 3)) == {
            "margin_top": 1,
            "margin_horizontal": 2,
            "margin_bottom": 3,
        }

    def test_four_items(self):
        assert expand_spacing("margin", [1, 2, 3, 4]) == {
            "margin_top": 1,
            "margin_right": 2,
            "margin_bottom": 3,
            "margin_left": 4,
        }
