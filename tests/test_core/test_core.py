"""Tests for the Prism facade: stylable types and configure()."""

import logging

import pytest

from prism import (
    CompiledRegistry,
    ConfigurationError,
    Prism,
    PrismConfig,
    RegistryError,
    StyleRegistry,
    StyledType,
)


class Label:
    pass


class TestStylable:
    def test_direct_call(self):
        styled = Prism().stylable(Label)
        assert isinstance(styled, StyledType)
        assert styled.__name__ == "Prism(Label)"
        assert styled.component_type is Label
        assert repr(styled) == "<Prism(Label)>"

    def test_decorator_forms(self):
        prism = Prism()

        @prism.stylable
        class Plain:
            pass

        @prism.stylable(namespace="com.example")
        class Named:
            pass

        assert Plain.namespace == ""
        assert Named.namespace == "com.example"
        assert [s.component_type.__name__ for s in prism.components] == ["Plain", "Named"]

    def test_use_before_configure_raises(self):
        styled = Prism().stylable(Label)
        assert not styled.is_registered
        with pytest.raises(RegistryError, match="Prism.configure"):
            styled()
        with pytest.raises(RegistryError):
            styled.definition


class TestConfigure:
    def test_pending_types_are_registered(self):
        prism = Prism()
        styled = prism.stylable(Label)
        compiled = prism.configure(StyleRegistry({"styles": {"Label": {"color": "red"}}}))
        assert isinstance(compiled, CompiledRegistry)
        assert prism.is_configured
        assert styled.is_registered
        assert styled.definition.registry is compiled
        assert styled().style() == {"color": "red"}

    def test_types_declared_after_configure(self):
        prism = Prism()
        prism.configure(StyleRegistry({"styles": {"Label": {"color": "red"}}}))
        styled = prism.stylable(Label)
        assert styled().style() == {"color": "red"}

    def test_requires_style_registry(self):
        with pytest.raises(ConfigurationError, match="StyleRegistry"):
            Prism().configure({"styles": {}})

    def test_plugin_errors_surface_at_configure(self):
        with pytest.raises(ConfigurationError):
            Prism().configure(StyleRegistry(), PrismConfig(plugins="class_name"))

    def test_invariants_extracted_at_configure(self):
        prism = Prism()
        compiled = prism.configure(
            StyleRegistry({"styles": {"Icon": {"tint_color": "blue", "width": 4}}}),
            PrismConfig(invariants=[{"style_prop_name": "tint_color"}]),
        )
        assert compiled.rule("Icon") == {"width": 4}
        assert compiled.invariant("Icon").value == "blue"

    def test_configure_after_earlier_compile_extracts_invariants(self):
        registry = StyleRegistry({"styles": {"Label": {"tint_color": "blue", "color": "red"}}})
        registry.compile()
        compiled = Prism().configure(
            registry, PrismConfig(invariants=[{"style_prop_name": "tint_color"}])
        )
        assert compiled.rule("Label") == {"color": "red"}
        assert compiled.invariant("Label").value == "blue"

    def test_debug_logs_plugins(self, caplog):
        logger = logging.getLogger("prism.test")
        prism = Prism(logger=logger)
        with caplog.at_level(logging.DEBUG, logger="prism.test"):
            prism.configure(StyleRegistry(), PrismConfig(debug=True))
        assert "Prism configured with 3 plugins" in caplog.text
        assert 'Prism using plugin "class_name" (global: False)' in caplog.text
