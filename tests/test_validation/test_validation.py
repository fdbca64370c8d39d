"""Tests for prop validation rules and validate_props."""

from prism.component import register_component
from prism.config import PrismConfig
from prism.diagnostic import Diagnostic, Severity
from prism.plugins import build_plugin_registry
from prism.registry import StyleRegistry
from prism.validation import validate_props
from prism.validation.rules import check_inline_styles, check_plugin_constraints


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class Card:
    map_props_to_style_object = {"header": ["title_color"]}


def _definition(**config):
    config = PrismConfig(**config)
    return register_component(
        Card,
        registry=StyleRegistry().compile(config),
        plugins=build_plugin_registry(config),
        config=config,
    )


# ---------------------------------------------------------------------------
# check_plugin_constraints
# ---------------------------------------------------------------------------


class TestCheckPluginConstraints:
    def test_mismatch_reported(self):
        diags = check_plugin_constraints(_definition(extended_properties=True), {"radius": "4"})
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert diags[0].prop_name == "radius"
        assert "expected Number but got str" in diags[0].message

    def test_tuple_constraint_described(self):
        diags = check_plugin_constraints(_definition(), {"class_name": 5})
        assert "expected str or list or tuple" in diags[0].message

    def test_valid_and_absent_values(self):
        definition = _definition(extended_properties=True)
        assert check_plugin_constraints(definition, {"radius": 4, "class_name": "a"}) == []
        assert check_plugin_constraints(definition, {}) == []


# ---------------------------------------------------------------------------
# check_inline_styles
# ---------------------------------------------------------------------------


class TestCheckInlineStyles:
    def test_string_style_reported(self):
        diags = check_inline_styles(_definition(), {"header_style": "color: red"})
        assert len(diags) == 1
        assert diags[0].prop_name == "header_style"
        assert "is a str and is ignored" in diags[0].message

    def test_mapping_and_list_accepted(self):
        props = {"style": {"flex": 1}, "header_style": [{"flex": 1}, None]}
        assert check_inline_styles(_definition(), props) == []

    def test_list_with_non_mapping_reported(self):
        diags = check_inline_styles(_definition(), {"style": [{"flex": 1}, "bold"]})
        assert [d.prop_name for d in diags] == ["style"]


# ---------------------------------------------------------------------------
# validate_props
# ---------------------------------------------------------------------------


class TestValidateProps:
    def test_runs_all_rules(self):
        diags = validate_props(_definition(), {"class_name": 5, "style": "x"})
        assert {d.rule for d in diags} == {"check_plugin_constraints", "check_inline_styles"}

    def test_extra_rules(self):
        def no_titles(definition, props):
            if "title" not in props:
                return []
            return [Diagnostic(rule="no_titles", severity=Severity.INFO, message="title set")]

        diags = validate_props(_definition(), {"title": "x"}, extra_rules=[no_titles])
        assert [d.rule for d in diags] == ["no_titles"]

    def test_diagnostic_str(self):
        diags = validate_props(_definition(), {"class_name": 5})
        assert str(diags[0]).startswith("WARNING [Card.class_name]: ")
        assert diags[0].is_warning
        assert not Diagnostic(rule="r", severity=Severity.INFO, message="m").is_warning
