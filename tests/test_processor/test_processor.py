"""Tests for declaration and attribute processors."""

from prism.processor import Processor, ProcessorRule


def _double(rewrite):
    rewrite.write(rewrite.prop_value * 2)


class TestProcessor:
    def test_without_rules_returns_same_object(self):
        target = {"margin": 4}
        assert Processor().process(target, is_declaration=True) is target
        assert not Processor().enabled

    def test_rewrites_matched_declaration(self):
        processor = Processor([ProcessorRule(fn=_double, style_name="margin")])
        assert processor.process({"margin": 4, "color": "red"}, True) == {
            "margin": 8,
            "color": "red",
        }

    def test_does_not_modify_input(self):
        processor = Processor([ProcessorRule(fn=_double, style_name="margin")])
        target = {"margin": 4}
        processor.process(target, True)
        assert target == {"margin": 4}

    def test_rename(self):
        def rename(rewrite):
            rewrite.write(rewrite.prop_value, "tint_color")

        processor = Processor([ProcessorRule(fn=rename, style_name="tint")])
        assert processor.process({"tint": "red"}, True) == {"tint_color": "red"}

    def test_recurses_into_nested_mappings(self):
        processor = Processor([ProcessorRule(fn=_double, style_name="margin")])
        result = processor.process({"shadow": {"margin": 2}}, True)
        assert result == {"shadow": {"margin": 4}}

    def test_prop_table_uses_prop_style_name(self):
        processor = Processor(
            [ProcessorRule(fn=_double, style_name="margin", prop_style_name="space")]
        )
        assert processor.process({"space": 3, "margin": 1}, False) == {
            "space": 6,
            "margin": 1,
        }
        assert processor.process({"space": 3, "margin": 1}, True) == {
            "space": 3,
            "margin": 2,
        }

    def test_rewrite_receives_registry_values(self):
        seen = {}

        def capture(rewrite):
            seen["colors"] = rewrite.colors
            rewrite.write(rewrite.colors[rewrite.prop_value])

        class Reg:
            colors = {"accent": "#f00"}

        processor = Processor([ProcessorRule(fn=capture, style_name="color")])
        assert processor.process({"color": "accent"}, True, Reg()) == {"color": "#f00"}
        assert seen["colors"] == {"accent": "#f00"}
