"""Themes and host types loaded by reference from the CLI tests."""

from prism import StyleRegistry


def _styles(colors, fonts, color_names):
    return {
        "Label": {"color": colors["accent"], "tint_color": "blue"},
        "Label:disabled": {"opacity": 0.5},
        "Panel.Label": {"color": "black"},
    }


THEME = {
    "colors": {"accent": "#f60"},
    "fonts": {"body": "Georgia"},
    "styles": _styles,
}

BROKEN_THEME = {"colors": ["red"]}


def make_registry():
    return StyleRegistry(THEME, platform="test")


class Label:
    map_style_to_prop = {"tint_color": True}
    map_props_to_style_state = staticmethod(
        lambda props, registry: "disabled" if props.get("disabled") else None
    )


class Panel:
    map_props_to_component = {"label": ["color"]}


class Broken:
    map_props_to_style_object = {"style": ["color"]}
