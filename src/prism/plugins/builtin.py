"""Plugins installed on every configuration."""

from __future__ import annotations

from typing import Any

from prism.plugins.base import GlobalPlugin, PluginContext, as_fragments


def class_name(ctx: PluginContext) -> list[Any]:
    """Look up each name of a class list directly in the rule table.

    Rules are returned in the order the names are written, so later names
    win when the fragments are flattened.
    """
    value = ctx.prop
    names = value.split() if isinstance(value, str) else list(value)
    return [
        ctx.rules[name] for name in names if isinstance(name, str) and name in ctx.rules
    ]


def map_props_to_style(ctx: PluginContext) -> list[Any]:
    """Run the component's ``{attr: fn(value, ctx)}`` style functions."""
    fragments: list[Any] = []
    for name, fn in ctx.definition.map_props_to_style.items():
        value = ctx.props.get(name)
        if value is None:
            continue
        fragments.extend(as_fragments(fn(value, ctx)))
    return fragments


MAP_PROPS_TO_STYLE = GlobalPlugin(
    name="map_props_to_style",
    fn=map_props_to_style,
    requires=("map_props_to_style",),
)

CLASS_NAME = (class_name, {"class_name": (str, list, tuple)})
