"""Extended and font property plugins.

Each plugin maps one input attribute to a style fragment. Enabled with
``PrismConfig(extended_properties=True)`` and ``font_properties=True``.
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Number
from typing import Any

from prism.plugins.base import PluginContext

_SIDES = ("top", "right", "bottom", "left")


def resolve_color(ctx: PluginContext, value: Any) -> Any:
    """Substitute a registry color name when color names are enabled."""
    if ctx.config.color_names and isinstance(value, str):
        return ctx.colors.get(value, value)
    return value


def resolve_size(ctx: PluginContext, value: Any) -> Any:
    """Map a named size (``"large"``) to a number: component, registry, config."""
    if isinstance(value, str):
        for scale in (ctx.sizes, ctx.registry.sizes, ctx.config.sizes):
            if value in scale:
                return scale[value]
    return value


def expand_spacing(prefix: str, value: Any) -> dict[str, Any]:
    """Expand a number or a 1-4 item shorthand list like CSS margin/padding."""
    if not isinstance(value, (list, tuple)):
        return {prefix: value}
    values = list(value)
    if len(values) == 1:
        return {prefix: values[0]}
    if len(values) == 2:
        return {f"{prefix}_vertical": values[0], f"{prefix}_horizontal": values[1]}
    if len(values) == 3:
        return {
            f"{prefix}_top": values[0],
            f"{prefix}_horizontal": values[1],
            f"{prefix}_bottom": values[2],
        }
    return {f"{prefix}_{side}": v for side, v in zip(_SIDES, values[:4])}


# --- extended properties --------------------------------------------------------


def background(ctx: PluginContext) -> dict[str, Any]:
    return {"background_color": resolve_color(ctx, ctx.prop)}


def color(ctx: PluginContext) -> dict[str, Any]:
    return {"color": resolve_color(ctx, ctx.prop)}


def border_color(ctx: PluginContext) -> dict[str, Any]:
    return {"border_color": resolve_color(ctx, ctx.prop)}


def radius(ctx: PluginContext) -> dict[str, Any]:
    return {"border_radius": ctx.prop}


def spacing(ctx: PluginContext) -> dict[str, Any]:
    return expand_spacing(ctx.prop_name, ctx.prop)


def dimension(ctx: PluginContext) -> dict[str, Any]:
    return {ctx.prop_name: ctx.prop}


EXTENDED_PROPERTY_PLUGINS = [
    (background, {"background": str}),
    (color, {"color": str}),
    (border_color, {"border_color": str}),
    (radius, {"radius": Number}),
    (spacing, {"margin": (Number, list, tuple), "padding": (Number, list, tuple)}),
    (
        dimension,
        {"border_width": Number, "width": (Number, str), "height": (Number, str), "flex": Number},
    ),
]


# --- font properties ------------------------------------------------------------

_FONT_KEYS = {
    "family": "font_family",
    "size": "font_size",
    "weight": "font_weight",
    "style": "font_style",
    "color": "color",
}


def size(ctx: PluginContext) -> dict[str, Any]:
    return {"font_size": resolve_size(ctx, ctx.prop)}


def bold(ctx: PluginContext) -> dict[str, Any] | None:
    return {"font_weight": "bold"} if ctx.prop else None


def align(ctx: PluginContext) -> dict[str, Any]:
    return {"text_align": ctx.prop}


def font(ctx: PluginContext) -> dict[str, Any]:
    """Flatten a font mapping; the value may come from inherited context."""
    value = ctx.prop
    style: dict[str, Any] = {}
    for key, style_name in _FONT_KEYS.items():
        if key not in value:
            continue
        item = value[key]
        if key == "size":
            item = resolve_size(ctx, item)
        elif key == "color":
            item = resolve_color(ctx, item)
        elif key == "family":
            item = ctx.registry.fonts.get(item, item)
        style[style_name] = item
    return style


FONT_PROPERTY_PLUGINS = [
    (size, {"size": (Number, str)}),
    (bold, {"bold": bool}),
    (align, {"align": str}),
    (font, {"font": Mapping}),
]
