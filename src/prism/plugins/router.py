"""Routing plugin: state rules and attribute fan-out into child style groups.

The router returns a ``Routed`` mapping instead of writing into style groups
itself. The resolver runs it once per pass and hands each group its entry,
appended after the group's defaults and class rule.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from prism.namespace import STYLE
from prism.plugins.base import Fragment, GlobalPlugin, PluginContext, Routed, as_fragments


def state_fragments(ctx: PluginContext) -> list[Fragment]:
    """Fragments for the component's current state in ``ctx.group``.

    A string state is a lookup key for the group's state rule; a mapping
    (or list of mappings) is used as the fragment itself.
    """
    fn = ctx.definition.map_props_to_style_state
    if fn is None:
        return []
    state = fn(ctx.props, ctx.registry)
    if not state:
        return []
    if isinstance(state, str):
        rule = ctx.registry.rule(ctx.ns.state_class_name(state))
        return [rule] if rule else []
    return as_fragments(state)


def _route_entries(entries: Any) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for entry in entries:
        if isinstance(entry, str):
            pairs.append((entry, entry))
        elif isinstance(entry, Mapping):
            for attr, style_name in entry.items():
                pairs.append((attr, style_name if isinstance(style_name, str) else attr))
    return pairs


def routed_fragments(ctx: PluginContext) -> list[Fragment]:
    """Fragments routed into ``ctx.group`` by ``map_props_to_component``.

    An attribute whose style name is bound to a property plugin is handed to
    that plugin; anything else is copied under its style name.
    """
    entries = ctx.definition.map_props_to_component.get(ctx.group, ())
    fragments: list[Fragment] = []
    target: dict[str, Any] = {}
    for attr, style_name in _route_entries(entries):
        value = ctx.props.get(attr)
        if value is None:
            continue
        plugin = ctx.definition.plugins.get(style_name)
        if plugin is not None:
            if not plugin.accepts(value):
                continue
            fragments.extend(as_fragments(plugin.fn(ctx.for_plugin(plugin, value))))
        else:
            target[style_name] = value
    if target:
        fragments.append(target)
    return fragments


def route(ctx: PluginContext) -> Routed:
    groups: dict[str, tuple[Fragment, ...]] = {}
    for group in ctx.definition.group_names:
        group_ctx = ctx.for_group(group)
        fragments = state_fragments(group_ctx)
        if group != STYLE:
            fragments.extend(routed_fragments(group_ctx))
        if fragments:
            groups[group] = tuple(fragments)
    return Routed(groups=groups)


ROUTER = GlobalPlugin(
    name="map_props_to_component",
    fn=route,
    requires=("map_props_to_component", "map_props_to_style_state"),
)
