"""Cascade resolution: ordered fragment collection and flattening per group."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from prism.namespace import get_style_prop_name
from prism.plugins.base import Fragment, PluginContext, Routed, as_fragments

if TYPE_CHECKING:
    from prism.component import ComponentDefinition


@dataclass(frozen=True)
class StyleGroup:
    """Resolved style for one named group of one component instance."""

    name: str
    prop_name: str
    fragments: tuple[Fragment, ...] = ()
    style: Mapping[str, Any] = field(default_factory=dict)
    # Sibling values moved out of the style by map_style_to_prop.
    extracted: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Resolution:
    """Result of one resolution pass over a set of groups."""

    groups: dict[str, StyleGroup]
    extracted: dict[str, Any]


def flatten(fragments: Iterable[Fragment]) -> dict[str, Any]:
    """Merge fragments left to right; later values overwrite earlier ones."""
    style: dict[str, Any] = {}
    for fragment in fragments:
        if fragment:
            style.update(fragment)
    return style


def extract_style_props(
    style: Mapping[str, Any], mapping: Mapping[str, Any]
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Move attributes out of a flattened style into sibling outputs.

    Every configured source attribute is removed from the style. When its
    target is truthy the value is kept under the target name (a string) or
    the source name (``True``); a falsy target drops the value.
    """
    result = dict(style)
    extracted: dict[str, Any] = {}
    for source, target in mapping.items():
        value = result.pop(source, None)
        if not target or value is None:
            continue
        key = target if isinstance(target, str) else source
        extracted[key] = value
    return result, extracted


def lookup(props: Mapping[str, Any], context: Mapping[str, Any], name: str) -> Any:
    """Value of *name* on the props, falling back to the inherited context."""
    value = props.get(name)
    if value is None:
        value = context.get(name)
    return value


class CascadeResolver:
    """Resolves style groups for instances of one component definition.

    Fragment order for a group:
        1. group defaults
        2. compiled rule for the group's qualified class name
        3. global plugins in registration order (routed entries included)
        4. property plugins bound to a defined attribute
        5. unclaimed relevant attributes, verbatim
        6. the group's inline style attribute
    """

    def __init__(self, definition: ComponentDefinition) -> None:
        self.definition = definition

    def resolve(
        self,
        props: Mapping[str, Any],
        context: Mapping[str, Any] | None = None,
        groups: Iterable[str] | None = None,
    ) -> Resolution:
        definition = self.definition
        context = context or {}
        props = definition.processor.process(
            props, is_declaration=False, registry=definition.registry
        )
        names = list(groups) if groups is not None else list(definition.group_names)
        routed: dict[str, Routed] = {}
        resolved: dict[str, StyleGroup] = {}
        extracted: dict[str, Any] = {}
        for name in names:
            fragments = tuple(self.fragments(name, props, context, routed))
            style, values = extract_style_props(
                flatten(fragments), definition.map_style_to_prop
            )
            extracted.update(values)
            resolved[name] = StyleGroup(
                name=name,
                prop_name=get_style_prop_name(name),
                fragments=fragments,
                style=style,
                extracted=values,
            )
        return Resolution(groups=resolved, extracted=extracted)

    def fragments(
        self,
        group: str,
        props: Mapping[str, Any],
        context: Mapping[str, Any],
        routed: dict[str, Routed] | None = None,
    ) -> list[Fragment]:
        """Collect the ordered fragment list for *group*."""
        definition = self.definition
        routed = routed if routed is not None else {}
        ns = definition.namespace_for(group)

        fragments: list[Fragment] = list(definition.initial_styles.get(group, ()))

        rule = definition.registry.rule(ns.component_class_name)
        if rule:
            fragments.append(rule)

        ctx = PluginContext(
            props=props,
            context=context,
            ns=ns,
            group=group,
            definition=definition,
            registry=definition.registry,
            config=definition.config,
        )

        for plugin in definition.global_plugins:
            if plugin.name in routed:
                fragments.extend(routed[plugin.name].get(group))
                continue
            result = plugin.fn(ctx)
            if isinstance(result, Routed):
                routed[plugin.name] = result
                fragments.extend(result.get(group))
            else:
                fragments.extend(as_fragments(result))

        group_plugins = definition.group_plugins[group]
        for plugin in group_plugins.properties:
            value = lookup(props, context, plugin.name)
            if value is None or not plugin.accepts(value):
                continue
            fragments.extend(as_fragments(plugin.fn(ctx.for_plugin(plugin, value))))

        verbatim = {
            group_plugins.renames.get(name, name): props[name]
            for name in group_plugins.verbatim
            if props.get(name) is not None
        }
        if verbatim:
            fragments.append(verbatim)

        fragments.extend(as_fragments(props.get(get_style_prop_name(group))))
        return fragments
