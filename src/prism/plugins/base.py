"""Plugin variants and the context passed to plugin functions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Union

from prism.namespace import Namespace

if TYPE_CHECKING:
    from prism.component import ComponentDefinition
    from prism.config import PrismConfig
    from prism.registry.compiled import CompiledRegistry

Fragment = Mapping[str, Any]


@dataclass(frozen=True)
class Routed:
    """Fragments a routing plugin contributes to several style groups."""

    groups: Mapping[str, tuple[Fragment, ...]] = field(default_factory=dict)

    def get(self, group: str) -> tuple[Fragment, ...]:
        return tuple(self.groups.get(group, ()))


@dataclass(frozen=True)
class PluginContext:
    """Everything a plugin may read while resolving one style group."""

    props: Mapping[str, Any]
    context: Mapping[str, Any]
    ns: Namespace
    group: str
    definition: ComponentDefinition
    registry: CompiledRegistry
    config: PrismConfig
    plugin: Plugin | None = None
    prop_name: str | None = None
    prop: Any = None

    @property
    def colors(self) -> Mapping[str, Any]:
        return self.definition.colors

    @property
    def sizes(self) -> Mapping[str, Any]:
        return self.definition.sizes

    @property
    def rules(self) -> Mapping[str, Fragment]:
        return self.registry.rules

    def for_plugin(self, plugin: PropertyPlugin, value: Any, name: str | None = None) -> PluginContext:
        return replace(self, plugin=plugin, prop_name=name or plugin.name, prop=value)

    def for_group(self, group: str) -> PluginContext:
        return replace(self, group=group, ns=self.ns.for_child(group))


@dataclass(frozen=True)
class GlobalPlugin:
    """A plugin that runs on every resolution pass.

    ``requires`` lists the style option names a component must declare for
    the plugin to apply; an empty tuple applies it to every component.
    """

    name: str
    fn: Callable[[PluginContext], Any]
    constraint: Any = None
    requires: tuple[str, ...] = ()

    is_global = True

    def applies_to(self, declared: set[str] | frozenset[str]) -> bool:
        return not self.requires or any(name in declared for name in self.requires)


@dataclass(frozen=True)
class PropertyPlugin:
    """A plugin bound to one input attribute, run only when it is defined."""

    name: str
    fn: Callable[[PluginContext], Any]
    constraint: type | tuple[type, ...] | None = None

    is_global = False

    def accepts(self, value: Any) -> bool:
        if self.constraint is None or value is None:
            return True
        return isinstance(value, self.constraint)


Plugin = Union[GlobalPlugin, PropertyPlugin]


def as_fragments(result: Any) -> list[Fragment]:
    """Normalize a plugin return value into a flat list of fragments."""
    if result is None:
        return []
    if isinstance(result, Mapping):
        return [result] if result else []
    if isinstance(result, (list, tuple)):
        fragments: list[Fragment] = []
        for item in result:
            fragments.extend(as_fragments(item))
        return fragments
    return []
