"""Plugin registration, validation and per-group filtering."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from prism.errors import PluginDefinitionError
from prism.plugins.base import GlobalPlugin, Plugin, PropertyPlugin


def register_plugin(definition: Any) -> list[Plugin]:
    """Expand one plugin entry into tagged plugin instances.

    Accepted forms:
        GlobalPlugin(...) / PropertyPlugin(...)
        (name, fn), (name, fn, constraint)
        or (name, fn, constraint, True)          -> GlobalPlugin
        (fn, {attr: constraint, ...})            -> one PropertyPlugin per attr
    """
    if isinstance(definition, (GlobalPlugin, PropertyPlugin)):
        return [definition]
    if not isinstance(definition, (list, tuple)):
        raise PluginDefinitionError(
            f"invalid plugin definition, expected a sequence, got {type(definition).__name__}"
        )

    is_global = (
        2 <= len(definition) <= 4
        and isinstance(definition[0], str)
        and callable(definition[1])
    )
    if is_global:
        name, fn = definition[0], definition[1]
        constraint = definition[2] if len(definition) >= 3 else None
        if len(definition) == 4 and definition[3] is not True:
            raise PluginDefinitionError(
                f"plugin {name!r} is declared with a name, which makes it global, "
                f"but its is_global flag is {definition[3]!r}",
                name,
            )
        return [GlobalPlugin(name=name, fn=fn, constraint=constraint, requires=(name,))]

    is_property = (
        len(definition) == 2
        and callable(definition[0])
        and isinstance(definition[1], Mapping)
    )
    if is_property:
        fn, constraints = definition
        if not constraints:
            raise PluginDefinitionError("plugin definition with no property names")
        return [
            PropertyPlugin(name=name, fn=fn, constraint=constraint)
            for name, constraint in constraints.items()
        ]

    raise PluginDefinitionError(f"invalid plugin definition {definition!r}")


def register_plugins(definitions: Any) -> list[Plugin]:
    if not isinstance(definitions, (list, tuple)):
        raise PluginDefinitionError("plugins must be a list")
    plugins: list[Plugin] = []
    for definition in definitions:
        plugins.extend(register_plugin(definition))
    return plugins


@dataclass(frozen=True)
class GroupPlugins:
    """Property plugins and pass-through names relevant to one style group."""

    properties: tuple[PropertyPlugin, ...] = ()
    verbatim: tuple[str, ...] = ()
    renames: Mapping[str, str] = field(default_factory=dict)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.properties) + self.verbatim


class PluginRegistry:
    """Ordered global and property plugins.

    Property plugin names are unique; registering a second plugin for an
    attribute that is already bound raises PluginDefinitionError.
    """

    def __init__(self, definitions: Iterable[Any] = ()) -> None:
        self._globals: list[GlobalPlugin] = []
        self._properties: dict[str, PropertyPlugin] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: Any) -> list[Plugin]:
        plugins = register_plugin(definition)
        for plugin in plugins:
            self._add(plugin)
        return plugins

    def register_all(self, definitions: Any) -> list[Plugin]:
        plugins = register_plugins(definitions)
        for plugin in plugins:
            self._add(plugin)
        return plugins

    def _add(self, plugin: Plugin) -> None:
        if isinstance(plugin, GlobalPlugin):
            self._globals.append(plugin)
            return
        if plugin.name in self._properties:
            raise PluginDefinitionError(
                f"duplicate property plugin {plugin.name!r}", plugin.name
            )
        self._properties[plugin.name] = plugin

    @property
    def globals(self) -> tuple[GlobalPlugin, ...]:
        return tuple(self._globals)

    @property
    def properties(self) -> tuple[PropertyPlugin, ...]:
        return tuple(self._properties.values())

    @property
    def property_names(self) -> list[str]:
        return list(self._properties)

    def get(self, name: str) -> PropertyPlugin | None:
        return self._properties.get(name)

    def without(self, names: Iterable[str]) -> PluginRegistry:
        """Return a copy without the plugins called *names*."""
        disabled = set(names)
        registry = PluginRegistry()
        registry._globals = [p for p in self._globals if p.name not in disabled]
        registry._properties = {
            name: p for name, p in self._properties.items() if name not in disabled
        }
        return registry

    def for_group(self, available: Iterable[str | Mapping[str, Any]]) -> GroupPlugins:
        """Filter property plugins to the attribute names a group declares.

        Entries are attribute names or ``{attr: style_name}`` mappings that
        rename the attribute when it is passed through verbatim.
        """
        names: list[str] = []
        renames: dict[str, str] = {}
        for entry in available:
            if isinstance(entry, str):
                names.append(entry)
            elif isinstance(entry, Mapping):
                for attr, style_name in entry.items():
                    names.append(attr)
                    if isinstance(style_name, str):
                        renames[attr] = style_name
        properties = []
        for plugin in self._properties.values():
            if plugin.name in names:
                properties.append(plugin)
                names.remove(plugin.name)
        return GroupPlugins(
            properties=tuple(properties), verbatim=tuple(names), renames=renames
        )

    def __iter__(self) -> Iterator[Plugin]:
        yield from self._globals
        yield from self._properties.values()

    def __len__(self) -> int:
        return len(self._globals) + len(self._properties)
