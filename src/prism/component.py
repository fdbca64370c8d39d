"""Component registration, definitions and live styled instances."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Callable

from prism.config import PrismConfig
from prism.engine.cascade import CascadeResolver, StyleGroup
from prism.errors import ConfigurationError, RegistryError
from prism.namespace import STYLE, Namespace, get_style_prop_name
from prism.plugins.base import Fragment, GlobalPlugin
from prism.plugins.registry import GroupPlugins, PluginRegistry
from prism.processor import Processor
from prism.registry.compiled import CompiledRegistry, StyleInvariant

logger = logging.getLogger("prism")


def _is_function(value: Any) -> bool:
    return callable(value)


def _is_function_or_mapping(value: Any) -> bool:
    return callable(value) or isinstance(value, Mapping)


def _is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


# Capability name -> (type test, expected type description)
CAPABILITIES: dict[str, tuple[Callable[[Any], bool], str]] = {
    "map_props_to_style_object": (_is_function_or_mapping, "function or mapping"),
    "map_props_to_style_state": (_is_function, "function"),
    "map_props_to_style": (_is_function_or_mapping, "function or mapping"),
    "map_props_to_component": (_is_mapping, "mapping"),
    "map_style_to_prop": (_is_mapping, "mapping"),
}


class InheritedContext(Mapping[str, Any]):
    """Immutable attribute values a parent passes down to its children."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = dict(values or {})

    def derive(self, **overrides: Any) -> InheritedContext:
        """Return a new context with *overrides* layered on top."""
        return InheritedContext({**self._values, **overrides})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"InheritedContext({self._values!r})"


@dataclass(frozen=True)
class ComponentDefinition:
    """Everything computed once when a component type is registered."""

    component_type: type
    name: str
    class_name: str
    namespace: str
    registry: CompiledRegistry
    config: PrismConfig
    plugins: PluginRegistry
    processor: Processor
    group_names: tuple[str, ...]
    initial_styles: Mapping[str, tuple[Fragment, ...]]
    group_plugins: Mapping[str, GroupPlugins]
    global_plugins: tuple[GlobalPlugin, ...]
    watched: Mapping[str, frozenset[str]]
    map_props_to_component: Mapping[str, Any] = field(default_factory=dict)
    map_props_to_style_state: Callable[..., Any] | None = None
    map_props_to_style: Mapping[str, Callable[..., Any]] = field(default_factory=dict)
    map_style_to_prop: Mapping[str, Any] = field(default_factory=dict)
    colors: Mapping[str, Any] = field(default_factory=dict)
    sizes: Mapping[str, Any] = field(default_factory=dict)
    default_props: Mapping[str, Any] = field(default_factory=dict)
    supports_text: bool = False
    declared: frozenset[str] = frozenset()
    child_context_fn: Callable[..., Any] | None = None

    @property
    def child_groups(self) -> tuple[str, ...]:
        return tuple(name for name in self.group_names if name != STYLE)

    def namespace_for(self, group: str) -> Namespace:
        return Namespace(
            type_name=self.name,
            class_name=self.class_name,
            namespace=self.namespace,
            child_name=None if group == STYLE else group,
        )


def _style_options(component_type: type, registry: CompiledRegistry) -> dict[str, Any]:
    style_options = getattr(component_type, "style_options", None)
    if style_options is None:
        return {}
    if not callable(style_options):
        raise ConfigurationError(
            f"style_options for {component_type.__name__} must be a function"
        )
    options = style_options(registry)
    if options is None:
        return {}
    if not isinstance(options, Mapping):
        raise ConfigurationError(
            f"style_options for {component_type.__name__} must return a mapping"
        )
    return dict(options)


def _resolve_capabilities(
    component_type: type, options: dict[str, Any]
) -> dict[str, Any]:
    """Merge static capability declarations into *options*, validating both."""
    name = component_type.__name__
    for capability, (test, expected) in CAPABILITIES.items():
        static = getattr(component_type, capability, None)
        if capability in options and static is not None:
            raise ConfigurationError(
                f"you declared {capability} as static on {name} and also in "
                "style_options, choose one of the declaration styles",
                capability,
            )
        if static is not None:
            options[capability] = static
        value = options.get(capability)
        if value is not None and not test(value):
            raise ConfigurationError(
                f"you declared {capability} on {name} as an invalid type, "
                f"expected {expected} but got {type(value).__name__}",
                capability,
            )
    return options


def _flat_names(entries: Any) -> list[str]:
    names: list[str] = []
    for entry in entries:
        if isinstance(entry, str):
            names.append(entry)
        elif isinstance(entry, Mapping):
            names.extend(entry)
    return names


def _style_object_map(
    options: dict[str, Any], registry: CompiledRegistry, plugins: PluginRegistry, name: str
) -> dict[str, list[Any]]:
    available = plugins.property_names
    mapping = options.get("map_props_to_style_object")
    if mapping is None:
        return {STYLE: available}
    if callable(mapping):
        mapping = mapping(registry)
        if not isinstance(mapping, Mapping):
            raise ConfigurationError(
                f"map_props_to_style_object for {name} must return a mapping"
            )
    if STYLE in mapping:
        raise ConfigurationError(
            'do not configure mappings for "style" in map_props_to_style_object, '
            "use map_props_to_style or an inline style instead",
            STYLE,
        )
    result: dict[str, list[Any]] = {}
    for group, entries in mapping.items():
        if not isinstance(entries, (list, tuple)):
            raise ConfigurationError(
                f"map_props_to_style_object[{group!r}] for {name} must be a list",
                group,
            )
        result[group] = list(entries)
    assigned = {attr for entries in result.values() for attr in _flat_names(entries)}
    return {STYLE: [attr for attr in available if attr not in assigned], **result}


def register_component(
    component_type: type,
    *,
    registry: CompiledRegistry,
    plugins: PluginRegistry,
    config: PrismConfig | None = None,
    processor: Processor | None = None,
    namespace: str = "",
) -> ComponentDefinition:
    """Validate a host component type and compute its definition."""
    if not isinstance(registry, CompiledRegistry):
        raise RegistryError(
            "register_component expects a compiled registry, "
            "did you forget to call StyleRegistry.compile()?"
        )
    config = config or PrismConfig()
    name = component_type.__name__
    options = _resolve_capabilities(component_type, _style_options(component_type, registry))

    default_styles = options.get("default_styles")
    if default_styles is not None and not isinstance(default_styles, (list, tuple)):
        raise ConfigurationError(
            f"default_styles for {name} should be a list of mappings", "default_styles"
        )

    colors = options.get("colors")
    if colors is not None and not isinstance(colors, Mapping):
        raise ConfigurationError(f"colors for {name} must be a mapping", "colors")

    map_props_to_style = options.get("map_props_to_style") or {}
    if callable(map_props_to_style):
        map_props_to_style = map_props_to_style(registry)
    for attr, fn in map_props_to_style.items():
        if not callable(fn):
            raise ConfigurationError(
                f"map_props_to_style[{attr!r}] for {name} must be a function", attr
            )

    style_map = _style_object_map(options, registry, plugins, name)
    routes = dict(options.get("map_props_to_component") or {})
    group_names = list(style_map)
    group_names.extend(group for group in routes if group not in style_map)

    # Group style attributes found in default_props become initial fragments.
    declared_defaults = dict(getattr(component_type, "default_props", None) or {})
    initial_styles: dict[str, tuple[Fragment, ...]] = {}
    for group in group_names:
        fragments: list[Fragment] = []
        initial = declared_defaults.pop(get_style_prop_name(group), None)
        if initial is not None:
            fragments.extend(initial if isinstance(initial, (list, tuple)) else [initial])
        if group == STYLE and default_styles:
            fragments.extend(default_styles)
        initial_styles[group] = tuple(fragments)

    group_plugins = {
        group: plugins.for_group(style_map.get(group, ())) for group in group_names
    }
    watched = {
        group: frozenset(
            {get_style_prop_name(group)}
            | set(group_plugins[group].names)
            | set(_flat_names(routes.get(group, ())))
        )
        for group in group_names
    }

    declared = frozenset(key for key, value in options.items() if value is not None)
    global_plugins = tuple(p for p in plugins.globals if p.applies_to(declared))

    definition = ComponentDefinition(
        component_type=component_type,
        name=name,
        class_name=options.get("class_name") or name,
        namespace=namespace,
        registry=registry,
        config=config,
        plugins=plugins,
        processor=processor or Processor(),
        group_names=tuple(group_names),
        initial_styles=initial_styles,
        group_plugins=group_plugins,
        global_plugins=global_plugins,
        watched=watched,
        map_props_to_component=routes,
        map_props_to_style_state=options.get("map_props_to_style_state"),
        map_props_to_style=dict(map_props_to_style),
        map_style_to_prop=dict(options.get("map_style_to_prop") or {}),
        colors={**(colors or {}), **registry.colors},
        sizes={**config.sizes, **registry.sizes, **(options.get("sizes") or {})},
        default_props=declared_defaults,
        supports_text=bool(
            options.get("supports_text", getattr(component_type, "supports_text", False))
        ),
        declared=declared,
        child_context_fn=getattr(component_type, "get_child_context", None),
    )
    logger.debug(
        "Registered %s with groups %s and %d global plugin(s)",
        name,
        ", ".join(definition.group_names),
        len(global_plugins),
    )
    return definition


def _changed(old: Mapping[str, Any], new: Mapping[str, Any], name: str) -> bool:
    before, after = old.get(name), new.get(name)
    return before is not None and after is not None and before != after


class StyledComponent:
    """A live component instance holding its resolved style groups.

    Groups are seeded from the definition's defaults at construction,
    fully resolved by ``mount()`` and partially re-resolved by ``update()``
    for groups whose watched attributes moved to a new defined value.
    """

    def __init__(
        self,
        definition: ComponentDefinition | None,
        props: Mapping[str, Any] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        if definition is None:
            raise RegistryError(
                "no style registry configured, did you forget to call Prism.configure()?"
            )
        if not isinstance(definition.registry, CompiledRegistry):
            raise RegistryError(
                "no compiled style registry available, "
                "did you forget to call StyleRegistry.compile()?"
            )
        self.definition = definition
        self.props: dict[str, Any] = {**definition.default_props, **(props or {})}
        self.context = (
            context if isinstance(context, InheritedContext) else InheritedContext(context)
        )
        self.groups: dict[str, StyleGroup] = {
            name: StyleGroup(
                name=name,
                prop_name=get_style_prop_name(name),
                fragments=definition.initial_styles[name],
                style={},
            )
            for name in definition.group_names
        }
        self.extracted: dict[str, Any] = {}
        self._resolver = CascadeResolver(definition)
        if definition.config.debug:
            self._report(self.props)

    def _report(self, props: Mapping[str, Any]) -> None:
        from prism.validation import validate_props

        for diagnostic in validate_props(self.definition, props):
            if diagnostic.is_warning:
                logger.warning("%s", diagnostic)
            else:
                logger.info("%s", diagnostic)

    def mount(self) -> None:
        """Resolve every style group."""
        self._apply(self.definition.group_names)

    def update(self, props: Mapping[str, Any]) -> tuple[str, ...]:
        """Replace props and re-resolve affected groups; returns their names."""
        new_props = {**self.definition.default_props, **props}
        affected = tuple(
            group
            for group in self.definition.group_names
            if any(_changed(self.props, new_props, attr) for attr in self.definition.watched[group])
        )
        self.props = new_props
        if self.definition.config.debug:
            self._report(new_props)
        if affected:
            self._apply(affected)
        return affected

    def _apply(self, names: tuple[str, ...]) -> None:
        resolution = self._resolver.resolve(self.props, self.context, names)
        self.groups = {**self.groups, **resolution.groups}
        # Rebuilt from every group so a re-resolved group replaces its old outputs.
        extracted: dict[str, Any] = {}
        for group in self.groups.values():
            extracted.update(group.extracted)
        self.extracted = extracted

    def style(self, group: str = STYLE) -> Mapping[str, Any]:
        return self.groups[group].style

    @property
    def invariant(self) -> StyleInvariant | None:
        """Invariant extracted from this type's class rule at compile time."""
        ns = self.definition.namespace_for(STYLE)
        return self.definition.registry.invariant(ns.component_class_name)

    @property
    def style_values(self) -> dict[str, Mapping[str, Any]]:
        """Flattened style per external attribute name (``style``, ``label_style``)."""
        return {group.prop_name: group.style for group in self.groups.values()}

    def render_props(self) -> dict[str, Any]:
        """Props handed to the host renderer."""
        return {**self.props, **self.extracted, **self.style_values}

    def child_context(self) -> InheritedContext:
        """Context for children: parent values, ``font`` and custom overrides."""
        overrides: dict[str, Any] = {}
        font = self.props.get("font")
        if not self.definition.supports_text and font is not None:
            overrides["font"] = font
        if self.definition.child_context_fn is not None:
            custom = self.definition.child_context_fn(self.props)
            if isinstance(custom, Mapping):
                overrides.update(custom)
        return self.context.derive(**overrides)

    def __repr__(self) -> str:
        return f"StyledComponent({self.definition.name}, groups={list(self.groups)})"
