"""Plugins: registration, built-in global plugins and property plugins."""

from __future__ import annotations

from typing import Any

from prism.config import PrismConfig
from prism.plugins.base import (
    Fragment,
    GlobalPlugin,
    Plugin,
    PluginContext,
    PropertyPlugin,
    Routed,
    as_fragments,
)
from prism.plugins.builtin import CLASS_NAME, MAP_PROPS_TO_STYLE
from prism.plugins.properties import EXTENDED_PROPERTY_PLUGINS, FONT_PROPERTY_PLUGINS
from prism.plugins.registry import (
    GroupPlugins,
    PluginRegistry,
    register_plugin,
    register_plugins,
)
from prism.plugins.router import ROUTER

__all__ = [
    "Fragment",
    "GlobalPlugin",
    "PropertyPlugin",
    "Plugin",
    "PluginContext",
    "Routed",
    "as_fragments",
    "GroupPlugins",
    "PluginRegistry",
    "register_plugin",
    "register_plugins",
    "DEFAULT_PLUGINS",
    "EXTENDED_PROPERTY_PLUGINS",
    "FONT_PROPERTY_PLUGINS",
    "system_plugins",
    "build_plugin_registry",
]

DEFAULT_PLUGINS: list[Any] = [
    ROUTER,
    MAP_PROPS_TO_STYLE,
    CLASS_NAME,
]


def system_plugins(config: PrismConfig) -> list[Any]:
    """The built-in plugin list selected by the configuration flags."""
    plugins = list(DEFAULT_PLUGINS)
    if config.extended_properties:
        plugins.extend(EXTENDED_PROPERTY_PLUGINS)
    if config.font_properties:
        plugins.extend(FONT_PROPERTY_PLUGINS)
    return plugins


def build_plugin_registry(config: PrismConfig) -> PluginRegistry:
    """Register system (or configured) plugins, extras, minus disabled ones."""
    registry = PluginRegistry()
    plugins = config.plugins if config.plugins is not None else system_plugins(config)
    registry.register_all(plugins)
    registry.register_all(config.additional_plugins)
    if config.disabled_plugins:
        registry = registry.without(config.disabled_plugins)
    return registry
