"""Prism: configures a registry and plugins, and registers stylable types."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from prism.component import ComponentDefinition, StyledComponent, register_component
from prism.config import PrismConfig
from prism.errors import ConfigurationError, RegistryError
from prism.plugins import PluginRegistry, build_plugin_registry
from prism.processor import Processor
from prism.registry.compiled import CompiledRegistry
from prism.registry.style_registry import StyleRegistry


class StyledType:
    """Wrapper returned by ``Prism.stylable``; calling it creates instances."""

    def __init__(self, component_type: type, namespace: str = "") -> None:
        self.component_type = component_type
        self.namespace = namespace
        self.__name__ = f"Prism({component_type.__name__})"
        self._definition: ComponentDefinition | None = None

    @property
    def is_registered(self) -> bool:
        return self._definition is not None

    @property
    def definition(self) -> ComponentDefinition:
        if self._definition is None:
            raise RegistryError(
                "no style registry configured, did you forget to call Prism.configure()?",
                self.component_type.__name__,
            )
        return self._definition

    def __call__(
        self,
        props: Mapping[str, Any] | None = None,
        context: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> StyledComponent:
        component = StyledComponent(self._definition, {**(props or {}), **kwargs}, context)
        component.mount()
        return component

    def __repr__(self) -> str:
        return f"<{self.__name__}>"


class Prism:
    """Style configuration for a set of component types.

    Types declared with ``stylable`` before ``configure()`` are kept and
    registered once the registry is compiled.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.log = logger or logging.getLogger("prism")
        self.registry: CompiledRegistry | None = None
        self.config: PrismConfig | None = None
        self.plugins: PluginRegistry | None = None
        self.processor: Processor | None = None
        self.components: list[StyledType] = []

    @property
    def is_configured(self) -> bool:
        return self.registry is not None

    def stylable(self, component_type: type | None = None, *, namespace: str = "") -> Any:
        """Register *component_type*; usable as ``@prism.stylable`` or with arguments."""
        if component_type is None:
            return lambda cls: self.stylable(cls, namespace=namespace)

        style_options = getattr(component_type, "style_options", None)
        if style_options is not None and not callable(style_options):
            raise ConfigurationError(
                f"style_options for {component_type.__name__} must be a function",
                "style_options",
            )
        styled = StyledType(component_type, namespace)
        self.components.append(styled)
        if self.is_configured:
            self._register(styled)
        return styled

    def configure(
        self, registry: StyleRegistry, config: PrismConfig | None = None
    ) -> CompiledRegistry:
        """Build plugins and processors, compile *registry*, register types."""
        if not isinstance(registry, StyleRegistry):
            raise ConfigurationError("configure() expects a StyleRegistry")
        config = config or PrismConfig()
        plugins = build_plugin_registry(config)
        processor = Processor(list(config.processors))
        compiled = registry.compile(config, processor)

        self.config = config
        self.plugins = plugins
        self.processor = processor
        self.registry = compiled

        if config.debug:
            self.log.debug("Prism configured with %d plugins", len(plugins))
            for plugin in plugins:
                self.log.debug(
                    'Prism using plugin "%s" (global: %s)', plugin.name, plugin.is_global
                )

        for styled in self.components:
            self._register(styled)
        return compiled

    def _register(self, styled: StyledType) -> None:
        styled._definition = register_component(
            styled.component_type,
            registry=self.registry,  # type: ignore[arg-type]
            plugins=self.plugins,  # type: ignore[arg-type]
            config=self.config,
            processor=self.processor,
            namespace=styled.namespace,
        )
