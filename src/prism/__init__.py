"""Prism: cascade style resolution for in-tree UI components."""

__version__ = "0.1.0"

from prism.component import (  # noqa: E402
    ComponentDefinition,
    InheritedContext,
    StyledComponent,
    register_component,
)
from prism.config import PrismConfig  # noqa: E402
from prism.core import Prism, StyledType  # noqa: E402
from prism.engine import CascadeResolver, StyleGroup  # noqa: E402
from prism.errors import ConfigurationError, PluginDefinitionError, RegistryError  # noqa: E402
from prism.plugins import GlobalPlugin, PluginRegistry, PropertyPlugin  # noqa: E402
from prism.processor import Processor, ProcessorRule  # noqa: E402
from prism.registry import CompiledRegistry, StyleRegistry, Theme  # noqa: E402

__all__ = [
    "__version__",
    "Prism",
    "StyledType",
    "PrismConfig",
    "StyleRegistry",
    "CompiledRegistry",
    "Theme",
    "PluginRegistry",
    "GlobalPlugin",
    "PropertyPlugin",
    "Processor",
    "ProcessorRule",
    "CascadeResolver",
    "StyleGroup",
    "ComponentDefinition",
    "StyledComponent",
    "InheritedContext",
    "register_component",
    "ConfigurationError",
    "RegistryError",
    "PluginDefinitionError",
]
