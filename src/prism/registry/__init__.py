"""Style registry: theme merging, compilation and compiled lookups."""

from prism.registry.compiled import CompiledRegistry, StyleInvariant
from prism.registry.style_registry import StyleRegistry
from prism.registry.theme import Theme

__all__ = ["StyleRegistry", "CompiledRegistry", "StyleInvariant", "Theme"]
