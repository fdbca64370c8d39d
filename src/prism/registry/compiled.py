"""Immutable, versioned snapshot produced by StyleRegistry.compile()."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class StyleInvariant:
    """An attribute extracted from a rule at compile time.

    Attributes:
        style_prop_name: The matched attribute name.
        value: The value removed from the rule.
        metadata: Everything else declared on the invariant configuration.
    """

    style_prop_name: str
    value: Any
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CompiledRegistry:
    """Read-only lookup structure shared by every component instance."""

    version: int
    colors: Mapping[str, Any]
    fonts: Mapping[str, Any]
    sizes: Mapping[str, Any]
    rules: Mapping[str, Mapping[str, Any]]
    invariants: Mapping[str, StyleInvariant]
    platform: str = ""

    @classmethod
    def freeze(
        cls,
        *,
        version: int,
        colors: Mapping[str, Any],
        fonts: Mapping[str, Any],
        sizes: Mapping[str, Any],
        rules: Mapping[str, Mapping[str, Any]],
        invariants: Mapping[str, StyleInvariant],
        platform: str = "",
    ) -> CompiledRegistry:
        return cls(
            version=version,
            colors=MappingProxyType(dict(colors)),
            fonts=MappingProxyType(dict(fonts)),
            sizes=MappingProxyType(dict(sizes)),
            rules=MappingProxyType(
                {name: MappingProxyType(dict(rule)) for name, rule in rules.items()}
            ),
            invariants=MappingProxyType(dict(invariants)),
            platform=platform,
        )

    @property
    def color_names(self) -> tuple[str, ...]:
        return tuple(self.colors)

    def rule(self, name: str | None) -> Mapping[str, Any] | None:
        """Look up a compiled rule; absent names return None."""
        if not name:
            return None
        return self.rules.get(name)

    def invariant(self, name: str) -> StyleInvariant | None:
        return self.invariants.get(name)
