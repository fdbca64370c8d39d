from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_SIZES: dict[str, float] = {
    "xx-small": 12,
    "x-small": 13,
    "small": 14,
    "medium": 16,
    "large": 18,
    "x-large": 22,
    "xx-large": 26,
}


@dataclass(frozen=True)
class PrismConfig:
    # None means "use the system plugins"; see prism.plugins.system_plugins().
    plugins: list[Any] | None = None
    additional_plugins: list[Any] = field(default_factory=list)
    disabled_plugins: list[str] = field(default_factory=list)
    processors: list[Any] = field(default_factory=list)
    invariants: list[dict[str, Any]] = field(default_factory=list)
    extended_properties: bool = False
    font_properties: bool = False
    color_names: bool = False
    style_attributes: frozenset[str] | None = None
    sizes: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_SIZES))
    default_font_size: float = 16
    debug: bool = False
