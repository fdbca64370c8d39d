"""Theme input model and shape validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Union

from prism.errors import ConfigurationError

StyleSource = Union[Callable[..., Mapping[str, Mapping[str, Any]]], Mapping[str, Mapping[str, Any]]]


@dataclass(frozen=True)
class Theme:
    """Colors, fonts and a style source merged into a StyleRegistry.

    ``styles`` is either a mapping of qualified rule name to attribute map or
    a function ``styles(colors=..., fonts=..., color_names=...)`` returning one.
    Font values may be functions of the platform name.
    """

    colors: Mapping[str, Any] = field(default_factory=dict)
    fonts: Mapping[str, Any] = field(default_factory=dict)
    styles: StyleSource | None = None

    @classmethod
    def from_value(cls, value: Any) -> Theme:
        """Validate a theme given as a Theme or a plain mapping."""
        if isinstance(value, Theme):
            theme = value
        elif isinstance(value, Mapping):
            unknown = set(value) - {"colors", "fonts", "styles"}
            if unknown:
                raise ConfigurationError(
                    f"unknown theme keys: {', '.join(sorted(unknown))}"
                )
            theme = cls(
                colors=value.get("colors") if value.get("colors") is not None else {},
                fonts=value.get("fonts") if value.get("fonts") is not None else {},
                styles=value.get("styles"),
            )
        else:
            raise ConfigurationError(
                f"theme must be a mapping, got {type(value).__name__}"
            )
        theme.validate()
        return theme

    def validate(self) -> None:
        if not isinstance(self.colors, Mapping):
            raise ConfigurationError("theme colors must be a mapping", "colors")
        if not isinstance(self.fonts, Mapping):
            raise ConfigurationError("theme fonts must be a mapping", "fonts")
        if self.styles is not None and not (
            callable(self.styles) or isinstance(self.styles, Mapping)
        ):
            raise ConfigurationError(
                "theme styles must be a function or a mapping", "styles"
            )
