"""StyleRegistry: merges themes and compiles them into a CompiledRegistry."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any

from prism.config import PrismConfig
from prism.errors import ConfigurationError, RegistryError
from prism.processor import Processor
from prism.registry.compiled import CompiledRegistry, StyleInvariant
from prism.registry.theme import Theme

logger = logging.getLogger("prism")


class StyleRegistry:
    """Builder for the colors, fonts, sizes and rule table of a theme.

    Every ``merge_*`` method keeps existing values on key collisions so a
    registry that was configured first is never overwritten by a later theme.
    ``compile()`` must run after all merges and before any lookup.
    """

    def __init__(self, theme: Any = None, *, platform: str | None = None) -> None:
        self.platform = platform or sys.platform
        self.colors: dict[str, Any] = {}
        self.fonts: dict[str, Any] = {}
        self.sizes: dict[str, Any] = {}
        self.styles: dict[str, dict[str, Any]] = {}
        self.style_invariants: dict[str, StyleInvariant] = {}
        self._compiled: CompiledRegistry | None = None
        self._compiled_key: tuple[Any, ...] | None = None
        self._dirty = True
        self._version = 0
        if theme is not None:
            self.add_theme(theme)

    @property
    def color_names(self) -> list[str]:
        return list(self.colors)

    # --- merging --------------------------------------------------------------

    def merge_colors(self, colors: Mapping[str, Any]) -> None:
        self.colors = {**colors, **self.colors}
        self._dirty = True

    def add_colors(self, colors: Mapping[str, Any]) -> None:
        """Add colors, overwriting existing names."""
        self.colors.update(colors)
        self._dirty = True

    def merge_fonts(self, fonts: Mapping[str, Any]) -> None:
        """Merge fonts, resolving platform functions for the registry platform."""
        resolved = {
            name: value(self.platform) if callable(value) else value
            for name, value in fonts.items()
        }
        self.fonts = {**resolved, **self.fonts}
        self._dirty = True

    def merge_styles(self, styles: Mapping[str, Mapping[str, Any]]) -> None:
        incoming: dict[str, dict[str, Any]] = {}
        for name, rule in styles.items():
            if not isinstance(rule, Mapping):
                raise ConfigurationError(
                    f"style rule {name!r} must be a mapping, got {type(rule).__name__}",
                    name,
                )
            incoming[name] = dict(rule)
        self.styles = {**incoming, **self.styles}
        self._dirty = True

    def merge_style_invariants(self, invariants: Mapping[str, Any]) -> None:
        incoming = {
            name: _to_invariant(entry) for name, entry in invariants.items()
        }
        self.style_invariants = {**incoming, **self.style_invariants}
        self._dirty = True

    def set_font_sizes(self, sizes: Mapping[str, Any]) -> None:
        self.sizes = dict(sizes)
        self._dirty = True

    def add_theme(self, theme: Any) -> None:
        """Validate *theme* and merge its colors, fonts and styles."""
        theme = Theme.from_value(theme)
        self.merge_colors(theme.colors)
        self.merge_fonts(theme.fonts)
        if theme.styles is None:
            return
        styles = theme.styles
        if callable(styles):
            styles = styles(
                colors=dict(self.colors),
                fonts=dict(self.fonts),
                color_names=self.color_names,
            )
            if not isinstance(styles, Mapping):
                raise ConfigurationError(
                    "theme styles function must return a mapping", "styles"
                )
        self.merge_styles(styles)

    # --- compile --------------------------------------------------------------

    @property
    def is_compiled(self) -> bool:
        return self._compiled is not None

    @property
    def compiled(self) -> CompiledRegistry:
        """The latest snapshot; raises RegistryError before compile()."""
        if self._compiled is None:
            raise RegistryError(
                "style registry has not been compiled, "
                "did you forget to call Prism.configure()?"
            )
        return self._compiled

    def compile(
        self, config: PrismConfig | None = None, processor: Processor | None = None
    ) -> CompiledRegistry:
        """Extract invariants, validate rules and freeze a snapshot.

        Returns the existing snapshot when nothing was merged since the last
        compile and the invariants, attribute whitelist and processor are the
        ones it was built with.
        """
        config = config or PrismConfig()
        key = _compile_key(config, processor)
        if self._compiled is not None and not self._dirty and key == self._compiled_key:
            return self._compiled
        invariants = [_invariant_config(entry) for entry in config.invariants]

        rules: dict[str, dict[str, Any]] = {}
        table = dict(self.style_invariants)
        for name, declaration in self.styles.items():
            rule = dict(declaration)
            if processor is not None:
                rule = dict(processor.process(rule, is_declaration=True, registry=self))
            for prop_name in list(rule):
                for invariant in invariants:
                    if prop_name == invariant["style_prop_name"]:
                        value = rule.pop(prop_name)
                        metadata = {
                            k: v for k, v in invariant.items() if k != "style_prop_name"
                        }
                        table[name] = StyleInvariant(
                            style_prop_name=prop_name, value=value, metadata=metadata
                        )
                        logger.debug("Extracted invariant %s from %s", prop_name, name)
                        break
            _validate_rule(name, rule, config.style_attributes)
            rules[name] = rule

        self._version += 1
        self._compiled = CompiledRegistry.freeze(
            version=self._version,
            colors=self.colors,
            fonts=self.fonts,
            sizes=self.sizes,
            rules=rules,
            invariants=table,
            platform=self.platform,
        )
        self._compiled_key = key
        self._dirty = False
        return self._compiled


def _compile_key(config: PrismConfig, processor: Processor | None) -> tuple[Any, ...]:
    active = processor if processor is not None and processor.enabled else None
    return (list(config.invariants), config.style_attributes, active)


def _invariant_config(entry: Any) -> Mapping[str, Any]:
    if not isinstance(entry, Mapping) or not isinstance(
        entry.get("style_prop_name"), str
    ):
        raise ConfigurationError(
            f"invariant must be a mapping with a 'style_prop_name', got {entry!r}"
        )
    return entry


def _to_invariant(entry: Any) -> StyleInvariant:
    if isinstance(entry, StyleInvariant):
        return entry
    entry = dict(_invariant_config(entry))
    name = entry.pop("style_prop_name")
    value = entry.pop("value", None)
    return StyleInvariant(style_prop_name=name, value=value, metadata=entry)


def _validate_rule(
    name: str, rule: Mapping[str, Any], allowed: frozenset[str] | None
) -> None:
    for prop_name in rule:
        if not isinstance(prop_name, str):
            raise ConfigurationError(
                f"style rule {name!r} has a non-string attribute {prop_name!r}", name
            )
        if allowed is not None and prop_name not in allowed:
            raise ConfigurationError(
                f"style rule {name!r} declares unknown style attribute {prop_name!r}",
                name,
            )
