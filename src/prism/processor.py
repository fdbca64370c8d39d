"""Value rewriters applied to rule declarations and component attributes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass
class Rewrite:
    """Arguments passed to a processor rule function.

    Call ``write(value)`` to replace the attribute value, or
    ``write(value, new_name)`` to replace and rename it.
    """

    prop_name: str
    prop_value: Any
    write: Callable[..., None]
    colors: Mapping[str, Any] = field(default_factory=dict)
    fonts: Mapping[str, Any] = field(default_factory=dict)
    sizes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ProcessorRule:
    """A rewrite function bound to a declaration and/or attribute name."""

    fn: Callable[[Rewrite], None]
    style_name: str | None = None
    # Name of the attribute on a component, defaults to style_name.
    prop_style_name: str | None = None

    @property
    def prop_name(self) -> str | None:
        return self.prop_style_name or self.style_name


class Processor:
    """Rewrites matched attribute values, recursing into nested mappings."""

    def __init__(self, rules: list[ProcessorRule] | None = None) -> None:
        self._styles: dict[str, ProcessorRule] = {}
        self._props: dict[str, ProcessorRule] = {}
        if rules:
            self.collate(rules)

    def collate(self, rules: list[ProcessorRule]) -> None:
        for rule in rules:
            if rule.style_name:
                self._styles[rule.style_name] = rule
            if rule.prop_name:
                self._props[rule.prop_name] = rule

    @property
    def enabled(self) -> bool:
        return bool(self._styles or self._props)

    def get(self, name: str, is_declaration: bool) -> ProcessorRule | None:
        table = self._styles if is_declaration else self._props
        return table.get(name)

    def process(
        self, target: Mapping[str, Any], is_declaration: bool, registry: Any = None
    ) -> Mapping[str, Any]:
        """Return *target* with every matched attribute rewritten.

        *target* is never modified; with no rules it is returned as is.
        """
        if not self.enabled:
            return target
        result = dict(target)
        for name, value in target.items():
            if isinstance(value, Mapping):
                value = self.process(value, is_declaration, registry)
                result[name] = value
            rule = self.get(name, is_declaration)
            if rule is None:
                continue
            rule.fn(
                Rewrite(
                    prop_name=name,
                    prop_value=value,
                    write=_writer(result, name),
                    colors=getattr(registry, "colors", {}),
                    fonts=getattr(registry, "fonts", {}),
                    sizes=getattr(registry, "sizes", {}),
                )
            )
        return result


def _writer(target: dict[str, Any], name: str) -> Callable[..., None]:
    def write(value: Any, new_name: str | None = None) -> None:
        if new_name and new_name != name:
            target.pop(name, None)
        target[new_name or name] = value

    return write
