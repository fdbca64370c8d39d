"""Validation rules for component props.

Each rule is a function taking a ComponentDefinition and a props mapping and
returning a list of Diagnostic objects. Rules never raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from prism.diagnostic import Diagnostic, Severity
from prism.namespace import get_style_prop_name

if TYPE_CHECKING:
    from prism.component import ComponentDefinition


def _describe(constraint: Any) -> str:
    if isinstance(constraint, tuple):
        return " or ".join(c.__name__ for c in constraint)
    return getattr(constraint, "__name__", repr(constraint))


def check_plugin_constraints(
    definition: ComponentDefinition, props: Mapping[str, Any]
) -> list[Diagnostic]:
    """Values bound to a property plugin should match its constraint."""
    diagnostics: list[Diagnostic] = []
    for plugin in definition.plugins.properties:
        value = props.get(plugin.name)
        if plugin.accepts(value):
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_plugin_constraints",
                severity=Severity.WARNING,
                message=(
                    f"Property '{plugin.name}' expected {_describe(plugin.constraint)} "
                    f"but got {type(value).__name__}."
                ),
                component=definition.name,
                prop_name=plugin.name,
                fix=f"Pass a {_describe(plugin.constraint)} value for '{plugin.name}'.",
            )
        )
    return diagnostics


def check_inline_styles(
    definition: ComponentDefinition, props: Mapping[str, Any]
) -> list[Diagnostic]:
    """Inline group styles should be mappings or lists of mappings."""
    diagnostics: list[Diagnostic] = []
    for group in definition.group_names:
        prop_name = get_style_prop_name(group)
        value = props.get(prop_name)
        if value is None or isinstance(value, Mapping):
            continue
        if isinstance(value, (list, tuple)) and all(
            isinstance(item, Mapping) or item is None for item in value
        ):
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_inline_styles",
                severity=Severity.WARNING,
                message=f"Inline style '{prop_name}' is a {type(value).__name__} and is ignored.",
                component=definition.name,
                prop_name=prop_name,
                fix="Pass a mapping or a list of mappings.",
            )
        )
    return diagnostics


ALL_RULES = [
    check_plugin_constraints,
    check_inline_styles,
]
