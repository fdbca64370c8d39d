"""Prop validation: runs all rules and reports diagnostics."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable

from prism.diagnostic import Diagnostic, Severity
from prism.validation.rules import ALL_RULES

if TYPE_CHECKING:
    from prism.component import ComponentDefinition

RuleFunc = Callable[["ComponentDefinition", Mapping[str, Any]], list[Diagnostic]]

__all__ = ["validate_props", "Diagnostic", "Severity", "ALL_RULES"]


def validate_props(
    definition: ComponentDefinition,
    props: Mapping[str, Any],
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all prop rules for *definition* and return the diagnostics."""
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(definition, props))
    return diagnostics
