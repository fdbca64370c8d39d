"""Diagnostic model: structured findings about component props."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about the props passed to a styled component.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        component: Name of the component type.
        prop_name: The attribute involved, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    component: str | None = None
    prop_name: str | None = None
    fix: str | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.component and self.prop_name:
            location = f" [{self.component}.{self.prop_name}]"
        elif self.component:
            location = f" [{self.component}]"
        return f"{self.severity.value}{location}: {self.message}"
