"""Qualified rule names for namespaced component types and child groups.

Naming scheme:
    Label                     base class name
    com.example.Label         base class name inside a namespace
    Panel.Header              child group ``header`` of Panel
    Label:disabled            state ``disabled`` of Label
    Panel.Header:disabled     state ``disabled`` of Panel's ``header`` group
"""

from __future__ import annotations

from dataclasses import dataclass

STYLE = "style"
STYLE_SUFFIX = "_style"
STATE_SEPARATOR = ":"


def get_style_prop_name(name: str) -> str:
    """Return the external attribute name for the style group *name*."""
    if name != STYLE and not name.endswith(STYLE_SUFFIX):
        name += STYLE_SUFFIX
    return name


def child_segment(child: str) -> str:
    return child[:1].upper() + child[1:]


@dataclass(frozen=True)
class QualifiedNames:
    """The four rule-name variants for one lookup."""

    base: str
    state: str | None = None
    child: str | None = None
    child_state: str | None = None


def qualify(
    namespace: str,
    class_name: str,
    child: str | None = None,
    state: str | None = None,
) -> QualifiedNames:
    """Build the qualified rule names for a type, optional child and state."""
    base = f"{namespace}.{class_name}" if namespace else class_name
    child_name = None
    if child and child != STYLE:
        child_name = f"{base}.{child_segment(child)}"
    state_name = child_state_name = None
    if state:
        state_name = f"{base}{STATE_SEPARATOR}{state}"
        if child_name:
            child_state_name = f"{child_name}{STATE_SEPARATOR}{state}"
    return QualifiedNames(
        base=base, state=state_name, child=child_name, child_state=child_state_name
    )


@dataclass(frozen=True)
class Namespace:
    """Lookup context for one style group during one resolution pass."""

    type_name: str
    class_name: str
    namespace: str = ""
    child_name: str | None = None

    @property
    def names(self) -> QualifiedNames:
        return qualify(self.namespace, self.class_name, self.child_name)

    @property
    def component_class_name(self) -> str:
        """Rule name for this group: the child class name, else the base one."""
        names = self.names
        return names.child or names.base

    def state_class_name(self, state: str) -> str:
        """Rule name for *state* of this group (child-state for child groups)."""
        names = qualify(self.namespace, self.class_name, self.child_name, state)
        return names.child_state or names.state  # type: ignore[return-value]

    def for_child(self, child: str | None) -> Namespace:
        return Namespace(
            type_name=self.type_name,
            class_name=self.class_name,
            namespace=self.namespace,
            child_name=None if child == STYLE else child,
        )
