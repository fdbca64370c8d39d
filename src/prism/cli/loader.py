"""Import Python objects given as ``module:attribute`` references."""

from __future__ import annotations

import importlib
from typing import Any

import click

from prism.registry import StyleRegistry


def load_object(reference: str) -> Any:
    """Import ``package.module:attr`` (dotted attribute paths allowed)."""
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.BadParameter(
            f"expected 'module:attribute', got {reference!r}"
        )
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(f"cannot import {module_name!r}: {exc}") from exc
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise click.BadParameter(
                f"{module_name!r} has no attribute {attr_path!r}"
            ) from exc
    return target


def load_registry(reference: str) -> StyleRegistry:
    """Load a StyleRegistry, or build one from a theme object."""
    value = load_object(reference)
    if callable(value) and not isinstance(value, StyleRegistry):
        value = value()
    if isinstance(value, StyleRegistry):
        return value
    return StyleRegistry(value)
