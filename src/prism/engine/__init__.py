"""Resolution engine: cascade ordering, flattening and style extraction."""

from prism.engine.cascade import (
    CascadeResolver,
    Resolution,
    StyleGroup,
    extract_style_props,
    flatten,
    lookup,
)

__all__ = [
    "CascadeResolver",
    "Resolution",
    "StyleGroup",
    "extract_style_props",
    "flatten",
    "lookup",
]
