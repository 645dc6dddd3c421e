"""Extension surface: filter registration and render contracts."""

from .contracts import FilterSpec, RenderContext, Template
from .registry import FilterRegistry

__all__ = [
    "FilterRegistry",
    "FilterSpec",
    "RenderContext",
    "Template",
]
