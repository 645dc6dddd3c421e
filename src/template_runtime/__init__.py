"""Runtime support for ahead-of-time compiled Jinja-style templates."""

from .environment import Environment, build_filter_registry
from .equality import is_equal
from .escaping import escape
from .exceptions import (
    EnvironmentLockedError,
    InvalidArgumentError,
    TemplateRuntimeError,
    UnknownFilterError,
)
from .extensions import FilterRegistry, FilterSpec, RenderContext, Template
from .filters import BUILTIN_FILTERS
from .iteration import MappingView, SequenceView, TextView, as_collection, each, iter_items
from .kinds import UNDEFINED, Kind, classify, to_text
from .membership import contains
from .truthiness import is_truthy

__all__ = [
    "BUILTIN_FILTERS",
    "UNDEFINED",
    "Environment",
    "EnvironmentLockedError",
    "FilterRegistry",
    "FilterSpec",
    "InvalidArgumentError",
    "Kind",
    "MappingView",
    "RenderContext",
    "SequenceView",
    "Template",
    "TemplateRuntimeError",
    "TextView",
    "UnknownFilterError",
    "as_collection",
    "build_filter_registry",
    "classify",
    "contains",
    "each",
    "escape",
    "is_equal",
    "is_truthy",
    "iter_items",
    "to_text",
]
