"""Core contracts between compiled templates and the runtime."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from template_runtime.equality import is_equal
from template_runtime.escaping import escape
from template_runtime.iteration import each, iter_items
from template_runtime.kinds import UNDEFINED, Kind, classify, to_text
from template_runtime.membership import contains
from template_runtime.truthiness import is_truthy

if TYPE_CHECKING:
    from template_runtime.environment import Environment


@dataclass(frozen=True)
class FilterSpec:
    """Registry metadata and callable for one filter."""

    name: str
    func: Callable[..., Any]
    description: str = ""
    aliases: tuple[str, ...] = ()

    def all_names(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)


@dataclass(frozen=True)
class RenderContext:
    """Scope and runtime helpers handed to a compiled template."""

    environment: Environment
    variables: Mapping[str, Any] = field(default_factory=dict)

    def lookup(self, name: str, default: Any = UNDEFINED) -> Any:
        """Resolve a template variable, ``UNDEFINED`` when it is not in scope."""
        return self.variables.get(name, default)

    def filter(self, name: str, value: Any, *args: Any, **kwargs: Any) -> Any:
        return self.environment.call_filter(name, value, *args, **kwargs)

    def output(self, value: Any) -> str:
        """Render an interpolated value, escaping once when autoescape is on."""
        if self.environment.autoescape:
            return escape(value)
        if classify(value) is Kind.NULL:
            return ""
        return to_text(value)

    @staticmethod
    def boolean(value: Any) -> bool:
        return is_truthy(value)

    @staticmethod
    def each(collection: Any, visitor: Callable[[Any, Any], object]) -> None:
        each(collection, visitor)

    @staticmethod
    def items(collection: Any) -> Iterator[tuple[Any, Any]]:
        return iter_items(collection)

    @staticmethod
    def is_equal(a: Any, b: Any) -> bool:
        return is_equal(a, b)

    @staticmethod
    def contains(needle: Any, haystack: Any, deep: bool = False) -> bool:
        return contains(needle, haystack, deep)

    @staticmethod
    def escape(value: Any) -> str:
        return escape(value)


class Template(Protocol):
    """Compiled template callable."""

    def __call__(self, ctx: RenderContext) -> str:
        """Produce the rendered text for one context."""
