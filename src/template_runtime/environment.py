"""Runtime configuration shared by every render."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .exceptions import EnvironmentLockedError
from .extensions.contracts import FilterSpec, Template
from .extensions.registry import FilterRegistry
from .filters import BUILTIN_FILTERS
from .rendering import render_template

logger = logging.getLogger(__name__)


def build_filter_registry(extra: Iterable[FilterSpec] = ()) -> FilterRegistry:
    """Return a registry holding the built-in filters plus ``extra`` overrides."""
    registry = FilterRegistry()
    registry.register_many(BUILTIN_FILTERS)
    registry.register_many(extra, replace=True)
    return registry


class Environment:
    """Globals and filters available to compiled templates.

    Configure it once at startup, then render. Mutating it while a render
    is in progress, or after ``freeze()``, raises ``EnvironmentLockedError``.
    There is no locking; concurrent writers must synchronize externally.
    """

    def __init__(
        self,
        *,
        globals: Mapping[str, Any] | None = None,
        filters: FilterRegistry | None = None,
        autoescape: bool = True,
    ) -> None:
        self._globals: dict[str, Any] = dict(globals or {})
        self._filters = filters.copy() if filters is not None else build_filter_registry()
        self.autoescape = autoescape
        self._frozen = False
        self._active_renders = 0

    @property
    def globals(self) -> Mapping[str, Any]:
        return dict(self._globals)

    @property
    def filters(self) -> FilterRegistry:
        """A snapshot of the registered filters; register through the environment."""
        return self._filters.copy()

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self, action: str) -> None:
        if self._frozen:
            msg = f"cannot {action}: environment is frozen."
            raise EnvironmentLockedError(msg)
        if self._active_renders:
            msg = f"cannot {action} while a render is in progress."
            raise EnvironmentLockedError(msg)

    def set_global(self, name: str, value: Any) -> None:
        self._check_mutable(f"set global '{name}'")
        self._globals[name] = value

    def update_globals(self, values: Mapping[str, Any]) -> None:
        self._check_mutable("update globals")
        self._globals.update(values)

    def register_filter(
        self,
        name: str,
        func: Callable[..., Any],
        *,
        aliases: tuple[str, ...] = (),
        description: str = "",
        replace: bool = False,
    ) -> None:
        self._check_mutable(f"register filter '{name}'")
        self._filters.register(
            FilterSpec(name=name, func=func, description=description, aliases=aliases),
            replace=replace,
        )

    def freeze(self) -> None:
        """Make the environment read-only for the rest of its life."""
        self._frozen = True
        logger.debug("environment frozen with %d globals", len(self._globals))

    def call_filter(self, name: str, value: Any, *args: Any, **kwargs: Any) -> Any:
        return self._filters.get(name).func(value, *args, **kwargs)

    def create_context(self, user_vars: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Merge globals with ``user_vars`` into a new dict; user values win."""
        context = dict(self._globals)
        context.update(user_vars or {})
        return context

    def render(self, template: Template, user_vars: Mapping[str, Any] | None = None) -> str:
        self._active_renders += 1
        try:
            return render_template(self, template, user_vars)
        finally:
            self._active_renders -= 1
