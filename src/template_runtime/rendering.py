"""Render entry point for compiled templates."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .extensions.contracts import RenderContext, Template

if TYPE_CHECKING:
    from .environment import Environment


def render_template(
    environment: Environment,
    template: Template,
    user_vars: Mapping[str, Any] | None = None,
) -> str:
    """Build the render scope and run one compiled template against it."""
    context = RenderContext(
        environment=environment,
        variables=environment.create_context(user_vars),
    )
    return template(context)
