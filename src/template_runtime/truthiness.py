"""Template-language truthiness."""

from __future__ import annotations

from typing import Any

from .kinds import Kind, classify, is_nan


def is_truthy(value: Any) -> bool:
    """Return whether ``value`` counts as true in a template condition.

    Empty arrays and empty mappings are false; non-empty ones are true
    regardless of their contents. NaN is false like zero.
    """
    kind = classify(value)
    if kind is Kind.NULL:
        return False
    if kind is Kind.BOOLEAN:
        return value
    if kind is Kind.NUMBER:
        return not is_nan(value) and value != 0
    if kind is Kind.STRING:
        return value != ""
    if kind in (Kind.ARRAY, Kind.OBJECT):
        return len(value) > 0
    return bool(value)
