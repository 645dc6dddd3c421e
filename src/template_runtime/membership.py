"""Membership tests against arrays and mapping keys."""

from __future__ import annotations

from typing import Any

from .equality import is_equal
from .kinds import SCALAR_KINDS, Kind, classify, is_nan


def same_value(a: Any, b: Any) -> bool:
    """Strict match: identity, or equal scalars of one kind (NaN matches NaN)."""
    if a is b:
        return True
    kind = classify(a)
    if kind is not classify(b) or kind not in SCALAR_KINDS:
        return False
    if is_nan(a) and is_nan(b):
        return True
    return a == b


def contains(needle: Any, haystack: Any, deep: bool = False) -> bool:
    """Return whether ``needle`` is an element of an array or a key of a mapping.

    Any other haystack yields ``False``. With ``deep`` the candidates are
    compared structurally instead of strictly.
    """
    kind = classify(haystack)
    if kind not in (Kind.ARRAY, Kind.OBJECT):
        return False

    match = is_equal if deep else same_value
    return any(match(needle, candidate) for candidate in haystack)
