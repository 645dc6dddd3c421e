"""Structural equality across arrays and mappings."""

from __future__ import annotations

from typing import Any

from .kinds import SCALAR_KINDS, Kind, classify


def is_equal(a: Any, b: Any) -> bool:
    """Compare two values structurally.

    Values of different kinds are never equal, so ``1`` does not equal
    ``"1"`` and a list never equals a dict. Arrays compare position by
    position; mappings need the same key count and every key of ``a``
    present in ``b`` with an equal value.
    """
    if a is b:
        return True

    kind = classify(a)
    if kind is not classify(b):
        return False

    if kind is Kind.ARRAY:
        if len(a) != len(b):
            return False
        return all(is_equal(item_a, item_b) for item_a, item_b in zip(a, b))

    if kind is Kind.OBJECT:
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b or not is_equal(value, b[key]):
                return False
        return True

    if kind in SCALAR_KINDS:
        return a == b

    return False
