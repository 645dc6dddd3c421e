"""Built-in filters.

Every filter is a pure function of its arguments. Out-of-contract input
raises ``InvalidArgumentError``; everything else degrades to a value.
"""

from __future__ import annotations

import re
from typing import Any

from .config import (
    DEFAULT_FALLBACK_VALUE,
    DEFAULT_INT_VALUE,
    DEFAULT_TRUNCATE_END,
    DEFAULT_TRUNCATE_LENGTH,
)
from .exceptions import InvalidArgumentError
from .extensions.contracts import FilterSpec
from .kinds import SCALAR_KINDS, UNDEFINED, Kind, classify, to_text
from .truthiness import is_truthy

_LEADING_INT_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


def _require_text(value: Any, *, filter_name: str) -> str:
    if classify(value) not in SCALAR_KINDS:
        msg = f"'{filter_name}' expects text, got {type(value).__name__} {value!r}."
        raise InvalidArgumentError(msg)
    return to_text(value)


def _require_count(value: Any, *, filter_name: str, argument: str) -> int:
    whole = isinstance(value, int) or (isinstance(value, float) and value.is_integer())
    if classify(value) is not Kind.NUMBER or not whole or value < 1:
        msg = f"'{filter_name}' expects a positive whole {argument}, got {value!r}."
        raise InvalidArgumentError(msg)
    return int(value)


def _require_array(value: Any, *, filter_name: str) -> list[Any]:
    if classify(value) not in (Kind.ARRAY, Kind.STRING):
        msg = f"'{filter_name}' expects a sequence, got {type(value).__name__} {value!r}."
        raise InvalidArgumentError(msg)
    return list(value)


def do_capitalize(s: Any) -> Any:
    """Uppercase the first character; falsy input is returned unchanged."""
    if not is_truthy(s):
        return s
    if not isinstance(s, str):
        msg = f"'capitalize' expects text, got {type(s).__name__} {s!r}."
        raise InvalidArgumentError(msg)
    return s[0].upper() + s[1:]


def do_batch(arr: Any, size: Any, fill_with: Any = UNDEFINED) -> list[list[Any]]:
    """Split ``arr`` into chunks of ``size``, optionally padding the last one."""
    items = _require_array(arr, filter_name="batch")
    size = _require_count(size, filter_name="batch", argument="size")

    batched = [items[start : start + size] for start in range(0, len(items), size)]
    if batched and fill_with is not UNDEFINED:
        last = batched[-1]
        last.extend([fill_with] * (size - len(last)))
    return batched


def do_default(
    value: Any = UNDEFINED,
    default_value: Any = DEFAULT_FALLBACK_VALUE,
    boolean: bool = False,
) -> Any:
    """Return ``default_value`` when ``value`` is absent (or falsy with ``boolean``)."""
    if boolean:
        return value if is_truthy(value) else default_value
    return default_value if value is UNDEFINED else value


def do_int(value: Any, default: Any = DEFAULT_INT_VALUE) -> Any:
    """Parse a leading base-10 integer from ``value``'s text."""
    match = _LEADING_INT_PATTERN.match(to_text(value))
    if match is None:
        return default
    return int(match.group(1))


def do_slice(value: Any, slices: Any, fill_with: Any = None) -> list[list[Any]]:
    """Cut ``value`` into ``slices`` pieces, longer pieces first.

    With a non-null ``fill_with``, each piece without an extra element gets one
    ``fill_with`` appended.
    """
    items = _require_array(value, filter_name="slice")
    slices = _require_count(slices, filter_name="slice", argument="slice count")

    pad = classify(fill_with) is not Kind.NULL
    per_slice, with_extra = divmod(len(items), slices)
    result: list[list[Any]] = []
    offset = 0
    for index in range(slices):
        start = offset + index * per_slice
        if index < with_extra:
            offset += 1
        end = offset + (index + 1) * per_slice
        piece = items[start:end]
        if pad and index >= with_extra:
            piece.append(fill_with)
        result.append(piece)
    return result


def do_title(s: Any) -> str:
    """Capitalize every space-separated word and lowercase the rest."""
    text = _require_text(s, filter_name="title")
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def do_truncate(
    s: Any,
    length: int = DEFAULT_TRUNCATE_LENGTH,
    killwords: bool = False,
    end: str = DEFAULT_TRUNCATE_END,
) -> str:
    """Shorten ``s`` to ``length`` characters including ``end``.

    Without ``killwords`` a word cut in half is dropped, so the result can
    be shorter than ``length``.
    """
    text = _require_text(s, filter_name="truncate")
    if len(text) <= length:
        return text

    cut = max(length - len(end), 0)
    head = text[:cut]
    if not killwords and text[cut : cut + 1] != " ":
        head = head.rpartition(" ")[0]
    return head + end


def do_first(obj: Any) -> Any:
    """First element of an array, ``UNDEFINED`` if empty, ``None`` otherwise."""
    if classify(obj) is not Kind.ARRAY:
        return None
    return obj[0] if obj else UNDEFINED


def do_last(obj: Any) -> Any:
    """Last element of an array, ``UNDEFINED`` if empty, ``None`` otherwise."""
    if classify(obj) is not Kind.ARRAY:
        return None
    return obj[-1] if obj else UNDEFINED


def do_size(obj: Any) -> int:
    """Array length or mapping key count; 0 for anything else."""
    if classify(obj) in (Kind.ARRAY, Kind.OBJECT):
        return len(obj)
    return 0


BUILTIN_FILTERS: tuple[FilterSpec, ...] = (
    FilterSpec(
        name="capitalize",
        func=do_capitalize,
        description="Uppercase the first character.",
    ),
    FilterSpec(
        name="batch",
        func=do_batch,
        description="Group items into fixed-size chunks.",
    ),
    FilterSpec(
        name="default",
        func=do_default,
        description="Fall back when a value is undefined or falsy.",
        aliases=("d",),
    ),
    FilterSpec(
        name="int",
        func=do_int,
        description="Parse a leading integer.",
    ),
    FilterSpec(
        name="slice",
        func=do_slice,
        description="Split items into a number of columns.",
    ),
    FilterSpec(
        name="title",
        func=do_title,
        description="Title-case space-separated words.",
    ),
    FilterSpec(
        name="truncate",
        func=do_truncate,
        description="Shorten text to a maximum length.",
    ),
    FilterSpec(
        name="first",
        func=do_first,
        description="First array element.",
    ),
    FilterSpec(
        name="last",
        func=do_last,
        description="Last array element.",
    ),
    FilterSpec(
        name="size",
        func=do_size,
        description="Number of array items or mapping keys.",
        aliases=("count", "length"),
    ),
)
