"""Uniform iteration over arrays, mappings and text."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from .kinds import Kind, classify


@dataclass(frozen=True)
class SequenceView:
    """An array walked as (element, index) pairs."""

    items: Sequence[Any]

    def pairs(self) -> Iterator[tuple[Any, int]]:
        for index, item in enumerate(self.items):
            yield item, index


@dataclass(frozen=True)
class MappingView:
    """A mapping walked as (value, key) pairs in insertion order."""

    items: Mapping[Any, Any]

    def pairs(self) -> Iterator[tuple[Any, Any]]:
        for key in list(self.items):
            yield self.items[key], key


@dataclass(frozen=True)
class TextView:
    """Text walked as (character, index) pairs; indexes are strings like keys."""

    text: str

    def pairs(self) -> Iterator[tuple[str, str]]:
        for index, char in enumerate(self.text):
            yield char, str(index)


Collection = Union[SequenceView, MappingView, TextView]


def as_collection(value: Any) -> Collection | None:
    """Wrap ``value`` in its iteration variant, or ``None`` if it has none."""
    kind = classify(value)
    if kind is Kind.ARRAY:
        return SequenceView(value)
    if kind is Kind.OBJECT:
        return MappingView(value)
    if kind is Kind.STRING:
        return TextView(value)
    return None


def iter_items(collection: Any) -> Iterator[tuple[Any, Any]]:
    """Yield ``(value, index_or_key)`` pairs; nothing for non-collections."""
    view = as_collection(collection)
    if view is None:
        return
    yield from view.pairs()


def each(collection: Any, visitor: Callable[[Any, Any], object]) -> None:
    """Call ``visitor(value, index_or_key)`` for every entry of ``collection``."""
    for value, key in iter_items(collection):
        visitor(value, key)
