"""Filter registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace as replace_fields

from template_runtime.exceptions import UnknownFilterError

from .contracts import FilterSpec

logger = logging.getLogger(__name__)


@dataclass
class FilterRegistry:
    """In-memory registry of filter specs, resolved by name at call time."""

    _specs: dict[str, FilterSpec] = field(default_factory=dict)
    _aliases: dict[str, str] = field(default_factory=dict)

    def register(self, spec: FilterSpec, *, replace: bool = False) -> None:
        name = spec.name.strip()
        if not name:
            msg = "filter name cannot be empty."
            raise ValueError(msg)
        if not callable(spec.func):
            msg = f"filter '{name}' must be callable."
            raise TypeError(msg)

        alias_keys: list[str] = []
        for alias in spec.aliases:
            alias_key = alias.strip()
            if not alias_key:
                msg = "filter alias cannot be empty."
                raise ValueError(msg)
            if alias_key == name:
                msg = f"alias '{alias_key}' duplicates filter name '{name}'."
                raise ValueError(msg)
            alias_keys.append(alias_key)

        taken = [key for key in (name, *alias_keys) if key in self]
        if taken and not replace:
            msg = f"filter name(s) already registered: {', '.join(taken)}."
            raise ValueError(msg)

        for key in taken:
            logger.debug("overriding filter '%s' with '%s'", key, name)
            self._discard(key, keep_aliases=key == name)

        if name != spec.name or tuple(alias_keys) != spec.aliases:
            spec = replace_fields(spec, name=name, aliases=tuple(alias_keys))
        self._specs[name] = spec
        for alias_key in alias_keys:
            self._aliases[alias_key] = name

    def register_many(self, specs: Iterable[FilterSpec], *, replace: bool = False) -> None:
        for spec in specs:
            self.register(spec, replace=replace)

    def _discard(self, key: str, *, keep_aliases: bool) -> None:
        if key in self._aliases:
            del self._aliases[key]
            return
        self._specs.pop(key, None)
        if keep_aliases:
            return
        for alias_key in [alias for alias, owner in self._aliases.items() if owner == key]:
            del self._aliases[alias_key]

    def resolve_name(self, name: str) -> str:
        if name in self._specs:
            return name
        if name in self._aliases:
            return self._aliases[name]
        valid = ", ".join(sorted(self.filter_names()))
        msg = f"unknown filter '{name}'. Valid filters: {valid}."
        raise UnknownFilterError(msg)

    def get(self, name: str) -> FilterSpec:
        return self._specs[self.resolve_name(name)]

    def list_specs(self) -> tuple[FilterSpec, ...]:
        return tuple(self._specs.values())

    def filter_names(self) -> tuple[str, ...]:
        return tuple(self._specs)

    def copy(self) -> FilterRegistry:
        return FilterRegistry(dict(self._specs), dict(self._aliases))

    def __contains__(self, name: object) -> bool:
        return name in self._specs or name in self._aliases
