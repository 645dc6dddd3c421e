"""HTML escaping for text interpolation."""

from __future__ import annotations

import re
from typing import Any

from .config import ESCAPE_ENTITIES
from .kinds import Kind, classify, to_text

_ESCAPE_PATTERN = re.compile("[" + re.escape("".join(ESCAPE_ENTITIES)) + "]")


def _entity(match: re.Match[str]) -> str:
    return ESCAPE_ENTITIES[match.group(0)]


def escape(value: Any) -> str:
    """Escape the six markup-significant characters of ``value``'s text.

    ``None`` and ``UNDEFINED`` become the empty string. Text without any
    special character is returned as is.
    """
    if classify(value) is Kind.NULL:
        return ""
    text = to_text(value)
    if _ESCAPE_PATTERN.search(text) is None:
        return text
    return _ESCAPE_PATTERN.sub(_entity, text)
