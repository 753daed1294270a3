"""Key normalization and dot-path lookup into parsed documents."""

from __future__ import annotations

import re
from typing import Any

__all__ = ["MISSING", "dot_to_underscore", "get_value"]

_UPPER = re.compile(r"([A-Z])")
_INDEX = re.compile(r"0|[1-9][0-9]*")


class _Missing:
    """Marker for "no value", distinct from an explicit ``None``."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def dot_to_underscore(key: str) -> str:
    """Convert ``settings.sessionSecret`` to ``SETTINGS_SESSION_SECRET``."""
    return _UPPER.sub(r"_\1", key).replace(".", "_").upper()


def _key_text(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def _child(mapping: dict[Any, Any], part: str) -> Any:
    if part in mapping:
        return mapping[part]
    # YAML documents may carry int, float, bool or null keys.
    for key, value in mapping.items():
        if not isinstance(key, str) and _key_text(key) == part:
            return value
    return MISSING


def get_value(document: Any, key: str) -> Any:
    """Walk ``document`` along the dot-separated ``key``.

    Mappings are indexed by segment, also matching non-string keys by their
    text form (``404``, ``true``). Lists are indexed by a canonical decimal
    segment (``0``, ``12`` but not ``01``). Returns ``MISSING`` as soon as a
    segment cannot be followed.
    """
    current: Any = document
    for part in key.split("."):
        if isinstance(current, dict):
            current = _child(current, part)
            if current is MISSING:
                return MISSING
        elif isinstance(current, list) and _INDEX.fullmatch(part):
            index = int(part)
            if index >= len(current):
                return MISSING
            current = current[index]
        else:
            return MISSING
    return current
