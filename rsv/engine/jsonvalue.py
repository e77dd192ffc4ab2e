"""
JSON Values — Accessors over parsed JSON trees.

Documents are plain Python values as produced by ``json.load``:
dict, list, str, int, float, bool or None.
"""

from __future__ import annotations

import json
from typing import Any, Iterator


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def entries(value: dict) -> Iterator[tuple[str, Any]]:
    """(name, value) pairs of an object."""
    return iter(value.items())


def elements(value: list) -> Iterator[Any]:
    return iter(value)


def scalar_text(value: Any) -> str:
    """
    Render a scalar the way it reads in JSON.

    Strings are returned as-is, booleans as true/false, numbers in their
    JSON spelling.

    Raises:
        TypeError: If the value is null, an object or an array
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    raise TypeError(f"not a scalar: {describe(value)}")


def describe(value: Any) -> str:
    """JSON type name of a value, for messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
