"""Serialize descriptors to JSON strings."""
from __future__ import annotations

import json
from typing import Union


def to_jsonable(value) -> Union[dict, list, str, int, float, None]:
    """Convert a model (or list of models) into plain JSON data."""
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if value is None or isinstance(value, (str, int, float)):
        return value
    raise TypeError(f"Cannot serialize {type(value).__name__}")


def serialize_json(value) -> str:
    """Serialize a descriptor, property, CURIE or a list of them.

    Args:
        value: Any model exposing ``to_dict()``, a list of those, or plain strings.

    Returns:
        Pretty-printed JSON string with camelCase keys.
    """
    return json.dumps(to_jsonable(value), indent=2, ensure_ascii=False)
