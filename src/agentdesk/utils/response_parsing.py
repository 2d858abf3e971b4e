"""Normalisation helpers for backend JSON payloads.

Some backend endpoints return nested JSON encoded as strings (e.g. an address
object serialized into a text column) and decimal amounts as strings. These
helpers turn such payloads into plain Python structures.
"""

import json
from typing import Any, Iterable


def _looks_like_json(text: str) -> bool:
    trimmed = text.strip()
    return (
        (trimmed.startswith("{") and trimmed.endswith("}"))
        or (trimmed.startswith("[") and trimmed.endswith("]"))
        or (trimmed.startswith('"') and trimmed.endswith('"') and len(trimmed) > 2)
    )


def parse_stringified_json(obj: Any) -> Any:
    """Recursively decode string values that hold JSON documents.

    Strings that do not decode are returned unchanged.
    """
    if isinstance(obj, str):
        if not _looks_like_json(obj):
            return obj
        try:
            return parse_stringified_json(json.loads(obj))
        except ValueError:
            return obj
    if isinstance(obj, list):
        return [parse_stringified_json(item) for item in obj]
    if isinstance(obj, dict):
        return {key: parse_stringified_json(value) for key, value in obj.items()}
    return obj


def _to_number(value: str) -> Any:
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return value
    # nan and inf are not amounts
    if number != number or number in (float("inf"), float("-inf")):
        return value
    return number


def convert_numeric_fields(obj: Any, numeric_fields: Iterable[str]) -> Any:
    """Convert numeric strings to numbers for the named keys, at any depth."""
    fields = frozenset(numeric_fields)
    if isinstance(obj, list):
        return [convert_numeric_fields(item, fields) for item in obj]
    if isinstance(obj, dict):
        converted = {}
        for key, value in obj.items():
            if key in fields and isinstance(value, str) and value.strip():
                converted[key] = _to_number(value)
            else:
                converted[key] = convert_numeric_fields(value, fields)
        return converted
    return obj


def parse_api_response(obj: Any, numeric_fields: Iterable[str] = ()) -> Any:
    """Decode stringified JSON, then convert the named numeric fields."""
    parsed = parse_stringified_json(obj)
    fields = tuple(numeric_fields)
    if fields:
        parsed = convert_numeric_fields(parsed, fields)
    return parsed
