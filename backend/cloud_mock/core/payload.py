"""Payload Decoding: JSON parsing and per-field optional decoding.

Invariants:
    - parse_json() accepts any JSON value; parse_json_object() only objects
    - Both raise InvalidPayloadError on failure, never a bare ValueError
    - optional_string() never rejects: wrong type or absence gives the default
"""

import json
from typing import Any

from cloud_mock.core.errors import InvalidPayloadError, MissingFieldError


def parse_json(raw: bytes) -> Any:
    """Decode a request body as JSON."""
    try:
        return json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise InvalidPayloadError() from e


def parse_json_object(raw: bytes) -> dict[str, Any]:
    """Decode a request body that must be a JSON object."""
    payload = parse_json(raw)
    if not isinstance(payload, dict):
        raise InvalidPayloadError()
    return payload


def optional_string(
    payload: dict[str, Any], field: str, default: str | None = None,
) -> str | None:
    """Return payload[field] when it is a string, otherwise default."""
    value = payload.get(field)
    return value if isinstance(value, str) else default


def stringify(value: Any) -> str:
    """Text form of a JSON value: strings verbatim, others as JSON text."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def required_text(payload: dict[str, Any], field: str, message: str) -> str:
    """Return payload[field] as non-empty text or raise MissingFieldError.

    Missing and JSON null are rejected; any other value is stringified
    and must not be empty.
    """
    value = payload.get(field)
    if value is None:
        raise MissingFieldError(field, message)
    text = stringify(value)
    if not text:
        raise MissingFieldError(field, message)
    return text
