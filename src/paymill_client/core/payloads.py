"""
Helpers for constructing the form bodies sent to the PAYMILL API.

Requests are URL-encoded forms even though every response is JSON.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .errors import ValidationError
from .interval import Interval
from .query import to_unix_timestamp

__all__ = [
    "build_form_payload",
    "encode_form_value",
    "entity_id",
    "require_id",
    "require_positive",
    "require_text",
]


def entity_id(value: Any) -> Optional[str]:
    """
    Identifier of an entity, a ``Full``/``Reference`` value or a plain id.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return getattr(value, "id", None)


def require_id(value: Any, name: str) -> str:
    resource_id = entity_id(value)
    if not resource_id:
        raise ValidationError(f"{name} is required and must carry an id")
    return resource_id


def require_positive(value: Optional[int], name: str) -> int:
    if value is None or isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{name} must be a positive integer, got {value!r}")
    return value


def require_text(value: Optional[str], name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{name} must not be empty")
    return str(value)


def encode_form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return str(to_unix_timestamp(value))
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (str, int, float, Interval)):
        return str(value)
    resource_id = entity_id(value)
    if resource_id is None:
        raise ValidationError(f"Cannot encode {value!r} as a form value")
    return resource_id


def build_form_payload(values: Mapping[str, Any]) -> Dict[str, str]:
    """
    Flatten ``values`` into form fields, dropping ``None`` entries.

    Related entities are sent by id.
    """
    payload: Dict[str, str] = {}
    for key, value in values.items():
        if value is None:
            continue
        payload[key] = encode_form_value(value)
    return payload
