"""
Tolerant decoding of PAYMILL JSON payloads into typed values.

The API is loose about its schema: related objects are sometimes returned as
a bare identifier, numbers arrive as strings and enumerations grow new values
server side. The helpers here absorb that variance field by field while still
rejecting payloads that are malformed where it matters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import (
    Any,
    Generic,
    Iterator,
    List,
    Mapping,
    Optional,
    Type,
    TypeVar,
    Union,
)

from .enums import EnumBaseType
from .errors import DecodeError
from .interval import Interval

__all__ = [
    "Full",
    "PaymillList",
    "Reference",
    "Related",
    "decode_bool",
    "decode_entity",
    "decode_enum",
    "decode_int",
    "decode_interval",
    "decode_list",
    "decode_optional_int",
    "decode_related",
    "decode_related_list",
    "decode_str",
    "decode_timestamp",
    "unwrap_data",
]

T = TypeVar("T")
E = TypeVar("E", bound=EnumBaseType)


@dataclass(frozen=True)
class Full(Generic[T]):
    """A related entity that was returned as a complete object."""

    entity: T

    is_reference = False

    @property
    def id(self) -> Optional[str]:
        return getattr(self.entity, "id", None)


@dataclass(frozen=True)
class Reference(Generic[T]):
    """
    A related entity known only by its identifier.

    :attr:`entity` materializes a default instance of the target type with
    nothing but ``id`` populated.
    """

    id: Optional[str]
    entity_type: Type[T] = field(repr=False, compare=False)

    is_reference = True

    @property
    def entity(self) -> T:
        return self.entity_type(id=self.id)


Related = Union[Full[T], Reference[T]]


@dataclass
class PaymillList(Generic[T]):
    """One page of a list response plus the server-side total."""

    items: List[T]
    data_count: int
    offset: int = 0

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.data_count


def _reference_id(value: Any) -> Optional[str]:
    if isinstance(value, Mapping):
        value = value.get("id")
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        return None
    return str(value)


def decode_related(value: Any, entity_type: Type[T]) -> Optional[Related[T]]:
    """
    Decode an embedded related entity, falling back to a reference.

    Objects that fail to decode and scalars (the usual case being a bare
    ``"offer_..."`` id) produce a :class:`Reference`; nothing is raised.
    """
    if value is None:
        return None
    if isinstance(value, Mapping):
        try:
            return Full(entity_type.from_dict(value))  # type: ignore[attr-defined]
        except Exception as exc:
            logging.debug(
                "Falling back to a %s reference after decode failure: %s",
                entity_type.__name__,
                exc,
            )
    return Reference(_reference_id(value), entity_type)


def decode_related_list(value: Any, entity_type: Type[T]) -> List[Related[T]]:
    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]
    return [
        related
        for related in (decode_related(item, entity_type) for item in value)
        if related is not None
    ]


def decode_int(value: Any) -> int:
    """
    Decode an integer that the API may send as a number or a string.

    ``None`` and the empty string decode to ``0``.
    """
    if value is None:
        return 0
    # bool is an int subclass but never a valid integer token
    if isinstance(value, bool):
        raise DecodeError(f"Unexpected token {value!r}, expected integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError as exc:
            raise DecodeError(f"Expected integer, got {value!r}") from exc
    raise DecodeError(f"Unexpected token {value!r}, expected integer")


def decode_optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    return decode_int(value)


def decode_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise DecodeError(f"Unexpected token {value!r}, expected string")


def decode_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise DecodeError(f"Unexpected token {value!r}, expected boolean")


def decode_timestamp(value: Any) -> Optional[datetime]:
    """Unix seconds to an aware UTC datetime; null and 0 mean unset."""
    seconds = decode_int(value)
    if not seconds:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise DecodeError(f"Timestamp out of range: {value!r}") from exc


def decode_enum(value: Any, enum_type: Type[E]) -> Optional[E]:
    return enum_type.from_wire(value)


def decode_interval(value: Any) -> Optional[Interval]:
    if value is None:
        return None
    return Interval.parse(value)


def unwrap_data(payload: Any) -> Any:
    if not isinstance(payload, Mapping) or "data" not in payload:
        raise DecodeError("Response is missing the 'data' member")
    return payload["data"]


def decode_entity(data: Any, entity_type: Type[T]) -> T:
    """Decode a primary entity; failures propagate as :class:`DecodeError`."""
    if not isinstance(data, Mapping):
        raise DecodeError(f"Expected a {entity_type.__name__} object, got {data!r}")
    try:
        return entity_type.from_dict(data)  # type: ignore[attr-defined]
    except (KeyError, TypeError, ValueError, AttributeError, OverflowError) as exc:
        raise DecodeError(f"Failed to decode {entity_type.__name__}: {exc}") from exc


def decode_list(payload: Any, entity_type: Type[T], offset: int = 0) -> PaymillList[T]:
    """``offset`` is the requested page start, used by :attr:`PaymillList.has_more`."""
    items_raw = unwrap_data(payload)
    if items_raw is None:
        items_raw = []
    if not isinstance(items_raw, list):
        raise DecodeError(f"Expected a list of {entity_type.__name__}, got {items_raw!r}")
    items = [decode_entity(item, entity_type) for item in items_raw]
    if "data_count" in payload:
        total = decode_int(payload["data_count"])
    else:
        total = len(items)
    return PaymillList(items=items, data_count=total, offset=offset)
