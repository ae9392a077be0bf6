"""
Fluent builders for the filter and order parameters of list requests.

Concrete resources subclass :class:`Filter` and :class:`Order`, declare the
wire keys they recognize in ``FIELDS`` and expose ``by_*`` helpers on top of
the protected setters defined here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .errors import ValidationError

__all__ = [
    "Filter",
    "Order",
    "SortDirection",
    "SortKey",
    "to_unix_timestamp",
]


def to_unix_timestamp(value: datetime) -> int:
    """
    Integer Unix seconds for ``value``.

    Naive datetimes are interpreted in local time, aware ones by their offset.
    """
    return int(value.timestamp())


class Filter:
    """Ordered set of ``wire key -> constraint`` pairs; last write wins."""

    FIELDS: Tuple[str, ...] = ()

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}

    def _set(self, key: str, value: Any) -> "Filter":
        if key not in self.FIELDS:
            raise ValidationError(f"{type(self).__name__} does not support '{key}'")
        self._values[key] = str(value)
        return self

    def _set_greater_than(self, key: str, value: Any) -> "Filter":
        return self._set(key, f">{value}")

    def _set_less_than(self, key: str, value: Any) -> "Filter":
        return self._set(key, f"<{value}")

    def _set_range(self, key: str, start: datetime, end: datetime) -> "Filter":
        if start is None or end is None:
            raise ValidationError(f"Both bounds are required for the '{key}' range")
        return self._set(key, f"{to_unix_timestamp(start)}_{to_unix_timestamp(end)}")

    def to_params(self) -> List[Tuple[str, str]]:
        return [(key, self._values[key]) for key in self.FIELDS if key in self._values]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_params()!r})"


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortKey:
    field: str
    direction: SortDirection = SortDirection.ASC

    def to_param(self) -> str:
        return f"{self.field}_{self.direction.value}"


class Order:
    """
    Sort order for a list request: one field at most, plus a direction.
    """

    FIELDS: Tuple[str, ...] = ()

    def __init__(self) -> None:
        self._field: Optional[str] = None
        self._direction = SortDirection.ASC

    def _by(self, field: str) -> "Order":
        if field not in self.FIELDS:
            raise ValidationError(f"{type(self).__name__} cannot sort by '{field}'")
        self._field = field
        return self

    def asc(self) -> "Order":
        self._direction = SortDirection.ASC
        return self

    def desc(self) -> "Order":
        self._direction = SortDirection.DESC
        return self

    @property
    def key(self) -> Optional[SortKey]:
        if self._field is None:
            return None
        return SortKey(self._field, self._direction)

    def to_params(self) -> List[Tuple[str, str]]:
        key = self.key
        if key is None:
            return []
        return [("order", key.to_param())]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"
