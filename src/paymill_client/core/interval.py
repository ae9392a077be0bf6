"""
Billing interval values such as ``"1 MONTH"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .enums import IntervalUnit
from .errors import FormatError

__all__ = ["Interval"]


@dataclass(frozen=True)
class Interval:
    count: int
    unit: IntervalUnit

    Unit = IntervalUnit

    @classmethod
    def parse(cls, value: Any) -> "Interval":
        """
        Parse the ``"<count> <unit>"`` wire form.

        Unlike general enum fields, an unrecognized unit is rejected here.
        """
        if not isinstance(value, str):
            raise FormatError(f"Interval must be a string, got {value!r}")
        parts = value.split()
        if len(parts) != 2:
            raise FormatError(f"Interval must look like '<count> <unit>', got {value!r}")
        raw_count, raw_unit = parts
        try:
            count = int(raw_count)
        except ValueError as exc:
            raise FormatError(f"Interval count is not an integer: {raw_count!r}") from exc
        return cls(count=count, unit=IntervalUnit.parse(raw_unit))

    def __str__(self) -> str:
        return f"{self.count} {self.unit.value}"
