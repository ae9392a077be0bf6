"""
Closed value sets returned by the PAYMILL API.

The API adds new values from time to time, so every set carries one member
flagged as unknown which decoding falls back to instead of failing.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Type, TypeVar

from .errors import FormatError

__all__ = [
    "EnumBaseType",
    "IntervalUnit",
    "PaymentType",
    "RefundStatus",
    "SubscriptionStatus",
    "TransactionStatus",
]

E = TypeVar("E", bound="EnumBaseType")


class EnumBaseType(Enum):
    """
    Enum whose members are ``(wire value, display name[, is_unknown])`` tuples.
    """

    def __new__(cls, wire_value: str, display_name: str, is_unknown: bool = False):
        member = object.__new__(cls)
        member._value_ = wire_value
        member.display_name = display_name
        member.is_unknown = is_unknown
        return member

    def __str__(self) -> str:
        return self.value

    @classmethod
    def unknown(cls: Type[E]) -> E:
        for member in cls:
            if member.is_unknown:
                return member
        raise TypeError(f"{cls.__name__} declares no unknown member")

    @classmethod
    def lookup(cls: Type[E], value: Any) -> Optional[E]:
        """Return the known member for ``value`` or ``None``."""
        wire = str(value)
        for member in cls:
            if not member.is_unknown and member.value == wire:
                return member
        return None

    @classmethod
    def from_wire(cls: Type[E], value: Any) -> Optional[E]:
        """
        Tolerant lookup: unrecognized values map to the unknown member.

        ``None`` stays ``None`` so absent fields remain distinguishable.
        """
        if value is None:
            return None
        member = cls.lookup(value)
        return member if member is not None else cls.unknown()

    @classmethod
    def parse(cls: Type[E], value: Any) -> E:
        """Strict lookup, raising :class:`FormatError` for unknown values."""
        member = cls.lookup(value) if value is not None else None
        if member is None:
            raise FormatError(f"Invalid value for {cls.__name__}: {value!r}")
        return member


class IntervalUnit(EnumBaseType):
    DAY = ("DAY", "Day")
    WEEK = ("WEEK", "Week")
    MONTH = ("MONTH", "Month")
    YEAR = ("YEAR", "Year")
    UNKNOWN = ("", "Unknown", True)


class SubscriptionStatus(EnumBaseType):
    ACTIVE = ("active", "Active")
    INACTIVE = ("inactive", "Inactive")
    EXPIRED = ("expired", "Expired")
    FAILED = ("failed", "Failed")
    UNKNOWN = ("", "Unknown", True)


class PaymentType(EnumBaseType):
    CREDITCARD = ("creditcard", "Credit card")
    DEBIT = ("debit", "Direct debit")
    UNKNOWN = ("", "Unknown", True)


class TransactionStatus(EnumBaseType):
    OPEN = ("open", "Open")
    PENDING = ("pending", "Pending")
    CLOSED = ("closed", "Closed")
    FAILED = ("failed", "Failed")
    PARTIAL_REFUNDED = ("partial_refunded", "Partially refunded")
    REFUNDED = ("refunded", "Refunded")
    PREAUTHORIZE = ("preauthorize", "Preauthorized")
    CHARGEBACK = ("chargeback", "Chargeback")
    UNKNOWN = ("", "Unknown", True)


class RefundStatus(EnumBaseType):
    OPEN = ("open", "Open")
    REFUNDED = ("refunded", "Refunded")
    FAILED = ("failed", "Failed")
    UNKNOWN = ("", "Unknown", True)
