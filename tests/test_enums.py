import pytest

from paymill_client import (
    FormatError,
    Interval,
    IntervalUnit,
    PaymentType,
    RefundStatus,
    SubscriptionStatus,
    TransactionStatus,
)
from paymill_client.core.enums import EnumBaseType


@pytest.mark.parametrize(
    "enum_type",
    [IntervalUnit, PaymentType, RefundStatus, SubscriptionStatus, TransactionStatus],
)
def test_exactly_one_unknown_member(enum_type):
    assert sum(1 for member in enum_type if member.is_unknown) == 1
    assert issubclass(enum_type, EnumBaseType)


def test_from_wire_known_value():
    assert SubscriptionStatus.from_wire("expired") is SubscriptionStatus.EXPIRED
    assert SubscriptionStatus.EXPIRED.display_name == "Expired"
    assert str(TransactionStatus.PARTIAL_REFUNDED) == "partial_refunded"


def test_from_wire_unknown_value_falls_back_to_sentinel():
    member = TransactionStatus.from_wire("disputed_by_alien")
    assert member is TransactionStatus.UNKNOWN
    assert member.is_unknown


def test_from_wire_none_stays_none():
    assert IntervalUnit.from_wire(None) is None


def test_empty_string_does_not_match_the_sentinel_as_a_known_value():
    assert IntervalUnit.lookup("") is None
    with pytest.raises(FormatError):
        IntervalUnit.parse("")


def test_parse_is_strict():
    assert IntervalUnit.parse("YEAR") is IntervalUnit.YEAR
    with pytest.raises(FormatError):
        IntervalUnit.parse("FORTNIGHT")


def test_interval_exposes_its_unit_type():
    assert Interval.Unit is IntervalUnit
