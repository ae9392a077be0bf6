import pytest

from paymill_client import FormatError, Interval, IntervalUnit


@pytest.mark.parametrize(
    "wire, count, unit",
    [
        ("1 MONTH", 1, IntervalUnit.MONTH),
        ("3 DAY", 3, IntervalUnit.DAY),
        ("2  WEEK", 2, IntervalUnit.WEEK),
    ],
)
def test_parse(wire, count, unit):
    interval = Interval.parse(wire)
    assert interval.count == count
    assert interval.unit is unit


@pytest.mark.parametrize("wire", ["abc", "x MONTH", "1 FORTNIGHT", "1 MONTH extra", "", 12])
def test_parse_rejects_malformed_values(wire):
    with pytest.raises(FormatError):
        Interval.parse(wire)


def test_str_renders_wire_form():
    assert str(Interval(6, IntervalUnit.MONTH)) == "6 MONTH"
