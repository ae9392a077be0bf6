from datetime import datetime, timezone

import pytest

from paymill_client import (
    Client,
    Full,
    Interval,
    IntervalUnit,
    Offer,
    PaymentType,
    Reference,
    ValidationError,
)
from paymill_client.core.payloads import build_form_payload, entity_id


def test_form_values_are_flattened():
    payload = build_form_payload(
        {
            "offer": Offer(id="offer_1"),
            "client": Full(Client(id="client_1")),
            "payment": Reference("pay_1", Client),
            "interval": Interval(2, IntervalUnit.WEEK),
            "type": PaymentType.DEBIT,
            "start_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "livemode": False,
            "amount": 4200,
            "description": None,
        }
    )

    assert payload == {
        "offer": "offer_1",
        "client": "client_1",
        "payment": "pay_1",
        "interval": "2 WEEK",
        "type": "debit",
        "start_at": "1704067200",
        "livemode": "false",
        "amount": "4200",
    }


def test_unencodable_value():
    with pytest.raises(ValidationError):
        build_form_payload({"offer": object()})


def test_entity_id():
    assert entity_id(None) is None
    assert entity_id("offer_1") == "offer_1"
    assert entity_id(Offer()) is None
