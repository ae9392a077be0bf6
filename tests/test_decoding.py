from datetime import datetime, timezone

import pytest

from paymill_client import (
    DecodeError,
    FormatError,
    Full,
    IntervalUnit,
    Offer,
    Reference,
    Subscription,
    SubscriptionStatus,
    Transaction,
    TransactionStatus,
)
from paymill_client.core.decoding import (
    decode_bool,
    decode_int,
    decode_list,
    decode_related,
    decode_related_list,
    decode_timestamp,
)

from factories import offer_payload, subscription_payload


class TestDecodeInt:
    @pytest.mark.parametrize(
        "raw, expected",
        [(None, 0), ("42", 42), (42, 42), ("", 0), (" 7 ", 7), ("-3", -3)],
    )
    def test_accepted_tokens(self, raw, expected):
        assert decode_int(raw) == expected

    @pytest.mark.parametrize("raw", [True, False, {"a": 1}, [1], 4.5, "forty-two"])
    def test_rejected_tokens(self, raw):
        with pytest.raises(DecodeError):
            decode_int(raw)


def test_decode_bool():
    assert decode_bool(None) is False
    assert decode_bool(True) is True
    assert decode_bool("false") is False
    with pytest.raises(DecodeError):
        decode_bool("maybe")


def test_decode_timestamp():
    assert decode_timestamp(None) is None
    assert decode_timestamp(0) is None
    assert decode_timestamp("1704067200") == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_decode_timestamp_out_of_range():
    with pytest.raises(DecodeError):
        decode_timestamp(10**20)


class TestDecodeRelated:
    def test_bare_identifier_becomes_reference(self):
        related = decode_related("offer_123", Offer)

        assert isinstance(related, Reference)
        assert related.is_reference
        assert related.id == "offer_123"
        assert related.entity == Offer(id="offer_123")
        assert related.entity.amount == 0
        assert related.entity.name is None

    def test_object_becomes_full_entity(self):
        related = decode_related(offer_payload(), Offer)

        assert isinstance(related, Full)
        assert not related.is_reference
        assert related.id == "offer_40237e20a7d5a231d99b"
        assert related.entity.amount == 4200

    def test_object_failing_to_decode_falls_back_to_its_id(self):
        related = decode_related(offer_payload(interval="1 FORTNIGHT"), Offer)

        assert isinstance(related, Reference)
        assert related.id == "offer_40237e20a7d5a231d99b"

    def test_out_of_range_timestamp_falls_back_to_its_id(self):
        related = decode_related(offer_payload(created_at=10**20), Offer)

        assert isinstance(related, Reference)
        assert related.id == "offer_40237e20a7d5a231d99b"

    def test_unusable_value_still_yields_a_reference(self):
        related = decode_related([1, 2], Offer)

        assert isinstance(related, Reference)
        assert related.id is None
        assert related.entity == Offer()

    def test_null_is_absent(self):
        assert decode_related(None, Offer) is None

    def test_list_mixes_full_and_reference_items(self):
        items = decode_related_list(["offer_1", offer_payload(), None], Offer)

        assert [type(item) for item in items] == [Reference, Full]


class TestEntityDecoding:
    def test_subscription_with_embedded_and_bare_relations(self):
        subscription = Subscription.from_dict(subscription_payload())

        assert isinstance(subscription.offer, Full)
        assert subscription.offer.entity.interval.unit is IntervalUnit.WEEK
        assert subscription.offer.entity.subscription_count.active == 3
        assert isinstance(subscription.payment, Reference)
        assert subscription.payment.id == "pay_95ba26ba2c613ebb0ca8"
        assert isinstance(subscription.client, Full)
        assert subscription.client.entity.email == "lovely-client@example.com"
        assert subscription.amount == 4200
        assert subscription.interval.count == 1
        assert subscription.status is SubscriptionStatus.ACTIVE
        assert subscription.trial_start is None

    def test_offer_given_as_identifier(self):
        subscription = Subscription.from_dict(subscription_payload(offer="offer_123"))

        assert isinstance(subscription.offer, Reference)
        assert subscription.offer.entity.id == "offer_123"
        assert subscription.offer.entity.currency is None

    def test_new_server_side_status_is_tolerated(self):
        transaction = Transaction.from_dict({"id": "tran_1", "status": "on_hold", "amount": "100"})

        assert transaction.status is TransactionStatus.UNKNOWN
        assert transaction.amount == 100

    def test_malformed_interval_on_primary_entity_is_surfaced(self):
        with pytest.raises(FormatError):
            Offer.from_dict(offer_payload(interval="monthly"))

    def test_amount_formatted(self):
        assert Offer(amount=4200).amount_formatted == 42.0


class TestDecodeList:
    def test_envelope(self):
        payload = {
            "data": [offer_payload(), offer_payload(id="offer_2", amount="100")],
            "data_count": "17",
            "mode": "test",
        }

        offers = decode_list(payload, Offer)

        assert len(offers) == 2
        assert offers.data_count == 17
        assert offers.has_more
        assert [offer.id for offer in offers] == ["offer_40237e20a7d5a231d99b", "offer_2"]
        assert offers[1].amount == 100

    def test_missing_count_defaults_to_page_size(self):
        offers = decode_list({"data": [offer_payload()]}, Offer)
        assert offers.data_count == 1

    def test_item_failures_propagate(self):
        with pytest.raises(DecodeError):
            decode_list({"data": [offer_payload(amount=True)], "data_count": 1}, Offer)

    def test_out_of_range_timestamp_in_item_is_a_decode_error(self):
        with pytest.raises(DecodeError):
            decode_list({"data": [offer_payload(created_at=10**20)], "data_count": 1}, Offer)

    def test_last_page_has_no_more(self):
        payload = {"data": [offer_payload(), offer_payload(id="offer_2")], "data_count": 12}

        offers = decode_list(payload, Offer, offset=10)

        assert offers.offset == 10
        assert not offers.has_more

    def test_item_must_be_an_object(self):
        with pytest.raises(DecodeError):
            decode_list({"data": ["offer_1"], "data_count": 1}, Offer)

    def test_missing_data_member(self):
        with pytest.raises(DecodeError):
            decode_list({"error": "nope"}, Offer)
