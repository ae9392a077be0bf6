"""
Typed PAYMILL resources together with their list filters and sort orders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Mapping, Optional

from .decoding import (
    Related,
    decode_bool,
    decode_enum,
    decode_int,
    decode_interval,
    decode_optional_int,
    decode_related,
    decode_related_list,
    decode_str,
    decode_timestamp,
)
from .enums import PaymentType, RefundStatus, SubscriptionStatus, TransactionStatus
from .interval import Interval
from .payloads import require_id
from .query import Filter as BaseFilter
from .query import Order as BaseOrder

__all__ = [
    "Client",
    "Offer",
    "Payment",
    "Refund",
    "Subscription",
    "SubscriptionCount",
    "Transaction",
]


# =============================================================================
# Offer
# =============================================================================


@dataclass
class SubscriptionCount:
    active: int = 0
    inactive: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SubscriptionCount":
        return cls(
            active=decode_int(data.get("active")),
            inactive=decode_int(data.get("inactive")),
        )


@dataclass
class Offer:
    """A recurring plan that clients subscribe to."""

    id: Optional[str] = None
    name: Optional[str] = None
    amount: int = 0
    interval: Optional[Interval] = None
    trial_period_days: Optional[int] = None
    currency: Optional[str] = None
    subscription_count: Optional[SubscriptionCount] = None
    app_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def amount_formatted(self) -> float:
        """``4200`` becomes ``42.0``."""
        return self.amount / 100.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Offer":
        counts = data.get("subscription_count")
        return cls(
            id=decode_str(data.get("id")),
            name=decode_str(data.get("name")),
            amount=decode_int(data.get("amount")),
            interval=decode_interval(data.get("interval")),
            trial_period_days=decode_optional_int(data.get("trial_period_days")),
            currency=decode_str(data.get("currency")),
            subscription_count=SubscriptionCount.from_dict(counts) if counts else None,
            app_id=decode_str(data.get("app_id")),
            created_at=decode_timestamp(data.get("created_at")),
            updated_at=decode_timestamp(data.get("updated_at")),
        )

    class Filter(BaseFilter):
        FIELDS = ("name", "trial_period_days", "amount", "created_at", "updated_at")

        def by_name(self, name: str) -> "Offer.Filter":
            return self._set("name", name)

        def by_trial_period_days(self, days: int) -> "Offer.Filter":
            return self._set("trial_period_days", days)

        def by_amount(self, amount: int) -> "Offer.Filter":
            return self._set("amount", amount)

        def by_amount_greater_than(self, amount: int) -> "Offer.Filter":
            return self._set_greater_than("amount", amount)

        def by_amount_less_than(self, amount: int) -> "Offer.Filter":
            return self._set_less_than("amount", amount)

        def by_created_at(self, start: datetime, end: datetime) -> "Offer.Filter":
            return self._set_range("created_at", start, end)

        def by_updated_at(self, start: datetime, end: datetime) -> "Offer.Filter":
            return self._set_range("updated_at", start, end)

    class Order(BaseOrder):
        FIELDS = ("interval", "amount", "created_at", "trial_period_days")

        def by_interval(self) -> "Offer.Order":
            return self._by("interval")

        def by_amount(self) -> "Offer.Order":
            return self._by("amount")

        def by_created_at(self) -> "Offer.Order":
            return self._by("created_at")

        def by_trial_period_days(self) -> "Offer.Order":
            return self._by("trial_period_days")

    @classmethod
    def create_filter(cls) -> "Offer.Filter":
        return cls.Filter()

    @classmethod
    def create_order(cls) -> "Offer.Order":
        return cls.Order()


# =============================================================================
# Client
# =============================================================================


@dataclass
class Client:
    """A customer record that payments and subscriptions hang off."""

    id: Optional[str] = None
    email: Optional[str] = None
    description: Optional[str] = None
    payments: List[Related["Payment"]] = field(default_factory=list)
    subscription: List[Related["Subscription"]] = field(default_factory=list)
    app_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Client":
        return cls(
            id=decode_str(data.get("id")),
            email=decode_str(data.get("email")),
            description=decode_str(data.get("description")),
            payments=decode_related_list(data.get("payment"), Payment),
            subscription=decode_related_list(data.get("subscription"), Subscription),
            app_id=decode_str(data.get("app_id")),
            created_at=decode_timestamp(data.get("created_at")),
            updated_at=decode_timestamp(data.get("updated_at")),
        )

    class Filter(BaseFilter):
        FIELDS = ("payment", "email", "description", "created_at", "updated_at")

        def by_payment(self, payment: Any) -> "Client.Filter":
            return self._set("payment", require_id(payment, "payment"))

        def by_email(self, email: str) -> "Client.Filter":
            return self._set("email", email)

        def by_description(self, description: str) -> "Client.Filter":
            return self._set("description", description)

        def by_created_at(self, start: datetime, end: datetime) -> "Client.Filter":
            return self._set_range("created_at", start, end)

        def by_updated_at(self, start: datetime, end: datetime) -> "Client.Filter":
            return self._set_range("updated_at", start, end)

    class Order(BaseOrder):
        FIELDS = ("email", "created_at")

        def by_email(self) -> "Client.Order":
            return self._by("email")

        def by_created_at(self) -> "Client.Order":
            return self._by("created_at")

    @classmethod
    def create_filter(cls) -> "Client.Filter":
        return cls.Filter()

    @classmethod
    def create_order(cls) -> "Client.Order":
        return cls.Order()


# =============================================================================
# Payment
# =============================================================================


@dataclass
class Payment:
    """A stored payment method: a credit card or a bank account."""

    id: Optional[str] = None
    type: Optional[PaymentType] = None
    client: Optional[Related[Client]] = None
    card_type: Optional[str] = None
    country: Optional[str] = None
    expire_month: int = 0
    expire_year: int = 0
    card_holder: Optional[str] = None
    last4: Optional[str] = None
    account: Optional[str] = None
    holder: Optional[str] = None
    iban: Optional[str] = None
    bic: Optional[str] = None
    app_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Payment":
        return cls(
            id=decode_str(data.get("id")),
            type=decode_enum(data.get("type"), PaymentType),
            client=decode_related(data.get("client"), Client),
            card_type=decode_str(data.get("card_type")),
            country=decode_str(data.get("country")),
            expire_month=decode_int(data.get("expire_month")),
            expire_year=decode_int(data.get("expire_year")),
            card_holder=decode_str(data.get("card_holder")),
            last4=decode_str(data.get("last4")),
            account=decode_str(data.get("account")),
            holder=decode_str(data.get("holder")),
            iban=decode_str(data.get("iban")),
            bic=decode_str(data.get("bic")),
            app_id=decode_str(data.get("app_id")),
            created_at=decode_timestamp(data.get("created_at")),
            updated_at=decode_timestamp(data.get("updated_at")),
        )

    class Filter(BaseFilter):
        FIELDS = ("card_type", "created_at")

        def by_card_type(self, card_type: str) -> "Payment.Filter":
            return self._set("card_type", card_type)

        def by_created_at(self, start: datetime, end: datetime) -> "Payment.Filter":
            return self._set_range("created_at", start, end)

    class Order(BaseOrder):
        FIELDS = ("created_at",)

        def by_created_at(self) -> "Payment.Order":
            return self._by("created_at")

    @classmethod
    def create_filter(cls) -> "Payment.Filter":
        return cls.Filter()

    @classmethod
    def create_order(cls) -> "Payment.Order":
        return cls.Order()


# =============================================================================
# Transaction
# =============================================================================


@dataclass
class Transaction:
    """A charge against a payment."""

    id: Optional[str] = None
    amount: int = 0
    origin_amount: int = 0
    currency: Optional[str] = None
    status: Optional[TransactionStatus] = None
    description: Optional[str] = None
    livemode: bool = False
    is_fraud: bool = False
    payment: Optional[Related[Payment]] = None
    client: Optional[Related[Client]] = None
    refunds: List[Related["Refund"]] = field(default_factory=list)
    response_code: int = 0
    short_id: Optional[str] = None
    app_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transaction":
        return cls(
            id=decode_str(data.get("id")),
            amount=decode_int(data.get("amount")),
            origin_amount=decode_int(data.get("origin_amount")),
            currency=decode_str(data.get("currency")),
            status=decode_enum(data.get("status"), TransactionStatus),
            description=decode_str(data.get("description")),
            livemode=decode_bool(data.get("livemode")),
            is_fraud=decode_bool(data.get("is_fraud")),
            payment=decode_related(data.get("payment"), Payment),
            client=decode_related(data.get("client"), Client),
            refunds=decode_related_list(data.get("refunds"), Refund),
            response_code=decode_int(data.get("response_code")),
            short_id=decode_str(data.get("short_id")),
            app_id=decode_str(data.get("app_id")),
            created_at=decode_timestamp(data.get("created_at")),
            updated_at=decode_timestamp(data.get("updated_at")),
        )

    class Filter(BaseFilter):
        FIELDS = (
            "client",
            "payment",
            "amount",
            "description",
            "created_at",
            "updated_at",
            "status",
        )

        def by_client(self, client: Any) -> "Transaction.Filter":
            return self._set("client", require_id(client, "client"))

        def by_payment(self, payment: Any) -> "Transaction.Filter":
            return self._set("payment", require_id(payment, "payment"))

        def by_amount(self, amount: int) -> "Transaction.Filter":
            return self._set("amount", amount)

        def by_amount_greater_than(self, amount: int) -> "Transaction.Filter":
            return self._set_greater_than("amount", amount)

        def by_amount_less_than(self, amount: int) -> "Transaction.Filter":
            return self._set_less_than("amount", amount)

        def by_description(self, description: str) -> "Transaction.Filter":
            return self._set("description", description)

        def by_status(self, status: TransactionStatus) -> "Transaction.Filter":
            return self._set("status", status.value)

        def by_created_at(self, start: datetime, end: datetime) -> "Transaction.Filter":
            return self._set_range("created_at", start, end)

        def by_updated_at(self, start: datetime, end: datetime) -> "Transaction.Filter":
            return self._set_range("updated_at", start, end)

    class Order(BaseOrder):
        FIELDS = ("created_at",)

        def by_created_at(self) -> "Transaction.Order":
            return self._by("created_at")

    @classmethod
    def create_filter(cls) -> "Transaction.Filter":
        return cls.Filter()

    @classmethod
    def create_order(cls) -> "Transaction.Order":
        return cls.Order()


# =============================================================================
# Refund
# =============================================================================


@dataclass
class Refund:
    id: Optional[str] = None
    transaction: Optional[Related[Transaction]] = None
    amount: int = 0
    status: Optional[RefundStatus] = None
    description: Optional[str] = None
    livemode: bool = False
    response_code: int = 0
    app_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Refund":
        return cls(
            id=decode_str(data.get("id")),
            transaction=decode_related(data.get("transaction"), Transaction),
            amount=decode_int(data.get("amount")),
            status=decode_enum(data.get("status"), RefundStatus),
            description=decode_str(data.get("description")),
            livemode=decode_bool(data.get("livemode")),
            response_code=decode_int(data.get("response_code")),
            app_id=decode_str(data.get("app_id")),
            created_at=decode_timestamp(data.get("created_at")),
            updated_at=decode_timestamp(data.get("updated_at")),
        )

    class Filter(BaseFilter):
        FIELDS = ("client", "transaction", "amount", "created_at")

        def by_client(self, client: Any) -> "Refund.Filter":
            return self._set("client", require_id(client, "client"))

        def by_transaction(self, transaction: Any) -> "Refund.Filter":
            return self._set("transaction", require_id(transaction, "transaction"))

        def by_amount(self, amount: int) -> "Refund.Filter":
            return self._set("amount", amount)

        def by_amount_greater_than(self, amount: int) -> "Refund.Filter":
            return self._set_greater_than("amount", amount)

        def by_amount_less_than(self, amount: int) -> "Refund.Filter":
            return self._set_less_than("amount", amount)

        def by_created_at(self, start: datetime, end: datetime) -> "Refund.Filter":
            return self._set_range("created_at", start, end)

    class Order(BaseOrder):
        FIELDS = ("transaction", "client", "amount", "created_at")

        def by_transaction(self) -> "Refund.Order":
            return self._by("transaction")

        def by_client(self) -> "Refund.Order":
            return self._by("client")

        def by_amount(self) -> "Refund.Order":
            return self._by("amount")

        def by_created_at(self) -> "Refund.Order":
            return self._by("created_at")

    @classmethod
    def create_filter(cls) -> "Refund.Filter":
        return cls.Filter()

    @classmethod
    def create_order(cls) -> "Refund.Order":
        return cls.Order()


# =============================================================================
# Subscription
# =============================================================================


@dataclass
class Subscription:
    """A client's subscription to an offer, charged through a payment."""

    id: Optional[str] = None
    offer: Optional[Related[Offer]] = None
    payment: Optional[Related[Payment]] = None
    client: Optional[Related[Client]] = None
    status: Optional[SubscriptionStatus] = None
    livemode: bool = False
    is_canceled: bool = False
    is_deleted: bool = False
    amount: int = 0
    temp_amount: Optional[int] = None
    currency: Optional[str] = None
    interval: Optional[Interval] = None
    name: Optional[str] = None
    period_of_validity: Optional[str] = None
    trial_start: Optional[datetime] = None
    trial_end: Optional[datetime] = None
    next_capture_at: Optional[datetime] = None
    canceled_at: Optional[datetime] = None
    end_of_period: Optional[datetime] = None
    app_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Subscription":
        return cls(
            id=decode_str(data.get("id")),
            offer=decode_related(data.get("offer"), Offer),
            payment=decode_related(data.get("payment"), Payment),
            client=decode_related(data.get("client"), Client),
            status=decode_enum(data.get("status"), SubscriptionStatus),
            livemode=decode_bool(data.get("livemode")),
            is_canceled=decode_bool(data.get("is_canceled")),
            is_deleted=decode_bool(data.get("is_deleted")),
            amount=decode_int(data.get("amount")),
            temp_amount=decode_optional_int(data.get("temp_amount")),
            currency=decode_str(data.get("currency")),
            interval=decode_interval(data.get("interval")),
            name=decode_str(data.get("name")),
            period_of_validity=decode_str(data.get("period_of_validity")),
            trial_start=decode_timestamp(data.get("trial_start")),
            trial_end=decode_timestamp(data.get("trial_end")),
            next_capture_at=decode_timestamp(data.get("next_capture_at")),
            canceled_at=decode_timestamp(data.get("canceled_at")),
            end_of_period=decode_timestamp(data.get("end_of_period")),
            app_id=decode_str(data.get("app_id")),
            created_at=decode_timestamp(data.get("created_at")),
            updated_at=decode_timestamp(data.get("updated_at")),
        )

    class Filter(BaseFilter):
        FIELDS = ("offer", "created_at")

        def by_offer(self, offer: Any) -> "Subscription.Filter":
            return self._set("offer", require_id(offer, "offer"))

        def by_created_at(self, start: datetime, end: datetime) -> "Subscription.Filter":
            return self._set_range("created_at", start, end)

    class Order(BaseOrder):
        FIELDS = ("offer", "canceled_at", "created_at")

        def by_offer(self) -> "Subscription.Order":
            return self._by("offer")

        def by_canceled_at(self) -> "Subscription.Order":
            return self._by("canceled_at")

        def by_created_at(self) -> "Subscription.Order":
            return self._by("created_at")

    @classmethod
    def create_filter(cls) -> "Subscription.Filter":
        return cls.Filter()

    @classmethod
    def create_order(cls) -> "Subscription.Order":
        return cls.Order()
