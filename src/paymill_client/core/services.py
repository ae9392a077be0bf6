"""
Resource services: generic CRUD plus the per-resource creation helpers.

Every service talks to the API through a transport returning
``(status, body text)``; requests are form encoded, responses are JSON.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Generic, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from .decoding import PaymillList, decode_entity, decode_list, unwrap_data
from .errors import DecodeError, HttpStatusError, ValidationError
from .interval import Interval
from .models import Client, Offer, Payment, Refund, Subscription, Transaction
from .payloads import (
    build_form_payload,
    require_id,
    require_positive,
    require_text,
)
from .query import Filter, Order

__all__ = [
    "ClientService",
    "OfferService",
    "PaymentService",
    "RefundService",
    "ResourceService",
    "SubscriptionService",
    "TransactionService",
]

T = TypeVar("T")

_NOT_FOUND = 404


def _parse_json(text: str) -> Any:
    if not text or not text.strip():
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid JSON response: {text[:200]}") from exc


def _status_error(status: int, text: str) -> HttpStatusError:
    try:
        payload = json.loads(text) if text else None
    except json.JSONDecodeError:
        payload = None

    message = f"PAYMILL responded with {status}"
    details = payload if isinstance(payload, dict) else None
    if details:
        # "error" is either a message or a per-field mapping
        error_field = details.get("error")
        if isinstance(error_field, str):
            message = f"{message}: {error_field}"
        elif error_field:
            message = f"{message}: {json.dumps(error_field, sort_keys=True)}"
    return HttpStatusError(message, status=status, body=text, details=details)


class ResourceService(Generic[T]):
    """
    CRUD access to one PAYMILL resource collection.

    Subclasses pin ``resource`` (the path segment) and ``entity_type``.
    """

    resource: str = ""
    entity_type: Type[T]

    def __init__(
        self,
        transport: Any,
        resource: Optional[str] = None,
        entity_type: Optional[Type[T]] = None,
    ) -> None:
        self.transport = transport
        if resource is not None:
            self.resource = resource
        if entity_type is not None:
            self.entity_type = entity_type

    def _path(self, resource_id: Optional[str] = None) -> str:
        if resource_id is None:
            return self.resource
        return f"{self.resource}/{resource_id}"

    def _send(
        self,
        method: str,
        path: str,
        *,
        query: Optional[List[Tuple[str, str]]] = None,
        body: Optional[Mapping[str, str]] = None,
    ) -> Any:
        status, text = self.transport.request(method, path, query, body)
        if not 200 <= status < 300:
            raise _status_error(status, text)
        return _parse_json(text)

    def _decode_one(self, payload: Any) -> T:
        return decode_entity(unwrap_data(payload), self.entity_type)

    def list(
        self,
        filter: Optional[Filter] = None,
        order: Optional[Order] = None,
        count: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> PaymillList[T]:
        """
        Fetch one page. Unset arguments are left out of the query so the
        server applies its own defaults.
        """
        params: List[Tuple[str, str]] = []
        if filter is not None:
            params.extend(filter.to_params())
        if order is not None:
            params.extend(order.to_params())
        if count is not None:
            params.append(("count", str(count)))
        if offset is not None:
            params.append(("offset", str(offset)))
        payload = self._send("GET", self._path(), query=params or None)
        return decode_list(payload, self.entity_type, offset=offset or 0)

    def get(self, resource_id: Any) -> T:
        path = self._path(require_id(resource_id, "id"))
        return self._decode_one(self._send("GET", path))

    def create(self, body: Mapping[str, Any]) -> T:
        payload = self._send("POST", self._path(), body=build_form_payload(body))
        return self._decode_one(payload)

    def update(self, resource_id: Any, body: Mapping[str, Any]) -> T:
        path = self._path(require_id(resource_id, "id"))
        payload = self._send("PUT", path, body=build_form_payload(body))
        return self._decode_one(payload)

    def delete(self, resource_id: Any) -> bool:
        """
        Delete a resource. Returns ``False`` when it was already gone.
        """
        path = self._path(require_id(resource_id, "id"))
        status, text = self.transport.request("DELETE", path, None, None)
        if status == _NOT_FOUND:
            return False
        if not 200 <= status < 300:
            raise _status_error(status, text)
        return True


class OfferService(ResourceService[Offer]):
    resource = "offers"
    entity_type = Offer

    def create_offer(
        self,
        amount: int,
        currency: str,
        interval: Union[Interval, str],
        name: str,
        trial_period_days: Optional[int] = None,
    ) -> Offer:
        require_positive(amount, "amount")
        require_text(currency, "currency")
        require_text(name, "name")
        if interval is None:
            raise ValidationError("interval is required")
        if not isinstance(interval, Interval):
            interval = Interval.parse(interval)
        return self.create(
            {
                "amount": amount,
                "currency": currency,
                "interval": interval,
                "name": name,
                "trial_period_days": trial_period_days,
            }
        )

    def update_offer(self, offer: Offer) -> Offer:
        """Only the name of an offer can be changed."""
        return self.update(require_id(offer, "offer"), {"name": offer.name})


class SubscriptionService(ResourceService[Subscription]):
    resource = "subscriptions"
    entity_type = Subscription

    def create(self, body: Union[Subscription, Mapping[str, Any]]) -> Subscription:
        """
        Create from a :class:`Subscription` or a raw field mapping.

        The offer and the payment must be present either way.
        """
        if isinstance(body, Subscription):
            body = {
                "offer": body.offer,
                "payment": body.payment,
                "client": body.client,
                "amount": body.amount or None,
                "currency": body.currency,
                "interval": body.interval,
                "name": body.name,
                "period_of_validity": body.period_of_validity,
                "start_at": body.trial_start,
            }
        fields = dict(body)
        fields["offer"] = require_id(fields.get("offer"), "offer")
        fields["payment"] = require_id(fields.get("payment"), "payment")
        return super().create(fields)

    def create_with_offer_and_payment(
        self,
        offer: Any,
        payment: Any,
        trial_start: Optional[datetime] = None,
    ) -> Subscription:
        """
        Subscribe the payment's client to ``offer``.

        ``offer`` and ``payment`` may be entities or plain ids.
        """
        return self.create(
            {
                "offer": require_id(offer, "offer"),
                "payment": require_id(payment, "payment"),
                "start_at": trial_start,
            }
        )

    def create_with_offer_payment_and_client(
        self,
        offer: Any,
        payment: Any,
        client: Any,
        trial_start: Optional[datetime] = None,
    ) -> Subscription:
        return self.create(
            {
                "offer": require_id(offer, "offer"),
                "payment": require_id(payment, "payment"),
                "client": require_id(client, "client"),
                "start_at": trial_start,
            }
        )


class ClientService(ResourceService[Client]):
    resource = "clients"
    entity_type = Client

    def create_client(
        self,
        email: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Client:
        return self.create({"email": email, "description": description})

    def update_client(self, client: Client) -> Client:
        return self.update(
            require_id(client, "client"),
            {"email": client.email, "description": client.description},
        )


class PaymentService(ResourceService[Payment]):
    resource = "payments"
    entity_type = Payment

    def create_with_token(self, token: str, client: Any = None) -> Payment:
        require_text(token, "token")
        fields = {"token": token}
        if client is not None:
            fields["client"] = require_id(client, "client")
        return self.create(fields)


class TransactionService(ResourceService[Transaction]):
    resource = "transactions"
    entity_type = Transaction

    def _charge(
        self,
        source: Mapping[str, str],
        amount: int,
        currency: str,
        description: Optional[str],
        client: Any,
    ) -> Transaction:
        require_positive(amount, "amount")
        require_text(currency, "currency")
        fields = dict(source)
        fields.update({"amount": amount, "currency": currency, "description": description})
        if client is not None:
            fields["client"] = require_id(client, "client")
        return self.create(fields)

    def create_with_token(
        self,
        token: str,
        amount: int,
        currency: str,
        description: Optional[str] = None,
        client: Any = None,
    ) -> Transaction:
        source = {"token": require_text(token, "token")}
        return self._charge(source, amount, currency, description, client)

    def create_with_payment(
        self,
        payment: Any,
        amount: int,
        currency: str,
        description: Optional[str] = None,
        client: Any = None,
    ) -> Transaction:
        source = {"payment": require_id(payment, "payment")}
        return self._charge(source, amount, currency, description, client)

    def update_description(self, transaction: Transaction) -> Transaction:
        return self.update(
            require_id(transaction, "transaction"),
            {"description": transaction.description},
        )


class RefundService(ResourceService[Refund]):
    resource = "refunds"
    entity_type = Refund

    def refund_transaction(
        self,
        transaction: Any,
        amount: int,
        description: Optional[str] = None,
    ) -> Refund:
        """
        Refund ``amount`` (in cents) of a transaction.

        Refunds are created under ``refunds/<transaction id>``.
        """
        transaction_id = require_id(transaction, "transaction")
        require_positive(amount, "amount")
        payload = self._send(
            "POST",
            self._path(transaction_id),
            body=build_form_payload({"amount": amount, "description": description}),
        )
        return self._decode_one(payload)
