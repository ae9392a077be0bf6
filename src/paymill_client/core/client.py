"""
HTTP client helpers for the PAYMILL REST API.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Protocol, Sequence, Tuple, runtime_checkable

import requests

from .config import PaymillConfig
from .errors import TransportError
from .services import (
    ClientService,
    OfferService,
    PaymentService,
    RefundService,
    SubscriptionService,
    TransactionService,
)

__all__ = [
    "PaymillClient",
    "RequestsTransport",
    "Transport",
]

QueryParams = Sequence[Tuple[str, str]]


@runtime_checkable
class Transport(Protocol):
    """
    Executes one logical request and hands back ``(status, body text)``.
    """

    def request(
        self,
        method: str,
        path: str,
        query: Optional[QueryParams] = None,
        body: Optional[Mapping[str, str]] = None,
    ) -> Tuple[int, str]:
        ...


class RequestsTransport:
    """
    :class:`Transport` backed by a :class:`requests.Session`.

    Bodies go out URL-encoded; authentication is HTTP Basic with the API key
    as user name and an empty password.
    """

    def __init__(
        self,
        config: PaymillConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def _build_url(self, path: str) -> str:
        return f"{self.config.api_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        query: Optional[QueryParams] = None,
        body: Optional[Mapping[str, str]] = None,
    ) -> Tuple[int, str]:
        url = self._build_url(path)
        if method == "GET":
            logging.debug("Requesting %s %s", method, url)
        else:
            logging.info("Submitting %s request to %s", method, url)

        try:
            response = self.session.request(
                method,
                url,
                params=list(query) if query else None,
                data=dict(body) if body is not None else None,
                auth=self.config.auth,
                headers={"Accept": "application/json"},
                timeout=self.config.timeout_seconds,
            )
        except requests.Timeout as exc:
            raise TransportError(
                f"Request to {url} timed out after {self.config.timeout_seconds} seconds"
            ) from exc
        except requests.RequestException as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        return response.status_code, response.text


class PaymillClient:
    """
    Entry point bundling one service per PAYMILL resource.
    """

    def __init__(
        self,
        config: PaymillConfig,
        *,
        session: Optional[requests.Session] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self.config = config
        self.transport = transport or RequestsTransport(config, session=session)
        self.offers = OfferService(self.transport)
        self.subscriptions = SubscriptionService(self.transport)
        self.clients = ClientService(self.transport)
        self.payments = PaymentService(self.transport)
        self.transactions = TransactionService(self.transport)
        self.refunds = RefundService(self.transport)
