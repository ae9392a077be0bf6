"""
Public facade for the PAYMILL client package.

The module re-exports the most useful pieces for integrators so they can
``from paymill_client import ...`` without navigating the package.
"""

from .api import create_paymill_client
from .core import (
    Client,
    ConfigError,
    DecodeError,
    FormatError,
    Full,
    HttpStatusError,
    Interval,
    IntervalUnit,
    Offer,
    Payment,
    PaymentType,
    PaymillClient,
    PaymillConfig,
    PaymillError,
    PaymillList,
    PaymillParameters,
    Reference,
    Refund,
    RefundStatus,
    Subscription,
    SubscriptionStatus,
    Transaction,
    TransactionStatus,
    Transport,
    TransportError,
    ValidationError,
    load_paymill_config,
)

__version__ = "0.1.0"

__all__ = (
    "Client",
    "ConfigError",
    "DecodeError",
    "FormatError",
    "Full",
    "HttpStatusError",
    "Interval",
    "IntervalUnit",
    "Offer",
    "Payment",
    "PaymentType",
    "PaymillClient",
    "PaymillConfig",
    "PaymillError",
    "PaymillList",
    "PaymillParameters",
    "Reference",
    "Refund",
    "RefundStatus",
    "Subscription",
    "SubscriptionStatus",
    "Transaction",
    "TransactionStatus",
    "Transport",
    "TransportError",
    "ValidationError",
    "create_paymill_client",
    "load_paymill_config",
)
