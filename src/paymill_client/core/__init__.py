"""
Core primitives: configuration, transport, query building, decoding and the
resource services built on top of them.
"""

from .client import PaymillClient, RequestsTransport, Transport
from .config import PaymillConfig, PaymillParameters, load_paymill_config
from .decoding import Full, PaymillList, Reference, Related
from .enums import (
    EnumBaseType,
    IntervalUnit,
    PaymentType,
    RefundStatus,
    SubscriptionStatus,
    TransactionStatus,
)
from .environment import PaymillEnvironment, build_environment, read_env_file
from .errors import (
    ConfigError,
    DecodeError,
    FormatError,
    HttpStatusError,
    PaymillError,
    TransportError,
    ValidationError,
)
from .interval import Interval
from .models import (
    Client,
    Offer,
    Payment,
    Refund,
    Subscription,
    SubscriptionCount,
    Transaction,
)
from .query import Filter, Order, SortDirection, SortKey
from .services import (
    ClientService,
    OfferService,
    PaymentService,
    RefundService,
    ResourceService,
    SubscriptionService,
    TransactionService,
)

__all__ = [
    "Client",
    "ClientService",
    "ConfigError",
    "DecodeError",
    "EnumBaseType",
    "Filter",
    "FormatError",
    "Full",
    "HttpStatusError",
    "Interval",
    "IntervalUnit",
    "Offer",
    "OfferService",
    "Order",
    "Payment",
    "PaymentService",
    "PaymentType",
    "PaymillClient",
    "PaymillConfig",
    "PaymillEnvironment",
    "PaymillError",
    "PaymillList",
    "PaymillParameters",
    "Reference",
    "Refund",
    "RefundService",
    "RefundStatus",
    "Related",
    "RequestsTransport",
    "ResourceService",
    "SortDirection",
    "SortKey",
    "Subscription",
    "SubscriptionCount",
    "SubscriptionService",
    "SubscriptionStatus",
    "Transaction",
    "TransactionService",
    "TransactionStatus",
    "Transport",
    "TransportError",
    "ValidationError",
    "build_environment",
    "load_paymill_config",
    "read_env_file",
]
