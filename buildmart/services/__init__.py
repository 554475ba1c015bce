# Services

from .checkout import OrderSummary, summarize, build_order_patch
from .payment_gateway import (
    MockPaymentGateway,
    PaymentGateway,
    PaymentOutcome,
    PaymentResult,
    get_payment_gateway,
)
from .payments import (
    PaymentProcessor,
    PaymentError,
    OrderNotFoundError,
    PaymentInProgressError,
    OrderAlreadySettledError,
    AdvanceAlreadyPaidError,
    NoOutstandingBalanceError,
    PaymentAmountMismatchError,
    PaymentFailedError,
)
from .tracking import build_tracking

__all__ = [
    "OrderSummary",
    "summarize",
    "build_order_patch",
    "MockPaymentGateway",
    "PaymentGateway",
    "PaymentOutcome",
    "PaymentResult",
    "get_payment_gateway",
    "PaymentProcessor",
    "PaymentError",
    "OrderNotFoundError",
    "PaymentInProgressError",
    "OrderAlreadySettledError",
    "AdvanceAlreadyPaidError",
    "NoOutstandingBalanceError",
    "PaymentAmountMismatchError",
    "PaymentFailedError",
    "build_tracking",
]
