"""
Order payments.

Charges go through a gateway and, on success, are written back with a single
``update_order_status`` call. Only one charge per order may be in flight.
"""

import logging
from typing import Optional

from ..core.numbers import round_half_up
from ..database.orders import OrderStore
from ..models.order import Order, OrderPatch, OrderStatus, PaymentStatus
from .payment_gateway import PaymentGateway, PaymentResult
from .tracking import has_outstanding_balance

logger = logging.getLogger(__name__)

AMOUNT_TOLERANCE = 0.005


class PaymentError(Exception):
    """Base class for payment errors."""


class OrderNotFoundError(PaymentError):
    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order {order_id} not found")
        self.order_id = order_id


class PaymentInProgressError(PaymentError):
    def __init__(self, order_id: str) -> None:
        super().__init__(f"A payment for order {order_id} is already being processed")
        self.order_id = order_id


class OrderAlreadySettledError(PaymentError):
    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order {order_id} is already fully paid")
        self.order_id = order_id


class AdvanceAlreadyPaidError(PaymentError):
    def __init__(self, order_id: str) -> None:
        super().__init__(f"The advance for order {order_id} has already been paid")
        self.order_id = order_id


class NoOutstandingBalanceError(PaymentError):
    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order {order_id} has no outstanding balance")
        self.order_id = order_id


class PaymentAmountMismatchError(PaymentError):
    def __init__(self, expected: float, actual: float) -> None:
        super().__init__(f"Payment amount {actual} does not match the amount due {expected}")
        self.expected = expected
        self.actual = actual


class PaymentFailedError(PaymentError):
    def __init__(self, result: PaymentResult) -> None:
        super().__init__(result.error_message or "Payment processing failed")
        self.result = result


class PaymentProcessor:
    """Collects advance and balance payments for orders"""

    def __init__(
        self,
        order_store: OrderStore,
        gateway: PaymentGateway,
        advance_rate: float = 0.3,
    ) -> None:
        self.order_store = order_store
        self.gateway = gateway
        self.advance_rate = advance_rate
        self._in_flight: set[str] = set()

    def is_processing(self, order_id: str) -> bool:
        return order_id in self._in_flight

    def advance_amount(self, order: Order) -> float:
        return round_half_up(order.total * self.advance_rate)

    async def pay_advance(self, order_id: str) -> tuple[Order, PaymentResult]:
        """Charge the advance and record it; the order becomes partially paid"""
        order = self._get_order(order_id)
        if order.payment_status == PaymentStatus.PAID or order.is_due_paid:
            raise OrderAlreadySettledError(order_id)
        if order.is_advance_paid:
            raise AdvanceAlreadyPaidError(order_id)

        amount = self.advance_amount(order)
        result = await self._charge(order, amount)

        self.order_store.update_order_status(
            order_id,
            OrderStatus.PAID,
            OrderPatch(
                advance_paid=amount,
                due_amount=round(order.total - amount, 2),
                is_advance_paid=True,
            ),
        )
        return self._get_order(order_id), result

    async def pay_due(
        self,
        order_id: str,
        amount: Optional[float] = None,
    ) -> tuple[Order, PaymentResult]:
        """Charge the outstanding balance and settle the order"""
        order = self._get_order(order_id)
        if order.payment_status == PaymentStatus.PAID or order.is_due_paid:
            raise OrderAlreadySettledError(order_id)
        if not has_outstanding_balance(order):
            raise NoOutstandingBalanceError(order_id)
        if amount is not None and abs(amount - order.due_amount) > AMOUNT_TOLERANCE:
            raise PaymentAmountMismatchError(expected=order.due_amount, actual=amount)

        result = await self._charge(order, order.due_amount)

        self.order_store.update_order_status(
            order_id,
            OrderStatus.PAID,
            OrderPatch(
                payment_status=PaymentStatus.PAID,
                is_due_paid=True,
                due_amount=0,
            ),
        )
        return self._get_order(order_id), result

    def _get_order(self, order_id: str) -> Order:
        order = self.order_store.get_order(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def _charge(self, order: Order, amount: float) -> PaymentResult:
        if order.id in self._in_flight:
            raise PaymentInProgressError(order.id)

        self._in_flight.add(order.id)
        try:
            result = await self.gateway.charge(amount, reference=order.order_number)
        finally:
            self._in_flight.discard(order.id)

        if not result.succeeded:
            logger.warning(f"Payment of {amount} for order {order.id} failed: {result.error_message}")
            raise PaymentFailedError(result)

        logger.info(
            f"Payment of {amount} for order {order.id} succeeded via {self.gateway.name}: "
            f"{result.transaction_id}"
        )
        return result
