"""
Order progress derivation for tracking views.

Two step lists are in use. The order detail tracker only knows the delivery
stages, so ``verified``, ``paid`` and ``cancelled`` orders sit at step 0
("Order Placed"). The verification tracker covers the early stages and marks
nothing for statuses it does not list.
"""

from ..models.order import Order, OrderStatus, OrderTracking, TrackingStep

DETAIL_STEPS: list[tuple[OrderStatus, str]] = [
    (OrderStatus.PENDING, "Order Placed"),
    (OrderStatus.PROCESSING, "Processing"),
    (OrderStatus.SHIPPED, "Shipped"),
    (OrderStatus.OUT_FOR_DELIVERY, "Out for Delivery"),
    (OrderStatus.DELIVERED, "Delivered"),
]

VERIFICATION_STEPS: list[tuple[OrderStatus, str]] = [
    (OrderStatus.PENDING, "Order Received"),
    (OrderStatus.VERIFIED, "Order Verified"),
    (OrderStatus.PAID, "Payment Received"),
    (OrderStatus.PROCESSING, "Processing"),
    (OrderStatus.SHIPPED, "Shipped"),
    (OrderStatus.DELIVERED, "Delivered"),
]

STATUS_LABELS: dict[OrderStatus, str] = {
    OrderStatus.PENDING: "Pending",
    OrderStatus.PROCESSING: "Processing",
    OrderStatus.SHIPPED: "Shipped",
    OrderStatus.DELIVERED: "Delivered",
    OrderStatus.CANCELLED: "Cancelled",
}


def _index_of(steps: list[tuple[OrderStatus, str]], status: OrderStatus) -> int:
    return next((i for i, (step, _) in enumerate(steps) if step == status), -1)


def current_step_index(status: OrderStatus) -> int:
    """Position in the detail tracker, 0 for statuses it does not list"""
    return max(_index_of(DETAIL_STEPS, status), 0)


def progress_percent(status: OrderStatus) -> float:
    return current_step_index(status) * 100 / (len(DETAIL_STEPS) - 1)


def _steps(steps: list[tuple[OrderStatus, str]], index: int) -> list[TrackingStep]:
    return [
        TrackingStep(id=step, label=label, completed=i <= index, current=i == index)
        for i, (step, label) in enumerate(steps)
    ]


def tracking_steps(status: OrderStatus) -> list[TrackingStep]:
    return _steps(DETAIL_STEPS, current_step_index(status))


def verification_steps(status: OrderStatus) -> list[TrackingStep]:
    return _steps(VERIFICATION_STEPS, _index_of(VERIFICATION_STEPS, status))


def status_label(status: OrderStatus) -> str:
    return STATUS_LABELS.get(status, "Unknown")


def has_outstanding_balance(order: Order) -> bool:
    """Advance paid, balance still owed"""
    return order.is_advance_paid and not order.is_due_paid and order.due_amount > 0


def build_tracking(order: Order) -> OrderTracking:
    return OrderTracking(
        status_label=status_label(order.status),
        current_step_index=current_step_index(order.status),
        progress_percent=progress_percent(order.status),
        steps=tracking_steps(order.status),
        verification_steps=verification_steps(order.status),
        has_outstanding_balance=has_outstanding_balance(order),
    )
