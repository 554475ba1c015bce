"""Order storage for the marketplace"""

import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Optional

from ..models.order import Order, OrderPatch, OrderStatus, PaymentStatus

logger = logging.getLogger(__name__)

# Fields compared to decide whether an update changes anything
TRACKED_FIELDS = (
    "status",
    "advance_paid",
    "due_amount",
    "is_advance_paid",
    "is_due_paid",
    "payment_status",
    "tracking_number",
    "carrier",
    "shipping_address",
    "items",
)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class OrderStore:
    """
    In-memory order storage.

    Orders are kept in creation order. Stored orders are immutable; an update
    builds a new order and a new list, leaving every other entry (and the old
    list) untouched so callers can detect writes by identity. Orders are not
    persisted and do not survive a restart.
    """

    def __init__(self):
        self.orders: list[Order] = []

    def add_order(self, order: Optional[OrderPatch] = None) -> Order:
        """Create an order from a partial, filling in defaults"""
        order = order or OrderPatch()
        now = _now_iso()
        generated_id = uuid.uuid4().hex
        generated_number = f"ORD-{int(time.time() * 1000)}"

        fields = {
            "id": generated_id,
            "order_number": generated_number,
            "status": OrderStatus.PENDING,
            "payment_status": PaymentStatus.PENDING,
            "items": [],
            "order_date": now,
            "created_at": now,
        }
        fields.update(order.model_dump(exclude_unset=True, exclude_none=True))
        fields.update(
            id=order.id or generated_id,
            order_number=order.order_number or generated_number,
            status=order.status or OrderStatus.PENDING,
            payment_status=order.payment_status or PaymentStatus.PENDING,
            items=fields["items"] if order.items is not None else [],
            shipping_address=order.shipping_address or "",
            tracking_number=order.tracking_number or "",
            carrier=order.carrier or "",
            created_at=order.created_at or now,
            updated_at=now,
        )

        new_order = Order.model_validate(fields)
        self.orders = [*self.orders, new_order]
        logger.info(f"Order {new_order.id} ({new_order.order_number}) created: total={new_order.total}")
        return new_order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return next((o for o in self.orders if o.id == order_id), None)

    def list_orders(self) -> list[Order]:
        """List orders in creation order"""
        return list(self.orders)

    def update_order_status(
        self,
        order_id: str,
        status: Optional[OrderStatus],
        updates: Optional[OrderPatch] = None,
    ) -> list[Order]:
        """
        Merge a status and partial update into an order.

        Any status is accepted from any status. Payment flags are reconciled
        after the merge: a paid update settles the order completely, an
        advance update marks it partially paid. The update is discarded when
        none of the tracked fields change, in which case the same list object
        is returned.
        """
        updates = updates or OrderPatch()
        index = next((i for i, o in enumerate(self.orders) if o.id == order_id), None)
        if index is None:
            logger.info(f"Order with ID {order_id} not found")
            return self.orders

        existing = self.orders[index]

        # None in updates falls back to the existing value
        merged = existing.model_dump()
        merged.update(updates.model_dump(exclude_unset=True, exclude_none=True))
        merged.update(
            id=existing.id,
            status=status or existing.status,
            order_number=updates.order_number or existing.order_number,
            payment_status=updates.payment_status or existing.payment_status,
            updated_at=_now_iso(),
        )

        if updates.payment_status == PaymentStatus.PAID or updates.is_due_paid:
            merged.update(
                is_due_paid=True,
                is_advance_paid=True,
                payment_status=PaymentStatus.PAID,
            )
        elif updates.payment_status == PaymentStatus.PARTIALLY_PAID or updates.is_advance_paid:
            merged["payment_status"] = PaymentStatus.PARTIALLY_PAID

        candidate = Order.model_validate(merged)

        changed = [f for f in TRACKED_FIELDS if getattr(existing, f) != getattr(candidate, f)]
        if not changed:
            logger.info(f"No changes detected for order {order_id}, skipping update")
            return self.orders

        logger.info(
            f"Updating order {order_id}: "
            + ", ".join(f"{f}: {getattr(existing, f)!r} -> {getattr(candidate, f)!r}" for f in changed)
        )

        orders = list(self.orders)
        orders[index] = candidate
        self.orders = orders
        return self.orders
