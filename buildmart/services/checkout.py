"""Checkout pricing and order construction"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Sequence

from ..core.config import Settings
from ..core.numbers import parse_price, parse_quantity, round_half_up
from ..models.cart import CartItem
from ..models.checkout import CheckoutRequest
from ..models.order import OrderItem, OrderPatch


@dataclass(frozen=True)
class OrderSummary:
    """Amounts charged for a checkout"""
    subtotal: float
    delivery_charge: float
    tax: float
    total: float
    item_count: int


def summarize(subtotal: float, item_count: int, settings: Settings) -> OrderSummary:
    """Price a checkout: free delivery above the threshold, tax on the subtotal"""
    delivery_charge = 0.0 if subtotal >= settings.free_delivery_threshold else settings.delivery_charge
    tax = round_half_up(subtotal * settings.tax_rate)
    total = subtotal + delivery_charge + tax
    return OrderSummary(
        subtotal=round(subtotal, 2),
        delivery_charge=round(delivery_charge, 2),
        tax=round(tax, 2),
        total=round(total, 2),
        item_count=item_count,
    )


def to_order_item(item: CartItem) -> OrderItem:
    """Copy a cart line into an order line"""
    return OrderItem(
        id=item.id,
        name=item.name,
        price=parse_price(item.price) or 0.0,
        quantity=max(0, parse_quantity(item.quantity) or 0),
        unit=item.unit,
        image=item.image,
        dealer_name=item.dealer_name,
        dealer_id=item.dealer_id,
    )


def build_order_patch(
    items: Sequence[CartItem],
    summary: OrderSummary,
    request: CheckoutRequest,
    settings: Settings,
) -> OrderPatch:
    """Build the order fields for a checkout of the given items"""
    order_items = [to_order_item(item) for item in items]
    single = order_items[0] if len(order_items) == 1 else None
    first = order_items[0] if order_items else None

    now = datetime.now(timezone.utc)
    estimated_delivery = now + timedelta(days=settings.estimated_delivery_days)
    address = f"{request.address}, {request.city}, {request.pincode}"

    return OrderPatch(
        product_name=single.name if single else f"{len(order_items)} Items",
        quantity=summary.item_count,
        unit=single.unit if single else "items",
        price=single.price if single else summary.subtotal,
        subtotal=summary.subtotal,
        delivery_charge=summary.delivery_charge,
        tax=summary.tax,
        total=summary.total,
        items=order_items,
        phone=request.phone,
        address=address,
        shipping_address=address,
        contact_phone=request.phone,
        notes=request.notes,
        dealer_name=request.dealer_name or (first.dealer_name if first else None),
        dealer_phone=request.dealer_phone,
        order_date=_iso(now),
        estimated_delivery=_iso(estimated_delivery),
    )


def _iso(moment: datetime) -> str:
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
