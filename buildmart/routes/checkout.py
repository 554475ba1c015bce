"""Checkout API routes"""

import logging
from typing import Sequence

from fastapi import APIRouter, HTTPException, Depends
from pydantic import ValidationError

from ..core.config import Settings
from ..core.deps import get_app_settings, get_cart_store, get_material_db, get_order_store
from ..core.numbers import parse_price, parse_quantity
from ..database.carts import CartStore
from ..database.materials import MaterialDatabase
from ..database.orders import OrderStore
from ..models.cart import CartItem
from ..models.checkout import CheckoutRequest, CheckoutResponse, OrderSummaryResponse
from ..services.checkout import build_order_patch, summarize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


def _validated_items(items: Sequence[CartItem]) -> list[CartItem]:
    # Saved carts are reloaded without validation
    try:
        return [CartItem.model_validate(dict(item)) for item in items]
    except ValidationError as e:
        logger.warning(f"Checkout rejected, cart holds invalid items: {e}")
        raise HTTPException(status_code=400, detail="Cart contains invalid items") from e


@router.post("", response_model=CheckoutResponse)
async def checkout(
    request: CheckoutRequest,
    cart: CartStore = Depends(get_cart_store),
    order_store: OrderStore = Depends(get_order_store),
    material_db: MaterialDatabase = Depends(get_material_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Place an order.

    Without a direct-buy item the cart is checked out and then cleared.
    With one, only that item is ordered and the cart is left alone.
    """
    direct_buy = request.direct_buy_item
    if direct_buy:
        items = [direct_buy]
        quantity = max(0, parse_quantity(direct_buy.quantity) or 0)
        subtotal = (parse_price(direct_buy.price) or 0.0) * quantity
        item_count = quantity
    else:
        items = _validated_items(cart.items)
        subtotal = cart.get_cart_total()
        item_count = cart.get_item_count()

    if not items or item_count == 0:
        raise HTTPException(status_code=400, detail="Cart is empty")

    # Check stock availability for catalog materials
    reservations = []
    for item in items:
        material = material_db.get_material_for_cart_item(item.id)
        if material is None:
            continue
        quantity = parse_quantity(item.quantity) or 0
        if not material.can_supply(quantity):
            raise HTTPException(
                status_code=400,
                detail=f"Insufficient stock for {material.name}",
            )
        reservations.append((material.id, quantity))

    summary = summarize(subtotal, item_count, settings)
    order = order_store.add_order(build_order_patch(items, summary, request, settings))

    # Stock is only taken once the order exists
    for material_id, quantity in reservations:
        material_db.update_stock(material_id, -quantity)

    # Clear the cart after a successful cart checkout
    if not direct_buy:
        cart.clear_cart()

    logger.info(
        f"Order {order.id} placed: {summary.total} - "
        f"{'direct buy' if direct_buy else 'cart'} checkout"
    )

    return CheckoutResponse(
        success=True,
        order=order,
        summary=OrderSummaryResponse(
            subtotal=summary.subtotal,
            delivery_charge=summary.delivery_charge,
            tax=summary.tax,
            total=summary.total,
            item_count=summary.item_count,
        ),
    )
