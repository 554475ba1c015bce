"""Order API routes"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ..core.deps import get_order_store, get_payment_processor
from ..database.orders import OrderStore
from ..models.checkout import PayDueRequest, PaymentResponse
from ..models.order import (
    Order,
    OrderDetailResponse,
    OrderStatus,
    UpdateOrderStatusRequest,
    UpdateOrderStatusResponse,
)
from ..services.payments import (
    AdvanceAlreadyPaidError,
    NoOutstandingBalanceError,
    OrderAlreadySettledError,
    OrderNotFoundError,
    PaymentAmountMismatchError,
    PaymentError,
    PaymentFailedError,
    PaymentInProgressError,
    PaymentProcessor,
)
from ..services.tracking import build_tracking

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["Orders"])


def _raise_payment_http_error(e: Exception) -> None:
    if isinstance(e, OrderNotFoundError):
        raise HTTPException(status_code=404, detail=str(e)) from e

    if isinstance(
        e,
        (
            PaymentInProgressError,
            OrderAlreadySettledError,
            AdvanceAlreadyPaidError,
            NoOutstandingBalanceError,
        ),
    ):
        raise HTTPException(status_code=409, detail=str(e)) from e

    if isinstance(e, PaymentAmountMismatchError):
        raise HTTPException(status_code=422, detail=str(e)) from e

    if isinstance(e, PaymentFailedError):
        raise HTTPException(status_code=402, detail=str(e)) from e

    if isinstance(e, PaymentError):
        raise HTTPException(status_code=400, detail=str(e)) from e

    raise HTTPException(status_code=500, detail="Internal Server Error") from e


def _require_order(order_store: OrderStore, order_id: str) -> Order:
    order = order_store.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.get("", response_model=list[Order])
async def list_orders(order_store: OrderStore = Depends(get_order_store)):
    """List orders in the order they were placed"""
    return order_store.list_orders()


@router.get("/{order_id}", response_model=OrderDetailResponse)
async def get_order(
    order_id: str,
    order_store: OrderStore = Depends(get_order_store),
):
    """Get order details with its progress tracker"""
    order = _require_order(order_store, order_id)
    return OrderDetailResponse(order=order, tracking=build_tracking(order))


@router.patch("/{order_id}/status", response_model=UpdateOrderStatusResponse)
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    order_store: OrderStore = Depends(get_order_store),
):
    """
    Move an order to a status and merge field updates.

    Transitions are not validated: any status may follow any other.
    """
    _require_order(order_store, order_id)

    before = order_store.orders
    after = order_store.update_order_status(order_id, request.status, request.updates)

    return UpdateOrderStatusResponse(
        order=order_store.get_order(order_id),
        changed=after is not before,
    )


@router.post("/{order_id}/verify", response_model=UpdateOrderStatusResponse)
async def verify_order(
    order_id: str,
    order_store: OrderStore = Depends(get_order_store),
):
    """Mark an order as verified by the dealer"""
    _require_order(order_store, order_id)

    before = order_store.orders
    after = order_store.update_order_status(order_id, OrderStatus.VERIFIED)

    return UpdateOrderStatusResponse(
        order=order_store.get_order(order_id),
        changed=after is not before,
    )


@router.post("/{order_id}/payments/advance", response_model=PaymentResponse)
async def pay_advance(
    order_id: str,
    processor: PaymentProcessor = Depends(get_payment_processor),
):
    """Pay the advance share of the order total"""
    try:
        order, result = await processor.pay_advance(order_id)
    except Exception as e:
        _raise_payment_http_error(e)

    return PaymentResponse(
        success=True,
        order=order,
        transaction_id=result.transaction_id,
        amount=result.amount,
    )


@router.post("/{order_id}/payments/due", response_model=PaymentResponse)
async def pay_due(
    order_id: str,
    request: PayDueRequest,
    processor: PaymentProcessor = Depends(get_payment_processor),
):
    """Pay the outstanding balance and settle the order"""
    try:
        order, result = await processor.pay_due(order_id, amount=request.amount)
    except Exception as e:
        _raise_payment_http_error(e)

    return PaymentResponse(
        success=True,
        order=order,
        transaction_id=result.transaction_id,
        amount=result.amount,
    )
