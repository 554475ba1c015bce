# Marketplace Models

from .material import Material, MaterialCategory, MaterialSearchResponse
from .cart import (
    CartItem,
    CartItemBase,
    AddToCartRequest,
    AddMaterialToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
    CartItemStatusResponse,
)
from .order import (
    Order,
    OrderItem,
    OrderPatch,
    OrderStatus,
    PaymentStatus,
    UpdateOrderStatusRequest,
    UpdateOrderStatusResponse,
    TrackingStep,
    OrderTracking,
    OrderDetailResponse,
)
from .checkout import (
    CheckoutRequest,
    CheckoutResponse,
    OrderSummaryResponse,
    PayDueRequest,
    PaymentResponse,
)

__all__ = [
    "Material",
    "MaterialCategory",
    "MaterialSearchResponse",
    "CartItem",
    "CartItemBase",
    "AddToCartRequest",
    "AddMaterialToCartRequest",
    "UpdateCartItemRequest",
    "CartResponse",
    "CartItemStatusResponse",
    "Order",
    "OrderItem",
    "OrderPatch",
    "OrderStatus",
    "PaymentStatus",
    "UpdateOrderStatusRequest",
    "UpdateOrderStatusResponse",
    "TrackingStep",
    "OrderTracking",
    "OrderDetailResponse",
    "CheckoutRequest",
    "CheckoutResponse",
    "OrderSummaryResponse",
    "PayDueRequest",
    "PaymentResponse",
]
