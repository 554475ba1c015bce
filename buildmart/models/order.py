"""Order models for the marketplace"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class OrderStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    PAID = "paid"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PARTIALLY_PAID = "partially_paid"
    PAID = "paid"


class OrderItem(BaseModel):
    """Item in an order, copied from the cart at checkout"""
    id: str
    name: str
    price: float
    quantity: int
    unit: str
    image: Optional[str] = None
    dealer_name: Optional[str] = None
    dealer_id: Optional[Union[str, int]] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class Order(BaseModel):
    """
    Placed order.

    Amounts are stored, not derived: nothing recomputes ``total`` or
    ``due_amount`` after an update, so callers keep them consistent.
    """
    id: str
    order_number: str
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    items: list[OrderItem] = []

    # Summary of the purchase
    product_name: str = ""
    quantity: int = 1
    unit: str = "unit"
    price: float = 0.0
    subtotal: float = 0.0
    delivery_charge: float = 0.0
    tax: float = 0.0
    total: float = 0.0

    # Payment bookkeeping
    advance_paid: float = 0.0
    due_amount: float = 0.0
    is_advance_paid: bool = False
    is_due_paid: bool = False

    # Contact and shipping
    phone: str = ""
    address: str = ""
    shipping_address: str = ""
    tracking_number: str = ""
    carrier: str = ""
    dealer_name: Optional[str] = None
    dealer_phone: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    notes: Optional[str] = None
    estimated_delivery: Optional[str] = None

    # ISO-8601 timestamps
    order_date: str
    created_at: str
    updated_at: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class OrderPatch(BaseModel):
    """Partial order, used to create orders and to update them"""
    id: Optional[str] = None
    order_number: Optional[str] = None
    status: Optional[OrderStatus] = None
    payment_status: Optional[PaymentStatus] = None
    items: Optional[list[OrderItem]] = None
    product_name: Optional[str] = None
    quantity: Optional[int] = None
    unit: Optional[str] = None
    price: Optional[float] = None
    subtotal: Optional[float] = None
    delivery_charge: Optional[float] = None
    tax: Optional[float] = None
    total: Optional[float] = None
    advance_paid: Optional[float] = None
    due_amount: Optional[float] = None
    is_advance_paid: Optional[bool] = None
    is_due_paid: Optional[bool] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    shipping_address: Optional[str] = None
    tracking_number: Optional[str] = None
    carrier: Optional[str] = None
    dealer_name: Optional[str] = None
    dealer_phone: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    notes: Optional[str] = None
    estimated_delivery: Optional[str] = None
    order_date: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class UpdateOrderStatusRequest(BaseModel):
    """Request to move an order to a status, with optional field updates"""
    status: Optional[OrderStatus] = None
    updates: OrderPatch = Field(default_factory=OrderPatch)


class UpdateOrderStatusResponse(BaseModel):
    """Result of a status update; changed is False when the update was skipped"""
    order: Order
    changed: bool


class TrackingStep(BaseModel):
    """One stage of an order progress tracker"""
    id: OrderStatus
    label: str
    completed: bool
    current: bool


class OrderTracking(BaseModel):
    """Progress derived from an order's status and payments"""
    status_label: str
    current_step_index: int
    progress_percent: float
    steps: list[TrackingStep]
    verification_steps: list[TrackingStep]
    has_outstanding_balance: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class OrderDetailResponse(BaseModel):
    """Order with its tracking view"""
    order: Order
    tracking: OrderTracking
