"""Checkout and payment models for the marketplace"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .cart import CartItem
from .order import Order


class CheckoutRequest(BaseModel):
    """Buyer details for checkout"""
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    pincode: str = Field(min_length=1)
    notes: Optional[str] = None
    dealer_name: Optional[str] = None
    dealer_phone: Optional[str] = None
    # "Buy Now": purchase one item without going through the cart
    direct_buy_item: Optional[CartItem] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class OrderSummaryResponse(BaseModel):
    """Amounts charged for a checkout"""
    subtotal: float
    delivery_charge: float
    tax: float
    total: float
    item_count: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    order: Optional[Order] = None
    summary: Optional[OrderSummaryResponse] = None
    error_message: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PayDueRequest(BaseModel):
    """Request to pay the outstanding balance"""
    amount: Optional[float] = Field(default=None, gt=0)


class PaymentResponse(BaseModel):
    """Response from a payment action"""
    success: bool
    order: Order
    transaction_id: str
    amount: float

    class Config:
        alias_generator = to_camel
        populate_by_name = True
