"""Material catalog models"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .cart import CartItemBase


class MaterialCategory(str, Enum):
    CEMENT = "cement"
    STEEL = "steel"
    BRICKS = "bricks"
    SAND = "sand"
    AGGREGATES = "aggregates"
    TILES = "tiles"
    PAINT = "paint"
    PLUMBING = "plumbing"


class Material(BaseModel):
    """Material sold by a dealer"""
    id: str
    name: str
    description: str
    price: float = Field(gt=0)
    unit: str
    category: MaterialCategory
    subcategory: Optional[str] = None
    dealer_id: str
    dealer_name: str
    image_url: Optional[str] = None
    in_stock: bool = True
    stock_quantity: int = Field(ge=0, default=100)

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @property
    def cart_item_id(self) -> str:
        """Cart line id, unique per material and dealer"""
        return f"{self.id}-{self.dealer_id}"

    def can_supply(self, quantity: int) -> bool:
        """Whether the dealer can fill an order line of this size"""
        return self.in_stock and self.stock_quantity >= quantity

    def can_adjust(self, quantity_change: int) -> bool:
        return self.stock_quantity + quantity_change >= 0

    def to_cart_item(self) -> CartItemBase:
        """Build the cart line for this material"""
        return CartItemBase(
            id=self.cart_item_id,
            name=self.name,
            price=self.price,
            unit=self.unit,
            image=self.image_url,
            dealer_name=self.dealer_name,
            dealer_id=self.dealer_id,
        )


class MaterialSearchResponse(BaseModel):
    """Response from material search"""
    materials: list[Material]
    total: int
    limit: int
    offset: int
