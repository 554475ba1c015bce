"""Cart models for the marketplace"""

from typing import Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CartItemBase(BaseModel):
    """Cart line without a quantity, as sent by "add to cart" """
    id: str
    name: str
    price: Union[float, str]
    unit: str
    image: Optional[str] = None
    dealer_name: str
    dealer_id: Union[str, int]

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "allow"


class CartItem(CartItemBase):
    """Item in a shopping cart"""
    quantity: Union[int, float, str] = 1


class AddToCartRequest(CartItemBase):
    """Request to add an item to the cart"""
    quantity: int = Field(default=1, gt=0)

    def to_item(self) -> CartItemBase:
        """Drop the quantity so it can be merged by the store"""
        return CartItemBase.model_validate(self.model_dump(exclude={"quantity"}))


class AddMaterialToCartRequest(BaseModel):
    """Request to add a catalog material to the cart"""
    quantity: int = Field(default=1, gt=0)


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity; invalid values are ignored"""
    quantity: Union[int, float, str]


class CartResponse(BaseModel):
    """Cart API response"""
    items: list[CartItem]
    total: float
    item_count: int
    message: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CartItemStatusResponse(BaseModel):
    """Whether an item is in the cart"""
    id: str
    in_cart: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True
