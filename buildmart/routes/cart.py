"""Cart API routes"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Depends

from ..core.deps import get_cart_store, get_material_db
from ..database.carts import CartStore
from ..database.materials import MaterialDatabase
from ..models.cart import (
    AddToCartRequest,
    AddMaterialToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
    CartItemStatusResponse,
)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def _cart_response(cart: CartStore, message: Optional[str] = None) -> CartResponse:
    return CartResponse(
        items=cart.items,
        total=cart.get_cart_total(),
        item_count=cart.get_item_count(),
        message=message,
    )


@router.get("", response_model=CartResponse)
async def get_cart(cart: CartStore = Depends(get_cart_store)):
    """Get the cart with its totals"""
    return _cart_response(cart)


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    cart: CartStore = Depends(get_cart_store),
):
    """Add an item to the cart, merging with an existing line"""
    cart.add_to_cart(request.to_item(), request.quantity)
    return _cart_response(cart, message=f"Added {request.quantity}x {request.name} to cart")


@router.post("/materials/{material_id}", response_model=CartResponse)
async def add_material_to_cart(
    material_id: str,
    request: AddMaterialToCartRequest,
    cart: CartStore = Depends(get_cart_store),
    material_db: MaterialDatabase = Depends(get_material_db),
):
    """Add a catalog material to the cart"""
    material = material_db.get_material(material_id)
    if not material:
        raise HTTPException(status_code=404, detail="Material not found")

    if not material.can_supply(request.quantity):
        raise HTTPException(
            status_code=400,
            detail=f"Insufficient stock. Available: {material.stock_quantity}",
        )

    cart.add_to_cart(material.to_cart_item(), request.quantity)
    return _cart_response(cart, message=f"Added {request.quantity}x {material.name} to cart")


@router.get("/items/{item_id}", response_model=CartItemStatusResponse)
async def is_item_in_cart(
    item_id: str,
    cart: CartStore = Depends(get_cart_store),
):
    """Check whether an item is in the cart"""
    return CartItemStatusResponse(id=item_id, in_cart=cart.is_item_in_cart(item_id))


@router.put("/items/{item_id}", response_model=CartResponse)
async def update_cart_item(
    item_id: str,
    request: UpdateCartItemRequest,
    cart: CartStore = Depends(get_cart_store),
):
    """Update item quantity; values that are not a whole number >= 1 are ignored"""
    cart.update_quantity(item_id, request.quantity)
    return _cart_response(cart, message="Cart updated")


@router.delete("/items/{item_id}", response_model=CartResponse)
async def remove_from_cart(
    item_id: str,
    cart: CartStore = Depends(get_cart_store),
):
    """Remove an item from the cart"""
    cart.remove_from_cart(item_id)
    return _cart_response(cart, message="Item removed")


@router.delete("", response_model=CartResponse)
async def clear_cart(cart: CartStore = Depends(get_cart_store)):
    """Clear all items from cart"""
    cart.clear_cart()
    return _cart_response(cart, message="Cart cleared")
