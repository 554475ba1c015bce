# Database modules

from .materials import MaterialDatabase
from .carts import CartStore, CART_STORAGE_KEY
from .orders import OrderStore

__all__ = [
    "MaterialDatabase",
    "CartStore",
    "CART_STORAGE_KEY",
    "OrderStore",
]
