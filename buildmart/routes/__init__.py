# API Routes

from .materials import router as materials_router
from .cart import router as cart_router
from .checkout import router as checkout_router
from .orders import router as orders_router

__all__ = ["materials_router", "cart_router", "checkout_router", "orders_router"]
