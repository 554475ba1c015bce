"""
Store accessors for route dependencies.

Stores are built in the application lifespan and kept on ``app.state``.
Asking for one before that is a programmer error and raises immediately.
"""

from fastapi import Request

from ..database.carts import CartStore
from ..database.materials import MaterialDatabase
from ..database.orders import OrderStore
from ..services.payments import PaymentProcessor
from .config import Settings
from .errors import StoreNotInitializedError


def _from_state(request: Request, attr: str, store_name: str):
    store = getattr(request.app.state, attr, None)
    if store is None:
        raise StoreNotInitializedError(store_name)
    return store


def get_cart_store(request: Request) -> CartStore:
    return _from_state(request, "cart_store", "CartStore")


def get_order_store(request: Request) -> OrderStore:
    return _from_state(request, "order_store", "OrderStore")


def get_material_db(request: Request) -> MaterialDatabase:
    return _from_state(request, "material_db", "MaterialDatabase")


def get_payment_processor(request: Request) -> PaymentProcessor:
    return _from_state(request, "payment_processor", "PaymentProcessor")


def get_app_settings(request: Request) -> Settings:
    return _from_state(request, "settings", "Settings")
