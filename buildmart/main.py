"""
BuildMart Application

Construction materials marketplace: material catalog, cart, checkout, and
order tracking with advance and balance payments.
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .core.config import Settings, get_settings
from .core.storage import LocalStorage
from .database.carts import CartStore
from .database.materials import MaterialDatabase
from .database.orders import OrderStore
from .routes import materials_router, cart_router, checkout_router, orders_router
from .services.payment_gateway import get_payment_gateway
from .services.payments import PaymentProcessor

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "config", ".env"))

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; stores are created when the lifespan starts"""
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info(f"{settings.app_name} starting up...")

        storage = LocalStorage(settings.storage_path)
        order_store = OrderStore()
        gateway = get_payment_gateway(settings)

        app.state.settings = settings
        app.state.cart_store = CartStore(storage, key=settings.cart_storage_key)
        app.state.order_store = order_store
        app.state.material_db = MaterialDatabase()
        app.state.payment_processor = PaymentProcessor(
            order_store,
            gateway,
            advance_rate=settings.advance_rate,
        )

        logger.info(f"Cart storage: {settings.storage_path} [{settings.cart_storage_key}]")
        logger.info(f"Payment gateway: {gateway.name}")
        yield
        logger.info(f"{settings.app_name} shutting down...")

    app = FastAPI(
        title=settings.app_name,
        description="Construction materials marketplace",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, restrict this
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(materials_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    app.include_router(orders_router)

    @app.get("/")
    async def home():
        """API index"""
        return {
            "message": f"{settings.app_name} API",
            "docs": "/docs",
            "endpoints": {
                "materials": "/api/materials",
                "cart": "/api/cart",
                "checkout": "/api/checkout",
                "orders": "/api/orders",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "buildmart"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "buildmart.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
