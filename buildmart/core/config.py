"""Marketplace Service Configuration"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "BuildMart"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001

    # Local storage (stands in for the browser's localStorage)
    storage_path: str = ".local/storage.json"
    cart_storage_key: str = "cart"

    # Payment gateway
    payment_gateway: str = "mock"
    payment_delay_seconds: float = 2.0

    # Checkout pricing
    tax_rate: float = 0.18
    delivery_charge: float = 100.0
    free_delivery_threshold: float = 5000.0
    advance_rate: float = 0.3
    estimated_delivery_days: int = 7

    class Config:
        env_prefix = "BUILDMART_"
        env_file = "config/.env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
