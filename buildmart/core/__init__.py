# Core modules

from .config import Settings, get_settings
from .errors import StoreNotInitializedError
from .storage import LocalStorage

__all__ = ["Settings", "get_settings", "StoreNotInitializedError", "LocalStorage"]
