"""Cart storage for the marketplace"""

import json
import logging
from typing import Any, Optional

from ..core.numbers import parse_price, parse_quantity
from ..core.storage import LocalStorage
from ..models.cart import CartItem, CartItemBase

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "cart"


def _item_id(item: CartItem) -> Optional[str]:
    # Items reloaded from storage are not validated and may lack an id
    return getattr(item, "id", None)


class CartStore:
    """
    The buyer's cart, mirrored to local storage.

    Every mutation rewrites the full item list under a fixed key, and a new
    store reloads that list verbatim. No operation raises on bad numbers:
    unparseable prices and quantities count as zero in the totals.
    """

    def __init__(self, storage: LocalStorage, key: str = CART_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self.items: list[CartItem] = self._load()

    def _load(self) -> list[CartItem]:
        """Load the persisted cart without validating it"""
        saved = self.storage.get_item(self.key)
        if not saved:
            return []

        try:
            raw_items = json.loads(saved)
        except json.JSONDecodeError as e:
            logger.error(f"Saved cart under {self.key!r} is not valid JSON, starting empty: {e}")
            return []

        if not isinstance(raw_items, list):
            logger.error(f"Saved cart under {self.key!r} is not a list, starting empty")
            return []

        return [CartItem.model_construct(**raw) for raw in raw_items if isinstance(raw, dict)]

    def _save(self) -> None:
        payload = [item.model_dump(by_alias=True, exclude_none=True) for item in self.items]
        self.storage.set_item(self.key, json.dumps(payload))

    def add_to_cart(self, item: CartItemBase, quantity: int = 1) -> list[CartItem]:
        """Add an item, merging quantities if it is already in the cart"""
        quantity = quantity or 1
        existing_item = next((i for i in self.items if _item_id(i) == item.id), None)

        if existing_item:
            current_quantity = parse_quantity(getattr(existing_item, "quantity", None)) or 0
            updated_quantity = current_quantity + quantity
            self.items = [
                i.model_copy(update={"quantity": updated_quantity}) if _item_id(i) == item.id else i
                for i in self.items
            ]
            logger.debug(f"Updated existing item quantity: {item.id} -> {updated_quantity}")
        else:
            fields = item.model_dump()
            fields.pop("quantity", None)
            new_item = CartItem.model_validate({**fields, "quantity": quantity})
            self.items = [*self.items, new_item]
            logger.debug(f"Added new item to cart: {item.id} x{quantity}")

        self._save()
        return self.items

    def remove_from_cart(self, item_id: str) -> list[CartItem]:
        """Remove an item from the cart"""
        self.items = [i for i in self.items if _item_id(i) != item_id]
        self._save()
        return self.items

    def update_quantity(self, item_id: str, quantity: Any) -> list[CartItem]:
        """
        Set an item's quantity.

        Accepts numbers or numeric strings, floored to an integer. Anything
        that does not parse or is below 1 leaves the cart unchanged.
        """
        new_quantity = parse_quantity(quantity)
        if new_quantity is None or new_quantity < 1:
            logger.debug(f"Ignoring invalid quantity {quantity!r} for {item_id}")
            return self.items

        self.items = [
            i.model_copy(update={"quantity": new_quantity}) if _item_id(i) == item_id else i
            for i in self.items
        ]
        self._save()
        return self.items

    def clear_cart(self) -> list[CartItem]:
        """Clear all items from cart"""
        self.items = []
        self._save()
        return self.items

    def get_cart_total(self) -> float:
        """Sum price * quantity, skipping items whose numbers do not parse"""
        total = 0.0
        for item in self.items:
            price = parse_price(getattr(item, "price", None))
            quantity = parse_quantity(getattr(item, "quantity", None))
            if price is None or quantity is None:
                logger.warning(f"Invalid price or quantity, skipping cart item: {item!r}")
                continue
            total += price * max(0, quantity)
        return total

    def get_item_count(self) -> int:
        """Sum item quantities, skipping invalid ones"""
        count = 0
        for item in self.items:
            quantity = parse_quantity(getattr(item, "quantity", None))
            if quantity is None:
                logger.warning(f"Invalid quantity, skipping cart item: {item!r}")
                continue
            count += max(0, quantity)
        return count

    def is_item_in_cart(self, item_id: str) -> bool:
        """Check whether an item is in the cart"""
        return any(_item_id(i) == item_id for i in self.items)
