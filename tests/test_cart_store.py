import json

import pytest
from buildmart.core.storage import LocalStorage
from buildmart.database.carts import CART_STORAGE_KEY, CartStore
from buildmart.models.cart import CartItemBase


def _item(item_id: str = "mat-001-dealer-01", price: object = 420.0) -> CartItemBase:
    return CartItemBase(
        id=item_id,
        name="OPC 53 Cement",
        price=price,
        unit="bag",
        dealer_name="Sharma Building Supplies",
        dealer_id="dealer-01",
    )


@pytest.fixture
def cart(storage: LocalStorage) -> CartStore:
    return CartStore(storage)


def test_adding_same_item_twice_merges_quantity(cart: CartStore) -> None:
    cart.add_to_cart(_item())
    cart.add_to_cart(_item())

    assert len(cart.items) == 1
    assert cart.items[0].quantity == 2


def test_add_to_cart_keeps_insertion_order(cart: CartStore) -> None:
    cart.add_to_cart(_item("b"))
    cart.add_to_cart(_item("a"), 3)
    cart.add_to_cart(_item("b"), 2)

    assert [i.id for i in cart.items] == ["b", "a"]
    assert [i.quantity for i in cart.items] == [3, 3]


def test_cart_total_with_string_polluted_values(storage: LocalStorage) -> None:
    storage.set_item(
        CART_STORAGE_KEY,
        json.dumps(
            [
                {"id": "a", "name": "A", "price": "100", "quantity": 2, "unit": "bag",
                 "dealerName": "D", "dealerId": "d"},
                {"id": "b", "name": "B", "price": "₹50.5", "quantity": "3", "unit": "bag",
                 "dealerName": "D", "dealerId": "d"},
            ]
        ),
    )
    cart = CartStore(storage)

    assert cart.get_cart_total() == pytest.approx(351.5)
    assert cart.get_item_count() == 5


def test_invalid_price_contributes_nothing(cart: CartStore) -> None:
    cart.add_to_cart(_item("good", price="200"), 2)
    cart.add_to_cart(_item("bad", price="call for price"), 4)

    assert cart.get_cart_total() == 400.0
    assert cart.get_item_count() == 6


@pytest.mark.parametrize("quantity", [0, -5, "abc", None, "0.5"])
def test_update_quantity_ignores_invalid_values(cart: CartStore, quantity: object) -> None:
    cart.add_to_cart(_item(), 3)
    before = cart.items

    result = cart.update_quantity("mat-001-dealer-01", quantity)

    assert result is before
    assert cart.items[0].quantity == 3


def test_update_quantity_floors_numeric_strings(cart: CartStore) -> None:
    cart.add_to_cart(_item())
    cart.update_quantity("mat-001-dealer-01", "4.7")

    assert cart.items[0].quantity == 4


def test_remove_and_clear(cart: CartStore) -> None:
    cart.add_to_cart(_item("a"))
    cart.add_to_cart(_item("b"))

    cart.remove_from_cart("a")
    cart.remove_from_cart("missing")
    assert cart.is_item_in_cart("b")
    assert not cart.is_item_in_cart("a")

    cart.clear_cart()
    assert cart.items == []
    assert cart.get_cart_total() == 0.0


def test_reload_reproduces_the_last_written_cart(storage: LocalStorage) -> None:
    cart = CartStore(storage)
    cart.add_to_cart(_item("a", price="₹99.50"), 2)
    cart.add_to_cart(_item("b"))
    cart.update_quantity("b", 5)

    reloaded = CartStore(storage)

    assert [i.model_dump(by_alias=True) for i in reloaded.items] == [
        i.model_dump(by_alias=True) for i in cart.items
    ]


def test_every_mutation_is_persisted(storage: LocalStorage) -> None:
    cart = CartStore(storage)
    cart.add_to_cart(_item(), 2)

    saved = json.loads(storage.get_item(CART_STORAGE_KEY))
    assert saved == [
        {
            "id": "mat-001-dealer-01",
            "name": "OPC 53 Cement",
            "price": 420.0,
            "unit": "bag",
            "dealerName": "Sharma Building Supplies",
            "dealerId": "dealer-01",
            "quantity": 2,
        }
    ]

    cart.clear_cart()
    assert json.loads(storage.get_item(CART_STORAGE_KEY)) == []


def test_saved_cart_is_loaded_without_validation(storage: LocalStorage) -> None:
    storage.set_item(
        CART_STORAGE_KEY,
        json.dumps([{"name": "Legacy item", "legacyField": True}]),
    )
    cart = CartStore(storage)

    assert len(cart.items) == 1
    assert not cart.is_item_in_cart("anything")
    assert cart.get_cart_total() == 0.0


def test_unknown_saved_fields_are_written_back(storage: LocalStorage) -> None:
    storage.set_item(
        CART_STORAGE_KEY,
        json.dumps(
            [
                {"id": "a", "name": "A", "price": 10, "quantity": 1, "unit": "bag",
                 "dealerName": "D", "dealerId": 7, "addedFrom": "wishlist"},
            ]
        ),
    )
    cart = CartStore(storage)
    cart.add_to_cart(_item("b"))

    saved = json.loads(storage.get_item(CART_STORAGE_KEY))
    assert saved[0]["addedFrom"] == "wishlist"
    assert saved[0]["dealerId"] == 7
    assert [i["id"] for i in saved] == ["a", "b"]


@pytest.mark.parametrize("saved", ["not json", '{"id": "a"}'])
def test_unreadable_saved_cart_starts_empty(storage: LocalStorage, saved: str) -> None:
    storage.set_item(CART_STORAGE_KEY, saved)
    assert CartStore(storage).items == []
