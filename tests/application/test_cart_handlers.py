"""Integration tests for the cart use cases."""

import pytest

from shop.application.add_cart_item import AddCartItemHandler
from shop.application.clear_cart import ClearCartHandler
from shop.application.remove_cart_item import RemoveCartItemHandler
from shop.application.show_cart import ShowCartHandler
from shop.application.update_cart_item import UpdateCartItemHandler
from shop.domain.exceptions import (
    EntityNotFoundError,
    ItemNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from tests.fakes import FakeStore, FakeUnitOfWork, seed_product, seed_user


def _setup():
    store = FakeStore()
    user = seed_user(store)
    product = seed_product(store)
    return store, user, product


class TestAddCartItem:

    def test_add_defaults_to_one(self):
        store, user, product = _setup()
        dto = AddCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id)
        assert len(dto.items) == 1
        assert dto.items[0].quantity == 1
        assert dto.items[0].product_name == "Product-1"

    def test_quantities_accumulate(self):
        store, user, product = _setup()
        AddCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id, 2)
        dto = AddCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id, 3)
        assert dto.items[0].quantity == 5

    def test_unknown_product(self):
        store, user, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product #99"):
            AddCartItemHandler(FakeUnitOfWork(store)).handle(user.id, 99)

    def test_unknown_user(self):
        store, _, product = _setup()
        with pytest.raises(UserNotFoundError):
            AddCartItemHandler(FakeUnitOfWork(store)).handle(99, product.id)

    def test_invalid_quantity_leaves_cart_unchanged(self):
        store, user, product = _setup()
        with pytest.raises(ValidationError):
            AddCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id, 0)
        assert ShowCartHandler(FakeUnitOfWork(store)).by_user_id(user.id).is_empty

    def test_user_without_stored_cart_gets_one(self):
        store = FakeStore()
        user = seed_user(store, with_cart=False)
        product = seed_product(store)
        AddCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id)
        assert user.id in store.data["carts"]


class TestRemoveAndUpdate:

    def test_remove_item(self):
        store, user, product = _setup()
        AddCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id)
        dto = RemoveCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id)
        assert dto.is_empty

    def test_remove_absent_is_best_effort(self):
        store, user, _ = _setup()
        commits = store.commits
        dto = RemoveCartItemHandler(FakeUnitOfWork(store)).handle(user.id, 99)
        assert dto.is_empty
        assert store.commits == commits

    def test_strict_remove_absent(self):
        store, user, _ = _setup()
        with pytest.raises(ItemNotFoundError):
            RemoveCartItemHandler(FakeUnitOfWork(store)).handle(user.id, 99, strict=True)

    def test_update_sets_quantity(self):
        store, user, product = _setup()
        AddCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id, 5)
        dto = UpdateCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id, 2)
        assert dto.items[0].quantity == 2

    def test_update_to_zero_removes(self):
        store, user, product = _setup()
        AddCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id, 5)
        dto = UpdateCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id, 0)
        assert dto.is_empty

    def test_update_unknown_product_with_positive_quantity(self):
        store, user, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            UpdateCartItemHandler(FakeUnitOfWork(store)).handle(user.id, 99, 1)

    def test_clear(self):
        store, user, product = _setup()
        AddCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id, 5)
        dto = ClearCartHandler(FakeUnitOfWork(store)).handle(user.id)
        assert dto.is_empty


class TestShowCart:

    def test_by_username(self):
        store, user, product = _setup()
        AddCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id)
        dto = ShowCartHandler(FakeUnitOfWork(store)).by_username("richard")
        assert dto.user_id == user.id
        assert len(dto.items) == 1

    def test_unknown_username(self):
        store, _, _ = _setup()
        with pytest.raises(UserNotFoundError, match="nobody"):
            ShowCartHandler(FakeUnitOfWork(store)).by_username("nobody")

    def test_unknown_user_id(self):
        store, _, _ = _setup()
        with pytest.raises(UserNotFoundError):
            ShowCartHandler(FakeUnitOfWork(store)).by_user_id(99)
