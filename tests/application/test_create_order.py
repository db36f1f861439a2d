"""Integration tests for the CreateOrder use case.

Uses the in-memory fake unit of work, no file I/O.
"""

import threading

import pytest

from shop.application.add_cart_item import AddCartItemHandler
from shop.application.create_order import CreateOrderHandler
from shop.domain.exceptions import CartEmptyError, EntityNotFoundError, UserNotFoundError
from shop.domain.model.order import OrderStatus
from shop.domain.model.user import User
from tests.fakes import FakeStore, FakeUnitOfWork, seed_product, seed_user


def _setup():
    store = FakeStore()
    user = seed_user(store)
    product = seed_product(store)
    return store, user, product


def _add(store, user, product, qty=1):
    AddCartItemHandler(FakeUnitOfWork(store)).handle(user.id, product.id, qty)


def _stored_cart(store, user):
    with FakeUnitOfWork(store) as uow:
        return uow.carts.get_by_user_id(user.id)


class TestCreateOrderHappyPath:

    def test_single_item_scenario(self):
        store, user, product = _setup()
        _add(store, user, product)

        dto = CreateOrderHandler(FakeUnitOfWork(store)).handle(user)

        assert dto.id == 1
        assert dto.status == OrderStatus.CREATED.value
        assert dto.order_key
        assert not dto.is_empty
        assert len(dto.items) == 1
        assert dto.items[0].product_name == "Product-1"
        assert dto.sub_total == "$15.00"

    def test_item_count_matches_cart_and_cart_is_emptied(self):
        store, user, product = _setup()
        other = seed_product(store, name="Product-2", serial_number="5678", price="2.50")
        _add(store, user, product, 2)
        _add(store, user, other, 4)

        dto = CreateOrderHandler(FakeUnitOfWork(store)).handle(user)

        assert len(dto.items) == 2
        assert dto.sub_total == "$40.00"
        assert _stored_cart(store, user).is_empty

    def test_persists_order(self):
        store, user, product = _setup()
        _add(store, user, product)
        dto = CreateOrderHandler(FakeUnitOfWork(store)).handle(user)

        with FakeUnitOfWork(store) as uow:
            saved = uow.orders.get_by_id(dto.id)
        assert saved is not None
        assert saved.order_key == dto.order_key
        assert saved.user_id == user.id

    def test_by_user_id(self):
        store, user, product = _setup()
        _add(store, user, product)
        dto = CreateOrderHandler(FakeUnitOfWork(store)).by_user_id(user.id)
        assert dto.user_id == user.id


class TestCreateOrderRejections:

    def test_unregistered_user(self):
        store = FakeStore()
        transient = User.create("richard")

        with pytest.raises(UserNotFoundError):
            CreateOrderHandler(FakeUnitOfWork(store)).handle(transient)
        assert store.commits == 0

    def test_unknown_user_id(self):
        store = FakeStore()
        ghost = User(id=42, username="ghost")
        with pytest.raises(UserNotFoundError, match="#42"):
            CreateOrderHandler(FakeUnitOfWork(store)).handle(ghost)

    def test_empty_cart(self):
        store, user, _ = _setup()
        with pytest.raises(CartEmptyError):
            CreateOrderHandler(FakeUnitOfWork(store)).handle(user)

    def test_user_without_cart(self):
        store = FakeStore()
        user = seed_user(store, with_cart=False)
        with pytest.raises(CartEmptyError):
            CreateOrderHandler(FakeUnitOfWork(store)).handle(user)

    def test_second_checkout_fails(self):
        store, user, product = _setup()
        _add(store, user, product)
        CreateOrderHandler(FakeUnitOfWork(store)).handle(user)

        with pytest.raises(CartEmptyError):
            CreateOrderHandler(FakeUnitOfWork(store)).handle(user)

    def test_vanished_product_changes_nothing(self):
        store, user, product = _setup()
        _add(store, user, product)
        del store.data["products"][product.id]

        with pytest.raises(EntityNotFoundError):
            CreateOrderHandler(FakeUnitOfWork(store)).handle(user)

        assert len(_stored_cart(store, user).items) == 1
        assert store.data["orders"] == {}


class TestCreateOrderAtomicity:

    def test_failed_commit_keeps_cart_and_creates_no_order(self):
        store, user, product = _setup()
        _add(store, user, product)

        with pytest.raises(OSError):
            CreateOrderHandler(FakeUnitOfWork(store, fail_on_commit=True)).handle(user)

        assert len(_stored_cart(store, user).items) == 1
        assert store.data["orders"] == {}

    def test_concurrent_checkouts_produce_one_order(self):
        store, user, product = _setup()
        _add(store, user, product, 3)

        results: list[str] = []
        barrier = threading.Barrier(5)

        def checkout():
            barrier.wait()
            try:
                CreateOrderHandler(FakeUnitOfWork(store)).handle(user)
                results.append("ok")
            except CartEmptyError:
                results.append("empty")

        threads = [threading.Thread(target=checkout) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(results) == ["empty"] * 4 + ["ok"]
        assert len(store.data["orders"]) == 1
