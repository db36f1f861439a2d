"""Unit tests for the CartToOrderConverter domain service."""

import pytest

from shop.domain.exceptions import (
    CartEmptyError,
    EntityNotFoundError,
    OrderKeyUnavailableError,
)
from shop.domain.model.cart import Cart
from shop.domain.model.order import OrderStatus
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.domain.service.cart_to_order_converter import CartToOrderConverter
from tests.fakes import FakeOrderRepository, FakeProductRepository, FakeStore


def _setup():
    store = FakeStore()
    products = FakeProductRepository(store.data)
    orders = FakeOrderRepository(store.data)
    widget = Product.create("Widget", "W-1", Money.of("15.00"))
    gadget = Product.create("Gadget", "G-1", Money.of("25.00"))
    products.save(widget)
    products.save(gadget)
    return CartToOrderConverter(products, orders), products, orders, widget, gadget


class TestConvert:

    def test_snapshots_every_line(self):
        converter, _, _, widget, gadget = _setup()
        cart = Cart(user_id=1)
        cart.add_item(widget.id, 3)
        cart.add_item(gadget.id, 5)

        order = converter.convert(cart)

        assert order.status == OrderStatus.CREATED
        assert order.user_id == 1
        assert [i.product_name for i in order.items] == ["Widget", "Gadget"]
        assert order.items[0].unit_price == Money.of("15.00")
        assert order.items[1].line_amount == Money.of("125.00")
        assert order.sub_total == Money.of("170.00")

    def test_empties_the_cart(self):
        converter, _, _, widget, _ = _setup()
        cart = Cart(user_id=1)
        cart.add_item(widget.id)
        converter.convert(cart)
        assert cart.is_empty

    def test_order_key_format(self):
        converter, _, _, widget, _ = _setup()
        cart = Cart(user_id=1)
        cart.add_item(widget.id)
        order = converter.convert(cart)
        assert order.order_key.startswith("ORD-")
        assert len(order.order_key) == len("ORD-") + 10

    def test_keys_are_unique(self):
        converter, _, orders, widget, _ = _setup()
        keys = set()
        for _ in range(20):
            cart = Cart(user_id=1)
            cart.add_item(widget.id)
            order = converter.convert(cart)
            orders.save(order)
            keys.add(order.order_key)
        assert len(keys) == 20

    def test_price_change_after_conversion_does_not_alter_order(self):
        converter, products, _, widget, _ = _setup()
        cart = Cart(user_id=1)
        cart.add_item(widget.id)
        order = converter.convert(cart)

        widget.update_price(Money.of("99.99"))
        products.save(widget)

        assert order.sub_total == Money.of("15.00")


class TestConvertRejections:

    def test_missing_cart(self):
        converter, *_ = _setup()
        with pytest.raises(CartEmptyError):
            converter.convert(None)

    def test_empty_cart(self):
        converter, *_ = _setup()
        with pytest.raises(CartEmptyError):
            converter.convert(Cart(user_id=1))

    def test_vanished_product_leaves_cart_untouched(self):
        converter, _, _, widget, _ = _setup()
        cart = Cart(user_id=1)
        cart.add_item(widget.id)
        cart.add_item(404)

        with pytest.raises(EntityNotFoundError, match="#404"):
            converter.convert(cart)
        assert len(cart.items) == 2

    def test_exhausted_order_keys_leave_cart_untouched(self, monkeypatch):
        converter, _, orders, widget, _ = _setup()
        cart = Cart(user_id=1)
        cart.add_item(widget.id)
        taken = converter.convert(cart)
        orders.save(taken)

        monkeypatch.setattr(
            "shop.domain.service.cart_to_order_converter.secrets.token_hex",
            lambda nbytes: taken.order_key[len("ORD-"):].lower(),
        )
        cart.add_item(widget.id, 2)

        with pytest.raises(OrderKeyUnavailableError, match="unique order key"):
            converter.convert(cart)
        assert cart.items[0].quantity.value == 2
