"""Unit tests for the Cart aggregate."""

import pytest

from shop.domain.exceptions import ItemNotFoundError, ValidationError
from shop.domain.model.cart import Cart
from shop.domain.model.value_objects import Quantity


class TestCartAdd:

    def test_new_cart_is_empty(self):
        cart = Cart(user_id=1)
        assert cart.is_empty
        assert cart.total_quantity == 0

    def test_add_defaults_to_one(self):
        cart = Cart(user_id=1)
        cart.add_item(10)
        assert not cart.is_empty
        assert cart.items[0].quantity == Quantity(1)

    def test_adding_same_product_accumulates(self):
        cart = Cart(user_id=1)
        cart.add_item(10, 2)
        cart.add_item(10, 3)
        assert len(cart.items) == 1
        assert cart.items[0].quantity.value == 5

    def test_different_products_get_separate_lines(self):
        cart = Cart(user_id=1)
        cart.add_item(10)
        cart.add_item(11, 4)
        assert len(cart.items) == 2
        assert cart.total_quantity == 5

    def test_add_zero_rejected(self):
        cart = Cart(user_id=1)
        with pytest.raises(ValidationError, match="must be positive"):
            cart.add_item(10, 0)
        assert cart.is_empty


class TestCartRemove:

    def test_remove_existing_line(self):
        cart = Cart(user_id=1)
        cart.add_item(10)
        assert cart.remove_item(10) is True
        assert cart.is_empty

    def test_remove_absent_is_noop(self):
        cart = Cart(user_id=1)
        cart.add_item(10)
        assert cart.remove_item(99) is False
        assert len(cart.items) == 1

    def test_strict_remove_absent_raises(self):
        cart = Cart(user_id=1)
        with pytest.raises(ItemNotFoundError, match="not in the cart"):
            cart.remove_item(99, strict=True)


class TestCartUpdate:

    def test_update_sets_absolute_quantity(self):
        cart = Cart(user_id=1)
        cart.add_item(10, 5)
        cart.update_item(10, 2)
        assert cart.items[0].quantity.value == 2

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_update_to_non_positive_removes_line(self, quantity):
        cart = Cart(user_id=1)
        cart.add_item(10, 5)
        cart.update_item(10, quantity)
        assert cart.is_empty

    def test_update_absent_product_adds_line(self):
        cart = Cart(user_id=1)
        cart.update_item(10, 3)
        assert cart.items[0].product_id == 10
        assert cart.items[0].quantity.value == 3

    def test_clear_drops_everything(self):
        cart = Cart(user_id=1)
        cart.add_item(10)
        cart.add_item(11)
        cart.clear()
        assert cart.is_empty
