"""Abstract repository for the Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_by_user_id(self, user_id: int) -> Cart | None:
        """Return the cart owned by a user, or None if they have none."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Replace the stored item set of the user's cart with ``cart.items``."""
