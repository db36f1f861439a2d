"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_by_key(self, order_key: str) -> Order | None:
        """Return an order by its human-readable key, or None."""

    @abstractmethod
    def list_by_user(self, user_id: int) -> list[Order]:
        """Return a user's orders, oldest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning an id to new ones."""
