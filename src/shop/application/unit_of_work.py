"""Unit of Work: the transaction boundary around every use case.

Handlers open one unit of work per call::

    with self._uow:
        ...mutate aggregates through self._uow.<repo>...
        self._uow.commit()

Leaving the block without ``commit()`` (or by raising) discards every
change made inside it.  Implementations must hold an exclusive lock for
the lifetime of the block so that two transactions never interleave;
that is what lets a second checkout of the same cart see it empty.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.repository.user_repository import UserRepository


class UnitOfWork(ABC):

    users: UserRepository
    products: ProductRepository
    carts: CartRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        self._begin()
        self._committed = False
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is not None or not self._committed:
                self.rollback()
        finally:
            self._end()

    def commit(self) -> None:
        self._commit()
        self._committed = True

    @abstractmethod
    def rollback(self) -> None:
        """Discard every change made since the block was entered."""

    @abstractmethod
    def _begin(self) -> None:
        """Acquire the lock and load a working copy of the store."""

    @abstractmethod
    def _commit(self) -> None:
        """Make the working copy durable in a single atomic step."""

    @abstractmethod
    def _end(self) -> None:
        """Release the lock."""
