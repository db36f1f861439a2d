"""Abstract repository for the User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by id, or None if not found."""

    @abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """Return a user by exact username, or None if not found."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user.

        Assigns ids to the user and to any address or payment method
        that does not have one yet.
        """
