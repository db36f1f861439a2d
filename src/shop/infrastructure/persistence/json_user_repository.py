"""JSON-document-backed implementation of UserRepository."""

from __future__ import annotations

from shop.domain.model.user import Address, PaymentMethod, PaymentType, User
from shop.domain.repository.user_repository import UserRepository
from shop.infrastructure.persistence.json_collection import JsonCollection


class JsonUserRepository(JsonCollection, UserRepository):

    section = "users"

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: int) -> User | None:
        raw = self._find_row("id", user_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_username(self, username: str) -> User | None:
        raw = self._find_row("username", username)
        return self._to_domain(raw) if raw is not None else None

    def save(self, user: User) -> None:
        if user.id is None:
            user.id = self._next_id("user")
        for address in user.addresses:
            if address.id is None:
                address.id = self._next_id("address")
            address.user_id = user.id
        for method in user.payment_methods:
            if method.id is None:
                method.id = self._next_id("payment_method")
            method.user_id = user.id
        self._upsert("id", self._to_raw(user))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "username": user.username,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "addresses": [
                {
                    "id": a.id,
                    "street": a.street,
                    "city": a.city,
                    "state": a.state,
                    "zip_code": a.zip_code,
                }
                for a in user.addresses
            ],
            "payment_methods": [
                {"id": m.id, "name": m.name, "payment_type": m.payment_type.value}
                for m in user.payment_methods
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            username=raw["username"],
            first_name=raw.get("first_name", ""),
            last_name=raw.get("last_name", ""),
            addresses=[
                Address(
                    id=a["id"],
                    user_id=raw["id"],
                    street=a["street"],
                    city=a["city"],
                    state=a["state"],
                    zip_code=a["zip_code"],
                )
                for a in raw.get("addresses", [])
            ],
            payment_methods=[
                PaymentMethod(
                    id=m["id"],
                    user_id=raw["id"],
                    name=m["name"],
                    payment_type=PaymentType(m["payment_type"]),
                )
                for m in raw.get("payment_methods", [])
            ],
        )
