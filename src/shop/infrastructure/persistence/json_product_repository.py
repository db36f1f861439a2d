"""JSON-document-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository
from shop.infrastructure.persistence.json_collection import JsonCollection


class JsonProductRepository(JsonCollection, ProductRepository):

    section = "products"

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        raw = self._find_row("id", product_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_serial_number(self, serial_number: str) -> Product | None:
        raw = self._find_row("serial_number", serial_number)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._rows]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self._next_id("product")
        self._upsert("id", self._to_raw(product))

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "serial_number": product.serial_number,
            "price": str(product.price.amount),
            "currency": product.price.currency,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            serial_number=raw["serial_number"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
        )
