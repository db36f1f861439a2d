"""JSON-document-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from shop.domain.model.order import Order, OrderItem, OrderStatus, Payment
from shop.domain.model.value_objects import Money, Quantity
from shop.domain.repository.order_repository import OrderRepository
from shop.infrastructure.persistence.json_collection import JsonCollection


class JsonOrderRepository(JsonCollection, OrderRepository):

    section = "orders"

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        raw = self._find_row("id", order_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_key(self, order_key: str) -> Order | None:
        raw = self._find_row("order_key", order_key)
        return self._to_domain(raw) if raw is not None else None

    def list_by_user(self, user_id: int) -> list[Order]:
        return [
            self._to_domain(raw) for raw in self._rows if raw["user_id"] == user_id
        ]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id("order")
        self._upsert("id", self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _money_to_raw(money: Money) -> dict:
        return {"amount": str(money.amount), "currency": money.currency}

    @staticmethod
    def _money_from_raw(raw: dict) -> Money:
        return Money(Decimal(raw["amount"]), raw.get("currency", "USD"))

    @classmethod
    def _to_raw(cls, order: Order) -> dict:
        return {
            "id": order.id,
            "order_key": order.order_key,
            "user_id": order.user_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "billing_address_id": order.billing_address_id,
            "shipping_address_id": order.shipping_address_id,
            "sub_total": cls._money_to_raw(order.sub_total),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": cls._money_to_raw(item.unit_price),
                }
                for item in order.items
            ],
            "payments": [
                {
                    "amount": cls._money_to_raw(p.amount),
                    "payment_method_id": p.payment_method_id,
                    "paid_at": p.paid_at.isoformat(),
                }
                for p in order.payments
            ],
        }

    @classmethod
    def _to_domain(cls, raw: dict) -> Order:
        items = tuple(
            OrderItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=cls._money_from_raw(i["unit_price"]),
            )
            for i in raw["items"]
        )
        payments = [
            Payment(
                amount=cls._money_from_raw(p["amount"]),
                payment_method_id=p["payment_method_id"],
                paid_at=datetime.fromisoformat(p["paid_at"]),
            )
            for p in raw.get("payments", [])
        ]
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            order_key=raw["order_key"],
            items=items,
            sub_total=cls._money_from_raw(raw["sub_total"]),
            status=OrderStatus(raw["status"]),
            billing_address_id=raw.get("billing_address_id"),
            shipping_address_id=raw.get("shipping_address_id"),
            payments=payments,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
