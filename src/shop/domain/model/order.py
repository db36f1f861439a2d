"""Order aggregate: the core of the domain.

An Order is born from a user's cart and then moves through a small
state machine.  The line items and sub-total are frozen at creation;
only the addresses, the status and the list of payments change later.

    CREATED ──pay──> PAID ──cancel──> CANCELLED
       │  └────────cancel─────────────────┘
       ├──> COMPLETED (administrative, also from PAID)
       └──> SHIPPED   (administrative, also from PAID / COMPLETED)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from shop.domain.exceptions import InvalidOrderOperationError, ValidationError
from shop.domain.model.user import PaymentMethod
from shop.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    CREATED = "CREATED"
    PAID = "PAID"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"
    SHIPPED = "SHIPPED"


# ---------------------------------------------------------------------------
# Transition rules
# ---------------------------------------------------------------------------
PAYMENT_FORBIDDEN = frozenset({OrderStatus.CANCELLED, OrderStatus.SHIPPED})
CANCELLABLE = frozenset({OrderStatus.CREATED, OrderStatus.PAID})
COMPLETABLE = frozenset({OrderStatus.CREATED, OrderStatus.PAID})
SHIPPABLE = frozenset({OrderStatus.CREATED, OrderStatus.PAID, OrderStatus.COMPLETED})


@dataclass(frozen=True)
class OrderItem:
    """Snapshot of a cart line taken when the order was created.

    Name and unit price are copied from the product so later catalog
    changes never alter an existing order.
    """

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_amount(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class Payment:
    amount: Money
    payment_method_id: int
    paid_at: datetime


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders.  The plain constructor exists
    so repositories can reconstitute persisted orders without re-running
    creation rules.
    """

    id: int | None
    user_id: int
    order_key: str
    items: tuple[OrderItem, ...]
    sub_total: Money
    status: OrderStatus = OrderStatus.CREATED
    billing_address_id: int | None = None
    shipping_address_id: int | None = None
    payments: list[Payment] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utc_now)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(user_id: int, order_key: str, items: list[OrderItem]) -> Order:
        if not order_key or not order_key.strip():
            raise ValidationError("Order key is required")
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(
            id=None,
            user_id=user_id,
            order_key=order_key,
            items=tuple(items),
            sub_total=Money.total(item.line_amount for item in items),
        )

    # --- State transitions ----------------------------------------------------

    def apply_payment(
        self,
        payment_method: PaymentMethod,
        paid_at: datetime | None = None,
    ) -> Payment:
        """Record a payment of the full sub-total and move to PAID.

        An order that is already PAID accepts another payment; only
        cancelled and shipped orders refuse.
        """
        if self.status in PAYMENT_FORBIDDEN:
            raise InvalidOrderOperationError(
                f"Cannot pay order {self.order_key}: status is {self.status.value}"
            )
        if payment_method.id is None:
            raise ValidationError("Payment method has not been saved")
        payment = Payment(
            amount=self.sub_total,
            payment_method_id=payment_method.id,
            paid_at=paid_at or _utc_now(),
        )
        self.payments.append(payment)
        self.status = OrderStatus.PAID
        return payment

    def cancel(self) -> None:
        """Transition CREATED|PAID -> CANCELLED.  Payments are kept as-is."""
        if self.status not in CANCELLABLE:
            raise InvalidOrderOperationError(
                f"Cannot cancel order {self.order_key}: status is {self.status.value}"
            )
        self.status = OrderStatus.CANCELLED

    def mark_completed(self) -> None:
        if self.status not in COMPLETABLE:
            raise InvalidOrderOperationError(
                f"Cannot complete order {self.order_key}: status is {self.status.value}"
            )
        self.status = OrderStatus.COMPLETED

    def mark_shipped(self) -> None:
        if self.status not in SHIPPABLE:
            raise InvalidOrderOperationError(
                f"Cannot ship order {self.order_key}: status is {self.status.value}"
            )
        self.status = OrderStatus.SHIPPED

    # --- Addresses (no status guard) ------------------------------------------

    def assign_billing_address(self, address_id: int) -> None:
        self.billing_address_id = address_id

    def assign_shipping_address(self, address_id: int) -> None:
        self.shipping_address_id = address_id

    # --- Computed properties --------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    @property
    def amount_paid(self) -> Money:
        return Money.total(payment.amount for payment in self.payments)
