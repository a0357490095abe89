"""Order value model consumed by dispatch and the transformation stages."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from typing import Any

from orderstream.kernel.time import Clock, SystemClock


class OrderStatus(enum.Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    BACKORDERED = "BACKORDERED"
    PAID = "PAID"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"


class OrderPriority(enum.Enum):
    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    URGENT = "URGENT"


@dataclasses.dataclass(frozen=True, slots=True)
class OrderItem:
    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal
    total_price: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "quantity": self.quantity,
            "unit_price": str(self.unit_price),
            "total_price": str(self.total_price),
        }


@dataclasses.dataclass(frozen=True, slots=True)
class Address:
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True, slots=True)
class Order:
    """Snapshot of an order at one point of its lifecycle.

    The core never owns or mutates orders: every dispatch or transform call
    receives one snapshot and treats it as a value.  Use :meth:`with_status`
    to derive the next snapshot.
    """

    id: str
    user_id: str
    total_amount: Decimal
    status: OrderStatus = OrderStatus.PENDING
    priority: OrderPriority = OrderPriority.NORMAL
    payment_method: str | None = None
    shipping_address: Address | None = None
    order_date: datetime | None = None
    items: tuple[OrderItem, ...] = ()
    expected_delivery_date: datetime | None = None
    delivery_notes: str | None = None
    description: str | None = None
    last_updated: datetime | None = None

    @classmethod
    def create(
        cls,
        order_id: str,
        user_id: str,
        items: Iterable[OrderItem],
        shipping_address: Address | None = None,
        payment_method: str | None = None,
        *,
        clock: Clock | None = None,
    ) -> "Order":
        """New PENDING/NORMAL order dated now, totalled from its items."""
        items = tuple(items)
        return cls(
            id=order_id,
            user_id=user_id,
            total_amount=sum((i.total_price for i in items), Decimal("0")),
            status=OrderStatus.PENDING,
            priority=OrderPriority.NORMAL,
            payment_method=payment_method,
            shipping_address=shipping_address,
            order_date=(clock or SystemClock()).now(),
            items=items,
        )

    def with_status(self, status: OrderStatus) -> "Order":
        return dataclasses.replace(self, status=status)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly mapping (Decimal as str, datetimes as ISO-8601)."""

        def _iso(value: datetime | None) -> str | None:
            return value.isoformat() if value is not None else None

        return {
            "id": self.id,
            "user_id": self.user_id,
            "total_amount": str(self.total_amount),
            "status": self.status.name,
            "priority": self.priority.name,
            "payment_method": self.payment_method,
            "shipping_address": (
                self.shipping_address.to_dict() if self.shipping_address is not None else None
            ),
            "order_date": _iso(self.order_date),
            "items": [i.to_dict() for i in self.items],
            "expected_delivery_date": _iso(self.expected_delivery_date),
            "delivery_notes": self.delivery_notes,
            "description": self.description,
            "last_updated": _iso(self.last_updated),
        }


__all__ = ["Address", "Order", "OrderItem", "OrderPriority", "OrderStatus"]
