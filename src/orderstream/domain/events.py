"""Order lifecycle events.

Every event is one frozen dataclass per kind (a tagged union, see
:data:`OrderEvent`).  Each variant embeds exactly one :class:`EventEnvelope`
and carries only the fields meaningful to its kind; the shared accessors
are plain functions over the union.

Example::

    event = order_shipped(order, "UPS", "1Z999", eta, correlation_id=cid)
    assert event.kind is OrderEventType.ORDER_SHIPPED
    assert is_success_event(event)
"""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Final
from uuid import uuid4

from orderstream.domain.order import Order, OrderStatus
from orderstream.kernel.time import Clock, SystemClock

DEFAULT_SOURCE_SERVICE: Final = "order-service"
EVENT_SCHEMA_VERSION: Final = "1.0"
UNKNOWN_AGGREGATE: Final = "unknown"


class OrderEventType(enum.Enum):
    """Event kind tag; the value is the wire name used in ``event-type`` headers."""

    ORDER_CREATED = "order-created"
    ORDER_CONFIRMED = "order-confirmed"
    ORDER_CANCELLED = "order-cancelled"
    PAYMENT_PROCESSED = "payment-processed"
    PAYMENT_FAILED = "payment-failed"
    INVENTORY_RESERVED = "inventory-reserved"
    INVENTORY_UNAVAILABLE = "inventory-unavailable"
    ORDER_SHIPPED = "order-shipped"
    ORDER_DELIVERED = "order-delivered"
    ORDER_REFUNDED = "order-refunded"
    ORDER_UPDATED = "order-updated"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def is_failure(self) -> bool:
        return self in _FAILURE_KINDS


_DESCRIPTIONS: Final[dict[OrderEventType, str]] = {
    OrderEventType.ORDER_CREATED: "Order Created",
    OrderEventType.ORDER_CONFIRMED: "Order Confirmed",
    OrderEventType.ORDER_CANCELLED: "Order Cancelled",
    OrderEventType.PAYMENT_PROCESSED: "Payment Processed",
    OrderEventType.PAYMENT_FAILED: "Payment Failed",
    OrderEventType.INVENTORY_RESERVED: "Inventory Reserved",
    OrderEventType.INVENTORY_UNAVAILABLE: "Inventory Unavailable",
    OrderEventType.ORDER_SHIPPED: "Order Shipped",
    OrderEventType.ORDER_DELIVERED: "Order Delivered",
    OrderEventType.ORDER_REFUNDED: "Order Refunded",
    OrderEventType.ORDER_UPDATED: "Order Updated",
}

_FAILURE_KINDS: Final = frozenset(
    {
        OrderEventType.PAYMENT_FAILED,
        OrderEventType.ORDER_CANCELLED,
        OrderEventType.INVENTORY_UNAVAILABLE,
    }
)


@dataclasses.dataclass(frozen=True)
class EventEnvelope:
    """Metadata shared by every event: identity, time, origin, correlation."""

    event_id: str
    event_timestamp: datetime | None
    source_service: str
    correlation_id: str | None = None
    event_version: str = EVENT_SCHEMA_VERSION
    metadata: str | None = None

    @classmethod
    def new(
        cls,
        source_service: str,
        correlation_id: str | None = None,
        *,
        clock: Clock | None = None,
        event_id: str | None = None,
    ) -> "EventEnvelope":
        """Fresh envelope; pass *event_id* to re-publish idempotently."""
        return cls(
            event_id=event_id or str(uuid4()),
            event_timestamp=(clock or SystemClock()).now(),
            source_service=source_service,
            correlation_id=correlation_id,
        )

    def is_valid(self) -> bool:
        return (
            bool(self.event_id and self.event_id.strip())
            and self.event_timestamp is not None
            and bool(self.source_service and self.source_service.strip())
            and bool(self.event_version and self.event_version.strip())
        )


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class OrderCreated:
    kind: ClassVar[OrderEventType] = OrderEventType.ORDER_CREATED
    envelope: EventEnvelope
    order: Order | None


@dataclasses.dataclass(frozen=True)
class OrderConfirmed:
    kind: ClassVar[OrderEventType] = OrderEventType.ORDER_CONFIRMED
    envelope: EventEnvelope
    order: Order | None


@dataclasses.dataclass(frozen=True)
class OrderCancelled:
    kind: ClassVar[OrderEventType] = OrderEventType.ORDER_CANCELLED
    envelope: EventEnvelope
    order: Order | None
    reason: str


@dataclasses.dataclass(frozen=True)
class PaymentProcessed:
    kind: ClassVar[OrderEventType] = OrderEventType.PAYMENT_PROCESSED
    envelope: EventEnvelope
    order: Order | None
    amount: Decimal
    payment_method: str


@dataclasses.dataclass(frozen=True)
class PaymentFailed:
    kind: ClassVar[OrderEventType] = OrderEventType.PAYMENT_FAILED
    envelope: EventEnvelope
    order: Order | None
    amount: Decimal
    reason: str


@dataclasses.dataclass(frozen=True)
class InventoryReserved:
    kind: ClassVar[OrderEventType] = OrderEventType.INVENTORY_RESERVED
    envelope: EventEnvelope
    order: Order | None
    items: tuple[str, ...]


@dataclasses.dataclass(frozen=True)
class InventoryUnavailable:
    kind: ClassVar[OrderEventType] = OrderEventType.INVENTORY_UNAVAILABLE
    envelope: EventEnvelope
    order: Order | None
    unavailable_items: tuple[str, ...]

    @property
    def reason(self) -> str:
        return "Insufficient inventory for items: " + ", ".join(self.unavailable_items)


@dataclasses.dataclass(frozen=True)
class OrderShipped:
    kind: ClassVar[OrderEventType] = OrderEventType.ORDER_SHIPPED
    envelope: EventEnvelope
    order: Order | None
    carrier: str
    tracking_number: str
    estimated_delivery: datetime


@dataclasses.dataclass(frozen=True)
class OrderDelivered:
    kind: ClassVar[OrderEventType] = OrderEventType.ORDER_DELIVERED
    envelope: EventEnvelope
    order: Order | None


@dataclasses.dataclass(frozen=True)
class OrderRefunded:
    kind: ClassVar[OrderEventType] = OrderEventType.ORDER_REFUNDED
    envelope: EventEnvelope
    order: Order | None
    amount: Decimal
    reason: str


@dataclasses.dataclass(frozen=True)
class OrderUpdated:
    kind: ClassVar[OrderEventType] = OrderEventType.ORDER_UPDATED
    envelope: EventEnvelope
    order: Order | None
    previous_order: Order | None

    @property
    def previous_status(self) -> OrderStatus | None:
        return self.previous_order.status if self.previous_order is not None else None


type OrderEvent = (
    OrderCreated
    | OrderConfirmed
    | OrderCancelled
    | PaymentProcessed
    | PaymentFailed
    | InventoryReserved
    | InventoryUnavailable
    | OrderShipped
    | OrderDelivered
    | OrderRefunded
    | OrderUpdated
)


# ---------------------------------------------------------------------------
# Named constructors
# ---------------------------------------------------------------------------


def _envelope(source_service: str, correlation_id: str | None, clock: Clock | None) -> EventEnvelope:
    return EventEnvelope.new(source_service, correlation_id, clock=clock)


def order_created(
    order: Order | None,
    *,
    source_service: str = DEFAULT_SOURCE_SERVICE,
    correlation_id: str | None = None,
    clock: Clock | None = None,
) -> OrderCreated:
    return OrderCreated(_envelope(source_service, correlation_id, clock), order)


def order_confirmed(
    order: Order | None,
    *,
    source_service: str = DEFAULT_SOURCE_SERVICE,
    correlation_id: str | None = None,
    clock: Clock | None = None,
) -> OrderConfirmed:
    return OrderConfirmed(_envelope(source_service, correlation_id, clock), order)


def order_cancelled(
    order: Order | None,
    reason: str,
    *,
    source_service: str = DEFAULT_SOURCE_SERVICE,
    correlation_id: str | None = None,
    clock: Clock | None = None,
) -> OrderCancelled:
    return OrderCancelled(_envelope(source_service, correlation_id, clock), order, reason)


def payment_processed(
    order: Order | None,
    amount: Decimal,
    payment_method: str,
    *,
    source_service: str = DEFAULT_SOURCE_SERVICE,
    correlation_id: str | None = None,
    clock: Clock | None = None,
) -> PaymentProcessed:
    return PaymentProcessed(
        _envelope(source_service, correlation_id, clock), order, amount, payment_method
    )


def payment_failed(
    order: Order | None,
    amount: Decimal,
    reason: str,
    *,
    source_service: str = DEFAULT_SOURCE_SERVICE,
    correlation_id: str | None = None,
    clock: Clock | None = None,
) -> PaymentFailed:
    return PaymentFailed(_envelope(source_service, correlation_id, clock), order, amount, reason)


def inventory_reserved(
    order: Order | None,
    items: Iterable[str],
    *,
    source_service: str = DEFAULT_SOURCE_SERVICE,
    correlation_id: str | None = None,
    clock: Clock | None = None,
) -> InventoryReserved:
    return InventoryReserved(_envelope(source_service, correlation_id, clock), order, tuple(items))


def inventory_unavailable(
    order: Order | None,
    unavailable_items: Iterable[str],
    *,
    source_service: str = DEFAULT_SOURCE_SERVICE,
    correlation_id: str | None = None,
    clock: Clock | None = None,
) -> InventoryUnavailable:
    return InventoryUnavailable(
        _envelope(source_service, correlation_id, clock), order, tuple(unavailable_items)
    )


def order_shipped(
    order: Order | None,
    carrier: str,
    tracking_number: str,
    estimated_delivery: datetime,
    *,
    source_service: str = DEFAULT_SOURCE_SERVICE,
    correlation_id: str | None = None,
    clock: Clock | None = None,
) -> OrderShipped:
    return OrderShipped(
        _envelope(source_service, correlation_id, clock),
        order,
        carrier,
        tracking_number,
        estimated_delivery,
    )


def order_delivered(
    order: Order | None,
    *,
    source_service: str = DEFAULT_SOURCE_SERVICE,
    correlation_id: str | None = None,
    clock: Clock | None = None,
) -> OrderDelivered:
    return OrderDelivered(_envelope(source_service, correlation_id, clock), order)


def order_refunded(
    order: Order | None,
    amount: Decimal,
    reason: str,
    *,
    source_service: str = DEFAULT_SOURCE_SERVICE,
    correlation_id: str | None = None,
    clock: Clock | None = None,
) -> OrderRefunded:
    return OrderRefunded(_envelope(source_service, correlation_id, clock), order, amount, reason)


def order_updated(
    order: Order | None,
    previous_order: Order | None,
    *,
    source_service: str = DEFAULT_SOURCE_SERVICE,
    correlation_id: str | None = None,
    clock: Clock | None = None,
) -> OrderUpdated:
    return OrderUpdated(_envelope(source_service, correlation_id, clock), order, previous_order)


def order_status_updated(
    order: Order,
    previous_status: OrderStatus,
    *,
    source_service: str = DEFAULT_SOURCE_SERVICE,
    correlation_id: str | None = None,
    clock: Clock | None = None,
) -> OrderUpdated:
    """Update event for a pure status transition.

    The previous snapshot is the current order carrying *previous_status*.
    """
    return order_updated(
        order,
        order.with_status(previous_status),
        source_service=source_service,
        correlation_id=correlation_id,
        clock=clock,
    )


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------


def event_type_name(event: OrderEvent) -> str:
    return event.kind.value


def description(event: OrderEvent) -> str:
    return event.kind.description


def aggregate_id(event: OrderEvent) -> str:
    return event.order.id if event.order is not None else UNKNOWN_AGGREGATE


def is_failure_event(event: OrderEvent) -> bool:
    return event.kind.is_failure


def is_success_event(event: OrderEvent) -> bool:
    return not event.kind.is_failure


def event_data(event: OrderEvent) -> dict[str, Any]:
    """Compact summary of the event, suitable for log lines."""
    data: dict[str, Any] = {
        "event_type": event_type_name(event),
        "order_id": event.order.id if event.order is not None else None,
    }
    if event.order is not None:
        data["user_id"] = event.order.user_id
        data["status"] = event.order.status.name
        data["total_amount"] = str(event.order.total_amount)
    if event.envelope.metadata is not None:
        data["metadata"] = event.envelope.metadata
    return data


def _plain(value: Any) -> Any:
    if isinstance(value, Order):
        return value.to_dict()
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, enum.Enum):
        return value.name
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    return value


def to_payload(event: OrderEvent) -> dict[str, Any]:
    """JSON-friendly mapping of the envelope plus the variant's own fields."""
    env = event.envelope
    payload: dict[str, Any] = {
        "event_id": env.event_id,
        "event_timestamp": _plain(env.event_timestamp),
        "source_service": env.source_service,
        "correlation_id": env.correlation_id,
        "event_version": env.event_version,
        "metadata": env.metadata,
        "event_type": event_type_name(event),
        "aggregate_id": aggregate_id(event),
    }
    for f in dataclasses.fields(event):
        if f.name != "envelope":
            payload[f.name] = _plain(getattr(event, f.name))
    if isinstance(event, InventoryUnavailable):
        payload["reason"] = event.reason
    return payload


__all__ = [
    "DEFAULT_SOURCE_SERVICE",
    "EVENT_SCHEMA_VERSION",
    "UNKNOWN_AGGREGATE",
    "EventEnvelope",
    "InventoryReserved",
    "InventoryUnavailable",
    "OrderCancelled",
    "OrderConfirmed",
    "OrderCreated",
    "OrderDelivered",
    "OrderEvent",
    "OrderEventType",
    "OrderRefunded",
    "OrderShipped",
    "OrderUpdated",
    "PaymentFailed",
    "PaymentProcessed",
    "aggregate_id",
    "description",
    "event_data",
    "event_type_name",
    "inventory_reserved",
    "inventory_unavailable",
    "is_failure_event",
    "is_success_event",
    "order_cancelled",
    "order_confirmed",
    "order_created",
    "order_delivered",
    "order_refunded",
    "order_shipped",
    "order_status_updated",
    "order_updated",
    "payment_failed",
    "payment_processed",
    "to_payload",
]
