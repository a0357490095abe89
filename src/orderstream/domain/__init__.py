"""Domain – order value model and order lifecycle events."""
from orderstream.domain.events import (
    EventEnvelope,
    InventoryReserved,
    InventoryUnavailable,
    OrderCancelled,
    OrderConfirmed,
    OrderCreated,
    OrderDelivered,
    OrderEvent,
    OrderEventType,
    OrderRefunded,
    OrderShipped,
    OrderUpdated,
    PaymentFailed,
    PaymentProcessed,
    aggregate_id,
    description,
    event_data,
    event_type_name,
    is_failure_event,
    is_success_event,
    to_payload,
)
from orderstream.domain.order import Address, Order, OrderItem, OrderPriority, OrderStatus

__all__ = [
    "Address",
    "EventEnvelope",
    "InventoryReserved",
    "InventoryUnavailable",
    "Order",
    "OrderCancelled",
    "OrderConfirmed",
    "OrderCreated",
    "OrderDelivered",
    "OrderEvent",
    "OrderEventType",
    "OrderItem",
    "OrderPriority",
    "OrderRefunded",
    "OrderShipped",
    "OrderStatus",
    "OrderUpdated",
    "PaymentFailed",
    "PaymentProcessed",
    "aggregate_id",
    "description",
    "event_data",
    "event_type_name",
    "is_failure_event",
    "is_success_event",
    "to_payload",
]
