"""Application pipeline – event splitter stage."""
from __future__ import annotations

from typing import Final
from uuid import uuid4

from orderstream.application.pipeline.stage import Stage
from orderstream.domain.order import Order, OrderPriority, OrderStatus
from orderstream.kernel.messaging import Message
from orderstream.kernel.messaging import headers as h

_STATUS_EVENTS: Final[dict[OrderStatus, tuple[str, ...]]] = {
    OrderStatus.PENDING: ("order-created", "inventory-check-requested", "payment-requested"),
    OrderStatus.CONFIRMED: ("order-confirmed", "fulfillment-requested"),
    OrderStatus.PROCESSING: ("order-processing-started",),
    OrderStatus.SHIPPED: ("order-shipped", "tracking-notification-requested"),
    OrderStatus.DELIVERED: ("order-delivered", "customer-survey-requested"),
    OrderStatus.CANCELLED: ("order-cancelled", "refund-requested"),
}

PRIORITY_PROCESSING: Final = "priority-processing-requested"
ANALYTICS_REQUESTED: Final = "analytics-data-requested"


def split_events(order: Order) -> list[str]:
    """Ordered ``<event>:<order id>`` tokens derived from the order's status.

    Statuses without an entry in the table contribute nothing before the
    trailing analytics token.
    """
    names = list(_STATUS_EVENTS.get(order.status, ()))
    if order.status is OrderStatus.PROCESSING and order.priority is OrderPriority.URGENT:
        names.append(PRIORITY_PROCESSING)
    names.append(ANALYTICS_REQUESTED)
    return [f"{name}:{order.id}" for name in names]


class EventSplitterStage(Stage):
    """Replace the order with the list of events its current status implies."""

    name = "event-splitter"

    def apply(self, message: Message[Order]) -> Message[list[str]]:
        order = message.payload
        events = split_events(order)
        headers = {
            **message.headers,
            "split-correlation-id": f"corr-{uuid4()}",
            "split-event-count": len(events),
            "split-timestamp": self._clock.epoch_millis(),
            h.TRANSFORMATION_APPLIED: "order-event-split",
            "original-order-id": order.id,
        }
        return message.with_payload(events, headers)


__all__ = ["ANALYTICS_REQUESTED", "PRIORITY_PROCESSING", "EventSplitterStage", "split_events"]
