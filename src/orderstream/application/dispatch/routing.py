"""Dispatch – destination names and value-based routing rules."""
from __future__ import annotations

from decimal import Decimal
from typing import Final, Literal

ORDER_EVENTS: Final = "order-events"
ORDER_STATUS_EVENTS: Final = "order-status-events"
ORDER_FULFILLMENT: Final = "order-fulfillment"
ANALYTICS_EVENTS: Final = "analytics-events"
NOTIFICATION_EVENTS: Final = "notification-events"

HIGH_VALUE_THRESHOLD: Final = Decimal("1000")
MEDIUM_VALUE_THRESHOLD: Final = Decimal("100")

type PriorityBucket = Literal["HIGH", "MEDIUM", "LOW"]


def priority_bucket(total: Decimal) -> PriorityBucket:
    """Fulfilment priority for an order total; both bounds are exclusive."""
    if total > HIGH_VALUE_THRESHOLD:
        return "HIGH"
    if total > MEDIUM_VALUE_THRESHOLD:
        return "MEDIUM"
    return "LOW"


def is_high_value(total: Decimal) -> bool:
    return total > HIGH_VALUE_THRESHOLD


__all__ = [
    "ANALYTICS_EVENTS",
    "HIGH_VALUE_THRESHOLD",
    "MEDIUM_VALUE_THRESHOLD",
    "NOTIFICATION_EVENTS",
    "ORDER_EVENTS",
    "ORDER_FULFILLMENT",
    "ORDER_STATUS_EVENTS",
    "PriorityBucket",
    "is_high_value",
    "priority_bucket",
]
