"""Application – order dispatch engine."""
from orderstream.application.dispatch.dispatcher import HIGH_VALUE_NOTIFICATION, OrderDispatcher
from orderstream.application.dispatch.routing import (
    ANALYTICS_EVENTS,
    HIGH_VALUE_THRESHOLD,
    MEDIUM_VALUE_THRESHOLD,
    NOTIFICATION_EVENTS,
    ORDER_EVENTS,
    ORDER_FULFILLMENT,
    ORDER_STATUS_EVENTS,
    PriorityBucket,
    is_high_value,
    priority_bucket,
)

__all__ = [
    "ANALYTICS_EVENTS",
    "HIGH_VALUE_NOTIFICATION",
    "HIGH_VALUE_THRESHOLD",
    "MEDIUM_VALUE_THRESHOLD",
    "NOTIFICATION_EVENTS",
    "ORDER_EVENTS",
    "ORDER_FULFILLMENT",
    "ORDER_STATUS_EVENTS",
    "OrderDispatcher",
    "PriorityBucket",
    "is_high_value",
    "priority_bucket",
]
