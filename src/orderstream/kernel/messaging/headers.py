"""Kernel messaging – well-known header names.

Keys are lowercase and hyphenated so they survive any broker binding
unchanged.
"""
from __future__ import annotations

from typing import Final

# Standard
EVENT_TYPE: Final = "event-type"
SOURCE_SERVICE: Final = "source-service"
CORRELATION_ID: Final = "correlation-id"
ROUTING_KEY: Final = "routing-key"
PRIORITY: Final = "priority"
TRANSFORMATION_APPLIED: Final = "transformation-applied"
MESSAGE_PATH: Final = "message-path"

# Business
USER_ID: Final = "user-id"

# Order
ORDER_ID: Final = "order-id"
ORDER_VALUE: Final = "order-value"
ORDER_DATE: Final = "order-date"
PREVIOUS_STATUS: Final = "previous-status"
NEW_STATUS: Final = "new-status"
STATUS_CHANGED: Final = "status-changed"
CANCELLATION_REASON: Final = "cancellation-reason"
NOTIFICATION_TYPE: Final = "notification-type"

__all__ = [
    "CANCELLATION_REASON",
    "CORRELATION_ID",
    "EVENT_TYPE",
    "MESSAGE_PATH",
    "NEW_STATUS",
    "NOTIFICATION_TYPE",
    "ORDER_DATE",
    "ORDER_ID",
    "ORDER_VALUE",
    "PREVIOUS_STATUS",
    "PRIORITY",
    "ROUTING_KEY",
    "SOURCE_SERVICE",
    "STATUS_CHANGED",
    "TRANSFORMATION_APPLIED",
    "USER_ID",
]
