"""Application pipeline – analytics projection stage."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Final

from orderstream.application.dispatch.routing import HIGH_VALUE_THRESHOLD
from orderstream.application.pipeline.stage import Stage
from orderstream.domain.order import Order, OrderPriority
from orderstream.kernel.messaging import Message
from orderstream.kernel.messaging import headers as h

ANALYTICS_FORMAT: Final = "order-v1"
DATA_RETENTION_DAYS: Final = 365

_WEEKDAYS: Final = ("MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY")
_MONTHS: Final = (
    "JANUARY", "FEBRUARY", "MARCH", "APRIL", "MAY", "JUNE",
    "JULY", "AUGUST", "SEPTEMBER", "OCTOBER", "NOVEMBER", "DECEMBER",
)

_REGIONS: Final[dict[str, str]] = {
    **dict.fromkeys(("CA", "OR", "WA", "NV", "AZ"), "WEST"),
    **dict.fromkeys(("NY", "NJ", "CT", "MA", "PA"), "NORTHEAST"),
    **dict.fromkeys(("TX", "OK", "LA", "AR"), "SOUTH"),
    **dict.fromkeys(("IL", "IN", "OH", "MI", "WI"), "MIDWEST"),
}


def value_category(amount: Decimal) -> str:
    if amount > HIGH_VALUE_THRESHOLD:
        return "HIGH"
    if amount > 500:
        return "MEDIUM"
    if amount > 100:
        return "STANDARD"
    return "LOW"


def shipping_region(order: Order) -> str:
    address = order.shipping_address
    if address is None or address.state is None:
        return "UNKNOWN"
    return _REGIONS.get(address.state.upper(), "OTHER")


def quarter(moment: datetime) -> str:
    return f"Q{(moment.month - 1) // 3 + 1}"


def project(order: Order, processed_at: datetime) -> dict[str, Any]:
    """Flat analytics record for *order* as seen at *processed_at*."""
    return {
        "order_id": order.id,
        "customer_id": order.user_id,
        "order_timestamp": order.order_date.isoformat() if order.order_date else None,
        "order_amount": str(order.total_amount),
        "order_status": order.status.name,
        "order_priority": order.priority.name,
        "order_value_category": value_category(order.total_amount),
        "payment_method": order.payment_method or "UNKNOWN",
        "processing_hour": processed_at.hour,
        "processing_day_of_week": _WEEKDAYS[processed_at.weekday()],
        "processing_month": _MONTHS[processed_at.month - 1],
        "processing_quarter": quarter(processed_at),
        "is_high_value": order.total_amount > HIGH_VALUE_THRESHOLD,
        "is_urgent_priority": order.priority is OrderPriority.URGENT,
        "shipping_region": shipping_region(order),
    }


class AnalyticsTransformerStage(Stage):
    """Project the order into an analytics record with fresh headers.

    Inbound headers are dropped except ``correlation-id``, which is carried
    over unchanged.
    """

    name = "analytics-transformer"

    def apply(self, message: Message[Order]) -> Message[dict[str, Any]]:
        headers: dict[str, Any] = {
            "analytics-format": ANALYTICS_FORMAT,
            "analytics-timestamp": self._clock.epoch_millis(),
            "data-retention-days": DATA_RETENTION_DAYS,
            "analytics-category": "order-transaction",
            h.TRANSFORMATION_APPLIED: "order-analytics",
        }
        correlation_id = message.header(h.CORRELATION_ID)
        if correlation_id is not None:
            headers[h.CORRELATION_ID] = correlation_id
        return message.with_payload(project(message.payload, self._clock.now()), headers)


__all__ = [
    "ANALYTICS_FORMAT",
    "DATA_RETENTION_DAYS",
    "AnalyticsTransformerStage",
    "project",
    "quarter",
    "shipping_region",
    "value_category",
]
