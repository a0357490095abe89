"""Dispatch – OrderDispatcher.

Publishes order lifecycle messages through a :class:`ChannelRegistry`.
Every operation reports delivery as a ``bool`` and never raises: a
registry rejection, a registry exception, or a failure while building the
message all come back as ``False`` after being logged with the order id.
"""
from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any, Final

from orderstream.application.dispatch.routing import (
    ANALYTICS_EVENTS,
    NOTIFICATION_EVENTS,
    ORDER_EVENTS,
    ORDER_FULFILLMENT,
    ORDER_STATUS_EVENTS,
    is_high_value,
    priority_bucket,
)
from orderstream.config.settings import DispatchSettings
from orderstream.domain.events import (
    DEFAULT_SOURCE_SERVICE,
    order_cancelled,
    order_created,
    order_status_updated,
)
from orderstream.domain.order import Order, OrderStatus
from orderstream.kernel.messaging import ChannelRegistry, DestinationName
from orderstream.kernel.messaging import headers as h
from orderstream.kernel.time import Clock, SystemClock
from orderstream.observability.correlation import CorrelationContext
from orderstream.observability.logging import get_logger
from orderstream.resilience.retry import RetryPolicy
from orderstream.resilience.retry.policy import Sleep

logger = get_logger(__name__)

HIGH_VALUE_NOTIFICATION: Final = "HIGH_VALUE_ORDER"

type _Built = tuple[Any, dict[str, Any]]


def _order_id(order: Any) -> str | None:
    return getattr(order, "id", None)


class OrderDispatcher:
    """Send orders and order events to their downstream destinations.

    Parameters
    ----------
    registry:
        Broker abstraction that accepts ``(destination, payload, headers)``.
    source_service:
        Stamped on event envelopes and on ``source-service`` headers.
    retry_policy:
        Used by :meth:`send_with_retry`; defaults to the production profile.
    clock:
        Source of event timestamps.
    default_max_retries:
        Retry budget for :meth:`send_with_retry` when the caller gives none.
    """

    def __init__(
        self,
        registry: ChannelRegistry,
        *,
        source_service: str = DEFAULT_SOURCE_SERVICE,
        retry_policy: RetryPolicy | None = None,
        clock: Clock | None = None,
        default_max_retries: int = 3,
    ) -> None:
        self._registry = registry
        self._source_service = source_service
        self._retry = retry_policy or RetryPolicy()
        self._clock = clock or SystemClock()
        self._default_max_retries = default_max_retries

    @classmethod
    def from_settings(
        cls,
        registry: ChannelRegistry,
        settings: DispatchSettings,
        *,
        clock: Clock | None = None,
        sleep: Sleep | None = None,
    ) -> "OrderDispatcher":
        """Build a dispatcher from ``ORDERSTREAM_*`` settings."""
        return cls(
            registry,
            source_service=settings.source_service,
            retry_policy=RetryPolicy(settings.backoff_profile(), sleep=sleep),
            clock=clock,
            default_max_retries=settings.default_max_retries,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _headers(event_type: str, order: Order, **extra: Any) -> dict[str, Any]:
        headers: dict[str, Any] = {
            h.EVENT_TYPE: event_type,
            h.ORDER_ID: order.id,
            h.USER_ID: order.user_id,
        }
        headers.update(extra)
        correlation_id = CorrelationContext.correlation_id()
        if correlation_id is not None:
            headers[h.CORRELATION_ID] = correlation_id
        return headers

    async def _dispatch(
        self,
        operation: str,
        destination: DestinationName,
        order: Order,
        build: Callable[[], _Built],
    ) -> bool:
        log = logger.bind(operation=operation, destination=destination, order_id=_order_id(order))
        try:
            payload, headers = build()
            accepted = bool(await self._registry.publish(destination, payload, headers))
        except Exception as exc:
            log.error("dispatch.failed", error=repr(exc))
            return False
        if accepted:
            log.info("dispatch.sent")
        else:
            log.warning("dispatch.rejected")
        return accepted

    # ------------------------------------------------------------------
    # Single-destination operations
    # ------------------------------------------------------------------

    async def send_order_created(self, order: Order) -> bool:
        def build() -> _Built:
            event = order_created(
                order,
                source_service=self._source_service,
                correlation_id=CorrelationContext.correlation_id(),
                clock=self._clock,
            )
            headers = self._headers(
                "order-created", order, **{h.SOURCE_SERVICE: self._source_service}
            )
            return event, headers

        return await self._dispatch("order-created", ORDER_EVENTS, order, build)

    async def send_order_status_update(self, order: Order, previous_status: OrderStatus) -> bool:
        def build() -> _Built:
            event = order_status_updated(
                order,
                previous_status,
                source_service=self._source_service,
                correlation_id=CorrelationContext.correlation_id(),
                clock=self._clock,
            )
            headers = self._headers(
                "order-status-updated",
                order,
                **{
                    h.PREVIOUS_STATUS: previous_status.name,
                    h.NEW_STATUS: order.status.name,
                    h.STATUS_CHANGED: "true" if previous_status != order.status else "false",
                },
            )
            return event, headers

        return await self._dispatch("order-status-updated", ORDER_STATUS_EVENTS, order, build)

    async def send_order_to_fulfillment(self, order: Order) -> bool:
        def build() -> _Built:
            headers = self._headers(
                "order-fulfillment",
                order,
                **{h.PRIORITY: priority_bucket(order.total_amount), h.ROUTING_KEY: "fulfillment"},
            )
            return order, headers

        return await self._dispatch("order-fulfillment", ORDER_FULFILLMENT, order, build)

    async def send_order_cancelled(self, order: Order, reason: str) -> bool:
        def build() -> _Built:
            event = order_cancelled(
                order,
                reason,
                source_service=self._source_service,
                correlation_id=CorrelationContext.correlation_id(),
                clock=self._clock,
            )
            headers = self._headers(
                "order-cancelled", order, **{h.CANCELLATION_REASON: reason}
            )
            return event, headers

        return await self._dispatch("order-cancelled", ORDER_EVENTS, order, build)

    async def send_order_analytics(self, order: Order) -> bool:
        def build() -> _Built:
            headers = self._headers(
                "order-analytics",
                order,
                **{
                    h.ORDER_VALUE: str(order.total_amount),
                    h.ORDER_DATE: order.order_date.isoformat() if order.order_date else None,
                },
            )
            return order, headers

        return await self._dispatch("order-analytics", ANALYTICS_EVENTS, order, build)

    async def send_high_value_order_notification(self, order: Order) -> bool:
        def build() -> _Built:
            headers = self._headers(
                "high-value-order",
                order,
                **{
                    h.ORDER_VALUE: str(order.total_amount),
                    h.PRIORITY: "HIGH",
                    h.NOTIFICATION_TYPE: HIGH_VALUE_NOTIFICATION,
                },
            )
            return order, headers

        return await self._dispatch("high-value-order", NOTIFICATION_EVENTS, order, build)

    # ------------------------------------------------------------------
    # Composite operations
    # ------------------------------------------------------------------

    async def _notify_if_high_value(self, order: Order) -> bool:
        try:
            high_value = is_high_value(order.total_amount)
        except Exception as exc:
            logger.error(
                "dispatch.failed",
                operation="high-value-order",
                order_id=_order_id(order),
                error=repr(exc),
            )
            return False
        if not high_value:
            return True
        return await self.send_high_value_order_notification(order)

    async def send_to_multiple_destinations(self, order: Order) -> bool:
        """Fan out to analytics, fulfilment and (for high-value orders) notification.

        The three sends run as concurrent tasks; the result is ``True`` only
        when every branch succeeded.  A branch that is skipped because the
        order is not high value counts as success.
        """
        try:
            results = await asyncio.gather(
                asyncio.create_task(self.send_order_analytics(order)),
                asyncio.create_task(self.send_order_to_fulfillment(order)),
                asyncio.create_task(self._notify_if_high_value(order)),
            )
        except Exception as exc:
            logger.error("dispatch.fan_out_failed", order_id=_order_id(order), error=repr(exc))
            return False
        ok = all(results)
        logger.info("dispatch.fan_out_completed", order_id=_order_id(order), success=ok)
        return ok

    async def send_with_retry(self, order: Order, max_retries: int | None = None) -> bool:
        """Publish the created event, retrying up to *max_retries* more times.

        Without *max_retries* the dispatcher's ``default_max_retries`` applies.
        """
        if max_retries is None:
            max_retries = self._default_max_retries
        return await self._retry.retry_publish(
            lambda: self.send_order_created(order),
            max_retries,
            f"order-{_order_id(order)}",
        )


__all__ = ["HIGH_VALUE_NOTIFICATION", "OrderDispatcher"]
