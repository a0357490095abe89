"""Observability – structlog processor and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from orderstream.observability.correlation import CorrelationContext


class CorrelationProcessor:
    """structlog processor that copies the ambient :class:`RequestContext`.

    Adds ``correlation_id`` and, when known, ``order_id`` and ``user_id``.
    Values already bound on the event win.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        ctx = CorrelationContext.get()
        if ctx is not None:
            event_dict.setdefault("correlation_id", ctx.correlation_id)
            if ctx.order_id is not None:
                event_dict.setdefault("order_id", ctx.order_id)
            if ctx.user_id is not None:
                event_dict.setdefault("user_id", ctx.user_id)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["CorrelationProcessor", "get_logger"]
