"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import contextlib
import dataclasses
from collections.abc import Iterator, Mapping
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

from orderstream.kernel.messaging import headers as h


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Ambient context for one unit of order processing."""
    correlation_id: str
    order_id: str | None = None
    user_id: str | None = None

    @classmethod
    def new(cls, order_id: str | None = None, user_id: str | None = None) -> "RequestContext":
        return cls(correlation_id=str(uuid4()), order_id=order_id, user_id=user_id)

    @classmethod
    def from_headers(cls, headers: Mapping[str, Any]) -> "RequestContext":
        """Adopt the ``correlation-id`` of an inbound message, or mint one.

        Header names are matched case-insensitively.
        """
        norm = {str(k).lower(): v for k, v in headers.items()}
        return cls(
            correlation_id=norm.get(h.CORRELATION_ID) or str(uuid4()),
            order_id=norm.get(h.ORDER_ID),
            user_id=norm.get(h.USER_ID),
        )


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_orderstream_request_ctx", default=None)


class CorrelationContext:
    """Ambient correlation context stored in a ``ContextVar``.

    Each asyncio task copies the context at creation, so a value set before
    a fan-out is visible to every branch while changes inside a branch stay
    local to it.
    """

    @staticmethod
    def set(ctx: RequestContext) -> None:
        _CTX_VAR.set(ctx)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def correlation_id() -> str | None:
        ctx = _CTX_VAR.get()
        return ctx.correlation_id if ctx is not None else None

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)

    @staticmethod
    @contextlib.contextmanager
    def scope(ctx: RequestContext) -> Iterator[RequestContext]:
        """Bind *ctx* for the duration of a ``with`` block."""
        token = _CTX_VAR.set(ctx)
        try:
            yield ctx
        finally:
            _CTX_VAR.reset(token)

    @staticmethod
    def set_from_headers(headers: Mapping[str, Any]) -> RequestContext:
        ctx = RequestContext.from_headers(headers)
        _CTX_VAR.set(ctx)
        return ctx


__all__ = ["CorrelationContext", "RequestContext"]
