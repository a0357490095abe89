"""Infrastructure errors – channel registry failures."""

from __future__ import annotations

from typing import Any

from orderstream.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class DeliveryError(InfrastructureError):
    """The channel registry rejected or failed to accept a message."""

    default_code = "delivery_failed"

    def __init__(
        self,
        destination: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Delivery to '{destination}' failed", **kwargs)
        self.destination = destination


__all__ = ["DeliveryError", "InfrastructureError"]
