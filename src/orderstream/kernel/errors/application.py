"""Application-layer errors – raised while handling a single message."""

from __future__ import annotations

from typing import Any

from orderstream.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Failure inside a use case (dispatch, transformation)."""

    default_code = "application_error"


class TransformationError(ApplicationError):
    """A pipeline stage could not transform one message.

    Fatal for that message only: the stage produces no partial output and
    sibling messages are unaffected.
    """

    default_code = "transformation_failed"

    def __init__(
        self,
        stage: str,
        message: str | None = None,
        *,
        message_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = kwargs.pop("detail", None) or {}
        detail.setdefault("stage", stage)
        if message_id is not None:
            detail.setdefault("message_id", message_id)
        super().__init__(message or f"Stage '{stage}' failed", detail=detail, **kwargs)
        self.stage = stage
        self.message_id = message_id


__all__ = ["ApplicationError", "TransformationError"]
