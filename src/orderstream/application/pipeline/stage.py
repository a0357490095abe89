"""Application pipeline – Stage base."""
from __future__ import annotations

import abc
from typing import Any, ClassVar

from orderstream.domain.order import Order
from orderstream.kernel.errors import TransformationError
from orderstream.kernel.messaging import Message
from orderstream.kernel.time import Clock, SystemClock
from orderstream.observability.logging import get_logger

logger = get_logger(__name__)


class Stage(abc.ABC):
    """One stateless order transformation: one message in, one message out.

    Subclasses implement :meth:`apply`.  :meth:`transform` wraps anything
    it raises in a :class:`TransformationError` carrying the stage name and
    message id, so a failure aborts only the message being processed.
    """

    name: ClassVar[str]

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    @abc.abstractmethod
    def apply(self, message: Message[Order]) -> Message[Any]: ...

    def transform(self, message: Message[Order]) -> Message[Any]:
        try:
            result = self.apply(message)
        except TransformationError:
            raise
        except Exception as exc:
            logger.error("pipeline.stage_failed", stage=self.name, message_id=message.id, error=repr(exc))
            raise TransformationError(
                self.name,
                f"Stage '{self.name}' could not transform message {message.id}",
                message_id=message.id,
                cause=exc,
            ) from exc
        logger.debug("pipeline.stage_applied", stage=self.name, message_id=message.id)
        return result


__all__ = ["Stage"]
