"""Kernel messaging – message envelope and channel registry port."""
from __future__ import annotations

import abc
import dataclasses
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")

type DestinationName = str
type MessageId = str


@dataclasses.dataclass(frozen=True)
class Message(Generic[T]):
    """Transport-agnostic message: a payload plus free-form headers.

    Instances are never mutated; the ``with_*`` helpers return copies.
    """

    payload: T
    headers: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    id: MessageId = dataclasses.field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))

    def header(self, name: str, default: Any = None) -> Any:
        return self.headers.get(name, default)

    def with_headers(self, headers: Mapping[str, Any]) -> "Message[T]":
        """Return a copy whose headers are the current ones overlaid with *headers*."""
        return dataclasses.replace(self, headers={**self.headers, **headers})

    def with_payload(self, payload: U, headers: Mapping[str, Any]) -> "Message[U]":
        """Return a new message carrying *payload* and exactly *headers*."""
        return Message(payload=payload, headers=dict(headers), id=self.id)


class ChannelRegistry(abc.ABC):
    """Port: hand a payload to a named destination.

    The hosting messaging runtime maps destination names to physical
    topics/queues.  ``publish`` returns ``True`` when the message was
    accepted; ``False`` or a raised exception both mean "not delivered".
    """

    @abc.abstractmethod
    async def publish(
        self,
        destination: DestinationName,
        payload: Any,
        headers: Mapping[str, Any],
    ) -> bool: ...


__all__ = ["ChannelRegistry", "DestinationName", "Message", "MessageId"]
