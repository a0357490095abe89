"""Kernel messaging – message envelope, header names, channel registry port."""
from orderstream.kernel.messaging import headers
from orderstream.kernel.messaging.message import (
    ChannelRegistry,
    DestinationName,
    Message,
    MessageId,
)

__all__ = [
    "ChannelRegistry",
    "DestinationName",
    "Message",
    "MessageId",
    "headers",
]
