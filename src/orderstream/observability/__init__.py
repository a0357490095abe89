"""Observability – structured logging and correlation context."""
from orderstream.observability.correlation import CorrelationContext, RequestContext
from orderstream.observability.logging import CorrelationProcessor, JsonLoggerFactory, get_logger

__all__ = [
    "CorrelationContext",
    "CorrelationProcessor",
    "JsonLoggerFactory",
    "RequestContext",
    "get_logger",
]
