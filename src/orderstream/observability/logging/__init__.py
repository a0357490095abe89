"""Observability – structured logging helpers."""
from orderstream.observability.logging.factory import JsonLoggerFactory
from orderstream.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = ["CorrelationProcessor", "JsonLoggerFactory", "get_logger"]
