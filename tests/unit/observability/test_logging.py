"""Unit tests for structlog integration."""

from __future__ import annotations

import asyncio
import json
import logging
from decimal import Decimal

import pytest
import structlog
from structlog.testing import capture_logs

from orderstream.application.dispatch import ORDER_EVENTS, OrderDispatcher
from orderstream.domain.order import Order
from orderstream.observability.correlation import CorrelationContext, RequestContext
from orderstream.observability.logging import CorrelationProcessor, JsonLoggerFactory, get_logger
from orderstream.testing.fakes import InMemoryChannelRegistry


@pytest.fixture(autouse=True)
def _clear():
    CorrelationContext.clear()
    yield
    CorrelationContext.clear()


# ---------------------------------------------------------------------------
# CorrelationProcessor
# ---------------------------------------------------------------------------


class TestCorrelationProcessor:
    def test_no_context_is_noop(self) -> None:
        assert CorrelationProcessor()(None, "info", {"event": "x"}) == {"event": "x"}

    def test_injects_context(self) -> None:
        CorrelationContext.set(RequestContext("c-1", order_id="o-1"))
        out = CorrelationProcessor()(None, "info", {"event": "x"})
        assert out == {"event": "x", "correlation_id": "c-1", "order_id": "o-1"}

    def test_bound_values_win(self) -> None:
        CorrelationContext.set(RequestContext("c-1", order_id="o-1", user_id="u-1"))
        out = CorrelationProcessor()(None, "info", {"event": "x", "order_id": "explicit"})
        assert out["order_id"] == "explicit"
        assert out["user_id"] == "u-1"


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("t", component="dispatch").info("hello", n=1)
        assert logs == [{"component": "dispatch", "n": 1, "event": "hello", "log_level": "info"}]

    def test_dispatcher_logs_outcomes(self) -> None:
        registry = InMemoryChannelRegistry().reject(ORDER_EVENTS)
        order = Order("ORD-1", "USR-1", Decimal("10"))
        with capture_logs() as logs:
            asyncio.run(OrderDispatcher(registry).send_order_created(order))
        (entry,) = [e for e in logs if e["event"].startswith("dispatch.")]
        assert entry["event"] == "dispatch.rejected"
        assert entry["order_id"] == "ORD-1"
        assert entry["destination"] == ORDER_EVENTS
        assert entry["log_level"] == "warning"


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_configure_installs_json_handler(self) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_renders_json_with_correlation(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        CorrelationContext.set(RequestContext("c-json"))
        structlog.get_logger("orderstream.test").info("dispatch.sent", destination="order-events")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "dispatch.sent"
        assert record["correlation_id"] == "c-json"
        assert record["level"] == "info"
        assert record["logger"] == "orderstream.test"
