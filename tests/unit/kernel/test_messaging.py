"""Unit tests for the kernel message envelope and clock."""

from __future__ import annotations

from datetime import UTC, datetime

from orderstream.kernel.messaging import Message, headers
from orderstream.kernel.time import FrozenClock, SystemClock


# ---------------------------------------------------------------------------
# Message
# ---------------------------------------------------------------------------


class TestMessage:
    def test_defaults(self) -> None:
        msg = Message(payload="x")
        assert msg.headers == {}
        assert msg.id
        assert msg.occurred_at.tzinfo is not None

    def test_ids_are_unique(self) -> None:
        assert Message(payload=1).id != Message(payload=1).id

    def test_header_lookup(self) -> None:
        msg = Message(payload=1, headers={headers.ORDER_ID: "o-1"})
        assert msg.header(headers.ORDER_ID) == "o-1"
        assert msg.header("missing") is None
        assert msg.header("missing", "dflt") == "dflt"

    def test_with_headers_merges(self) -> None:
        msg = Message(payload=1, headers={"a": "1", "b": "2"})
        out = msg.with_headers({"b": "3", "c": "4"})
        assert out.headers == {"a": "1", "b": "3", "c": "4"}
        assert out.id == msg.id
        assert msg.headers == {"a": "1", "b": "2"}

    def test_with_payload_replaces_headers(self) -> None:
        msg = Message(payload=1, headers={"a": "1"})
        out = msg.with_payload("two", {"z": "9"})
        assert out.payload == "two"
        assert out.headers == {"z": "9"}
        assert out.id == msg.id


class TestHeaderNames:
    def test_lowercase_hyphenated(self) -> None:
        for name in headers.__all__:
            value = getattr(headers, name)
            assert value == value.lower()
            assert "_" not in value


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------


class TestClocks:
    def test_system_clock_is_utc(self) -> None:
        assert SystemClock().now().tzinfo is not None

    def test_frozen_clock(self) -> None:
        fixed = datetime(2026, 3, 1, 9, 0, tzinfo=UTC)
        clock = FrozenClock(fixed)
        assert clock.now() == fixed
        assert clock.epoch_millis() == int(fixed.timestamp() * 1000)

    def test_frozen_clock_advance(self) -> None:
        clock = FrozenClock(datetime(2026, 3, 1, 9, 0, tzinfo=UTC))
        clock.advance(hours=2)
        assert clock.now().hour == 11
