"""Unit tests for the in-memory fakes."""

from __future__ import annotations

import asyncio

import pytest

from orderstream.kernel.messaging import ChannelRegistry
from orderstream.testing.fakes import FAKE_NOW, FakeClock, FrozenClock, InMemoryChannelRegistry


class TestInMemoryChannelRegistry:
    def test_is_channel_registry(self) -> None:
        assert isinstance(InMemoryChannelRegistry(), ChannelRegistry)

    def test_accepts_by_default_and_records(self) -> None:
        reg = InMemoryChannelRegistry()
        assert asyncio.run(reg.publish("d", {"x": 1}, {"h": "v"})) is True
        (call,) = reg.calls
        assert (call.destination, call.payload, call.headers, call.accepted) == ("d", {"x": 1}, {"h": "v"}, True)

    def test_default_false(self) -> None:
        reg = InMemoryChannelRegistry(default=False)
        assert asyncio.run(reg.publish("d", 1, {})) is False
        assert reg.published == []

    def test_script_then_fallback(self) -> None:
        reg = InMemoryChannelRegistry().script("d", False, True, False)

        async def _run() -> list[bool]:
            return [await reg.publish("d", i, {}) for i in range(4)]

        assert asyncio.run(_run()) == [False, True, False, True]

    def test_scripted_exception(self) -> None:
        reg = InMemoryChannelRegistry().script("d", TimeoutError("slow"))
        with pytest.raises(TimeoutError):
            asyncio.run(reg.publish("d", 1, {}))
        assert reg.calls[0].accepted is False

    def test_reject_is_per_destination(self) -> None:
        reg = InMemoryChannelRegistry().reject("bad")

        async def _run() -> tuple[bool, bool]:
            return await reg.publish("bad", 1, {}), await reg.publish("good", 1, {})

        assert asyncio.run(_run()) == (False, True)
        assert [c.destination for c in reg.published] == ["good"]
        assert len(reg.of_destination("bad")) == 1

    def test_headers_are_copied(self) -> None:
        reg = InMemoryChannelRegistry()
        headers = {"a": "1"}
        asyncio.run(reg.publish("d", 1, headers))
        headers["a"] = "2"
        assert reg.calls[0].headers == {"a": "1"}

    def test_clear(self) -> None:
        reg = InMemoryChannelRegistry().reject("d")
        asyncio.run(reg.publish("d", 1, {}))
        reg.clear()
        assert reg.calls == []
        assert asyncio.run(reg.publish("d", 1, {})) is True


class TestFakeClock:
    def test_pinned(self) -> None:
        clock = FakeClock()
        assert isinstance(clock, FrozenClock)
        assert clock.now() == FAKE_NOW

    def test_custom_instant(self) -> None:
        at = FAKE_NOW.replace(year=2030)
        assert FakeClock(at).now() == at
