"""Unit tests for CorrelationContext / RequestContext."""

from __future__ import annotations

import asyncio

import pytest

from orderstream.kernel.messaging import headers as h
from orderstream.observability.correlation import CorrelationContext, RequestContext


@pytest.fixture(autouse=True)
def _clear():
    CorrelationContext.clear()
    yield
    CorrelationContext.clear()


class TestRequestContext:
    def test_new_generates_id(self) -> None:
        ctx = RequestContext.new(order_id="o-1")
        assert ctx.correlation_id
        assert ctx.order_id == "o-1"
        assert RequestContext.new().correlation_id != ctx.correlation_id

    def test_from_headers(self) -> None:
        ctx = RequestContext.from_headers({h.CORRELATION_ID: "c-1", h.ORDER_ID: "o-1", h.USER_ID: "u-1"})
        assert (ctx.correlation_id, ctx.order_id, ctx.user_id) == ("c-1", "o-1", "u-1")

    def test_from_headers_case_insensitive(self) -> None:
        assert RequestContext.from_headers({"Correlation-ID": "c-2"}).correlation_id == "c-2"

    def test_from_headers_accepts_non_string_keys(self) -> None:
        ctx = RequestContext.from_headers({42: "answer", None: "x", h.ORDER_ID: "o-3"})
        assert ctx.order_id == "o-3"
        assert ctx.correlation_id

    def test_from_headers_mints_when_absent(self) -> None:
        ctx = RequestContext.from_headers({})
        assert ctx.correlation_id
        assert ctx.order_id is None


class TestCorrelationContext:
    def test_empty_by_default(self) -> None:
        assert CorrelationContext.get() is None
        assert CorrelationContext.correlation_id() is None

    def test_set_and_clear(self) -> None:
        CorrelationContext.set(RequestContext("c-1"))
        assert CorrelationContext.correlation_id() == "c-1"
        CorrelationContext.clear()
        assert CorrelationContext.get() is None

    def test_scope_restores_previous(self) -> None:
        CorrelationContext.set(RequestContext("outer"))
        with CorrelationContext.scope(RequestContext("inner")) as ctx:
            assert ctx.correlation_id == "inner"
            assert CorrelationContext.correlation_id() == "inner"
        assert CorrelationContext.correlation_id() == "outer"

    def test_scope_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with CorrelationContext.scope(RequestContext("inner")):
                raise RuntimeError
        assert CorrelationContext.get() is None

    def test_set_from_headers(self) -> None:
        ctx = CorrelationContext.set_from_headers({h.CORRELATION_ID: "c-9"})
        assert CorrelationContext.get() is ctx

    def test_task_isolation(self) -> None:
        async def _branch(cid: str) -> str | None:
            CorrelationContext.set(RequestContext(cid))
            await asyncio.sleep(0)
            return CorrelationContext.correlation_id()

        async def _run() -> tuple[list[str | None], str | None]:
            CorrelationContext.set(RequestContext("parent"))
            results = await asyncio.gather(_branch("a"), _branch("b"))
            return list(results), CorrelationContext.correlation_id()

        results, parent = asyncio.run(_run())
        assert results == ["a", "b"]
        assert parent == "parent"
