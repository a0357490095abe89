"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from orderstream.config.validation import ConfigError
from orderstream.kernel.errors import (
    ApplicationError,
    BaseError,
    DeliveryError,
    InfrastructureError,
    TransformationError,
)


# ---------------------------------------------------------------------------
# BaseError
# ---------------------------------------------------------------------------


class TestBaseError:
    def test_default_code(self) -> None:
        err = BaseError("boom")
        assert err.code == "orderstream_error"
        assert err.message == "boom"
        assert err.detail == {}

    def test_explicit_code_wins(self) -> None:
        assert BaseError("boom", code="custom").code == "custom"

    def test_to_dict_includes_cause(self) -> None:
        cause = ValueError("bad")
        d = BaseError("boom", detail={"k": 1}, cause=cause).to_dict()
        assert d["code"] == "orderstream_error"
        assert d["detail"] == {"k": 1}
        assert "ValueError" in d["cause"]

    def test_cause_is_chained(self) -> None:
        cause = KeyError("x")
        assert BaseError("boom", cause=cause).__cause__ is cause

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("boom", detail={"order_id": "o-1"})))
        assert payload["message"] == "boom"
        assert payload["detail"]["order_id"] == "o-1"

    def test_repr(self) -> None:
        assert repr(ApplicationError("x")) == "ApplicationError(code='application_error', message='x')"


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------


class TestHierarchy:
    def test_transformation_error_is_application_error(self) -> None:
        assert issubclass(TransformationError, ApplicationError)
        assert issubclass(ApplicationError, BaseError)

    def test_delivery_error_is_infrastructure_error(self) -> None:
        assert issubclass(DeliveryError, InfrastructureError)
        assert issubclass(InfrastructureError, BaseError)

    def test_config_error_is_application_error(self) -> None:
        assert issubclass(ConfigError, ApplicationError)

    def test_catchable_as_base(self) -> None:
        with pytest.raises(BaseError):
            raise DeliveryError("order-events")


# ---------------------------------------------------------------------------
# TransformationError / DeliveryError
# ---------------------------------------------------------------------------


class TestTransformationError:
    def test_stage_and_message_id_in_detail(self) -> None:
        err = TransformationError("audit-transformer", message_id="m-1")
        assert err.stage == "audit-transformer"
        assert err.message_id == "m-1"
        assert err.detail == {"stage": "audit-transformer", "message_id": "m-1"}
        assert err.code == "transformation_failed"

    def test_default_message_names_stage(self) -> None:
        assert "event-splitter" in TransformationError("event-splitter").message

    def test_extra_detail_is_kept(self) -> None:
        err = TransformationError("s", detail={"order_id": "o-9"})
        assert err.detail == {"order_id": "o-9", "stage": "s"}


class TestDeliveryError:
    def test_destination(self) -> None:
        err = DeliveryError("order-events")
        assert err.destination == "order-events"
        assert err.code == "delivery_failed"
        assert "order-events" in err.message

    def test_custom_message(self) -> None:
        assert DeliveryError("d", "nope").message == "nope"
