"""Unit tests for dispatch routing rules."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given

from orderstream.application.dispatch import HIGH_VALUE_THRESHOLD, is_high_value, priority_bucket
from orderstream.testing.strategies import amount_strategy


class TestPriorityBucket:
    @pytest.mark.parametrize(
        ("total", "bucket"),
        [
            ("1500", "HIGH"),
            ("500", "MEDIUM"),
            ("50", "LOW"),
            ("100.00", "LOW"),
            ("100.01", "MEDIUM"),
            ("1000", "MEDIUM"),
            ("1000.01", "HIGH"),
            ("0", "LOW"),
        ],
    )
    def test_buckets(self, total: str, bucket: str) -> None:
        assert priority_bucket(Decimal(total)) == bucket

    @given(amount_strategy(max_amount="10000"))
    def test_high_bucket_matches_high_value(self, total: Decimal) -> None:
        assert (priority_bucket(total) == "HIGH") is is_high_value(total)


class TestHighValue:
    def test_threshold_is_exclusive(self) -> None:
        assert HIGH_VALUE_THRESHOLD == Decimal("1000")
        assert not is_high_value(Decimal("1000"))
        assert is_high_value(Decimal("1000.01"))
