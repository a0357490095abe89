"""Resilience – jitter strategies."""
from __future__ import annotations

import abc
import random


class JitterStrategy(abc.ABC):
    """Randomise a backoff delay so concurrent retries spread out."""

    @abc.abstractmethod
    def apply(self, delay: float) -> float: ...


class NoJitter(JitterStrategy):
    def apply(self, delay: float) -> float:
        return delay


class RangeJitter(JitterStrategy):
    """Scale the delay by a uniform factor in ``[low, high]``."""

    def __init__(self, low: float = 0.8, high: float = 1.2) -> None:
        if low > high:
            raise ValueError(f"jitter range is empty: low={low} > high={high}")
        self._low = low
        self._high = high

    def apply(self, delay: float) -> float:
        return delay * random.uniform(self._low, self._high)


__all__ = ["JitterStrategy", "NoJitter", "RangeJitter"]
