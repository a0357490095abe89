"""Resilience – backoff strategies."""
from __future__ import annotations

import abc


class BackoffStrategy(abc.ABC):
    """Compute the wait (seconds) after the *attempt*-th failure, 1-based."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ExponentialBackoff(BackoffStrategy):
    """``base_delay * multiplier ** (attempt - 1)``, capped at ``max_delay``.

    *exponent_cap* bounds the exponent itself so very long retry chains stop
    growing before they reach ``max_delay``.
    """

    def __init__(
        self,
        base_delay: float = 1.0,
        multiplier: float = 2.0,
        max_delay: float = 30.0,
        exponent_cap: int | None = None,
    ) -> None:
        self._base = base_delay
        self._multiplier = multiplier
        self._max = max_delay
        self._exponent_cap = exponent_cap

    def compute(self, attempt: int) -> float:
        exponent = max(attempt - 1, 0)
        if self._exponent_cap is not None:
            exponent = min(exponent, self._exponent_cap)
        return min(self._max, self._base * self._multiplier ** exponent)


__all__ = ["BackoffStrategy", "ExponentialBackoff"]
