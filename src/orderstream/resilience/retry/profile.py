"""Resilience – named backoff profiles."""
from __future__ import annotations

import dataclasses
from typing import Final

from orderstream.resilience.retry.backoff import ExponentialBackoff
from orderstream.resilience.retry.jitter import JitterStrategy, RangeJitter


@dataclasses.dataclass(frozen=True)
class BackoffProfile:
    """Backoff parameters in seconds.

    ``compute_delay(attempt)`` is
    ``min(max_delay, base_delay * multiplier ** min(attempt - 1, exponent_cap))``
    scaled by a uniform jitter factor in ``[jitter_low, jitter_high]``.
    The jitter is applied after the cap, so a capped delay may land up to
    ``jitter_high`` times above ``max_delay``.
    """

    base_delay: float
    multiplier: float
    max_delay: float
    exponent_cap: int | None = None
    jitter_low: float = 0.8
    jitter_high: float = 1.2

    def backoff(self) -> ExponentialBackoff:
        return ExponentialBackoff(
            base_delay=self.base_delay,
            multiplier=self.multiplier,
            max_delay=self.max_delay,
            exponent_cap=self.exponent_cap,
        )

    def jitter(self) -> JitterStrategy:
        return RangeJitter(self.jitter_low, self.jitter_high)

    def compute_delay(self, attempt: int) -> float:
        return self.jitter().apply(self.backoff().compute(attempt))


PRODUCTION_PROFILE: Final = BackoffProfile(base_delay=1.0, multiplier=2.0, max_delay=30.0)
FAST_PROFILE: Final = BackoffProfile(base_delay=0.010, multiplier=1.5, max_delay=0.100, exponent_cap=4)

PROFILES: Final[dict[str, BackoffProfile]] = {
    "production": PRODUCTION_PROFILE,
    "fast": FAST_PROFILE,
}


__all__ = ["FAST_PROFILE", "PRODUCTION_PROFILE", "PROFILES", "BackoffProfile"]
