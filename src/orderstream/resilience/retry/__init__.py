"""Resilience – retry with exponential backoff and jitter."""
from orderstream.resilience.retry.backoff import BackoffStrategy, ExponentialBackoff
from orderstream.resilience.retry.jitter import JitterStrategy, NoJitter, RangeJitter
from orderstream.resilience.retry.policy import PublishOperation, RetryPolicy
from orderstream.resilience.retry.profile import (
    FAST_PROFILE,
    PRODUCTION_PROFILE,
    PROFILES,
    BackoffProfile,
)

__all__ = [
    "FAST_PROFILE",
    "PRODUCTION_PROFILE",
    "PROFILES",
    "BackoffProfile",
    "BackoffStrategy",
    "ExponentialBackoff",
    "JitterStrategy",
    "NoJitter",
    "PublishOperation",
    "RangeJitter",
    "RetryPolicy",
]
