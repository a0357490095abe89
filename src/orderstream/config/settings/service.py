"""Config settings – dispatch and pipeline settings."""
from __future__ import annotations

import dataclasses

from orderstream.config.settings.base import Settings
from orderstream.config.validation import InvalidSettingValueError
from orderstream.resilience.retry import PROFILES, BackoffProfile


@dataclasses.dataclass
class DispatchSettings(Settings):
    """``ORDERSTREAM_SOURCE_SERVICE``, ``ORDERSTREAM_RETRY_PROFILE``, ``ORDERSTREAM_DEFAULT_MAX_RETRIES``."""

    _prefix = "ORDERSTREAM"

    source_service: str = "order-service"
    retry_profile: str = "production"
    default_max_retries: int = 3

    def _validate(self) -> None:
        if not self.source_service.strip():
            raise InvalidSettingValueError("source_service", self.source_service, "must not be blank")
        if self.default_max_retries < 0:
            raise InvalidSettingValueError(
                "default_max_retries", self.default_max_retries, "must be zero or positive"
            )
        self.backoff_profile()

    def backoff_profile(self) -> BackoffProfile:
        try:
            return PROFILES[self.retry_profile.lower()]
        except KeyError:
            raise InvalidSettingValueError(
                "retry_profile",
                self.retry_profile,
                f"expected one of {sorted(PROFILES)}",
            ) from None


@dataclasses.dataclass
class PipelineSettings(Settings):
    """Physical destinations for each stage; a blank output disables publishing."""

    _prefix = "ORDERSTREAM_PIPELINE"

    financial_enrichment_in: str = "financial-enrichment-in"
    financial_enrichment_out: str | None = "financial-enrichment-out"
    event_splitter_in: str = "event-splitter-in"
    event_splitter_out: str | None = "event-splitter-out"
    analytics_transformer_in: str = "analytics-transformer-in"
    analytics_transformer_out: str | None = "analytics-transformer-out"
    audit_transformer_in: str = "audit-transformer-in"
    audit_transformer_out: str | None = "audit-transformer-out"

    def destinations(self, stage_name: str) -> tuple[str, str | None]:
        """``(input, output)`` for a stage such as ``"event-splitter"``."""
        key = stage_name.replace("-", "_")
        try:
            inbound = getattr(self, f"{key}_in")
            outbound = getattr(self, f"{key}_out")
        except AttributeError:
            raise InvalidSettingValueError("stage", stage_name, "no such pipeline stage") from None
        return inbound, outbound or None


__all__ = ["DispatchSettings", "PipelineSettings"]
