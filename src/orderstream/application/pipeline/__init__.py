"""Application pipeline – order transformation stages and their runner."""
from orderstream.application.pipeline.analytics import AnalyticsTransformerStage
from orderstream.application.pipeline.audit import AuditTransformerStage
from orderstream.application.pipeline.financial import FinancialBreakdown, FinancialEnrichmentStage
from orderstream.application.pipeline.runner import (
    StageBinding,
    StageRunner,
    default_bindings,
    default_stages,
)
from orderstream.application.pipeline.splitter import EventSplitterStage, split_events
from orderstream.application.pipeline.stage import Stage

__all__ = [
    "AnalyticsTransformerStage",
    "AuditTransformerStage",
    "EventSplitterStage",
    "FinancialBreakdown",
    "FinancialEnrichmentStage",
    "Stage",
    "StageBinding",
    "StageRunner",
    "default_bindings",
    "default_stages",
    "split_events",
]
