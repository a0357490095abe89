"""Application pipeline – StageBinding and StageRunner.

A binding ties a stage to the destination it consumes from and, optionally,
the destination its output is published to::

    runner = StageRunner(registry, default_bindings())
    await runner.handle("audit-transformer-in", Message(payload=order))
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any

from orderstream.application.pipeline.analytics import AnalyticsTransformerStage
from orderstream.application.pipeline.audit import AuditTransformerStage
from orderstream.application.pipeline.financial import FinancialEnrichmentStage
from orderstream.application.pipeline.splitter import EventSplitterStage
from orderstream.application.pipeline.stage import Stage
from orderstream.config.settings import PipelineSettings
from orderstream.domain.order import Order
from orderstream.kernel.errors import ApplicationError, DeliveryError
from orderstream.kernel.messaging import ChannelRegistry, DestinationName, Message
from orderstream.kernel.time import Clock
from orderstream.observability.correlation import CorrelationContext, RequestContext
from orderstream.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class StageBinding:
    stage: Stage
    input_destination: DestinationName
    output_destination: DestinationName | None = None

    @classmethod
    def default(cls, stage: Stage) -> "StageBinding":
        """Bind *stage* to ``<name>-in`` and ``<name>-out``."""
        return cls(stage, f"{stage.name}-in", f"{stage.name}-out")


def default_stages(clock: Clock | None = None) -> list[Stage]:
    return [
        FinancialEnrichmentStage(clock),
        EventSplitterStage(clock),
        AnalyticsTransformerStage(clock),
        AuditTransformerStage(clock),
    ]


def default_bindings(
    clock: Clock | None = None,
    settings: PipelineSettings | None = None,
) -> list[StageBinding]:
    """One binding per stage; destinations come from *settings* when given."""
    if settings is None:
        return [StageBinding.default(stage) for stage in default_stages(clock)]
    return [
        StageBinding(stage, *settings.destinations(stage.name)) for stage in default_stages(clock)
    ]


class StageRunner:
    """Route inbound messages to their bound stage and publish the result."""

    def __init__(self, registry: ChannelRegistry, bindings: Iterable[StageBinding]) -> None:
        self._registry = registry
        self._bindings: dict[DestinationName, StageBinding] = {}
        for binding in bindings:
            if binding.input_destination in self._bindings:
                raise ValueError(f"Destination '{binding.input_destination}' is bound twice")
            self._bindings[binding.input_destination] = binding

    @property
    def bindings(self) -> Mapping[DestinationName, StageBinding]:
        return dict(self._bindings)

    async def handle(self, input_destination: DestinationName, message: Message[Order]) -> Message[Any]:
        """Transform *message* with the stage bound to *input_destination*.

        The transformed message is published when the binding has an output
        destination and is returned either way.

        Raises
        ------
        TransformationError
            The stage failed; nothing was published.
        DeliveryError
            The registry rejected or failed to accept the output.
        """
        binding = self._bindings.get(input_destination)
        if binding is None:
            raise ApplicationError(
                f"No stage is bound to '{input_destination}'",
                code="unbound_destination",
                detail={"destination": input_destination, "message_id": message.id},
            )

        with CorrelationContext.scope(RequestContext.from_headers(message.headers)):
            result = binding.stage.transform(message)
            output = binding.output_destination
            if output is None:
                return result
            try:
                accepted = await self._registry.publish(output, result.payload, dict(result.headers))
            except Exception as exc:
                raise DeliveryError(output, detail={"message_id": message.id}, cause=exc) from exc
            if not accepted:
                raise DeliveryError(output, detail={"message_id": message.id})
            logger.info("pipeline.published", stage=binding.stage.name, destination=output, message_id=message.id)
            return result


__all__ = ["StageBinding", "StageRunner", "default_bindings", "default_stages"]
