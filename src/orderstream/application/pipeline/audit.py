"""Application pipeline – audit annotation stage."""
from __future__ import annotations

from typing import Final

from orderstream.application.pipeline.stage import Stage
from orderstream.domain.order import Order
from orderstream.kernel.messaging import Message
from orderstream.kernel.messaging import headers as h

AUDIT_ACTOR: Final = "order-transformer"
PATH_HOP: Final = " -> " + AUDIT_ACTOR


class AuditTransformerStage(Stage):
    """Pass the order through and append an audit trail to its headers.

    ``message-path`` grows by one hop per pass, so repeated audits
    accumulate rather than overwrite.
    """

    name = "audit-transformer"

    def apply(self, message: Message[Order]) -> Message[Order]:
        order = message.payload
        return message.with_headers(
            {
                "audit-timestamp": self._clock.epoch_millis(),
                "audit-user": AUDIT_ACTOR,
                "audit-action": "order-transformation",
                "audit-source": AUDIT_ACTOR,
                "audit-order-id": order.id,
                "audit-customer-id": order.user_id,
                "audit-order-value": str(order.total_amount),
                "audit-order-status": order.status.name,
                "audit-order-priority": order.priority.name,
                "gdpr-compliant": "true",
                "pci-compliant": "true",
                "data-classification": "business-sensitive",
                "retention-policy": "7-years",
                h.MESSAGE_PATH: message.header(h.MESSAGE_PATH, "") + PATH_HOP,
                h.TRANSFORMATION_APPLIED: "order-audit",
            }
        )


__all__ = ["AUDIT_ACTOR", "PATH_HOP", "AuditTransformerStage"]
