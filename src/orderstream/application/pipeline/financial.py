"""Application pipeline – financial enrichment stage."""
from __future__ import annotations

import dataclasses
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from orderstream.application.pipeline.stage import Stage
from orderstream.domain.order import Order, OrderPriority
from orderstream.kernel.messaging import Message
from orderstream.kernel.messaging import headers as h

TAX_RATE: Final = Decimal("0.08")
FREE_SHIPPING_THRESHOLD: Final = Decimal("100")
STANDARD_SHIPPING: Final = Decimal("9.99")
DISCOUNT_THRESHOLD: Final = Decimal("500")
DISCOUNT_RATE: Final = Decimal("0.05")

_CENTS: Final = Decimal("0.01")


@dataclasses.dataclass(frozen=True)
class FinancialBreakdown:
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    discount: Decimal
    final_total: Decimal

    @property
    def free_shipping(self) -> bool:
        return self.shipping == 0

    @classmethod
    def of(cls, order: Order) -> "FinancialBreakdown":
        """Tax, shipping and discount for *order*'s total.

        Shipping is free from ``FREE_SHIPPING_THRESHOLD`` up (inclusive) and
        doubled for urgent orders below it; the discount applies strictly
        above ``DISCOUNT_THRESHOLD``.  Only tax is rounded to cents.
        """
        subtotal = order.total_amount
        tax = (subtotal * TAX_RATE).quantize(_CENTS, rounding=ROUND_HALF_UP)
        if subtotal >= FREE_SHIPPING_THRESHOLD:
            shipping = Decimal("0")
        elif order.priority is OrderPriority.URGENT:
            shipping = STANDARD_SHIPPING * 2
        else:
            shipping = STANDARD_SHIPPING
        discount = subtotal * DISCOUNT_RATE if subtotal > DISCOUNT_THRESHOLD else Decimal("0")
        return cls(
            subtotal=subtotal,
            tax=tax,
            shipping=shipping,
            discount=discount,
            final_total=subtotal + tax + shipping - discount,
        )


class FinancialEnrichmentStage(Stage):
    """Annotate the order with tax, shipping, discount and final total headers."""

    name = "financial-enrichment"

    def apply(self, message: Message[Order]) -> Message[Order]:
        breakdown = FinancialBreakdown.of(message.payload)
        return message.with_headers(
            {
                "order-subtotal": str(breakdown.subtotal),
                "order-tax-amount": str(breakdown.tax),
                "order-shipping-cost": str(breakdown.shipping),
                "order-discount-amount": str(breakdown.discount),
                "order-final-total": str(breakdown.final_total),
                "financial-calculation-timestamp": self._clock.epoch_millis(),
                h.TRANSFORMATION_APPLIED: "financial-enrichment",
                "tax-rate-applied": str(TAX_RATE),
                "free-shipping-eligible": "true" if breakdown.free_shipping else "false",
            }
        )


__all__ = [
    "DISCOUNT_RATE",
    "DISCOUNT_THRESHOLD",
    "FREE_SHIPPING_THRESHOLD",
    "STANDARD_SHIPPING",
    "TAX_RATE",
    "FinancialBreakdown",
    "FinancialEnrichmentStage",
]
