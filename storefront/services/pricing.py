# storefront/services/pricing.py
import uuid
from dataclasses import dataclass
from typing import Protocol, Sequence


@dataclass(frozen=True)
class CheckoutLine:
    item_id: uuid.UUID
    product_id: uuid.UUID
    product_name: str
    sku: str | None
    quantity: int
    unit_price_cents: int
    currency_code: str

    @property
    def line_total_cents(self) -> int:
        return self.quantity * self.unit_price_cents


@dataclass(frozen=True)
class Charges:
    tax_cents: int = 0
    shipping_cents: int = 0


class PricingPolicy(Protocol):
    """Doliczane oplaty (podatek, wysylka) liczone po stronie serwera."""

    def additional_charges(
        self,
        lines: Sequence[CheckoutLine],
        subtotal_cents: int,
        currency_code: str,
    ) -> Charges:
        ...


class ZeroChargesPolicy:
    # brak silnika podatkow/wysylki, zawsze 0
    def additional_charges(self, lines, subtotal_cents, currency_code) -> Charges:
        return Charges(tax_cents=0, shipping_cents=0)
