"""Configurable fake discount service for development and testing.

Returns a flat rate for every customer unless a per-customer rate has been
set, and can be told to fail so checkout error paths can be exercised.
"""

from decimal import Decimal

import structlog

from shoppingcart.discount.port import DiscountService, DiscountUnavailableError

logger = structlog.get_logger(__name__)


class FakeDiscountService(DiscountService):
    """Configurable fake discount service."""

    def __init__(self, rate: Decimal | int | float | str = 0) -> None:
        self.default_rate: Decimal = Decimal(str(rate))
        self.customer_rates: dict[str, Decimal] = {}
        self.should_fail: bool = False
        self.failure_reason: str = "Discount service unavailable"
        self.calls: list[dict] = []

    def configure(self, should_fail: bool, failure_reason: str = "Discount service unavailable") -> None:
        """Configure service behavior at runtime."""
        self.should_fail = should_fail
        self.failure_reason = failure_reason

    def set_rate_for(self, customer_id: str, rate: Decimal | int | float | str) -> None:
        self.customer_rates[customer_id] = Decimal(str(rate))

    async def get_discount_rate(self, customer_id: str) -> Decimal:
        self.calls.append({"method": "get_discount_rate", "customer_id": customer_id})

        if self.should_fail:
            raise DiscountUnavailableError(self.failure_reason)

        rate = self.customer_rates.get(customer_id, self.default_rate)
        logger.debug("Discount rate resolved", customer_id=customer_id, rate=str(rate))
        return rate
