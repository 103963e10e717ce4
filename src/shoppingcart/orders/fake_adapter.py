"""In-memory order repository for development and testing.

Keeps every saved order in a list and can be configured to fail, which makes
checkout failure handling easy to exercise.
"""

from dataclasses import dataclass
from decimal import Decimal

import structlog

from shoppingcart.cart.items import CartItem
from shoppingcart.orders.port import OrderPersistenceError, OrderRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SavedOrder:
    """An order as it was handed to the repository."""

    customer_id: str
    items: tuple[CartItem, ...]
    total: Decimal


class InMemoryOrderRepository(OrderRepository):
    """Configurable in-memory order repository."""

    def __init__(self) -> None:
        self.orders: list[SavedOrder] = []
        self.should_fail: bool = False
        self.failure_reason: str = "Order store unavailable"

    def configure(self, should_fail: bool, failure_reason: str = "Order store unavailable") -> None:
        """Configure repository behavior at runtime."""
        self.should_fail = should_fail
        self.failure_reason = failure_reason

    async def save(self, customer_id: str, items: list[CartItem], total: Decimal) -> None:
        if self.should_fail:
            raise OrderPersistenceError(self.failure_reason)

        self.orders.append(SavedOrder(customer_id=customer_id, items=tuple(items), total=total))
        logger.debug("Order recorded in memory", customer_id=customer_id, total=str(total))

    def orders_for(self, customer_id: str) -> list[SavedOrder]:
        return [order for order in self.orders if order.customer_id == customer_id]
