"""Order repository port (abstract interface).

Defines the contract the cart uses to record an order once the discount has
been applied. Swapping between InMemoryOrderRepository (dev/test) and
ProteanOrderRepository needs no change to the cart.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from shoppingcart.cart.items import CartItem


class OrderPersistenceError(Exception):
    """The order could not be recorded."""


class OrderRepository(ABC):
    """Abstract order repository interface."""

    @abstractmethod
    async def save(self, customer_id: str, items: list[CartItem], total: Decimal) -> None:
        """Record an order for the customer with the given items and final total."""
        ...
