"""Discount service port (abstract interface).

Defines the contract the cart calls at checkout to learn how much of the
subtotal a customer is let off. Adapters decide the policy; the cart only
multiplies the returned rate against the subtotal.
"""

from abc import ABC, abstractmethod
from decimal import Decimal


class DiscountUnavailableError(Exception):
    """The discount service could not produce a rate for the customer."""


class DiscountService(ABC):
    """Abstract discount service interface."""

    @abstractmethod
    async def get_discount_rate(self, customer_id: str) -> Decimal:
        """Return the fractional discount rate for the customer (0.1 means 10% off)."""
        ...
