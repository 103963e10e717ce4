"""Discount service factory.

Provides get_discount_service() / set_discount_service() to swap
implementations. Defaults to FakeDiscountService, which grants no discount.
"""

from shoppingcart.discount.fake_adapter import FakeDiscountService
from shoppingcart.discount.port import DiscountService

_current_service: DiscountService | None = None


def get_discount_service() -> DiscountService:
    """Return the current discount service. Defaults to FakeDiscountService."""
    global _current_service
    if _current_service is None:
        _current_service = FakeDiscountService()
    return _current_service


def set_discount_service(service: DiscountService) -> None:
    """Override the active discount service (useful for tests)."""
    global _current_service
    _current_service = service


def reset_discount_service() -> None:
    """Reset to default discount service."""
    global _current_service
    _current_service = None
