"""Cart line items."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CartItem:
    """One product line in a cart.

    Items are immutable. When a cart merges a repeated product it swaps in an
    updated copy, so a list of items taken at checkout never changes afterwards.
    """

    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.unit_price
