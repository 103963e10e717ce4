"""Cart aggregate with line items, totals and discounted checkout.

The cart lives in memory and is owned by a single caller. It reaches its two
collaborators only during checkout: the discount service supplies a rate for
the customer, and the order repository records the finished order. Neither
call is retried, and any failure they raise reaches the checkout caller
untouched.
"""

from dataclasses import replace
from decimal import Decimal, InvalidOperation

import structlog
from protean.exceptions import InvalidOperationError, ValidationError

from shoppingcart.cart.items import CartItem
from shoppingcart.discount import get_discount_service
from shoppingcart.discount.port import DiscountService
from shoppingcart.orders import get_order_repository
from shoppingcart.orders.port import OrderRepository

logger = structlog.get_logger(__name__)


def to_decimal(value) -> Decimal:
    """Coerce a numeric value to Decimal.

    Floats go through their shortest string form, so 29.99 becomes
    Decimal("29.99") rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


class Cart:
    """Shopping cart aggregate.

    Holds at most one line per product, in the order products were first
    added. Checkout leaves the items in place.
    """

    def __init__(self, discount_service: DiscountService, order_repository: OrderRepository) -> None:
        if discount_service is None:
            raise ValidationError({"discount_service": ["Discount service is required"]})
        if order_repository is None:
            raise ValidationError({"order_repository": ["Order repository is required"]})

        self._discount_service = discount_service
        self._order_repository = order_repository
        self._items: list[CartItem] = []

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls) -> "Cart":
        """Create an empty cart bound to the currently configured collaborators."""
        return cls(get_discount_service(), get_order_repository())

    # -------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------
    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def is_empty(self) -> bool:
        return len(self._items) == 0

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id: str, product_name: str, quantity: int, unit_price) -> None:
        """Add a product to the cart (or increase quantity if already present).

        On a repeat the name and price recorded by the first addition are kept.
        """
        if _is_blank(product_id):
            raise ValidationError({"product_id": ["Product ID cannot be empty"]})

        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError({"quantity": ["Quantity must be a whole number"]})
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be greater than zero"]})

        try:
            price = to_decimal(unit_price)
        except (InvalidOperation, TypeError, ValueError):
            raise ValidationError({"unit_price": ["Unit price must be a number"]}) from None
        if not price.is_finite():
            raise ValidationError({"unit_price": ["Unit price must be a number"]})
        if price < 0:
            raise ValidationError({"unit_price": ["Unit price cannot be negative"]})

        index = next(
            (i for i, item in enumerate(self._items) if item.product_id == product_id),
            None,
        )

        if index is not None:
            existing = self._items[index]
            self._items[index] = replace(existing, quantity=existing.quantity + quantity)
            logger.debug(
                "Cart item quantity increased",
                product_id=product_id,
                quantity=self._items[index].quantity,
            )
        else:
            self._items.append(
                CartItem(
                    product_id=product_id,
                    product_name=product_name,
                    quantity=quantity,
                    unit_price=price,
                )
            )
            logger.debug("Cart item added", product_id=product_id, quantity=quantity)

    def remove_item(self, product_id: str) -> None:
        """Remove a product from the cart. Unknown products are ignored."""
        item = next((i for i in self._items if i.product_id == product_id), None)
        if item is None:
            return

        self._items.remove(item)
        logger.debug("Cart item removed", product_id=product_id)

    # -------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------
    def calculate_total(self) -> Decimal:
        return sum((item.line_total for item in self._items), Decimal("0"))

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    async def checkout(self, customer_id: str) -> Decimal:
        """Apply the customer's discount, record the order and return the final total.

        The discount rate is applied exactly as the discount service returns
        it. Rates below 0 or above 1 are not rejected.
        """
        if _is_blank(customer_id):
            raise ValidationError({"customer_id": ["Customer ID cannot be empty"]})

        if self.is_empty:
            raise InvalidOperationError("Cannot checkout an empty cart")

        subtotal = self.calculate_total()

        discount_rate = to_decimal(await self._discount_service.get_discount_rate(customer_id))
        discount_amount = subtotal * discount_rate
        final_total = subtotal - discount_amount

        await self._order_repository.save(customer_id, list(self._items), final_total)

        logger.info(
            "Checkout completed",
            customer_id=customer_id,
            subtotal=str(subtotal),
            discount_rate=str(discount_rate),
            final_total=str(final_total),
        )
        return final_total
