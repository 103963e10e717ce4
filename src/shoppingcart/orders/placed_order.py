"""PlacedOrder aggregate: the record a checkout leaves behind.

Money is kept as decimal text so the persisted total matches the amount the
cart computed to the last digit.
"""

from datetime import UTC, datetime
from decimal import Decimal

from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text

from shoppingcart.cart.items import CartItem
from shoppingcart.domain import shoppingcart


@shoppingcart.entity(part_of="PlacedOrder")
class OrderLine:
    position = Integer(required=True, min_value=0)
    product_id = Text(required=True)
    product_name = Text()
    quantity = Integer(required=True, min_value=1)
    unit_price = String(required=True, max_length=50)


@shoppingcart.aggregate
class PlacedOrder:
    customer_id = Identifier(required=True)
    lines = HasMany(OrderLine)
    total = String(required=True, max_length=50)
    placed_at = DateTime()

    @classmethod
    def place(cls, customer_id, items, total):
        order = cls(
            customer_id=customer_id,
            total=str(total),
            placed_at=datetime.now(UTC),
        )
        for position, item in enumerate(items):
            order.add_lines(
                OrderLine(
                    position=position,
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=str(item.unit_price),
                )
            )
        return order

    @property
    def total_amount(self) -> Decimal:
        return Decimal(self.total)

    def cart_items(self) -> list[CartItem]:
        """Rebuild the ordered line items this order was placed with."""
        return [
            CartItem(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity,
                unit_price=Decimal(line.unit_price),
            )
            for line in sorted(self.lines, key=lambda line: line.position)
        ]


@shoppingcart.repository(part_of=PlacedOrder)
class PlacedOrderRepository:
    def find_by_customer(self, customer_id: str) -> list[PlacedOrder]:
        """Find every order placed by a customer."""
        return self._dao.query.filter(customer_id=customer_id).all().items
