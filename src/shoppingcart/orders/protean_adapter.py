"""Order repository adapter backed by the Protean domain.

Each save becomes a PlacedOrder aggregate stored through the domain's
repository. With the default memory provider nothing leaves the process;
configuring a database provider for the domain makes the orders durable, and
then the synchronous repository call blocks the event loop while it writes.
Must be called inside an active domain context.
"""

from decimal import Decimal

import structlog
from protean.utils.globals import current_domain

from shoppingcart.cart.items import CartItem
from shoppingcart.orders.placed_order import PlacedOrder
from shoppingcart.orders.port import OrderRepository

logger = structlog.get_logger(__name__)


class ProteanOrderRepository(OrderRepository):
    async def save(self, customer_id: str, items: list[CartItem], total: Decimal) -> None:
        order = PlacedOrder.place(customer_id=customer_id, items=items, total=total)
        current_domain.repository_for(PlacedOrder).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=customer_id,
            line_count=len(items),
            total=str(total),
        )
