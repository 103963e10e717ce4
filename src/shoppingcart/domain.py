"""Shopping cart bounded context.

Holds the Cart aggregate, the discount and order persistence ports the cart
checks out through, and the placed-order records kept by the Protean adapter.
"""

from protean.domain import Domain

from shoppingcart.utils.logging import configure_logging

# Configure logging for the application
configure_logging()

# Domain Composition Root
shoppingcart = Domain(name="shoppingcart")
