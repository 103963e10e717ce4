"""Shared BDD fixtures and step definitions for the shopping cart."""

from decimal import Decimal

import pytest
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, when
from shoppingcart.cart.cart import Cart
from shoppingcart.discount.fake_adapter import FakeDiscountService
from shoppingcart.orders.fake_adapter import InMemoryOrderRepository


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def discount_service():
    return FakeDiscountService()


@pytest.fixture()
def order_repository():
    return InMemoryOrderRepository()


@pytest.fixture()
def error():
    """Container for captured errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty cart", target_fixture="cart")
def empty_cart(discount_service, order_repository):
    return Cart(discount_service, order_repository)


@given(parsers.cfparse('the discount rate is "{rate}"'))
def discount_rate_is(discount_service, rate):
    discount_service.default_rate = Decimal(rate)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(
    parsers.cfparse(
        'an item is added with product "{product_id}" name "{product_name}" quantity {qty:d} price "{price}"'
    )
)
def add_item_to_cart(cart, product_id, product_name, qty, price, error):
    try:
        cart.add_item(product_id, product_name, qty, Decimal(price))
    except ValidationError as exc:
        error["exc"] = exc
