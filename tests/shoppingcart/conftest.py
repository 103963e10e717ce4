import pytest
from protean.integrations.pytest import DomainFixture
from shoppingcart.discount import reset_discount_service
from shoppingcart.orders import reset_order_repository


@pytest.fixture(scope="session")
def shoppingcart_bed():
    from shoppingcart.domain import shoppingcart

    bed = DomainFixture(shoppingcart)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shoppingcart_bed):
    with shoppingcart_bed.domain_context():
        yield

        from protean import current_domain

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()


@pytest.fixture(autouse=True)
def _reset_collaborators():
    yield

    reset_discount_service()
    reset_order_repository()
