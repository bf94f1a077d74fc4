import uuid

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture()
def user_id():
    return f"user-{uuid.uuid4().hex[:8]}"


@pytest.fixture()
def list_product(catalogue_domain):
    """Factory that lists a product in the catalogue and returns its id."""
    from catalogue.product.listing import ListProduct

    def _list(**overrides):
        defaults = {
            "seller_id": "seller-001",
            "name": "Cotton Kurta",
            "price": 100.0,
            "discount": 10.0,
            "quantity": 5,
        }
        defaults.update(overrides)
        with catalogue_domain.domain_context():
            return catalogue_domain.process(ListProduct(**defaults), asynchronous=False)

    yield _list

    with catalogue_domain.domain_context():
        for _, provider in catalogue_domain.providers.items():
            provider._data_reset()
        catalogue_domain.event_store.store._data_reset()
