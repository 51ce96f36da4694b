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
def ledger():
    from ordering.order.ledger import OrderLedger

    return OrderLedger()


@pytest.fixture()
def prices():
    """Unit prices the mocked catalogue answers with; tests may add to it."""
    return {}


@pytest.fixture()
def catalogue(prices):
    from unittest.mock import Mock

    from ordering.order.pricing import Catalogue

    mock = Mock(spec=Catalogue)
    mock.price.side_effect = lambda drink_name: prices[drink_name]
    return mock
