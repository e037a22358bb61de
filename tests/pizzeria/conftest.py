import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def pizzeria_bed():
    from pizzeria.domain import pizzeria

    bed = DomainFixture(pizzeria)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(pizzeria_bed):
    from pizzeria.accounts import reset_account_service

    reset_account_service()
    with pizzeria_bed.domain_context():
        yield
    reset_account_service()


@pytest.fixture()
def contact():
    return {
        "name": "Jane Doe",
        "telephone": "(555) 123-4567",
        "street_address": "123 Elm Street",
        "secondary_address": "Apt 4",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
    }
