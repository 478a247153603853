import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def directory_bed():
    from directory.domain import directory

    bed = DomainFixture(directory)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(directory_bed):
    with directory_bed.domain_context():
        yield


@pytest.fixture()
def registered_supplier():
    """Persist a supplier with a reachable owner and return it."""
    from directory.supplier.supplier import Supplier
    from protean import current_domain

    def _register(business_name="Kigali Bites", email="owner@kigalibites.rw", first_name="Aline", **kwargs):
        supplier = Supplier.register(business_name=business_name, email=email, first_name=first_name, **kwargs)
        current_domain.repository_for(Supplier).add(supplier)
        return supplier

    return _register
