import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def shopping_bed():
    from shopping.domain import shopping

    bed = DomainFixture(shopping)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shopping_bed):
    with shopping_bed.domain_context():
        yield


@pytest.fixture()
def make_product():
    """Factory for catalogue products; keyword overrides replace the defaults."""
    from shopping.cart.product import Product, SupplierSummary

    def _make(product_id="prod-001", supplier_id="sup-001", supplier_name=None, delivery_fee=None, **overrides):
        supplier = None
        if supplier_name is not None or delivery_fee is not None:
            supplier = SupplierSummary(
                supplier_id=supplier_id,
                business_name=supplier_name,
                delivery_fee=delivery_fee,
            )
        fields = {
            "product_id": product_id,
            "name": "شاورما دجاج",
            "name_en": "Chicken Shawarma",
            "price": 1000.0,
            "supplier_id": supplier_id,
            "supplier": supplier,
        }
        fields.update(overrides)
        return Product(**fields)

    return _make
