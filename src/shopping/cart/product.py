"""Catalogue product snapshot carried by cart items.

Products and suppliers are owned by the catalogue service; the cart only keeps
the read-only fields it needs for pricing, quantity limits and order splitting.
"""

from protean.fields import Float, Integer, String, Text, ValueObject

from shopping.domain import shopping

DEFAULT_MAX_QUANTITY_PER_ORDER = 10


@shopping.value_object
class SupplierSummary:
    """Supplier fields embedded in a product listing."""

    supplier_id = String(required=True, max_length=255)
    business_name = String(max_length=255)
    delivery_fee = Float(min_value=0.0)


@shopping.value_object
class Product:
    """A product as listed by the catalogue, with its localized name pair."""

    product_id = String(required=True, max_length=255)
    name = String(required=True, max_length=255)
    name_en = String(max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    discounted_price = Float(min_value=0.0)
    max_quantity_per_order = Integer(min_value=1)
    supplier_id = String(required=True, max_length=255)
    supplier = ValueObject(SupplierSummary)

    @property
    def unit_price(self):
        """Discounted price when the product is on offer, list price otherwise."""
        if self.discounted_price is not None:
            return self.discounted_price
        return self.price

    @property
    def effective_max(self):
        if self.max_quantity_per_order is not None:
            return self.max_quantity_per_order
        return DEFAULT_MAX_QUANTITY_PER_ORDER

    @property
    def delivery_fee(self):
        if self.supplier is None or self.supplier.delivery_fee is None:
            return 0.0
        return self.supplier.delivery_fee
