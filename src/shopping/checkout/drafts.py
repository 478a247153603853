"""Checkout split: one order draft per supplier.

Orders are placed per supplier: each group of cart items becomes its own order
carrying that supplier's delivery fee. Everything here is derived from the cart
and never changes it.
"""

from dataclasses import dataclass

UNKNOWN_SUPPLIER_NAME = "Unknown Supplier"


@dataclass(frozen=True)
class OrderLineDraft:
    product_id: str
    quantity: int
    unit_price: float
    total_price: float


@dataclass(frozen=True)
class SupplierOrderDraft:
    """Amounts for a single supplier's order, ready to hand to order creation."""

    supplier_id: str
    supplier_name: str
    items: tuple[OrderLineDraft, ...]
    subtotal: float
    delivery_fee: float
    tax_amount: float = 0.0
    discount_amount: float = 0.0

    @property
    def total_amount(self) -> float:
        return self.subtotal + self.delivery_fee + self.tax_amount - self.discount_amount


def _supplier_name(product) -> str:
    if product.supplier is not None and product.supplier.business_name:
        return product.supplier.business_name
    return UNKNOWN_SUPPLIER_NAME


def draft_supplier_orders(cart) -> list[SupplierOrderDraft]:
    drafts = []
    for supplier_id, items in cart.get_items_by_supplier().items():
        lines = tuple(
            OrderLineDraft(
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=item.product.unit_price,
                total_price=item.line_total,
            )
            for item in items
        )
        # The supplier summary is the same on every item of a group
        first_product = items[0].product
        drafts.append(
            SupplierOrderDraft(
                supplier_id=supplier_id,
                supplier_name=_supplier_name(first_product),
                items=lines,
                subtotal=sum((line.total_price for line in lines), 0.0),
                delivery_fee=first_product.delivery_fee,
            )
        )
    return drafts


def checkout_total(cart) -> float:
    """Cart total plus one delivery fee per supplier."""
    delivery_fees = sum(items[0].product.delivery_fee for items in cart.get_items_by_supplier().values())
    return cart.get_cart_total() + delivery_fees
