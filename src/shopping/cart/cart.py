"""Cart aggregate: the storefront's in-memory shopping cart.

One cart is owned by one UI session. It holds at most one line item per product,
keeps every quantity between 1 and the product's per-order maximum, and derives
totals and the per-supplier grouping on every read. Quantities are clamped, never
rejected: no cart operation raises for an out-of-range quantity.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Integer, String, ValueObject

from shopping.cart.events import (
    CartCleared,
    CartItemAdded,
    CartItemRemoved,
    CartQuantityUpdated,
)
from shopping.cart.product import Product
from shopping.domain import logger, shopping


@shopping.entity(part_of="Cart")
class CartItem:
    product = ValueObject(Product, required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def product_id(self):
        return self.product.product_id

    @property
    def supplier_id(self):
        return self.product.supplier_id

    @property
    def line_total(self):
        return self.product.unit_price * self.quantity


@shopping.aggregate
class Cart:
    session_id = String(max_length=255)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_item_per_product(self):
        product_ids = [item.product_id for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in the cart"]})

    @invariant.post
    def quantities_within_product_limits(self):
        for item in self.items:
            if not 1 <= item.quantity <= item.product.effective_max:
                raise ValidationError(
                    {"items": [f"Quantity for product '{item.product_id}' is outside 1..{item.product.effective_max}"]}
                )

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, session_id=None):
        now = datetime.now(UTC)
        return cls(session_id=session_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def find_item(self, product_id):
        return next((i for i in self.items if i.product_id == str(product_id)), None)

    def add_to_cart(self, product, quantity=1):
        """Add a product, merging into its existing line item when present.

        The resulting quantity is clamped to the product's per-order maximum. A
        merge that would leave nothing removes the line item; adding a
        non-positive quantity of a new product does nothing.
        """
        existing = self.find_item(product.product_id)
        limit = product.effective_max

        if existing is None:
            quantity = min(quantity, limit)
            if quantity <= 0:
                return

            now = datetime.now(UTC)
            self.add_items(CartItem(product=product, quantity=quantity, added_at=now))
            self.updated_at = now

            self.raise_(
                CartItemAdded(
                    cart_id=str(self.id),
                    product_id=product.product_id,
                    supplier_id=product.supplier_id,
                    quantity=quantity,
                )
            )
            return

        new_quantity = min(existing.quantity + quantity, limit)
        if new_quantity <= 0:
            self.remove_from_cart(product.product_id)
            return

        previous_quantity = existing.quantity
        with atomic_change(self):
            # Latest catalogue data wins so the stored limit matches the clamp
            existing.product = product
            existing.quantity = new_quantity
        self._record_quantity_change(existing, previous_quantity)

    def remove_from_cart(self, product_id):
        item = self.find_item(product_id)
        if item is None:
            return

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                product_id=item.product_id,
            )
        )

    def update_quantity(self, product_id, quantity):
        """Set a line item's quantity; zero or less removes the item."""
        if quantity <= 0:
            self.remove_from_cart(product_id)
            return

        item = self.find_item(product_id)
        if item is None:
            return

        previous_quantity = item.quantity
        item.quantity = min(quantity, item.product.effective_max)
        self._record_quantity_change(item, previous_quantity)

    def clear_cart(self):
        removed = list(self.items)
        with atomic_change(self):
            for item in removed:
                self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        if removed:
            self.raise_(CartCleared(cart_id=str(self.id), items_removed=len(removed)))
            logger.debug("cart.cleared", cart_id=str(self.id), items_removed=len(removed))

    def _record_quantity_change(self, item, previous_quantity):
        if item.quantity == previous_quantity:
            return

        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                product_id=item.product_id,
                previous_quantity=previous_quantity,
                new_quantity=item.quantity,
            )
        )

    # -------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------
    def get_cart_total(self):
        return sum((item.line_total for item in self.items), 0.0)

    def get_cart_count(self):
        return sum(item.quantity for item in self.items)

    def get_items_by_supplier(self):
        """Group line items by supplier.

        Returns a new dict keyed by supplier id, in the order each supplier first
        appears in the cart; every group keeps the cart's insertion order.
        """
        groups = {}
        for item in self.items:
            groups.setdefault(item.supplier_id, []).append(item)
        return groups

    def snapshot(self):
        return [
            {
                "product_id": item.product_id,
                "supplier_id": item.supplier_id,
                "quantity": item.quantity,
            }
            for item in self.items
        ]
