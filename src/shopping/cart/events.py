"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer

from shopping.domain import shopping


@shopping.event(part_of="Cart")
class CartItemAdded:
    """A product was added to the cart as a new line item."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    supplier_id = Identifier(required=True)
    quantity = Integer(required=True)


@shopping.event(part_of="Cart")
class CartQuantityUpdated:
    """The quantity of an existing line item changed."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@shopping.event(part_of="Cart")
class CartItemRemoved:
    """A line item was removed from the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@shopping.event(part_of="Cart")
class CartCleared:
    """Every line item was removed from the cart at once."""

    __version__ = 1

    cart_id = Identifier(required=True)
    items_removed = Integer(required=True)
