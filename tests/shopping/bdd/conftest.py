"""Shared BDD fixtures and step definitions for the Shopping domain."""

import pytest
from pytest_bdd import given, parsers
from shopping.cart.cart import Cart


@pytest.fixture()
def products():
    """Products declared by Given steps, keyed by product id."""
    return {}


@given("an empty cart", target_fixture="cart")
def empty_cart():
    return Cart.create(session_id="ui-session-bdd")


@given(parsers.cfparse('a product "{product_id}" priced {price:d} with a limit of {limit:d}'))
def product_with_limit(products, make_product, product_id, price, limit):
    products[product_id] = make_product(product_id=product_id, price=float(price), max_quantity_per_order=limit)


@given(parsers.cfparse('a product "{product_id}" priced {price:d} discounted to {discounted:d}'))
def discounted_product(products, make_product, product_id, price, discounted):
    products[product_id] = make_product(
        product_id=product_id,
        price=float(price),
        discounted_price=float(discounted),
    )


@given(parsers.cfparse('a product "{product_id}" from supplier "{supplier_id}"'))
def supplier_product(products, make_product, product_id, supplier_id):
    products[product_id] = make_product(product_id=product_id, supplier_id=supplier_id)
