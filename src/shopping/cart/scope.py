"""Cart ownership by a UI session scope.

A storefront session binds exactly one cart for its lifetime. Components read it
through ``current_cart()``; reaching for the cart outside a bound scope is a
wiring bug and raises ``CartScopeError``.
"""

from contextlib import contextmanager
from contextvars import ContextVar

from shopping.cart.cart import Cart
from shopping.domain import shopping

_current_cart: ContextVar[Cart | None] = ContextVar("current_cart", default=None)


class CartScopeError(RuntimeError):
    """Raised when the cart is accessed outside the scope that owns it."""


@contextmanager
def cart_scope(cart: Cart | None = None, session_id: str | None = None):
    """Bind a cart to the current UI session scope.

    The shopping domain context is active for the whole scope. Creates an empty
    cart when none is given. The previous binding, if any, is restored on exit,
    so scopes nest.
    """
    with shopping.domain_context():
        if cart is None:
            cart = Cart.create(session_id=session_id)

        token = _current_cart.set(cart)
        try:
            yield cart
        finally:
            _current_cart.reset(token)


def current_cart() -> Cart:
    cart = _current_cart.get()
    if cart is None:
        raise CartScopeError("current_cart() must be used within a cart_scope()")
    return cart
