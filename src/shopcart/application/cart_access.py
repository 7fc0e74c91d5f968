"""Shared lookup for use cases that act on an existing cart.

Every cart operation is scoped to its owner: loading a cart that belongs
to another user is rejected before any domain logic runs.
"""

from __future__ import annotations

import logging

from shopcart.domain.exceptions import CartAccessDeniedError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.identifiers import CartId
from shopcart.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


def load_owned_cart(cart_repo: CartRepository, cart_id: str, user_id: str) -> Cart:
    """Load a cart and check that *user_id* owns it.

    Raises InvalidCartError for a malformed id, CartNotFoundError if the
    cart does not exist and CartAccessDeniedError if another user owns it.
    """
    cart = cart_repo.find_by_id(CartId.of(cart_id))
    if cart.user_id != user_id:
        logger.warning("User %s denied access to cart %s", user_id, cart_id)
        raise CartAccessDeniedError(cart_id)
    return cart
