"""Application service: Checkout Cart use case.

Transitions ACTIVE -> CHECKED_OUT.  The aggregate rejects empty carts;
after checkout the cart accepts no further item changes.
"""

from __future__ import annotations

import logging

from shopcart.application.cart_access import load_owned_cart
from shopcart.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class CheckoutCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str, user_id: str) -> dict:
        cart = load_owned_cart(self._cart_repo, cart_id, user_id)
        saved = self._cart_repo.save(cart.checkout())
        logger.info(
            "Checked out cart %s: %d items, total %s",
            saved.cart_id, saved.item_count, saved.total,
        )
        return saved.to_dict()
