"""Application service: Update Item Quantity use case.

Sets the quantity of a line outright.  Unlike Add Item there is no
merge: ``--qty 2`` on a line of 5 leaves 2.
"""

from __future__ import annotations

import logging

from shopcart.application.cart_access import load_owned_cart
from shopcart.domain.model.identifiers import ProductId
from shopcart.domain.model.value_objects import Quantity
from shopcart.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class UpdateItemQuantityHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str, user_id: str, product_id: str, quantity: int) -> dict:
        pid = ProductId.of(product_id)
        qty = Quantity.of(quantity)
        cart = load_owned_cart(self._cart_repo, cart_id, user_id)
        saved = self._cart_repo.save(cart.update_item_quantity(pid, qty))
        logger.info("Set %s to x%d in cart %s", pid, qty.value, saved.cart_id)
        return saved.to_dict()
