"""Application service: Remove Item use case."""

from __future__ import annotations

import logging

from shopcart.application.cart_access import load_owned_cart
from shopcart.domain.model.identifiers import ProductId
from shopcart.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class RemoveItemHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str, user_id: str, product_id: str) -> dict:
        pid = ProductId.of(product_id)
        cart = load_owned_cart(self._cart_repo, cart_id, user_id)
        saved = self._cart_repo.save(cart.remove_item(pid))
        logger.info("Removed %s from cart %s", pid, saved.cart_id)
        return saved.to_dict()
