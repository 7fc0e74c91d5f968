"""Application service: Abandon Cart use case."""

from __future__ import annotations

import logging

from shopcart.application.cart_access import load_owned_cart
from shopcart.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class AbandonCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str, user_id: str) -> dict:
        cart = load_owned_cart(self._cart_repo, cart_id, user_id)
        saved = self._cart_repo.save(cart.abandon())
        logger.info("Abandoned cart %s", saved.cart_id)
        return saved.to_dict()
