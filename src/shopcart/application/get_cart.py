"""Application service: Get Cart use case (query)."""

from __future__ import annotations

from shopcart.application.cart_access import load_owned_cart
from shopcart.domain.repository.cart_repository import CartRepository


class GetCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str, user_id: str) -> dict:
        return load_owned_cart(self._cart_repo, cart_id, user_id).to_dict()
