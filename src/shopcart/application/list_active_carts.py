"""Application service: List Active Carts use case (query)."""

from __future__ import annotations

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.repository.cart_repository import CartRepository


class ListActiveCartsHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, user_id: str) -> list[dict]:
        """Return the user's ACTIVE carts, oldest first."""
        if not user_id or not user_id.strip():
            raise ValidationError("User ID is required")
        carts = self._cart_repo.find_active_by_user_id(user_id)
        return [cart.to_dict() for cart in sorted(carts, key=lambda c: c.created_at)]
