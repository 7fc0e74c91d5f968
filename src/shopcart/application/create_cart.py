"""Application service: Create Cart use case."""

from __future__ import annotations

import logging

from shopcart.domain.model.cart import Cart
from shopcart.domain.model.value_objects import DEFAULT_CURRENCY, Currency
from shopcart.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class CreateCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        default_currency: Currency | str = DEFAULT_CURRENCY,
    ) -> None:
        self._cart_repo = cart_repo
        self._default_currency = default_currency

    def handle(self, user_id: str, currency: Currency | str | None = None) -> dict:
        """Create an empty ACTIVE cart for *user_id* and persist it."""
        if currency is None:
            currency = self._default_currency
        cart = Cart.create(user_id=user_id, currency=currency)
        saved = self._cart_repo.save(cart)
        logger.info(
            "Created cart %s for user %s (%s)",
            saved.cart_id, saved.user_id, saved.currency.value,
        )
        return saved.to_dict()
