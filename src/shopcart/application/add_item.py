"""Application service: Add Item use case.

Orchestrates the product catalog and the Cart aggregate.  The client
only says *which* product and *how many*; name and unit price always
come from the catalog, so a caller cannot choose its own price.
"""

from __future__ import annotations

import logging

from shopcart.application.cart_access import load_owned_cart
from shopcart.domain.exceptions import CurrencyMismatchError
from shopcart.domain.model.identifiers import ProductId
from shopcart.domain.model.value_objects import Quantity
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddItemHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, cart_id: str, user_id: str, product_id: str, quantity: int) -> dict:
        """Add *quantity* units of a catalog product to the user's cart.

        Steps:
        1. Validate the identifiers and quantity (value objects raise).
        2. Resolve the product from the catalog (must exist and be active).
        3. Load the cart and check ownership.
        4. Let the Cart aggregate merge or append the line.
        5. Persist and return the serialized cart.
        """
        pid = ProductId.of(product_id)
        qty = Quantity.of(quantity)

        product = self._product_repo.find_by_id(pid)
        cart = load_owned_cart(self._cart_repo, cart_id, user_id)

        if product.price.currency != cart.currency:
            raise CurrencyMismatchError(cart.currency.value, product.price.currency.value)

        updated = cart.add_item(
            product_id=pid,
            product_name=product.name,
            quantity=qty,
            unit_price=product.price,  # <-- catalog price, never client input
        )
        saved = self._cart_repo.save(updated)
        logger.info("Added %s x%d to cart %s", pid, qty.value, saved.cart_id)
        return saved.to_dict()
