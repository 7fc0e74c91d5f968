"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from shopcart.domain.exceptions import ProductAlreadyExistsError
from shopcart.domain.model.identifiers import ProductId
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import DEFAULT_CURRENCY, Currency, Money
from shopcart.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str,
        price: str,
        currency: Currency | str = DEFAULT_CURRENCY,
        description: str | None = None,
        is_active: bool = True,
    ) -> Product:
        """Add a new product to the catalog."""
        pid = ProductId.of(product_id)
        if self._product_repo.is_registered(pid):
            raise ProductAlreadyExistsError(pid.value)

        product = Product(
            product_id=pid,
            name=name.strip(),
            price=Money.of(price, currency),
            is_active=is_active,
            description=description,
        )
        self._product_repo.save(product)
        logger.info("Added product %s '%s' at %s", pid, product.name, product.price)
        return product
