"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.identifiers import ProductId
from shopcart.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def find_by_id(self, product_id: ProductId) -> Product:
        """Return an active product.

        Raises ProductNotFoundError if it does not exist and
        ProductNotActiveError if it exists but is inactive.
        """

    @abstractmethod
    def find_by_ids(self, product_ids: list[ProductId]) -> dict[str, Product]:
        """Return active products keyed by id; missing or inactive ids are left out."""

    @abstractmethod
    def exists(self, product_id: ProductId) -> bool:
        """True if the product exists and is active."""

    @abstractmethod
    def is_registered(self, product_id: ProductId) -> bool:
        """True if any record with this id is stored, active or not."""

    @abstractmethod
    def list_active(
        self, limit: int = 50, after: str | None = None
    ) -> tuple[list[Product], str | None]:
        """Return one page of active products ordered by id, and the next page key.

        Raises ValidationError if *limit* is below 1.
        """

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
