"""Product aggregate.

Products live independently of carts.  The catalog is the authoritative
source of a product's name and price: carts copy both when an item is
added, so a client can never set its own price.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.exceptions import InvalidProductError
from shopcart.domain.model.identifiers import ProductId
from shopcart.domain.model.value_objects import Money

MAX_PRODUCT_NAME_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 1000


@dataclass(frozen=True, eq=False)
class Product:
    """A product in the catalog, compared by ``product_id``."""

    product_id: ProductId
    name: str
    price: Money
    is_active: bool = True
    description: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidProductError(
                "Product name cannot be empty", {"productId": self.product_id.value}
            )
        if len(self.name) > MAX_PRODUCT_NAME_LENGTH:
            raise InvalidProductError(
                f"Product name cannot exceed {MAX_PRODUCT_NAME_LENGTH} characters",
                {"productId": self.product_id.value, "name": self.name},
            )
        if self.description and len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise InvalidProductError(
                f"Product description cannot exceed {MAX_DESCRIPTION_LENGTH} characters",
                {"productId": self.product_id.value},
            )
        if self.price.is_zero():
            raise InvalidProductError(
                "Product price must be greater than zero",
                {"productId": self.product_id.value, "price": self.price.to_dict()},
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.product_id == other.product_id

    def __hash__(self) -> int:
        return hash(self.product_id)

    def to_dict(self) -> dict:
        return {
            "productId": self.product_id.value,
            "name": self.name,
            "description": self.description,
            "price": self.price.to_dict(),
            "isActive": self.is_active,
        }
