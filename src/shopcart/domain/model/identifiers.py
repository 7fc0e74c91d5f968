"""Identifier value objects.

CartId and ProductId both wrap a string but are distinct types: dataclass
equality compares the class first, so a CartId never equals a ProductId
even when the underlying text is the same.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass

from shopcart.domain.exceptions import InvalidCartError, InvalidProductError

_UUID_V4 = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_PRODUCT_ID = re.compile(r"^[A-Z0-9-]{3,50}$")


@dataclass(frozen=True)
class CartId:
    """UUID v4 cart identifier."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _UUID_V4.fullmatch(self.value):
            raise InvalidCartError(
                f"Invalid cart ID format: {self.value}. Must be a valid UUID v4.",
                {"cartId": str(self.value)},
            )

    @staticmethod
    def generate() -> CartId:
        return CartId(str(uuid.uuid4()))

    @staticmethod
    def of(value: str) -> CartId:
        return CartId(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProductId:
    """Catalog product identifier: upper-case alphanumerics and hyphens, 3-50 chars."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _PRODUCT_ID.fullmatch(self.value):
            raise InvalidProductError(
                f"Invalid product ID format: {self.value}. "
                f"Must be alphanumeric with hyphens, 3-50 characters.",
                {"productId": str(self.value)},
            )

    @staticmethod
    def of(value: str) -> ProductId:
        return ProductId(value)

    def __str__(self) -> str:
        return self.value
