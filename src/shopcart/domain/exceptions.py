"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Every error carries a machine-readable ``code`` and optional structured
``context``; ``to_dict()`` is the only serializable form and never includes
a traceback.
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    code = "VALIDATION_ERROR"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    code = "NOT_FOUND"


# --- Value objects ------------------------------------------------------------


class InvalidMoneyError(ValidationError):
    code = "INVALID_MONEY"


class CurrencyMismatchError(ValidationError):
    code = "CURRENCY_MISMATCH"

    def __init__(self, left: str, right: str) -> None:
        super().__init__(
            f"Cannot operate on different currencies: {left} and {right}",
            {"currencies": [left, right]},
        )


class InvalidQuantityError(ValidationError):
    code = "INVALID_QUANTITY"

    def __init__(self, quantity: object) -> None:
        super().__init__(
            f"Invalid quantity: {quantity}. Must be an integer between 1 and 999.",
            {"quantity": quantity},
        )


# --- Cart ---------------------------------------------------------------------


class InvalidCartItemError(ValidationError):
    code = "INVALID_CART_ITEM"


class InvalidCartError(ValidationError):
    code = "INVALID_CART"


class CartNotActiveError(ValidationError):
    code = "CART_NOT_ACTIVE"

    def __init__(self, cart_id: str, status: str) -> None:
        super().__init__(
            f"Cannot modify cart '{cart_id}' with status '{status}'. Cart must be active.",
            {"cartId": cart_id, "status": status},
        )


class MaxCartItemsExceededError(ValidationError):
    code = "MAX_CART_ITEMS_EXCEEDED"

    def __init__(self, max_items: int) -> None:
        super().__init__(
            f"Cannot add more items. Maximum {max_items} items allowed per cart.",
            {"maxItems": max_items},
        )


class CartNotFoundError(EntityNotFoundError):
    code = "CART_NOT_FOUND"

    def __init__(self, cart_id: str) -> None:
        super().__init__(f"Cart with ID '{cart_id}' was not found", {"cartId": cart_id})


class CartAccessDeniedError(DomainException):
    """The cart exists but belongs to a different user."""

    code = "CART_ACCESS_DENIED"

    def __init__(self, cart_id: str) -> None:
        super().__init__(
            f"User is not authorized to access cart '{cart_id}'", {"cartId": cart_id}
        )


class ConcurrentCartUpdateError(DomainException):
    """The cart was saved by someone else since it was loaded."""

    code = "CONCURRENT_CART_UPDATE"

    def __init__(self, cart_id: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Cart '{cart_id}' was modified concurrently "
            f"(loaded version {expected}, stored version {actual})",
            {"cartId": cart_id, "expectedVersion": expected, "storedVersion": actual},
        )


# --- Catalog ------------------------------------------------------------------


class InvalidProductError(ValidationError):
    code = "INVALID_PRODUCT"


class ProductAlreadyExistsError(ValidationError):
    code = "PRODUCT_ALREADY_EXISTS"

    def __init__(self, product_id: str) -> None:
        super().__init__(
            f"Product '{product_id}' already exists", {"productId": product_id}
        )


class ProductNotFoundError(EntityNotFoundError):
    code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str) -> None:
        super().__init__(
            f"Product with ID '{product_id}' was not found", {"productId": product_id}
        )


class ProductNotActiveError(ValidationError):
    code = "PRODUCT_NOT_ACTIVE"

    def __init__(self, product_id: str) -> None:
        super().__init__(
            f"Cannot add product '{product_id}' to cart. Product is not active.",
            {"productId": product_id},
        )
