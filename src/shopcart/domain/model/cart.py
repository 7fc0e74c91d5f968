"""Cart aggregate, the core of the domain.

The Cart is an aggregate root that owns its line items.  All business
invariants are enforced here.  Both the Cart and its line items are
frozen: every operation returns a new object and a failed operation
leaves the original untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum

from shopcart.domain.exceptions import (
    CartNotActiveError,
    InvalidCartError,
    InvalidCartItemError,
    MaxCartItemsExceededError,
)
from shopcart.domain.model.identifiers import CartId, ProductId
from shopcart.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    Currency,
    Money,
    Quantity,
    parse_currency,
)


class CartStatus(Enum):
    ACTIVE = "ACTIVE"
    ABANDONED = "ABANDONED"
    CHECKED_OUT = "CHECKED_OUT"


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_CART_ITEMS = 100
MAX_PRODUCT_NAME_LENGTH = 200
MAX_USER_ID_LENGTH = 100


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=False)
class CartLineItem:
    """One product in a cart, with the price captured when it was added.

    Entity identity is the product id: two line items for the same
    product are equal whatever their quantity or price.
    """

    product_id: ProductId
    product_name: str
    quantity: Quantity
    unit_price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.product_id, ProductId):
            raise InvalidCartItemError(
                f"Line item product must be a ProductId, got {type(self.product_id).__name__}"
            )
        if not isinstance(self.product_name, str) or not self.product_name.strip():
            raise InvalidCartItemError(
                "Product name cannot be empty", {"productId": self.product_id.value}
            )
        if len(self.product_name) > MAX_PRODUCT_NAME_LENGTH:
            raise InvalidCartItemError(
                f"Product name cannot exceed {MAX_PRODUCT_NAME_LENGTH} characters",
                {"productId": self.product_id.value, "productName": self.product_name},
            )
        if self.unit_price.is_zero():
            raise InvalidCartItemError(
                "Unit price must be greater than zero",
                {"productId": self.product_id.value, "unitPrice": self.unit_price.to_dict()},
            )

    @staticmethod
    def create(
        product_id: ProductId,
        product_name: str,
        quantity: Quantity,
        unit_price: Money,
    ) -> CartLineItem:
        return CartLineItem(product_id, product_name, quantity, unit_price)

    @property
    def line_total(self) -> Money:
        return self.unit_price.multiply(self.quantity.value)

    def update_quantity(self, new_quantity: Quantity) -> CartLineItem:
        return replace(self, quantity=new_quantity)

    def increase_quantity(self, delta: Quantity) -> CartLineItem:
        return self.update_quantity(self.quantity.add(delta))

    def decrease_quantity(self, delta: Quantity) -> CartLineItem:
        """Raises InvalidQuantityError if the result would drop to zero or below."""
        return self.update_quantity(self.quantity.subtract(delta))

    def equals(self, other: CartLineItem) -> bool:
        return self == other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CartLineItem):
            return NotImplemented
        return self.product_id == other.product_id

    def __hash__(self) -> int:
        return hash(self.product_id)

    def to_dict(self) -> dict:
        return {
            "productId": self.product_id.value,
            "productName": self.product_name,
            "quantity": self.quantity.value,
            "unitPrice": self.unit_price.to_dict(),
            "lineTotal": self.line_total.to_dict(),
        }


@dataclass(frozen=True, eq=False)
class Cart:
    """Aggregate root for shopping carts.

    Use the ``Cart.create()`` factory for new carts.  The constructor
    validates every invariant, so the repository can reconstitute a
    persisted cart directly and a corrupt record is rejected on load.

    Invariants:
    - ``user_id`` is non-blank and at most 100 characters
    - at most ``MAX_CART_ITEMS`` distinct products
    - every item is priced in the cart currency
    - product ids are unique within the cart

    ``version`` counts successful saves; it belongs to the repository's
    optimistic concurrency check and is never changed by cart operations.
    """

    cart_id: CartId
    user_id: str
    items: tuple[CartLineItem, ...] = ()
    status: CartStatus = CartStatus.ACTIVE
    currency: Currency = DEFAULT_CURRENCY
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    version: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "currency", parse_currency(self.currency))
        if not isinstance(self.status, CartStatus):
            try:
                object.__setattr__(self, "status", CartStatus(self.status))
            except ValueError as exc:
                raise InvalidCartError(
                    f"Unknown cart status: {self.status!r}", {"status": str(self.status)}
                ) from exc
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.cart_id, CartId):
            raise InvalidCartError(
                f"Cart id must be a CartId, got {type(self.cart_id).__name__}"
            )
        context = {"cartId": self.cart_id.value}

        if not isinstance(self.user_id, str) or not self.user_id.strip():
            raise InvalidCartError("User ID is required", context)
        if len(self.user_id) > MAX_USER_ID_LENGTH:
            raise InvalidCartError(
                f"User ID cannot exceed {MAX_USER_ID_LENGTH} characters", context
            )

        if len(self.items) > MAX_CART_ITEMS:
            raise InvalidCartError(
                f"Cart cannot have more than {MAX_CART_ITEMS} items",
                {**context, "itemCount": len(self.items)},
            )

        invalid = [
            item.product_id.value
            for item in self.items
            if item.unit_price.currency != self.currency
        ]
        if invalid:
            raise InvalidCartError(
                "All items must have the same currency as the cart",
                {**context, "cartCurrency": self.currency.value, "invalidItems": invalid},
            )

        if len(set(self.items)) != len(self.items):
            raise InvalidCartError("Cart items must have unique product ids", context)

        if isinstance(self.version, bool) or not isinstance(self.version, int) or self.version < 0:
            raise InvalidCartError(f"Invalid cart version: {self.version!r}", context)

    # --- Factory (used for NEW carts only) ------------------------------------

    @staticmethod
    def create(user_id: str, currency: Currency | str | None = None) -> Cart:
        now = _utcnow()
        return Cart(
            cart_id=CartId.generate(),
            user_id=user_id,
            items=(),
            status=CartStatus.ACTIVE,
            currency=parse_currency(DEFAULT_CURRENCY if currency is None else currency),
            created_at=now,
            updated_at=now,
        )

    # --- Item operations ------------------------------------------------------

    def add_item(
        self,
        product_id: ProductId,
        product_name: str,
        quantity: Quantity,
        unit_price: Money,
    ) -> Cart:
        """Add a product, merging quantities if it is already in the cart.

        On a merge the existing line keeps its name and unit price; the
        values passed in for an already-present product are discarded.
        """
        self._ensure_active()

        if unit_price.currency != self.currency:
            raise InvalidCartError(
                "Item currency must match cart currency",
                {
                    "cartId": self.cart_id.value,
                    "cartCurrency": self.currency.value,
                    "itemCurrency": unit_price.currency.value,
                },
            )

        new_item = CartLineItem.create(product_id, product_name, quantity, unit_price)
        index = self._index_of(product_id)

        if index is not None:
            merged = self.items[index].increase_quantity(new_item.quantity)
            items = self.items[:index] + (merged,) + self.items[index + 1:]
        else:
            if len(self.items) >= MAX_CART_ITEMS:
                raise MaxCartItemsExceededError(MAX_CART_ITEMS)
            items = self.items + (new_item,)

        return self._with_items(items)

    def remove_item(self, product_id: ProductId) -> Cart:
        self._ensure_active()
        index = self._require_index(product_id)
        return self._with_items(self.items[:index] + self.items[index + 1:])

    def update_item_quantity(self, product_id: ProductId, new_quantity: Quantity) -> Cart:
        """Replace the quantity of an existing line (no merge)."""
        self._ensure_active()
        index = self._require_index(product_id)
        updated = self.items[index].update_quantity(new_quantity)
        return self._with_items(self.items[:index] + (updated,) + self.items[index + 1:])

    def clear_items(self) -> Cart:
        self._ensure_active()
        return self._with_items(())

    # --- State transitions ----------------------------------------------------

    def abandon(self) -> Cart:
        """Transition ACTIVE -> ABANDONED."""
        self._ensure_active()
        return replace(self, status=CartStatus.ABANDONED, updated_at=_utcnow())

    def checkout(self) -> Cart:
        """Transition ACTIVE -> CHECKED_OUT; the cart must hold at least one item."""
        self._ensure_active()
        if self.is_empty:
            raise InvalidCartError(
                "Cannot checkout empty cart", {"cartId": self.cart_id.value}
            )
        return replace(self, status=CartStatus.CHECKED_OUT, updated_at=_utcnow())

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def item_count(self) -> int:
        """Sum of quantities, as opposed to ``len(items)`` (distinct products)."""
        return sum(item.quantity.value for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def is_active(self) -> bool:
        return self.status == CartStatus.ACTIVE

    def find_item(self, product_id: ProductId) -> CartLineItem | None:
        index = self._index_of(product_id)
        return None if index is None else self.items[index]

    def equals(self, other: Cart) -> bool:
        return self == other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cart):
            return NotImplemented
        return self.cart_id == other.cart_id

    def __hash__(self) -> int:
        return hash(self.cart_id)

    def to_dict(self) -> dict:
        return {
            "cartId": self.cart_id.value,
            "userId": self.user_id,
            "status": self.status.value,
            "currency": self.currency.value,
            "items": [item.to_dict() for item in self.items],
            "total": self.total.to_dict(),
            "itemCount": self.item_count,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    # --- Internal helpers -----------------------------------------------------

    def _ensure_active(self) -> None:
        if not self.is_active:
            raise CartNotActiveError(self.cart_id.value, self.status.value)

    def _index_of(self, product_id: ProductId) -> int | None:
        for i, item in enumerate(self.items):
            if item.product_id == product_id:
                return i
        return None

    def _require_index(self, product_id: ProductId) -> int:
        index = self._index_of(product_id)
        if index is None:
            raise InvalidCartError(
                "Item not found in cart",
                {"cartId": self.cart_id.value, "productId": product_id.value},
            )
        return index

    def _with_items(self, items: tuple[CartLineItem, ...]) -> Cart:
        return replace(self, items=items, updated_at=_utcnow())
