"""Abstract repository for Cart aggregate.

Implementations must honour the optimistic concurrency contract on
``save``: a cart is accepted only if its ``version`` matches the stored
version (0 for a cart that was never saved), and is stored with the
version incremented.  A stale cart raises ConcurrentCartUpdateError, so
two load-mutate-save cycles on the same cart can never silently
overwrite each other.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.cart import Cart
from shopcart.domain.model.identifiers import CartId


class CartRepository(ABC):

    @abstractmethod
    def find_by_id(self, cart_id: CartId) -> Cart:
        """Return the cart, or raise CartNotFoundError."""

    @abstractmethod
    def find_active_by_user_id(self, user_id: str) -> list[Cart]:
        """Return every ACTIVE cart owned by *user_id* (may be empty)."""

    @abstractmethod
    def save(self, cart: Cart) -> Cart:
        """Persist a new or updated cart and return the stored copy."""

    @abstractmethod
    def delete(self, cart_id: CartId) -> None:
        """Remove a cart, or raise CartNotFoundError."""

    @abstractmethod
    def exists(self, cart_id: CartId) -> bool:
        """True if a cart with this id is stored."""
