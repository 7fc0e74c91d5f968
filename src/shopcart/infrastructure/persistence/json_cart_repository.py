"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

from shopcart.domain.exceptions import CartNotFoundError, ConcurrentCartUpdateError
from shopcart.domain.model.cart import Cart, CartStatus
from shopcart.domain.model.identifiers import CartId
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.infrastructure.persistence import cart_mapper


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def find_by_id(self, cart_id: CartId) -> Cart:
        for raw in self._load_raw():
            if raw["cart_id"] == cart_id.value:
                return cart_mapper.to_domain(raw)
        raise CartNotFoundError(cart_id.value)

    def find_active_by_user_id(self, user_id: str) -> list[Cart]:
        return [
            cart_mapper.to_domain(raw)
            for raw in self._load_raw()
            if raw["user_id"] == user_id and raw["status"] == CartStatus.ACTIVE.value
        ]

    def save(self, cart: Cart) -> Cart:
        carts = self._load_raw()
        index = self._index_of(carts, cart.cart_id)

        stored_version = carts[index].get("version", 0) if index is not None else 0
        if cart.version != stored_version:
            raise ConcurrentCartUpdateError(cart.cart_id.value, cart.version, stored_version)

        saved = replace(cart, version=cart.version + 1)

        # Upsert: replace if exists, otherwise append
        if index is not None:
            carts[index] = cart_mapper.to_record(saved)
        else:
            carts.append(cart_mapper.to_record(saved))

        self._persist_raw(carts)
        return saved

    def delete(self, cart_id: CartId) -> None:
        carts = self._load_raw()
        index = self._index_of(carts, cart_id)
        if index is None:
            raise CartNotFoundError(cart_id.value)
        del carts[index]
        self._persist_raw(carts)

    def exists(self, cart_id: CartId) -> bool:
        return self._index_of(self._load_raw(), cart_id) is not None

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _index_of(carts: list[dict], cart_id: CartId) -> int | None:
        for i, raw in enumerate(carts):
            if raw["cart_id"] == cart_id.value:
                return i
        return None

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, carts: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(carts, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
