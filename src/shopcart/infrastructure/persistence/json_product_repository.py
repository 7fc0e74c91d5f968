"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from pathlib import Path

from shopcart.domain.exceptions import (
    ProductNotActiveError,
    ProductNotFoundError,
    ValidationError,
)
from shopcart.domain.model.identifiers import ProductId
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def find_by_id(self, product_id: ProductId) -> Product:
        product = self._load().get(product_id.value)
        if product is None:
            raise ProductNotFoundError(product_id.value)
        if not product.is_active:
            raise ProductNotActiveError(product_id.value)
        return product

    def find_by_ids(self, product_ids: list[ProductId]) -> dict[str, Product]:
        products = self._load()
        return {
            pid.value: products[pid.value]
            for pid in product_ids
            if pid.value in products and products[pid.value].is_active
        }

    def exists(self, product_id: ProductId) -> bool:
        product = self._load().get(product_id.value)
        return product is not None and product.is_active

    def is_registered(self, product_id: ProductId) -> bool:
        return product_id.value in self._load()

    def list_active(
        self, limit: int = 50, after: str | None = None
    ) -> tuple[list[Product], str | None]:
        if limit < 1:
            raise ValidationError(f"Page limit must be at least 1, got {limit}", {"limit": limit})
        active = sorted(
            (p for p in self._load().values() if p.is_active),
            key=lambda p: p.product_id.value,
        )
        if after is not None:
            active = [p for p in active if p.product_id.value > after]
        page = active[:limit]
        next_key = page[-1].product_id.value if len(active) > limit else None
        return page, next_key

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.product_id.value] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                product_id=ProductId(item["id"]),
                name=item["name"],
                price=Money.of(item["price"], item.get("currency", "EUR")),
                is_active=item.get("is_active", True),
                description=item.get("description"),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.product_id.value,
                "name": p.name,
                "description": p.description,
                "price": str(p.price.amount),
                "currency": p.price.currency.value,
                "is_active": p.is_active,
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
