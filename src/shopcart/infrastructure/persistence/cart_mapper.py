"""Mapping between the Cart aggregate and its stored JSON record.

Amounts are stored as decimal strings and timestamps as ISO-8601 so the
file stays readable; reconstitution goes through the normal constructors,
which means a record that breaks an invariant is rejected on load.
"""

from __future__ import annotations

from datetime import datetime

from shopcart.domain.model.cart import Cart, CartLineItem, CartStatus
from shopcart.domain.model.identifiers import CartId, ProductId
from shopcart.domain.model.value_objects import Money, Quantity


def cart_key(cart_id: CartId) -> str:
    return f"CART#{cart_id.value}"


def to_record(cart: Cart) -> dict:
    return {
        "pk": cart_key(cart.cart_id),
        "cart_id": cart.cart_id.value,
        "user_id": cart.user_id,
        "status": cart.status.value,
        "currency": cart.currency.value,
        "version": cart.version,
        "created_at": cart.created_at.isoformat(),
        "updated_at": cart.updated_at.isoformat(),
        "items": [
            {
                "product_id": item.product_id.value,
                "product_name": item.product_name,
                "quantity": item.quantity.value,
                "unit_price": str(item.unit_price.amount),
                "currency": item.unit_price.currency.value,
            }
            for item in cart.items
        ],
    }


def to_domain(raw: dict) -> Cart:
    items = [
        CartLineItem(
            product_id=ProductId(i["product_id"]),
            product_name=i["product_name"],
            quantity=Quantity(i["quantity"]),
            unit_price=Money.of(i["unit_price"], i.get("currency", raw["currency"])),
        )
        for i in raw["items"]
    ]
    return Cart(
        cart_id=CartId(raw["cart_id"]),
        user_id=raw["user_id"],
        items=tuple(items),
        status=CartStatus(raw["status"]),
        currency=raw["currency"],
        created_at=datetime.fromisoformat(raw["created_at"]),
        updated_at=datetime.fromisoformat(raw["updated_at"]),
        version=raw.get("version", 0),
    )
