"""Concurrent load-mutate-save cycles on the same cart.

The repository applies an optimistic version check, so the second of two
writers that loaded the same version is rejected instead of silently
overwriting the first writer's change.
"""

import pytest

from shopcart.application.create_cart import CreateCartHandler
from shopcart.domain.exceptions import ConcurrentCartUpdateError
from shopcart.domain.model.identifiers import CartId, ProductId
from shopcart.domain.model.value_objects import Money, Quantity


def _add(cart, pid: str):
    return cart.add_item(ProductId(pid), "Widget", Quantity(1), Money.of("1.00"))


class TestOptimisticConcurrency:

    def test_second_writer_with_stale_version_rejected(self, cart_repo):
        cart_id = CartId(CreateCartHandler(cart_repo).handle("u")["cartId"])

        first = cart_repo.find_by_id(cart_id)
        second = cart_repo.find_by_id(cart_id)

        cart_repo.save(_add(first, "PROD-A"))
        with pytest.raises(ConcurrentCartUpdateError) as exc_info:
            cart_repo.save(_add(second, "PROD-B"))

        assert exc_info.value.context == {
            "cartId": cart_id.value, "expectedVersion": 1, "storedVersion": 2,
        }
        stored = cart_repo.find_by_id(cart_id)
        assert [i.product_id.value for i in stored.items] == ["PROD-A"]

    def test_reload_and_retry_succeeds(self, cart_repo):
        cart_id = CartId(CreateCartHandler(cart_repo).handle("u")["cartId"])
        stale = cart_repo.find_by_id(cart_id)
        cart_repo.save(_add(cart_repo.find_by_id(cart_id), "PROD-A"))

        with pytest.raises(ConcurrentCartUpdateError):
            cart_repo.save(_add(stale, "PROD-B"))

        saved = cart_repo.save(_add(cart_repo.find_by_id(cart_id), "PROD-B"))
        assert saved.version == 3
        assert len(saved.items) == 2
