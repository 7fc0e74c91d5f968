"""Integration tests for the remaining cart use cases."""

import pytest

from shopcart.application.abandon_cart import AbandonCartHandler
from shopcart.application.add_item import AddItemHandler
from shopcart.application.checkout_cart import CheckoutCartHandler
from shopcart.application.clear_cart import ClearCartHandler
from shopcart.application.create_cart import CreateCartHandler
from shopcart.application.get_cart import GetCartHandler
from shopcart.application.list_active_carts import ListActiveCartsHandler
from shopcart.application.remove_item import RemoveItemHandler
from shopcart.application.update_item_quantity import UpdateItemQuantityHandler
from shopcart.domain.exceptions import (
    CartAccessDeniedError,
    CartNotActiveError,
    InvalidCartError,
    ValidationError,
)

USER = "user-123"


@pytest.fixture
def filled_cart(cart_repo, product_repo) -> str:
    cart_id = CreateCartHandler(cart_repo).handle(USER)["cartId"]
    add = AddItemHandler(cart_repo, product_repo)
    add.handle(cart_id, USER, "PROD-001", 2)
    add.handle(cart_id, USER, "PROD-002", 1)
    return cart_id


class TestGetCart:

    def test_returns_serialized_cart(self, cart_repo, filled_cart):
        data = GetCartHandler(cart_repo).handle(filled_cart, USER)
        assert data["cartId"] == filled_cart
        assert data["itemCount"] == 3

    def test_other_user_denied(self, cart_repo, filled_cart):
        with pytest.raises(CartAccessDeniedError):
            GetCartHandler(cart_repo).handle(filled_cart, "someone-else")


class TestItemChanges:

    def test_remove_item(self, cart_repo, filled_cart):
        data = RemoveItemHandler(cart_repo).handle(filled_cart, USER, "PROD-001")
        assert [i["productId"] for i in data["items"]] == ["PROD-002"]

    def test_remove_missing_item(self, cart_repo, filled_cart):
        with pytest.raises(InvalidCartError, match="Item not found"):
            RemoveItemHandler(cart_repo).handle(filled_cart, USER, "PROD-999")

    def test_update_quantity(self, cart_repo, filled_cart):
        data = UpdateItemQuantityHandler(cart_repo).handle(filled_cart, USER, "PROD-001", 7)
        assert data["items"][0]["quantity"] == 7
        assert data["itemCount"] == 8

    def test_clear(self, cart_repo, filled_cart):
        data = ClearCartHandler(cart_repo).handle(filled_cart, USER)
        assert data["items"] == []
        assert data["total"]["amount"] == 0.0


class TestLifecycle:

    def test_checkout(self, cart_repo, filled_cart):
        data = CheckoutCartHandler(cart_repo).handle(filled_cart, USER)
        assert data["status"] == "CHECKED_OUT"
        assert data["total"]["amount"] == 75.48

    def test_checkout_empty_cart_rejected(self, cart_repo):
        cart_id = CreateCartHandler(cart_repo).handle(USER)["cartId"]
        with pytest.raises(InvalidCartError, match="empty cart"):
            CheckoutCartHandler(cart_repo).handle(cart_id, USER)

    def test_abandon(self, cart_repo, filled_cart):
        assert AbandonCartHandler(cart_repo).handle(filled_cart, USER)["status"] == "ABANDONED"

    def test_no_changes_after_checkout(self, cart_repo, product_repo, filled_cart):
        CheckoutCartHandler(cart_repo).handle(filled_cart, USER)
        with pytest.raises(CartNotActiveError):
            AddItemHandler(cart_repo, product_repo).handle(filled_cart, USER, "PROD-001", 1)
        with pytest.raises(CartNotActiveError):
            ClearCartHandler(cart_repo).handle(filled_cart, USER)


class TestListActiveCarts:

    def test_lists_only_active_carts_of_user(self, cart_repo, filled_cart):
        create = CreateCartHandler(cart_repo)
        second = create.handle(USER)["cartId"]
        create.handle("other-user")
        AbandonCartHandler(cart_repo).handle(filled_cart, USER)

        carts = ListActiveCartsHandler(cart_repo).handle(USER)
        assert [c["cartId"] for c in carts] == [second]

    def test_blank_user_rejected(self, cart_repo):
        with pytest.raises(ValidationError):
            ListActiveCartsHandler(cart_repo).handle("")
