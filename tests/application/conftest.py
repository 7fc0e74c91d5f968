"""Shared fixtures for use-case tests (in-memory repositories only)."""

import pytest

from shopcart.domain.model.identifiers import ProductId
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, FakeProductRepository


@pytest.fixture
def cart_repo() -> FakeCartRepository:
    return FakeCartRepository()


@pytest.fixture
def product_repo() -> FakeProductRepository:
    return FakeProductRepository([
        Product(ProductId("PROD-001"), "Blue Widget", Money.of("29.99")),
        Product(ProductId("PROD-002"), "Red Gadget", Money.of("15.50")),
        Product(ProductId("PROD-USD"), "Imported Gizmo", Money.of("9.99", "USD")),
        Product(ProductId("PROD-OLD"), "Retired Thing", Money.of("5.00"), is_active=False),
    ])
