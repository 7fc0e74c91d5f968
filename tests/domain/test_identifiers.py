"""Unit tests for CartId and ProductId."""

import pytest

from shopcart.domain.exceptions import InvalidCartError, InvalidProductError
from shopcart.domain.model.identifiers import CartId, ProductId

VALID_UUID = "123e4567-e89b-42d3-a456-426614174000"


class TestCartId:

    def test_generate_produces_valid_v4(self):
        cart_id = CartId.generate()
        assert CartId.of(cart_id.value) == cart_id

    def test_generate_is_unique(self):
        assert CartId.generate() != CartId.generate()

    def test_accepts_upper_case(self):
        assert CartId.of(VALID_UUID.upper()).value == VALID_UUID.upper()

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "",
            "00000000-0000-0000-0000-000000000000",
            "123e4567-e89b-12d3-a456-426614174000",  # version 1
            "123e4567-e89b-42d3-c456-426614174000",  # bad variant
            VALID_UUID + "\n",
        ],
    )
    def test_invalid_format_rejected(self, value):
        with pytest.raises(InvalidCartError, match="Invalid cart ID format") as exc_info:
            CartId.of(value)
        assert exc_info.value.code == "INVALID_CART"

    def test_equality_by_value(self):
        assert CartId(VALID_UUID) == CartId(VALID_UUID)
        assert len({CartId(VALID_UUID), CartId(VALID_UUID)}) == 1

    def test_str(self):
        assert str(CartId(VALID_UUID)) == VALID_UUID


class TestProductId:

    @pytest.mark.parametrize("value", ["PROD-001", "ABC", "A" * 50, "123-456"])
    def test_valid(self, value):
        assert ProductId.of(value).value == value

    @pytest.mark.parametrize("value", ["AB", "A" * 51, "prod-001", "PROD_001", "PROD 1", ""])
    def test_invalid_format_rejected(self, value):
        with pytest.raises(InvalidProductError, match="Invalid product ID format"):
            ProductId.of(value)


class TestIdentifierKindsAreDistinct:

    def test_same_text_different_kinds_not_equal(self):
        # "ABC-123" is not a UUID, so compare through a value valid for both.
        shared = "12345678-1234-4234-8234-123456789012".upper()
        assert CartId(shared) != ProductId(shared)
