"""End-to-end tests for the click CLI against a temporary data directory."""

import json
import logging

import pytest
from click.testing import CliRunner

from shopcart.infrastructure.cli.main import cli

USER = "user-123"


@pytest.fixture(autouse=True)
def restore_root_logger():
    # the cli group reconfigures the root logger on every invocation
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def runner(monkeypatch, tmp_path) -> CliRunner:
    monkeypatch.setenv("SHOPCART_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("SHOPCART_DEFAULT_CURRENCY", raising=False)
    return CliRunner()


def _ok(runner: CliRunner, *args: str) -> str:
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result.output


@pytest.fixture
def catalog(runner) -> None:
    _ok(runner, "product", "add", "--id", "PROD-001", "--name", "Blue Widget", "--price", "29.99")
    _ok(runner, "product", "add", "--id", "PROD-002", "--name", "Red Gadget", "--price", "15.50")
    _ok(runner, "product", "add", "--id", "PROD-USD", "--name", "Gizmo", "--price", "9.99",
        "--currency", "USD")


def _create_cart(runner: CliRunner) -> str:
    return json.loads(_ok(runner, "cart", "create", "--user", USER, "--json"))["cartId"]


class TestProductCommands:

    def test_add_and_list(self, runner, catalog):
        output = _ok(runner, "product", "list")
        assert "PROD-001" in output
        assert "29.99 EUR" in output

    def test_duplicate_product_rejected(self, runner, catalog):
        result = runner.invoke(
            cli, ["product", "add", "--id", "PROD-001", "--name", "Again", "--price", "1"]
        )
        assert result.exit_code != 0
        assert "already exists" in result.output

    def test_empty_catalog(self, runner):
        assert "No products found." in _ok(runner, "product", "list")

    def test_inactive_product_not_overwritten(self, runner):
        _ok(runner, "product", "add", "--id", "PROD-OLD", "--name", "Retired", "--price", "5", "--inactive")
        result = runner.invoke(
            cli, ["product", "add", "--id", "PROD-OLD", "--name", "Replacement", "--price", "99"]
        )
        assert result.exit_code != 0
        assert "already exists" in result.output

    @pytest.mark.parametrize("limit", ["0", "-3"])
    def test_list_rejects_non_positive_limit(self, runner, catalog, limit):
        result = runner.invoke(cli, ["product", "list", "--limit", limit])
        assert result.exit_code == 2
        assert not isinstance(result.exception, IndexError)
        assert "--limit" in result.output

    def test_list_pages(self, runner, catalog):
        output = _ok(runner, "product", "list", "--limit", "1")
        assert "PROD-001" in output
        assert "More: --after PROD-001" in output

    def test_out_of_range_price_reported(self, runner):
        result = runner.invoke(
            cli, ["product", "add", "--id", "PROD-BIG", "--name", "Big", "--price", "1e100"]
        )
        assert result.exit_code == 1
        assert "out of range" in result.output


class TestCartCommands:

    def test_full_flow(self, runner, catalog):
        cart_id = _create_cart(runner)
        _ok(runner, "cart", "add", "--id", cart_id, "--user", USER, "--product", "PROD-001", "--qty", "2")
        output = _ok(runner, "cart", "add", "--id", cart_id, "--user", USER,
                     "--product", "PROD-002", "--qty", "1")
        assert "75.48 EUR" in output

        data = json.loads(_ok(runner, "cart", "show", "--id", cart_id, "--user", USER, "--json"))
        assert data["itemCount"] == 3
        assert data["total"] == {"amount": 75.48, "currency": "EUR"}

        output = _ok(runner, "cart", "checkout", "--id", cart_id, "--user", USER)
        assert "checked out" in output

        result = runner.invoke(
            cli, ["cart", "add", "--id", cart_id, "--user", USER, "--product", "PROD-001", "--qty", "1"]
        )
        assert result.exit_code != 0
        assert "must be active" in result.output

    def test_update_remove_clear(self, runner, catalog):
        cart_id = _create_cart(runner)
        _ok(runner, "cart", "add", "--id", cart_id, "--user", USER, "--product", "PROD-001", "--qty", "2")
        _ok(runner, "cart", "add", "--id", cart_id, "--user", USER, "--product", "PROD-002", "--qty", "1")

        data = json.loads(_ok(runner, "cart", "update", "--id", cart_id, "--user", USER,
                              "--product", "PROD-001", "--qty", "5", "--json"))
        assert data["items"][0]["quantity"] == 5

        data = json.loads(_ok(runner, "cart", "remove", "--id", cart_id, "--user", USER,
                              "--product", "PROD-002", "--json"))
        assert [i["productId"] for i in data["items"]] == ["PROD-001"]

        assert "cleared" in _ok(runner, "cart", "clear", "--id", cart_id, "--user", USER)
        assert "(empty)" in _ok(runner, "cart", "show", "--id", cart_id, "--user", USER)

    def test_checkout_empty_cart_fails(self, runner):
        cart_id = _create_cart(runner)
        result = runner.invoke(cli, ["cart", "checkout", "--id", cart_id, "--user", USER])
        assert result.exit_code != 0
        assert "Cannot checkout empty cart" in result.output

    def test_currency_mismatch_reported(self, runner, catalog):
        cart_id = _create_cart(runner)
        result = runner.invoke(
            cli, ["cart", "add", "--id", cart_id, "--user", USER, "--product", "PROD-USD", "--qty", "1"]
        )
        assert result.exit_code != 0
        assert "different currencies" in result.output

    def test_other_user_denied(self, runner):
        cart_id = _create_cart(runner)
        result = runner.invoke(cli, ["cart", "show", "--id", cart_id, "--user", "mallory"])
        assert result.exit_code != 0
        assert "not authorized" in result.output

    def test_list_and_abandon(self, runner):
        first = _create_cart(runner)
        second = _create_cart(runner)
        _ok(runner, "cart", "abandon", "--id", first, "--user", USER)
        output = _ok(runner, "cart", "list", "--user", USER)
        assert second in output
        assert first not in output

    def test_default_currency_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("SHOPCART_DEFAULT_CURRENCY", "USD")
        data = json.loads(_ok(runner, "cart", "create", "--user", USER, "--json"))
        assert data["currency"] == "USD"

    def test_unknown_cart(self, runner):
        result = runner.invoke(
            cli, ["cart", "show", "--id", "123e4567-e89b-42d3-a456-426614174000", "--user", USER]
        )
        assert result.exit_code != 0
        assert "was not found" in result.output
