"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import json

import click

from shopcart.application.abandon_cart import AbandonCartHandler
from shopcart.application.add_item import AddItemHandler
from shopcart.application.checkout_cart import CheckoutCartHandler
from shopcart.application.clear_cart import ClearCartHandler
from shopcart.application.create_cart import CreateCartHandler
from shopcart.application.get_cart import GetCartHandler
from shopcart.application.list_active_carts import ListActiveCartsHandler
from shopcart.application.remove_item import RemoveItemHandler
from shopcart.application.update_item_quantity import UpdateItemQuantityHandler
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import (
    cart_repository,
    product_repository,
    settings,
)

CURRENCIES = click.Choice(["EUR", "USD", "GBP"], case_sensitive=False)

cart_id_option = click.option("--id", "cart_id", required=True, help="Cart ID (UUID).")
user_option = click.option("--user", "user_id", required=True, help="Owner user ID.")
json_option = click.option("--json", "as_json", is_flag=True, default=False, help="Print the cart as JSON.")


def _money(value: dict) -> str:
    return f"{value['amount']:.2f} {value['currency']}"


def _display_cart(data: dict) -> None:
    """Shared formatting for displaying a cart."""
    click.echo(f"Cart {data['cartId']}  (status={data['status']})")
    click.echo(f"User:     {data['userId']}")
    click.echo(f"Updated:  {data['updatedAt']}")
    click.echo()

    if not data["items"]:
        click.echo("  (empty)")
        return

    click.echo(f"  {'Product':<20} {'Name':<20} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*73}")
    for item in data["items"]:
        click.echo(
            f"  {item['productId']:<20} {item['productName'][:20]:<20} {item['quantity']:>5} "
            f"{_money(item['unitPrice']):>12} {_money(item['lineTotal']):>12}"
        )
    click.echo(f"  {'-'*73}")
    click.echo(f"  {'Cart Total':<20} {'':<20} {data['itemCount']:>5} {'':>12} {_money(data['total']):>12}")


def _emit(data: dict, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(data, indent=2))
    else:
        _display_cart(data)


@click.command("create")
@user_option
@click.option("--currency", type=CURRENCIES, default=None, help="Cart currency (default from settings).")
@json_option
def cart_create(user_id: str, currency: str | None, as_json: bool) -> None:
    """Create a new empty cart."""
    config = settings()
    handler = CreateCartHandler(
        cart_repo=cart_repository(config),
        default_currency=config.default_currency,
    )

    try:
        data = handler.handle(user_id=user_id, currency=currency)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        _emit(data, as_json)
    else:
        click.echo(f"Cart {data['cartId']} created  (currency={data['currency']})")


@click.command("show")
@cart_id_option
@user_option
@json_option
def cart_show(cart_id: str, user_id: str, as_json: bool) -> None:
    """Show the contents of a cart."""
    handler = GetCartHandler(cart_repo=cart_repository())

    try:
        data = handler.handle(cart_id=cart_id, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _emit(data, as_json)


@click.command("add")
@cart_id_option
@user_option
@click.option("--product", "product_id", required=True, help="Catalog product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="Quantity to add.")
@json_option
def cart_add(cart_id: str, user_id: str, product_id: str, quantity: int, as_json: bool) -> None:
    """Add a catalog product to a cart (merges with an existing line)."""
    config = settings()
    handler = AddItemHandler(
        cart_repo=cart_repository(config),
        product_repo=product_repository(config),
    )

    try:
        data = handler.handle(
            cart_id=cart_id, user_id=user_id, product_id=product_id, quantity=quantity
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _emit(data, as_json)


@click.command("remove")
@cart_id_option
@user_option
@click.option("--product", "product_id", required=True, help="Product ID to remove.")
@json_option
def cart_remove(cart_id: str, user_id: str, product_id: str, as_json: bool) -> None:
    """Remove a product line from a cart."""
    handler = RemoveItemHandler(cart_repo=cart_repository())

    try:
        data = handler.handle(cart_id=cart_id, user_id=user_id, product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _emit(data, as_json)


@click.command("update")
@cart_id_option
@user_option
@click.option("--product", "product_id", required=True, help="Product ID to update.")
@click.option("--qty", "quantity", required=True, type=int, help="New quantity.")
@json_option
def cart_update(cart_id: str, user_id: str, product_id: str, quantity: int, as_json: bool) -> None:
    """Set the quantity of a product line."""
    handler = UpdateItemQuantityHandler(cart_repo=cart_repository())

    try:
        data = handler.handle(
            cart_id=cart_id, user_id=user_id, product_id=product_id, quantity=quantity
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _emit(data, as_json)


@click.command("clear")
@cart_id_option
@user_option
def cart_clear(cart_id: str, user_id: str) -> None:
    """Remove every line from a cart."""
    handler = ClearCartHandler(cart_repo=cart_repository())

    try:
        handler.handle(cart_id=cart_id, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart {cart_id} cleared.")


@click.command("checkout")
@cart_id_option
@user_option
def cart_checkout(cart_id: str, user_id: str) -> None:
    """Check out a cart (must not be empty)."""
    handler = CheckoutCartHandler(cart_repo=cart_repository())

    try:
        data = handler.handle(cart_id=cart_id, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart {cart_id} checked out, total {_money(data['total'])}.")


@click.command("abandon")
@cart_id_option
@user_option
def cart_abandon(cart_id: str, user_id: str) -> None:
    """Abandon an active cart."""
    handler = AbandonCartHandler(cart_repo=cart_repository())

    try:
        handler.handle(cart_id=cart_id, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart {cart_id} abandoned.")


@click.command("list")
@user_option
def cart_list(user_id: str) -> None:
    """List a user's active carts."""
    handler = ListActiveCartsHandler(cart_repo=cart_repository())

    try:
        carts = handler.handle(user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not carts:
        click.echo("No active carts.")
        return

    click.echo(f"{'Cart ID':<38} {'Items':>6} {'Total':>14}")
    click.echo("-" * 60)
    for data in carts:
        click.echo(f"{data['cartId']:<38} {data['itemCount']:>6} {_money(data['total']):>14}")
