"""CLI commands for the Product catalog."""

from __future__ import annotations

import click

from shopcart.application.add_product import AddProductHandler
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import product_repository, settings


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID (e.g. PROD-001).")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 29.99).")
@click.option("--currency", type=click.Choice(["EUR", "USD", "GBP"], case_sensitive=False), default=None)
@click.option("--description", default=None, help="Optional description.")
@click.option("--inactive", is_flag=True, default=False, help="Add the product as inactive.")
def product_add(
    product_id: str,
    name: str,
    price: str,
    currency: str | None,
    description: str | None,
    inactive: bool,
) -> None:
    """Add a new product to the catalog."""
    config = settings()
    handler = AddProductHandler(product_repo=product_repository(config))

    try:
        product = handler.handle(
            product_id=product_id,
            name=name,
            price=price,
            currency=config.default_currency if currency is None else currency,
            description=description,
            is_active=not inactive,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.product_id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--limit", default=50, show_default=True, type=click.IntRange(min=1), help="Page size.")
@click.option("--after", default=None, help="Product ID to start after.")
def product_list(limit: int, after: str | None) -> None:
    """List active products in the catalog."""
    try:
        products, next_key = product_repository().list_active(limit=limit, after=after)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<20} {'Name':<30} {'Price':>12}")
    click.echo("-" * 64)
    for p in products:
        click.echo(f"{p.product_id.value:<20} {p.name[:30]:<30} {str(p.price):>12}")
    if next_key:
        click.echo(f"\nMore: --after {next_key}")
