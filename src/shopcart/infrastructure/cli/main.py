import logging

import click

from shopcart.infrastructure.bootstrap import settings
from shopcart.infrastructure.cli.cart_commands import (
    cart_abandon,
    cart_add,
    cart_checkout,
    cart_clear,
    cart_create,
    cart_list,
    cart_remove,
    cart_show,
    cart_update,
)
from shopcart.infrastructure.cli.product_commands import product_add, product_list
from shopcart.infrastructure.logging_setup import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log use-case events to stderr.")
def cli(verbose: bool) -> None:
    """shopcart: shopping carts over a JSON-file store."""
    configure_logging(logging.INFO if verbose else settings().log_level)


@cli.group()
def cart() -> None:
    """Manage carts."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
cart.add_command(cart_abandon)
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_clear)
cart.add_command(cart_create)
cart.add_command(cart_list)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
product.add_command(product_add)
product.add_command(product_list)
