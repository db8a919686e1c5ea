import logging

import click

from catalog.infrastructure.bootstrap import DATA_FILE_ENV
from catalog.infrastructure.cli.order_commands import order_number, order_process
from catalog.infrastructure.cli.product_commands import (
    product_active,
    product_average,
    product_categories,
    product_list,
    product_value,
)
from catalog.infrastructure.cli.stock_commands import stock_update


@click.group()
@click.option(
    "--file",
    "data_file",
    envvar=DATA_FILE_ENV,
    type=click.Path(dir_okay=False),
    default=None,
    help="Product seed file (JSON). Defaults to data/products.json.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show status reports.")
@click.pass_context
def cli(ctx: click.Context, data_file: str | None, verbose: bool) -> None:
    """Catalog: in-memory product catalog and order processing"""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("catalog").setLevel(level)
    ctx.obj = {"data_file": data_file}


@cli.group()
def product() -> None:
    """Query the product catalog."""


@cli.group()
def stock() -> None:
    """Change stock levels."""


@cli.group()
def order() -> None:
    """Process orders and draw order numbers."""


# Register subcommands
product.add_command(product_active)
product.add_command(product_average)
product.add_command(product_categories)
product.add_command(product_list)
product.add_command(product_value)
stock.add_command(stock_update)
order.add_command(order_number)
order.add_command(order_process)
