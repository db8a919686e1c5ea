"""CLI commands for querying products."""

from __future__ import annotations

import click

from catalog.application.catalog_manager import CatalogManager
from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import catalog_manager

VALUE_FUNCTIONS = {
    "price": lambda p: p.price,
    "inventory": lambda p: p.price * p.stock_quantity,
}


def _load(obj: dict) -> CatalogManager:
    try:
        return catalog_manager(obj["data_file"])
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _print_products(dtos: list[ProductDTO]) -> None:
    if not dtos:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Category':<15} {'Status':<13} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 59)
    for p in dtos:
        click.echo(
            f"{p.id:<10} {p.category:<15} {p.status:<13} {p.price:>10} {p.stock_quantity:>7}"
        )


@click.command("list")
@click.option("--category", default=None, help="Only products in this category.")
@click.pass_obj
def product_list(obj: dict, category: str | None) -> None:
    """List products in the catalog."""
    manager = _load(obj)
    if category is None:
        products = manager.products
    else:
        products = manager.filter_products(lambda p: p.category == category)
    _print_products([ProductDTO.from_product(p) for p in products])


@click.command("active")
@click.pass_obj
def product_active(obj: dict) -> None:
    """List active products, cheapest first."""
    manager = _load(obj)
    _print_products(
        [ProductDTO.from_product(p) for p in manager.get_active_products_sorted_by_price()]
    )


@click.command("average")
@click.option("--category", required=True, help="Category to average over.")
@click.pass_obj
def product_average(obj: dict, category: str) -> None:
    """Average price of the products in a category."""
    manager = _load(obj)
    average = manager.calculate_average_price_in_category(category)
    click.echo(f"Average price in '{category}': {average:.2f}")


@click.command("categories")
@click.pass_obj
def product_categories(obj: dict) -> None:
    """Sum of prices per category."""
    sums = _load(obj).get_category_price_sum()
    if not sums:
        click.echo("No products found.")
        return

    click.echo(f"{'Category':<15} {'Price sum':>12}")
    click.echo("-" * 28)
    for category in sorted(sums):
        click.echo(f"{category:<15} {sums[category]:>12.2f}")


@click.command("value")
@click.option(
    "--by",
    "measure",
    type=click.Choice(sorted(VALUE_FUNCTIONS)),
    default="inventory",
    show_default=True,
    help="price: sum of prices; inventory: sum of price x stock.",
)
@click.pass_obj
def product_value(obj: dict, measure: str) -> None:
    """Total value of the catalog."""
    total = _load(obj).calculate_total_value(VALUE_FUNCTIONS[measure])
    click.echo(f"Total {measure} value: {total:.2f}")
