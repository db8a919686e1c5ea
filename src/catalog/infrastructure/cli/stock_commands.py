"""CLI commands for stock levels."""

from __future__ import annotations

import click

from catalog.domain.exceptions import DomainException
from catalog.domain.service.stock_policies import POLICIES, policy_by_name
from catalog.infrastructure.bootstrap import catalog_manager


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Quantity handed to the policy.")
@click.option(
    "--policy",
    type=click.Choice(sorted(POLICIES)),
    default="increment",
    show_default=True,
    help="How the quantity changes stock.",
)
@click.pass_obj
def stock_update(obj: dict, product_id: str, quantity: int, policy: str) -> None:
    """Apply a stock policy to one product."""
    try:
        manager = catalog_manager(obj["data_file"])
        outcome = manager.update_stock(product_id, quantity, policy_by_name(policy))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not outcome:
        raise click.ClickException(f"Product not found: '{product_id}'")

    product = manager.get_product_by_id(product_id)
    click.echo(f"Stock for '{product_id}' is now {product.stock_quantity}")
