"""CLI commands for orders and order numbers."""

from __future__ import annotations

import click

from catalog.application.dto import OrderDTO
from catalog.domain.exceptions import DomainException
from catalog.domain.model.value_objects import MissingProductPolicy
from catalog.domain.service.stock_policies import POLICIES, policy_by_name
from catalog.infrastructure.bootstrap import DEFAULT_SUPPLIERS, catalog_manager


def _parse_items(raw: str) -> dict[str, int]:
    """Parse 'P1:3,P2:5' into {product_id: qty}.

    A product id given twice has its quantities added.
    """
    items: dict[str, int] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        product_id = product_id.strip()
        items[product_id] = items.get(product_id, 0) + qty
    return items


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.order_id} processed")
    click.echo()
    if not dto.items:
        click.echo("  (no products matched)")
    else:
        click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
        click.echo(f"  {'-'*47}")
        for item in dto.items:
            click.echo(
                f"  {item.product_id:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
            )
        click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("process")
@click.option("--id", "order_id", default=None, help="Order ID. Drawn from --supplier if omitted.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option(
    "--policy",
    type=click.Choice(sorted(POLICIES)),
    default="decrement",
    show_default=True,
    help="Stock policy applied to every line.",
)
@click.option("--strict", is_flag=True, default=False, help="Fail on unknown products instead of skipping them.")
@click.option("--supplier", default="sequential", show_default=True, help="Order-number supplier for a missing --id.")
@click.pass_obj
def order_process(
    obj: dict,
    order_id: str | None,
    items: str,
    policy: str,
    strict: bool,
    supplier: str,
) -> None:
    """Process an order against the catalog."""
    order_items = _parse_items(items)
    on_missing = MissingProductPolicy.ABORT if strict else MissingProductPolicy.SKIP

    try:
        manager = catalog_manager(obj["data_file"])
        if order_id is None:
            order_id = manager.generate_order_number(supplier).unwrap()
        order = manager.process_order(
            order_id, order_items, policy_by_name(policy), on_missing=on_missing
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(OrderDTO.from_order(order))


@click.command("number")
@click.option(
    "--supplier",
    type=click.Choice(sorted(DEFAULT_SUPPLIERS)),
    default="sequential",
    show_default=True,
    help="Which registered supplier to draw from.",
)
@click.option("--count", default=1, show_default=True, type=click.IntRange(min=1), help="How many numbers to draw.")
@click.pass_obj
def order_number(obj: dict, supplier: str, count: int) -> None:
    """Draw order numbers from a registered supplier."""
    try:
        manager = catalog_manager(obj["data_file"])
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for _ in range(count):
        click.echo(str(manager.generate_order_number(supplier)))
