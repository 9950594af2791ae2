"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderItemSpec
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.application.unit_of_work import UnitOfWork
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.model.views import OrderView
from storefront.infrastructure.cli.errors import reports_errors


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' (product id : quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        pid_str, qty_str = pair.rsplit(":", 1)
        try:
            pid = int(pid_str)
        except ValueError:
            raise click.BadParameter(f"Invalid product id '{pid_str}'.")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product {pid}."
            )
        specs.append(OrderItemSpec(product_id=pid, quantity=qty))
    return specs


def _display_order(view: OrderView) -> None:
    """Shared formatting for displaying an enriched order."""
    click.echo(f"Order #{view.id}  (status={view.status})")
    if view.user is not None:
        click.echo(f"User:     #{view.user_id} {view.user.name} <{view.user.email}>")
    else:
        click.echo(f"User:     #{view.user_id} (no longer exists)")
    click.echo(f"Created:  {view.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()
    click.echo(f"  {'ID':<5} {'Product':<20} {'Category':<15} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*59}")
    for line in view.items:
        if line.product is None:
            click.echo(f"  {line.product_id:<5} {'(deleted)':<20} {'':<15} {line.quantity:>5} {'':>10}")
        else:
            click.echo(
                f"  {line.product_id:<5} {line.product.name:<20} {line.product.category:<15} "
                f"{line.quantity:>5} {str(line.product.price):>10}"
            )
    click.echo(f"  {'-'*59}")
    click.echo(f"  {'Order Total':<27} {str(view.total):>32}")


@click.command("create")
@click.option("--user", "user_id", required=True, type=int, help="Ordering user ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
@reports_errors
def order_create(uow: UnitOfWork, user_id: int, items: str) -> None:
    """Create a new order (reserves stock)."""
    specs = _parse_items(items)

    created = CreateOrderHandler(uow).handle(user_id=user_id, item_specs=specs)

    click.echo(f"Order #{created.id} created  (status={created.status.value})")
    click.echo(f"Total: {created.total}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
@reports_errors
def order_show(uow: UnitOfWork, order_id: int) -> None:
    """Show details of an existing order."""
    _display_order(ShowOrderHandler(uow).handle(order_id))


@click.command("list")
@click.option("--status", default=None, help="Only orders with this status.")
@click.option("--user", "user_id", type=int, default=None, help="Only orders of this user.")
@click.pass_obj
@reports_errors
def order_list(uow: UnitOfWork, status: str | None, user_id: int | None) -> None:
    """List orders."""
    views = ListOrdersHandler(uow).handle(status=status, user_id=user_id)

    if not views:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'User':<20} {'Status':<12} {'Items':>6} {'Total':>12}")
    click.echo("-" * 60)
    for v in views:
        who = v.user.name if v.user is not None else f"#{v.user_id} (deleted)"
        click.echo(f"{v.id:<6} {who:<20} {v.status:<12} {len(v.items):>6} {str(v.total):>12}")


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option(
    "--status",
    required=True,
    help="New status: pending, processing, completed or cancelled.",
)
@click.pass_obj
@reports_errors
def order_status(uow: UnitOfWork, order_id: int, status: str) -> None:
    """Change the status of an order."""
    updated = UpdateOrderStatusHandler(uow).handle(order_id, status)
    click.echo(f"Order #{updated.id} status set to {updated.status.value}.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.pass_obj
@reports_errors
def order_cancel(uow: UnitOfWork, order_id: int) -> None:
    """Delete an order (returns stock if it was still pending)."""
    removed = CancelOrderHandler(uow).handle(order_id)
    click.echo(f"Order #{removed.id} cancelled.")
