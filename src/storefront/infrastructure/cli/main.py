from pathlib import Path

import click

from storefront.infrastructure.bootstrap import DATA_FILE_ENV, unit_of_work
from storefront.infrastructure.cli.order_commands import (
    order_cancel,
    order_create,
    order_list,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from storefront.infrastructure.cli.user_commands import (
    user_create,
    user_delete,
    user_list,
    user_show,
    user_update,
)
from storefront.infrastructure.logging_config import setup_logging


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=DATA_FILE_ENV,
    default=None,
    help="JSON document holding users, products and orders.",
)
@click.option(
    "--log-level",
    envvar="STOREFRONT_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    help="Logging level for messages written to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None, log_level: str) -> None:
    """Storefront — users, products and orders"""
    setup_logging(log_level)
    ctx.obj = unit_of_work(data_file)


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
user.add_command(user_create)
user.add_command(user_delete)
user.add_command(user_list)
user.add_command(user_show)
user.add_command(user_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
order.add_command(order_cancel)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
