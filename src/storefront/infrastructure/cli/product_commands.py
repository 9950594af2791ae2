"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.dto import ProductPatch
from storefront.application.show_product import ListProductsHandler, ShowProductHandler
from storefront.application.unit_of_work import UnitOfWork
from storefront.application.update_product import UpdateProductHandler
from storefront.infrastructure.cli.errors import reports_errors


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, help="Category.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--stock", type=int, default=0, show_default=True, help="Units in stock.")
@click.pass_obj
@reports_errors
def product_add(
    uow: UnitOfWork, name: str, price: str, category: str, description: str, stock: int
) -> None:
    """Add a new product to the catalog."""
    product = AddProductHandler(uow).handle(
        name=name, price=price, category=category, description=description, stock=stock
    )
    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--category", default=None, help="Only products in this category (case-insensitive).")
@click.pass_obj
@reports_errors
def product_list(uow: UnitOfWork, category: str | None) -> None:
    """List the products in the catalog."""
    products = ListProductsHandler(uow).handle(category=category)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<15} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 62)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.category:<15} {str(p.price):>10} {p.stock:>7}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
@reports_errors
def product_show(uow: UnitOfWork, product_id: int) -> None:
    """Show one product."""
    p = ShowProductHandler(uow).handle(product_id)
    click.echo(f"Product #{p.id}  {p.name}")
    click.echo(f"Category:    {p.category}")
    click.echo(f"Price:       {p.price}")
    click.echo(f"Stock:       {p.stock}")
    click.echo(f"Description: {p.description or '-'}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--category", default=None, help="New category.")
@click.option("--stock", type=int, default=None, help="New stock level.")
@click.pass_obj
@reports_errors
def product_update(
    uow: UnitOfWork,
    product_id: int,
    name: str | None,
    description: str | None,
    price: str | None,
    category: str | None,
    stock: int | None,
) -> None:
    """Change some fields of a product; omitted fields stay as they are."""
    supplied = {
        "name": name,
        "description": description,
        "price": price,
        "category": category,
        "stock": stock,
    }
    patch = ProductPatch(**{k: v for k, v in supplied.items() if v is not None})  # type: ignore[arg-type]

    product = UpdateProductHandler(uow).handle(product_id, patch)
    click.echo(f"Product #{product.id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
@reports_errors
def product_delete(uow: UnitOfWork, product_id: int) -> None:
    """Remove a product from the catalog."""
    product = DeleteProductHandler(uow).handle(product_id)
    click.echo(f"Product #{product.id} '{product.name}' deleted")
