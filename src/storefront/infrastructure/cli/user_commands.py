"""CLI commands for users."""

from __future__ import annotations

import click

from storefront.application.create_user import CreateUserHandler
from storefront.application.delete_user import DeleteUserHandler
from storefront.application.dto import UserPatch
from storefront.application.show_user import ListUsersHandler, ShowUserHandler
from storefront.application.unit_of_work import UnitOfWork
from storefront.application.update_user import UpdateUserHandler
from storefront.domain.model.user import User
from storefront.infrastructure.cli.errors import reports_errors


def _display_user(user: User) -> None:
    click.echo(f"User #{user.id}")
    click.echo(f"Name:    {user.name}")
    click.echo(f"Email:   {user.email}")
    click.echo(f"Age:     {user.age if user.age is not None else '-'}")
    click.echo(f"City:    {user.city or '-'}")
    click.echo(f"Created: {user.created_at.strftime('%Y-%m-%d %H:%M UTC')}")


@click.command("create")
@click.option("--name", required=True, help="Full name.")
@click.option("--email", required=True, help="Email address (must be unique).")
@click.option("--age", type=int, default=None, help="Age.")
@click.option("--city", default=None, help="City.")
@click.pass_obj
@reports_errors
def user_create(uow: UnitOfWork, name: str, email: str, age: int | None, city: str | None) -> None:
    """Register a new user."""
    user = CreateUserHandler(uow).handle(name=name, email=email, age=age, city=city)
    click.echo(f"User #{user.id} '{user.name}' created")


@click.command("update")
@click.option("--id", "user_id", required=True, type=int, help="User ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--email", default=None, help="New email address.")
@click.option("--age", type=int, default=None, help="New age.")
@click.option("--clear-age", is_flag=True, default=False, help="Remove the stored age.")
@click.option("--city", default=None, help="New city.")
@click.option("--clear-city", is_flag=True, default=False, help="Remove the stored city.")
@click.pass_obj
@reports_errors
def user_update(
    uow: UnitOfWork,
    user_id: int,
    name: str | None,
    email: str | None,
    age: int | None,
    clear_age: bool,
    city: str | None,
    clear_city: bool,
) -> None:
    """Change some fields of a user; omitted fields stay as they are."""
    if clear_age and age is not None:
        raise click.UsageError("--age and --clear-age are mutually exclusive")
    if clear_city and city is not None:
        raise click.UsageError("--city and --clear-city are mutually exclusive")

    fields: dict[str, object] = {}
    if name is not None:
        fields["name"] = name
    if email is not None:
        fields["email"] = email
    if age is not None or clear_age:
        fields["age"] = age
    if city is not None or clear_city:
        fields["city"] = city

    user = UpdateUserHandler(uow).handle(user_id, UserPatch(**fields))  # type: ignore[arg-type]
    click.echo(f"User #{user.id} updated")


@click.command("delete")
@click.option("--id", "user_id", required=True, type=int, help="User ID.")
@click.pass_obj
@reports_errors
def user_delete(uow: UnitOfWork, user_id: int) -> None:
    """Delete a user."""
    user = DeleteUserHandler(uow).handle(user_id)
    click.echo(f"User #{user.id} '{user.name}' deleted")


@click.command("show")
@click.option("--id", "user_id", required=True, type=int, help="User ID.")
@click.pass_obj
@reports_errors
def user_show(uow: UnitOfWork, user_id: int) -> None:
    """Show one user."""
    _display_user(ShowUserHandler(uow).handle(user_id))


@click.command("list")
@click.pass_obj
@reports_errors
def user_list(uow: UnitOfWork) -> None:
    """List all users."""
    users = ListUsersHandler(uow).handle()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Email':<30}")
    click.echo("-" * 58)
    for u in users:
        click.echo(f"{u.id:<6} {u.name:<20} {u.email:<30}")
