"""CLI commands for customers."""

from __future__ import annotations

import click

from vms.application.create_customer import CreateCustomerHandler
from vms.application.delete_customer import DeleteCustomerHandler
from vms.application.find_customer import FindCustomerHandler
from vms.application.list_customers import ListCustomersHandler
from vms.application.update_customer import UpdateCustomerHandler
from vms.domain.exceptions import DomainException
from vms.infrastructure.bootstrap import Container
from vms.infrastructure.cli.formatting import customer_lines


def _require_one(customer_id: str | None, name: str | None) -> None:
    if bool(customer_id) == bool(name):
        raise click.UsageError("Pass exactly one of --id or --name.")


@click.command("create")
@click.option("--name", required=True, help="Customer name (must be unique).")
@click.pass_obj
def customer_create(container: Container, name: str) -> None:
    """Register a new customer."""
    handler = CreateCustomerHandler(customer_repo=container.customer_repo)

    try:
        dto = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {dto.id} '{dto.name}' created")


@click.command("list")
@click.pass_obj
def customer_list(container: Container) -> None:
    """List all customers."""
    handler = ListCustomersHandler(customer_repo=container.customer_repo)
    for line in customer_lines(handler.handle()):
        click.echo(line)


@click.command("find")
@click.option("--id", "customer_id", default=None, help="Customer ID.")
@click.option("--name", default=None, help="Customer name.")
@click.pass_obj
def customer_find(container: Container, customer_id: str | None, name: str | None) -> None:
    """Find a customer by ID or name."""
    _require_one(customer_id, name)
    handler = FindCustomerHandler(customer_repo=container.customer_repo)

    try:
        dto = handler.handle(customer_id=customer_id, name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for line in customer_lines([dto]):
        click.echo(line)


@click.command("update")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--name", required=True, help="New name.")
@click.pass_obj
def customer_update(container: Container, customer_id: str, name: str) -> None:
    """Rename a customer."""
    handler = UpdateCustomerHandler(customer_repo=container.customer_repo)

    try:
        dto = handler.handle(customer_id=customer_id, new_name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {dto.id} renamed to '{dto.name}'")


@click.command("delete")
@click.option("--id", "customer_id", default=None, help="Customer ID.")
@click.option("--name", default=None, help="Customer name.")
@click.pass_obj
def customer_delete(container: Container, customer_id: str | None, name: str | None) -> None:
    """Delete a customer by ID or name."""
    _require_one(customer_id, name)
    handler = DeleteCustomerHandler(customer_repo=container.customer_repo)

    try:
        handler.handle(customer_id=customer_id, name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer_id or repr(name)} deleted.")
