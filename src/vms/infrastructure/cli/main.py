import click

from vms.infrastructure.bootstrap import Container, build_container
from vms.infrastructure.cli.console import Console, MenuDispatcher
from vms.infrastructure.cli.customer_commands import (
    customer_create,
    customer_delete,
    customer_find,
    customer_list,
    customer_update,
)
from vms.infrastructure.cli.voucher_commands import (
    voucher_apply,
    voucher_create,
    voucher_delete,
    voucher_list,
    voucher_show,
    voucher_update,
)
from vms.infrastructure.config import get_settings
from vms.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--database-url", default=None, help="SQLAlchemy URL; overrides VMS_DATABASE_URL.")
@click.option("--log-level", default=None, help="Logging level; overrides VMS_LOG_LEVEL.")
@click.pass_context
def cli(ctx: click.Context, database_url: str | None, log_level: str | None) -> None:
    """VMS: Voucher Management System"""
    settings = get_settings()
    configure_logging(log_level or settings.log_level)
    if ctx.obj is None:
        ctx.obj = build_container(settings, database_url=database_url)


@cli.group()
def voucher() -> None:
    """Manage vouchers."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.command("console")
@click.pass_obj
def console(container: Container) -> None:
    """Start the interactive menu."""
    MenuDispatcher(Console(), container).run()


@cli.command("reset")
@click.confirmation_option(prompt="Delete every voucher and customer?")
@click.pass_obj
def reset(container: Container) -> None:
    """Delete all stored vouchers and customers."""
    vouchers = container.voucher_repo.delete_all()
    customers = container.customer_repo.delete_all()
    click.echo(f"Removed {vouchers} voucher(s) and {customers} customer(s).")


# Register subcommands
voucher.add_command(voucher_apply)
voucher.add_command(voucher_create)
voucher.add_command(voucher_delete)
voucher.add_command(voucher_list)
voucher.add_command(voucher_show)
voucher.add_command(voucher_update)
customer.add_command(customer_create)
customer.add_command(customer_delete)
customer.add_command(customer_find)
customer.add_command(customer_list)
customer.add_command(customer_update)
