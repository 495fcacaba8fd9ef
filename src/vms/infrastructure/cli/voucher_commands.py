"""CLI commands for vouchers."""

from __future__ import annotations

import click

from vms.application.apply_voucher import ApplyVoucherHandler
from vms.application.create_voucher import CreateVoucherHandler
from vms.application.delete_voucher import DeleteVoucherHandler
from vms.application.list_vouchers import ListVouchersHandler
from vms.application.show_voucher import ShowVoucherHandler
from vms.application.update_voucher import UpdateVoucherHandler
from vms.domain.exceptions import DomainException
from vms.domain.model.voucher_type import VoucherType
from vms.infrastructure.bootstrap import Container
from vms.infrastructure.cli.formatting import voucher_lines

_TYPE_CHOICE = click.Choice([t.input_value for t in VoucherType], case_sensitive=False)


@click.command("create")
@click.option("--type", "voucher_type", required=True, type=_TYPE_CHOICE, help="Voucher type.")
@click.option("--amount", required=True, type=int, help="Fixed amount or percentage.")
@click.pass_obj
def voucher_create(container: Container, voucher_type: str, amount: int) -> None:
    """Issue a new voucher."""
    handler = CreateVoucherHandler(
        voucher_repo=container.voucher_repo,
        factories=container.factories,
    )

    try:
        dto = handler.handle(voucher_type=voucher_type, discount_amount=amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Voucher {dto.id} created ({dto.voucher_type}, {dto.description})")


@click.command("list")
@click.option("--type", "voucher_type", default=None, type=_TYPE_CHOICE, help="Only this type.")
@click.pass_obj
def voucher_list(container: Container, voucher_type: str | None) -> None:
    """List vouchers."""
    handler = ListVouchersHandler(voucher_repo=container.voucher_repo)

    try:
        dtos = handler.handle(voucher_type)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for line in voucher_lines(dtos):
        click.echo(line)


@click.command("show")
@click.option("--id", "voucher_id", required=True, help="Voucher ID.")
@click.pass_obj
def voucher_show(container: Container, voucher_id: str) -> None:
    """Show a single voucher."""
    handler = ShowVoucherHandler(voucher_repo=container.voucher_repo)

    try:
        dto = handler.handle(voucher_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for line in voucher_lines([dto]):
        click.echo(line)


@click.command("update")
@click.option("--id", "voucher_id", required=True, help="Voucher ID.")
@click.option("--amount", required=True, type=int, help="New fixed amount or percentage.")
@click.pass_obj
def voucher_update(container: Container, voucher_id: str, amount: int) -> None:
    """Change a voucher's discount amount."""
    handler = UpdateVoucherHandler(voucher_repo=container.voucher_repo)

    try:
        dto = handler.handle(voucher_id=voucher_id, discount_amount=amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Voucher {dto.id} updated to {dto.description}")


@click.command("delete")
@click.option("--id", "voucher_id", required=True, help="Voucher ID.")
@click.pass_obj
def voucher_delete(container: Container, voucher_id: str) -> None:
    """Delete a voucher."""
    handler = DeleteVoucherHandler(voucher_repo=container.voucher_repo)

    try:
        handler.handle(voucher_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Voucher {voucher_id} deleted.")


@click.command("apply")
@click.option("--id", "voucher_id", required=True, help="Voucher ID.")
@click.option("--amount", required=True, type=int, help="Purchase amount before discount.")
@click.pass_obj
def voucher_apply(container: Container, voucher_id: str, amount: int) -> None:
    """Show what a purchase costs after applying a voucher."""
    handler = ApplyVoucherHandler(voucher_repo=container.voucher_repo)

    try:
        result = handler.handle(voucher_id=voucher_id, original_amount=amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"{result.original_amount} -> {result.discounted_amount} (saved {result.saved})"
    )
