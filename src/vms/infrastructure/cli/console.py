"""Interactive menu: read a command, run it, print the outcome, repeat.

The loop has no session state.  Every domain error is printed and the
user gets the prompt back; database failures are logged and reported
as a generic failure.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

import click
from sqlalchemy.exc import SQLAlchemyError

from vms.application.apply_voucher import ApplyVoucherHandler
from vms.application.create_customer import CreateCustomerHandler
from vms.application.create_voucher import CreateVoucherHandler
from vms.application.delete_customer import DeleteCustomerHandler
from vms.application.delete_voucher import DeleteVoucherHandler
from vms.application.find_customer import FindCustomerHandler
from vms.application.list_customers import ListCustomersHandler
from vms.application.list_vouchers import ListVouchersHandler
from vms.application.update_customer import UpdateCustomerHandler
from vms.application.update_voucher import UpdateVoucherHandler
from vms.domain.exceptions import DomainException
from vms.domain.model.voucher_type import VoucherType
from vms.infrastructure.bootstrap import Container
from vms.infrastructure.cli.formatting import customer_lines, voucher_lines

logger = logging.getLogger(__name__)


class Menu(Enum):
    CREATE = ("create", "Create a new voucher.")
    LIST = ("list", "List all vouchers.")
    UPDATE = ("update", "Change a voucher's discount amount.")
    DELETE = ("delete", "Delete a voucher.")
    DISCOUNT = ("discount", "Apply a voucher to a purchase amount.")
    CUSTOMER_CREATE = ("customer-create", "Register a customer.")
    CUSTOMER_LIST = ("customer-list", "List all customers.")
    CUSTOMER_FIND = ("customer-find", "Find a customer by ID or name.")
    CUSTOMER_UPDATE = ("customer-update", "Rename a customer.")
    CUSTOMER_DELETE = ("customer-delete", "Delete a customer by ID or name.")
    HELP = ("help", "Show this menu.")
    EXIT = ("exit", "Exit the program.")

    def __init__(self, command: str, description: str) -> None:
        self.command = command
        self.description = description

    @classmethod
    def from_input(cls, raw: str) -> Menu | None:
        token = raw.strip().lower()
        for item in cls:
            if item.command == token:
                return item
        return None


def menu_text() -> str:
    lines = ["=== Voucher Program ===", "Commands:"]
    for item in Menu:
        lines.append(f"  {item.command:<16} {item.description}")
    return "\n".join(lines)


class Console:
    """Line-oriented input and text output."""

    def print_message(self, message: str = "") -> None:
        click.echo(message)

    def print_lines(self, lines: list[str]) -> None:
        for line in lines:
            click.echo(line)

    def print_error(self, message: str) -> None:
        click.echo(f"Error: {message}")

    def read(self, message: str) -> str:
        return click.prompt(message)

    def read_int(self, message: str) -> int:
        return click.prompt(message, type=int)

    def read_choice(self, message: str, choices: list[str]) -> str:
        return click.prompt(message, type=click.Choice(choices, case_sensitive=False))

    def print_and_get_command(self) -> str:
        return click.prompt("", prompt_suffix="> ")


class MenuDispatcher:

    def __init__(self, console: Console, container: Container) -> None:
        self._console = console
        self._container = container
        self._actions: dict[Menu, Callable[[], None]] = {
            Menu.CREATE: self._create_voucher,
            Menu.LIST: self._list_vouchers,
            Menu.UPDATE: self._update_voucher,
            Menu.DELETE: self._delete_voucher,
            Menu.DISCOUNT: self._apply_voucher,
            Menu.CUSTOMER_CREATE: self._create_customer,
            Menu.CUSTOMER_LIST: self._list_customers,
            Menu.CUSTOMER_FIND: self._find_customer,
            Menu.CUSTOMER_UPDATE: self._update_customer,
            Menu.CUSTOMER_DELETE: self._delete_customer,
            Menu.HELP: self._help,
        }

    def run(self) -> None:
        self._console.print_message(menu_text())
        while True:
            try:
                raw = self._console.print_and_get_command()
            except click.Abort:
                break

            item = Menu.from_input(raw)
            if item is None:
                self._console.print_error(f"Unknown command '{raw.strip()}'. Type help for the menu.")
                continue
            if item is Menu.EXIT:
                break

            if not self.dispatch(item):
                break

        self._console.print_message("Bye.")

    def dispatch(self, item: Menu) -> bool:
        """Run one menu action. Returns False when input ran out."""
        try:
            self._actions[item]()
        except click.Abort:
            return False
        except DomainException as exc:
            self._console.print_error(str(exc))
        except SQLAlchemyError:
            logger.exception("Database failure while running '%s'", item.command)
            self._console.print_error("The database operation failed. Please try again.")
        return True

    # --- Voucher actions ------------------------------------------------------

    def _create_voucher(self) -> None:
        voucher_type = self._console.read_choice(
            "Voucher type", [t.input_value for t in VoucherType]
        )
        amount = self._console.read_int("Discount amount")
        handler = CreateVoucherHandler(self._container.voucher_repo, self._container.factories)
        dto = handler.handle(voucher_type, amount)
        self._console.print_message(f"Voucher {dto.id} created ({dto.description}).")

    def _list_vouchers(self) -> None:
        handler = ListVouchersHandler(self._container.voucher_repo)
        self._console.print_lines(voucher_lines(handler.handle()))

    def _update_voucher(self) -> None:
        voucher_id = self._console.read("Voucher ID")
        amount = self._console.read_int("New discount amount")
        dto = UpdateVoucherHandler(self._container.voucher_repo).handle(voucher_id, amount)
        self._console.print_message(f"Voucher {dto.id} updated to {dto.description}.")

    def _delete_voucher(self) -> None:
        voucher_id = self._console.read("Voucher ID")
        DeleteVoucherHandler(self._container.voucher_repo).handle(voucher_id)
        self._console.print_message(f"Voucher {voucher_id.strip()} deleted.")

    def _apply_voucher(self) -> None:
        voucher_id = self._console.read("Voucher ID")
        amount = self._console.read_int("Purchase amount")
        result = ApplyVoucherHandler(self._container.voucher_repo).handle(voucher_id, amount)
        self._console.print_message(
            f"{result.original_amount} -> {result.discounted_amount} (saved {result.saved})"
        )

    # --- Customer actions -----------------------------------------------------

    def _create_customer(self) -> None:
        name = self._console.read("Customer name")
        dto = CreateCustomerHandler(self._container.customer_repo).handle(name)
        self._console.print_message(f"Customer {dto.id} '{dto.name}' created.")

    def _list_customers(self) -> None:
        handler = ListCustomersHandler(self._container.customer_repo)
        self._console.print_lines(customer_lines(handler.handle()))

    def _find_customer(self) -> None:
        key, value = self._read_customer_key()
        dto = FindCustomerHandler(self._container.customer_repo).handle(**{key: value})
        self._console.print_lines(customer_lines([dto]))

    def _update_customer(self) -> None:
        customer_id = self._console.read("Customer ID")
        name = self._console.read("New name")
        dto = UpdateCustomerHandler(self._container.customer_repo).handle(customer_id, name)
        self._console.print_message(f"Customer {dto.id} renamed to '{dto.name}'.")

    def _delete_customer(self) -> None:
        key, value = self._read_customer_key()
        DeleteCustomerHandler(self._container.customer_repo).handle(**{key: value})
        self._console.print_message("Customer deleted.")

    def _read_customer_key(self) -> tuple[str, str]:
        by = self._console.read_choice("Look up by", ["id", "name"])
        if by.lower() == "id":
            return "customer_id", self._console.read("Customer ID")
        return "name", self._console.read("Customer name")

    def _help(self) -> None:
        self._console.print_message(menu_text())
