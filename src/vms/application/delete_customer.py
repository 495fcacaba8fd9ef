"""Application service: Delete Customer use case."""

from __future__ import annotations

from vms.application.identifiers import parse_id
from vms.domain.exceptions import ValidationError
from vms.domain.repository.customer_repository import CustomerRepository


class DeleteCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str | None = None, name: str | None = None) -> None:
        """Delete by ID or by name.

        The repository raises DataModifyingError when nothing matched.
        """
        if customer_id:
            self._customer_repo.delete(parse_id(customer_id, "customer"))
        elif name:
            self._customer_repo.delete_by_name(name.strip())
        else:
            raise ValidationError("Give a customer ID or name")
