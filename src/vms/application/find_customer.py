"""Application service: Find Customer use case (query)."""

from __future__ import annotations

from vms.application.dto import CustomerDTO, customer_to_dto
from vms.application.identifiers import parse_id
from vms.domain.exceptions import EntityNotFoundError, ValidationError
from vms.domain.repository.customer_repository import CustomerRepository


class FindCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        customer_id: str | None = None,
        name: str | None = None,
    ) -> CustomerDTO:
        """Look a customer up by ID or, failing that, by exact name."""
        if customer_id:
            customer = self._customer_repo.find_by_id(parse_id(customer_id, "customer"))
            label = f"ID {customer_id}"
        elif name:
            customer = self._customer_repo.find_by_name(name.strip())
            label = f"name '{name.strip()}'"
        else:
            raise ValidationError("Give a customer ID or name")

        if customer is None:
            raise EntityNotFoundError(f"Customer with {label} not found")
        return customer_to_dto(customer)
