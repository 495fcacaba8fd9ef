"""Application service: Update Customer use case."""

from __future__ import annotations

from vms.application.dto import CustomerDTO, customer_to_dto
from vms.application.identifiers import parse_id
from vms.domain.exceptions import EntityNotFoundError, ValidationError
from vms.domain.repository.customer_repository import CustomerRepository


class UpdateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, new_name: str) -> CustomerDTO:
        """Rename a customer. ID and creation time never change."""
        customer = self._customer_repo.find_by_id(parse_id(customer_id, "customer"))
        if customer is None:
            raise EntityNotFoundError(f"Customer with ID {customer_id} not found")

        holder = self._customer_repo.find_by_name((new_name or "").strip())
        if holder is not None and holder.id != customer.id:
            raise ValidationError(f"Customer '{holder.name}' already exists")

        customer.update(new_name)
        self._customer_repo.update(customer)
        return customer_to_dto(customer)
