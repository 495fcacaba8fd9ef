"""Application service: Create Customer use case."""

from __future__ import annotations

from vms.application.dto import CustomerDTO, customer_to_dto
from vms.domain.exceptions import ValidationError
from vms.domain.model.customer import Customer
from vms.domain.repository.customer_repository import CustomerRepository


class CreateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, name: str) -> CustomerDTO:
        """Register a new customer. Names must be unique."""
        customer = Customer.create(name)

        if self._customer_repo.find_by_name(customer.name) is not None:
            raise ValidationError(f"Customer '{customer.name}' already exists")

        self._customer_repo.save(customer)
        return customer_to_dto(customer)
