"""Abstract repository for the Customer entity.

Defined in the domain layer so the domain never depends on
infrastructure.  The SQL implementation lives in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from vms.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Insert a new customer. Raises PersistenceError on a duplicate id or name."""

    @abstractmethod
    def find_by_id(self, customer_id: UUID) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def find_by_name(self, name: str) -> Customer | None:
        """Return a customer by its exact name, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Customer]:
        """Return every customer, oldest first."""

    @abstractmethod
    def update(self, customer: Customer) -> None:
        """Overwrite the stored row. Raises DataModifyingError if it does not exist."""

    @abstractmethod
    def delete(self, customer_id: UUID) -> None:
        """Delete by ID. Raises DataModifyingError if nothing was deleted."""

    @abstractmethod
    def delete_by_name(self, name: str) -> None:
        """Delete by name. Raises DataModifyingError if nothing was deleted."""

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every customer and return how many were removed."""
