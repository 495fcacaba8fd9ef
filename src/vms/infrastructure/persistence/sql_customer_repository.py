"""SQL-backed implementation of CustomerRepository."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import IntegrityError

from vms.domain.exceptions import DataModifyingError, PersistenceError
from vms.domain.model.customer import Customer
from vms.domain.repository.customer_repository import CustomerRepository
from vms.infrastructure.persistence.database import customers

logger = logging.getLogger(__name__)


class SqlCustomerRepository(CustomerRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # --- CustomerRepository interface -----------------------------------------

    def save(self, customer: Customer) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(insert(customers).values(**self._to_row(customer)))
        except IntegrityError as exc:
            raise PersistenceError(
                f"Customer '{customer.name}' ({customer.id}) could not be saved: "
                f"the id or name is already taken"
            ) from exc
        logger.info("Saved customer %s", customer.id)

    def find_by_id(self, customer_id: UUID) -> Customer | None:
        return self._find_one(customers.c.customer_id == str(customer_id))

    def find_by_name(self, name: str) -> Customer | None:
        return self._find_one(customers.c.name == name)

    def find_all(self) -> list[Customer]:
        stmt = select(customers).order_by(customers.c.created_at, customers.c.name)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [self._to_domain(row) for row in rows]

    def update(self, customer: Customer) -> None:
        stmt = (
            update(customers)
            .where(customers.c.customer_id == str(customer.id))
            .values(name=customer.name)
        )
        try:
            with self._engine.begin() as conn:
                affected = conn.execute(stmt).rowcount
        except IntegrityError as exc:
            raise PersistenceError(
                f"Customer {customer.id} could not be renamed: "
                f"'{customer.name}' is already taken"
            ) from exc
        if affected == 0:
            raise DataModifyingError(f"No customer with ID {customer.id} to update")
        logger.info("Updated customer %s", customer.id)

    def delete(self, customer_id: UUID) -> None:
        stmt = delete(customers).where(customers.c.customer_id == str(customer_id))
        if self._execute(stmt) == 0:
            raise DataModifyingError(f"No customer with ID {customer_id} to delete")
        logger.info("Deleted customer %s", customer_id)

    def delete_by_name(self, name: str) -> None:
        stmt = delete(customers).where(customers.c.name == name)
        if self._execute(stmt) == 0:
            raise DataModifyingError(f"No customer named '{name}' to delete")
        logger.info("Deleted customer named '%s'", name)

    def delete_all(self) -> int:
        affected = self._execute(delete(customers))
        logger.info("Deleted %d customer(s)", affected)
        return affected

    # --- Statement helpers ----------------------------------------------------

    def _find_one(self, condition) -> Customer | None:
        with self._engine.connect() as conn:
            row = conn.execute(select(customers).where(condition)).mappings().first()
        return self._to_domain(row) if row is not None else None

    def _execute(self, stmt) -> int:
        """Run a data-modifying statement and return the affected-row count."""
        with self._engine.begin() as conn:
            return conn.execute(stmt).rowcount

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(customer: Customer) -> dict:
        created_at = customer.created_at
        if created_at.tzinfo is not None:
            created_at = created_at.astimezone(timezone.utc).replace(tzinfo=None)
        return {
            "customer_id": str(customer.id),
            "name": customer.name,
            "created_at": created_at,
        }

    @staticmethod
    def _to_domain(row: RowMapping) -> Customer:
        created_at: datetime = row["created_at"]
        return Customer(
            id=UUID(row["customer_id"]),
            name=row["name"],
            created_at=created_at.replace(tzinfo=timezone.utc),
        )
