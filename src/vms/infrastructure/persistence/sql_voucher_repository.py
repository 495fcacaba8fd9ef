"""SQL-backed implementation of VoucherRepository.

Rows are turned back into the right variant through the factory
registry, so adding a voucher type never touches this module.
"""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import IntegrityError

from vms.domain.exceptions import DataModifyingError, PersistenceError
from vms.domain.factory.voucher_factory import VoucherFactoryRegistry
from vms.domain.model.voucher import Voucher
from vms.domain.model.voucher_type import VoucherType
from vms.domain.repository.voucher_repository import VoucherRepository
from vms.infrastructure.persistence.database import vouchers

logger = logging.getLogger(__name__)


class SqlVoucherRepository(VoucherRepository):

    def __init__(self, engine: Engine, factories: VoucherFactoryRegistry) -> None:
        self._engine = engine
        self._factories = factories

    # --- VoucherRepository interface ------------------------------------------

    def save(self, voucher: Voucher) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(insert(vouchers).values(**self._to_row(voucher)))
        except IntegrityError as exc:
            raise PersistenceError(
                f"Voucher {voucher.id} could not be saved: the id already exists"
            ) from exc
        logger.info("Saved %s voucher %s", voucher.voucher_type.value, voucher.id)

    def find_by_id(self, voucher_id: UUID) -> Voucher | None:
        stmt = select(vouchers).where(vouchers.c.voucher_id == str(voucher_id))
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return self._to_domain(row) if row is not None else None

    def find_all(self) -> list[Voucher]:
        return self._find_many(select(vouchers))

    def find_by_type(self, voucher_type: VoucherType) -> list[Voucher]:
        return self._find_many(
            select(vouchers).where(vouchers.c.voucher_type == voucher_type.value)
        )

    def update(self, voucher: Voucher) -> None:
        stmt = (
            update(vouchers)
            .where(vouchers.c.voucher_id == str(voucher.id))
            .values(
                discount_amount=voucher.discount_amount,
                voucher_type=voucher.voucher_type.value,
            )
        )
        if self._execute(stmt) == 0:
            raise DataModifyingError(f"No voucher with ID {voucher.id} to update")
        logger.info("Updated voucher %s", voucher.id)

    def delete(self, voucher_id: UUID) -> None:
        stmt = delete(vouchers).where(vouchers.c.voucher_id == str(voucher_id))
        if self._execute(stmt) == 0:
            raise DataModifyingError(f"No voucher with ID {voucher_id} to delete")
        logger.info("Deleted voucher %s", voucher_id)

    def delete_all(self) -> int:
        affected = self._execute(delete(vouchers))
        logger.info("Deleted %d voucher(s)", affected)
        return affected

    # --- Statement helpers ----------------------------------------------------

    def _find_many(self, stmt) -> list[Voucher]:
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [self._to_domain(row) for row in rows]

    def _execute(self, stmt) -> int:
        """Run a data-modifying statement and return the affected-row count."""
        with self._engine.begin() as conn:
            return conn.execute(stmt).rowcount

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(voucher: Voucher) -> dict:
        return {
            "voucher_id": str(voucher.id),
            "discount_amount": voucher.discount_amount,
            "voucher_type": voucher.voucher_type.value,
        }

    def _to_domain(self, row: RowMapping) -> Voucher:
        try:
            voucher_type = VoucherType(row["voucher_type"])
        except ValueError as exc:
            raise PersistenceError(
                f"Voucher {row['voucher_id']} has unknown type {row['voucher_type']!r}"
            ) from exc
        return self._factories.create(
            voucher_type,
            row["discount_amount"],
            UUID(row["voucher_id"]),
        )
