"""Abstract repository for Voucher variants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from vms.domain.model.voucher import Voucher
from vms.domain.model.voucher_type import VoucherType


class VoucherRepository(ABC):

    @abstractmethod
    def save(self, voucher: Voucher) -> None:
        """Insert a new voucher. Raises PersistenceError on a duplicate id."""

    @abstractmethod
    def find_by_id(self, voucher_id: UUID) -> Voucher | None:
        """Return a voucher by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Voucher]:
        """Return every voucher."""

    @abstractmethod
    def find_by_type(self, voucher_type: VoucherType) -> list[Voucher]:
        """Return every voucher of the given type."""

    @abstractmethod
    def update(self, voucher: Voucher) -> None:
        """Overwrite the stored row. Raises DataModifyingError if it does not exist."""

    @abstractmethod
    def delete(self, voucher_id: UUID) -> None:
        """Delete by ID. Raises DataModifyingError if nothing was deleted."""

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every voucher and return how many were removed."""
