"""Application service: Apply Voucher use case.

Computes what a purchase costs after a stored voucher is applied.
Nothing is persisted.
"""

from __future__ import annotations

from vms.application.dto import DiscountResultDTO
from vms.application.identifiers import parse_id
from vms.domain.exceptions import EntityNotFoundError
from vms.domain.repository.voucher_repository import VoucherRepository


class ApplyVoucherHandler:

    def __init__(self, voucher_repo: VoucherRepository) -> None:
        self._voucher_repo = voucher_repo

    def handle(self, voucher_id: str, original_amount: int) -> DiscountResultDTO:
        voucher = self._voucher_repo.find_by_id(parse_id(voucher_id, "voucher"))
        if voucher is None:
            raise EntityNotFoundError(f"Voucher {voucher_id} not found")

        discounted = voucher.discount(original_amount)
        return DiscountResultDTO(
            voucher_id=str(voucher.id),
            original_amount=original_amount,
            discounted_amount=str(discounted),
            saved=str(original_amount - discounted),
        )
