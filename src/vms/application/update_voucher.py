"""Application service: Update Voucher use case."""

from __future__ import annotations

from vms.application.dto import VoucherDTO, voucher_to_dto
from vms.application.identifiers import parse_id
from vms.domain.exceptions import EntityNotFoundError
from vms.domain.repository.voucher_repository import VoucherRepository


class UpdateVoucherHandler:

    def __init__(self, voucher_repo: VoucherRepository) -> None:
        self._voucher_repo = voucher_repo

    def handle(self, voucher_id: str, discount_amount: int) -> VoucherDTO:
        """Change a voucher's discount amount.

        The new amount is validated against the voucher's own bound
        before anything is written.
        """
        voucher = self._voucher_repo.find_by_id(parse_id(voucher_id, "voucher"))
        if voucher is None:
            raise EntityNotFoundError(f"Voucher {voucher_id} not found")

        voucher.update(discount_amount)
        self._voucher_repo.update(voucher)
        return voucher_to_dto(voucher)
