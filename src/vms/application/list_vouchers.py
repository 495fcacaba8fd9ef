"""Application service: List Vouchers use case (query)."""

from __future__ import annotations

from vms.application.dto import VoucherDTO, voucher_to_dto
from vms.domain.model.voucher_type import VoucherType
from vms.domain.repository.voucher_repository import VoucherRepository


class ListVouchersHandler:

    def __init__(self, voucher_repo: VoucherRepository) -> None:
        self._voucher_repo = voucher_repo

    def handle(self, voucher_type: str | None = None) -> list[VoucherDTO]:
        if voucher_type:
            vouchers = self._voucher_repo.find_by_type(VoucherType.from_input(voucher_type))
        else:
            vouchers = self._voucher_repo.find_all()
        return [voucher_to_dto(v) for v in vouchers]
