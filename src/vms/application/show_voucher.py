"""Application service: Show Voucher use case (query)."""

from __future__ import annotations

from vms.application.dto import VoucherDTO, voucher_to_dto
from vms.application.identifiers import parse_id
from vms.domain.exceptions import EntityNotFoundError
from vms.domain.repository.voucher_repository import VoucherRepository


class ShowVoucherHandler:

    def __init__(self, voucher_repo: VoucherRepository) -> None:
        self._voucher_repo = voucher_repo

    def handle(self, voucher_id: str) -> VoucherDTO:
        voucher = self._voucher_repo.find_by_id(parse_id(voucher_id, "voucher"))
        if voucher is None:
            raise EntityNotFoundError(f"Voucher {voucher_id} not found")
        return voucher_to_dto(voucher)
