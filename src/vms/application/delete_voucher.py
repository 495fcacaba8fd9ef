"""Application service: Delete Voucher use case."""

from __future__ import annotations

from vms.application.identifiers import parse_id
from vms.domain.repository.voucher_repository import VoucherRepository


class DeleteVoucherHandler:

    def __init__(self, voucher_repo: VoucherRepository) -> None:
        self._voucher_repo = voucher_repo

    def handle(self, voucher_id: str) -> None:
        # The repository raises DataModifyingError when nothing matched.
        self._voucher_repo.delete(parse_id(voucher_id, "voucher"))
