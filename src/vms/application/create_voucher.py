"""Application service: Create Voucher use case."""

from __future__ import annotations

from vms.application.dto import VoucherDTO, voucher_to_dto
from vms.domain.factory.voucher_factory import VoucherFactoryRegistry
from vms.domain.model.voucher_type import VoucherType
from vms.domain.repository.voucher_repository import VoucherRepository


class CreateVoucherHandler:

    def __init__(
        self,
        voucher_repo: VoucherRepository,
        factories: VoucherFactoryRegistry,
    ) -> None:
        self._voucher_repo = voucher_repo
        self._factories = factories

    def handle(self, voucher_type: str, discount_amount: int) -> VoucherDTO:
        """Issue a new voucher of the given type (``fixed`` or ``percent``)."""
        vtype = VoucherType.from_input(voucher_type)
        voucher = self._factories.create(vtype, discount_amount)
        self._voucher_repo.save(voucher)
        return voucher_to_dto(voucher)
