"""Voucher factories and the registry that selects one by type.

The registry is a plain mapping filled by the composition root and
handed to whoever needs to build vouchers (handlers, the SQL
repository when it reconstitutes rows).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from vms.domain.exceptions import ValidationError
from vms.domain.model.voucher import FixedAmountVoucher, PercentDiscountVoucher, Voucher
from vms.domain.model.voucher_type import VoucherType


class VoucherFactory(ABC):

    @property
    @abstractmethod
    def voucher_type(self) -> VoucherType:
        """The type this factory builds."""

    @abstractmethod
    def create_voucher(self, discount_amount: int, voucher_id: UUID | None = None) -> Voucher:
        """Build a validated voucher; a new id is generated when none is given."""


class FixedAmountVoucherFactory(VoucherFactory):

    @property
    def voucher_type(self) -> VoucherType:
        return VoucherType.FIXED_AMOUNT

    def create_voucher(self, discount_amount: int, voucher_id: UUID | None = None) -> Voucher:
        if voucher_id is None:
            return FixedAmountVoucher(discount_amount)
        return FixedAmountVoucher(discount_amount, voucher_id)


class PercentDiscountVoucherFactory(VoucherFactory):

    @property
    def voucher_type(self) -> VoucherType:
        return VoucherType.PERCENT_DISCOUNT

    def create_voucher(self, discount_amount: int, voucher_id: UUID | None = None) -> Voucher:
        if voucher_id is None:
            return PercentDiscountVoucher(discount_amount)
        return PercentDiscountVoucher(discount_amount, voucher_id)


class VoucherFactoryRegistry:

    def __init__(self, factories: list[VoucherFactory] | None = None) -> None:
        self._factories: dict[VoucherType, VoucherFactory] = {}
        for factory in factories or []:
            self.register(factory)

    def register(self, factory: VoucherFactory) -> None:
        if factory.voucher_type in self._factories:
            raise ValueError(f"A factory for {factory.voucher_type.value} is already registered")
        self._factories[factory.voucher_type] = factory

    def get(self, voucher_type: VoucherType) -> VoucherFactory:
        factory = self._factories.get(voucher_type)
        if factory is None:
            raise ValidationError(f"No voucher factory registered for {voucher_type.value}")
        return factory

    def create(
        self,
        voucher_type: VoucherType,
        discount_amount: int,
        voucher_id: UUID | None = None,
    ) -> Voucher:
        return self.get(voucher_type).create_voucher(discount_amount, voucher_id)

    @property
    def types(self) -> list[VoucherType]:
        return list(self._factories)


def default_registry() -> VoucherFactoryRegistry:
    """A registry with one factory per built-in voucher type."""
    return VoucherFactoryRegistry(
        [FixedAmountVoucherFactory(), PercentDiscountVoucherFactory()]
    )
