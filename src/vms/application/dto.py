"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/console and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from vms.domain.model.customer import Customer
from vms.domain.model.voucher import Voucher
from vms.domain.model.voucher_type import VoucherType


@dataclass(frozen=True)
class VoucherDTO:
    id: str
    voucher_type: str
    discount_amount: int
    description: str  # e.g. "500 off" or "20% off"


@dataclass(frozen=True)
class DiscountResultDTO:
    voucher_id: str
    original_amount: int
    discounted_amount: str
    saved: str


@dataclass(frozen=True)
class CustomerDTO:
    id: str
    name: str
    created_at: str


def voucher_to_dto(voucher: Voucher) -> VoucherDTO:
    if voucher.voucher_type is VoucherType.PERCENT_DISCOUNT:
        description = f"{voucher.discount_amount}% off"
    else:
        description = f"{voucher.discount_amount} off"
    return VoucherDTO(
        id=str(voucher.id),
        voucher_type=voucher.voucher_type.value,
        discount_amount=voucher.discount_amount,
        description=description,
    )


def customer_to_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        id=str(customer.id),
        name=customer.name,
        created_at=customer.created_at.strftime("%Y-%m-%d %H:%M:%S UTC"),
    )
