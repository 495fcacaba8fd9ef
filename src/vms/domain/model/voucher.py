"""Voucher variants: discount rules that validate their own amount.

Every variant shares the same contract (``validate``, ``discount``,
``update``) and declares its own amount bound.  The arithmetic lives in
each variant; the base class only owns identity and the bound check.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar
from uuid import UUID, uuid4

from vms.domain.exceptions import (
    AmountOutOfBoundError,
    IllegalDiscountStateError,
    ValidationError,
)
from vms.domain.model.voucher_type import VoucherType

logger = logging.getLogger(__name__)


@dataclass
class Voucher(ABC):
    """Abstract discount rule.

    Invariant: ``discount_amount`` is always within
    ``[MIN_AMOUNT, MAX_AMOUNT]`` of the concrete variant.
    """

    discount_amount: int
    id: UUID = field(default_factory=uuid4)

    voucher_type: ClassVar[VoucherType]
    MIN_AMOUNT: ClassVar[int] = 1
    MAX_AMOUNT: ClassVar[int]

    def __post_init__(self) -> None:
        self.validate(self.discount_amount)

    def validate(self, amount: int) -> None:
        """Raise AmountOutOfBoundError unless *amount* fits this variant."""
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValidationError(
                f"Discount amount must be an integer, got {type(amount).__name__}"
            )
        if amount < self.MIN_AMOUNT or amount > self.MAX_AMOUNT:
            logger.warning(
                "Rejected %s amount %d (bound %d..%d)",
                type(self).__name__,
                amount,
                self.MIN_AMOUNT,
                self.MAX_AMOUNT,
            )
            raise AmountOutOfBoundError(
                type(self).__name__, amount, self.MIN_AMOUNT, self.MAX_AMOUNT
            )

    def update(self, amount: int) -> None:
        """Replace the discount amount; the old value survives a failed check."""
        self.validate(amount)
        self.discount_amount = amount

    @abstractmethod
    def discount(self, original_amount: int) -> Decimal:
        """Return what remains of *original_amount* after the discount."""

    @staticmethod
    def _check_original(original_amount: int) -> int:
        if isinstance(original_amount, bool) or not isinstance(original_amount, int):
            raise ValidationError(
                f"Original amount must be an integer, got {type(original_amount).__name__}"
            )
        return original_amount


@dataclass(eq=True)
class FixedAmountVoucher(Voucher):
    """Subtracts a flat amount."""

    voucher_type: ClassVar[VoucherType] = VoucherType.FIXED_AMOUNT
    MAX_AMOUNT: ClassVar[int] = 10000

    def discount(self, original_amount: int) -> Decimal:
        result = self._check_original(original_amount) - self.discount_amount
        if result < 0:
            raise IllegalDiscountStateError(
                f"Cannot apply a {self.discount_amount} discount to {original_amount}: "
                f"the amount would become negative"
            )
        return Decimal(result)


@dataclass(eq=True)
class PercentDiscountVoucher(Voucher):
    """Takes a percentage off; the result is rounded down to a whole unit."""

    voucher_type: ClassVar[VoucherType] = VoucherType.PERCENT_DISCOUNT
    MAX_AMOUNT: ClassVar[int] = 100

    def discount(self, original_amount: int) -> Decimal:
        original = self._check_original(original_amount)
        if original < 0:
            raise IllegalDiscountStateError(
                f"Cannot apply a discount to a negative amount ({original_amount})"
            )
        # Exact integer floor, independent of the Decimal context precision.
        return Decimal(original * (100 - self.discount_amount) // 100)
