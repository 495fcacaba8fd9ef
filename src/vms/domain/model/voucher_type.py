"""Voucher type tags."""

from __future__ import annotations

from enum import Enum

from vms.domain.exceptions import ValidationError


class VoucherType(Enum):
    FIXED_AMOUNT = "FIXED_AMOUNT"
    PERCENT_DISCOUNT = "PERCENT_DISCOUNT"

    @property
    def input_value(self) -> str:
        """Token the user types at the console to pick this type."""
        return _INPUT_VALUES[self]

    @classmethod
    def from_input(cls, raw: str) -> VoucherType:
        token = (raw or "").strip().lower()
        for member in cls:
            if token in (member.input_value, member.value.lower()):
                return member
        choices = ", ".join(m.input_value for m in cls)
        raise ValidationError(f"Unknown voucher type '{raw}' (choose one of: {choices})")


_INPUT_VALUES = {
    VoucherType.FIXED_AMOUNT: "fixed",
    VoucherType.PERCENT_DISCOUNT: "percent",
}
