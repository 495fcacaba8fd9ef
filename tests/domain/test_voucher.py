"""Unit tests for the voucher variants."""

from decimal import Decimal
from uuid import uuid4

import pytest

from vms.domain.exceptions import (
    AmountOutOfBoundError,
    IllegalDiscountStateError,
    ValidationError,
)
from vms.domain.model.voucher import FixedAmountVoucher, PercentDiscountVoucher, Voucher
from vms.domain.model.voucher_type import VoucherType


# ── FixedAmountVoucher ───────────────────────────────────────────────────────


class TestFixedAmountVoucher:

    def test_creation(self):
        v = FixedAmountVoucher(500)
        assert v.discount_amount == 500
        assert v.voucher_type is VoucherType.FIXED_AMOUNT
        assert v.id is not None

    def test_keeps_given_id(self):
        voucher_id = uuid4()
        assert FixedAmountVoucher(500, voucher_id).id == voucher_id

    @pytest.mark.parametrize("amount", [1, 2, 5000, 9999, 10000])
    def test_amount_within_bound_accepted(self, amount):
        assert FixedAmountVoucher(amount).discount_amount == amount

    @pytest.mark.parametrize("amount", [-1, 0, 10001, 15000])
    def test_amount_out_of_bound_rejected(self, amount):
        with pytest.raises(AmountOutOfBoundError) as excinfo:
            FixedAmountVoucher(amount)
        err = excinfo.value
        assert err.class_name == "FixedAmountVoucher"
        assert err.amount == amount
        assert (err.min_amount, err.max_amount) == (1, 10000)

    def test_out_of_bound_is_a_validation_error(self):
        with pytest.raises(ValidationError, match="out of bound"):
            FixedAmountVoucher(15000)

    def test_non_integer_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            FixedAmountVoucher("500")

    def test_discount_subtracts_fixed_amount(self):
        assert FixedAmountVoucher(300).discount(1000) == Decimal("700")

    def test_discount_to_exactly_zero(self):
        assert FixedAmountVoucher(500).discount(500) == Decimal("0")

    def test_discount_going_negative_rejected(self):
        with pytest.raises(IllegalDiscountStateError, match="negative"):
            FixedAmountVoucher(500).discount(300)

    def test_discount_is_exact_for_large_amounts(self):
        assert FixedAmountVoucher(1).discount(10**30 + 7) == Decimal(10**30 + 6)

    def test_update_replaces_amount(self):
        v = FixedAmountVoucher(500)
        v.update(800)
        assert v.discount_amount == 800

    def test_failed_update_keeps_old_amount(self):
        v = FixedAmountVoucher(500)
        with pytest.raises(AmountOutOfBoundError):
            v.update(20000)
        assert v.discount_amount == 500


# ── PercentDiscountVoucher ───────────────────────────────────────────────────


class TestPercentDiscountVoucher:

    def test_creation(self):
        v = PercentDiscountVoucher(20)
        assert v.discount_amount == 20
        assert v.voucher_type is VoucherType.PERCENT_DISCOUNT

    @pytest.mark.parametrize("amount", [0, 101, 500])
    def test_amount_out_of_bound_rejected(self, amount):
        with pytest.raises(AmountOutOfBoundError) as excinfo:
            PercentDiscountVoucher(amount)
        assert excinfo.value.class_name == "PercentDiscountVoucher"
        assert excinfo.value.max_amount == 100

    def test_discount_applies_percentage(self):
        assert PercentDiscountVoucher(20).discount(1000) == Decimal("800")

    def test_discount_rounds_down(self):
        # 999 * 0.85 = 849.15
        assert PercentDiscountVoucher(15).discount(999) == Decimal("849")

    def test_rounds_down_exactly_for_large_amounts(self):
        # (10**29 + 99) * 0.99 = 99000000000000000000000000098.01
        result = PercentDiscountVoucher(1).discount(10**29 + 99)
        assert result == Decimal(99000000000000000000000000098)

    def test_full_discount(self):
        assert PercentDiscountVoucher(100).discount(1234) == Decimal("0")

    def test_negative_original_rejected(self):
        with pytest.raises(IllegalDiscountStateError):
            PercentDiscountVoucher(10).discount(-1)

    def test_failed_update_keeps_old_amount(self):
        v = PercentDiscountVoucher(10)
        with pytest.raises(AmountOutOfBoundError):
            v.update(101)
        assert v.discount_amount == 10


# ── Shared contract ──────────────────────────────────────────────────────────


class TestVoucherContract:

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            Voucher(10)

    def test_structural_equality(self):
        voucher_id = uuid4()
        assert FixedAmountVoucher(100, voucher_id) == FixedAmountVoucher(100, voucher_id)
        assert FixedAmountVoucher(100, voucher_id) != FixedAmountVoucher(200, voucher_id)

    def test_variants_with_same_fields_are_not_equal(self):
        voucher_id = uuid4()
        assert FixedAmountVoucher(50, voucher_id) != PercentDiscountVoucher(50, voucher_id)

    def test_original_amount_must_be_integer(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            FixedAmountVoucher(10).discount(10.5)


class TestVoucherType:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("fixed", VoucherType.FIXED_AMOUNT),
            (" PERCENT ", VoucherType.PERCENT_DISCOUNT),
            ("fixed_amount", VoucherType.FIXED_AMOUNT),
        ],
    )
    def test_from_input(self, raw, expected):
        assert VoucherType.from_input(raw) is expected

    def test_unknown_token_rejected(self):
        with pytest.raises(ValidationError, match="Unknown voucher type"):
            VoucherType.from_input("bogus")
