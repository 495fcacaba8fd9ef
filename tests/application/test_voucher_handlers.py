"""Tests for the voucher use cases.

Uses in-memory fake repositories, no database.
"""

from uuid import uuid4

import pytest

from vms.application.apply_voucher import ApplyVoucherHandler
from vms.application.create_voucher import CreateVoucherHandler
from vms.application.delete_voucher import DeleteVoucherHandler
from vms.application.list_vouchers import ListVouchersHandler
from vms.application.show_voucher import ShowVoucherHandler
from vms.application.update_voucher import UpdateVoucherHandler
from vms.domain.exceptions import (
    AmountOutOfBoundError,
    DataModifyingError,
    EntityNotFoundError,
    IllegalDiscountStateError,
    ValidationError,
)
from vms.domain.factory.voucher_factory import default_registry
from vms.domain.model.voucher import FixedAmountVoucher, PercentDiscountVoucher
from tests.fakes import FakeVoucherRepository


def _setup(vouchers=None) -> FakeVoucherRepository:
    return FakeVoucherRepository(vouchers)


class TestCreateVoucher:

    def test_creates_fixed_voucher(self):
        repo = _setup()
        dto = CreateVoucherHandler(repo, default_registry()).handle("fixed", 500)
        assert dto.voucher_type == "FIXED_AMOUNT"
        assert dto.discount_amount == 500
        assert dto.description == "500 off"
        assert len(repo.find_all()) == 1

    def test_creates_percent_voucher(self):
        repo = _setup()
        dto = CreateVoucherHandler(repo, default_registry()).handle("percent", 20)
        assert dto.description == "20% off"
        assert isinstance(repo.find_all()[0], PercentDiscountVoucher)

    def test_out_of_bound_not_persisted(self):
        repo = _setup()
        with pytest.raises(AmountOutOfBoundError):
            CreateVoucherHandler(repo, default_registry()).handle("percent", 150)
        assert repo.find_all() == []

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError, match="Unknown voucher type"):
            CreateVoucherHandler(_setup(), default_registry()).handle("bogus", 10)


class TestQueries:

    def test_list_all(self):
        repo = _setup([FixedAmountVoucher(100), PercentDiscountVoucher(10)])
        assert len(ListVouchersHandler(repo).handle()) == 2

    def test_list_by_type(self):
        repo = _setup([FixedAmountVoucher(100), PercentDiscountVoucher(10)])
        dtos = ListVouchersHandler(repo).handle("percent")
        assert [d.voucher_type for d in dtos] == ["PERCENT_DISCOUNT"]

    def test_show(self):
        voucher = FixedAmountVoucher(100)
        dto = ShowVoucherHandler(_setup([voucher])).handle(str(voucher.id))
        assert dto.id == str(voucher.id)

    def test_show_missing(self):
        with pytest.raises(EntityNotFoundError):
            ShowVoucherHandler(_setup()).handle(str(uuid4()))

    def test_malformed_id_rejected(self):
        with pytest.raises(ValidationError, match="Invalid voucher ID"):
            ShowVoucherHandler(_setup()).handle("not-a-uuid")


class TestUpdateVoucher:

    def test_updates_amount(self):
        voucher = FixedAmountVoucher(100)
        repo = _setup([voucher])
        dto = UpdateVoucherHandler(repo).handle(str(voucher.id), 250)
        assert dto.discount_amount == 250
        assert repo.find_by_id(voucher.id).discount_amount == 250

    def test_out_of_bound_keeps_stored_amount(self):
        voucher = PercentDiscountVoucher(10)
        repo = _setup([voucher])
        with pytest.raises(AmountOutOfBoundError):
            UpdateVoucherHandler(repo).handle(str(voucher.id), 101)
        assert repo.find_by_id(voucher.id).discount_amount == 10

    def test_missing_voucher(self):
        with pytest.raises(EntityNotFoundError):
            UpdateVoucherHandler(_setup()).handle(str(uuid4()), 10)


class TestDeleteVoucher:

    def test_deletes(self):
        voucher = FixedAmountVoucher(100)
        repo = _setup([voucher])
        DeleteVoucherHandler(repo).handle(str(voucher.id))
        assert repo.find_all() == []

    def test_missing_voucher_is_data_modifying_error(self):
        repo = _setup([FixedAmountVoucher(100)])
        with pytest.raises(DataModifyingError):
            DeleteVoucherHandler(repo).handle(str(uuid4()))
        assert len(repo.find_all()) == 1


class TestApplyVoucher:

    def test_fixed_discount(self):
        voucher = FixedAmountVoucher(300)
        result = ApplyVoucherHandler(_setup([voucher])).handle(str(voucher.id), 1000)
        assert result.discounted_amount == "700"
        assert result.saved == "300"

    def test_percent_discount(self):
        voucher = PercentDiscountVoucher(15)
        result = ApplyVoucherHandler(_setup([voucher])).handle(str(voucher.id), 999)
        assert result.discounted_amount == "849"
        assert result.saved == "150"

    def test_insufficient_amount(self):
        voucher = FixedAmountVoucher(500)
        with pytest.raises(IllegalDiscountStateError):
            ApplyVoucherHandler(_setup([voucher])).handle(str(voucher.id), 300)
