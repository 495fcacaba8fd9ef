"""Shared fixtures: an in-memory SQLite engine and the repositories on top of it."""

import pytest

from vms.domain.factory.voucher_factory import default_registry
from vms.infrastructure.bootstrap import Container
from vms.infrastructure.persistence.database import create_database_engine
from vms.infrastructure.persistence.sql_customer_repository import SqlCustomerRepository
from vms.infrastructure.persistence.sql_voucher_repository import SqlVoucherRepository


@pytest.fixture
def engine():
    engine = create_database_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def factories():
    return default_registry()


@pytest.fixture
def customer_repo(engine):
    return SqlCustomerRepository(engine)


@pytest.fixture
def voucher_repo(engine, factories):
    return SqlVoucherRepository(engine, factories)


@pytest.fixture
def container(engine, factories, customer_repo, voucher_repo):
    return Container(
        engine=engine,
        factories=factories,
        customer_repo=customer_repo,
        voucher_repo=voucher_repo,
    )
