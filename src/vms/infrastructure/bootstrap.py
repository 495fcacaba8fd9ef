"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.engine import Engine

from vms.domain.factory.voucher_factory import VoucherFactoryRegistry, default_registry
from vms.domain.repository.customer_repository import CustomerRepository
from vms.domain.repository.voucher_repository import VoucherRepository
from vms.infrastructure.config import Settings, get_settings
from vms.infrastructure.persistence.database import create_database_engine
from vms.infrastructure.persistence.sql_customer_repository import SqlCustomerRepository
from vms.infrastructure.persistence.sql_voucher_repository import SqlVoucherRepository


@dataclass
class Container:
    engine: Engine
    factories: VoucherFactoryRegistry
    customer_repo: CustomerRepository
    voucher_repo: VoucherRepository


def build_container(
    settings: Settings | None = None,
    database_url: str | None = None,
) -> Container:
    """Build the engine, the factory registry and both repositories.

    ``database_url`` overrides whatever the settings say.
    """
    settings = settings or get_settings()
    engine = create_database_engine(
        database_url or settings.database_url, echo=settings.echo_sql
    )
    factories = default_registry()
    return Container(
        engine=engine,
        factories=factories,
        customer_repo=SqlCustomerRepository(engine),
        voucher_repo=SqlVoucherRepository(engine, factories),
    )
