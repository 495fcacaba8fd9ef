"""SQLAlchemy engine and table definitions.

Every repository call borrows one pooled connection for the duration of
a single statement (``engine.begin()`` / ``engine.connect()``) and gives
it back on every exit path.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("customer_id", String(36), primary_key=True),
    Column("name", String(64), nullable=False, unique=True),
    Column("created_at", DateTime, nullable=False),
)

vouchers = Table(
    "vouchers",
    metadata,
    Column("voucher_id", String(36), primary_key=True),
    Column("discount_amount", Integer, nullable=False),
    Column("voucher_type", String(32), nullable=False),
)


def get_engine_kwargs(database_url: str) -> dict:
    """Pool and driver arguments for the given backend."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True}

    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        # One shared connection, otherwise every checkout sees a fresh empty DB.
        kwargs["poolclass"] = StaticPool
    else:
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return kwargs


def create_database_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine and make sure the schema exists."""
    engine = create_engine(database_url, echo=echo, **get_engine_kwargs(database_url))
    metadata.create_all(engine)
    logger.info(
        "Using database: %s",
        make_url(database_url).render_as_string(hide_password=True),
    )
    return engine
