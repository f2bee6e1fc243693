"""Address ORM mapping."""

from __future__ import annotations

from sqlalchemy import BigInteger, Column, DateTime, Float, ForeignKey, String, Table, func

from apps.storefront.domain.entities.address import Address
from apps.storefront.infrastructure.persistence_postgres.constants import (
    ADDRESSES_TABLE,
    STOREFRONT_SCHEMA,
    USERS_TABLE,
)
from apps.storefront.infrastructure.persistence_postgres.registry import mapper_registry, metadata

addresses_table = Table(
    ADDRESSES_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        BigInteger,
        ForeignKey(f"{STOREFRONT_SCHEMA}.{USERS_TABLE}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("line_1", String(255), nullable=False),
    Column("line_2", String(255), nullable=True),
    Column("city", String(120), nullable=False),
    Column("country", String(120), nullable=False),
    Column("state", String(120), nullable=True),
    Column("zip", String(32), nullable=False),
    Column("latitude", Float, nullable=True),
    Column("longitude", Float, nullable=True),
    Column("phone", String(32), nullable=True),
    Column("address_type", String(32), nullable=False, server_default="physical"),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("deleted_at", DateTime(timezone=True), nullable=True),
)


def start_address_mapper() -> None:
    mapper_registry.map_imperatively(Address, addresses_table)
