"""Brand ORM mapping."""

from __future__ import annotations

from sqlalchemy import BigInteger, Column, DateTime, String, Table, Text, func

from apps.storefront.domain.entities.brand import Brand
from apps.storefront.infrastructure.persistence_postgres.constants import BRANDS_TABLE
from apps.storefront.infrastructure.persistence_postgres.registry import mapper_registry, metadata

brands_table = Table(
    BRANDS_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("name", String(120), nullable=False),
    Column("slug", String(120), nullable=False, unique=True),
    Column("type", String(64), nullable=False, server_default=""),
    Column("description", Text, nullable=False, server_default=""),
    Column("email", String(320), nullable=False, server_default=""),
    Column("website_url", String(500), nullable=False, server_default=""),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)


def start_brand_mapper() -> None:
    mapper_registry.map_imperatively(Brand, brands_table)
