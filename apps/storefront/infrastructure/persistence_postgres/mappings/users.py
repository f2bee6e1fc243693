"""User ORM mapping - Imperative mapping for storefront.users table."""

from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, Column, DateTime, Integer, String, Table, func

from apps.storefront.domain.entities.user import User
from apps.storefront.infrastructure.persistence_postgres.constants import USERS_TABLE
from apps.storefront.infrastructure.persistence_postgres.registry import mapper_registry, metadata

users_table = Table(
    USERS_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("first_name", String(120), nullable=False, server_default=""),
    Column("last_name", String(120), nullable=False, server_default=""),
    Column("username", String(120), nullable=False, unique=True),
    Column("email", String(320), nullable=False, unique=True, index=True),
    Column("password", String(255), nullable=False),
    Column("role", String(16), nullable=False, server_default="user"),
    Column("gender", String(16), nullable=True),
    Column("locale", String(8), nullable=False, server_default="en"),
    Column("avatar_url", String(500), nullable=True),
    Column("avatar_public_id", String(255), nullable=True),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column("email_verified", Boolean, nullable=False, server_default="false"),
    Column("failed_attempts", Integer, nullable=False, server_default="0"),
    Column("last_login_at", DateTime(timezone=True), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("deleted_at", DateTime(timezone=True), nullable=True),
)


def start_user_mapper() -> None:
    """User 엔티티를 storefront.users 테이블에 매핑합니다."""
    mapper_registry.map_imperatively(User, users_table)
