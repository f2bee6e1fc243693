"""PostgreSQL Persistence Layer."""

from apps.storefront.infrastructure.persistence_postgres.registry import mapper_registry
from apps.storefront.infrastructure.persistence_postgres.session import (
    get_async_engine,
    get_async_session,
)

__all__ = ["get_async_session", "get_async_engine", "mapper_registry"]
