"""Shared metadata / mapper registry for the storefront schema."""

from sqlalchemy import MetaData
from sqlalchemy.orm import registry

from apps.storefront.infrastructure.persistence_postgres.constants import STOREFRONT_SCHEMA

metadata = MetaData(schema=STOREFRONT_SCHEMA)
mapper_registry = registry(metadata=metadata)
