"""SQLAlchemy ORM mappings."""

from apps.storefront.infrastructure.persistence_postgres.mappings.addresses import (
    addresses_table,
    start_address_mapper,
)
from apps.storefront.infrastructure.persistence_postgres.mappings.brands import (
    brands_table,
    start_brand_mapper,
)
from apps.storefront.infrastructure.persistence_postgres.mappings.products import (
    product_images_table,
    product_reviews_table,
    product_tags_table,
    products_table,
    start_product_mappers,
)
from apps.storefront.infrastructure.persistence_postgres.mappings.users import (
    start_user_mapper,
    users_table,
)
from apps.storefront.infrastructure.persistence_postgres.registry import metadata

_started = False


def start_mappers() -> None:
    """모든 ORM 매핑을 시작합니다. 두 번째 호출부터는 아무 일도 하지 않습니다."""
    global _started
    if _started:
        return
    start_user_mapper()
    start_address_mapper()
    start_brand_mapper()
    start_product_mappers()
    _started = True


__all__ = [
    "start_mappers",
    "metadata",
    "users_table",
    "addresses_table",
    "brands_table",
    "products_table",
    "product_tags_table",
    "product_images_table",
    "product_reviews_table",
]
