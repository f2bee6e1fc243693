"""Product ORM mappings.

products / product_tags / product_images / product_reviews 테이블입니다.
하위 테이블은 상품 삭제 시 CASCADE로 함께 삭제됩니다.
"""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    SmallInteger,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB

from apps.storefront.domain.entities.product import (
    Product,
    ProductImage,
    ProductReview,
    ProductTag,
)
from apps.storefront.infrastructure.persistence_postgres.constants import (
    BRANDS_TABLE,
    PRODUCT_IMAGES_TABLE,
    PRODUCT_REVIEWS_TABLE,
    PRODUCT_TAGS_TABLE,
    PRODUCTS_TABLE,
    STOREFRONT_SCHEMA,
    USERS_TABLE,
)
from apps.storefront.infrastructure.persistence_postgres.registry import mapper_registry, metadata

_PRODUCT_FK = f"{STOREFRONT_SCHEMA}.{PRODUCTS_TABLE}.id"

products_table = Table(
    PRODUCTS_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "brand_id",
        BigInteger,
        ForeignKey(f"{STOREFRONT_SCHEMA}.{BRANDS_TABLE}.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    ),
    Column("name", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column("description", Text, nullable=False, server_default=""),
    Column("price", BigInteger, nullable=False),
    Column("stock", Integer, nullable=False, server_default="0"),
    Column("sku", String(64), nullable=False, unique=True),
    Column("is_featured", Boolean, nullable=False, server_default="false", index=True),
    Column("image_url", String(500), nullable=True),
    Column("image_public_id", String(255), nullable=True),
    Column("properties", JSONB, nullable=False, server_default="{}"),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

product_tags_table = Table(
    PRODUCT_TAGS_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("product_id", BigInteger, ForeignKey(_PRODUCT_FK, ondelete="CASCADE"), nullable=False, index=True),
    Column("name", String(120), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

product_images_table = Table(
    PRODUCT_IMAGES_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("product_id", BigInteger, ForeignKey(_PRODUCT_FK, ondelete="CASCADE"), nullable=False, index=True),
    Column("url", String(500), nullable=False),
    Column("public_id", String(255), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

product_reviews_table = Table(
    PRODUCT_REVIEWS_TABLE,
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("product_id", BigInteger, ForeignKey(_PRODUCT_FK, ondelete="CASCADE"), nullable=False, index=True),
    Column(
        "user_id",
        BigInteger,
        ForeignKey(f"{STOREFRONT_SCHEMA}.{USERS_TABLE}.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("rating", SmallInteger, nullable=False),
    Column("title", String(255), nullable=False, server_default=""),
    Column("comment", Text, nullable=False, server_default=""),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    CheckConstraint("rating BETWEEN 1 AND 5", name="ck_product_reviews_rating"),
)


def start_product_mappers() -> None:
    """Product 및 하위 엔티티를 매핑합니다. 관계는 ID로만 연결합니다."""
    mapper_registry.map_imperatively(Product, products_table)
    mapper_registry.map_imperatively(ProductTag, product_tags_table)
    mapper_registry.map_imperatively(ProductImage, product_images_table)
    mapper_registry.map_imperatively(ProductReview, product_reviews_table)
