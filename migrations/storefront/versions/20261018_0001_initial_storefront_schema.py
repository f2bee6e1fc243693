"""Initial storefront schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-18

Schema: storefront.*
- users, addresses
- brands, products, product_tags, product_images, product_reviews
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create storefront schema tables.

    Note: IF NOT EXISTS로 기존 테이블 보존
    """
    op.execute("CREATE SCHEMA IF NOT EXISTS storefront")

    # ============================================
    # storefront.users
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.users (
            id BIGSERIAL PRIMARY KEY,
            first_name VARCHAR(120) NOT NULL DEFAULT '',
            last_name VARCHAR(120) NOT NULL DEFAULT '',
            username VARCHAR(120) NOT NULL,
            email VARCHAR(320) NOT NULL,
            password VARCHAR(255) NOT NULL,
            role VARCHAR(16) NOT NULL DEFAULT 'user',
            gender VARCHAR(16),
            locale VARCHAR(8) NOT NULL DEFAULT 'en',
            avatar_url VARCHAR(500),
            avatar_public_id VARCHAR(255),
            active BOOLEAN NOT NULL DEFAULT TRUE,
            email_verified BOOLEAN NOT NULL DEFAULT FALSE,
            failed_attempts INTEGER NOT NULL DEFAULT 0,
            last_login_at TIMESTAMPTZ,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            deleted_at TIMESTAMPTZ,

            CONSTRAINT uq_users_username UNIQUE (username),
            CONSTRAINT uq_users_email UNIQUE (email)
        )
    """)
    op.execute("CREATE INDEX IF NOT EXISTS ix_users_email ON storefront.users(email)")

    # ============================================
    # storefront.addresses
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.addresses (
            id BIGSERIAL PRIMARY KEY,
            user_id BIGINT NOT NULL REFERENCES storefront.users(id) ON DELETE CASCADE,
            line_1 VARCHAR(255) NOT NULL,
            line_2 VARCHAR(255),
            city VARCHAR(120) NOT NULL,
            country VARCHAR(120) NOT NULL,
            state VARCHAR(120),
            zip VARCHAR(32) NOT NULL,
            latitude DOUBLE PRECISION,
            longitude DOUBLE PRECISION,
            phone VARCHAR(32),
            address_type VARCHAR(32) NOT NULL DEFAULT 'physical',
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            deleted_at TIMESTAMPTZ
        )
    """)
    op.execute(
        "CREATE INDEX IF NOT EXISTS ix_addresses_user_id ON storefront.addresses(user_id)"
    )

    # ============================================
    # storefront.brands
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.brands (
            id BIGSERIAL PRIMARY KEY,
            name VARCHAR(120) NOT NULL,
            slug VARCHAR(120) NOT NULL,
            type VARCHAR(64) NOT NULL DEFAULT '',
            description TEXT NOT NULL DEFAULT '',
            email VARCHAR(320) NOT NULL DEFAULT '',
            website_url VARCHAR(500) NOT NULL DEFAULT '',
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT uq_brands_slug UNIQUE (slug)
        )
    """)

    # ============================================
    # storefront.products (+ tags / images / reviews)
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.products (
            id BIGSERIAL PRIMARY KEY,
            brand_id BIGINT NOT NULL REFERENCES storefront.brands(id) ON DELETE RESTRICT,
            name VARCHAR(255) NOT NULL,
            slug VARCHAR(255) NOT NULL,
            description TEXT NOT NULL DEFAULT '',
            price BIGINT NOT NULL,
            stock INTEGER NOT NULL DEFAULT 0,
            sku VARCHAR(64) NOT NULL,
            is_featured BOOLEAN NOT NULL DEFAULT FALSE,
            image_url VARCHAR(500),
            image_public_id VARCHAR(255),
            properties JSONB NOT NULL DEFAULT '{}'::jsonb,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT uq_products_slug UNIQUE (slug),
            CONSTRAINT uq_products_sku UNIQUE (sku)
        )
    """)
    op.execute(
        "CREATE INDEX IF NOT EXISTS ix_products_brand_id ON storefront.products(brand_id)"
    )
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_products_is_featured
        ON storefront.products(is_featured) WHERE is_featured
    """)

    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.product_tags (
            id BIGSERIAL PRIMARY KEY,
            product_id BIGINT NOT NULL REFERENCES storefront.products(id) ON DELETE CASCADE,
            name VARCHAR(120) NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.product_images (
            id BIGSERIAL PRIMARY KEY,
            product_id BIGINT NOT NULL REFERENCES storefront.products(id) ON DELETE CASCADE,
            url VARCHAR(500) NOT NULL,
            public_id VARCHAR(255) NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("""
        CREATE TABLE IF NOT EXISTS storefront.product_reviews (
            id BIGSERIAL PRIMARY KEY,
            product_id BIGINT NOT NULL REFERENCES storefront.products(id) ON DELETE CASCADE,
            user_id BIGINT NOT NULL REFERENCES storefront.users(id) ON DELETE CASCADE,
            rating SMALLINT NOT NULL,
            title VARCHAR(255) NOT NULL DEFAULT '',
            comment TEXT NOT NULL DEFAULT '',
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT ck_product_reviews_rating CHECK (rating BETWEEN 1 AND 5)
        )
    """)
    for table in ("product_tags", "product_images", "product_reviews"):
        op.execute(
            f"CREATE INDEX IF NOT EXISTS ix_{table}_product_id "
            f"ON storefront.{table}(product_id)"
        )


def downgrade() -> None:
    """Drop storefront schema tables."""
    for table in (
        "product_reviews",
        "product_images",
        "product_tags",
        "products",
        "brands",
        "addresses",
        "users",
    ):
        op.execute(f"DROP TABLE IF EXISTS storefront.{table}")
