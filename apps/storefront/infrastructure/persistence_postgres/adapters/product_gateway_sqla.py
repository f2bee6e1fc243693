"""SQLAlchemy implementation of product gateways."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from apps.storefront.application.common.dto import PageRequest
from apps.storefront.domain.entities.product import (
    Product,
    ProductImage,
    ProductReview,
    ProductTag,
)
from apps.storefront.infrastructure.persistence_postgres.adapters.errors import (
    translate_db_errors,
)
from apps.storefront.infrastructure.persistence_postgres.constants import (
    PRODUCTS_TABLE,
    STOREFRONT_SCHEMA,
)

# properties JSONB의 키별 고유 값
PRODUCT_PROPERTIES_SQL = text(
    f"""
    SELECT p.key AS prop_key, jsonb_agg(DISTINCT p.value) AS prop_values
    FROM {STOREFRONT_SCHEMA}.{PRODUCTS_TABLE} AS products,
         jsonb_each(products.properties) AS p
    GROUP BY p.key
    ORDER BY p.key
    """
)


class SqlaProductGateway:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, product: Product) -> Product:
        with translate_db_errors("add product"):
            self._session.add(product)
            await self._session.flush()
        return product

    async def get_by_id(self, product_id: int) -> Product | None:
        with translate_db_errors("get product"):
            return await self._session.get(Product, product_id)

    async def update(self, product: Product) -> Product:
        with translate_db_errors("update product"):
            merged = await self._session.merge(product)
            await self._session.flush()
        return merged

    async def delete(self, product_id: int) -> int:
        with translate_db_errors("delete product"):
            result = await self._session.execute(delete(Product).where(Product.id == product_id))
        return result.rowcount

    async def list_page(
        self, page: PageRequest, *, featured_only: bool = False
    ) -> tuple[list[Product], int]:
        query = select(Product)
        count_query = select(func.count()).select_from(Product)
        if featured_only:
            query = query.where(Product.is_featured.is_(True))
            count_query = count_query.where(Product.is_featured.is_(True))

        with translate_db_errors("list products"):
            total = (await self._session.execute(count_query)).scalar_one()
            result = await self._session.execute(
                query.order_by(Product.id).offset(page.offset).limit(page.limit)
            )
        return list(result.scalars().all()), total

    async def list_properties(self) -> dict[str, list[Any]]:
        with translate_db_errors("list product properties"):
            result = await self._session.execute(PRODUCT_PROPERTIES_SQL)
        return {row.prop_key: list(row.prop_values) for row in result}


class SqlaProductTagGateway:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add_many(self, tags: list[ProductTag]) -> list[ProductTag]:
        if not tags:
            return []
        with translate_db_errors("add product tags"):
            self._session.add_all(tags)
            await self._session.flush()
        return tags

    async def get_by_id(self, tag_id: int) -> ProductTag | None:
        with translate_db_errors("get product tag"):
            return await self._session.get(ProductTag, tag_id)

    async def list_by_product(self, product_id: int) -> list[ProductTag]:
        with translate_db_errors("list product tags"):
            result = await self._session.execute(
                select(ProductTag).where(ProductTag.product_id == product_id).order_by(ProductTag.id)
            )
        return list(result.scalars().all())

    async def update(self, tag: ProductTag) -> ProductTag:
        with translate_db_errors("update product tag"):
            merged = await self._session.merge(tag)
            await self._session.flush()
        return merged

    async def delete(self, tag_id: int) -> int:
        with translate_db_errors("delete product tag"):
            result = await self._session.execute(delete(ProductTag).where(ProductTag.id == tag_id))
        return result.rowcount


class SqlaProductImageGateway:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add_many(self, images: list[ProductImage]) -> list[ProductImage]:
        if not images:
            return []
        with translate_db_errors("add product images"):
            self._session.add_all(images)
            await self._session.flush()
        return images

    async def get_by_id(self, image_id: int) -> ProductImage | None:
        with translate_db_errors("get product image"):
            return await self._session.get(ProductImage, image_id)

    async def list_by_product(self, product_id: int) -> list[ProductImage]:
        with translate_db_errors("list product images"):
            result = await self._session.execute(
                select(ProductImage)
                .where(ProductImage.product_id == product_id)
                .order_by(ProductImage.id)
            )
        return list(result.scalars().all())

    async def update(self, image: ProductImage) -> ProductImage:
        with translate_db_errors("update product image"):
            merged = await self._session.merge(image)
            await self._session.flush()
        return merged

    async def delete(self, image_id: int) -> int:
        with translate_db_errors("delete product image"):
            result = await self._session.execute(
                delete(ProductImage).where(ProductImage.id == image_id)
            )
        return result.rowcount


class SqlaProductReviewGateway:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, review: ProductReview) -> ProductReview:
        with translate_db_errors("add product review"):
            self._session.add(review)
            await self._session.flush()
        return review

    async def list_by_product(self, product_id: int) -> list[ProductReview]:
        with translate_db_errors("list product reviews"):
            result = await self._session.execute(
                select(ProductReview)
                .where(ProductReview.product_id == product_id)
                .order_by(ProductReview.created_at.desc())
            )
        return list(result.scalars().all())
