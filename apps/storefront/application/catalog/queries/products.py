"""Product Queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from apps.storefront.application.common.dto import Page, PageRequest
from apps.storefront.domain.exceptions.catalog import (
    ProductImageNotFoundError,
    ProductNotFoundError,
    ProductTagNotFoundError,
)

if TYPE_CHECKING:
    from apps.storefront.application.catalog.ports import (
        ProductGateway,
        ProductImageGateway,
        ProductReviewGateway,
        ProductTagGateway,
    )
    from apps.storefront.domain.entities.product import (
        Product,
        ProductImage,
        ProductReview,
        ProductTag,
    )


class ListProductsQuery:
    """상품 목록 페이지 조회. featured_only=True면 추천 상품만."""

    def __init__(self, product_gateway: "ProductGateway") -> None:
        self._products = product_gateway

    async def execute(self, page: PageRequest, *, featured_only: bool = False) -> Page["Product"]:
        items, total = await self._products.list_page(page, featured_only=featured_only)
        return Page(items=items, page=page.page, per_page=page.per_page, total_count=total)


class GetProductQuery:
    def __init__(self, product_gateway: "ProductGateway") -> None:
        self._products = product_gateway

    async def execute(self, product_id: int) -> "Product":
        product = await self._products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product


class GetProductPropertiesQuery:
    def __init__(self, product_gateway: "ProductGateway") -> None:
        self._products = product_gateway

    async def execute(self) -> dict[str, list[Any]]:
        return await self._products.list_properties()


class ListProductChildrenQuery:
    """상품의 태그/이미지/리뷰 목록. 상품이 없으면 ProductNotFoundError."""

    def __init__(
        self,
        product_gateway: "ProductGateway",
        tag_gateway: "ProductTagGateway",
        image_gateway: "ProductImageGateway",
        review_gateway: "ProductReviewGateway",
    ) -> None:
        self._products = product_gateway
        self._tags = tag_gateway
        self._images = image_gateway
        self._reviews = review_gateway

    async def _ensure_product(self, product_id: int) -> None:
        if await self._products.get_by_id(product_id) is None:
            raise ProductNotFoundError(product_id)

    async def tags(self, product_id: int) -> list["ProductTag"]:
        await self._ensure_product(product_id)
        return await self._tags.list_by_product(product_id)

    async def images(self, product_id: int) -> list["ProductImage"]:
        await self._ensure_product(product_id)
        return await self._images.list_by_product(product_id)

    async def reviews(self, product_id: int) -> list["ProductReview"]:
        await self._ensure_product(product_id)
        return await self._reviews.list_by_product(product_id)


class GetProductTagQuery:
    def __init__(self, tag_gateway: "ProductTagGateway") -> None:
        self._tags = tag_gateway

    async def execute(self, tag_id: int) -> "ProductTag":
        tag = await self._tags.get_by_id(tag_id)
        if tag is None:
            raise ProductTagNotFoundError(tag_id)
        return tag


class GetProductImageQuery:
    def __init__(self, image_gateway: "ProductImageGateway") -> None:
        self._images = image_gateway

    async def execute(self, image_id: int) -> "ProductImage":
        image = await self._images.get_by_id(image_id)
        if image is None:
            raise ProductImageNotFoundError(image_id)
        return image
