"""Product gateway ports.

상품 및 하위 리소스(태그, 이미지, 리뷰) 저장소 인터페이스입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from apps.storefront.application.common.dto import PageRequest
    from apps.storefront.domain.entities.product import (
        Product,
        ProductImage,
        ProductReview,
        ProductTag,
    )


class ProductGateway(Protocol):
    """상품 저장소 포트."""

    async def add(self, product: Product) -> Product:
        ...

    async def get_by_id(self, product_id: int) -> Product | None:
        ...

    async def update(self, product: Product) -> Product:
        ...

    async def delete(self, product_id: int) -> int:
        """삭제된 행 수를 반환합니다. 태그/이미지/리뷰는 함께 삭제됩니다."""
        ...

    async def list_page(
        self, page: PageRequest, *, featured_only: bool = False
    ) -> tuple[list[Product], int]:
        """(현재 페이지 상품, 전체 개수)를 반환합니다."""
        ...

    async def list_properties(self) -> dict[str, list[Any]]:
        """전체 상품의 properties 키별 고유 값 목록을 반환합니다."""
        ...


class ProductTagGateway(Protocol):
    async def add_many(self, tags: list[ProductTag]) -> list[ProductTag]:
        ...

    async def get_by_id(self, tag_id: int) -> ProductTag | None:
        ...

    async def list_by_product(self, product_id: int) -> list[ProductTag]:
        ...

    async def update(self, tag: ProductTag) -> ProductTag:
        ...

    async def delete(self, tag_id: int) -> int:
        ...


class ProductImageGateway(Protocol):
    async def add_many(self, images: list[ProductImage]) -> list[ProductImage]:
        ...

    async def get_by_id(self, image_id: int) -> ProductImage | None:
        ...

    async def list_by_product(self, product_id: int) -> list[ProductImage]:
        ...

    async def update(self, image: ProductImage) -> ProductImage:
        ...

    async def delete(self, image_id: int) -> int:
        ...


class ProductReviewGateway(Protocol):
    async def add(self, review: ProductReview) -> ProductReview:
        ...

    async def list_by_product(self, product_id: int) -> list[ProductReview]:
        ...
