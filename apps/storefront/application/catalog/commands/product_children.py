"""Product Tag / Image / Review Commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.storefront.application.catalog.commands.products import PRODUCT_FOLDER
from apps.storefront.application.catalog.dto import FileUpload, ReviewInput
from apps.storefront.application.storage.services import discard_stored_files
from apps.storefront.domain.entities.product import ProductReview
from apps.storefront.domain.exceptions.catalog import (
    ProductImageNotFoundError,
    ProductNotFoundError,
    ProductTagNotFoundError,
)
from apps.storefront.domain.exceptions.validation import ValidationError

if TYPE_CHECKING:
    from apps.storefront.application.catalog.ports import (
        ProductGateway,
        ProductImageGateway,
        ProductReviewGateway,
        ProductTagGateway,
    )
    from apps.storefront.application.common.ports import TransactionManager
    from apps.storefront.application.storage.ports import FileStorage
    from apps.storefront.domain.entities.product import ProductImage, ProductTag

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


class UpdateProductTagInteractor:
    def __init__(self, tag_gateway: "ProductTagGateway", transaction_manager: "TransactionManager") -> None:
        self._tags = tag_gateway
        self._tx = transaction_manager

    async def execute(self, tag_id: int, name: str) -> "ProductTag":
        name = name.strip()
        if not name:
            raise ValidationError("Tag name cannot be empty", field="tag")

        tag = await self._tags.get_by_id(tag_id)
        if tag is None:
            raise ProductTagNotFoundError(tag_id)

        tag.rename(name)
        tag = await self._tags.update(tag)
        await self._tx.commit()
        return tag


class DeleteProductTagInteractor:
    def __init__(self, tag_gateway: "ProductTagGateway", transaction_manager: "TransactionManager") -> None:
        self._tags = tag_gateway
        self._tx = transaction_manager

    async def execute(self, tag_id: int) -> None:
        if not await self._tags.delete(tag_id):
            raise ProductTagNotFoundError(tag_id)
        await self._tx.commit()


class ReplaceProductImageInteractor:
    """상품 이미지 파일 교체. 새 파일 저장 후 이전 파일을 삭제합니다."""

    def __init__(
        self,
        image_gateway: "ProductImageGateway",
        file_storage: "FileStorage",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._images = image_gateway
        self._storage = file_storage
        self._tx = transaction_manager

    async def execute(self, image_id: int, upload: FileUpload) -> "ProductImage":
        image = await self._images.get_by_id(image_id)
        if image is None:
            raise ProductImageNotFoundError(image_id)

        stored = await self._storage.save(
            upload.chunks,
            filename=upload.filename,
            content_type=upload.content_type,
            folder=PRODUCT_FOLDER,
        )
        previous = image.public_id

        try:
            image.replace(stored.url, stored.public_id)
            image = await self._images.update(image)
            await self._tx.commit()
        except Exception:
            await discard_stored_files(self._storage, [stored.public_id])
            raise

        if previous:
            await self._storage.delete(previous)
        return image


class DeleteProductImageInteractor:
    def __init__(
        self,
        image_gateway: "ProductImageGateway",
        file_storage: "FileStorage",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._images = image_gateway
        self._storage = file_storage
        self._tx = transaction_manager

    async def execute(self, image_id: int) -> None:
        image = await self._images.get_by_id(image_id)
        if image is None:
            raise ProductImageNotFoundError(image_id)

        await self._images.delete(image_id)
        await self._tx.commit()
        await self._storage.delete(image.public_id)


class CreateReviewInteractor:
    """상품 리뷰 작성 (로그인 사용자)."""

    def __init__(
        self,
        product_gateway: "ProductGateway",
        review_gateway: "ProductReviewGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._products = product_gateway
        self._reviews = review_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: int, product_id: int, data: ReviewInput) -> ProductReview:
        """
        Raises:
            ValidationError: rating이 1~5 범위를 벗어남
            ProductNotFoundError: 상품 없음
        """
        if not MIN_RATING <= data.rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}", field="rating"
            )
        if await self._products.get_by_id(product_id) is None:
            raise ProductNotFoundError(product_id)

        review = await self._reviews.add(
            ProductReview(
                product_id=product_id,
                user_id=user_id,
                rating=data.rating,
                title=data.title,
                comment=data.comment,
            )
        )
        await self._tx.commit()

        logger.info("Review created", extra={"product_id": product_id, "user_id": user_id})
        return review
