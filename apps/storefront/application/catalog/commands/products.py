"""Product Commands.

상품 생성/수정/삭제 Use Case입니다 (관리자 전용).

Architecture:
    - UseCase(지휘자): CreateProductInteractor, UpdateProductInteractor, DeleteProductInteractor
    - Ports(인프라): ProductGateway, ProductTagGateway, ProductImageGateway,
      BrandGateway, FileStorage, TransactionManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.storefront.application.catalog.dto import (
    FileUpload,
    ProductDetails,
    ProductInput,
    ProductPatch,
)
from apps.storefront.application.storage.services import discard_stored_files
from apps.storefront.domain.entities.product import Product, ProductImage, ProductTag
from apps.storefront.domain.exceptions.catalog import BrandNotFoundError, ProductNotFoundError
from apps.storefront.domain.exceptions.validation import NoChangesProvidedError

if TYPE_CHECKING:
    from apps.storefront.application.catalog.ports import (
        BrandGateway,
        ProductGateway,
        ProductImageGateway,
        ProductTagGateway,
    )
    from apps.storefront.application.common.ports import TransactionManager
    from apps.storefront.application.storage.ports import FileStorage

logger = logging.getLogger(__name__)

PRODUCT_FOLDER = "products"


class CreateProductInteractor:
    """상품 생성 Interactor (지휘자).

    Workflow:
        1. 브랜드 존재 확인
        2. 대표 이미지 저장 (FileStorage)
        3. 상품 저장
        4. 태그/추가 이미지 저장
        5. 커밋

        2~5 단계에서 실패하면 이미 저장한 파일을 삭제하고 예외를 다시 던집니다.
    """

    def __init__(
        self,
        product_gateway: "ProductGateway",
        tag_gateway: "ProductTagGateway",
        image_gateway: "ProductImageGateway",
        brand_gateway: "BrandGateway",
        file_storage: "FileStorage",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._products = product_gateway
        self._tags = tag_gateway
        self._images = image_gateway
        self._brands = brand_gateway
        self._storage = file_storage
        self._tx = transaction_manager

    async def execute(
        self,
        data: ProductInput,
        image: FileUpload | None = None,
        images: list[FileUpload] | None = None,
    ) -> ProductDetails:
        # 1. 브랜드 확인
        if await self._brands.get_by_id(data.brand_id) is None:
            raise BrandNotFoundError(data.brand_id)

        product = Product(
            brand_id=data.brand_id,
            name=data.name,
            slug=data.slug,
            description=data.description,
            price=data.price,
            stock=data.stock,
            sku=data.sku,
            is_featured=data.is_featured,
            properties=dict(data.properties),
        )

        stored_ids: list[str] = []
        try:
            # 2. 대표 이미지
            if image is not None:
                stored = await self._save(image)
                stored_ids.append(stored.public_id)
                product.set_image(stored.url, stored.public_id)

            # 3. 상품 저장
            product = await self._products.add(product)

            # 4. 태그 / 추가 이미지
            tags = await self._tags.add_many(
                [ProductTag(product_id=product.id, name=name) for name in _unique(data.tags)]
            )
            extra: list[ProductImage] = []
            for upload in images or []:
                stored = await self._save(upload)
                stored_ids.append(stored.public_id)
                extra.append(
                    ProductImage(product_id=product.id, url=stored.url, public_id=stored.public_id)
                )
            saved_images = await self._images.add_many(extra) if extra else []

            # 5. 커밋
            await self._tx.commit()
        except Exception:
            # 저장된 파일 정리 후 원래 예외 전파
            await discard_stored_files(self._storage, stored_ids)
            raise

        logger.info(
            "Product created",
            extra={"product_id": product.id, "tags": len(tags), "files": len(stored_ids)},
        )
        return ProductDetails(product=product, tags=tags, images=saved_images)

    async def _save(self, upload: FileUpload):
        return await self._storage.save(
            upload.chunks,
            filename=upload.filename,
            content_type=upload.content_type,
            folder=PRODUCT_FOLDER,
        )


class UpdateProductInteractor:
    def __init__(
        self,
        product_gateway: "ProductGateway",
        brand_gateway: "BrandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._products = product_gateway
        self._brands = brand_gateway
        self._tx = transaction_manager

    async def execute(self, product_id: int, patch: ProductPatch) -> Product:
        """
        Raises:
            NoChangesProvidedError: 변경사항 없음
            ProductNotFoundError: 상품 없음
            BrandNotFoundError: 변경하려는 브랜드 없음
        """
        changes = patch.changes()
        if not changes:
            raise NoChangesProvidedError()

        product = await self._products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        if patch.brand_id is not None and await self._brands.get_by_id(patch.brand_id) is None:
            raise BrandNotFoundError(patch.brand_id)

        product.apply_patch(changes)
        product = await self._products.update(product)
        await self._tx.commit()
        return product


class DeleteProductInteractor:
    """상품 삭제. 저장된 이미지 파일도 함께 지웁니다."""

    def __init__(
        self,
        product_gateway: "ProductGateway",
        image_gateway: "ProductImageGateway",
        file_storage: "FileStorage",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._products = product_gateway
        self._images = image_gateway
        self._storage = file_storage
        self._tx = transaction_manager

    async def execute(self, product_id: int) -> None:
        product = await self._products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        public_ids = [image.public_id for image in await self._images.list_by_product(product_id)]
        if product.image_public_id:
            public_ids.append(product.image_public_id)

        await self._products.delete(product_id)
        await self._tx.commit()

        for public_id in public_ids:
            await self._storage.delete(public_id)

        logger.info("Product deleted", extra={"product_id": product_id, "files": len(public_ids)})


def _unique(names: list[str]) -> list[str]:
    seen: dict[str, None] = {}
    for name in names:
        name = name.strip()
        if name:
            seen.setdefault(name, None)
    return list(seen)
