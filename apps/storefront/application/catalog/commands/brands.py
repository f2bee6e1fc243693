"""Brand Commands (관리자 전용)."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

from apps.storefront.application.catalog.dto import BrandInput, BrandPatch
from apps.storefront.domain.entities.brand import Brand
from apps.storefront.domain.exceptions.catalog import BrandNotFoundError
from apps.storefront.domain.exceptions.validation import NoChangesProvidedError

if TYPE_CHECKING:
    from apps.storefront.application.catalog.ports import BrandGateway
    from apps.storefront.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class CreateBrandInteractor:
    def __init__(self, brand_gateway: "BrandGateway", transaction_manager: "TransactionManager") -> None:
        self._brands = brand_gateway
        self._tx = transaction_manager

    async def execute(self, data: BrandInput) -> Brand:
        brand = await self._brands.add(Brand(**asdict(data)))
        await self._tx.commit()
        logger.info("Brand created", extra={"brand_id": brand.id})
        return brand


class UpdateBrandInteractor:
    def __init__(self, brand_gateway: "BrandGateway", transaction_manager: "TransactionManager") -> None:
        self._brands = brand_gateway
        self._tx = transaction_manager

    async def execute(self, brand_id: int, patch: BrandPatch) -> Brand:
        changes = patch.changes()
        if not changes:
            raise NoChangesProvidedError()

        brand = await self._brands.get_by_id(brand_id)
        if brand is None:
            raise BrandNotFoundError(brand_id)

        brand.apply_patch(changes)
        brand = await self._brands.update(brand)
        await self._tx.commit()
        return brand


class DeleteBrandInteractor:
    def __init__(self, brand_gateway: "BrandGateway", transaction_manager: "TransactionManager") -> None:
        self._brands = brand_gateway
        self._tx = transaction_manager

    async def execute(self, brand_id: int) -> None:
        if not await self._brands.delete(brand_id):
            raise BrandNotFoundError(brand_id)
        await self._tx.commit()
        logger.info("Brand deleted", extra={"brand_id": brand_id})
