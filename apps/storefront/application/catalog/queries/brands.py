"""Brand Queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.storefront.domain.exceptions.catalog import BrandNotFoundError

if TYPE_CHECKING:
    from apps.storefront.application.catalog.ports import BrandGateway
    from apps.storefront.domain.entities.brand import Brand


class ListBrandsQuery:
    def __init__(self, brand_gateway: "BrandGateway") -> None:
        self._brands = brand_gateway

    async def execute(self) -> list["Brand"]:
        return await self._brands.list_all()


class GetBrandQuery:
    def __init__(self, brand_gateway: "BrandGateway") -> None:
        self._brands = brand_gateway

    async def execute(self, brand_id: int) -> "Brand":
        brand = await self._brands.get_by_id(brand_id)
        if brand is None:
            raise BrandNotFoundError(brand_id)
        return brand
