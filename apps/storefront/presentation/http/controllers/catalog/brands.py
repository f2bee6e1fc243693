"""Brands controller."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from apps.storefront.application.catalog.commands import (
    CreateBrandInteractor,
    DeleteBrandInteractor,
    UpdateBrandInteractor,
)
from apps.storefront.application.catalog.dto import BrandInput, BrandPatch
from apps.storefront.application.catalog.queries import GetBrandQuery, ListBrandsQuery
from apps.storefront.domain.entities.user import User
from apps.storefront.presentation.http.auth.dependencies import require_admin
from apps.storefront.presentation.http.schemas.catalog import (
    BrandCreateRequest,
    BrandResponse,
    BrandUpdateRequest,
)
from apps.storefront.setup.dependencies import (
    get_create_brand_interactor,
    get_delete_brand_interactor,
    get_get_brand_query,
    get_list_brands_query,
    get_update_brand_interactor,
)

router = APIRouter(prefix="/brands")


@router.get("", response_model=list[BrandResponse])
async def list_brands(query: ListBrandsQuery = Depends(get_list_brands_query)) -> list[BrandResponse]:
    return [BrandResponse.model_validate(b) for b in await query.execute()]


@router.post("", response_model=BrandResponse, status_code=status.HTTP_201_CREATED)
async def create_brand(
    body: BrandCreateRequest,
    admin: User = Depends(require_admin),
    interactor: CreateBrandInteractor = Depends(get_create_brand_interactor),
) -> BrandResponse:
    return BrandResponse.model_validate(await interactor.execute(BrandInput(**body.model_dump())))


@router.get("/{brand_id}", response_model=BrandResponse)
async def get_brand(
    brand_id: int,
    query: GetBrandQuery = Depends(get_get_brand_query),
) -> BrandResponse:
    return BrandResponse.model_validate(await query.execute(brand_id))


@router.patch("/{brand_id}", response_model=BrandResponse)
async def update_brand(
    brand_id: int,
    body: BrandUpdateRequest,
    admin: User = Depends(require_admin),
    interactor: UpdateBrandInteractor = Depends(get_update_brand_interactor),
) -> BrandResponse:
    brand = await interactor.execute(brand_id, BrandPatch(**body.model_dump()))
    return BrandResponse.model_validate(brand)


@router.delete("/{brand_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_brand(
    brand_id: int,
    admin: User = Depends(require_admin),
    interactor: DeleteBrandInteractor = Depends(get_delete_brand_interactor),
) -> Response:
    await interactor.execute(brand_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
