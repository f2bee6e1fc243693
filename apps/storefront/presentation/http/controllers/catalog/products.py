"""Products controller.

목록/조회는 공개, 생성/수정/삭제는 관리자 전용, 리뷰 작성은 로그인 사용자 전용입니다.
정적 경로(/featured, /properties, /tags, /images)는 /{product_id}보다 먼저 등록합니다.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from apps.storefront.application.catalog.commands import (
    CreateProductInteractor,
    CreateReviewInteractor,
    DeleteProductImageInteractor,
    DeleteProductInteractor,
    DeleteProductTagInteractor,
    ReplaceProductImageInteractor,
    UpdateProductInteractor,
    UpdateProductTagInteractor,
)
from apps.storefront.application.catalog.dto import ProductInput, ProductPatch, ReviewInput
from apps.storefront.application.catalog.queries import (
    GetProductImageQuery,
    GetProductPropertiesQuery,
    GetProductQuery,
    GetProductTagQuery,
    ListProductChildrenQuery,
    ListProductsQuery,
)
from apps.storefront.application.common.dto import Page, PageRequest
from apps.storefront.application.common.dto.pagination import MAX_PER_PAGE
from apps.storefront.application.token.dto import AuthSession
from apps.storefront.domain.entities.user import User
from apps.storefront.domain.exceptions.validation import ValidationError
from apps.storefront.presentation.http.auth.dependencies import get_current_session, require_admin
from apps.storefront.presentation.http.controllers.uploads import to_file_upload
from apps.storefront.presentation.http.schemas.catalog import (
    ProductDetailsResponse,
    ProductImageResponse,
    ProductResponse,
    ProductReviewResponse,
    ProductTagResponse,
    ProductUpdateRequest,
    ReviewCreateRequest,
    TagUpdateRequest,
)
from apps.storefront.presentation.http.schemas.common import PageMeta, PageResponse
from apps.storefront.setup.dependencies import (
    get_create_product_interactor,
    get_create_review_interactor,
    get_delete_product_image_interactor,
    get_delete_product_interactor,
    get_delete_product_tag_interactor,
    get_get_product_image_query,
    get_get_product_query,
    get_get_product_tag_query,
    get_list_products_query,
    get_product_children_query,
    get_product_properties_query,
    get_replace_product_image_interactor,
    get_update_product_interactor,
    get_update_product_tag_interactor,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products")


def get_page_request(
    page: int = Query(1, ge=1),
    per_page: int = Query(50, ge=1, le=MAX_PER_PAGE),
) -> PageRequest:
    return PageRequest.of(page, per_page)


def _page_response(result: Page) -> PageResponse[ProductResponse]:
    return PageResponse[ProductResponse](
        data=[ProductResponse.model_validate(p) for p in result.items],
        meta=PageMeta(
            page=result.page,
            per_page=result.per_page,
            total_count=result.total_count,
            page_count=result.page_count,
        ),
    )


def _parse_properties(raw: Optional[str]) -> dict[str, Any]:
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError("properties must be a JSON object", field="properties") from e
    if not isinstance(value, dict):
        raise ValidationError("properties must be a JSON object", field="properties")
    return value


@router.get("", response_model=PageResponse[ProductResponse], summary="상품 목록")
async def list_products(
    page: PageRequest = Depends(get_page_request),
    query: ListProductsQuery = Depends(get_list_products_query),
) -> PageResponse[ProductResponse]:
    return _page_response(await query.execute(page))


@router.post(
    "",
    response_model=ProductDetailsResponse,
    status_code=status.HTTP_201_CREATED,
    summary="상품 생성 (관리자)",
)
async def create_product(
    brand_id: int = Form(..., gt=0),
    name: str = Form(..., min_length=1),
    slug: str = Form(..., min_length=1),
    price: int = Form(..., ge=0),
    sku: str = Form(..., min_length=1),
    description: str = Form(""),
    stock: int = Form(0, ge=0),
    is_featured: bool = Form(False),
    properties: Optional[str] = Form(None, description="JSON object"),
    tags: list[str] = Form([]),
    image: Optional[UploadFile] = File(None),
    images: list[UploadFile] = File([]),
    admin: User = Depends(require_admin),
    interactor: CreateProductInteractor = Depends(get_create_product_interactor),
) -> ProductDetailsResponse:
    data = ProductInput(
        brand_id=brand_id,
        name=name,
        slug=slug,
        price=price,
        sku=sku,
        description=description,
        stock=stock,
        is_featured=is_featured,
        properties=_parse_properties(properties),
        tags=tags,
    )
    details = await interactor.execute(
        data,
        image=to_file_upload(image) if image is not None else None,
        images=[to_file_upload(f) for f in images],
    )
    return ProductDetailsResponse(
        **ProductResponse.model_validate(details.product).model_dump(),
        tags=[ProductTagResponse.model_validate(t) for t in details.tags],
        images=[ProductImageResponse.model_validate(i) for i in details.images],
    )


@router.get("/featured", response_model=PageResponse[ProductResponse], summary="추천 상품")
async def list_featured(
    page: PageRequest = Depends(get_page_request),
    query: ListProductsQuery = Depends(get_list_products_query),
) -> PageResponse[ProductResponse]:
    return _page_response(await query.execute(page, featured_only=True))


@router.get("/properties", response_model=dict[str, list[Any]], summary="상품 속성 목록")
async def get_properties(
    query: GetProductPropertiesQuery = Depends(get_product_properties_query),
) -> dict[str, list[Any]]:
    return await query.execute()


@router.get("/tags/{tag_id}", response_model=ProductTagResponse)
async def get_tag(
    tag_id: int,
    query: GetProductTagQuery = Depends(get_get_product_tag_query),
) -> ProductTagResponse:
    return ProductTagResponse.model_validate(await query.execute(tag_id))


@router.patch("/tags/{tag_id}", response_model=ProductTagResponse)
async def update_tag(
    tag_id: int,
    body: TagUpdateRequest,
    admin: User = Depends(require_admin),
    interactor: UpdateProductTagInteractor = Depends(get_update_product_tag_interactor),
) -> ProductTagResponse:
    return ProductTagResponse.model_validate(await interactor.execute(tag_id, body.tag))


@router.delete("/tags/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(
    tag_id: int,
    admin: User = Depends(require_admin),
    interactor: DeleteProductTagInteractor = Depends(get_delete_product_tag_interactor),
) -> Response:
    await interactor.execute(tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/images/{image_id}", response_model=ProductImageResponse)
async def get_image(
    image_id: int,
    query: GetProductImageQuery = Depends(get_get_product_image_query),
) -> ProductImageResponse:
    return ProductImageResponse.model_validate(await query.execute(image_id))


@router.patch("/images/{image_id}", response_model=ProductImageResponse)
async def replace_image(
    image_id: int,
    image: UploadFile = File(...),
    admin: User = Depends(require_admin),
    interactor: ReplaceProductImageInteractor = Depends(get_replace_product_image_interactor),
) -> ProductImageResponse:
    return ProductImageResponse.model_validate(
        await interactor.execute(image_id, to_file_upload(image))
    )


@router.delete("/images/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_image(
    image_id: int,
    admin: User = Depends(require_admin),
    interactor: DeleteProductImageInteractor = Depends(get_delete_product_image_interactor),
) -> Response:
    await interactor.execute(image_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{product_id}", response_model=ProductResponse, summary="상품 조회")
async def get_product(
    product_id: int,
    query: GetProductQuery = Depends(get_get_product_query),
) -> ProductResponse:
    return ProductResponse.model_validate(await query.execute(product_id))


@router.patch("/{product_id}", response_model=ProductResponse, summary="상품 수정 (관리자)")
async def update_product(
    product_id: int,
    body: ProductUpdateRequest,
    admin: User = Depends(require_admin),
    interactor: UpdateProductInteractor = Depends(get_update_product_interactor),
) -> ProductResponse:
    product = await interactor.execute(product_id, ProductPatch(**body.model_dump()))
    return ProductResponse.model_validate(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, summary="상품 삭제 (관리자)")
async def delete_product(
    product_id: int,
    admin: User = Depends(require_admin),
    interactor: DeleteProductInteractor = Depends(get_delete_product_interactor),
) -> Response:
    await interactor.execute(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{product_id}/tags", response_model=list[ProductTagResponse])
async def list_tags(
    product_id: int,
    query: ListProductChildrenQuery = Depends(get_product_children_query),
) -> list[ProductTagResponse]:
    return [ProductTagResponse.model_validate(t) for t in await query.tags(product_id)]


@router.get("/{product_id}/images", response_model=list[ProductImageResponse])
async def list_images(
    product_id: int,
    query: ListProductChildrenQuery = Depends(get_product_children_query),
) -> list[ProductImageResponse]:
    return [ProductImageResponse.model_validate(i) for i in await query.images(product_id)]


@router.get("/{product_id}/reviews", response_model=list[ProductReviewResponse])
async def list_reviews(
    product_id: int,
    query: ListProductChildrenQuery = Depends(get_product_children_query),
) -> list[ProductReviewResponse]:
    return [ProductReviewResponse.model_validate(r) for r in await query.reviews(product_id)]


@router.post(
    "/{product_id}/reviews",
    response_model=ProductReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_review(
    product_id: int,
    body: ReviewCreateRequest,
    session: AuthSession = Depends(get_current_session),
    interactor: CreateReviewInteractor = Depends(get_create_review_interactor),
) -> ProductReviewResponse:
    review = await interactor.execute(
        session.user_id,
        product_id,
        ReviewInput(rating=body.rating, title=body.title, comment=body.comment),
    )
    return ProductReviewResponse.model_validate(review)
