"""Catalog Router."""

from fastapi import APIRouter

from apps.storefront.presentation.http.controllers.catalog.brands import router as brands_router
from apps.storefront.presentation.http.controllers.catalog.products import (
    router as products_router,
)

router = APIRouter()

router.include_router(products_router, tags=["products"])
router.include_router(brands_router, tags=["brands"])
