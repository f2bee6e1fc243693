"""API v1 Router."""

from fastapi import APIRouter

from apps.storefront.presentation.http.controllers.catalog.router import router as catalog_router
from apps.storefront.presentation.http.controllers.general.health import router as health_router
from apps.storefront.presentation.http.controllers.users.router import router as users_router

router = APIRouter()

router.include_router(users_router)
router.include_router(catalog_router)
router.include_router(health_router, tags=["general"])
