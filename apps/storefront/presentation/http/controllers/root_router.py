"""Root Router.

최상위 라우터로, 모든 하위 라우터를 통합합니다.
API 버전 접두어는 설정(STOREFRONT_API_V1_PREFIX)에서 가져옵니다.
"""

from fastapi import APIRouter

from apps.storefront.presentation.http.controllers.api_v1_router import (
    router as api_v1_router,
)
from apps.storefront.setup.config.settings import get_settings

router = APIRouter()

router.include_router(api_v1_router, prefix=get_settings().api_v1_prefix)
