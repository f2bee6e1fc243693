"""Users Router.

하위 라우터가 각자 /users 접두어를 가집니다 (빈 경로 라우트 때문에 포함 시 접두어 없이 붙입니다).
정적 경로(/me, /address, /login 등)를 /{user_id}보다 먼저 등록합니다.
"""

from fastapi import APIRouter

from apps.storefront.presentation.http.controllers.users.addresses import (
    router as addresses_router,
)
from apps.storefront.presentation.http.controllers.users.auth import router as auth_router
from apps.storefront.presentation.http.controllers.users.profile import router as profile_router

router = APIRouter(tags=["users"])

router.include_router(auth_router)
router.include_router(addresses_router)
router.include_router(profile_router)
