"""Cookie Parameters.

인증 쿠키 설정을 관리합니다.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from apps.storefront.setup.config.settings import get_settings

if TYPE_CHECKING:
    from fastapi import Response

    from apps.storefront.application.token.ports import TokenPair

# Cookie names (프론트엔드와 일치해야 함)
ACCESS_COOKIE_NAME = "access_token"
REFRESH_COOKIE_NAME = "refresh_token"

# Cookie settings
COOKIE_PATH = "/"
COOKIE_SAMESITE = "lax"


def get_cookie_params() -> dict:
    """쿠키 공통 파라미터."""
    settings = get_settings()
    params = {
        "path": COOKIE_PATH,
        "httponly": True,
        "secure": settings.cookie_secure,
        "samesite": COOKIE_SAMESITE,
    }
    if settings.cookie_domain:
        params["domain"] = settings.cookie_domain
    return params


def set_auth_cookies(response: "Response", pair: "TokenPair") -> None:
    """인증 쿠키 설정. max_age는 각 토큰의 남은 수명입니다."""
    base_params = get_cookie_params()
    now = int(time.time())

    response.set_cookie(
        key=ACCESS_COOKIE_NAME,
        value=pair.access_token,
        max_age=max(pair.access_expires_at - now, 1),
        **base_params,
    )
    response.set_cookie(
        key=REFRESH_COOKIE_NAME,
        value=pair.refresh_token,
        max_age=max(pair.refresh_expires_at - now, 1),
        **base_params,
    )


def clear_auth_cookies(response: "Response") -> None:
    """인증 쿠키 삭제."""
    base_params = get_cookie_params()
    response.delete_cookie(ACCESS_COOKIE_NAME, **base_params)
    response.delete_cookie(REFRESH_COOKIE_NAME, **base_params)
