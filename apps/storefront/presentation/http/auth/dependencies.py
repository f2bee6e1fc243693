"""Auth Dependencies.

FastAPI Depends용 인증 의존성입니다.
액세스 토큰은 Authorization 헤더 → 쿠키 순으로 찾습니다.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Cookie, Depends, Header

from apps.storefront.application.token.dto import AuthSession
from apps.storefront.application.token.queries import ValidateTokenQueryService
from apps.storefront.application.users.queries import GetUserQuery
from apps.storefront.domain.entities.user import User
from apps.storefront.domain.exceptions.auth import PermissionDeniedError, UnauthenticatedError
from apps.storefront.domain.exceptions.user import UserNotFoundError
from apps.storefront.presentation.http.auth.cookie_params import (
    ACCESS_COOKIE_NAME,
    REFRESH_COOKIE_NAME,
)
from apps.storefront.setup.dependencies import get_get_user_query, get_validate_token_service


def parse_bearer(header_value: Optional[str]) -> Optional[str]:
    """Bearer 토큰에서 실제 토큰 값을 추출합니다."""
    if not header_value:
        return None
    scheme, _, token = header_value.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_access_token(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    access_cookie: Optional[str] = Cookie(None, alias=ACCESS_COOKIE_NAME),
) -> Optional[str]:
    return parse_bearer(authorization) or access_cookie or None


def get_refresh_token_from_transport(
    refresh_header: Optional[str] = Header(None, alias="X-Refresh-Token"),
    refresh_cookie: Optional[str] = Cookie(None, alias=REFRESH_COOKIE_NAME),
) -> Optional[str]:
    """X-Refresh-Token 헤더(Bearer 접두어 선택) → 쿠키 순. 본문은 컨트롤러에서 먼저 확인합니다."""
    if refresh_header:
        return parse_bearer(refresh_header) or refresh_header.strip() or None
    return refresh_cookie or None


async def get_current_session(
    access_token: Optional[str] = Depends(get_access_token),
    validate_token_service: ValidateTokenQueryService = Depends(get_validate_token_service),
) -> AuthSession:
    """현재 인증된 세션 조회.

    Raises:
        UnauthenticatedError: 토큰 없음 / 검증 실패 (모두 401로 변환)
    """
    if not access_token:
        raise UnauthenticatedError("Not authenticated")
    return await validate_token_service.execute(access_token)


async def require_admin(
    session: AuthSession = Depends(get_current_session),
    query: GetUserQuery = Depends(get_get_user_query),
) -> User:
    """관리자 권한 확인."""
    try:
        user = await query.execute(session.user_id)
    except UserNotFoundError:
        raise UnauthenticatedError("Session owner no longer exists") from None
    if not user.is_admin:
        raise PermissionDeniedError()
    return user
