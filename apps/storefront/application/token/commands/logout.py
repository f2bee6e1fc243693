"""Logout Command.

로그아웃 Use Case입니다.

Architecture:
    - UseCase(지휘자): LogoutInteractor
    - Services(연주자): TokenService
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.storefront.application.token.dto import LogoutRequest, LogoutResult
from apps.storefront.domain.enums.token_type import TokenType
from apps.storefront.domain.exceptions.auth import UnauthenticatedError

if TYPE_CHECKING:
    from apps.storefront.application.token.services import TokenService

logger = logging.getLogger(__name__)


class LogoutInteractor:
    """로그아웃 Interactor (지휘자).

    Workflow:
        1. Access 토큰 검증 후 세션 삭제
        2. Refresh 토큰 검증 후 세션 삭제 (짝 access 세션 포함)

    Note:
        토큰이 유효하지 않거나 이미 만료되어도 예외를 발생시키지 않습니다.
        저장소 오류(SessionPersistenceError)는 그대로 전파됩니다.
        쿠키 삭제는 Presentation 레이어에서 처리합니다.
    """

    def __init__(self, token_service: "TokenService") -> None:
        self._token_service = token_service

    async def execute(self, request: LogoutRequest) -> LogoutResult:
        deleted = 0

        # 1. Access 토큰 처리
        if request.access_token:
            try:
                _, jti = await self._token_service.extract(request.access_token, TokenType.ACCESS)
            except UnauthenticatedError as e:
                logger.debug("Logout with unusable access token", extra={"reason": e.message})
            else:
                deleted += await self._token_service.revoke(jti)

        # 2. Refresh 토큰 처리
        if request.refresh_token:
            try:
                payload = await self._token_service.verify(
                    request.refresh_token, TokenType.REFRESH
                )
            except UnauthenticatedError as e:
                logger.debug("Logout with unusable refresh token", extra={"reason": e.message})
            else:
                deleted += await self._token_service.revoke(payload.jti)
                if payload.pair_jti:
                    deleted += await self._token_service.revoke(payload.pair_jti)

        logger.info("User logged out", extra={"deleted": deleted})
        return LogoutResult(deleted=deleted)
