"""RefreshTokens Command.

토큰 갱신 Use Case입니다.

Architecture:
    - UseCase(지휘자): RefreshTokensInteractor
    - Services(연주자): TokenService
    - Ports(인프라): UserQueryGateway
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.storefront.application.token.dto import RefreshTokensRequest
from apps.storefront.domain.enums.token_type import TokenType
from apps.storefront.domain.exceptions.auth import TokenRevokedError

if TYPE_CHECKING:
    from apps.storefront.application.token.ports import TokenPair
    from apps.storefront.application.token.services import TokenService
    from apps.storefront.application.users.ports import UserQueryGateway

logger = logging.getLogger(__name__)


class RefreshTokensInteractor:
    """토큰 갱신 Interactor (지휘자).

    Workflow:
        1. Refresh 토큰 검증 (TokenService)
        2. 사용자 조회 (삭제/비활성 사용자는 갱신 불가)
        3. 새 토큰 발급 + 기존 세션 교체 (TokenService)
    """

    def __init__(
        self,
        token_service: "TokenService",
        user_query_gateway: "UserQueryGateway",
    ) -> None:
        self._token_service = token_service
        self._user_query_gateway = user_query_gateway

    async def execute(self, request: RefreshTokensRequest) -> "TokenPair":
        """토큰을 갱신합니다.

        Raises:
            InvalidTokenSignatureError: 유효하지 않은 토큰
            TokenExpiredError: 만료된 토큰
            TokenRevokedError: 폐기된 토큰 또는 로그인할 수 없는 사용자
        """
        # 1. Refresh 토큰 검증
        payload = await self._token_service.verify(request.refresh_token, TokenType.REFRESH)

        # 2. 사용자 조회
        user = await self._user_query_gateway.get_by_id(payload.user_id)
        if user is None or not user.can_login:
            await self._token_service.revoke(payload.jti)
            raise TokenRevokedError(payload.jti)

        # 3. 토큰 회전
        pair = await self._token_service.rotate(payload)

        logger.info("Session refreshed", extra={"user_id": payload.user_id})
        return pair
