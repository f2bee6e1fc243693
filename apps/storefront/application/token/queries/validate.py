"""ValidateToken Query.

요청의 액세스 토큰으로 현재 세션을 확인합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.storefront.application.token.dto import AuthSession
from apps.storefront.domain.enums.token_type import TokenType

if TYPE_CHECKING:
    from apps.storefront.application.token.services import TokenService


class ValidateTokenQueryService:
    def __init__(self, token_service: "TokenService") -> None:
        self._token_service = token_service

    async def execute(self, access_token: str) -> AuthSession:
        """
        Raises:
            UnauthenticatedError: 서명/만료/폐기 등 인증 실패
        """
        user_id, jti = await self._token_service.extract(access_token, TokenType.ACCESS)
        return AuthSession(user_id=user_id, access_uuid=jti)
