"""TokenService - 토큰 발급 및 세션 관리 서비스.

"연주자" 역할: 토큰 발급, 세션 저장/조회/폐기를 담당합니다.
UseCase(지휘자)가 이 서비스를 호출하여 토큰 관련 작업을 위임합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.storefront.application.common.exceptions import SessionPersistenceError
from apps.storefront.domain.enums.token_type import TokenType
from apps.storefront.domain.exceptions.auth import SessionNotFoundError, TokenRevokedError

if TYPE_CHECKING:
    from apps.storefront.application.token.ports import (
        SessionStore,
        TokenIssuer,
        TokenPair,
    )
    from apps.storefront.domain.value_objects.token_payload import TokenPayload

logger = logging.getLogger(__name__)


class TokenService:
    """토큰 발급 및 세션 관리 서비스.

    Responsibilities:
        - 토큰 쌍 발급 + 세션 저장
        - 토큰 검증 (서명 → 타입 → 만료 → 세션 존재)
        - 세션 폐기
        - 리프레시 토큰 회전

    Collaborators:
        - TokenIssuer: 토큰 서명/검증
        - SessionStore: jti → user_id 저장소
    """

    def __init__(self, issuer: "TokenIssuer", session_store: "SessionStore") -> None:
        self._issuer = issuer
        self._session_store = session_store

    async def issue_and_save(self, user_id: int) -> "TokenPair":
        """토큰 쌍을 발급하고 세션을 저장합니다.

        Raises:
            TokenSigningError: 서명 실패
            SessionPersistenceError: 세션 저장 실패 (토큰은 폐기됨)
        """
        pair = self._issuer.issue_pair(user_id)
        await self._session_store.save(user_id, pair)

        logger.info(
            "Token issued and session saved",
            extra={
                "user_id": user_id,
                "access_jti": pair.access_uuid,
                "refresh_jti": pair.refresh_uuid,
            },
        )
        return pair

    async def verify(self, token: str, expected_type: TokenType) -> "TokenPayload":
        """토큰을 검증하고 페이로드를 반환합니다.

        Raises:
            InvalidTokenSignatureError: 서명 불일치 / 타입 불일치
            TokenExpiredError: 만료
            TokenRevokedError: 세션 없음 (로그아웃/만료 후 제거)
            SessionPersistenceError: 저장소 오류
        """
        payload = self._issuer.decode(token, expected_type)

        try:
            stored_user_id = await self._session_store.lookup(payload.jti)
        except SessionNotFoundError:
            raise TokenRevokedError(payload.jti) from None

        if stored_user_id != payload.user_id:
            logger.warning(
                "Session owner mismatch",
                extra={"jti": payload.jti, "token_user_id": payload.user_id},
            )
            raise TokenRevokedError(payload.jti)

        return payload

    async def extract(self, token: str, expected_type: TokenType) -> tuple[int, str]:
        """검증된 토큰의 (user_id, jti)를 반환합니다."""
        payload = await self.verify(token, expected_type)
        return payload.user_id, payload.jti

    async def revoke(self, jti: str) -> int:
        """세션 하나를 폐기하고 삭제된 개수를 반환합니다."""
        deleted = await self._session_store.delete(jti)
        logger.info("Token session revoked", extra={"jti": jti, "deleted": deleted})
        return deleted

    async def refresh(self, refresh_token: str) -> "TokenPair":
        """리프레시 토큰을 회전시킵니다.

        이전 refresh 세션과 짝을 이루는 access 세션을 삭제한 뒤 새 쌍을 저장합니다.
        같은 리프레시 토큰으로 두 번째 갱신을 시도하면 TokenRevokedError가 발생합니다.
        """
        payload = await self.verify(refresh_token, TokenType.REFRESH)
        return await self.rotate(payload)

    async def rotate(self, payload: "TokenPayload") -> "TokenPair":
        """검증된 refresh 페이로드로 새 쌍을 발급하고 세션을 교체합니다.

        이전 refresh 세션의 삭제 개수로 회전 권한을 판정합니다.
        동시에 같은 토큰으로 갱신하면 삭제에 성공한 한 요청만 새 쌍을 받습니다.

        Raises:
            TokenRevokedError: 이전 refresh 세션이 이미 삭제됨 (동시 갱신 포함)
        """
        # 1. 새 토큰 쌍 발급
        pair = self._issuer.issue_pair(payload.user_id)

        # 2. 기존 세션 폐기 (refresh 세션 삭제 = 회전 권한 획득)
        if await self._session_store.delete(payload.jti) == 0:
            logger.warning(
                "Refresh session already consumed",
                extra={"user_id": payload.user_id, "old_refresh_jti": payload.jti},
            )
            raise TokenRevokedError(payload.jti)
        if payload.pair_jti:
            await self._session_store.delete(payload.pair_jti)

        # 3. 새 세션 저장
        try:
            await self._session_store.save(payload.user_id, pair)
        except SessionPersistenceError:
            logger.error(
                "Session save failed after revoking previous session",
                extra={"user_id": payload.user_id, "old_refresh_jti": payload.jti},
            )
            raise

        logger.info(
            "Token pair rotated",
            extra={
                "user_id": payload.user_id,
                "old_refresh_jti": payload.jti,
                "refresh_jti": pair.refresh_uuid,
            },
        )
        return pair
