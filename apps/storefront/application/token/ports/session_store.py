"""SessionStore Port.

토큰 식별자(jti) → 사용자 ID 매핑을 키별 TTL과 함께 보관합니다.
"""

from __future__ import annotations

from typing import Protocol

from apps.storefront.application.token.ports.issuer import TokenPair


class SessionStore(Protocol):
    """세션 저장소 인터페이스.

    구현체:
        - RedisSessionStore (infrastructure/persistence_redis/)
    """

    async def save(self, user_id: int, pair: TokenPair) -> None:
        """액세스/리프레시 식별자를 각 토큰 만료 시각까지 저장합니다.

        Raises:
            SessionPersistenceError: 저장소 오류
        """
        ...

    async def delete(self, jti: str) -> int:
        """식별자 하나를 삭제하고 삭제된 개수를 반환합니다 (없으면 0).

        Raises:
            SessionPersistenceError: 저장소 오류
        """
        ...

    async def lookup(self, jti: str) -> int:
        """식별자에 대응하는 사용자 ID를 반환합니다.

        Raises:
            SessionNotFoundError: 없거나 만료됨
            SessionPersistenceError: 저장소 오류
        """
        ...
