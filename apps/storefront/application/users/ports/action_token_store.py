"""ActionTokenStore Port.

이메일 인증/비밀번호 재설정에 쓰는 짧은 수명의 일회용 토큰 저장소입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.storefront.domain.enums.action_purpose import ActionPurpose


class ActionTokenStore(Protocol):
    """일회용 토큰 저장소 인터페이스.

    구현체:
        - RedisActionTokenStore (infrastructure/persistence_redis/)
    """

    async def issue(self, purpose: "ActionPurpose", user_id: int, ttl_seconds: int) -> str:
        """새 토큰을 만들어 ttl_seconds 동안 보관하고 돌려줍니다.

        Raises:
            SessionPersistenceError: 저장소 오류
        """
        ...

    async def consume(self, purpose: "ActionPurpose", token: str) -> int | None:
        """토큰을 원자적으로 꺼내며 삭제합니다. 없거나 만료되었으면 None.

        같은 토큰을 두 번 consume하면 두 번째는 항상 None입니다.

        Raises:
            SessionPersistenceError: 저장소 오류
        """
        ...
