"""Redis Session Store.

SessionStore 포트의 구현체입니다.

Key layout:
    session:{jti} -> user_id (TTL = 토큰 만료 시각까지 남은 초)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Callable

from redis.exceptions import RedisError

from apps.storefront.application.common.exceptions import SessionPersistenceError
from apps.storefront.domain.exceptions.auth import SessionNotFoundError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

    from apps.storefront.application.token.ports import TokenPair

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "session:"


def session_key(jti: str) -> str:
    return f"{SESSION_KEY_PREFIX}{jti}"


class RedisSessionStore:
    """Redis 기반 세션 저장소.

    SessionStore 구현체. 같은 키에 다시 저장하면 덮어씁니다.
    """

    def __init__(
        self,
        redis: "aioredis.Redis",
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._redis = redis
        self._clock = clock

    def _ttl(self, expires_at: int) -> int:
        return max(expires_at - int(self._clock()), 1)

    async def save(self, user_id: int, pair: "TokenPair") -> None:
        """액세스/리프레시 세션을 하나의 파이프라인으로 저장."""
        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.setex(session_key(pair.access_uuid), self._ttl(pair.access_expires_at), user_id)
                pipe.setex(
                    session_key(pair.refresh_uuid), self._ttl(pair.refresh_expires_at), user_id
                )
                await pipe.execute()
        except RedisError as e:
            logger.error(
                "Session save failed",
                extra={"user_id": user_id, "error": str(e)},
            )
            raise SessionPersistenceError() from e

    async def delete(self, jti: str) -> int:
        try:
            return int(await self._redis.delete(session_key(jti)))
        except RedisError as e:
            logger.error("Session delete failed", extra={"jti": jti, "error": str(e)})
            raise SessionPersistenceError() from e

    async def lookup(self, jti: str) -> int:
        try:
            value = await self._redis.get(session_key(jti))
        except RedisError as e:
            logger.error("Session lookup failed", extra={"jti": jti, "error": str(e)})
            raise SessionPersistenceError() from e

        if value is None:
            raise SessionNotFoundError(jti)
        return int(value)
