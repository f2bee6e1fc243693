"""Redis Action Token Store.

ActionTokenStore 포트의 구현체입니다.

Key layout:
    action:{purpose}:{token} -> user_id (TTL = 용도별 유효 시간)
"""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from apps.storefront.application.common.exceptions import SessionPersistenceError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

    from apps.storefront.domain.enums.action_purpose import ActionPurpose

logger = logging.getLogger(__name__)

ACTION_KEY_PREFIX = "action:"
TOKEN_BYTES = 32


def action_key(purpose: "ActionPurpose", token: str) -> str:
    return f"{ACTION_KEY_PREFIX}{purpose.value}:{token}"


class RedisActionTokenStore:
    """Redis 기반 일회용 토큰 저장소.

    consume은 GETDEL 한 번으로 조회와 삭제를 함께 처리하므로
    동시에 같은 토큰을 써도 한 요청만 사용자 ID를 받습니다.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    async def issue(self, purpose: "ActionPurpose", user_id: int, ttl_seconds: int) -> str:
        token = secrets.token_urlsafe(TOKEN_BYTES)
        try:
            await self._redis.setex(action_key(purpose, token), ttl_seconds, user_id)
        except RedisError as e:
            logger.error(
                "Action token save failed",
                extra={"purpose": purpose.value, "user_id": user_id, "error": str(e)},
            )
            raise SessionPersistenceError() from e
        return token

    async def consume(self, purpose: "ActionPurpose", token: str) -> int | None:
        try:
            value = await self._redis.getdel(action_key(purpose, token))
        except RedisError as e:
            logger.error(
                "Action token consume failed",
                extra={"purpose": purpose.value, "error": str(e)},
            )
            raise SessionPersistenceError() from e
        return None if value is None else int(value)
