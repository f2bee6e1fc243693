"""Redis Client Provider.

세션 저장소용 비동기 Redis 클라이언트를 만듭니다.

Connection settings:
    - health_check_interval: 30초마다 연결 상태 확인
    - socket_keepalive: 유휴 연결 끊김 방지
    - max_connections: 연결 풀 크기 제한
    - 재시도 없음: 저장소 오류는 SessionPersistenceError로 즉시 올라갑니다
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff

if TYPE_CHECKING:
    import redis.asyncio as aioredis

HEALTH_CHECK_INTERVAL = 30  # seconds
MAX_CONNECTIONS = 50
SOCKET_CONNECT_TIMEOUT = 5.0  # seconds
SOCKET_TIMEOUT = 5.0  # seconds


def build_async_client(redis_url: str) -> "aioredis.Redis":
    """비동기 Redis 클라이언트 생성."""
    import redis.asyncio as aioredis

    return aioredis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
        # Health & Keepalive
        health_check_interval=HEALTH_CHECK_INTERVAL,
        socket_keepalive=True,
        # Timeouts
        socket_connect_timeout=SOCKET_CONNECT_TIMEOUT,
        socket_timeout=SOCKET_TIMEOUT,
        # Connection Pool
        max_connections=MAX_CONNECTIONS,
        # Fail fast
        retry=Retry(NoBackoff(), retries=0),
    )


@lru_cache(maxsize=None)
def get_client(redis_url: str) -> "aioredis.Redis":
    """URL별로 한 번만 만든 클라이언트를 돌려줍니다 (연결 풀 공유)."""
    return build_async_client(redis_url)


def get_session_redis() -> "aioredis.Redis":
    """세션 저장용 Redis 클라이언트.

    환경변수:
        - STOREFRONT_REDIS_SESSION_URL (default: redis://localhost:6379/0)
    """
    from apps.storefront.setup.config.settings import get_settings

    return get_client(get_settings().redis_session_url)
