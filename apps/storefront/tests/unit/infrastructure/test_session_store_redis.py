"""Redis Session Store 단위 테스트.

저장/조회/삭제 동작은 인메모리 Redis 대역으로, 오류 변환은 AsyncMock으로 테스트합니다.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from apps.storefront.application.common.exceptions import SessionPersistenceError
from apps.storefront.application.token.ports import TokenPair
from apps.storefront.domain.exceptions.auth import SessionNotFoundError
from apps.storefront.infrastructure.persistence_redis.session_store_redis import (
    RedisSessionStore,
    session_key,
)


def make_pair(now: int) -> TokenPair:
    return TokenPair(
        access_token="access",
        access_uuid="access-jti",
        access_expires_at=now + 900,
        refresh_token="refresh",
        refresh_uuid="refresh-jti",
        refresh_expires_at=now + 604800,
    )


class TestRedisSessionStore:
    """RedisSessionStore 테스트."""

    @pytest.mark.asyncio
    async def test_save_and_lookup(self, session_store: RedisSessionStore, clock) -> None:
        pair = make_pair(int(clock()))

        await session_store.save(42, pair)

        assert await session_store.lookup("access-jti") == 42
        assert await session_store.lookup("refresh-jti") == 42

    @pytest.mark.asyncio
    async def test_save_sets_ttl_until_expiry(
        self, session_store: RedisSessionStore, fake_redis, clock
    ) -> None:
        await session_store.save(42, make_pair(int(clock())))

        assert fake_redis.ttl_of(session_key("access-jti")) == pytest.approx(900)
        assert fake_redis.ttl_of(session_key("refresh-jti")) == pytest.approx(604800)

    @pytest.mark.asyncio
    async def test_entry_disappears_after_ttl(self, session_store: RedisSessionStore, clock) -> None:
        await session_store.save(42, make_pair(int(clock())))

        clock.advance(901)

        with pytest.raises(SessionNotFoundError):
            await session_store.lookup("access-jti")
        assert await session_store.lookup("refresh-jti") == 42

    @pytest.mark.asyncio
    async def test_delete_returns_count(self, session_store: RedisSessionStore, clock) -> None:
        await session_store.save(42, make_pair(int(clock())))

        assert await session_store.delete("access-jti") == 1
        # 이미 없는 키 삭제는 오류가 아닙니다
        assert await session_store.delete("access-jti") == 0

    @pytest.mark.asyncio
    async def test_lookup_missing(self, session_store: RedisSessionStore) -> None:
        with pytest.raises(SessionNotFoundError):
            await session_store.lookup("unknown")

    @pytest.mark.asyncio
    async def test_save_overwrites(self, session_store: RedisSessionStore, clock) -> None:
        pair = make_pair(int(clock()))
        await session_store.save(42, pair)
        await session_store.save(43, pair)

        assert await session_store.lookup("access-jti") == 43

    @pytest.mark.asyncio
    async def test_redis_errors_become_persistence_errors(self, clock) -> None:
        redis = AsyncMock()
        redis.get.side_effect = RedisConnectionError("down")
        redis.delete.side_effect = RedisConnectionError("down")
        store = RedisSessionStore(redis, clock=clock)

        with pytest.raises(SessionPersistenceError):
            await store.lookup("access-jti")
        with pytest.raises(SessionPersistenceError):
            await store.delete("access-jti")

    @pytest.mark.asyncio
    async def test_save_pipeline_error(self, clock) -> None:
        pipe = MagicMock()
        pipe.__aenter__ = AsyncMock(return_value=pipe)
        pipe.__aexit__ = AsyncMock(return_value=False)
        pipe.execute = AsyncMock(side_effect=RedisConnectionError("down"))
        redis = MagicMock()
        redis.pipeline.return_value = pipe
        store = RedisSessionStore(redis, clock=clock)

        with pytest.raises(SessionPersistenceError):
            await store.save(42, make_pair(int(clock())))
        assert pipe.setex.call_count == 2
