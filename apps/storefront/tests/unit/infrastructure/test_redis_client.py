"""Redis Client Provider 테스트.

from_url은 연결을 열지 않으므로 실제 Redis 없이 확인합니다.
"""

import pytest

from apps.storefront.infrastructure.persistence_redis import client as redis_client


@pytest.fixture(autouse=True)
def _clear_cache():
    redis_client.get_client.cache_clear()
    yield
    redis_client.get_client.cache_clear()


class TestGetClient:
    def test_same_url_returns_same_client(self) -> None:
        first = redis_client.get_client("redis://localhost:6379/1")
        second = redis_client.get_client("redis://localhost:6379/1")

        assert first is second

    def test_each_url_gets_its_own_client(self) -> None:
        sessions = redis_client.get_client("redis://localhost:6379/1")
        other = redis_client.get_client("redis://localhost:6379/2")

        assert sessions is not other
        assert sessions.connection_pool.connection_kwargs["db"] == 1
        assert other.connection_pool.connection_kwargs["db"] == 2

    def test_session_redis_uses_configured_url(self, monkeypatch) -> None:
        from apps.storefront.setup.config import settings as settings_module

        monkeypatch.setattr(
            settings_module,
            "get_settings",
            lambda: settings_module.Settings(redis_session_url="redis://localhost:6379/3"),
        )

        session_redis = redis_client.get_session_redis()

        assert session_redis is redis_client.get_client("redis://localhost:6379/3")
