"""Redis persistence."""

from apps.storefront.infrastructure.persistence_redis.action_token_store_redis import (
    RedisActionTokenStore,
)
from apps.storefront.infrastructure.persistence_redis.client import get_session_redis
from apps.storefront.infrastructure.persistence_redis.session_store_redis import (
    RedisSessionStore,
)

__all__ = ["RedisActionTokenStore", "RedisSessionStore", "get_session_redis"]
