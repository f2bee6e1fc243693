"""TokenService 단위 테스트.

실제 JwtTokenService와 인메모리 Redis 세션 저장소를 함께 사용합니다.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.storefront.application.common.exceptions import SessionPersistenceError
from apps.storefront.application.token.services import TokenService
from apps.storefront.domain.enums.token_type import TokenType
from apps.storefront.domain.exceptions.auth import (
    InvalidTokenSignatureError,
    TokenExpiredError,
    TokenRevokedError,
)
from apps.storefront.domain.value_objects.token_payload import TokenPayload


class TestTokenService:
    """TokenService 테스트."""

    @pytest.mark.asyncio
    async def test_issue_then_extract(self, token_service: TokenService) -> None:
        """발급 직후 추출하면 같은 사용자와 jti를 돌려줍니다."""
        pair = await token_service.issue_and_save(42)

        user_id, jti = await token_service.extract(pair.access_token, TokenType.ACCESS)

        assert user_id == 42
        assert jti == pair.access_uuid

    @pytest.mark.asyncio
    async def test_access_token_expired_after_16_minutes(
        self, token_service: TokenService, clock
    ) -> None:
        pair = await token_service.issue_and_save(42)

        clock.advance(16 * 60)

        with pytest.raises(TokenExpiredError):
            await token_service.extract(pair.access_token, TokenType.ACCESS)

    @pytest.mark.asyncio
    async def test_revoked_after_session_deleted(self, token_service: TokenService) -> None:
        pair = await token_service.issue_and_save(42)

        assert await token_service.revoke(pair.access_uuid) == 1

        with pytest.raises(TokenRevokedError):
            await token_service.extract(pair.access_token, TokenType.ACCESS)

    @pytest.mark.asyncio
    async def test_revoke_absent_session_returns_zero(self, token_service: TokenService) -> None:
        assert await token_service.revoke("never-issued") == 0

    @pytest.mark.asyncio
    async def test_wrong_token_type_rejected(self, token_service: TokenService) -> None:
        pair = await token_service.issue_and_save(42)

        with pytest.raises(InvalidTokenSignatureError):
            await token_service.extract(pair.refresh_token, TokenType.ACCESS)

    @pytest.mark.asyncio
    async def test_refresh_rotates_sessions(self, token_service: TokenService) -> None:
        """갱신하면 이전 refresh와 짝 access 세션이 무효화됩니다."""
        old = await token_service.issue_and_save(42)

        new = await token_service.refresh(old.refresh_token)

        assert new.refresh_uuid != old.refresh_uuid
        assert await token_service.extract(new.access_token, TokenType.ACCESS) == (
            42,
            new.access_uuid,
        )
        with pytest.raises(TokenRevokedError):
            await token_service.extract(old.access_token, TokenType.ACCESS)
        with pytest.raises(TokenRevokedError):
            await token_service.extract(old.refresh_token, TokenType.REFRESH)

    @pytest.mark.asyncio
    async def test_second_refresh_with_same_token_fails(self, token_service: TokenService) -> None:
        old = await token_service.issue_and_save(42)
        await token_service.refresh(old.refresh_token)

        with pytest.raises(TokenRevokedError):
            await token_service.refresh(old.refresh_token)

    @pytest.mark.asyncio
    async def test_refresh_with_access_token_fails(self, token_service: TokenService) -> None:
        pair = await token_service.issue_and_save(42)

        with pytest.raises(InvalidTokenSignatureError):
            await token_service.refresh(pair.access_token)

    @pytest.mark.asyncio
    async def test_session_owner_mismatch_is_revoked(self, jwt_service) -> None:
        store = AsyncMock()
        store.lookup.return_value = 7
        service = TokenService(issuer=jwt_service, session_store=store)
        pair = jwt_service.issue_pair(42)

        with pytest.raises(TokenRevokedError):
            await service.extract(pair.access_token, TokenType.ACCESS)

    @pytest.mark.asyncio
    async def test_issue_fails_when_session_save_fails(self, jwt_service) -> None:
        store = AsyncMock()
        store.save.side_effect = SessionPersistenceError()
        service = TokenService(issuer=jwt_service, session_store=store)

        with pytest.raises(SessionPersistenceError):
            await service.issue_and_save(42)

    @pytest.mark.asyncio
    async def test_rotate_surfaces_save_failure_after_delete(self) -> None:
        issuer = MagicMock()
        issuer.issue_pair.return_value = MagicMock(refresh_uuid="new-refresh")
        store = AsyncMock()
        store.delete.return_value = 1
        store.save.side_effect = SessionPersistenceError()
        service = TokenService(issuer=issuer, session_store=store)
        payload = TokenPayload(
            user_id=42,
            jti="old-refresh",
            token_type=TokenType.REFRESH,
            exp=2_000_000_000,
            iat=1_700_000_000,
            pair_jti="old-access",
        )

        with pytest.raises(SessionPersistenceError):
            await service.rotate(payload)

        deleted = [call.args[0] for call in store.delete.await_args_list]
        assert deleted == ["old-refresh", "old-access"]

    @pytest.mark.asyncio
    async def test_rotate_rejects_already_consumed_refresh_session(self) -> None:
        """이전 refresh 세션 삭제 개수가 0이면 새 쌍을 저장하지 않습니다."""
        issuer = MagicMock()
        store = AsyncMock()
        store.delete.return_value = 0
        service = TokenService(issuer=issuer, session_store=store)
        payload = TokenPayload(
            user_id=42,
            jti="old-refresh",
            token_type=TokenType.REFRESH,
            exp=2_000_000_000,
            iat=1_700_000_000,
            pair_jti="old-access",
        )

        with pytest.raises(TokenRevokedError):
            await service.rotate(payload)

        store.save.assert_not_awaited()
        store.delete.assert_awaited_once_with("old-refresh")


class TestConcurrentRefresh:
    """같은 리프레시 토큰으로 동시에 갱신하는 경우."""

    @pytest.mark.asyncio
    async def test_only_one_concurrent_refresh_succeeds(
        self, token_service: TokenService, fake_redis
    ) -> None:
        """두 요청이 모두 조회를 통과해도 하나만 새 쌍을 받습니다."""
        original_get = fake_redis.get

        async def interleaving_get(key: str):
            value = await original_get(key)
            await asyncio.sleep(0)
            return value

        fake_redis.get = interleaving_get
        old = await token_service.issue_and_save(42)

        results = await asyncio.gather(
            token_service.refresh(old.refresh_token),
            token_service.refresh(old.refresh_token),
            return_exceptions=True,
        )

        pairs = [r for r in results if not isinstance(r, BaseException)]
        failures = [r for r in results if isinstance(r, BaseException)]
        assert len(pairs) == 1
        assert len(failures) == 1
        assert isinstance(failures[0], TokenRevokedError)
        assert await token_service.extract(pairs[0].refresh_token, TokenType.REFRESH) == (
            42,
            pairs[0].refresh_uuid,
        )
