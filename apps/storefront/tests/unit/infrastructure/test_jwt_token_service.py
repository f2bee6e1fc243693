"""JWT Token Service 단위 테스트.

JwtTokenService의 토큰 발급/검증 로직을 테스트합니다.
시계는 FakeClock으로 주입합니다.
"""

import pytest
from jose import JWTError, jwt

from apps.storefront.application.token.exceptions import TokenSigningError
from apps.storefront.domain.enums.token_type import TokenType
from apps.storefront.domain.exceptions.auth import (
    InvalidTokenSignatureError,
    TokenExpiredError,
)
from apps.storefront.infrastructure.security.jwt_token_service import JwtTokenService


class TestJwtTokenService:
    """JwtTokenService 테스트."""

    def test_issue_pair(self, jwt_service: JwtTokenService, clock) -> None:
        """토큰 쌍 발급 테스트."""
        # Act
        pair = jwt_service.issue_pair(42)

        # Assert
        assert pair.access_uuid != pair.refresh_uuid
        assert pair.access_expires_at == int(clock()) + 15 * 60
        assert pair.refresh_expires_at == int(clock()) + 7 * 24 * 3600
        assert pair.access_token != pair.refresh_token

    def test_decode_access_token(self, jwt_service: JwtTokenService) -> None:
        pair = jwt_service.issue_pair(42)

        payload = jwt_service.decode(pair.access_token, TokenType.ACCESS)

        assert payload.user_id == 42
        assert payload.jti == pair.access_uuid
        assert payload.token_type == TokenType.ACCESS
        assert payload.pair_jti is None

    def test_refresh_token_carries_pair_jti(self, jwt_service: JwtTokenService) -> None:
        pair = jwt_service.issue_pair(42)

        payload = jwt_service.decode(pair.refresh_token, TokenType.REFRESH)

        assert payload.jti == pair.refresh_uuid
        assert payload.pair_jti == pair.access_uuid

    def test_tokens_signed_with_distinct_secrets(self, jwt_service: JwtTokenService) -> None:
        """액세스/리프레시 토큰은 서로 다른 키로 서명됩니다."""
        pair = jwt_service.issue_pair(42)

        claims = jwt.decode(
            pair.access_token,
            "test-access-secret",
            algorithms=["HS256"],
            options={"verify_exp": False, "verify_iss": False},
        )
        assert claims["type"] == "access"
        assert claims["sub"] == "42"

        with pytest.raises(JWTError):
            jwt.decode(
                pair.refresh_token,
                "test-access-secret",
                algorithms=["HS256"],
                options={"verify_exp": False},
            )

    def test_refresh_token_rejected_as_access(self, jwt_service: JwtTokenService) -> None:
        """리프레시 토큰은 액세스 토큰 자리에서 거부됩니다."""
        pair = jwt_service.issue_pair(42)

        with pytest.raises(InvalidTokenSignatureError):
            jwt_service.decode(pair.refresh_token, TokenType.ACCESS)
        with pytest.raises(InvalidTokenSignatureError):
            jwt_service.decode(pair.access_token, TokenType.REFRESH)

    def test_decode_invalid_token(self, jwt_service: JwtTokenService) -> None:
        with pytest.raises(InvalidTokenSignatureError):
            jwt_service.decode("invalid-token-string", TokenType.ACCESS)

    def test_decode_tampered_token(self, jwt_service: JwtTokenService) -> None:
        """변조된 토큰 디코딩 실패 테스트."""
        pair = jwt_service.issue_pair(42)
        header, body, _ = pair.access_token.split(".")

        with pytest.raises(InvalidTokenSignatureError):
            jwt_service.decode(f"{header}.{body}.tampered_signature_abc123", TokenType.ACCESS)

    def test_decode_wrong_secret(self, jwt_service: JwtTokenService, clock) -> None:
        pair = jwt_service.issue_pair(42)
        other = JwtTokenService(
            access_secret="different",
            refresh_secret="different-refresh",
            issuer="test-issuer",
            clock=clock,
        )

        with pytest.raises(InvalidTokenSignatureError):
            other.decode(pair.access_token, TokenType.ACCESS)

    def test_access_token_expires_after_ttl(self, jwt_service: JwtTokenService, clock) -> None:
        """16분 후 액세스 토큰은 만료됩니다."""
        pair = jwt_service.issue_pair(42)

        clock.advance(16 * 60)

        with pytest.raises(TokenExpiredError):
            jwt_service.decode(pair.access_token, TokenType.ACCESS)
        # 리프레시 토큰은 아직 유효
        assert jwt_service.decode(pair.refresh_token, TokenType.REFRESH).user_id == 42

    def test_token_valid_just_before_expiry(self, jwt_service: JwtTokenService, clock) -> None:
        pair = jwt_service.issue_pair(42)

        clock.advance(15 * 60 - 1)

        assert jwt_service.decode(pair.access_token, TokenType.ACCESS).user_id == 42

    def test_signing_failure(self, clock) -> None:
        """지원하지 않는 알고리즘이면 TokenSigningError."""
        service = JwtTokenService(
            access_secret="a",
            refresh_secret="b",
            algorithm="NOT-AN-ALGORITHM",
            clock=clock,
        )

        with pytest.raises(TokenSigningError):
            service.issue_pair(42)
