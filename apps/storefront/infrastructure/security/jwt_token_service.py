"""JWT Token Service.

TokenIssuer 포트의 구현체입니다.
액세스/리프레시 토큰은 서로 다른 비밀키로 서명합니다.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import timedelta
from typing import Any, Callable

from jose import JOSEError, jwt

from apps.storefront.application.token.exceptions import TokenSigningError
from apps.storefront.application.token.ports import TokenPair
from apps.storefront.domain.enums.token_type import TokenType
from apps.storefront.domain.exceptions.auth import (
    InvalidTokenSignatureError,
    TokenExpiredError,
)
from apps.storefront.domain.value_objects.token_payload import TokenPayload

logger = logging.getLogger(__name__)


class JwtTokenService:
    """JWT 토큰 서비스.

    TokenIssuer 구현체.

    만료 검증은 jose에 맡기지 않고 주입된 clock으로 직접 수행합니다.
    """

    def __init__(
        self,
        *,
        access_secret: str,
        refresh_secret: str,
        algorithm: str = "HS256",
        issuer: str = "storefront-api",
        access_token_expire_minutes: int = 15,
        refresh_token_expire_minutes: int = 10080,  # 7일
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._secrets = {
            TokenType.ACCESS: access_secret,
            TokenType.REFRESH: refresh_secret,
        }
        self._algorithm = algorithm
        self._issuer = issuer
        self._expires = {
            TokenType.ACCESS: timedelta(minutes=access_token_expire_minutes),
            TokenType.REFRESH: timedelta(minutes=refresh_token_expire_minutes),
        }
        self._clock = clock

    def now(self) -> int:
        return int(self._clock())

    def _create_token(
        self,
        *,
        user_id: int,
        token_type: TokenType,
        jti: str,
        pair_jti: str | None = None,
    ) -> tuple[str, int]:
        now = self.now()
        expires_at = now + int(self._expires[token_type].total_seconds())

        payload: dict[str, Any] = {
            "sub": str(user_id),
            "jti": jti,
            "type": token_type.value,
            "exp": expires_at,
            "iat": now,
            "iss": self._issuer,
        }
        if pair_jti is not None:
            payload["pair"] = pair_jti

        try:
            token = jwt.encode(payload, self._secrets[token_type], algorithm=self._algorithm)
        except (JOSEError, TypeError, ValueError) as e:
            logger.error(
                "Token signing failed",
                extra={"token_type": token_type.value, "algorithm": self._algorithm},
            )
            raise TokenSigningError(str(e)) from e
        return token, expires_at

    def issue_pair(self, user_id: int) -> TokenPair:
        """토큰 쌍 발급. 리프레시 토큰에는 짝 액세스 토큰의 jti가 담깁니다."""
        access_jti = str(uuid.uuid4())
        refresh_jti = str(uuid.uuid4())

        access_token, access_exp = self._create_token(
            user_id=user_id,
            token_type=TokenType.ACCESS,
            jti=access_jti,
        )
        refresh_token, refresh_exp = self._create_token(
            user_id=user_id,
            token_type=TokenType.REFRESH,
            jti=refresh_jti,
            pair_jti=access_jti,
        )
        return TokenPair(
            access_token=access_token,
            access_uuid=access_jti,
            access_expires_at=access_exp,
            refresh_token=refresh_token,
            refresh_uuid=refresh_jti,
            refresh_expires_at=refresh_exp,
        )

    def decode(self, token: str, expected_type: TokenType) -> TokenPayload:
        """토큰 디코딩 및 검증 (서명 → 타입 → 만료)."""
        try:
            claims = jwt.decode(
                token,
                self._secrets[expected_type],
                algorithms=[self._algorithm],
                issuer=self._issuer,
                options={"verify_exp": False},
            )
        except JOSEError as e:
            raise InvalidTokenSignatureError(str(e)) from e

        try:
            payload = TokenPayload(
                user_id=int(claims["sub"]),
                jti=str(claims["jti"]),
                token_type=TokenType(claims["type"]),
                exp=int(claims["exp"]),
                iat=int(claims["iat"]),
                pair_jti=claims.get("pair"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenSignatureError("Malformed token claims") from e

        if payload.token_type != expected_type:
            raise InvalidTokenSignatureError(
                f"Expected {expected_type.value} token, got {payload.token_type.value}"
            )
        if payload.is_expired(self.now()):
            raise TokenExpiredError()
        return payload
