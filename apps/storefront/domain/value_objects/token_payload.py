"""Token Payload Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.storefront.domain.enums.token_type import TokenType


@dataclass(frozen=True, slots=True)
class TokenPayload:
    """서명 검증이 끝난 토큰 클레임.

    Attributes:
        user_id: 토큰 소유자 (sub)
        jti: 토큰 식별자. 세션 저장소의 키로 사용됩니다.
        token_type: access / refresh
        exp: 만료 시각 (Unix timestamp)
        iat: 발급 시각 (Unix timestamp)
        pair_jti: 리프레시 토큰에만 존재. 함께 발급된 액세스 토큰의 jti
    """

    user_id: int
    jti: str
    token_type: TokenType
    exp: int
    iat: int
    pair_jti: str | None = None

    def is_expired(self, now: int) -> bool:
        return self.exp <= now
