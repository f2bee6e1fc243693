"""TokenIssuer Port.

토큰 발급/검증을 위한 Gateway 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from apps.storefront.domain.enums.token_type import TokenType
from apps.storefront.domain.value_objects.token_payload import TokenPayload


@dataclass(frozen=True, slots=True)
class TokenPair:
    """액세스/리프레시 토큰 쌍. 발급 후 변경되지 않으며 갱신 시 새 쌍으로 대체됩니다."""

    access_token: str
    access_uuid: str
    access_expires_at: int
    refresh_token: str
    refresh_uuid: str
    refresh_expires_at: int


class TokenIssuer(Protocol):
    """토큰 발급자 인터페이스.

    구현체:
        - JwtTokenService (infrastructure/security/)
    """

    def issue_pair(self, user_id: int) -> TokenPair:
        """액세스/리프레시 토큰 쌍 발급.

        Raises:
            TokenSigningError: 서명 실패
        """
        ...

    def decode(self, token: str, expected_type: TokenType) -> TokenPayload:
        """서명, 토큰 타입, 만료 시각을 검증하고 클레임을 반환합니다.

        Raises:
            InvalidTokenSignatureError: 서명 불일치 / 형식 오류 / 타입 불일치
            TokenExpiredError: 만료된 토큰
        """
        ...

    def now(self) -> int:
        """발급/검증에 사용하는 현재 시각 (Unix timestamp)."""
        ...
