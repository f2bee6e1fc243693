"""Token domain ports.

토큰 발급/검증 및 세션 저장소 포트입니다.
"""

from apps.storefront.application.token.ports.issuer import TokenIssuer, TokenPair
from apps.storefront.application.token.ports.session_store import SessionStore

__all__ = [
    "TokenIssuer",
    "TokenPair",
    "SessionStore",
]
