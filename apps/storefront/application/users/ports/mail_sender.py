"""MailSender Port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.storefront.domain.entities.user import User


class MailSender(Protocol):
    """계정 메일 발송 인터페이스.

    구현체:
        - LoggingMailSender (infrastructure/mail/): 실제 발송 없이 링크를 로그로 남김
    """

    async def send_email_verification(self, user: "User", token: str) -> None:
        ...

    async def send_password_reset(self, user: "User", token: str) -> None:
        ...
