"""Logging Mail Sender.

MailSender 구현체. 메일을 보내는 대신 사용자가 열어야 할 링크를 로그로 남깁니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlencode

if TYPE_CHECKING:
    from apps.storefront.domain.entities.user import User

logger = logging.getLogger(__name__)

VERIFY_EMAIL_PATH = "/verify-email"
RESET_PASSWORD_PATH = "/reset-password"


class LoggingMailSender:
    def __init__(self, frontend_base_url: str) -> None:
        self._base_url = frontend_base_url.rstrip("/")

    def build_link(self, path: str, token: str) -> str:
        return f"{self._base_url}{path}?{urlencode({'token': token})}"

    async def send_email_verification(self, user: "User", token: str) -> None:
        self._log("email_verification", user, self.build_link(VERIFY_EMAIL_PATH, token))

    async def send_password_reset(self, user: "User", token: str) -> None:
        self._log("password_reset", user, self.build_link(RESET_PASSWORD_PATH, token))

    def _log(self, template: str, user: "User", link: str) -> None:
        logger.info(
            "Account email rendered",
            extra={
                "template": template,
                "user_id": user.id,
                "locale": user.locale,
                "action_url": link,
            },
        )
