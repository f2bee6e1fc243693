"""LoggingMailSender 단위 테스트."""

import logging

import pytest

from apps.storefront.infrastructure.mail import LoggingMailSender
from apps.storefront.tests.unit.factories import create_user


class TestLoggingMailSender:
    def test_build_link_escapes_token(self) -> None:
        sender = LoggingMailSender("https://shop.test/")

        assert sender.build_link("/reset-password", "a+b/c") == (
            "https://shop.test/reset-password?token=a%2Bb%2Fc"
        )

    @pytest.mark.asyncio
    async def test_verification_link_is_logged(self, caplog) -> None:
        sender = LoggingMailSender("https://shop.test")

        with caplog.at_level(logging.INFO, logger="apps.storefront.infrastructure.mail"):
            await sender.send_email_verification(create_user(user_id=42), "tok")

        record = caplog.records[-1]
        assert record.template == "email_verification"
        assert record.user_id == 42
        assert record.action_url == "https://shop.test/verify-email?token=tok"

    @pytest.mark.asyncio
    async def test_password_reset_link_is_logged(self, caplog) -> None:
        sender = LoggingMailSender("https://shop.test")

        with caplog.at_level(logging.INFO, logger="apps.storefront.infrastructure.mail"):
            await sender.send_password_reset(create_user(user_id=42), "tok")

        assert caplog.records[-1].action_url == "https://shop.test/reset-password?token=tok"
