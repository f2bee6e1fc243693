"""Users ports."""

from apps.storefront.application.users.ports.action_token_store import ActionTokenStore
from apps.storefront.application.users.ports.mail_sender import MailSender
from apps.storefront.application.users.ports.password_hasher import PasswordHasher
from apps.storefront.application.users.ports.user_gateway import (
    UserCommandGateway,
    UserQueryGateway,
)

__all__ = [
    "ActionTokenStore",
    "MailSender",
    "PasswordHasher",
    "UserCommandGateway",
    "UserQueryGateway",
]
