"""Users commands."""

from apps.storefront.application.users.commands.avatar import (
    RemoveAvatarInteractor,
    UploadAvatarInteractor,
)
from apps.storefront.application.users.commands.change_password import ChangePasswordInteractor
from apps.storefront.application.users.commands.delete_user import DeleteUserInteractor
from apps.storefront.application.users.commands.email_verification import (
    SendVerificationEmailInteractor,
    VerifyEmailInteractor,
)
from apps.storefront.application.users.commands.login import LoginInteractor
from apps.storefront.application.users.commands.password_reset import (
    ResetPasswordInteractor,
    SendPasswordResetInteractor,
)
from apps.storefront.application.users.commands.register import RegisterUserInteractor
from apps.storefront.application.users.commands.update_profile import UpdateProfileInteractor

__all__ = [
    "ChangePasswordInteractor",
    "DeleteUserInteractor",
    "LoginInteractor",
    "RegisterUserInteractor",
    "RemoveAvatarInteractor",
    "ResetPasswordInteractor",
    "SendPasswordResetInteractor",
    "SendVerificationEmailInteractor",
    "UpdateProfileInteractor",
    "UploadAvatarInteractor",
    "VerifyEmailInteractor",
]
