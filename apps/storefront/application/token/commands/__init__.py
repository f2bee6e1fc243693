"""Token commands."""

from apps.storefront.application.token.commands.logout import LogoutInteractor
from apps.storefront.application.token.commands.refresh import RefreshTokensInteractor

__all__ = ["LogoutInteractor", "RefreshTokensInteractor"]
