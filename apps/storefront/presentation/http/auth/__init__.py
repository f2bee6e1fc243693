"""Auth helpers for HTTP layer."""

from apps.storefront.presentation.http.auth.cookie_params import (
    clear_auth_cookies,
    set_auth_cookies,
)
from apps.storefront.presentation.http.auth.dependencies import (
    get_access_token,
    get_current_session,
    require_admin,
)

__all__ = [
    "clear_auth_cookies",
    "get_access_token",
    "get_current_session",
    "require_admin",
    "set_auth_cookies",
]
