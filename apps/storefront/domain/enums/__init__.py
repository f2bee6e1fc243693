from apps.storefront.domain.enums.action_purpose import ActionPurpose
from apps.storefront.domain.enums.token_type import TokenType
from apps.storefront.domain.enums.user_role import UserRole

__all__ = ["ActionPurpose", "TokenType", "UserRole"]
