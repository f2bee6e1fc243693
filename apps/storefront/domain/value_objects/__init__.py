from apps.storefront.domain.value_objects.email import Email, normalize_email
from apps.storefront.domain.value_objects.token_payload import TokenPayload

__all__ = ["Email", "TokenPayload", "normalize_email"]
