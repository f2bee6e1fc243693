from apps.storefront.domain.entities.address import Address
from apps.storefront.domain.entities.brand import Brand
from apps.storefront.domain.entities.product import (
    Product,
    ProductImage,
    ProductReview,
    ProductTag,
)
from apps.storefront.domain.entities.user import User

__all__ = [
    "Address",
    "Brand",
    "Product",
    "ProductImage",
    "ProductReview",
    "ProductTag",
    "User",
]
