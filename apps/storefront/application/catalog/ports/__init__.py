"""Catalog ports."""

from apps.storefront.application.catalog.ports.brand_gateway import BrandGateway
from apps.storefront.application.catalog.ports.product_gateway import (
    ProductGateway,
    ProductImageGateway,
    ProductReviewGateway,
    ProductTagGateway,
)

__all__ = [
    "BrandGateway",
    "ProductGateway",
    "ProductImageGateway",
    "ProductReviewGateway",
    "ProductTagGateway",
]
