"""Catalog DTOs."""

from apps.storefront.application.catalog.dto.catalog import (
    BrandInput,
    BrandPatch,
    FileUpload,
    ProductDetails,
    ProductInput,
    ProductPatch,
    ReviewInput,
)

__all__ = [
    "BrandInput",
    "BrandPatch",
    "FileUpload",
    "ProductDetails",
    "ProductInput",
    "ProductPatch",
    "ReviewInput",
]
