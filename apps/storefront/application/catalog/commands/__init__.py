"""Catalog commands."""

from apps.storefront.application.catalog.commands.brands import (
    CreateBrandInteractor,
    DeleteBrandInteractor,
    UpdateBrandInteractor,
)
from apps.storefront.application.catalog.commands.product_children import (
    CreateReviewInteractor,
    DeleteProductImageInteractor,
    DeleteProductTagInteractor,
    ReplaceProductImageInteractor,
    UpdateProductTagInteractor,
)
from apps.storefront.application.catalog.commands.products import (
    CreateProductInteractor,
    DeleteProductInteractor,
    UpdateProductInteractor,
)

__all__ = [
    "CreateBrandInteractor",
    "CreateProductInteractor",
    "CreateReviewInteractor",
    "DeleteBrandInteractor",
    "DeleteProductImageInteractor",
    "DeleteProductInteractor",
    "DeleteProductTagInteractor",
    "ReplaceProductImageInteractor",
    "UpdateBrandInteractor",
    "UpdateProductInteractor",
    "UpdateProductTagInteractor",
]
