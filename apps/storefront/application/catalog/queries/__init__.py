"""Catalog queries."""

from apps.storefront.application.catalog.queries.brands import GetBrandQuery, ListBrandsQuery
from apps.storefront.application.catalog.queries.products import (
    GetProductImageQuery,
    GetProductPropertiesQuery,
    GetProductQuery,
    GetProductTagQuery,
    ListProductChildrenQuery,
    ListProductsQuery,
)

__all__ = [
    "GetBrandQuery",
    "GetProductImageQuery",
    "GetProductPropertiesQuery",
    "GetProductQuery",
    "GetProductTagQuery",
    "ListBrandsQuery",
    "ListProductChildrenQuery",
    "ListProductsQuery",
]
