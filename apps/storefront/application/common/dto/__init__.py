from apps.storefront.application.common.dto.pagination import Page, PageRequest

__all__ = ["Page", "PageRequest"]
