"""Pagination DTOs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PER_PAGE = 50
MAX_PER_PAGE = 100


@dataclass(frozen=True, slots=True)
class PageRequest:
    """1부터 시작하는 페이지 요청. 범위를 벗어난 값은 보정됩니다."""

    page: int = 1
    per_page: int = DEFAULT_PER_PAGE

    @classmethod
    def of(cls, page: int | None, per_page: int | None) -> "PageRequest":
        page = page if page and page > 0 else 1
        if not per_page or per_page <= 0:
            per_page = DEFAULT_PER_PAGE
        return cls(page=page, per_page=min(per_page, MAX_PER_PAGE))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    items: Sequence[T]
    page: int
    per_page: int
    total_count: int

    @property
    def page_count(self) -> int:
        if self.total_count == 0:
            return 0
        return math.ceil(self.total_count / self.per_page)
