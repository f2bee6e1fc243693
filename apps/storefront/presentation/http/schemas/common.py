"""Common HTTP schemas."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class PageMeta(BaseModel):
    page: int = Field(..., description="현재 페이지 (1부터)")
    per_page: int = Field(..., description="페이지 크기")
    total_count: int = Field(..., description="전체 개수")
    page_count: int = Field(..., description="전체 페이지 수")


class PageResponse(BaseModel, Generic[DataT]):
    """페이지네이션 응답 래퍼."""

    data: list[DataT] = Field(..., description="현재 페이지 항목")
    meta: PageMeta


class MessageResponse(BaseModel):
    message: str = Field(default="success", description="결과 메시지")
