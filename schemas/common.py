"""
schemas/common.py

공용 응답 스키마
- ErrorResponse: middlewares/error_handler.py 가 모든 실패 응답을 이 형태로 직렬화
  {"success": false, "error": {"code", "message"}, "generated_at"}
- Pagination / PageMeta: 학생 목록 등 페이징 조회
"""

from __future__ import annotations

from datetime import datetime, timezone
from math import ceil
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    code: str = Field(..., description="INVALID_INPUT, NOT_FOUND, IMPORT_MAPPING_ERROR, VALIDATION_ERROR ...")
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorDetail
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Pagination(BaseModel):
    """쿼리 파라미터 ?page=1&size=50 (Depends()로 주입)"""
    page: int = Field(1, ge=1)
    size: int = Field(50, ge=1, le=200)

    model_config = ConfigDict(extra="ignore")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


class PageMeta(BaseModel):
    total: int = Field(..., ge=0)
    page: int
    size: int
    pages: int
    has_next: bool
    sort: Optional[str] = None


def page_meta(total: int, p: Pagination, sort: Optional[str] = None) -> PageMeta:
    # 결과가 없어도 pages 는 1
    pages = max(1, ceil(total / p.size))
    return PageMeta(
        total=total,
        page=p.page,
        size=p.size,
        pages=pages,
        has_next=p.page < pages,
        sort=sort,
    )
