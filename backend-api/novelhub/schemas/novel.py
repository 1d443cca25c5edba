"""
소설 관련 Pydantic 스키마
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional
from datetime import datetime

from .common import NovelStatus, reject_null


class NovelCreate(BaseModel):
    """소설 생성 요청 (total_chapters/total_views는 입력받지 않는다)"""
    title: str = Field(..., min_length=1, max_length=300)
    description: str = Field(..., min_length=1)
    author_id: int
    cover_image_url: Optional[str] = Field(None, max_length=500)
    status: NovelStatus
    is_featured: Optional[bool] = None
    genre_ids: Optional[List[int]] = None


class NovelUpdate(BaseModel):
    """
    소설 수정 요청
    - genre_ids 생략: 기존 장르 유지
    - genre_ids 지정: 전체 교체 ([]이면 모두 해제)
    """
    id: int
    title: Optional[str] = Field(None, min_length=1, max_length=300)
    description: Optional[str] = Field(None, min_length=1)
    author_id: Optional[int] = None
    cover_image_url: Optional[str] = Field(None, max_length=500)
    status: Optional[NovelStatus] = None
    is_featured: Optional[bool] = None
    genre_ids: Optional[List[int]] = None

    @field_validator("title", "description", "author_id", "status", "is_featured", "genre_ids")
    @classmethod
    def reject_null_fields(cls, v, info):
        return reject_null(v, info)


class NovelResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    author_id: int
    cover_image_url: Optional[str] = None
    status: NovelStatus
    is_featured: bool
    total_chapters: int
    total_views: int
    created_at: datetime
    updated_at: datetime


class SearchNovelsInput(BaseModel):
    """소설 검색 조건 (모두 선택, 지정된 조건은 AND 결합)"""
    query: Optional[str] = None
    genre_ids: Optional[List[int]] = None
    status: Optional[NovelStatus] = None
    author_id: Optional[int] = None
    limit: Optional[int] = Field(None, gt=0)
    offset: Optional[int] = Field(None, ge=0)
