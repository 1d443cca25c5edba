"""
회차 관련 Pydantic 스키마
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime

from .common import reject_null


class ChapterCreate(BaseModel):
    novel_id: int
    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)
    chapter_number: int = Field(..., gt=0)
    is_published: Optional[bool] = None


class ChapterUpdate(BaseModel):
    id: int
    title: Optional[str] = Field(None, min_length=1, max_length=300)
    content: Optional[str] = Field(None, min_length=1)
    chapter_number: Optional[int] = Field(None, gt=0)
    is_published: Optional[bool] = None

    @field_validator("title", "content", "chapter_number", "is_published")
    @classmethod
    def reject_null_fields(cls, v, info):
        return reject_null(v, info)


class ChapterResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    novel_id: int
    title: str
    content: str
    chapter_number: int
    is_published: bool
    created_at: datetime
    updated_at: datetime
