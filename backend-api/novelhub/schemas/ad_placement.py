"""
광고 배치 관련 Pydantic 스키마
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime

from .common import AdPlacementType, reject_null


class AdPlacementCreate(BaseModel):
    """광고 배치 생성 요청 (is_active 생략 시 활성)"""
    name: str = Field(..., min_length=1, max_length=200)
    placement_type: AdPlacementType
    ad_script: str = Field(..., min_length=1)
    is_active: Optional[bool] = None


class AdPlacementUpdate(BaseModel):
    """광고 배치 수정 요청"""
    id: int
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    placement_type: Optional[AdPlacementType] = None
    ad_script: Optional[str] = Field(None, min_length=1)
    is_active: Optional[bool] = None

    @field_validator("name", "placement_type", "ad_script", "is_active")
    @classmethod
    def reject_null_fields(cls, v, info):
        return reject_null(v, info)


class AdPlacementResponse(BaseModel):
    """광고 배치 응답"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    placement_type: AdPlacementType
    ad_script: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
