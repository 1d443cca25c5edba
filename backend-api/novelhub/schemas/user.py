"""
사용자 관련 Pydantic 스키마
"""

from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime

from .common import reject_null


class UserCreate(BaseModel):
    """사용자 생성 스키마"""
    email: EmailStr
    username: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=6, max_length=100)
    is_admin: Optional[bool] = None


class UserUpdate(BaseModel):
    """사용자 업데이트 스키마 (관리자용, 패스워드 변경 없음)"""
    id: int
    email: Optional[EmailStr] = None
    username: Optional[str] = Field(None, min_length=3, max_length=100)
    is_admin: Optional[bool] = None

    @field_validator("email", "username", "is_admin")
    @classmethod
    def reject_null_fields(cls, v, info):
        return reject_null(v, info)


class UserResponse(BaseModel):
    """사용자 응답 스키마 (password_hash 미노출)"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    username: str
    is_admin: bool
    created_at: datetime
    updated_at: datetime
