from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime

from .common import reject_null


class AuthorCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    bio: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=500)


class AuthorUpdate(BaseModel):
    # bio/image_url은 null로 비울 수 있다
    id: int
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    bio: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def reject_null_fields(cls, v, info):
        return reject_null(v, info)


class AuthorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    bio: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
