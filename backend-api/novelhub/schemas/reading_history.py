from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime


class UpdateReadingProgressInput(BaseModel):
    user_id: int
    novel_id: int
    chapter_id: int
    progress_percentage: float = Field(..., ge=0, le=100)


class ReadingHistoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    novel_id: int
    chapter_id: int
    progress_percentage: float
    last_read_at: datetime
