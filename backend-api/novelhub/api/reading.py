"""
읽기 진행도 API 라우터
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from novelhub.core.database import get_db
from novelhub.schemas.reading_history import UpdateReadingProgressInput, ReadingHistoryResponse
from novelhub.services import reading_service

router = APIRouter()


@router.post("/updateReadingProgress", response_model=ReadingHistoryResponse)
async def update_reading_progress(payload: UpdateReadingProgressInput, db: AsyncSession = Depends(get_db)):
    return await reading_service.update_reading_progress(db, payload)


@router.get("/getUserReadingHistory", response_model=List[ReadingHistoryResponse])
async def get_user_reading_history(
    user_id: int = Query(...),
    limit: Optional[int] = Query(None, gt=0),
    db: AsyncSession = Depends(get_db),
):
    return await reading_service.get_user_reading_history(db, user_id, limit)
