"""
회차 관련 API 라우터
"""

from fastapi import APIRouter, Depends, Body, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from novelhub.core.database import get_db
from novelhub.core.security import require_admin
from novelhub.schemas.common import SuccessResponse
from novelhub.schemas.chapter import ChapterCreate, ChapterUpdate, ChapterResponse
from novelhub.services import chapter_service

router = APIRouter()


@router.post("/createChapter", response_model=ChapterResponse, dependencies=[Depends(require_admin)])
async def create_chapter(chapter_data: ChapterCreate, db: AsyncSession = Depends(get_db)):
    return await chapter_service.create_chapter(db, chapter_data)


@router.get("/getChapters", response_model=List[ChapterResponse])
async def get_chapters(
    novel_id: int = Query(...),
    published_only: bool = Query(False),
    db: AsyncSession = Depends(get_db),
):
    return await chapter_service.get_chapters(db, novel_id, published_only)


@router.get("/getChapterById", response_model=Optional[ChapterResponse])
async def get_chapter_by_id(id: int = Query(...), db: AsyncSession = Depends(get_db)):
    """회차 열람 (소설 조회수 +1, 없으면 null)"""
    return await chapter_service.get_chapter_for_reading(db, id)


@router.post("/updateChapter", response_model=ChapterResponse, dependencies=[Depends(require_admin)])
async def update_chapter(chapter_data: ChapterUpdate, db: AsyncSession = Depends(get_db)):
    return await chapter_service.update_chapter(db, chapter_data)


@router.post("/deleteChapter", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
async def delete_chapter(id: int = Body(...), db: AsyncSession = Depends(get_db)):
    return {"success": await chapter_service.delete_chapter(db, id)}
