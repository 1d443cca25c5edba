"""
소설 관련 API 라우터 (목록/상세/검색/관리)
"""

from fastapi import APIRouter, Depends, Body, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from novelhub.core.database import get_db
from novelhub.core.security import require_admin
from novelhub.schemas.common import SuccessResponse, NovelStatus
from novelhub.schemas.genre import GenreResponse
from novelhub.schemas.novel import NovelCreate, NovelUpdate, NovelResponse, SearchNovelsInput
from novelhub.services import novel_service, search_service

router = APIRouter()


@router.post("/createNovel", response_model=NovelResponse, dependencies=[Depends(require_admin)])
async def create_novel(novel_data: NovelCreate, db: AsyncSession = Depends(get_db)):
    """소설 생성 (genre_ids로 장르 연결)"""
    return await novel_service.create_novel(db, novel_data)


@router.get("/getNovelsList", response_model=List[NovelResponse])
async def get_novels_list(db: AsyncSession = Depends(get_db)):
    return await novel_service.get_novels(db)


@router.get("/getFeaturedNovels", response_model=List[NovelResponse])
async def get_featured_novels(db: AsyncSession = Depends(get_db)):
    return await novel_service.get_featured_novels(db)


@router.get("/getNovelById", response_model=Optional[NovelResponse])
async def get_novel_by_id(id: int = Query(...), db: AsyncSession = Depends(get_db)):
    """소설 상세 (없으면 null)"""
    return await novel_service.get_novel_by_id(db, id)


@router.get("/getNovelGenres", response_model=List[GenreResponse])
async def get_novel_genres(novel_id: int = Query(...), db: AsyncSession = Depends(get_db)):
    return await novel_service.get_novel_genres(db, novel_id)


@router.get("/searchNovels", response_model=List[NovelResponse])
async def search_novels(
    query: Optional[str] = Query(None),
    genre_ids: Optional[List[int]] = Query(None),
    status: Optional[NovelStatus] = Query(None),
    author_id: Optional[int] = Query(None),
    limit: Optional[int] = Query(None, gt=0),
    offset: Optional[int] = Query(None, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """
    소설 검색
    genre_ids는 반복 파라미터로 전달한다 (?genre_ids=1&genre_ids=2).
    """
    params = SearchNovelsInput(
        query=query,
        genre_ids=genre_ids,
        status=status,
        author_id=author_id,
        limit=limit,
        offset=offset,
    )
    return await search_service.search_novels(db, params)


@router.post("/updateNovel", response_model=NovelResponse, dependencies=[Depends(require_admin)])
async def update_novel(novel_data: NovelUpdate, db: AsyncSession = Depends(get_db)):
    return await novel_service.update_novel(db, novel_data)


@router.post("/deleteNovel", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
async def delete_novel(id: int = Body(...), db: AsyncSession = Depends(get_db)):
    """소설 삭제 (없던 소설이면 success=false)"""
    return {"success": await novel_service.delete_novel(db, id)}
