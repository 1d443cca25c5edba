"""
작가 관련 API 라우터
"""

from fastapi import APIRouter, Depends, Body
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from novelhub.core.database import get_db
from novelhub.core.security import require_admin
from novelhub.schemas.common import SuccessResponse
from novelhub.schemas.author import AuthorCreate, AuthorUpdate, AuthorResponse
from novelhub.services import author_service

router = APIRouter()


@router.post("/createAuthor", response_model=AuthorResponse, dependencies=[Depends(require_admin)])
async def create_author(author_data: AuthorCreate, db: AsyncSession = Depends(get_db)):
    return await author_service.create_author(db, author_data)


@router.get("/getAuthors", response_model=List[AuthorResponse])
async def get_authors(db: AsyncSession = Depends(get_db)):
    return await author_service.get_authors(db)


@router.post("/updateAuthor", response_model=AuthorResponse, dependencies=[Depends(require_admin)])
async def update_author(author_data: AuthorUpdate, db: AsyncSession = Depends(get_db)):
    return await author_service.update_author(db, author_data)


@router.post("/deleteAuthor", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
async def delete_author(id: int = Body(...), db: AsyncSession = Depends(get_db)):
    """작가 삭제 (소설이 연결되어 있으면 409)"""
    return {"success": await author_service.delete_author(db, id)}
