from fastapi import APIRouter, Depends, Body
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from novelhub.core.database import get_db
from novelhub.core.security import require_admin
from novelhub.schemas.common import SuccessResponse
from novelhub.schemas.genre import GenreCreate, GenreUpdate, GenreResponse
from novelhub.services import genre_service

router = APIRouter()


@router.post("/createGenre", response_model=GenreResponse, dependencies=[Depends(require_admin)])
async def create_genre(genre_data: GenreCreate, db: AsyncSession = Depends(get_db)):
    return await genre_service.create_genre(db, genre_data)


@router.get("/getGenres", response_model=List[GenreResponse])
async def get_genres(db: AsyncSession = Depends(get_db)):
    return await genre_service.get_genres(db)


@router.post("/updateGenre", response_model=GenreResponse, dependencies=[Depends(require_admin)])
async def update_genre(genre_data: GenreUpdate, db: AsyncSession = Depends(get_db)):
    return await genre_service.update_genre(db, genre_data)


@router.post("/deleteGenre", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
async def delete_genre(id: int = Body(...), db: AsyncSession = Depends(get_db)):
    return {"success": await genre_service.delete_genre(db, id)}
