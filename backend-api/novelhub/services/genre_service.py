"""
장르 관련 서비스
"""

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from novelhub.core.database import commit_or_conflict
from novelhub.core.exceptions import NotFoundError, ConflictError
from novelhub.models.genre import Genre, NovelGenre
from novelhub.schemas.genre import GenreCreate, GenreUpdate

logger = logging.getLogger(__name__)

_DUPLICATE_NAME = "이미 존재하는 장르입니다"


async def _get_genre_by_name(db: AsyncSession, name: str) -> Optional[Genre]:
    result = await db.execute(select(Genre).where(Genre.name == name))
    return result.scalar_one_or_none()


async def create_genre(db: AsyncSession, genre_data: GenreCreate) -> Genre:
    # 이름 중복 체크
    if await _get_genre_by_name(db, genre_data.name):
        raise ConflictError(_DUPLICATE_NAME)

    genre = Genre(name=genre_data.name, description=genre_data.description)
    db.add(genre)
    await commit_or_conflict(db, _DUPLICATE_NAME)
    await db.refresh(genre)
    logger.info(f"[genres] created id={genre.id} name={genre.name}")
    return genre


async def get_genres(db: AsyncSession) -> List[Genre]:
    result = await db.execute(select(Genre).order_by(Genre.name))
    return list(result.scalars().all())


async def update_genre(db: AsyncSession, genre_data: GenreUpdate) -> Genre:
    """장르 수정 (updated_at 없음, created_at 유지)"""
    genre = await db.get(Genre, genre_data.id)
    if not genre:
        raise NotFoundError(f"장르를 찾을 수 없습니다 (id={genre_data.id})")

    patch = genre_data.model_dump(exclude_unset=True, exclude={"id"})
    if "name" in patch:
        found = await _get_genre_by_name(db, patch["name"])
        if found and found.id != genre.id:
            raise ConflictError(_DUPLICATE_NAME)

    for key, value in patch.items():
        setattr(genre, key, value)

    await commit_or_conflict(db, _DUPLICATE_NAME)
    await db.refresh(genre)
    return genre


async def delete_genre(db: AsyncSession, genre_id: int) -> bool:
    """장르 삭제 (소설에 연결되어 있으면 거부)"""
    genre = await db.get(Genre, genre_id)
    if not genre:
        raise NotFoundError(f"장르를 찾을 수 없습니다 (id={genre_id})")

    in_use = (await db.execute(
        select(func.count(NovelGenre.id)).where(NovelGenre.genre_id == genre_id)
    )).scalar_one()
    if in_use > 0:
        raise ConflictError("소설에 사용 중인 장르는 삭제할 수 없습니다.")

    await db.execute(delete(Genre).where(Genre.id == genre_id))
    await db.commit()
    logger.info(f"[genres] deleted id={genre_id}")
    return True
