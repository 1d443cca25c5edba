"""
소설 관련 서비스

- 작가 존재 검증
- 장르 연결은 '전체 교체' 방식 (기존 연결 삭제 후 새 집합 삽입)
- 삭제 시 읽기 기록 → 장르 연결 → 회차 → 소설 순으로 정리
"""

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Iterable, List, Optional
import logging

from novelhub.core.database import utcnow
from novelhub.core.exceptions import NotFoundError
from novelhub.models.author import Author
from novelhub.models.chapter import Chapter
from novelhub.models.genre import Genre, NovelGenre
from novelhub.models.novel import Novel
from novelhub.models.reading_history import ReadingHistory
from novelhub.schemas.novel import NovelCreate, NovelUpdate

logger = logging.getLogger(__name__)


async def _ensure_author_exists(db: AsyncSession, author_id: int) -> None:
    if await db.get(Author, author_id) is None:
        raise NotFoundError(f"작가를 찾을 수 없습니다 (id={author_id})")


async def _ensure_genres_exist(db: AsyncSession, genre_ids: Iterable[int]) -> None:
    wanted = set(genre_ids)
    if not wanted:
        return
    found = set((await db.execute(select(Genre.id).where(Genre.id.in_(wanted)))).scalars().all())
    missing = sorted(wanted - found)
    if missing:
        raise NotFoundError(f"장르를 찾을 수 없습니다 (id={', '.join(str(i) for i in missing)})")


def _link_genres(db: AsyncSession, novel_id: int, genre_ids: Iterable[int]) -> None:
    for genre_id in genre_ids:
        db.add(NovelGenre(novel_id=novel_id, genre_id=genre_id))


async def create_novel(db: AsyncSession, novel_data: NovelCreate) -> Novel:
    """소설 생성. 파생 카운터는 항상 0에서 시작한다."""
    await _ensure_author_exists(db, novel_data.author_id)
    if novel_data.genre_ids:
        await _ensure_genres_exist(db, novel_data.genre_ids)

    novel = Novel(
        title=novel_data.title,
        description=novel_data.description,
        author_id=novel_data.author_id,
        cover_image_url=novel_data.cover_image_url,
        status=novel_data.status,
        is_featured=bool(novel_data.is_featured),
        total_chapters=0,
        total_views=0,
    )
    db.add(novel)
    await db.flush()

    if novel_data.genre_ids:
        _link_genres(db, novel.id, novel_data.genre_ids)

    await db.commit()
    await db.refresh(novel)
    logger.info(f"[novels] created id={novel.id} author_id={novel.author_id}")
    return novel


async def get_novels(db: AsyncSession) -> List[Novel]:
    """소설 목록 (최신 등록순)"""
    result = await db.execute(
        select(Novel)
        .join(Author, Author.id == Novel.author_id)
        .order_by(Novel.created_at.desc(), Novel.id.desc())
    )
    return list(result.scalars().all())


async def get_featured_novels(db: AsyncSession) -> List[Novel]:
    """추천 소설 목록"""
    result = await db.execute(
        select(Novel)
        .join(Author, Author.id == Novel.author_id)
        .where(Novel.is_featured == True)  # noqa: E712
        .order_by(Novel.created_at.desc(), Novel.id.desc())
    )
    return list(result.scalars().all())


async def get_novel_by_id(db: AsyncSession, novel_id: int) -> Optional[Novel]:
    """소설 ID로 조회 (없으면 None)"""
    result = await db.execute(select(Novel).where(Novel.id == novel_id))
    return result.scalar_one_or_none()


async def get_novel_genres(db: AsyncSession, novel_id: int) -> List[Genre]:
    """소설에 연결된 장르 목록"""
    result = await db.execute(
        select(Genre)
        .join(NovelGenre, NovelGenre.genre_id == Genre.id)
        .where(NovelGenre.novel_id == novel_id)
        .group_by(Genre.id)
        .order_by(Genre.name)
    )
    return list(result.scalars().all())


async def update_novel(db: AsyncSession, novel_data: NovelUpdate) -> Novel:
    """
    소설 수정 (전달된 필드만 반영)
    genre_ids가 전달되면 연결을 전체 교체한다. 생략하면 기존 연결 유지.
    """
    novel = await db.get(Novel, novel_data.id)
    if not novel:
        raise NotFoundError(f"소설을 찾을 수 없습니다 (id={novel_data.id})")

    patch = novel_data.model_dump(exclude_unset=True, exclude={"id"})
    genre_ids = patch.pop("genre_ids", None)

    if "author_id" in patch:
        await _ensure_author_exists(db, patch["author_id"])
    if genre_ids:
        await _ensure_genres_exist(db, genre_ids)

    for key, value in patch.items():
        setattr(novel, key, value)
    novel.updated_at = utcnow()

    if genre_ids is not None:
        await db.execute(delete(NovelGenre).where(NovelGenre.novel_id == novel.id))
        _link_genres(db, novel.id, genre_ids)

    await db.commit()
    await db.refresh(novel)
    return novel


async def delete_novel(db: AsyncSession, novel_id: int) -> bool:
    """소설과 소속 데이터 삭제. 소설이 없었으면 False."""
    await db.execute(delete(ReadingHistory).where(ReadingHistory.novel_id == novel_id))
    await db.execute(delete(NovelGenre).where(NovelGenre.novel_id == novel_id))
    await db.execute(delete(Chapter).where(Chapter.novel_id == novel_id))
    result = await db.execute(delete(Novel).where(Novel.id == novel_id))
    await db.commit()

    deleted = bool(result.rowcount)
    if deleted:
        logger.info(f"[novels] deleted id={novel_id}")
    return deleted
