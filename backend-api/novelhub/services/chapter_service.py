"""
회차 관련 서비스

novels.total_chapters는 해당 소설의 공개(is_published) 회차 수와 항상 같아야 한다.
증감 대신 회차 집합을 다시 세어 저장하고, 회차 변경과 같은 트랜잭션으로 커밋한다.
"""

from sqlalchemy import select, update, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from novelhub.core.database import utcnow
from novelhub.core.exceptions import NotFoundError
from novelhub.models.chapter import Chapter
from novelhub.models.novel import Novel
from novelhub.models.reading_history import ReadingHistory
from novelhub.schemas.chapter import ChapterCreate, ChapterUpdate

logger = logging.getLogger(__name__)


async def count_published_chapters(db: AsyncSession, novel_id: int) -> int:
    result = await db.execute(
        select(func.count(Chapter.id)).where(
            Chapter.novel_id == novel_id,
            Chapter.is_published == True,  # noqa: E712
        )
    )
    return result.scalar_one()


async def recount_total_chapters(db: AsyncSession, novel_id: int) -> int:
    """공개 회차 수를 다시 세어 소설에 반영 (커밋은 호출자 몫)"""
    await db.flush()
    total = await count_published_chapters(db, novel_id)
    await db.execute(
        update(Novel)
        .where(Novel.id == novel_id)
        .values(total_chapters=total, updated_at=utcnow())
    )
    logger.info(f"[chapters] novel_id={novel_id} total_chapters={total}")
    return total


async def create_chapter(db: AsyncSession, chapter_data: ChapterCreate) -> Chapter:
    novel = await db.get(Novel, chapter_data.novel_id)
    if not novel:
        raise NotFoundError(f"소설을 찾을 수 없습니다 (id={chapter_data.novel_id})")

    chapter = Chapter(
        novel_id=chapter_data.novel_id,
        title=chapter_data.title,
        content=chapter_data.content,
        chapter_number=chapter_data.chapter_number,
        is_published=bool(chapter_data.is_published),
    )
    db.add(chapter)

    if chapter.is_published:
        await recount_total_chapters(db, chapter.novel_id)

    await db.commit()
    await db.refresh(chapter)
    return chapter


async def get_chapters(db: AsyncSession, novel_id: int, published_only: bool = False) -> List[Chapter]:
    """소설의 회차 목록 (회차 번호순)"""
    stmt = select(Chapter).where(Chapter.novel_id == novel_id)
    if published_only:
        stmt = stmt.where(Chapter.is_published == True)  # noqa: E712
    stmt = stmt.order_by(Chapter.chapter_number.asc(), Chapter.id.asc())
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_chapter_for_reading(db: AsyncSession, chapter_id: int) -> Optional[Chapter]:
    """
    열람용 회차 조회.
    찾으면 소설 조회수를 DB 레벨에서 원자적으로 1 증가시킨다. 없으면 아무 변화 없음.
    """
    chapter = await db.get(Chapter, chapter_id)
    if not chapter:
        return None

    await db.execute(
        update(Novel)
        .where(Novel.id == chapter.novel_id)
        .values(total_views=Novel.total_views + 1, updated_at=utcnow())
    )
    await db.commit()
    return chapter


async def update_chapter(db: AsyncSession, chapter_data: ChapterUpdate) -> Chapter:
    """
    회차 수정.
    공개 여부가 바뀐 경우에만 소설의 total_chapters를 다시 센다.
    """
    chapter = await db.get(Chapter, chapter_data.id)
    if not chapter:
        raise NotFoundError(f"회차를 찾을 수 없습니다 (id={chapter_data.id})")

    patch = chapter_data.model_dump(exclude_unset=True, exclude={"id"})
    was_published = bool(chapter.is_published)
    will_be_published = bool(patch.get("is_published", was_published))

    for key, value in patch.items():
        setattr(chapter, key, value)
    chapter.updated_at = utcnow()

    if was_published != will_be_published:
        await recount_total_chapters(db, chapter.novel_id)

    await db.commit()
    await db.refresh(chapter)
    return chapter


async def delete_chapter(db: AsyncSession, chapter_id: int) -> bool:
    """회차 삭제 (읽기 기록 먼저 삭제 후 공개 회차 수 재계산)"""
    chapter = await db.get(Chapter, chapter_id)
    if not chapter:
        raise NotFoundError(f"회차를 찾을 수 없습니다 (id={chapter_id})")
    novel_id = chapter.novel_id

    await db.execute(delete(ReadingHistory).where(ReadingHistory.chapter_id == chapter_id))
    await db.execute(delete(Chapter).where(Chapter.id == chapter_id))
    await recount_total_chapters(db, novel_id)

    await db.commit()
    logger.info(f"[chapters] deleted id={chapter_id} novel_id={novel_id}")
    return True
