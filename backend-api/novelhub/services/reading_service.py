"""
읽기 진행도 서비스

(user_id, novel_id) 쌍마다 기록은 최대 1개. 다시 읽으면 같은 행을 갱신한다.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from novelhub.core.database import commit_or_conflict, utcnow
from novelhub.core.exceptions import NotFoundError
from novelhub.models.chapter import Chapter
from novelhub.models.novel import Novel
from novelhub.models.reading_history import ReadingHistory
from novelhub.models.user import User
from novelhub.schemas.reading_history import UpdateReadingProgressInput

logger = logging.getLogger(__name__)


async def _ensure_chapter_in_novel(db: AsyncSession, chapter_id: int, novel_id: int) -> None:
    chapter = await db.get(Chapter, chapter_id)
    if chapter is None:
        raise NotFoundError(f"회차를 찾을 수 없습니다 (id={chapter_id})")
    if chapter.novel_id != novel_id:
        raise NotFoundError(f"회차(id={chapter_id})는 소설(id={novel_id})에 속하지 않습니다")


async def update_reading_progress(db: AsyncSession, payload: UpdateReadingProgressInput) -> ReadingHistory:
    """읽기 진행도 업서트"""
    # 검증 순서: 사용자 → 소설 → 회차(소속 포함)
    if await db.get(User, payload.user_id) is None:
        raise NotFoundError(f"사용자를 찾을 수 없습니다 (id={payload.user_id})")
    if await db.get(Novel, payload.novel_id) is None:
        raise NotFoundError(f"소설을 찾을 수 없습니다 (id={payload.novel_id})")
    await _ensure_chapter_in_novel(db, payload.chapter_id, payload.novel_id)

    result = await db.execute(
        select(ReadingHistory).where(
            ReadingHistory.user_id == payload.user_id,
            ReadingHistory.novel_id == payload.novel_id,
        )
    )
    history = result.scalar_one_or_none()

    if history:
        history.chapter_id = payload.chapter_id
        history.progress_percentage = payload.progress_percentage
        history.last_read_at = utcnow()
    else:
        history = ReadingHistory(
            user_id=payload.user_id,
            novel_id=payload.novel_id,
            chapter_id=payload.chapter_id,
            progress_percentage=payload.progress_percentage,
            last_read_at=utcnow(),
        )
        db.add(history)

    await commit_or_conflict(db, "읽기 기록이 동시에 갱신되었습니다. 다시 시도해주세요.")
    await db.refresh(history)
    return history


async def get_user_reading_history(db: AsyncSession, user_id: int, limit: Optional[int] = None) -> List[ReadingHistory]:
    """사용자의 읽기 기록 (최근 읽은 순)"""
    stmt = (
        select(ReadingHistory)
        .join(Novel, Novel.id == ReadingHistory.novel_id)
        .join(Chapter, Chapter.id == ReadingHistory.chapter_id)
        .where(ReadingHistory.user_id == user_id)
        .order_by(ReadingHistory.last_read_at.desc(), ReadingHistory.id.desc())
    )
    if limit:
        stmt = stmt.limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())
