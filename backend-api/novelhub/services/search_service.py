"""
소설 검색 서비스
"""

from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from novelhub.core.config import settings
from novelhub.models.author import Author
from novelhub.models.genre import NovelGenre
from novelhub.models.novel import Novel
from novelhub.schemas.novel import SearchNovelsInput


async def search_novels(db: AsyncSession, params: SearchNovelsInput) -> List[Novel]:
    """
    소설 검색
    - query: 제목 또는 작가명 부분 일치 (대소문자 무시)
    - genre_ids: 지정 장르 중 하나라도 가진 소설
    - status, author_id: 정확히 일치
    모든 조건은 AND, 최근 수정순 정렬 후 offset/limit 적용.
    """
    limit = params.limit or settings.SEARCH_DEFAULT_LIMIT
    offset = params.offset or 0

    stmt = select(Novel)

    if params.query:
        stmt = stmt.join(Author, Author.id == Novel.author_id).where(
            or_(
                Novel.title.icontains(params.query, autoescape=True),
                Author.name.icontains(params.query, autoescape=True),
            )
        )

    if params.status:
        stmt = stmt.where(Novel.status == params.status)

    if params.author_id is not None:
        stmt = stmt.where(Novel.author_id == params.author_id)

    if params.genre_ids:
        novel_ids = (await db.execute(
            select(NovelGenre.novel_id)
            .where(NovelGenre.genre_id.in_(params.genre_ids))
            .distinct()
        )).scalars().all()
        # 해당 장르의 소설이 없으면 본 쿼리를 실행하지 않는다
        if not novel_ids:
            return []
        stmt = stmt.where(Novel.id.in_(novel_ids))

    stmt = stmt.order_by(Novel.updated_at.desc(), Novel.id.desc()).offset(offset).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())
