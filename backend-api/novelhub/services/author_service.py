"""
작가 관련 서비스
"""

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from novelhub.core.database import utcnow
from novelhub.core.exceptions import NotFoundError, ConflictError
from novelhub.models.author import Author
from novelhub.models.novel import Novel
from novelhub.schemas.author import AuthorCreate, AuthorUpdate

logger = logging.getLogger(__name__)


async def create_author(db: AsyncSession, author_data: AuthorCreate) -> Author:
    author = Author(
        name=author_data.name,
        bio=author_data.bio,
        image_url=author_data.image_url,
    )
    db.add(author)
    await db.commit()
    await db.refresh(author)
    logger.info(f"[authors] created id={author.id}")
    return author


async def get_authors(db: AsyncSession) -> List[Author]:
    result = await db.execute(select(Author).order_by(Author.id))
    return list(result.scalars().all())


async def update_author(db: AsyncSession, author_data: AuthorUpdate) -> Author:
    """작가 수정. bio/image_url은 null 지정 시 비운다."""
    author = await db.get(Author, author_data.id)
    if not author:
        raise NotFoundError(f"작가를 찾을 수 없습니다 (id={author_data.id})")

    for key, value in author_data.model_dump(exclude_unset=True, exclude={"id"}).items():
        setattr(author, key, value)
    author.updated_at = utcnow()

    await db.commit()
    await db.refresh(author)
    return author


async def delete_author(db: AsyncSession, author_id: int) -> bool:
    """작가 삭제 (참조하는 소설이 있으면 거부)"""
    author = await db.get(Author, author_id)
    if not author:
        raise NotFoundError(f"작가를 찾을 수 없습니다 (id={author_id})")

    novel_count = (await db.execute(
        select(func.count(Novel.id)).where(Novel.author_id == author_id)
    )).scalar_one()
    if novel_count > 0:
        raise ConflictError("소설이 등록된 작가는 삭제할 수 없습니다.")

    await db.execute(delete(Author).where(Author.id == author_id))
    await db.commit()
    logger.info(f"[authors] deleted id={author_id}")
    return True
