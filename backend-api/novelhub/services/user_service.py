"""
사용자 관련 서비스
"""

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from novelhub.core.database import commit_or_conflict, utcnow
from novelhub.core.exceptions import NotFoundError, ConflictError
from novelhub.core.security import get_password_hash
from novelhub.models.user import User
from novelhub.models.reading_history import ReadingHistory
from novelhub.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """이메일로 사용자 조회"""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_user_by_username(db: AsyncSession, username: str) -> Optional[User]:
    """사용자명으로 사용자 조회"""
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def _ensure_unique(db: AsyncSession, email: Optional[str], username: Optional[str], exclude_id: Optional[int] = None):
    if email is not None:
        found = await get_user_by_email(db, email)
        if found and found.id != exclude_id:
            raise ConflictError("이미 등록된 이메일입니다.")
    if username is not None:
        found = await get_user_by_username(db, username)
        if found and found.id != exclude_id:
            raise ConflictError("이미 사용 중인 사용자명입니다.")


async def create_user(db: AsyncSession, user_data: UserCreate) -> User:
    """사용자 생성 (패스워드는 해시로만 저장)"""
    await _ensure_unique(db, user_data.email, user_data.username)

    user = User(
        email=user_data.email,
        username=user_data.username,
        password_hash=get_password_hash(user_data.password),
        is_admin=bool(user_data.is_admin),
    )
    db.add(user)
    await commit_or_conflict(db, "이메일 또는 사용자명이 이미 사용 중입니다.")
    await db.refresh(user)
    logger.info(f"[users] created id={user.id} username={user.username}")
    return user


async def get_users(db: AsyncSession) -> List[User]:
    result = await db.execute(select(User).order_by(User.id))
    return list(result.scalars().all())


async def update_user(db: AsyncSession, user_data: UserUpdate) -> User:
    """사용자 정보 수정 (전달된 필드만 반영)"""
    user = await db.get(User, user_data.id)
    if not user:
        raise NotFoundError(f"사용자를 찾을 수 없습니다 (id={user_data.id})")

    patch = user_data.model_dump(exclude_unset=True, exclude={"id"})
    await _ensure_unique(db, patch.get("email"), patch.get("username"), exclude_id=user.id)

    for key, value in patch.items():
        setattr(user, key, value)
    user.updated_at = utcnow()

    await commit_or_conflict(db, "이메일 또는 사용자명이 이미 사용 중입니다.")
    await db.refresh(user)
    return user


async def delete_user(db: AsyncSession, user_id: int) -> bool:
    """사용자 삭제 (읽기 기록 먼저 삭제)"""
    user = await db.get(User, user_id)
    if not user:
        raise NotFoundError(f"사용자를 찾을 수 없습니다 (id={user_id})")

    await db.execute(delete(ReadingHistory).where(ReadingHistory.user_id == user_id))
    await db.execute(delete(User).where(User.id == user_id))
    await db.commit()
    logger.info(f"[users] deleted id={user_id}")
    return True
