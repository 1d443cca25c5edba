"""
데이터베이스 설정 및 연결

모든 서비스는 이 모듈의 세션(AsyncSession)을 통해서만 저장소에 접근한다.
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker, AsyncEngine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import MetaData, event
from sqlalchemy.exc import IntegrityError
from typing import AsyncGenerator
from datetime import datetime, timezone
import logging
import os

from novelhub.core.config import settings
from novelhub.core.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """UTC 기준 현재 시각 (naive, DB 컬럼과 동일한 형태)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite는 연결마다 FK 검사를 켜야 한다
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, **kwargs) -> AsyncEngine:
    """URL에 맞는 비동기 엔진 생성 (SQLite/PostgreSQL)"""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)
        new_engine = create_async_engine(database_url, echo=settings.DEBUG, future=True, **kwargs)
        event.listen(new_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return new_engine

    return create_async_engine(
        database_url,
        echo=settings.DEBUG,
        future=True,
        pool_pre_ping=True,
        pool_recycle=300,
        **kwargs,
    )


# SQLAlchemy 비동기 엔진 생성
engine = build_engine(settings.async_database_url)

# 세션 팩토리 생성
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
    autocommit=False,
)


# Base 클래스 정의
class Base(DeclarativeBase):
    """SQLAlchemy Base 클래스"""
    metadata = MetaData(
        naming_convention={
            "ix": "ix_%(column_0_label)s",
            "uq": "uq_%(table_name)s_%(column_0_name)s",
            "ck": "ck_%(table_name)s_%(constraint_name)s",
            "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
            "pk": "pk_%(table_name)s"
        }
    )


# 데이터베이스 세션 의존성
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """데이터베이스 세션 의존성"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


def _integrity_kind(error: IntegrityError) -> str:
    """IntegrityError 종류 판별 ('unique' / 'foreign_key' / 'other')"""
    orig = error.orig
    # asyncpg: SQLSTATE 23505(unique) / 23503(fk)
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == "23505":
        return "unique"
    if sqlstate == "23503":
        return "foreign_key"
    text = str(orig).lower()
    if "unique" in text or "duplicate key" in text:
        return "unique"
    if "foreign key" in text:
        return "foreign_key"
    return "other"


async def commit_or_conflict(db: AsyncSession, message: str) -> None:
    """
    커밋하되 무결성 제약 위반을 도메인 예외로 바꾼다.
    - 고유 제약 위반: ConflictError(message)
    - 외래 키 위반 (참조 대상이 동시에 삭제된 경우): NotFoundError
    - 그 외: 그대로 전파
    """
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        kind = _integrity_kind(e)
        logger.warning(f"무결성 제약 위반 ({kind}): {e.orig}")
        if kind == "unique":
            raise ConflictError(message) from e
        if kind == "foreign_key":
            raise NotFoundError("참조한 리소스를 찾을 수 없습니다.") from e
        raise


async def init_db(target_engine: AsyncEngine = None) -> None:
    """모든 테이블 생성 (개발/테스트용)"""
    # 모델을 임포트해야 Base.metadata에 등록된다
    import novelhub.models  # noqa: F401

    target_engine = target_engine or engine
    async with target_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("📊 데이터베이스 테이블 생성 완료")


async def test_db_connection() -> bool:
    """데이터베이스 연결 테스트"""
    try:
        async with engine.begin() as conn:
            await conn.exec_driver_sql("SELECT 1")
        return True
    except Exception as e:
        logger.error(f"데이터베이스 연결 실패: {e}")
        return False
