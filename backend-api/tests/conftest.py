"""
테스트 공용 픽스처

테스트마다 새 인메모리 SQLite DB를 만들고 get_db 의존성을 교체한다.
"""

import os

# novelhub 임포트 전에 설정 (전역 엔진이 파일 DB를 만들지 않도록)
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from novelhub.core.database import build_engine, init_db, get_db
from novelhub.main import app
from novelhub.schemas import (
    UserCreate, AuthorCreate, GenreCreate, NovelCreate, ChapterCreate,
)
from novelhub.services import (
    user_service, author_service, genre_service, novel_service, chapter_service,
)


@pytest_asyncio.fixture
async def engine():
    test_engine = build_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


class Factory:
    """서비스 함수를 거쳐 테스트 데이터를 만든다"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self._seq = 0

    def _next(self) -> int:
        self._seq += 1
        return self._seq

    async def user(self, **overrides):
        n = self._next()
        data = {"email": f"reader{n}@example.com", "username": f"reader{n}", "password": "secret123"}
        data.update(overrides)
        return await user_service.create_user(self.db, UserCreate(**data))

    async def author(self, **overrides):
        data = {"name": f"작가{self._next()}"}
        data.update(overrides)
        return await author_service.create_author(self.db, AuthorCreate(**data))

    async def genre(self, **overrides):
        data = {"name": f"장르{self._next()}"}
        data.update(overrides)
        return await genre_service.create_genre(self.db, GenreCreate(**data))

    async def novel(self, author=None, **overrides):
        if author is None:
            author = await self.author()
        data = {
            "title": f"소설{self._next()}",
            "description": "줄거리",
            "author_id": author.id,
            "status": "ongoing",
        }
        data.update(overrides)
        return await novel_service.create_novel(self.db, NovelCreate(**data))

    async def chapter(self, novel, **overrides):
        n = self._next()
        data = {
            "novel_id": novel.id,
            "title": f"{n}화",
            "content": "본문",
            "chapter_number": n,
        }
        data.update(overrides)
        return await chapter_service.create_chapter(self.db, ChapterCreate(**data))


@pytest.fixture
def factory(db):
    return Factory(db)
