"""사용자/작가/장르/광고 배치 CRUD"""

import pytest

from novelhub.core.exceptions import NotFoundError, ConflictError
from novelhub.core.security import verify_password
from novelhub.models.reading_history import ReadingHistory
from novelhub.schemas import (
    UserCreate, UserUpdate, AuthorUpdate, GenreUpdate,
    AdPlacementCreate, AdPlacementUpdate, UpdateReadingProgressInput,
)
from novelhub.services import (
    user_service, author_service, genre_service, ad_placement_service, reading_service,
)
from sqlalchemy import select, func


async def test_create_user_applies_defaults_and_hashes_password(db, factory):
    user = await factory.user(username="alice", email="alice@example.com")

    assert user.id is not None
    assert user.is_admin is False
    assert user.password_hash != "secret123"
    assert verify_password("secret123", user.password_hash)
    assert user.created_at is not None


async def test_duplicate_user_conflicts(db, factory):
    await factory.user(username="alice", email="alice@example.com")

    with pytest.raises(ConflictError):
        await factory.user(username="alice2", email="alice@example.com")
    with pytest.raises(ConflictError):
        await factory.user(username="alice", email="other@example.com")


async def test_update_user_only_touches_given_fields(db, factory):
    user = await factory.user(username="bob")
    before = user.updated_at

    updated = await user_service.update_user(db, UserUpdate(id=user.id, is_admin=True))

    assert updated.is_admin is True
    assert updated.username == "bob"
    assert updated.updated_at >= before


async def test_update_user_to_taken_username_conflicts(db, factory):
    await factory.user(username="taken")
    other = await factory.user(username="free")

    with pytest.raises(ConflictError):
        await user_service.update_user(db, UserUpdate(id=other.id, username="taken"))


async def test_update_missing_user_not_found(db):
    with pytest.raises(NotFoundError):
        await user_service.update_user(db, UserUpdate(id=999, username="ghost"))


async def test_delete_user_removes_reading_history(db, factory):
    user = await factory.user()
    novel = await factory.novel()
    chapter = await factory.chapter(novel)
    await reading_service.update_reading_progress(db, UpdateReadingProgressInput(
        user_id=user.id, novel_id=novel.id, chapter_id=chapter.id, progress_percentage=10,
    ))

    assert await user_service.delete_user(db, user.id) is True

    remaining = (await db.execute(select(func.count(ReadingHistory.id)))).scalar_one()
    assert remaining == 0
    assert await user_service.get_users(db) == []


async def test_delete_user_without_history(db, factory):
    user = await factory.user()
    assert await user_service.delete_user(db, user.id) is True

    with pytest.raises(NotFoundError):
        await user_service.delete_user(db, user.id)


async def test_users_listed_by_id(db, factory):
    first = await factory.user()
    second = await factory.user()

    assert [u.id for u in await user_service.get_users(db)] == [first.id, second.id]


async def test_author_update_distinguishes_null_from_omitted(db, factory):
    author = await factory.author(name="홍길동", bio="소개", image_url="http://img/1.png")

    updated = await author_service.update_author(db, AuthorUpdate(id=author.id, bio=None))
    assert updated.bio is None
    assert updated.image_url == "http://img/1.png"

    updated = await author_service.update_author(db, AuthorUpdate(id=author.id, name="고길동"))
    assert updated.name == "고길동"
    assert updated.image_url == "http://img/1.png"


async def test_delete_referenced_author_conflicts(db, factory):
    author = await factory.author()
    await factory.novel(author=author)
    lonely = await factory.author()

    with pytest.raises(ConflictError):
        await author_service.delete_author(db, author.id)
    assert await author_service.delete_author(db, lonely.id) is True


async def test_genre_name_is_unique(db, factory):
    await factory.genre(name="판타지")
    other = await factory.genre(name="로맨스")

    with pytest.raises(ConflictError):
        await factory.genre(name="판타지")
    with pytest.raises(ConflictError):
        await genre_service.update_genre(db, GenreUpdate(id=other.id, name="판타지"))


async def test_genres_listed_by_name(db, factory):
    await factory.genre(name="현대")
    await factory.genre(name="무협")
    await factory.genre(name="판타지")

    names = [g.name for g in await genre_service.get_genres(db)]
    assert names == sorted(names)


async def test_delete_referenced_genre_conflicts(db, factory):
    used = await factory.genre()
    unused = await factory.genre()
    await factory.novel(genre_ids=[used.id])

    with pytest.raises(ConflictError):
        await genre_service.delete_genre(db, used.id)
    assert await genre_service.delete_genre(db, unused.id) is True


async def test_ad_placement_defaults_to_active(db):
    ad = await ad_placement_service.create_ad_placement(db, AdPlacementCreate(
        name="상단 배너", placement_type="banner", ad_script="<script></script>",
    ))
    assert ad.is_active is True


async def test_active_ad_placements_filter(db):
    on = await ad_placement_service.create_ad_placement(db, AdPlacementCreate(
        name="on", placement_type="native", ad_script="a",
    ))
    off = await ad_placement_service.create_ad_placement(db, AdPlacementCreate(
        name="off", placement_type="interstitial", ad_script="b", is_active=False,
    ))

    active = await ad_placement_service.get_active_ad_placements(db)
    assert [a.id for a in active] == [on.id]

    await ad_placement_service.update_ad_placement(db, AdPlacementUpdate(id=off.id, is_active=True))
    assert len(await ad_placement_service.get_active_ad_placements(db)) == 2


async def test_delete_missing_ad_placement_still_succeeds(db):
    assert await ad_placement_service.delete_ad_placement(db, 12345) is True


def test_update_rejects_explicit_null_on_required_field():
    with pytest.raises(ValueError):
        UserUpdate(id=1, username=None)
    with pytest.raises(ValueError):
        AuthorUpdate(id=1, name=None)


def test_user_create_validation():
    with pytest.raises(ValueError):
        UserCreate(email="not-an-email", username="alice", password="secret123")
    with pytest.raises(ValueError):
        UserCreate(email="a@example.com", username="ab", password="secret123")
    with pytest.raises(ValueError):
        UserCreate(email="a@example.com", username="alice", password="123")


async def test_author_genre_ad_mutations_on_missing_ids(db):
    with pytest.raises(NotFoundError):
        await author_service.update_author(db, AuthorUpdate(id=999, name="없음"))
    with pytest.raises(NotFoundError):
        await author_service.delete_author(db, 999)
    with pytest.raises(NotFoundError):
        await genre_service.update_genre(db, GenreUpdate(id=999, name="없음"))
    with pytest.raises(NotFoundError):
        await genre_service.delete_genre(db, 999)
    with pytest.raises(NotFoundError):
        await ad_placement_service.update_ad_placement(db, AdPlacementUpdate(id=999, name="없음"))


async def test_genre_update_keeps_created_at(db, factory):
    genre = await factory.genre(name="SF")
    created_at = genre.created_at

    updated = await genre_service.update_genre(db, GenreUpdate(id=genre.id, name="공상과학", description="우주"))

    assert updated.name == "공상과학"
    assert updated.description == "우주"
    assert updated.created_at == created_at
