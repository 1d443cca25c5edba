"""RPC 라우팅, 입력 검증, 예외 → 상태 코드 매핑"""

from novelhub.core.config import settings
from novelhub.core.security import create_access_token


async def _create_author(client, name="작가"):
    res = await client.post("/api/createAuthor", json={"name": name})
    assert res.status_code == 200
    return res.json()


async def _create_novel(client, author_id, **overrides):
    body = {"title": "소설", "description": "설명", "author_id": author_id, "status": "draft"}
    body.update(overrides)
    res = await client.post("/api/createNovel", json=body)
    assert res.status_code == 200, res.text
    return res.json()


async def test_healthcheck(client):
    res = await client.get("/api/healthcheck")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert "timestamp" in body


async def test_create_user_hides_password_and_conflicts_on_duplicate(client):
    payload = {"email": "reader@example.com", "username": "reader", "password": "secret123"}

    res = await client.post("/api/createUser", json=payload)
    assert res.status_code == 200
    body = res.json()
    assert body["is_admin"] is False
    assert "password_hash" not in body
    assert "password" not in body

    res = await client.post("/api/createUser", json=payload)
    assert res.status_code == 409
    assert res.json()["detail"]


async def test_malformed_input_is_422(client):
    res = await client.post("/api/createUser", json={"email": "nope", "username": "ab", "password": "1"})
    assert res.status_code == 422

    res = await client.post("/api/createNovel", json={"title": "t", "description": "d", "author_id": 1, "status": "unknown"})
    assert res.status_code == 422

    res = await client.get("/api/searchNovels", params={"limit": 0})
    assert res.status_code == 422


async def test_explicit_null_on_required_field_is_422(client):
    author = await _create_author(client)
    res = await client.post("/api/updateAuthor", json={"id": author["id"], "name": None})
    assert res.status_code == 422

    res = await client.post("/api/updateAuthor", json={"id": author["id"], "bio": None})
    assert res.status_code == 200
    assert res.json()["bio"] is None


async def test_not_found_maps_to_404(client):
    res = await client.post("/api/createNovel", json={"title": "t", "description": "d", "author_id": 42, "status": "draft"})
    assert res.status_code == 404
    assert "42" in res.json()["detail"]

    res = await client.post("/api/updateChapter", json={"id": 42, "title": "x"})
    assert res.status_code == 404


async def test_delete_takes_bare_id_body(client):
    author = await _create_author(client)
    novel = await _create_novel(client, author["id"])

    res = await client.post("/api/deleteAuthor", json=author["id"])
    assert res.status_code == 409

    res = await client.post("/api/deleteNovel", json=novel["id"])
    assert res.json() == {"success": True}
    res = await client.post("/api/deleteNovel", json=novel["id"])
    assert res.json() == {"success": False}

    res = await client.post("/api/deleteAuthor", json=author["id"])
    assert res.json() == {"success": True}

    res = await client.post("/api/deleteAdPlacement", json=999)
    assert res.json() == {"success": True}


async def test_get_by_id_returns_null_when_missing(client):
    res = await client.get("/api/getNovelById", params={"id": 999})
    assert res.status_code == 200
    assert res.json() is None

    res = await client.get("/api/getChapterById", params={"id": 999})
    assert res.status_code == 200
    assert res.json() is None


async def test_reading_flow(client):
    author = await _create_author(client)
    novel = await _create_novel(client, author["id"], status="ongoing")
    res = await client.post("/api/createChapter", json={
        "novel_id": novel["id"], "title": "1화", "content": "본문", "chapter_number": 1, "is_published": True,
    })
    chapter = res.json()
    user = (await client.post("/api/createUser", json={
        "email": "flow@example.com", "username": "flow", "password": "secret123",
    })).json()

    for _ in range(2):
        res = await client.get("/api/getChapterById", params={"id": chapter["id"]})
        assert res.json()["id"] == chapter["id"]

    res = await client.get("/api/getNovelById", params={"id": novel["id"]})
    assert res.json()["total_views"] == 2
    assert res.json()["total_chapters"] == 1

    res = await client.post("/api/updateReadingProgress", json={
        "user_id": user["id"], "novel_id": novel["id"], "chapter_id": chapter["id"], "progress_percentage": 90.25,
    })
    assert res.status_code == 200
    assert res.json()["progress_percentage"] == 90.25

    res = await client.get("/api/getUserReadingHistory", params={"user_id": user["id"], "limit": 5})
    assert [h["chapter_id"] for h in res.json()] == [chapter["id"]]


async def test_search_with_repeated_genre_params(client):
    genre = (await client.post("/api/createGenre", json={"name": "판타지"})).json()
    author = await _create_author(client)
    tagged = await _create_novel(client, author["id"], genre_ids=[genre["id"]])
    await _create_novel(client, author["id"])

    res = await client.get("/api/searchNovels", params=[("genre_ids", genre["id"])])
    assert [n["id"] for n in res.json()] == [tagged["id"]]

    res = await client.get("/api/getNovelGenres", params={"novel_id": tagged["id"]})
    assert [g["name"] for g in res.json()] == ["판타지"]


async def test_admin_guard(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_GUARD_ENABLED", True)

    res = await client.post("/api/createAuthor", json={"name": "막힘"})
    assert res.status_code == 403

    # 공개 프로시저는 그대로 동작
    res = await client.get("/api/getAuthors")
    assert res.status_code == 200

    admin = (await client.post("/api/createUser", json={
        "email": "admin@example.com", "username": "admin", "password": "secret123", "is_admin": True,
    })).json()
    reader = (await client.post("/api/createUser", json={
        "email": "plain@example.com", "username": "plain", "password": "secret123",
    })).json()

    reader_token = create_access_token({"sub": str(reader["id"])})
    res = await client.post(
        "/api/createAuthor", json={"name": "막힘"},
        headers={"Authorization": f"Bearer {reader_token}"},
    )
    assert res.status_code == 403

    admin_token = create_access_token({"sub": str(admin["id"])})
    res = await client.post(
        "/api/createAuthor", json={"name": "허용"},
        headers={"Authorization": f"Bearer {admin_token}"},
    )
    assert res.status_code == 200


async def test_invalid_token_is_anonymous(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_GUARD_ENABLED", True)

    res = await client.post(
        "/api/createGenre", json={"name": "x"},
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert res.status_code == 403


async def test_missing_ids_on_admin_mutations_are_404(client):
    res = await client.post("/api/deleteGenre", json=999)
    assert res.status_code == 404
    assert "999" in res.json()["detail"]

    res = await client.post("/api/updateAuthor", json={"id": 999, "name": "없음"})
    assert res.status_code == 404

    res = await client.post("/api/updateAdPlacement", json={"id": 999, "is_active": False})
    assert res.status_code == 404
