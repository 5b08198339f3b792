"""HTTP-level tests for like / unlike."""

import pytest

from article_likes.domain.exceptions import StorageError
from article_likes.infrastructure.dependencies import get_like_service


async def _create(client) -> int:
    r = await client.post("/articles", json={"authorId": 1, "title": "Likeable", "body": "..."})
    assert r.status_code == 201
    return r.json()["id"]


async def _like_count(client, article_id: int) -> int:
    r = await client.get(f"/articles/{article_id}")
    assert r.status_code == 200
    return r.json()["likeCount"]


@pytest.mark.asyncio
async def test_like_is_idempotent(client, like_rows):
    article_id = await _create(client)
    for _ in range(3):
        r = await client.post(f"/articles/{article_id}/like", params={"userId": 5})
        assert r.status_code == 204
        assert r.content == b""

    assert await _like_count(client, article_id) == 1
    assert await like_rows(article_id) == 1


@pytest.mark.asyncio
async def test_like_does_not_touch_updated_at(client):
    article_id = await _create(client)
    before = (await client.get(f"/articles/{article_id}")).json()["updatedAt"]
    await client.post(f"/articles/{article_id}/like", params={"userId": 5})
    after = (await client.get(f"/articles/{article_id}")).json()["updatedAt"]
    assert after == before


@pytest.mark.asyncio
async def test_unlike_without_like_is_noop(client, like_rows):
    article_id = await _create(client)
    await client.post(f"/articles/{article_id}/like", params={"userId": 1})

    r = await client.delete(f"/articles/{article_id}/like", params={"userId": 2})
    assert r.status_code == 204
    assert await _like_count(client, article_id) == 1
    assert await like_rows(article_id) == 1


@pytest.mark.asyncio
async def test_like_unlike_round_trip(client, like_rows):
    article_id = await _create(client)
    await client.post(f"/articles/{article_id}/like", params={"userId": 1})
    start = await _like_count(client, article_id)

    await client.post(f"/articles/{article_id}/like", params={"userId": 2})
    assert await _like_count(client, article_id) == start + 1

    for _ in range(2):
        r = await client.delete(f"/articles/{article_id}/like", params={"userId": 2})
        assert r.status_code == 204
    assert await _like_count(client, article_id) == start
    assert await like_rows(article_id) == start

    assert await like_rows(article_id, user_id=2) == 0


@pytest.mark.asyncio
async def test_missing_user_id_uses_default_user(client, like_rows, settings):
    article_id = await _create(client)
    r = await client.post(f"/articles/{article_id}/like")
    assert r.status_code == 204

    assert await like_rows(article_id, user_id=settings.default_user_id) == 1


@pytest.mark.asyncio
async def test_bad_ids_are_rejected(client):
    article_id = await _create(client)
    too_big = 2**63
    assert (await client.post(f"/articles/{article_id}/like", params={"userId": too_big})).status_code == 400
    assert (await client.delete(f"/articles/{article_id}/like", params={"userId": too_big})).status_code == 400
    assert (await client.post(f"/articles/{too_big}/like", params={"userId": 1})).status_code == 400
    assert (await client.post(f"/articles/{article_id}/like", params={"userId": "x"})).status_code == 400
    assert (await client.post("/articles/abc/like", params={"userId": 1})).status_code == 400
    assert (await client.post(f"/articles/{article_id}/like", params={"userId": 0})).status_code == 400
    assert (await client.delete(f"/articles/{article_id}/like", params={"userId": "x"})).status_code == 400
    assert await _like_count(client, article_id) == 0


@pytest.mark.asyncio
async def test_like_on_missing_article_is_404(client, like_rows):
    r = await client.post("/articles/777/like", params={"userId": 1})
    assert r.status_code == 404
    assert await like_rows(777) == 0


@pytest.mark.asyncio
async def test_unlike_on_missing_article_is_noop(client):
    r = await client.delete("/articles/777/like", params={"userId": 1})
    assert r.status_code == 204


@pytest.mark.asyncio
async def test_deleting_article_removes_its_likes(client, like_rows):
    article_id = await _create(client)
    for user_id in (1, 2, 3):
        await client.post(f"/articles/{article_id}/like", params={"userId": user_id})
    assert await like_rows(article_id) == 3

    assert (await client.delete(f"/articles/{article_id}")).status_code == 204
    assert await like_rows(article_id) == 0


class _BrokenLikeService:
    async def like(self, user_id: int, article_id: int) -> bool:
        raise StorageError("like transaction")

    async def unlike(self, user_id: int, article_id: int) -> bool:
        raise StorageError("like transaction")


@pytest.mark.asyncio
async def test_storage_failure_maps_to_500(app, client):
    app.dependency_overrides[get_like_service] = lambda: _BrokenLikeService()
    try:
        r = await client.post("/articles/1/like", params={"userId": 1})
        assert r.status_code == 500
        r = await client.delete("/articles/1/like", params={"userId": 1})
        assert r.status_code == 500
    finally:
        app.dependency_overrides.clear()
