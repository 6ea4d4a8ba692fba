import asyncio

import pytest

from community import repository, service


@pytest.fixture()
def posts(monkeypatch):
    state = {"inserted": []}
    # Rows come back already ordered by the query.
    state["rows"] = [
        {
            "id": 2,
            "category": "tip",
            "upvotes": 1,
            "is_pinned": True,
            "title_he": "נעוץ",
            "title_en": "Pinned",
            "body_he": "גוף",
            "body_en": "Body",
            "author_name": "Mod",
            "author_verified": True,
            "author_trust": 5,
            "reply_count": 0,
        },
        {
            "id": 1,
            "category": "question",
            "upvotes": 99,
            "is_pinned": False,
            "title_he": "שאלה",
            "title_en": "Question",
            "body_he": "מה?",
            "body_en": "What?",
            "author_name": "Noa",
            "author_verified": False,
            "author_trust": None,
            "reply_count": 4,
        },
    ]

    async def fake_list_posts(*, limit=repository.FEED_LIMIT):
        state["limit"] = limit
        return state["rows"]

    async def fake_insert_post(**values):
        state["inserted"].append(values)
        return {"id": len(state["inserted"]), **values}

    monkeypatch.setattr(repository, "list_posts", fake_list_posts)
    monkeypatch.setattr(repository, "insert_post", fake_insert_post)
    return state


def test_feed_is_localized(posts):
    rows = asyncio.run(service.list_community("he"))
    assert posts["limit"] == 30
    assert [r["title"] for r in rows] == ["נעוץ", "שאלה"]
    assert rows[1]["body"] == "מה?"
    assert "title_en" not in rows[0]


def test_pinned_first_regardless_of_upvotes(client, posts):
    resp = client.get("/api/community")
    assert resp.status_code == 200
    body = resp.json()
    assert [p["is_pinned"] for p in body] == [True, False]
    assert body[0]["upvotes"] < body[1]["upvotes"]
    assert body[0]["title"] == "Pinned"


def test_create_post_defaults_category(client, posts):
    resp = client.post(
        "/api/community",
        json={"author_id": 1, "title_he": "א", "title_en": "A", "body_he": "ב", "body_en": "B"},
    )
    assert resp.status_code == 201
    assert resp.json()["category"] == "question"
    assert posts["inserted"][0]["category"] == "question"


def test_create_post_keeps_category_and_duplicates(posts):
    payload = {"author_id": 1, "title_en": "A", "body_en": "B", "category": "tip"}
    first = asyncio.run(service.create_post(payload))
    second = asyncio.run(service.create_post(payload))
    assert first["category"] == "tip"
    assert first["id"] != second["id"]


def test_create_post_store_failure(client, monkeypatch):
    async def broken(**_):
        raise OSError("db down")

    monkeypatch.setattr(repository, "insert_post", broken)
    resp = client.post("/api/community", json={"author_id": 1})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Could not create post"}
