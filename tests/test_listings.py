import asyncio

import pytest

from core.errors import NotFoundError
from listings import repository, service
from reviews import repository as review_repository


@pytest.fixture()
def listings_store(monkeypatch, make_listing):
    state = {"rows": [], "detail": None, "reviews_calls": []}

    async def fake_list_active_listings(*, limit=repository.LISTINGS_LIMIT):
        state["limit"] = limit
        return state["rows"]

    async def fake_get_listing(listing_id):
        return state["detail"]

    async def fake_list_reviews_for_user(user_id, *, limit=None):
        state["reviews_calls"].append((user_id, limit))
        return [{"rating": 5, "reviewer_name": "Avi", "reviewer_verified": True}]

    monkeypatch.setattr(repository, "list_active_listings", fake_list_active_listings)
    monkeypatch.setattr(repository, "get_listing", fake_get_listing)
    monkeypatch.setattr(review_repository, "list_reviews_for_user", fake_list_reviews_for_user)
    return state


def test_get_listings_enriches_rows(listings_store, make_listing):
    listings_store["rows"] = [
        make_listing(id=1, price=9000),
        make_listing(id=2, price=13000),
        make_listing(id=3, price_low=None),
    ]
    rows = asyncio.run(service.get_listings("en"))

    assert listings_store["limit"] == 20
    assert [r["price_position"] for r in rows] == ["fair", "overpriced", "unknown"]
    assert rows[0]["description"] == "Well kept car"
    assert "description_he" not in rows[0]


def test_get_listings_hebrew(listings_store, make_listing):
    listings_store["rows"] = [make_listing()]
    rows = asyncio.run(service.get_listings("he"))
    assert rows[0]["description"] == "רכב שמור"


def test_detail_attaches_seller_reviews(listings_store, make_listing):
    listings_store["detail"] = make_listing(id=5, seller_id=42, status="sold")
    listing = asyncio.run(service.get_listing_detail(5, "en"))

    assert listings_store["reviews_calls"] == [(42, 10)]
    assert listing["reviews"][0]["reviewer_name"] == "Avi"
    assert listing["price_position"] == "fair"
    assert listing["status"] == "sold"


def test_detail_not_found(listings_store):
    with pytest.raises(NotFoundError):
        asyncio.run(service.get_listing_detail(404, "en"))
    assert listings_store["reviews_calls"] == []


def test_routes(client, listings_store, make_listing):
    listings_store["rows"] = [make_listing()]
    listings_store["detail"] = make_listing(seller_id=42)

    resp = client.get("/api/listings", params={"lang": "he"})
    assert resp.status_code == 200
    assert resp.json()[0]["description"] == "רכב שמור"

    resp = client.get("/api/listings/1")
    assert resp.status_code == 200
    assert resp.json()["seller_id"] == 42


def test_route_detail_404(client, listings_store):
    resp = client.get("/api/listings/123")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}


def test_route_store_unavailable(client):
    resp = client.get("/api/listings")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Could not fetch listings"}
