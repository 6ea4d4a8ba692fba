"""
Listing read flows: query, localize, attach price position.
"""

from __future__ import annotations

from typing import Any

from core import db, i18n
from core.errors import NotFoundError
from reviews import repository as review_repository

from . import repository
from .pricing import with_price_position


def to_listing_view(row: dict[str, Any], lang: str) -> dict[str, Any]:
    return with_price_position(i18n.localize(row, lang, "description"))


async def get_listings(lang: str = i18n.ENGLISH) -> list[dict[str, Any]]:
    async with db.store_errors("list_listings", "Could not fetch listings"):
        rows = await repository.list_active_listings()
    return [to_listing_view(row, lang) for row in rows]


async def get_listing_detail(listing_id: int, lang: str = i18n.ENGLISH) -> dict[str, Any]:
    """
    Listing detail with the seller's latest reviews (from buyers and sellers).

    Unlike the list, this does not filter on status: sold or paused listings
    stay reachable by id.
    """
    async with db.store_errors("listing_detail", "Could not fetch listing"):
        row = await repository.get_listing(listing_id)
        if row is None:
            raise NotFoundError("Not found")
        reviews = await review_repository.list_reviews_for_user(
            int(row["seller_id"]),
            limit=review_repository.SELLER_REVIEWS_LIMIT,
        )

    listing = to_listing_view(row, lang)
    listing["reviews"] = reviews
    return listing
