"""
Public user profile.
"""

from __future__ import annotations

from typing import Any

from core import db
from core.errors import NotFoundError
from reviews import repository as review_repository

from . import repository


async def get_user_profile(user_id: int) -> dict[str, Any]:
    async with db.store_errors("user_profile", "Could not fetch profile"):
        user = await repository.get_user_with_rating(user_id)
        if user is None:
            raise NotFoundError("User not found")
        reviews = await review_repository.list_reviews_for_user(user_id)
        listings = await repository.list_recent_listings(user_id)

    return {**user, "reviews": reviews, "listings": listings}
