"""
User profile persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

RECENT_LISTINGS_LIMIT = 5


async def get_user_with_rating(user_id: int) -> dict[str, Any] | None:
    """
    Public user fields plus average rating / count over reviews they received
    (as buyer or seller).
    """
    return await db.fetch_one(
        """
        SELECT
          u.id, u.full_name, u.avatar_url, u.id_verified, u.id_verified_at,
          u.trust_score, u.total_sales, u.total_purchases, u.member_since,
          u.preferred_language,
          ROUND(AVG(r.rating), 1) AS avg_rating,
          COUNT(r.id) AS review_count
        FROM users u
        LEFT JOIN reviews r ON r.reviewee_id = u.id
        WHERE u.id = $1
        GROUP BY u.id
        """,
        user_id,
    )


async def list_recent_listings(seller_id: int, *, limit: int = RECENT_LISTINGS_LIMIT) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT l.id, l.price, l.year, l.image_url, cm.make, cm.model, l.status
        FROM listings l
        JOIN car_models cm ON l.car_model_id = cm.id
        WHERE l.seller_id = $1
        ORDER BY l.created_at DESC
        LIMIT $2
        """,
        seller_id,
        limit,
    )
