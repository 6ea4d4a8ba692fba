"""
Review persistence (raw SQL).

Inserting a review and refreshing the reviewee's trust score is one unit of
work (`insert_review_and_recompute_trust`); the rest are read queries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core import db

SELLER_REVIEWS_LIMIT = 10


@dataclass(frozen=True)
class ReviewWrite:
    listing_id: int
    reviewer_id: int
    reviewee_id: int
    reviewer_role: str
    rating: int
    comment: str | None = None
    was_honest: bool | None = None
    was_on_time: bool | None = None
    car_matched_description: bool | None = None


async def insert_review_and_recompute_trust(review: ReviewWrite) -> tuple[dict[str, Any], Any] | None:
    """
    Insert a review, then set the reviewee's trust score to the rounded mean of
    all ratings they have received. Returns (review_row, trust_score), or None
    when the reviewee does not exist (nothing is written).

    The reviewee row is locked first, so concurrent reviews for the same user
    run one after the other and each recompute sees every committed rating.
    """
    async with db.transaction() as conn:
        reviewee = await conn.fetchrow(
            """
            SELECT id
            FROM users
            WHERE id = $1
            FOR UPDATE
            """,
            review.reviewee_id,
        )
        if reviewee is None:
            return None

        row = await conn.fetchrow(
            """
            INSERT INTO reviews (
              listing_id, reviewer_id, reviewee_id, reviewer_role, rating,
              comment, was_honest, was_on_time, car_matched_description
            )
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
            RETURNING *
            """,
            review.listing_id,
            review.reviewer_id,
            review.reviewee_id,
            review.reviewer_role,
            review.rating,
            review.comment,
            review.was_honest,
            review.was_on_time,
            review.car_matched_description,
        )

        trust_score = await conn.fetchval(
            """
            UPDATE users
            SET trust_score = (
              SELECT ROUND(AVG(rating)::numeric, 1)
              FROM reviews
              WHERE reviewee_id = $1
            )
            WHERE id = $1
            RETURNING trust_score
            """,
            review.reviewee_id,
        )

    return dict(row), trust_score


async def list_reviews_for_user(user_id: int, *, limit: int | None = None) -> list[dict[str, Any]]:
    """
    Reviews where `user_id` is the reviewee, newest first.
    `limit=None` returns all of them.
    """
    return await db.fetch_all(
        """
        SELECT r.rating, r.comment, r.reviewer_role, r.was_honest,
               r.was_on_time, r.car_matched_description, r.created_at,
               u.full_name AS reviewer_name, u.id_verified AS reviewer_verified
        FROM reviews r
        JOIN users u ON r.reviewer_id = u.id
        WHERE r.reviewee_id = $1
        ORDER BY r.created_at DESC
        LIMIT $2
        """,
        user_id,
        limit,
    )
