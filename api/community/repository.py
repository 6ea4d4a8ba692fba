"""
Community feed persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

FEED_LIMIT = 30


async def list_posts(*, limit: int = FEED_LIMIT) -> list[dict[str, Any]]:
    """
    Pinned posts first, then most upvoted, then newest.
    """
    return await db.fetch_all(
        """
        SELECT
          cp.id, cp.category, cp.upvotes, cp.is_pinned, cp.created_at,
          cp.title_he, cp.title_en, cp.body_he, cp.body_en,
          u.full_name AS author_name, u.id_verified AS author_verified,
          u.trust_score AS author_trust,
          COUNT(cr.id) AS reply_count
        FROM community_posts cp
        JOIN users u ON cp.author_id = u.id
        LEFT JOIN community_replies cr ON cr.post_id = cp.id
        GROUP BY cp.id, u.id
        ORDER BY cp.is_pinned DESC, cp.upvotes DESC, cp.created_at DESC
        LIMIT $1
        """,
        limit,
    )


async def insert_post(
    *,
    author_id: int | None,
    title_he: str | None,
    title_en: str | None,
    body_he: str | None,
    body_en: str | None,
    category: str,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO community_posts (author_id, title_he, title_en, body_he, body_en, category)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING *
        """,
        author_id,
        title_he,
        title_en,
        body_he,
        body_en,
        category,
    )
    if row is None:
        raise RuntimeError("Failed to insert community post.")
    return row
