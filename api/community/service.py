"""
Community feed: list localized posts, create new ones.
"""

from __future__ import annotations

import logging
from typing import Any

from core import db, i18n

from . import repository

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "question"


async def list_community(lang: str = i18n.ENGLISH) -> list[dict[str, Any]]:
    async with db.store_errors("list_community", "Could not fetch community posts"):
        rows = await repository.list_posts()
    return [i18n.localize(row, lang, "title", "body") for row in rows]


async def create_post(payload: dict[str, Any]) -> dict[str, Any]:
    # Not idempotent: every call creates a new post.
    async with db.store_errors("create_post", "Could not create post"):
        row = await repository.insert_post(
            author_id=payload.get("author_id"),
            title_he=payload.get("title_he"),
            title_en=payload.get("title_en"),
            body_he=payload.get("body_he"),
            body_en=payload.get("body_en"),
            category=payload.get("category") or DEFAULT_CATEGORY,
        )
    logger.info("community_post_created post_id=%s author_id=%s", row.get("id"), row.get("author_id"))
    return row
