"""
Two-way (buyer/seller) review submission.
"""

from __future__ import annotations

import logging
from typing import Any

from core import db
from core.errors import ValidationError

from . import repository

logger = logging.getLogger(__name__)

REVIEWER_ROLES = ("buyer", "seller")
REQUIRED_FIELDS = ("listing_id", "reviewer_id", "reviewee_id", "reviewer_role", "rating")


def validate_review(payload: dict[str, Any]) -> repository.ReviewWrite:
    if any(not payload.get(name) for name in REQUIRED_FIELDS):
        raise ValidationError("Missing required fields")
    if payload["reviewer_role"] not in REVIEWER_ROLES:
        raise ValidationError("reviewer_role must be buyer or seller")

    return repository.ReviewWrite(
        listing_id=payload["listing_id"],
        reviewer_id=payload["reviewer_id"],
        reviewee_id=payload["reviewee_id"],
        reviewer_role=payload["reviewer_role"],
        rating=payload["rating"],
        comment=payload.get("comment"),
        was_honest=payload.get("was_honest"),
        was_on_time=payload.get("was_on_time"),
        car_matched_description=payload.get("car_matched_description"),
    )


async def submit_review(payload: dict[str, Any]) -> dict[str, Any]:
    review = validate_review(payload)

    async with db.store_errors("submit_review", "Could not submit review"):
        result = await repository.insert_review_and_recompute_trust(review)

    if result is None:
        raise ValidationError("reviewee_id does not match a user")

    row, trust_score = result
    logger.info(
        "review_created review_id=%s reviewee_id=%s trust_score=%s",
        row.get("id"),
        review.reviewee_id,
        trust_score,
    )
    return row
