"""
Review API endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from . import service

router = APIRouter()


class ReviewRequest(BaseModel):
    # Required fields are checked by the service (missing and falsy both 400).
    listing_id: int | None = None
    reviewer_id: int | None = None
    reviewee_id: int | None = None
    reviewer_role: str | None = Field(default=None, max_length=16)
    rating: int | None = None
    comment: str | None = None
    was_honest: bool | None = None
    was_on_time: bool | None = None
    car_matched_description: bool | None = None


@router.post("/api/reviews", status_code=status.HTTP_201_CREATED)
async def create_review(request: ReviewRequest) -> dict:
    return await service.submit_review(request.model_dump())
