"""
Recommendation (quiz) API endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from . import service

router = APIRouter()


class QuizRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Presence is checked by the service so that falsy answers (0, "") get
    # the same 400 as missing ones.
    budget: float | None = None
    driving_style: str | None = Field(default=None, alias="drivingStyle")
    experience_level: str | None = Field(default=None, alias="experienceLevel")
    lang: str = Field(default="en", max_length=8)


@router.post("/api/recommendations")
async def recommendations(request: QuizRequest) -> list[dict]:
    return await service.recommend(
        request.budget,
        request.driving_style,
        request.experience_level,
        request.lang,
    )
