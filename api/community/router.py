"""
Community feed API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from . import service

router = APIRouter()


class CreatePostRequest(BaseModel):
    author_id: int | None = None
    title_he: str | None = None
    title_en: str | None = None
    body_he: str | None = None
    body_en: str | None = None
    category: str | None = Field(default=None, max_length=50)


@router.get("/api/community")
async def list_posts(lang: str = Query(default="en", max_length=8)) -> list[dict]:
    return await service.list_community(lang)


@router.post("/api/community", status_code=status.HTTP_201_CREATED)
async def create_post(request: CreatePostRequest) -> dict:
    return await service.create_post(request.model_dump())
