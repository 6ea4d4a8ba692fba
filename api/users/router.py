"""
User profile API endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import service

router = APIRouter()


@router.get("/api/users/{user_id}")
async def get_user(user_id: int) -> dict:
    return await service.get_user_profile(user_id)
