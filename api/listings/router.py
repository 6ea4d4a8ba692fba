"""
Listing API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from . import service

router = APIRouter()


@router.get("/api/listings")
async def list_listings(lang: str = Query(default="en", max_length=8)) -> list[dict]:
    return await service.get_listings(lang)


@router.get("/api/listings/{listing_id}")
async def get_listing(listing_id: int, lang: str = Query(default="en", max_length=8)) -> dict:
    return await service.get_listing_detail(listing_id, lang)
