"""
Quiz-driven recommendations.

Flow:
- validate quiz answers
- derive persona from driving style
- fetch candidates ranked by that persona
- annotate each candidate (response only; nothing is written back)
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from core import db, i18n
from core.errors import ValidationError

from . import persona as personas
from . import repository

logger = logging.getLogger(__name__)


async def recommend(
    budget: float | None,
    driving_style: str | None,
    experience_level: str | None,
    lang: str = i18n.ENGLISH,
    *,
    current_year: int | None = None,
) -> list[dict[str, Any]]:
    if not budget or not driving_style or not experience_level:
        raise ValidationError("Missing required fields")
    if budget < 0:
        raise ValidationError("budget must be a positive number")

    persona = personas.persona_for(driving_style)
    year = current_year if current_year is not None else date.today().year

    async with db.store_errors("recommendations", "Could not fetch recommendations"):
        rows = await repository.list_candidates(budget=budget, persona=persona)

    logger.info("recommendations persona=%s budget=%s candidates=%s", persona, budget, len(rows))
    return [
        personas.annotate(
            i18n.localize(row, lang, "description"),
            persona=persona,
            experience_level=experience_level,
            current_year=year,
        )
        for row in rows
    ]
