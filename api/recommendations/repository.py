"""
Recommendation candidate query (raw SQL).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from core import db

from . import persona as personas

RECOMMENDATIONS_LIMIT = 10
BUDGET_TOLERANCE = Decimal("1.15")


async def list_candidates(
    *,
    budget: float,
    persona: str,
    limit: int = RECOMMENDATIONS_LIMIT,
) -> list[dict[str, Any]]:
    """
    Active, not-stolen listings priced within budget (+15%), ranked by the
    persona's ordering. Listings without history count as not stolen.
    """
    return await db.fetch_all(
        f"""
        SELECT
          l.id, l.price, l.mileage, l.year, l.image_url,
          l.ownership_type, l.is_gov_verified, l.is_cleared_by_police,
          l.safety_grade, l.test_validity_date,
          l.description_he, l.description_en,
          cm.make, cm.model,
          os.smart_score, os.reliability_score,
          os.projected_annual_maintenance_cost,
          os.future_resale_value_24m, os.confidence_index,
          os.negotiation_strategy, os.end_of_life_warning,
          u.full_name AS seller_name, u.id_verified, u.trust_score,
          mp.price_low, mp.price_avg, mp.price_high,
          vh.previous_owners, vh.accident_count, vh.is_stolen
        FROM listings l
        JOIN car_models cm ON l.car_model_id = cm.id
        JOIN oracle_scores os ON l.id = os.listing_id
        JOIN users u ON l.seller_id = u.id
        LEFT JOIN market_prices mp
          ON mp.make = cm.make AND mp.model = cm.model AND mp.year = cm.year
        LEFT JOIN vehicle_history vh ON vh.listing_id = l.id
        WHERE l.price <= $1::numeric * $2::numeric
          AND l.status = 'active'
          AND (vh.is_stolen = false OR vh.is_stolen IS NULL)
        ORDER BY {personas.order_clause(persona)}
        LIMIT $3
        """,
        Decimal(str(budget)),
        BUDGET_TOLERANCE,
        limit,
    )
