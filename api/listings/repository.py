"""
Listing persistence (raw SQL).

A listing view joins:
- car_models (make/model/type)
- oracle_scores (one-to-one computed signals)
- users (seller + trust)
- market_prices (optional band, matched on make/model/year)
- vehicle_history (optional)
"""

from __future__ import annotations

from typing import Any

from core import db

LISTINGS_LIMIT = 20


async def list_active_listings(*, limit: int = LISTINGS_LIMIT) -> list[dict[str, Any]]:
    """
    Active listings ranked by smart score, with the seller's buyer-side rating.
    """
    return await db.fetch_all(
        """
        SELECT
          l.id, l.price, l.mileage, l.year, l.image_url,
          l.ownership_type, l.is_gov_verified, l.is_cleared_by_police,
          l.safety_grade, l.test_validity_date,
          l.description_he, l.description_en,
          cm.make, cm.model, cm.vehicle_type,
          os.smart_score, os.reliability_score,
          os.projected_annual_maintenance_cost,
          os.future_resale_value_24m, os.confidence_index,
          os.negotiation_strategy, os.end_of_life_warning,
          u.full_name AS seller_name, u.phone AS seller_phone,
          u.id_verified, u.trust_score, u.total_sales, u.member_since,
          u.preferred_language,
          mp.price_low, mp.price_avg, mp.price_high,
          vh.previous_owners, vh.accident_count,
          vh.is_stolen, vh.has_outstanding_finance, vh.imported,
          ROUND(AVG(r.rating), 1) AS seller_avg_rating,
          COUNT(r.id) AS seller_review_count
        FROM listings l
        JOIN car_models cm ON l.car_model_id = cm.id
        JOIN oracle_scores os ON l.id = os.listing_id
        JOIN users u ON l.seller_id = u.id
        LEFT JOIN market_prices mp
          ON mp.make = cm.make AND mp.model = cm.model AND mp.year = cm.year
        LEFT JOIN vehicle_history vh ON vh.listing_id = l.id
        LEFT JOIN reviews r ON r.reviewee_id = u.id AND r.reviewer_role = 'buyer'
        WHERE l.status = 'active'
        GROUP BY l.id, cm.id, os.id, u.id, mp.id, vh.id
        ORDER BY os.smart_score DESC
        LIMIT $1
        """,
        limit,
    )


async def get_listing(listing_id: int) -> dict[str, Any] | None:
    """
    Single listing by id, any status.
    """
    return await db.fetch_one(
        """
        SELECT
          l.id, l.price, l.mileage, l.year, l.image_url,
          l.ownership_type, l.is_gov_verified, l.is_cleared_by_police,
          l.safety_grade, l.test_validity_date,
          l.description_he, l.description_en,
          cm.make, cm.model, cm.vehicle_type,
          os.smart_score, os.reliability_score,
          os.projected_annual_maintenance_cost,
          os.future_resale_value_24m, os.confidence_index,
          os.negotiation_strategy, os.end_of_life_warning,
          u.id AS seller_id, u.full_name AS seller_name, u.phone AS seller_phone,
          u.id_verified, u.trust_score, u.total_sales, u.member_since,
          mp.price_low, mp.price_avg, mp.price_high,
          vh.previous_owners, vh.accident_count, vh.last_test_date,
          vh.test_validity_date AS hist_test_validity,
          vh.is_stolen, vh.has_outstanding_finance, vh.imported, vh.license_plate
        FROM listings l
        JOIN car_models cm ON l.car_model_id = cm.id
        JOIN oracle_scores os ON l.id = os.listing_id
        JOIN users u ON l.seller_id = u.id
        LEFT JOIN market_prices mp
          ON mp.make = cm.make AND mp.model = cm.model AND mp.year = cm.year
        LEFT JOIN vehicle_history vh ON vh.listing_id = l.id
        WHERE l.id = $1
        """,
        listing_id,
    )
