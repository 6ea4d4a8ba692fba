"""
Market price position of a listing.

Labels, from cheapest to most expensive relative to the market band:
great_deal < fair < above_average < overpriced. `unknown` when the band is
missing.
"""

from __future__ import annotations

from typing import Any

GREAT_DEAL = "great_deal"
FAIR = "fair"
ABOVE_AVERAGE = "above_average"
OVERPRICED = "overpriced"
UNKNOWN = "unknown"


def price_position(price: Any, low: Any, avg: Any, high: Any) -> str:
    if not low or not avg or not high:
        return UNKNOWN
    if price < low:
        return GREAT_DEAL
    if price <= avg:
        return FAIR
    if price <= high:
        return ABOVE_AVERAGE
    return OVERPRICED


def with_price_position(row: dict[str, Any]) -> dict[str, Any]:
    return {
        **row,
        "price_position": price_position(
            row.get("price"),
            row.get("price_low"),
            row.get("price_avg"),
            row.get("price_high"),
        ),
    }
