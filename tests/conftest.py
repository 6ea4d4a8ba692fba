import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture()
def client():
    # No `with` block: the lifespan (and its DB pool) is never started.
    return TestClient(app)


def listing_row(**overrides):
    row = {
        "id": 1,
        "price": 9000,
        "mileage": 120000,
        "year": 2018,
        "image_url": "https://img.example/1.jpg",
        "ownership_type": "private",
        "is_gov_verified": True,
        "is_cleared_by_police": True,
        "safety_grade": 5,
        "test_validity_date": None,
        "description_he": "רכב שמור",
        "description_en": "Well kept car",
        "make": "Toyota",
        "model": "Corolla",
        "vehicle_type": "sedan",
        "smart_score": 8.1,
        "reliability_score": 9.0,
        "projected_annual_maintenance_cost": 2000,
        "future_resale_value_24m": 7000,
        "confidence_index": 0.8,
        "negotiation_strategy": "Offer 5% below ask",
        "end_of_life_warning": False,
        "seller_name": "Dana",
        "id_verified": True,
        "trust_score": 4.5,
        "price_low": 8000,
        "price_avg": 10000,
        "price_high": 12000,
        "previous_owners": 1,
        "accident_count": 0,
        "is_stolen": False,
    }
    row.update(overrides)
    return row


@pytest.fixture()
def make_listing():
    return listing_row
