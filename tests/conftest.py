import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Keep test runs from writing server.log and make hashing cheap.
# Must be set before anything under app/ is imported.
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("PASSWORD_HASH_TIME_COST", "1")
os.environ.setdefault("PASSWORD_HASH_MEMORY_COST", "8192")
os.environ.setdefault("PASSWORD_HASH_PARALLELISM", "1")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture
def app():
    """A fresh application, so every test starts with empty stores."""
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


HOTEL = {
    "name": "Grand",
    "price_per_night": 100,
    "rating": 4.5,
    "address": "1 Main St",
    "source": "demo",
}

RESTAURANT = {
    "name": "Spice Route",
    "rating": 4.2,
    "price_range": "$$",
    "address": "22 Market Rd",
    "source": "demo",
}

TRANSPORT = {"type": "taxi", "name": "City Cabs", "price": 25, "availability": True}

TRIP = {
    "start_date": "2025-08-12",
    "end_date": "2025-08-20",
    "destination": "Delhi",
    "budget": 2000,
    "food_choice": "Veg",
    "transport_mode": "Car",
}

USER = {"username": "asha", "email": "asha@example.com", "password": "password123"}
