"""
Shared fixtures: a seeded generator pinned to a fixed date, and an app client around it.
"""

import random
from datetime import date

import pytest
from fastapi.testclient import TestClient

from core.forecast_service import WeatherForecastService
from main import create_app

FIXED_TODAY = date(2024, 2, 27)


@pytest.fixture
def fixed_today():
    return FIXED_TODAY


@pytest.fixture
def forecast_service():
    return WeatherForecastService(rng=random.Random(1234), today=lambda: FIXED_TODAY)


@pytest.fixture
def client(forecast_service):
    with TestClient(create_app(forecast_service)) as test_client:
        yield test_client
