"""Shared fixtures for health metrics tests."""

from typing import Any, Dict

import pytest
import structlog

from domain.health_metrics.core.value_objects import (
    ActivityLevel,
    BodyMeasurement,
    Sex,
)
from infrastructure.config import EngineSettings


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any structlog configuration made by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def reference_measurement() -> BodyMeasurement:
    """170 cm, 70 kg, 30 year old moderately active male."""
    return BodyMeasurement(
        height_cm=170.0,
        weight_kg=70.0,
        age_years=30,
        sex=Sex.MALE,
        activity_level=ActivityLevel.MODERATE,
    )


@pytest.fixture
def valid_form_data() -> Dict[str, Any]:
    """Raw health form as posted by the web client."""
    return {
        "height": "170",
        "weight": "70",
        "age": "30",
        "gender": "male",
        "activityLevel": "moderate",
        "medicalConditions": "Type 2 Diabetes, High Blood Pressure",
        "goals": "lose weight, sleep better",
    }


@pytest.fixture
def default_settings() -> EngineSettings:
    """Settings with the standard 1000 kcal floor."""
    return EngineSettings(min_daily_calories=1000)
