"""Unit tests for DietRecommendationService."""

import pytest

from domain.health_metrics.calculation.diet_recommendation_service import (
    DietRecommendationService,
)
from domain.health_metrics.calculation.metrics_service import MetricsService
from domain.health_metrics.core.value_objects import (
    BMI_CATEGORIES,
    ActivityLevel,
    BMICategory,
    BodyMeasurement,
    DietRecommendation,
    HealthMetrics,
    Sex,
)


@pytest.fixture
def service() -> DietRecommendationService:
    """Create service with default collaborators."""
    return DietRecommendationService()


@pytest.fixture
def obese_measurement() -> BodyMeasurement:
    """170 cm / 100 kg woman."""
    return BodyMeasurement(170.0, 100.0, 45, Sex.FEMALE, ActivityLevel.LIGHT)


def test_recommend_obese(service: DietRecommendationService, obese_measurement) -> None:
    """Test target, meal plan and advice for an obese profile."""
    metrics = MetricsService().compute(obese_measurement)

    result = service.recommend(metrics, obese_measurement)

    assert isinstance(result, DietRecommendation)
    assert result.target.daily_calories == metrics.daily_calories - 750
    assert result.meal_plan.meals[0].calories == round(result.target.daily_calories * 0.25)
    assert result.recommendations == BMI_CATEGORIES[3].recommendations


def test_recommend_passes_restrictions(
    service: DietRecommendationService, obese_measurement
) -> None:
    """Test restrictions reach the meal plan."""
    metrics = MetricsService().compute(obese_measurement)

    result = service.recommend(metrics, obese_measurement, ["vegan"])

    assert result.meal_plan.restrictions == ("vegan",)
    assert result.meal_plan.foods == ()


def test_recommend_advice_follows_raw_measurements(
    service: DietRecommendationService, reference_measurement
) -> None:
    """Test advice comes from the measurements, target from the metrics."""
    metrics = HealthMetrics(
        bmi=35.0,
        bmr=1600,
        daily_calories=2000,
        ideal_weight_range=(53, 72),
        category=BMICategory.OBESE,
        color_tag="text-red-600",
    )

    result = service.recommend(metrics, reference_measurement)

    assert result.target.daily_calories == 1250
    assert result.recommendations == BMI_CATEGORIES[1].recommendations


def test_to_dict_merges_target_and_plan(
    service: DietRecommendationService, reference_measurement
) -> None:
    """Test flattened response shape."""
    metrics = MetricsService().compute(reference_measurement)

    data = service.recommend(metrics, reference_measurement).to_dict()

    assert data["daily_calories"] == 2507
    assert len(data["meals"]) == 4
    assert data["recommendations"][0] == "Maintain current weight with balanced diet"
