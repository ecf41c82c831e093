"""HealthAssessmentOrchestrator - coordinates health metric calculations."""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from domain.health_metrics.calculation.category_service import CategoryService
from domain.health_metrics.calculation.condition_service import (
    ConditionRecommendationService,
)
from domain.health_metrics.calculation.diet_recommendation_service import (
    DietRecommendationService,
)
from domain.health_metrics.calculation.metrics_service import MetricsService
from domain.health_metrics.core.value_objects.bmi_category import (
    BMICategoryDefinition,
)
from domain.health_metrics.core.value_objects.body_measurement import (
    BodyMeasurement,
)
from domain.health_metrics.core.value_objects.diet_recommendation import (
    DietRecommendation,
)
from domain.health_metrics.core.value_objects.health_metrics import HealthMetrics


@dataclass(frozen=True)
class HealthAssessment:
    """Result of a full health assessment, before storage clamping."""

    metrics: HealthMetrics
    category: BMICategoryDefinition
    diet: DietRecommendation
    medical_recommendations: Tuple[str, ...]


class HealthAssessmentOrchestrator:
    """
    Orchestrates calculation services for a health assessment.

    Flow:
    1. Compute BMI/BMR/TDEE/ideal weight and category from measurements
    2. Derive calorie and macro targets, meal plan and category advice
    3. Build guidance for the user's medical conditions (independent of 1-2)
    """

    def __init__(
        self,
        metrics_service: MetricsService,
        diet_service: DietRecommendationService,
        condition_service: ConditionRecommendationService,
        category_service: CategoryService,
    ):
        self._metrics_service = metrics_service
        self._diet_service = diet_service
        self._condition_service = condition_service
        self._category_service = category_service

    @classmethod
    def default(cls) -> "HealthAssessmentOrchestrator":
        """Create orchestrator wired with the standard services."""
        return cls(
            metrics_service=MetricsService(),
            diet_service=DietRecommendationService(),
            condition_service=ConditionRecommendationService(),
            category_service=CategoryService(),
        )

    def compute_metrics(self, measurement: BodyMeasurement) -> HealthMetrics:
        """Compute health metrics only."""
        return self._metrics_service.compute(measurement)

    def assess(
        self,
        measurement: BodyMeasurement,
        conditions: Optional[Iterable[str]] = None,
        restrictions: Sequence[str] = (),
    ) -> HealthAssessment:
        """
        Run the complete assessment.

        Args:
            measurement: Pre-validated body measurements
            conditions: Free-text medical conditions
            restrictions: Dietary restrictions

        Returns:
            HealthAssessment with unclamped targets
        """
        # Step 1: Metrics and category
        metrics = self._metrics_service.compute(measurement)
        category = self._category_service.definition_for(metrics.category)

        # Step 2: Diet targets and meal plan
        diet = self._diet_service.recommend(metrics, measurement, restrictions)

        # Step 3: Medical condition guidance
        medical = self._condition_service.recommend(conditions)

        return HealthAssessment(
            metrics=metrics,
            category=category,
            diet=diet,
            medical_recommendations=tuple(medical),
        )
