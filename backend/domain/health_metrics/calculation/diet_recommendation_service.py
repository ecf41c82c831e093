"""DietRecommendationService - targets, meal plan and category advice."""

from typing import Optional, Sequence

from ..core.ports.calculators import (
    IBMICalculator,
    IBMIClassifier,
    IDietTargetCalculator,
    IMealPlanGenerator,
)
from ..core.value_objects.body_measurement import BodyMeasurement
from ..core.value_objects.diet_recommendation import DietRecommendation
from ..core.value_objects.health_metrics import HealthMetrics
from .bmi_service import BMIService
from .category_service import CategoryService
from .diet_target_service import DietTargetService
from .meal_plan_service import MealPlanService


class DietRecommendationService:
    """Build a diet recommendation from computed health metrics.

    The calorie target is derived from ``metrics.daily_calories`` and
    ``metrics.category``; the meal plan splits the adjusted target; the
    category advice is looked up from the BMI recomputed from the raw
    measurements.
    """

    def __init__(
        self,
        target_service: Optional[IDietTargetCalculator] = None,
        meal_plan_service: Optional[IMealPlanGenerator] = None,
        bmi_service: Optional[IBMICalculator] = None,
        category_service: Optional[IBMIClassifier] = None,
    ) -> None:
        self._target_service = target_service or DietTargetService()
        self._meal_plan_service = meal_plan_service or MealPlanService()
        self._bmi_service = bmi_service or BMIService()
        self._category_service = category_service or CategoryService()

    def recommend(
        self,
        metrics: HealthMetrics,
        measurement: BodyMeasurement,
        restrictions: Sequence[str] = (),
    ) -> DietRecommendation:
        """Build the recommendation.

        Args:
            metrics: Output of the metrics calculation
            measurement: Measurements the metrics were computed from
            restrictions: Dietary restrictions for food filtering

        Returns:
            DietRecommendation: Target, meal plan and category advice
        """
        target = self._target_service.derive(metrics.daily_calories, metrics.category)
        meal_plan = self._meal_plan_service.generate(target.daily_calories, restrictions)

        bmi = self._bmi_service.calculate(measurement.height_cm, measurement.weight_kg)
        definition = self._category_service.classify(bmi)

        return DietRecommendation(
            target=target,
            meal_plan=meal_plan,
            recommendations=definition.recommendations,
        )
