"""Calculation services for health metrics."""

from .bmi_service import BMIService
from .bmr_service import BMRService
from .category_service import CategoryService, classify, list_categories
from .condition_service import (
    CONDITION_GUIDANCE,
    ConditionGuidance,
    ConditionRecommendationService,
    recommend_for_conditions,
)
from .diet_recommendation_service import DietRecommendationService
from .diet_target_service import DietTargetService, derive_targets
from .meal_plan_service import FOOD_CATALOGUE, MealPlanService, generate_meal_plan
from .metrics_service import MetricsService, compute_metrics
from .tdee_service import TDEEService
from .unit_conversion import feet_inches_to_cm, pounds_to_kg

__all__ = [
    "BMIService",
    "BMRService",
    "TDEEService",
    "CategoryService",
    "MetricsService",
    "DietTargetService",
    "ConditionRecommendationService",
    "ConditionGuidance",
    "CONDITION_GUIDANCE",
    "MealPlanService",
    "FOOD_CATALOGUE",
    "DietRecommendationService",
    "compute_metrics",
    "classify",
    "list_categories",
    "derive_targets",
    "recommend_for_conditions",
    "generate_meal_plan",
    "feet_inches_to_cm",
    "pounds_to_kg",
]
