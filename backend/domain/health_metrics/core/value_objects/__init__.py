"""Value objects for health metrics domain."""

from .activity_level import ActivityLevel
from .bmi_category import (
    BMI_CATEGORIES,
    DEFAULT_BMI_CATEGORY,
    BMICategory,
    BMICategoryDefinition,
)
from .body_measurement import BodyMeasurement
from .diet_recommendation import DietRecommendation
from .diet_target import DietTarget
from .energy import BMR, TDEE
from .health_metrics import HealthMetrics
from .meal_plan import FoodItem, MealPlan, MealSlot
from .sex import Sex

__all__ = [
    "ActivityLevel",
    "Sex",
    "BodyMeasurement",
    "BMR",
    "TDEE",
    "BMICategory",
    "BMICategoryDefinition",
    "BMI_CATEGORIES",
    "DEFAULT_BMI_CATEGORY",
    "HealthMetrics",
    "DietTarget",
    "FoodItem",
    "MealSlot",
    "MealPlan",
    "DietRecommendation",
]
