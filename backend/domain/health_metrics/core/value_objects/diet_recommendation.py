"""DietRecommendation value object - targets, meal plan and advice."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .diet_target import DietTarget
from .meal_plan import MealPlan


@dataclass(frozen=True)
class DietRecommendation:
    """Complete diet recommendation for one assessment.

    Attributes:
        target: Adjusted calories and macro grams
        meal_plan: Meals built from the target calories
        recommendations: General advice for the BMI category
    """

    target: DietTarget
    meal_plan: MealPlan
    recommendations: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict representation for response envelopes."""
        return {
            **self.target.to_dict(),
            **self.meal_plan.to_dict(),
            "recommendations": list(self.recommendations),
        }
