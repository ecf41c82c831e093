"""BMI category value objects and the static category table."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class BMICategory(str, Enum):
    """Weight status derived from BMI.

    Each category carries the daily calorie adjustment applied on top of
    TDEE when deriving diet targets:
    - UNDERWEIGHT: +500 kcal/day surplus for weight gain
    - NORMAL: no adjustment
    - OVERWEIGHT: -500 kcal/day deficit
    - OBESE: -750 kcal/day deficit
    """

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"

    def calorie_adjustment(self) -> int:
        """Get the kcal/day offset applied to TDEE.

        Returns:
            int: Calorie surplus (positive) or deficit (negative)

        Example:
            >>> BMICategory.OBESE.calorie_adjustment()
            -750
        """
        adjustments = {
            BMICategory.UNDERWEIGHT: +500,
            BMICategory.NORMAL: 0,
            BMICategory.OVERWEIGHT: -500,
            BMICategory.OBESE: -750,
        }
        return adjustments[self]

    @classmethod
    def parse(
        cls, value: Optional[Union["BMICategory", str]]
    ) -> Optional["BMICategory"]:
        """Parse a stored category name.

        Returns None for names outside the table; callers treat those as
        "no adjustment".
        """
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            return None


@dataclass(frozen=True)
class BMICategoryDefinition:
    """One row of the BMI category table.

    Attributes:
        category: Weight status
        lower_bound: Inclusive lower BMI bound
        upper_bound: Exclusive upper BMI bound
        color_tag: UI color class shown next to the category
        description: Short human-readable description
        recommendations: Ordered general advice for the category
    """

    category: BMICategory
    lower_bound: float
    upper_bound: float
    color_tag: str
    description: str
    recommendations: Tuple[str, ...]

    def contains(self, bmi: float) -> bool:
        """Check whether ``bmi`` falls in ``[lower_bound, upper_bound)``."""
        return self.lower_bound <= bmi < self.upper_bound

    @property
    def range(self) -> Tuple[float, float]:
        """BMI range as ``(lower, upper)``."""
        return (self.lower_bound, self.upper_bound)


# Bounds are kept exactly as published to users: there are gaps at
# [24.9, 25) and [29.9, 30), which classify through the Normal fallback.
BMI_CATEGORIES: Tuple[BMICategoryDefinition, ...] = (
    BMICategoryDefinition(
        category=BMICategory.UNDERWEIGHT,
        lower_bound=0.0,
        upper_bound=18.5,
        color_tag="text-blue-600",
        description="Below normal weight",
        recommendations=(
            "Increase calorie intake with healthy fats and proteins",
            "Eat frequent, nutrient-dense meals",
            "Include strength training exercises",
            "Consult a nutritionist for weight gain plan",
        ),
    ),
    BMICategoryDefinition(
        category=BMICategory.NORMAL,
        lower_bound=18.5,
        upper_bound=24.9,
        color_tag="text-green-600",
        description="Normal weight",
        recommendations=(
            "Maintain current weight with balanced diet",
            "Continue regular physical activity",
            "Focus on nutrient-dense whole foods",
            "Regular health checkups",
        ),
    ),
    BMICategoryDefinition(
        category=BMICategory.OVERWEIGHT,
        lower_bound=25.0,
        upper_bound=29.9,
        color_tag="text-yellow-600",
        description="Above normal weight",
        recommendations=(
            "Create moderate calorie deficit",
            "Increase physical activity",
            "Focus on portion control",
            "Emphasize fruits, vegetables, and lean proteins",
        ),
    ),
    BMICategoryDefinition(
        category=BMICategory.OBESE,
        lower_bound=30.0,
        upper_bound=math.inf,
        color_tag="text-red-600",
        description="Significantly above normal weight",
        recommendations=(
            "Consult healthcare provider before starting diet",
            "Create structured calorie deficit plan",
            "Combine diet with regular exercise",
            "Consider professional nutrition counseling",
        ),
    ),
)

DEFAULT_BMI_CATEGORY: BMICategoryDefinition = BMI_CATEGORIES[1]
