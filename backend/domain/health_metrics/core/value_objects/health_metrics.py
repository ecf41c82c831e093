"""HealthMetrics value object - output of the anthropometric calculator."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .bmi_category import BMICategory


@dataclass(frozen=True)
class HealthMetrics:
    """Derived body metrics for one set of measurements.

    Recomputed on every request and never mutated.

    Attributes:
        bmi: Body Mass Index rounded to 1 decimal
        bmr: Basal metabolic rate in kcal/day (whole number)
        daily_calories: TDEE in kcal/day (whole number)
        ideal_weight_range: (min_kg, max_kg) for BMI 18.5-24.9
        category: Weight status from the unrounded BMI
        color_tag: UI color class of the category
    """

    bmi: float
    bmr: int
    daily_calories: int
    ideal_weight_range: Tuple[int, int]
    category: BMICategory
    color_tag: str

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict representation for response envelopes."""
        return {
            "bmi": self.bmi,
            "bmr": self.bmr,
            "daily_calories": self.daily_calories,
            "ideal_weight_range": list(self.ideal_weight_range),
            "category": self.category.value,
            "color_tag": self.color_tag,
        }
