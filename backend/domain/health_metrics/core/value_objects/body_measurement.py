"""BodyMeasurement value object - raw anthropometric input."""

from dataclasses import dataclass
from typing import Optional

from .activity_level import ActivityLevel
from .sex import Sex


@dataclass(frozen=True)
class BodyMeasurement:
    """Body measurements needed for BMI/BMR/TDEE calculations.

    The calculation services assume these values were range-checked by
    the health form (height 100-250 cm, weight 20-500 kg, age 13-120)
    and do not re-validate them.

    Attributes:
        height_cm: Height in centimeters
        weight_kg: Body weight in kilograms
        age_years: Age in years
        sex: Sex used for the BMR constant
        activity_level: Activity level, None means sedentary
    """

    height_cm: float
    weight_kg: float
    age_years: int
    sex: Sex
    activity_level: Optional[ActivityLevel] = None

    @property
    def height_m(self) -> float:
        """Height in meters."""
        return self.height_cm / 100
