"""BMR and TDEE value objects - daily energy figures in kcal/day."""

from dataclasses import dataclass
from typing import Union

from domain.shared.rounding import round_to_int


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Holds the unrounded value so TDEE is computed from full precision;
    ``rounded()`` gives the figure shown to users.

    Attributes:
        value: BMR in kcal/day
    """

    value: float

    def rounded(self) -> Union[int, float]:
        """BMR rounded half up to whole kcal."""
        return round_to_int(self.value)

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR × PAL (Physical Activity Level)

    Attributes:
        value: TDEE in kcal/day
    """

    value: float

    def rounded(self) -> Union[int, float]:
        """TDEE rounded half up to whole kcal."""
        return round_to_int(self.value)

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
