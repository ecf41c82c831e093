"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Optional

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.energy import BMR, TDEE


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR × PAL

    PAL Multipliers:
        - Sedentary: 1.2 (also used when the level is missing)
        - Light: 1.375
        - Moderate: 1.55
        - Active: 1.725
        - Very Active: 1.9
    """

    def calculate(self, bmr: BMR, activity_level: Optional[ActivityLevel]) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level, None for sedentary

        Returns:
            TDEE: Unrounded total daily energy expenditure in kcal/day

        Example:
            >>> TDEEService().calculate(BMR(value=1617.5), ActivityLevel.MODERATE).value
            2507.125
        """
        return TDEE(value=bmr.value * ActivityLevel.multiplier_for(activity_level))
