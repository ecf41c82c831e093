"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from typing import Optional, Union


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    Represents user's typical activity level to multiply BMR:
    - SEDENTARY: Little or no exercise (office job)
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - ACTIVE: Hard exercise 6-7 days/week
    - VERY_ACTIVE: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    def pal_multiplier(self) -> float:
        """Get PAL (Physical Activity Level) multiplier.

        Returns:
            float: Multiplier for BMR to calculate TDEE

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHT: 1.375,
            ActivityLevel.MODERATE: 1.55,
            ActivityLevel.ACTIVE: 1.725,
            ActivityLevel.VERY_ACTIVE: 1.9,
        }
        return multipliers[self]

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Activity level description
        """
        descriptions = {
            ActivityLevel.SEDENTARY: "Little or no exercise",
            ActivityLevel.LIGHT: "Light exercise 1-3 days/week",
            ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week",
            ActivityLevel.ACTIVE: "Hard exercise 6-7 days/week",
            ActivityLevel.VERY_ACTIVE: "Very hard exercise + physical job",
        }
        return descriptions[self]

    @classmethod
    def parse(
        cls, value: Optional[Union["ActivityLevel", str]]
    ) -> Optional["ActivityLevel"]:
        """Parse a raw activity level.

        Missing or unrecognised values return None, which the TDEE
        calculation treats as sedentary. Matching is exact, so
        "MODERATE" is unrecognised.

        Args:
            value: Enum member, raw string or None

        Returns:
            Optional[ActivityLevel]: Parsed level, None when unknown

        Example:
            >>> ActivityLevel.parse("very_active")
            <ActivityLevel.VERY_ACTIVE: 'very_active'>
            >>> ActivityLevel.parse("couch") is None
            True
        """
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            return None

    @staticmethod
    def multiplier_for(level: Optional["ActivityLevel"]) -> float:
        """Get PAL multiplier, defaulting to sedentary (1.2) when missing.

        Args:
            level: Activity level or None

        Returns:
            float: PAL multiplier
        """
        if level is None:
            return ActivityLevel.SEDENTARY.pal_multiplier()
        return level.pal_multiplier()
