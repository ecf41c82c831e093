"""DietTarget value object - adjusted calories and macronutrient grams."""

from dataclasses import dataclass, replace
from typing import Any, Dict


@dataclass(frozen=True)
class DietTarget:
    """Daily calorie target with its protein/carbs/fat split in grams.

    Uses standard calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g. No bounds are enforced here; storage limits are applied
    with ``clamped``.

    Attributes:
        daily_calories: Adjusted daily calorie target
        protein_g: Protein in grams
        carbs_g: Carbohydrates in grams
        fat_g: Fat in grams
    """

    daily_calories: int
    protein_g: int
    carbs_g: int
    fat_g: int

    def total_calories(self) -> int:
        """Calculate total calories from macronutrients.

        Returns:
            int: Total calories (protein×4 + carbs×4 + fat×9)

        Example:
            >>> DietTarget(1250, 78, 141, 42).total_calories()
            1254
        """
        return (self.protein_g * 4) + (self.carbs_g * 4) + (self.fat_g * 9)

    def clamped(self, min_daily_calories: int) -> "DietTarget":
        """Apply storage floors.

        Daily calories are raised to ``min_daily_calories``; macro grams are
        raised to 0. Macros are not recomputed from the floored calories.

        Args:
            min_daily_calories: Lowest calorie target that may be stored

        Returns:
            DietTarget: New target with floors applied
        """
        return replace(
            self,
            daily_calories=max(self.daily_calories, min_daily_calories),
            protein_g=max(self.protein_g, 0),
            carbs_g=max(self.carbs_g, 0),
            fat_g=max(self.fat_g, 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict representation for response envelopes."""
        return {
            "daily_calories": self.daily_calories,
            "protein_g": self.protein_g,
            "carbs_g": self.carbs_g,
            "fat_g": self.fat_g,
        }

    def __str__(self) -> str:
        return (
            f"{self.daily_calories} kcal "
            f"({self.protein_g}P / {self.carbs_g}C / {self.fat_g}F)"
        )
