"""DietTargetService - calorie target and macronutrient split."""

from typing import Union

from domain.shared.rounding import round_to_int

from ..core.ports.calculators import IDietTargetCalculator
from ..core.value_objects.bmi_category import BMICategory
from ..core.value_objects.diet_target import DietTarget

PROTEIN_SHARE = 0.25
CARBS_SHARE = 0.45
FAT_SHARE = 0.30

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


class DietTargetService(IDietTargetCalculator):
    """Derive daily calorie and macro targets from TDEE and BMI category.

    Calorie adjustment:
        - Underweight: +500 kcal
        - Overweight: -500 kcal
        - Obese: -750 kcal
        - Normal or unknown category: unchanged

    Macro split of the adjusted calories (Atwater factors):
        - Protein: 25% / 4 kcal/g
        - Carbs: 45% / 4 kcal/g
        - Fat: 30% / 9 kcal/g

    No floors are applied here; negative figures pass through.
    """

    def derive(
        self,
        daily_calories: float,
        category: Union[BMICategory, str, None],
    ) -> DietTarget:
        """Adjust calories for the category and split into macros.

        Args:
            daily_calories: Baseline TDEE in kcal/day
            category: BMI category (enum or stored name)

        Returns:
            DietTarget: Adjusted calories and macro grams

        Example:
            >>> DietTargetService().derive(2000, BMICategory.OBESE)
            DietTarget(daily_calories=1250, protein_g=78, carbs_g=141, fat_g=42)
        """
        parsed = BMICategory.parse(category)
        adjustment = parsed.calorie_adjustment() if parsed is not None else 0
        adjusted = daily_calories + adjustment

        return DietTarget(
            daily_calories=round_to_int(adjusted),
            protein_g=round_to_int(adjusted * PROTEIN_SHARE / KCAL_PER_G_PROTEIN),
            carbs_g=round_to_int(adjusted * CARBS_SHARE / KCAL_PER_G_CARBS),
            fat_g=round_to_int(adjusted * FAT_SHARE / KCAL_PER_G_FAT),
        )


_default_service = DietTargetService()


def derive_targets(
    daily_calories: float, category: Union[BMICategory, str, None]
) -> DietTarget:
    """Module-level shortcut for ``DietTargetService().derive``."""
    return _default_service.derive(daily_calories, category)
