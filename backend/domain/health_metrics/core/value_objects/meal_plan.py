"""Meal plan value objects - daily meal slots and suitable foods."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class FoodItem:
    """Catalogue food with nutrients per 100 g.

    Attributes:
        name: Display name
        calories: Energy in kcal
        protein: Protein in grams
        carbs: Carbohydrates in grams
        fats: Fat in grams
        category: Food group shown in the UI
        suitable_for: Diet tags the food is suitable for ("all" for any diet)
    """

    name: str
    calories: float
    protein: float
    carbs: float
    fats: float
    category: str
    suitable_for: Tuple[str, ...] = ("all",)


@dataclass(frozen=True)
class MealSlot:
    """One meal of the day.

    Attributes:
        name: Meal name (Breakfast, Lunch, ...)
        calories: Calories allotted to the meal
        foods: Suggested foods
        timing: Suggested time of day
    """

    name: str
    calories: int
    foods: Tuple[str, ...]
    timing: str


@dataclass(frozen=True)
class MealPlan:
    """Daily meal plan.

    Attributes:
        meals: Meal slots in serving order
        foods: Names of catalogue foods compatible with the restrictions
        restrictions: Dietary restrictions the plan was built for
    """

    meals: Tuple[MealSlot, ...]
    foods: Tuple[str, ...]
    restrictions: Tuple[str, ...] = ()

    def total_calories(self) -> int:
        """Sum of calories over all meal slots."""
        return sum(meal.calories for meal in self.meals)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict representation for response envelopes."""
        return {
            "meals": [
                {
                    "name": meal.name,
                    "calories": meal.calories,
                    "foods": list(meal.foods),
                    "timing": meal.timing,
                }
                for meal in self.meals
            ],
            "foods": list(self.foods),
            "restrictions": list(self.restrictions),
        }
