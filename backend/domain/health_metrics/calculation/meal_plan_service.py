"""MealPlanService - daily meal split and food suggestions."""

from typing import Sequence, Tuple

from domain.shared.rounding import round_to_int

from ..core.ports.calculators import IMealPlanGenerator
from ..core.value_objects.meal_plan import FoodItem, MealPlan, MealSlot

# (name, share of daily calories, foods, timing)
MEAL_TEMPLATE: Tuple[Tuple[str, float, Tuple[str, ...], str], ...] = (
    ("Breakfast", 0.25, ("Greek Yogurt with Berries", "Almonds", "Oatmeal"), "7:00 AM"),
    (
        "Lunch",
        0.35,
        ("Grilled Chicken", "Brown Rice", "Steamed Broccoli", "Avocado"),
        "12:30 PM",
    ),
    ("Dinner", 0.30, ("Baked Salmon", "Sweet Potato", "Spinach Salad"), "7:00 PM"),
    ("Snack", 0.10, ("Mixed Nuts", "Fruit"), "3:30 PM"),
)

FOOD_CATALOGUE: Tuple[FoodItem, ...] = (
    FoodItem("Chicken Breast", 165, 31, 0, 3.6, "Protein"),
    FoodItem("Brown Rice", 111, 2.6, 23, 0.9, "Carbohydrate"),
    FoodItem("Broccoli", 34, 2.8, 7, 0.4, "Vegetable"),
    FoodItem("Avocado", 160, 2, 8.5, 14.7, "Healthy Fat"),
    FoodItem("Salmon", 208, 20, 0, 13, "Protein"),
    FoodItem("Quinoa", 120, 4.4, 22, 1.9, "Carbohydrate"),
    FoodItem("Sweet Potato", 86, 1.6, 20, 0.1, "Carbohydrate"),
    FoodItem("Greek Yogurt", 59, 10, 3.6, 0.4, "Protein"),
    FoodItem("Spinach", 23, 2.9, 3.6, 0.4, "Vegetable"),
    FoodItem("Almonds", 164, 6, 6, 14, "Healthy Fat"),
)


class MealPlanService(IMealPlanGenerator):
    """Split daily calories across four meals and list suitable foods.

    Meal shares: breakfast 25%, lunch 35%, dinner 30%, snack 10%.

    With restrictions, a catalogue food is kept only when one of the
    restrictions appears in its ``suitable_for`` tags. Without restrictions
    the whole catalogue is listed.
    """

    def generate(
        self,
        target_calories: float,
        restrictions: Sequence[str] = (),
    ) -> MealPlan:
        meals = tuple(
            MealSlot(
                name=name,
                calories=round_to_int(target_calories * share),
                foods=foods,
                timing=timing,
            )
            for name, share, foods, timing in MEAL_TEMPLATE
        )

        restrictions = tuple(restrictions)
        foods = tuple(
            food.name
            for food in FOOD_CATALOGUE
            if not restrictions
            or any(restriction in food.suitable_for for restriction in restrictions)
        )

        return MealPlan(meals=meals, foods=foods, restrictions=restrictions)


_default_service = MealPlanService()


def generate_meal_plan(
    target_calories: float, dietary_restrictions: Sequence[str] = ()
) -> MealPlan:
    """Module-level shortcut for ``MealPlanService().generate``."""
    return _default_service.generate(target_calories, dietary_restrictions)
