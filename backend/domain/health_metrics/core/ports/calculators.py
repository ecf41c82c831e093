"""Calculator ports - interfaces for health metric calculations."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmi_category import BMICategory, BMICategoryDefinition
from ..value_objects.body_measurement import BodyMeasurement
from ..value_objects.diet_target import DietTarget
from ..value_objects.energy import BMR, TDEE
from ..value_objects.meal_plan import MealPlan


class IBMICalculator(ABC):
    """Port for BMI and ideal weight calculation."""

    @abstractmethod
    def calculate(self, height_cm: float, weight_kg: float) -> float:
        """Calculate unrounded BMI.

        Args:
            height_cm: Height in centimeters
            weight_kg: Weight in kilograms

        Returns:
            float: BMI in kg/m²
        """
        pass

    @abstractmethod
    def ideal_weight_range(self, height_cm: float) -> Tuple[int, int]:
        """Calculate the healthy weight range for a height.

        Args:
            height_cm: Height in centimeters

        Returns:
            Tuple[int, int]: (min_kg, max_kg)
        """
        pass


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using Mifflin-St Jeor formula.
    """

    @abstractmethod
    def calculate(self, measurement: BodyMeasurement) -> BMR:
        """Calculate BMR from body measurements.

        Args:
            measurement: Body measurements

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: Optional[ActivityLevel]) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level, None for sedentary

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass


class IBMIClassifier(ABC):
    """Port for BMI category classification."""

    @abstractmethod
    def classify(self, bmi: float) -> BMICategoryDefinition:
        """Map a BMI value to its category row.

        Args:
            bmi: Body Mass Index

        Returns:
            BMICategoryDefinition: Matching category
        """
        pass


class IDietTargetCalculator(ABC):
    """Port for calorie target and macro split derivation."""

    @abstractmethod
    def derive(
        self,
        daily_calories: float,
        category: Union[BMICategory, str, None],
    ) -> DietTarget:
        """Adjust calories for the category and split into macros.

        Args:
            daily_calories: Baseline TDEE in kcal/day
            category: BMI category driving the adjustment

        Returns:
            DietTarget: Adjusted calories and macro grams
        """
        pass


class IConditionRecommender(ABC):
    """Port for medical-condition dietary guidance."""

    @abstractmethod
    def recommend(self, conditions: Optional[Iterable[str]]) -> List[str]:
        """Build guidance lines for free-text medical conditions.

        Args:
            conditions: Condition names as entered by the user

        Returns:
            List[str]: Guidance lines in group order
        """
        pass


class IMealPlanGenerator(ABC):
    """Port for daily meal plan generation."""

    @abstractmethod
    def generate(
        self,
        target_calories: float,
        restrictions: Sequence[str] = (),
    ) -> MealPlan:
        """Split target calories into meals and pick suitable foods.

        Args:
            target_calories: Daily calorie target
            restrictions: Dietary restrictions

        Returns:
            MealPlan: Daily meal plan
        """
        pass
