"""BMIService - Body Mass Index and ideal weight calculation."""

from typing import Tuple

from domain.shared.rounding import round_to_int

from ..core.ports.calculators import IBMICalculator

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9


class BMIService(IBMICalculator):
    """Calculate BMI and the healthy weight range for a height.

    Formula:
        BMI = weight(kg) / height(m)²
        Ideal weight = [18.5 × height(m)², 24.9 × height(m)²]
    """

    def calculate(self, height_cm: float, weight_kg: float) -> float:
        """Calculate unrounded BMI.

        Args:
            height_cm: Height in centimeters
            weight_kg: Weight in kilograms

        Returns:
            float: BMI in kg/m²

        Example:
            >>> round(BMIService().calculate(170.0, 70.0), 2)
            24.22
        """
        height_m = height_cm / 100
        return weight_kg / (height_m * height_m)

    def ideal_weight_range(self, height_cm: float) -> Tuple[int, int]:
        """Calculate the weight range matching a healthy BMI.

        Args:
            height_cm: Height in centimeters

        Returns:
            Tuple[int, int]: (min_kg, max_kg), each rounded half up

        Example:
            >>> BMIService().ideal_weight_range(170.0)
            (53, 72)
        """
        height_m = height_cm / 100
        min_weight = HEALTHY_BMI_MIN * height_m * height_m
        max_weight = HEALTHY_BMI_MAX * height_m * height_m
        return (round_to_int(min_weight), round_to_int(max_weight))
