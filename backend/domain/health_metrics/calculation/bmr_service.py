"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.body_measurement import BodyMeasurement
from ..core.value_objects.energy import BMR


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Male:         BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Female/other: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, measurement: BodyMeasurement) -> BMR:
        """Calculate BMR from body measurements.

        Args:
            measurement: Body measurements (weight, height, age, sex)

        Returns:
            BMR: Unrounded basal metabolic rate in kcal/day

        Example:
            >>> service = BMRService()
            >>> data = BodyMeasurement(
            ...     height_cm=170.0,
            ...     weight_kg=70.0,
            ...     age_years=30,
            ...     sex=Sex.MALE,
            ... )
            >>> service.calculate(data).value
            1617.5
        """
        base = (
            10 * measurement.weight_kg
            + 6.25 * measurement.height_cm
            - 5 * measurement.age_years
        )
        return BMR(value=base + measurement.sex.bmr_constant())
